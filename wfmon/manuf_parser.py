"""Parser for the Wireshark-style ``manuf`` vendor database."""

from __future__ import annotations

import logging
import os
import re
from typing import Dict, Optional, Tuple, Union

from wfmon.mac import HardwareAddr

_log = logging.getLogger(__name__)

_LINE = re.compile(
    r"((?:[A-Fa-f0-9]{2}[.:\-]){2,5}[A-Fa-f0-9]{2})(/[0-9]{2})?"
    r"(?:\t(.*)\t(.*)\t#.*|\t(.*)\t#.*|\t(.*)\t(.*)|\t(.*))"
)


class ManufParseError(ValueError):
    """A line of the vendor database could not be parsed."""


def parse_line(line: str) -> Optional[Tuple[str, str, str]]:
    """Parse one database line into ``(key, short name, long name)``.

    Returns None for blank lines and comments; raises ManufParseError for
    lines that do not follow the format.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    line = line.replace("`", "'")
    match = _LINE.fullmatch(line)
    if match is None:
        raise ManufParseError(f"failed to parse {line}")

    groups = [group or "" for group in match.groups()]
    mac, mask = groups[0], groups[1]
    short = groups[2] or groups[4] or groups[5] or groups[7]
    long_name = groups[3] or groups[6]

    _log.debug("MAC: %s Mask: %s Short: %s Long: %s", mac, mask, short, long_name)

    key = HardwareAddr().with_addr(mac).with_prefix(mask).wildcard_key()
    return key, short, long_name


def parse_manuf(path: Union[str, "os.PathLike[str]"]) -> Dict[str, Tuple[str, str]]:
    """Read a vendor database file into a map of key to (short, long) names."""
    vendors: Dict[str, Tuple[str, str]] = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            parsed = parse_line(line)
            if parsed is not None:
                key, short, long_name = parsed
                vendors[key] = (short, long_name)
    return vendors