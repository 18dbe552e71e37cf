"""Radio control through the macOS ``airport`` and ``system_profiler`` tools."""

from __future__ import annotations

import json
import re
import subprocess
from typing import Any, List, Union

from wfmon.network import AssociatedNetwork

AIRPORT_PATH = (
    "/System/Library/PrivateFrameworks/Apple80211.framework/"
    "Versions/Current/Resources/airport"
)

_CHANNEL_FREQUENCY = re.compile(r"(\d{1,3})\s\([2,5]GHz\)", re.ASCII)
_BSSID = re.compile(r"BSSID:\s((?:[A-Fa-f0-9]{2}[.:\-]){5}[A-Fa-f0-9]{2})", re.ASCII)
_SSID = re.compile(r"\s+SSID:\s(.*)")
_CHANNEL = re.compile(r"\s+channel:\s(\d{1,3})", re.ASCII)


class AirportError(RuntimeError):
    """A radio tool failed or its output could not be understood."""


def _run(*args: str) -> str:
    try:
        completed = subprocess.run(list(args), check=True, capture_output=True, text=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise AirportError(f"{args[0]} failed: {exc}") from exc
    return completed.stdout


def _find_interface(profile: Union[str, bytes], iface_name: str) -> dict:
    try:
        data: Any = json.loads(profile)
    except ValueError as exc:
        raise AirportError(f"failed to unmarshal system_profiler output: {exc}") from exc
    if not isinstance(data, dict):
        raise AirportError("failed to unmarshal system_profiler output: not an object")

    data_types = data.get("SPAirPortDataType")
    if not isinstance(data_types, list) or not data_types:
        raise AirportError("no SPAirPortDataType in system_profiler output")

    first = data_types[0] if isinstance(data_types[0], dict) else {}
    interfaces = first.get("spairport_airport_interfaces") or []
    for iface in interfaces:
        if isinstance(iface, dict) and iface.get("_name") == iface_name:
            return iface

    raise AirportError(
        f"no spairport_airport_interfaces found in system_profiler output by '{iface_name}'"
    )


def parse_supported_channels(profile: Union[str, bytes], iface_name: str) -> List[int]:
    """Return the channels ``iface_name`` supports, from system_profiler JSON."""
    iface = _find_interface(profile, iface_name)
    supported = iface.get("spairport_supported_channels") or []
    if not supported:
        raise AirportError(f"no channels supported by {iface_name}")

    channels = []
    for entry in supported:
        match = _CHANNEL_FREQUENCY.fullmatch(str(entry))
        if match is None:
            raise AirportError(
                f"failed to parse frequency '{entry}', "
                f"expected pattern'{_CHANNEL_FREQUENCY.pattern}'"
            )
        channels.append(int(match.group(1)))
    return channels


def parse_associated_network(output: str) -> AssociatedNetwork:
    """Return the associated network described by ``airport -I`` output."""
    bssid = _BSSID.search(output)
    if bssid is None:
        raise AirportError(
            f"failed to parse BSSID '{output}', expected pattern '{_BSSID.pattern}'"
        )
    ssid = _SSID.search(output)
    if ssid is None:
        raise AirportError(f"failed to parse SSID '{output}', expected pattern '{_SSID.pattern}'")
    channel = _CHANNEL.search(output)
    if channel is None:
        raise AirportError(
            f"failed to parse channel '{output}', expected pattern '{_CHANNEL.pattern}'"
        )
    return AssociatedNetwork(
        ssid=ssid.group(1),
        bssid=bssid.group(1),
        channel=int(channel.group(1)) & 0xFF,
    )


def disassociate_from_network(iface_name: str) -> None:
    """Disconnect the interface from its network; needed before monitor mode."""
    _run(AIRPORT_PATH, iface_name, "-z")


def get_supported_channels(iface_name: str) -> List[int]:
    """Return the channels the interface supports."""
    return parse_supported_channels(_run("system_profiler", "SPAirPortDataType", "-json"), iface_name)


def get_associated_network(iface_name: str) -> AssociatedNetwork:
    """Return the network the Wi-Fi interface is currently joined to."""
    return parse_associated_network(_run(AIRPORT_PATH, "-I"))


def set_interface_channel(iface_name: str, channel: int) -> None:
    """Tune the interface to ``channel``."""
    _run(AIRPORT_PATH, iface_name, f"-c{channel}")