"""Network interfaces and the network an interface is associated with."""

from __future__ import annotations

import socket
from dataclasses import dataclass


@dataclass(frozen=True)
class AssociatedNetwork:
    """Network an interface is joined to."""

    ssid: str = ""
    bssid: str = ""
    channel: int = 0  # optional


def interface_by_name(name: str) -> int:
    """Return the index of the interface called ``name``.

    Raises LookupError when there is no such interface.
    """
    for index, if_name in socket.if_nameindex():
        if if_name == name:
            return index
    raise LookupError(f"no interface '{name}' found")