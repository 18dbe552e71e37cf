"""Messages widgets exchange about the Wi-Fi table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from wfmon.color import HexColor
from wfmon.netdata import Key, Network


@dataclass(frozen=True)
class _NetworkKeyEvent:
    key: Key = field(default_factory=Key)
    color: HexColor = field(default_factory=HexColor)


@dataclass(frozen=True)
class NetworkKeyMsg(_NetworkKeyEvent):
    """The highlighted network, sent on refresh and sorting."""


@dataclass(frozen=True)
class SelectedNetworkKeyMsg(_NetworkKeyEvent):
    """The highlighted network, sent when the cursor moves."""


@dataclass(frozen=True)
class ToggledNetworkKeyMsg(_NetworkKeyEvent):
    """The network whose row was toggled."""


@dataclass(frozen=True)
class SignalFieldMsg:
    """The signal measurement chosen in the table and its value range."""

    key: str = ""
    min_val: float = 0.0
    max_val: float = 0.0


@dataclass(frozen=True)
class TableWidthMsg:
    """The table's current width; other widgets align to it."""

    width: int = 0


@dataclass(frozen=True)
class NetworksOnScreen:
    """Networks on the current table page with their row colours."""

    networks: List[Network] = field(default_factory=list)
    colors: List[HexColor] = field(default_factory=list)