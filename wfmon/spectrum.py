"""Spectrum chart: networks on screen drawn as waves over their band's channels."""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, Dict, List, NamedTuple, Optional, Protocol, Tuple

from wfmon.buffer import Buffer
from wfmon.color import black
from wfmon.datasource import EmptyProvider
from wfmon.events import (
    NetworkKeyMsg,
    NetworksOnScreen,
    SelectedNetworkKeyMsg,
    SignalFieldMsg,
    TableWidthMsg,
    ToggledNetworkKeyMsg,
)
from wfmon.netdata import Key
from wfmon.timeseries import TimeSeries
from wfmon.waves import HALF_OF_WAVE_20MHZ_WIDTH, WAVE_20MHZ_WIDTH, Wave, waves_from_screen
from wfmon.wifi import Band, get_band_by_chan

DEFAULT_HEIGHT = 10
DEFAULT_WIDTH = 95

_log = logging.getLogger("wfmon")

_ANSI = re.compile(r"\x1b\[[0-9;]*m")

_ISM = get_band_by_chan(1)
_UNII1 = get_band_by_chan(36)
_UNII2A = get_band_by_chan(52)
_UNII2B = Band(int(_UNII2A) + 1)
_UNII2C = get_band_by_chan(100)
_UNII3 = get_band_by_chan(149)
_MIN_BAND = _ISM
_MAX_BAND = _UNII3

_BAND_NAMES: Dict[Band, str] = {
    _ISM: "ISM",
    _UNII1: "U-NII-1",
    _UNII2A: "U-NII-2A",
    _UNII2B: "U-NII-2B",
    _UNII2C: "U-NII-2C",
    _UNII3: "U-NII-3",
}

# Zero point X offset and width of one channel step, in characters.
_BAND_PARAMS: Dict[Band, Tuple[int, int]] = {
    _ISM: (4, 4),
    _UNII1: (-99, 3),
    _UNII2A: (-141, 3),
    _UNII2C: (-88, 1),
    _UNII3: (-137, 1),
}

_AXIS_X: Dict[Band, str] = {
    _ISM: (
        "────┰───┰───┰───┰───┰───┰───┰───┰───┰───┰───┰───┰───┰───┰────────┰────┤\n"
        "        1   2   3   4   5   6   7   8   9  10  11  12  13       14"
    ),
    _UNII1: (
        "───┰─────┰─────┰─────┰─────┰─────┰─────┰─────┰─────┰─────┤\n"
        "        36    38    40    42    44    46    48    50"
    ),
    _UNII2A: (
        "───┰─────┰─────┰─────┰─────┰─────┰─────┰─────┰─────┰─────┤\n"
        "        50    52    54    56    58    60    62    64"
    ),
    _UNII2C: (
        "────┰───────┰───────┰───────┰───────┰───────┰───────┰───────┤\n"
        "           100     108     116     124     132     140"
    ),
    _UNII3: (
        "────┰───────┰───────┰───────┰───────┰───────┤\n"
        "           149     157     165     173"
    ),
}

# Borders as (top-left, top, top-right, left, right).
_ROUNDED = ("╭", "─", "╮", "│", "│")
_PRIMARY_ABOVE = ("▗", "▄", "▄", "▐", "█")
_PRIMARY_BELOW = ("▄", "▄", "▖", "█", "▌")
_PRIMARY_ALONE = ("▗", "▄", "▖", "▐", "▌")
_SECONDARY = ("▗", "▗", "▖", "▐", "▌")


class _SeriesProvider(Protocol):
    def time_series(self, net_key: Key) -> Callable[[str], TimeSeries]: ...


class _Rect(NamedTuple):
    x0: int
    y0: int
    x1: int
    y1: int

    @classmethod
    def of(cls, x0: int, y0: int, x1: int, y1: int) -> "_Rect":
        return cls(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    def empty(self) -> bool:
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def union(self, other: "_Rect") -> "_Rect":
        if self.empty():
            return other
        if other.empty():
            return self
        return _Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )


class _Layout(NamedTuple):
    primary: _Rect
    full: _Rect
    centers: List[_Rect]


def _visible_len(line: str) -> int:
    return len(_ANSI.sub("", line))


def _pad(line: str, width: int) -> str:
    return line + " " * max(width - _visible_len(line), 0)


def _join_vertical(blocks: List[str]) -> List[str]:
    lines = [line for block in blocks for line in block.split("\n")]
    width = max((_visible_len(line) for line in lines), default=0)
    return [_pad(line, width) for line in lines]


def _join_horizontal(left: List[str], right: List[str]) -> str:
    height = max(len(left), len(right))
    lw = max((_visible_len(line) for line in left), default=0)
    rw = max((_visible_len(line) for line in right), default=0)
    left = left + [""] * (height - len(left))
    right = right + [""] * (height - len(right))
    return "\n".join(_pad(a, lw) + _pad(b, rw) for a, b in zip(left, right))


def _put(buf: Buffer, x: int, y: int, char: str, color: str) -> None:
    if 0 <= x < buf.width and 0 <= y < buf.height:
        buf.set_cell(x, y, char, color or None)


def _render(buf: Buffer, wave: Wave, r: _Rect, border: Tuple[str, ...], fill: str = "") -> None:
    top_left, top, top_right, left, right = border
    _put(buf, r.x0, r.y1, top_left, wave.color)
    for x in range(r.x0 + 1, r.x1):
        _put(buf, x, r.y1, top, wave.color)
    _put(buf, r.x1, r.y1, top_right, wave.color)
    for y in range(r.y0, r.y1):
        _put(buf, r.x0, y, left, wave.color)
        if fill:
            for x in range(r.x0 + 1, r.x1):
                _put(buf, x, y, fill, wave.color)
        _put(buf, r.x1, y, right, wave.color)


def _layout(wave: Wave, x0: int, view_height: int, step: int, y_max: float) -> _Layout:
    full_width = wave.width * WAVE_20MHZ_WIDTH * step
    h = 0 if y_max == 0 else math.floor(wave.value * view_height / y_max)
    if math.copysign(1.0, y_max) < 0:
        h = max(0, view_height - h)

    left = x0 + (wave.lower_channel() - HALF_OF_WAVE_20MHZ_WIDTH) * step
    left_primary = x0 + (wave.channel - HALF_OF_WAVE_20MHZ_WIDTH) * step
    primary = _Rect.of(left_primary, 0, left_primary + WAVE_20MHZ_WIDTH * step, h)
    full = _Rect.of(left, 0, left + full_width, h)
    centers = []
    for center in wave.center:
        if center > 0:
            x = x0 + center * step
            centers.append(_Rect.of(x, 0, x + 1, h))
    return _Layout(primary, full, centers)


class Spectrum:
    """Draws the waves of one band; the selected network is solid, others outlined."""

    def __init__(
        self,
        *,
        data_source: Optional[_SeriesProvider] = None,
        selected: Optional[Key] = None,
        focused: bool = True,
        field_key: str = "",
        min_val: float = 0.0,
        max_val: float = 0.0,
        signal_field: Optional[SignalFieldMsg] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> None:
        self.data_source: _SeriesProvider = data_source if data_source is not None else EmptyProvider()
        self.selected = selected if selected is not None else Key()
        self.focused = focused
        self.field_key = field_key
        self.min_val = min_val
        self.max_val = max_val
        self.width = width
        self.height = height
        self.band: Band = _ISM
        self.data: List[Wave] = []
        self._content: List[str] = []
        if signal_field is not None:
            self._set_signal_field(signal_field)

    def _set_signal_field(self, msg: SignalFieldMsg) -> None:
        self.field_key = msg.key
        self.min_val = msg.min_val
        self.max_val = msg.max_val

    def set_band_view(self, band: Band) -> None:
        """Show ``band``; U-NII-2B has no view and is ignored."""
        if band == _UNII2B:
            return
        self.band = band

    def next_band_view(self) -> None:
        """Show the next band, skipping U-NII-2B and wrapping to ISM."""
        value = int(self.band) + 1
        if value == int(_UNII2B):
            value += 1
        if value > int(_MAX_BAND):
            value = int(_MIN_BAND)
        self.band = Band(value)

    def title(self) -> str:
        return f"{self.field_key} / {_BAND_NAMES.get(self.band, '')}"

    def axis_x(self) -> str:
        """Return the channel axis of the current band."""
        return _AXIS_X.get(self.band, "")

    def axis_y(self) -> str:
        """Return the value axis drawn left of the chart."""
        return "┍\n" + "│\n" * self.height + "├\n│\n┕\n"

    def refresh(self) -> None:
        """Redraw the current band's waves; does nothing when unfocused."""
        if not self.focused:
            return

        in_band = [wave for wave in self.data if wave.band == self.band]
        if not in_band:
            self._content = []
            return

        buf = Buffer(self.width, self.height)
        y_abs_max = max(abs(self.min_val), abs(self.max_val))

        selected: Optional[Wave] = None
        if len(in_band) == 1:
            selected = in_band[0]
        else:
            for wave in in_band:
                x0, step = _BAND_PARAMS.get(wave.band, (0, 0))
                if self.selected.compare(wave.key) == 0:
                    selected = wave
                    continue
                layout = _layout(wave, x0, self.height, step, math.copysign(y_abs_max, wave.value))
                outline = layout.full
                if wave.sign != 0:
                    outline = outline.union(layout.primary)
                _render(buf, wave, outline, _ROUNDED)

        if selected is not None:
            x0, step = _BAND_PARAMS.get(selected.band, (0, 0))
            layout = _layout(
                selected, x0, self.height, step, math.copysign(y_abs_max, selected.value)
            )
            if selected.sign != 0:
                _render(buf, selected, layout.full, _SECONDARY, "▒")
            if selected.sign > 0:
                border = _PRIMARY_ABOVE
            elif selected.sign < 0:
                border = _PRIMARY_BELOW
            else:
                border = _PRIMARY_ALONE
            _render(buf, selected, layout.primary, border, "█")

            # segment centres only for waves wider than 40 MHz
            if selected.width > 2:
                for r in layout.centers:
                    for x in range(r.x0, r.x1):
                        for y in range(r.y0, r.y1):
                            _put(buf, x, y, "╎", selected.color)

        self._content = buf.rows()

    def _select_band_of_selected(self) -> None:
        for wave in self.data:
            if self.selected.compare(wave.key) == 0:
                self.set_band_view(wave.band)

    def update(self, msg: object) -> None:
        """Handle a message from the table."""
        if isinstance(msg, ToggledNetworkKeyMsg):
            return
        if isinstance(msg, SelectedNetworkKeyMsg):
            self.selected = msg.key
            self._select_band_of_selected()
            self.refresh()
        elif isinstance(msg, NetworkKeyMsg):
            self.selected = msg.key
            self.refresh()
        elif isinstance(msg, SignalFieldMsg):
            self._set_signal_field(msg)
            self.refresh()
        elif isinstance(msg, TableWidthMsg):
            self.width = msg.width
            self.refresh()
        elif isinstance(msg, NetworksOnScreen):
            networks = list(msg.networks)
            colors = list(msg.colors)
            if len(colors) < len(networks):
                _log.warning("%s malformed len(colors) < len(networks)", type(msg).__name__)
                colors.extend(black() for _ in range(len(networks) - len(colors)))
            screen = NetworksOnScreen(networks=networks, colors=colors)
            self.data = waves_from_screen(screen, self.field_key, self.data_source)
            self.refresh()

    def _viewport(self) -> List[str]:
        lines = self._content[: self.height]
        lines = lines + [""] * (self.height - len(lines))
        return [_pad(line, self.width) for line in lines]

    def view(self) -> str:
        """Return the chart with both axes and the range labels."""
        right = _join_vertical(
            [
                f"{self.max_val:3.0f}",
                "\n".join(self._viewport()),
                self.axis_x(),
                f"{self.min_val:3.0f}",
            ]
        )
        left = self.axis_y().split("\n")
        return _join_horizontal(left, right)