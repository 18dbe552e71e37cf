"""Sparkline chart of one network's signal history."""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Callable, List, Optional, Protocol

from wfmon.buffer import V_BARS, Buffer
from wfmon.datasource import EmptyProvider
from wfmon.events import NetworkKeyMsg, SignalFieldMsg, TableWidthMsg
from wfmon.netdata import Key
from wfmon.timeseries import TimeSeries

DEFAULT_HEIGHT = 10
DEFAULT_WIDTH = 95
DEFAULT_COLOR = "#EE6FF8"
REFRESH_INTERVAL = 1.0  # seconds between refresh ticks

_ANSI = re.compile(r"(\x1b\[[0-9;]*m)")


class _SeriesProvider(Protocol):
    def time_series(self, net_key: Key) -> Callable[[str], TimeSeries]: ...


def _visible_width(line: str) -> int:
    return len(_ANSI.sub("", line))


def _fit(line: str, width: int) -> str:
    """Cut or pad ``line`` to ``width`` visible characters, keeping escapes."""
    parts = []
    visible = 0
    for part in _ANSI.split(line):
        if _ANSI.fullmatch(part):
            parts.append(part)
            continue
        taken = part[: max(width - visible, 0)]
        parts.append(taken)
        visible += len(taken)
    parts.append(" " * (width - visible))
    return "".join(parts)


class Sparkline:
    """Bar chart of the newest samples of one field, newest on the right.

    A ``datetime`` passed to :meth:`update` is a refresh tick.
    """

    def __init__(
        self,
        *,
        data_source: Optional[_SeriesProvider] = None,
        network: Optional[Key] = None,
        field_key: str = "",
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        min_val: float = 0.0,
        max_val: float = 0.0,
        color: str = DEFAULT_COLOR,
        y_axis: bool = False,
        focused: bool = True,
        signal_field: Optional[SignalFieldMsg] = None,
    ) -> None:
        self.data_source: _SeriesProvider = data_source if data_source is not None else EmptyProvider()
        self.net_key = network if network is not None else Key()
        self.field_key = field_key
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val
        self.color = color
        self.focused = focused
        self.axes_shown = False
        self.data: List[float] = []
        self._content: List[str] = []
        if signal_field is not None:
            self.set_signal_field(signal_field)
        self.show_y_axis(y_axis)

    def set_dimension(self, width: int, height: int) -> None:
        """Resize the chart area."""
        self.width = width
        self.height = height

    def show_y_axis(self, shown: bool) -> None:
        """Show or hide the Y axis with its range labels."""
        self.axes_shown = shown
        self.set_dimension(self.width, self.height)

    def set_signal_field(self, msg: SignalFieldMsg) -> None:
        """Chart the field named by ``msg`` over its value range."""
        self.field_key = msg.key
        self.min_val = msg.min_val
        self.max_val = msg.max_val

    def title(self) -> str:
        return self.field_key

    def _fetch(self) -> List[float]:
        series = self.data_source.time_series(self.net_key)(self.field_key)
        return list(reversed(series.range(self.width)))

    def refresh(self) -> None:
        """Redraw the chart from the held data; does nothing when unfocused."""
        if not self.focused:
            return

        buf = Buffer(self.width, self.height)
        abs_max = max(abs(self.min_val), abs(self.max_val))
        view_height = float(self.height)
        full = V_BARS[-1]

        for i, value in enumerate(self.data[: self.width]):
            x = self.width - i - 1
            range_max = math.copysign(abs_max, value)
            fh = value * view_height / range_max if abs_max else 0.0
            if math.copysign(1.0, range_max) < 0:
                fh = max(0.0, view_height - fh)
            height = int(fh)

            if height == 0:
                buf.set_cell(x, 0, V_BARS[1], self.color)
                continue

            for y in range(height):
                buf.set_cell(x, y, full, self.color)

            if fh > height:
                tenth = int(fh * 10) % 10
                buf.set_cell(x, height, V_BARS[min(tenth, len(V_BARS) - 1)], self.color)

        self._content = buf.rows()

    def update(self, msg: object) -> Optional[float]:
        """Handle a message; return the delay before the next tick, if one is due."""
        if isinstance(msg, NetworkKeyMsg):
            self.net_key = msg.key
            self.color = str(msg.color)
            self.data = self._fetch()
            self.refresh()
        elif isinstance(msg, SignalFieldMsg):
            self.set_signal_field(msg)
            self.data = self._fetch()
            self.refresh()
        elif isinstance(msg, TableWidthMsg):
            self.width = msg.width
            self.refresh()
        elif isinstance(msg, datetime):
            self.data = self._fetch()
            self.refresh()
            return REFRESH_INTERVAL
        return None

    def _viewport(self) -> List[str]:
        lines = self._content[: self.height]
        lines = lines + [""] * (self.height - len(lines))
        return [_fit(line, self.width) for line in lines]

    def view(self) -> str:
        """Return the chart text; empty while there is no data."""
        if not self.data:
            return ""
        lines = self._viewport()
        if not self.axes_shown:
            return "\n".join(lines)

        block = [f"{self.max_val:.0f}┑", *(line + "│" for line in lines), f"{self.min_val:.0f}┙"]
        widest = max(_visible_width(line) for line in block)
        return "\n".join(" " * (widest - _visible_width(line)) + line for line in block)