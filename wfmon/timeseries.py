"""Bounded series of timestamped samples."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional


@dataclass(frozen=True)
class Sample:
    """One measured value."""

    value: float
    timestamp: datetime


@dataclass(frozen=True)
class TimeSeries:
    """Samples of one measurement, oldest first, keeping at most ``max_len``."""

    max_len: int = 0
    samples: tuple[Sample, ...] = ()

    def add(self, value: float, timestamp: Optional[datetime] = None) -> "TimeSeries":
        """Return a series with a new sample appended and trimmed to ``max_len``."""
        moment = timestamp if timestamp is not None else datetime.now()
        grown = TimeSeries(self.max_len, self.samples + (Sample(float(value), moment),))
        return grown.shrink()

    def shrink(self) -> "TimeSeries":
        """Return a series holding only the newest ``max_len`` samples."""
        start = len(self.samples) - self.max_len
        if start < 0:
            return self
        return TimeSeries(self.max_len, self.samples[start:])

    def copy(self) -> "TimeSeries":
        """Return an independent copy."""
        return TimeSeries(self.max_len, tuple(self.samples))

    def _end(self, count: int) -> tuple[Sample, ...]:
        start = max(len(self.samples) - count, 0)
        return self.samples[start:]

    def last(self) -> Optional[float]:
        """Return the newest value, or None if the series is empty."""
        values = self.range(1)
        return values[0] if values else None

    def range(self, count: int) -> List[float]:
        """Return the newest ``count`` values, oldest first."""
        return [sample.value for sample in self._end(count)]

    def range_and_map(self, count: int, modifier: Callable[[float], float]) -> List[float]:
        """Return the newest ``count`` values passed through ``modifier``."""
        return [modifier(sample.value) for sample in self._end(count)]


def empty_series() -> TimeSeries:
    """Return a series that holds no samples."""
    return TimeSeries(0)