"""Table column definitions, multi-view columns and column sorting."""

from __future__ import annotations

import dataclasses
import enum
import functools
from dataclasses import dataclass, field
from typing import List, MutableSequence, Optional, Sequence, Tuple, Union

from wfmon.netdata import Network
from wfmon.sorting import Sorter, by_key_sorter


class Order(enum.IntEnum):
    """Sorting direction of a column."""

    NONE = 0
    ASC = 1
    DESC = 2

    def __str__(self) -> str:
        if self is Order.ASC:
            return "↓"
        if self is Order.DESC:
            return "↑"
        return ""

    def swap(self) -> "Order":
        """Return the opposite direction; anything but ASC becomes ASC."""
        return Order.DESC if self is Order.ASC else Order.ASC


@dataclass(frozen=True)
class SimpleColumn:
    """A single table column: header key, width, alignment and sorter."""

    key: str
    width: int
    align: Optional[str] = None
    sorter: Sorter = field(default_factory=by_key_sorter, compare=False)

    def with_sorter(self, sorter: Sorter) -> "SimpleColumn":
        """Return a copy sorting with ``sorter``."""
        return dataclasses.replace(self, sorter=sorter)

    def with_align(self, align: str) -> "SimpleColumn":
        """Return a copy with cells aligned as ``align``."""
        return dataclasses.replace(self, align=align)


@dataclass(frozen=True)
class MultipleColumn:
    """A column slot showing one of several swappable columns."""

    columns: Tuple[SimpleColumn, ...]
    index: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    def current(self) -> SimpleColumn:
        """Return the column currently shown."""
        return self.columns[self.index]

    def next(self) -> "MultipleColumn":
        """Return the view showing the next column, wrapping around."""
        index = self.index + 1
        if index >= len(self.columns):
            index = 0
        return MultipleColumn(self.columns, index)

    def prev(self) -> "MultipleColumn":
        """Return the view showing the previous column, wrapping around."""
        index = self.index - 1
        if index < 0:
            index = len(self.columns) - 1
        return MultipleColumn(self.columns, index)

    @property
    def key(self) -> str:
        return self.current().key

    @property
    def width(self) -> int:
        return self.current().width

    @property
    def align(self) -> Optional[str]:
        return self.current().align

    @property
    def sorter(self) -> Sorter:
        return self.current().sorter


Column = Union[SimpleColumn, MultipleColumn]


@dataclass(frozen=True)
class ColumnSort:
    """Which column the table is sorted by, and in which direction."""

    key: str
    sorter: Sorter = field(compare=False)
    order: Order = Order.NONE

    def swap_order(self) -> "ColumnSort":
        """Return the sort with its direction swapped."""
        return dataclasses.replace(self, order=self.order.swap())

    def with_order(self, order: Order) -> "ColumnSort":
        """Return the sort with direction ``order``."""
        return dataclasses.replace(self, order=order)

    def compare(self, a: Network, b: Network) -> int:
        """Compare two networks in this sort's direction."""
        res = self.sorter(a, b)
        if self.order in (Order.ASC, Order.NONE):
            return res
        return -res

    def sort(self, networks: MutableSequence[Network]) -> None:
        """Sort ``networks`` in place."""
        networks[:] = sorted(networks, key=functools.cmp_to_key(self.compare))


def column_titles(columns: Sequence[Column], sort: ColumnSort) -> List[str]:
    """Return header titles; the sorted column's title carries its direction."""
    return [
        f"{column.key} {sort.order}" if column.key == sort.key else column.key
        for column in columns
    ]