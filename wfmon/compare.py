"""Small comparison and sequence helpers."""

from __future__ import annotations

from typing import Any, MutableSequence, TypeVar

T = TypeVar("T")


def bool_to_int(b: bool) -> int:
    """Return 1 for a true value and 0 otherwise."""
    return int(bool(b))


def compare(a: Any, b: Any) -> int:
    """Three-way comparison: -1, 0 or 1."""
    return bool_to_int(a > b) - bool_to_int(a < b)


def nvl(expr: bool, t: T, f: T) -> T:
    """Return ``t`` when ``expr`` holds, else ``f``."""
    return t if expr else f


def reverse_in_place(v: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``v`` in place and return it."""
    v.reverse()
    return v