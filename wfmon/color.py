"""Hex colours and an endless supply of random row colours."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

_BYTE_SIZE = 255
_DARKER = 220


@dataclass(frozen=True)
class HexColor:
    """An RGB colour whose text form is ``#rrggbb``."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name, value in (("red", self.red), ("green", self.green), ("blue", self.blue)):
            if not 0 <= value <= 255:
                raise ValueError(f"{name} component {value} is out of range 0..255")

    def __str__(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


def black() -> HexColor:
    """Return black."""
    return HexColor()


def random_colors(dark_background: bool) -> Iterator[HexColor]:
    """Yield random colours without end, kept readable on the given background.

    On a light background every component is at most 220; on a dark one every
    component is above 34.
    """
    rng = random.Random()

    def adapt_dark(value: int) -> int:
        return value if value <= _DARKER else _BYTE_SIZE - value

    def adapt_light(value: int) -> int:
        return value if value > _DARKER else _BYTE_SIZE - value

    adapt = adapt_light if dark_background else adapt_dark

    def component() -> int:
        return adapt(rng.randrange(_BYTE_SIZE))

    while True:
        yield HexColor(component(), component(), component())