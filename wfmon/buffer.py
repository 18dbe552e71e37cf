"""A character grid with per-cell colours, and the block symbols drawn into it."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import List, Optional, Tuple

V_BARS = (" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
H_BARS = (" ", "█", "▉", "▊", "▋", "▌", "▍", "▎", "▏", "▐", "▕")
SHADE_BLOCKS = (" ", "░", "▒", "▓", "█")
Q_BLOCKS = (" ", "▖", "▗", "▘", "▙", "▚", "▛", "▜", "▝", "▞", "▟", "▀", "▄", "▌", "▐")

_RESET = "\x1b[0m"


def _color_code(color: str) -> str:
    if color.startswith("#") and len(color) == 7:
        try:
            red, green, blue = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            pass
        else:
            return f"2;{red};{green};{blue}"
    if color.isdigit() and int(color) <= 255:
        return f"5;{int(color)}"
    raise ValueError(f"unsupported color {color!r}")


@dataclass(frozen=True)
class _Style:
    fg: Optional[str] = None
    bg: Optional[str] = None

    def paint(self, text: str) -> str:
        codes = []
        if self.fg:
            codes.append("38;" + _color_code(self.fg))
        if self.bg:
            codes.append("48;" + _color_code(self.bg))
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


class Buffer:
    """A ``width`` x ``height`` grid with (0, 0) at the bottom-left corner.

    Colours are ``#rrggbb`` strings or 256-colour numbers as text.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid buffer dimensions {width}x{height}")
        self._width = width
        self._height = height
        self._cells: List[str] = [" "] * (width * height)
        self._styles: List[_Style] = [_Style()] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, x: int, y: int) -> int:
        idx = self._width * (self._height - y - 1) + x
        if not 0 <= idx < len(self._cells):
            raise IndexError(
                f"Index {idx} ({x}, {y}) out of bounds buffer dimensions ({len(self._cells)})"
            )
        return idx

    def set_cell(
        self,
        x: int,
        y: int,
        char: str,
        fg: Optional[str] = None,
        bg: Optional[str] = None,
    ) -> None:
        """Put ``char`` at (x, y); given colours replace the cell's colours."""
        for color in (fg, bg):
            if color:
                _color_code(color)
        idx = self._index(x, y)
        self._cells[idx] = char
        if fg is not None or bg is not None:
            old = self._styles[idx]
            self._styles[idx] = _Style(
                fg if fg is not None else old.fg,
                bg if bg is not None else old.bg,
            )

    def get_cell(self, x: int, y: int) -> Tuple[str, Optional[str], Optional[str]]:
        """Return the character, foreground and background at (x, y)."""
        idx = self._index(x, y)
        style = self._styles[idx]
        return self._cells[idx], style.fg, style.bg

    def _row_slices(self):
        for row in range(self._height):
            start = row * self._width
            end = start + self._width
            yield self._cells[start:end], self._styles[start:end]

    def rows(self) -> List[str]:
        """Return the rows top to bottom, coloured with ANSI escape sequences."""
        rendered = []
        for cells, styles in self._row_slices():
            parts = []
            for style, run in itertools.groupby(zip(cells, styles), key=lambda cell: cell[1]):
                parts.append(style.paint("".join(char for char, _ in run)))
            rendered.append("".join(parts))
        return rendered

    def plain_rows(self) -> List[str]:
        """Return the rows top to bottom without colours."""
        return ["".join(cells) for cells, _ in self._row_slices()]