"""Application run mode."""

from __future__ import annotations

import enum


class Mode(enum.IntEnum):
    """Mode the application runs in."""

    DEV = 0
    PROD = 1

    def __str__(self) -> str:
        return self.name


def mode_from_string(s: str) -> Mode:
    """Return the mode named by ``s`` (case-insensitive), falling back to PROD."""
    return Mode.__members__.get(s.upper(), Mode.PROD)