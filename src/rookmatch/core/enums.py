"""Core enumerations for the chess layer."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name


class PieceType(IntEnum):
    """Implemented piece kinds."""

    ROOK = 4
    KING = 6
