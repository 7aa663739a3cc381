"""Algebraic chess coordinates and their mapping to raw board positions.

Layout::

    rank 8 -> row 0   (black back rank)
    rank 1 -> row 7   (white back rank)
    file a -> column 0, ..., file h -> column 7
"""

from __future__ import annotations

from dataclasses import dataclass

from rookmatch.boardgame.position import Position
from rookmatch.core.errors import OutOfBoardCoordinate

FILES = "abcdefgh"
RANKS = range(1, 9)

_RANGE_MESSAGE = "Error instantiating ChessPosition. Valid values are from a1 to h8"


@dataclass(frozen=True, slots=True)
class ChessPosition:
    """Immutable ``(file, rank)`` pair, e.g. ``ChessPosition("e", 4)``."""

    column: str
    row: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.column, str)
            or len(self.column) != 1
            or self.column not in FILES
            or not isinstance(self.row, int)
            or isinstance(self.row, bool)
            or self.row not in RANKS
        ):
            raise OutOfBoardCoordinate(_RANGE_MESSAGE)

    def to_position(self) -> Position:
        return Position(8 - self.row, ord(self.column) - ord("a"))

    @classmethod
    def from_position(cls, position: Position) -> ChessPosition:
        if not (0 <= position.row < 8 and 0 <= position.column < 8):
            raise OutOfBoardCoordinate(_RANGE_MESSAGE)
        return cls(chr(ord("a") + position.column), 8 - position.row)

    @classmethod
    def parse(cls, text: str) -> ChessPosition:
        """Parse square name, e.g. ``'e4'`` or ``' E4 '``."""
        name = text.strip().lower()
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise OutOfBoardCoordinate(f"Invalid square name: {text!r}")
        return cls(name[0], int(name[1]))

    def __str__(self) -> str:
        return f"{self.column}{self.row}"
