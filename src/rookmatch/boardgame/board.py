"""Board - generic grid of piece slots."""

from __future__ import annotations

from typing import overload

from rookmatch.boardgame.errors import BoardError
from rookmatch.boardgame.piece import Piece
from rookmatch.boardgame.position import Position


class Board:
    """Mutable ``rows x columns`` grid holding at most one piece per slot.

    Knows nothing about chess: only positions, placement, removal and bounds.
    """

    __slots__ = ("_rows", "_columns", "_pieces")

    def __init__(self, rows: int = 8, columns: int = 8) -> None:
        if rows < 1 or columns < 1:
            raise BoardError(
                "Error creating board: there must be at least 1 row and 1 column"
            )
        self._rows = rows
        self._columns = columns
        self._pieces: list[list[Piece | None]] = [
            [None] * columns for _ in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    # -- Element access -----------------------------------------------------

    @overload
    def piece(self, row: int, column: int) -> Piece | None: ...

    @overload
    def piece(self, row: Position) -> Piece | None: ...

    def piece(self, row: int | Position, column: int | None = None) -> Piece | None:
        if isinstance(row, Position):
            row, column = row.row, row.column
        if column is None:
            raise TypeError("column is required when row is an int")
        if not self.position_exists(row, column):
            raise BoardError("Position not on the board")
        return self._pieces[row][column]

    def there_is_a_piece(self, position: Position) -> bool:
        return self.piece(position) is not None

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, piece: Piece, position: Position) -> None:
        if self.there_is_a_piece(position):
            raise BoardError(f"There is already a piece on position {position}")
        self._pieces[position.row][position.column] = piece
        piece.position = position

    def remove_piece(self, position: Position) -> Piece | None:
        piece = self.piece(position)
        if piece is None:
            return None
        piece.position = None
        self._pieces[position.row][position.column] = None
        return piece

    # -- Bounds -------------------------------------------------------------

    @overload
    def position_exists(self, row: int, column: int) -> bool: ...

    @overload
    def position_exists(self, row: Position) -> bool: ...

    def position_exists(self, row: int | Position, column: int | None = None) -> bool:
        if isinstance(row, Position):
            row, column = row.row, row.column
        if column is None:
            raise TypeError("column is required when row is an int")
        return 0 <= row < self._rows and 0 <= column < self._columns

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        return "\n".join(
            " ".join(str(p) if p is not None else "." for p in row)
            for row in self._pieces
        )
