"""Abstract board piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rookmatch.boardgame.board import Board
    from rookmatch.boardgame.position import Position

MoveMatrix = list[list[bool]]


class Piece(ABC):
    """A piece that lives on a :class:`Board`.

    The board reference is non-owning: the board stores the piece in a slot
    and the piece looks back at the board to inspect its surroundings.
    ``position`` is maintained by the board and is ``None`` off-board.
    """

    __slots__ = ("_board", "position")

    def __init__(self, board: Board) -> None:
        self._board = board
        self.position: Position | None = None

    @property
    def board(self) -> Board:
        return self._board

    @abstractmethod
    def possible_moves(self) -> MoveMatrix:
        """Fresh ``rows x columns`` matrix of reachable squares.

        Must be a pure function of the current board occupancy.
        """

    def possible_move(self, position: Position) -> bool:
        return self.possible_moves()[position.row][position.column]

    def is_there_any_possible_move(self) -> bool:
        return any(any(row) for row in self.possible_moves())

    def _empty_matrix(self) -> MoveMatrix:
        return [[False] * self._board.columns for _ in range(self._board.rows)]
