"""Concrete piece kinds and their movement rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookmatch.boardgame.piece import MoveMatrix
from rookmatch.boardgame.position import Position
from rookmatch.core.chess_piece import ChessPiece
from rookmatch.core.enums import Color, PieceType

if TYPE_CHECKING:
    from rookmatch.boardgame.board import Board

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# up, down, left, right in raw (row, column) terms
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Rook(ChessPiece):
    """Slides any number of empty squares along ranks and files."""

    __slots__ = ()

    piece_type = PieceType.ROOK

    def possible_moves(self) -> MoveMatrix:
        mat = self._empty_matrix()
        origin = self.position
        if origin is None:
            return mat
        board = self.board

        for dr, dc in ROOK_DIRS:
            row = origin.row + dr
            column = origin.column + dc
            while board.position_exists(row, column):
                target = Position(row, column)
                if not board.there_is_a_piece(target):
                    mat[row][column] = True
                    row += dr
                    column += dc
                    continue
                if self._is_there_opponent_piece(target):
                    mat[row][column] = True
                break
        return mat


class King(ChessPiece):
    """Steps to any neighbouring square that is empty or holds an opponent."""

    __slots__ = ()

    piece_type = PieceType.KING

    def _can_move(self, position: Position) -> bool:
        return (
            not self.board.there_is_a_piece(position)
            or self._is_there_opponent_piece(position)
        )

    def possible_moves(self) -> MoveMatrix:
        mat = self._empty_matrix()
        origin = self.position
        if origin is None:
            return mat

        for dr, dc in KING_OFFSETS:
            target = Position(origin.row + dr, origin.column + dc)
            if self.board.position_exists(target) and self._can_move(target):
                mat[target.row][target.column] = True
        return mat


# FEN letter (upper-case) -> piece class
PIECE_CLASSES: dict[str, type[ChessPiece]] = {
    "R": Rook,
    "K": King,
}


def piece_from_char(board: Board, char: str) -> ChessPiece:
    """Create an off-board piece from a FEN letter, e.g. ``'r'`` -> black rook."""
    cls = PIECE_CLASSES.get(char.upper())
    if cls is None or len(char) != 1:
        raise ValueError(f"Invalid piece character: {char!r}")
    color = Color.WHITE if char.isupper() else Color.BLACK
    return cls(board, color)
