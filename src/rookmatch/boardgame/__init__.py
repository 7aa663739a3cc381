"""Board layer - a generic grid of pieces with no chess knowledge."""

from rookmatch.boardgame.board import Board
from rookmatch.boardgame.errors import BoardError
from rookmatch.boardgame.piece import MoveMatrix, Piece
from rookmatch.boardgame.position import Position

__all__ = [
    "Board",
    "BoardError",
    "MoveMatrix",
    "Piece",
    "Position",
]
