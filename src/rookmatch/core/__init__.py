"""Chess layer - colors, algebraic coordinates and concrete pieces.

Quick start::

    from rookmatch.boardgame import Board
    from rookmatch.core import ChessPosition, Color, Rook

    board = Board()
    rook = Rook(board, Color.WHITE)
    board.place_piece(rook, ChessPosition.parse("c1").to_position())
"""

from rookmatch.core.chess_piece import ChessPiece
from rookmatch.core.chess_position import ChessPosition
from rookmatch.core.enums import Color, PieceType
from rookmatch.core.errors import (
    ChessError,
    IllegalDestination,
    MissingKing,
    NoMovesForPiece,
    NoPieceAtSource,
    NotYourPiece,
    OutOfBoardCoordinate,
    SetupError,
    WouldSelfCheck,
)
from rookmatch.core.pieces import King, Rook, piece_from_char

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Domain objects
    "ChessPiece",
    "ChessPosition",
    "King",
    "Rook",
    "piece_from_char",
    # Errors
    "ChessError",
    "IllegalDestination",
    "MissingKing",
    "NoMovesForPiece",
    "NoPieceAtSource",
    "NotYourPiece",
    "OutOfBoardCoordinate",
    "SetupError",
    "WouldSelfCheck",
]
