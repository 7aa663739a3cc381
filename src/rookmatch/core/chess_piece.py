"""ChessPiece - a board piece with a color."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rookmatch.boardgame.piece import Piece
from rookmatch.core.chess_position import ChessPosition
from rookmatch.core.enums import Color, PieceType

if TYPE_CHECKING:
    from rookmatch.boardgame.board import Board
    from rookmatch.boardgame.position import Position

_FEN_CHARS: dict[PieceType, str] = {
    PieceType.ROOK: "R",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.KING): "♚",
}


class ChessPiece(Piece):
    """Base class of the concrete chess pieces.

    Subclasses set :attr:`piece_type` and implement ``possible_moves``.
    """

    __slots__ = ("_color",)

    piece_type: ClassVar[PieceType]

    def __init__(self, board: Board, color: Color) -> None:
        super().__init__(board)
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    @property
    def chess_position(self) -> ChessPosition | None:
        """Algebraic form of the current position, ``None`` off-board."""
        if self.position is None:
            return None
        return ChessPosition.from_position(self.position)

    def _is_there_opponent_piece(self, position: Position) -> bool:
        piece = self.board.piece(position)
        return isinstance(piece, ChessPiece) and piece.color != self._color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _FEN_CHARS[self.piece_type]
        return char if self._color == Color.WHITE else char.lower()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color.name}, {self.chess_position})"

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♜."""
        return _UNICODE[(self._color, self.piece_type)]
