"""ChessMatch - the authoritative rules controller of a two-player match.

Owns the board, the turn counter, the side to move, the check flag and the
two piece rosters.  Moves are validated, applied, tested for self-check and
rolled back when the mover's own king would be left attacked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookmatch.boardgame.board import Board
from rookmatch.boardgame.piece import MoveMatrix
from rookmatch.boardgame.position import Position
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
    SetupError,
    WouldSelfCheck,
)
from rookmatch.core.pieces import piece_from_char
from rookmatch.game.setup import MatchSetup

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[ChessPosition, ChessPosition, ChessPiece | None], None]
CheckCallback = Callable[[Color], None]  # side now in check


@dataclass
class MatchEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class ChessMatch:
    """Single-owner, synchronous match controller.

    Every public method either completes or raises a
    :class:`~rookmatch.core.errors.ChessError`; on failure the observable
    state (turn, side to move, check flag, board and rosters) is unchanged.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_current_player",
        "_check",
        "_pieces_on_the_board",
        "_captured_pieces",
        "_captured_index",
        "events",
    )

    def __init__(self, setup: MatchSetup | None = None) -> None:
        if setup is None:
            setup = MatchSetup.demo()
        self._board = Board(BOARD_SIZE, BOARD_SIZE)
        self._turn = 1
        self._current_player = setup.side_to_move
        self._check = False
        self._pieces_on_the_board: list[ChessPiece] = []
        self._captured_pieces: list[ChessPiece] = []
        # live-roster slot of the piece taken by the last _make_move
        self._captured_index: int | None = None
        self.events = MatchEvents()
        self._initial_setup(setup)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def current_player(self) -> Color:
        return self._current_player

    @property
    def check(self) -> bool:
        """Whether the side to move is in check."""
        return self._check

    @property
    def board(self) -> Board:
        return self._board

    @property
    def pieces_on_the_board(self) -> tuple[ChessPiece, ...]:
        return tuple(self._pieces_on_the_board)

    @property
    def captured_pieces(self) -> tuple[ChessPiece, ...]:
        return tuple(self._captured_pieces)

    # ── Public API ───────────────────────────────────────────────────────

    def pieces(self) -> list[list[ChessPiece | None]]:
        """Board snapshot for rendering: row 0 is rank 8, row 7 is rank 1."""
        mat: list[list[ChessPiece | None]] = []
        for i in range(self._board.rows):
            row: list[ChessPiece | None] = []
            for j in range(self._board.columns):
                piece = self._board.piece(i, j)
                assert piece is None or isinstance(piece, ChessPiece)
                row.append(piece)
            mat.append(row)
        return mat

    def possible_moves(self, source_position: ChessPosition) -> MoveMatrix:
        """Reachable squares of the piece on *source_position*."""
        position = source_position.to_position()
        self._validate_source_position(position)
        piece = self._board.piece(position)
        assert piece is not None
        return piece.possible_moves()

    def perform_chess_move(
        self, source_position: ChessPosition, target_position: ChessPosition
    ) -> ChessPiece | None:
        """Validate and play a move; return the captured piece, if any."""
        source = source_position.to_position()
        target = target_position.to_position()
        try:
            self._validate_source_position(source)
            self._validate_target_position(source, target)
        except ChessError as exc:
            _LOGGER.debug(
                "Rejected %s %s-%s: %s",
                self._current_player,
                source_position,
                target_position,
                exc,
            )
            raise

        captured = self._make_move(source, target)

        if self._test_check(self._current_player):
            self._undo_move(source, target, captured)
            _LOGGER.debug(
                "Rolled back %s %s-%s: self-check",
                self._current_player,
                source_position,
                target_position,
            )
            raise WouldSelfCheck("You can't put yourself in check")

        opponent = self._current_player.opposite
        self._check = self._test_check(opponent)

        _LOGGER.debug(
            "Turn %d: %s %s-%s%s",
            self._turn,
            self._current_player,
            source_position,
            target_position,
            f" captures {captured!r}" if captured is not None else "",
        )
        self._next_turn()

        self._emit_move(source_position, target_position, captured)
        if self._check:
            _LOGGER.info("%s is in check", opponent)
            self._emit_check(opponent)
        return captured

    # ── Move application ─────────────────────────────────────────────────

    def _make_move(self, source: Position, target: Position) -> ChessPiece | None:
        piece = self._board.remove_piece(source)
        assert piece is not None
        captured = self._board.remove_piece(target)
        self._board.place_piece(piece, target)

        if captured is not None:
            assert isinstance(captured, ChessPiece)
            index = next(
                i for i, p in enumerate(self._pieces_on_the_board) if p is captured
            )
            del self._pieces_on_the_board[index]
            self._captured_index = index
            self._captured_pieces.append(captured)
        return captured

    def _undo_move(
        self, source: Position, target: Position, captured: ChessPiece | None
    ) -> None:
        """Exact inverse of :meth:`_make_move`."""
        piece = self._board.remove_piece(target)
        assert piece is not None
        self._board.place_piece(piece, source)

        if captured is not None:
            self._board.place_piece(captured, target)
            self._captured_pieces.remove(captured)
            assert self._captured_index is not None
            self._pieces_on_the_board.insert(self._captured_index, captured)
            self._captured_index = None

    # ── Validation ───────────────────────────────────────────────────────

    def _validate_source_position(self, position: Position) -> None:
        piece = self._board.piece(position)
        if piece is None:
            raise NoPieceAtSource("There is no piece on source position")
        assert isinstance(piece, ChessPiece)
        if piece.color != self._current_player:
            raise NotYourPiece("The chosen piece is not yours")
        if not piece.is_there_any_possible_move():
            raise NoMovesForPiece("There is no possible moves for the chosen piece")

    def _validate_target_position(self, source: Position, target: Position) -> None:
        piece = self._board.piece(source)
        assert piece is not None
        if not piece.possible_move(target):
            raise IllegalDestination("The chosen piece can't move to target position")

    # ── Check detection ──────────────────────────────────────────────────

    def _king(self, color: Color) -> ChessPiece:
        for piece in self._pieces_on_the_board:
            if piece.color == color and piece.piece_type == PieceType.KING:
                return piece
        raise MissingKing(f"There is no {color.name} king on the board")

    def _test_check(self, color: Color) -> bool:
        """Is *color*'s king reachable by any live opponent piece?"""
        king_position = self._king(color).position
        assert king_position is not None
        opponent = color.opposite
        for piece in self._pieces_on_the_board:
            if piece.color != opponent:
                continue
            mat = piece.possible_moves()
            if mat[king_position.row][king_position.column]:
                return True
        return False

    # ── Turn bookkeeping ─────────────────────────────────────────────────

    def _next_turn(self) -> None:
        self._turn += 1
        self._current_player = self._current_player.opposite

    # ── Setup ────────────────────────────────────────────────────────────

    def _place_new_piece(self, column: str, row: int, piece: ChessPiece) -> None:
        self._board.place_piece(piece, ChessPosition(column, row).to_position())
        self._pieces_on_the_board.append(piece)

    def _initial_setup(self, setup: MatchSetup) -> None:
        for square, char in setup.placements:
            self._place_new_piece(
                square.column, square.row, piece_from_char(self._board, char)
            )

        # The side not on move must not start in check.
        waiting = self._current_player.opposite
        if self._test_check(waiting):
            raise SetupError(
                f"{waiting.name} king is in check on {self._current_player.name}'s move"
            )
        self._check = self._test_check(self._current_player)
        _LOGGER.debug(
            "New match: %d pieces, %s to move",
            len(self._pieces_on_the_board),
            self._current_player,
        )

    # ── Event emission ───────────────────────────────────────────────────

    def _emit_move(
        self,
        source: ChessPosition,
        target: ChessPosition,
        captured: ChessPiece | None,
    ) -> None:
        for cb in self.events.on_move:
            cb(source, target, captured)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)
