"""Starting layouts and their FEN-like text form.

Only the placement and side-to-move fields of FEN are used, restricted to
the implemented piece letters (``K``, ``R`` and their lower-case forms)::

    2rkr3/2rrr3/8/8/8/8/2RRR3/2RKR3 w
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rookmatch.core.chess_position import FILES, ChessPosition
from rookmatch.core.enums import Color
from rookmatch.core.errors import SetupError
from rookmatch.core.pieces import PIECE_CLASSES

if TYPE_CHECKING:
    from rookmatch.game.match import ChessMatch

DEMO_SETUP_FEN = "2rkr3/2rrr3/8/8/8/8/2RRR3/2RKR3 w"

Placement = tuple[ChessPosition, str]


@dataclass(frozen=True, slots=True)
class MatchSetup:
    """Immutable starting layout: piece letters by square plus side to move."""

    placements: tuple[Placement, ...]
    side_to_move: Color = Color.WHITE

    def __post_init__(self) -> None:
        seen: set[ChessPosition] = set()
        kings = {Color.WHITE: 0, Color.BLACK: 0}
        for square, char in self.placements:
            if len(char) != 1 or char.upper() not in PIECE_CLASSES:
                raise SetupError(f"Unknown piece letter {char!r} on {square}")
            if square in seen:
                raise SetupError(f"Square {square} is occupied twice")
            seen.add(square)
            if char.upper() == "K":
                kings[Color.WHITE if char.isupper() else Color.BLACK] += 1
        for color, count in kings.items():
            if count != 1:
                raise SetupError(
                    f"Setup needs exactly one {color.name} king, got {count}"
                )

    @classmethod
    def demo(cls) -> MatchSetup:
        """Fixed rooks-and-kings demo position."""
        return setup_from_fen(DEMO_SETUP_FEN)


def _expand_rank(rank_text: str, text: str) -> list[str | None]:
    """One rank of placement text as 8 cells: piece letter or ``None``."""
    cells: list[str | None] = []
    for ch in rank_text:
        if ch in "12345678":
            cells.extend([None] * int(ch))
        elif ch.upper() in PIECE_CLASSES:
            cells.append(ch)
        else:
            raise SetupError(f"Invalid setup character {ch!r}: {text!r}")
    if len(cells) != 8:
        raise SetupError(f"Invalid setup rank width: {text!r}")
    return cells


def setup_from_fen(text: str) -> MatchSetup:
    """Parse ``"<placement> [w|b]"`` into a :class:`MatchSetup`."""
    parts = text.split()
    if not (1 <= len(parts) <= 2):
        raise SetupError(f"Invalid setup (need 1-2 fields): {text!r}")

    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise SetupError(f"Invalid setup board (must contain 8 ranks): {text!r}")

    placements: list[Placement] = []
    for rank_idx, rank_text in enumerate(ranks):
        cells = _expand_rank(rank_text, text)
        for file, cell in zip(FILES, cells):
            if cell is not None:
                placements.append((ChessPosition(file, 8 - rank_idx), cell))

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise SetupError(f"Invalid setup side-to-move field: {side_part!r}")

    return MatchSetup(tuple(placements), side)


def setup_to_fen(match: ChessMatch) -> str:
    """Serialise the current board and side to move of *match*."""
    rows: list[str] = []
    for row in match.pieces():
        empty = 0
        text = ""
        for piece in row:
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    side = "w" if match.current_player == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side}"
