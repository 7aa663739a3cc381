"""Match layer - the rules controller and its starting layouts.

Quick start::

    from rookmatch.core import ChessPosition
    from rookmatch.game import ChessMatch

    match = ChessMatch()
    match.perform_chess_move(ChessPosition.parse("c1"), ChessPosition.parse("c3"))
"""

from rookmatch.game.match import ChessMatch, MatchEvents
from rookmatch.game.setup import (
    DEMO_SETUP_FEN,
    MatchSetup,
    setup_from_fen,
    setup_to_fen,
)

__all__ = [
    "DEMO_SETUP_FEN",
    "ChessMatch",
    "MatchEvents",
    "MatchSetup",
    "setup_from_fen",
    "setup_to_fen",
]
