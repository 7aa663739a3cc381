"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookmatch.game.match import ChessMatch
from rookmatch.game.setup import setup_from_fen, setup_to_fen


def _snapshot(match: ChessMatch) -> tuple:
    return (
        match.turn,
        match.current_player,
        match.check,
        setup_to_fen(match),
        tuple((id(p), p.position) for p in match.pieces_on_the_board),
        tuple((id(p), p.position) for p in match.captured_pieces),
    )


@pytest.fixture
def demo_match() -> ChessMatch:
    """Match in the default rooks-and-kings demo position."""
    return ChessMatch()


@pytest.fixture
def make_match() -> Callable[[str], ChessMatch]:
    """Factory: build a match from a FEN-like setup string."""

    def _make(fen: str) -> ChessMatch:
        return ChessMatch(setup_from_fen(fen))

    return _make


@pytest.fixture
def snapshot() -> Callable[[ChessMatch], tuple]:
    """Everything a caller can observe about a match, as a comparable tuple."""
    return _snapshot
