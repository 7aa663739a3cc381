"""Chess-layer exceptions.

Every :class:`ChessError` is an expected outcome of invalid play: the caller
shows ``str(exc)`` and asks again.  :class:`MissingKing` is different, it
means an internal invariant was broken.
"""


class ChessError(Exception):
    """Base class for user-facing chess failures."""


class OutOfBoardCoordinate(ChessError, ValueError):
    """Algebraic coordinate outside a1..h8."""


class NoPieceAtSource(ChessError):
    """Source square is empty."""


class NotYourPiece(ChessError):
    """Source piece belongs to the side not on move."""


class NoMovesForPiece(ChessError):
    """Source piece has no reachable destination."""


class IllegalDestination(ChessError):
    """Target square is not reachable by the source piece."""


class WouldSelfCheck(ChessError):
    """Move would leave the mover's own king attacked."""


class SetupError(ChessError, ValueError):
    """Invalid starting layout."""


class MissingKing(RuntimeError):
    """No king of the requested color is on the board."""
