"""Board-layer exceptions."""


class BoardError(Exception):
    """Raised on invalid board construction, access, or placement."""
