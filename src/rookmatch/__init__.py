"""rookmatch - rules core of a two-player chess match."""

__version__ = "0.1.0"
