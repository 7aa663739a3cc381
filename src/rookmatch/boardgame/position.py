"""Raw zero-based board coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable ``(row, column)`` pair, row 0 at the top of the board."""

    row: int
    column: int

    def __str__(self) -> str:
        return f"{self.row}, {self.column}"
