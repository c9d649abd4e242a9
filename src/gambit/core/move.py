"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A single candidate move.

    Only meaningful relative to the board it was generated from; it carries
    no reference to the moving piece.
    """

    from_sq: Square
    to_sq: Square
    is_capture: bool = False

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"
