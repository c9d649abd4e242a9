"""Square value object and coordinate helpers.

Board layout (row-major, Black's home rank first):
    row 0 = rank 8 (a8 ... h8)
    row 7 = rank 1 (a1 ... h1)
    col 0 = file a, col 7 = file h

White pawns advance toward row 0, Black pawns toward row 7.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable ``(row, col)`` coordinate. May lie off the board."""

    row: int
    col: int

    @property
    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def index(self) -> int:
        """Cell index 0-63, row-major."""
        return self.row * BOARD_SIZE + self.col

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(6, 4)`` -> ``'e2'``."""
        return chr(ord("a") + self.col) + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. ``'e4'`` -> ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_squares() -> list[Square]:
    """All 64 squares, row 0 first."""
    return [Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
