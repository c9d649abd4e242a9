"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square, all_squares

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class Board:
    """64 cells of optional pieces.

    Pure data: no legality is checked here. Indexing with an off-board
    square raises ``IndexError``; callers filter with ``Square.in_bounds``.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.in_bounds:
            raise IndexError(f"Square off the board: {sq!r}")
        return self._cells[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.in_bounds:
            raise IndexError(f"Square off the board: {sq!r}")
        self._cells[sq.index] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self[sq]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every piece of *color*, row 0 first."""
        for sq in all_squares():
            piece = self._cells[sq.index]
            if piece is not None and piece.color == color:
                yield sq, piece

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` when the king is missing."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def with_move(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the piece on *from_sq* moved to *to_sq*.

        Whatever stood on *to_sq* is overwritten. ``self`` is untouched.
        """
        b = self.copy()
        b[to_sq] = b[from_sq]
        b[from_sq] = None
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Build a board from the piece-placement field of a FEN string.

        The first rank listed is rank 8, which is row 0.
        """
        rows = placement.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected 8 ranks, got {len(rows)}: {placement!r}")

        b = cls()
        for row, text in enumerate(rows):
            col = 0
            for char in text:
                if char.isdigit():
                    col += int(char)
                else:
                    if col >= BOARD_SIZE:
                        raise ValueError(f"Rank overflow in {text!r}")
                    b[Square(row, col)] = Piece.from_char(char)
                    col += 1
            if col != BOARD_SIZE:
                raise ValueError(f"Rank {text!r} does not cover 8 files")
        return b

    def to_placement(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            text = ""
            gap = 0
            for col in range(BOARD_SIZE):
                piece = self._cells[row * BOARD_SIZE + col]
                if piece is None:
                    gap += 1
                    continue
                if gap:
                    text += str(gap)
                    gap = 0
                text += str(piece)
            if gap:
                text += str(gap)
            rows.append(text)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._cells[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
