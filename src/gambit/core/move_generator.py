"""Pseudo-legal and legal move generation + attack detection."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Row delta of a single pawn push.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class MoveGenerator:
    """Generates moves for individual squares of a :class:`Board`.

    Legality is decided by simulation: every candidate is played on a copy
    of the board and discarded if the mover's king is attacked afterwards.
    The generator never mutates the board it was given.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, sq: Square, respect_check: bool = True) -> list[Move]:
        """Moves for the piece on *sq*.

        With ``respect_check=False`` the raw movement shapes are returned,
        which is what attack detection uses.
        """
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Move] = []
        if piece.piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif piece.piece_type == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif piece.piece_type == PieceType.KING:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDING_DIRS[piece.piece_type], moves)

        if not respect_check:
            return moves
        return [m for m in moves if not self._leaves_king_in_check(m, piece)]

    def legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*."""
        legal: list[Move] = []
        for sq, _ in self._board.occupied(color):
            legal.extend(self.pseudo_moves(sq))
        return legal

    def has_any_legal_move(self, color: Color) -> bool:
        for sq, _ in self._board.occupied(color):
            if self.pseudo_moves(sq):
                return True
        return False

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked? A missing king counts as attacked."""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return True
        for sq, _ in self._board.occupied(color.opposite):
            for move in self.pseudo_moves(sq, respect_check=False):
                if move.to_sq == king_sq:
                    return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _leaves_king_in_check(self, move: Move, piece: Piece) -> bool:
        after = self._board.with_move(move.from_sq, move.to_sq)
        return MoveGenerator(after).is_in_check(piece.color)

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        step = PAWN_DIRECTION[color]

        one_step = sq.offset(step, 0)
        if one_step.in_bounds and board.is_empty(one_step):
            moves.append(Move(sq, one_step))
            two_step = sq.offset(2 * step, 0)
            if sq.row == PAWN_START_ROW[color] and board.is_empty(two_step):
                moves.append(Move(sq, two_step))

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not cap_sq.in_bounds:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(Move(sq, cap_sq, is_capture=True))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not to_sq.in_bounds:
                continue
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
            elif target.color != color:
                moves.append(Move(sq, to_sq, is_capture=True))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while to_sq.in_bounds:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq, is_capture=True))
                break


def pseudo_moves(board: Board, sq: Square, respect_check: bool = True) -> list[Move]:
    """Shorthand for ``MoveGenerator(board).pseudo_moves(sq, respect_check)``."""
    return MoveGenerator(board).pseudo_moves(sq, respect_check)
