"""Game state machine: turn order, captures, history and status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from gambit.core.board import Board
from gambit.core.enums import Color, GameStatus, PieceType
from gambit.core.move_generator import PROMOTION_ROW, MoveGenerator
from gambit.core.piece import Piece
from gambit.core.rules import Rules

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.core.types import Square
    from gambit.game.clock import ClockSnapshot


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Status plus the winning side, if any."""

    status: GameStatus
    winner: Color | None = None


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of a :class:`GameState` handed to callers.

    ``captured`` is keyed by the capturing side, like :attr:`GameState.captured`.
    """

    board: Board
    active_color: Color
    captured: Mapping[Color, tuple[Piece, ...]]
    move_history: tuple[str, ...]
    status: GameStatus
    running: bool
    winner: Color | None
    clock: ClockSnapshot | None = None

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal


def _empty_captures() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Board, side to move, captures, history and status of one game.

    ``captured`` is keyed by the capturing side, not by the color of the
    captured piece: ``captured[Color.WHITE]`` lists the black pieces White
    has taken, in capture order. :class:`GameSnapshot` uses the same keys.

    Pure data and logic. The clock lives in the session.
    """

    board: Board = field(default_factory=Board.initial)
    active_color: Color = Color.WHITE
    captured: dict[Color, list[Piece]] = field(default_factory=_empty_captures)
    move_history: list[str] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS
    running: bool = False

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_sq: Square, to_sq: Square) -> str:
        """Play a move and return its history entry.

        Caller is responsible for the legality check.
        """
        if self.status.is_terminal:
            raise RuntimeError(f"Game is over ({self.status.name.lower()})")
        piece = self.board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        mover = self.active_color
        target = self.board[to_sq]

        self.board = self.board.with_move(from_sq, to_sq)
        promoted = (
            piece.piece_type == PieceType.PAWN and to_sq.row == PROMOTION_ROW[mover]
        )
        if promoted:
            self.board[to_sq] = piece.promoted()

        if target is not None and target.color != mover:
            self.captured[mover].append(target)

        self.active_color = mover.opposite
        self.status = Rules.evaluate(self.board, self.active_color)
        if self.status.is_terminal:
            self.running = False

        entry = self._describe(piece, from_sq, to_sq, target is not None, promoted)
        self.move_history.append(entry)
        return entry

    def flag_fall(self, color: Color) -> None:
        """Time ran out for *color*, which must be the side to move."""
        if color != self.active_color:
            raise ValueError(f"Only the side to move can lose on time, not {color.name.lower()}")
        self.status = GameStatus.TIME_FORFEIT
        self.running = False

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Color | None:
        return Rules.winner(self.status, self.active_color)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def report(self) -> StatusReport:
        return StatusReport(self.status, self.winner)

    def legal_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves for the piece on *sq* if it belongs to the side to move."""
        if self.status.is_terminal or not sq.in_bounds:
            return []
        piece = self.board[sq]
        if piece is None or piece.color != self.active_color:
            return []
        return MoveGenerator(self.board).pseudo_moves(sq)

    def snapshot(self, clock: ClockSnapshot | None = None) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.copy(),
            active_color=self.active_color,
            captured=MappingProxyType(
                {color: tuple(pieces) for color, pieces in self.captured.items()}
            ),
            move_history=tuple(self.move_history),
            status=self.status,
            running=self.running,
            winner=self.winner,
            clock=clock,
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _describe(
        self,
        piece: Piece,
        from_sq: Square,
        to_sq: Square,
        was_capture: bool,
        promoted: bool,
    ) -> str:
        sep = "x" if was_capture else "-"
        entry = f"{piece.description} {from_sq.name}{sep}{to_sq.name}"
        if promoted:
            entry += "=Q"
        if self.status == GameStatus.CHECKMATE:
            entry += "#"
        elif self.status == GameStatus.CHECK:
            entry += "+"
        return entry
