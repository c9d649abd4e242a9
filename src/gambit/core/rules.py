"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, GameStatus
from gambit.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every query is recomputed from scratch; nothing is cached between calls.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_move(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_any_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        if Rules.is_in_check(board, color):
            return False
        return not Rules.has_any_legal_move(board, color)

    @staticmethod
    def evaluate(board: Board, color: Color) -> GameStatus:
        """Status of the game with *color* to move."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color)

        if not gen.has_any_legal_move(color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.IN_PROGRESS

    @staticmethod
    def winner(status: GameStatus, side_to_move: Color) -> Color | None:
        """The side not to move wins a checkmate or a time forfeit."""
        if status.is_decisive:
            return side_to_move.opposite
        return None
