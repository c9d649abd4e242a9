"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.pseudo_moves(parse_square("g1")):
        print(move)
"""

from gambit.core.board import STARTING_PLACEMENT, Board
from gambit.core.enums import Color, GameStatus, PieceType
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator, pseudo_moves
from gambit.core.piece import Piece
from gambit.core.rules import Rules
from gambit.core.types import Square, all_squares, parse_square

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "STARTING_PLACEMENT",
    "pseudo_moves",
]
