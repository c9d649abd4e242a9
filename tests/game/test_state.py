"""Tests for GameState."""

import dataclasses

import pytest

from gambit.core.board import Board
from gambit.core.enums import Color, GameStatus, PieceType
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import Piece
from gambit.core.types import A1, A2, A7, A8, B8, E2, E4, E7, Square, parse_square
from gambit.game.state import GameState


def play(gs: GameState, *moves: str) -> list[str]:
    """Apply coordinate moves such as ``"e2e4"`` and return their entries."""
    return [gs.apply_move(parse_square(m[:2]), parse_square(m[2:])) for m in moves]


class TestGameStateSetup:
    def test_fresh_state(self) -> None:
        gs = GameState()
        assert gs.board == Board.initial()
        assert gs.active_color == Color.WHITE
        assert gs.status == GameStatus.IN_PROGRESS
        assert not gs.running
        assert gs.captured == {Color.WHITE: [], Color.BLACK: []}
        assert gs.move_history == []
        assert gs.ply_count == 0
        assert gs.winner is None

    def test_states_do_not_share_containers(self) -> None:
        first, second = GameState(), GameState()
        play(first, "e2e4")
        assert second.move_history == []
        assert second.board[E2] is not None


class TestApplyMove:
    def test_e2_e4(self) -> None:
        gs = GameState()
        entry = gs.apply_move(E2, E4)
        assert entry == "white pawn e2-e4"
        assert gs.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert gs.board[E2] is None
        assert gs.active_color == Color.BLACK
        assert gs.move_history == ["white pawn e2-e4"]
        assert gs.status == GameStatus.IN_PROGRESS

    def test_turns_alternate(self) -> None:
        gs = GameState()
        colors = []
        for move in ("e2e4", "e7e5", "g1f3", "b8c6"):
            colors.append(gs.active_color)
            play(gs, move)
        assert colors == [Color.WHITE, Color.BLACK, Color.WHITE, Color.BLACK]
        assert gs.active_color == Color.WHITE
        assert gs.ply_count == 4

    def test_capture_is_recorded_for_mover(self) -> None:
        gs = GameState()
        entries = play(gs, "e2e4", "d7d5", "e4d5")
        assert entries[-1] == "white pawn e4xd5"
        assert gs.captured[Color.WHITE] == [Piece(Color.BLACK, PieceType.PAWN)]
        assert gs.captured[Color.BLACK] == []
        snap = gs.snapshot()
        assert snap.captured[Color.WHITE] == (Piece(Color.BLACK, PieceType.PAWN),)
        assert snap.captured[Color.BLACK] == ()

    def test_empty_from_square_raises(self) -> None:
        with pytest.raises(ValueError):
            GameState().apply_move(E4, parse_square("e5"))

    def test_terminal_state_raises(self) -> None:
        gs = GameState()
        play(gs, "f2f3", "e7e5", "g2g4", "d8h4")
        with pytest.raises(RuntimeError):
            gs.apply_move(A2, parse_square("a3"))


class TestPromotion:
    def test_white_pawn_becomes_queen(self) -> None:
        gs = GameState(board=Board.from_placement("7k/P7/8/8/8/8/8/K7"))
        entry = gs.apply_move(A7, A8)
        assert gs.board[A8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert gs.status == GameStatus.CHECK
        assert entry == "white pawn a7-a8=Q+"

    def test_black_pawn_becomes_queen(self) -> None:
        gs = GameState(
            board=Board.from_placement("k7/8/8/8/8/8/p7/7K"),
            active_color=Color.BLACK,
        )
        entry = gs.apply_move(A2, A1)
        assert gs.board[A1] == Piece(Color.BLACK, PieceType.QUEEN)
        assert entry == "black pawn a2-a1=Q+"
        assert gs.active_color == Color.WHITE

    def test_capture_promotion(self) -> None:
        gs = GameState(board=Board.from_placement("1r5k/P7/8/8/8/8/8/K7"))
        entry = gs.apply_move(A7, B8)
        assert gs.board[B8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert gs.captured[Color.WHITE] == [Piece(Color.BLACK, PieceType.ROOK)]
        assert entry == "white pawn a7xb8=Q+"

    def test_no_promotion_before_far_rank(self) -> None:
        gs = GameState()
        play(gs, "e2e4")
        assert gs.board[E4] == Piece(Color.WHITE, PieceType.PAWN)


class TestGameEnd:
    def test_fools_mate(self) -> None:
        gs = GameState()
        gs.running = True
        entries = play(gs, "f2f3", "e7e5", "g2g4", "d8h4")
        assert gs.status == GameStatus.CHECKMATE
        assert gs.winner == Color.BLACK
        assert gs.is_game_over
        assert not gs.running
        assert entries[-1] == "black queen d8-h4#"

    def test_white_mates(self) -> None:
        gs = GameState()
        entries = play(gs, "e2e4", "f7f6", "d2d4", "g7g5", "d1h5")
        assert gs.status == GameStatus.CHECKMATE
        assert gs.winner == Color.WHITE
        assert entries[-1] == "white queen d1-h5#"

    def test_stalemate(self) -> None:
        gs = GameState(board=Board.from_placement("7k/8/5K2/6Q1/8/8/8/8"))
        gs.running = True
        entry = play(gs, "g5g6")[0]
        assert gs.status == GameStatus.STALEMATE
        assert gs.winner is None
        assert not gs.running
        assert entry == "white queen g5-g6"

    def test_flag_fall(self) -> None:
        gs = GameState()
        gs.running = True
        gs.flag_fall(Color.WHITE)
        assert gs.status == GameStatus.TIME_FORFEIT
        assert gs.winner == Color.BLACK
        assert not gs.running
        assert gs.report().winner == Color.BLACK

    def test_flag_fall_only_for_side_to_move(self) -> None:
        gs = GameState()
        with pytest.raises(ValueError):
            gs.flag_fall(Color.BLACK)
        assert gs.status == GameStatus.IN_PROGRESS


class TestQueries:
    def test_legal_moves_from_own_piece(self) -> None:
        gs = GameState()
        assert {m.to_sq for m in gs.legal_moves_from(E2)} == {parse_square("e3"), E4}

    def test_legal_moves_from_opponent_piece(self) -> None:
        assert GameState().legal_moves_from(E7) == []

    def test_legal_moves_from_empty_square(self) -> None:
        assert GameState().legal_moves_from(E4) == []

    def test_legal_moves_from_off_board(self) -> None:
        assert GameState().legal_moves_from(Square(8, 8)) == []

    def test_no_legal_moves_after_game_over(self) -> None:
        gs = GameState()
        gs.flag_fall(Color.WHITE)
        assert gs.legal_moves_from(E2) == []


class TestSnapshot:
    def test_snapshot_is_detached(self) -> None:
        gs = GameState()
        snap = gs.snapshot()
        play(gs, "e2e4")
        assert snap.board[E2] is not None
        assert snap.move_history == ()
        assert snap.active_color == Color.WHITE

    def test_snapshot_is_read_only(self) -> None:
        gs = GameState()
        play(gs, "e2e4", "d7d5", "e4d5")
        snap = gs.snapshot()
        assert snap.captured[Color.WHITE] == (Piece(Color.BLACK, PieceType.PAWN),)
        with pytest.raises(TypeError):
            snap.captured[Color.BLACK] = ()  # type: ignore[index]
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.status = GameStatus.CHECKMATE  # type: ignore[misc]

    def test_snapshot_reports_winner(self) -> None:
        gs = GameState()
        play(gs, "f2f3", "e7e5", "g2g4", "d8h4")
        snap = gs.snapshot()
        assert snap.is_game_over
        assert snap.winner == Color.BLACK
        assert snap.clock is None


class TestInvariants:
    def test_walk_keeps_turns_and_captures_consistent(self) -> None:
        gs = GameState()
        for ply in range(60):
            if gs.is_game_over:
                break
            mover = gs.active_color
            moves = MoveGenerator(gs.board).legal_moves(mover)
            assert moves
            move = moves[(ply * 7) % len(moves)]
            gs.apply_move(move.from_sq, move.to_sq)

            assert gs.active_color == mover.opposite
            for color in Color:
                lost = 16 - len(list(gs.board.occupied(color)))
                assert len(gs.captured[color.opposite]) == lost
                assert all(p.color == color for p in gs.captured[color.opposite])
        assert gs.ply_count == len(gs.move_history)
