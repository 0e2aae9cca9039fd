"""Tests for GameState."""

import logging

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.types import (
    A7, A8, D5, D6, D7, D8, E1, E2, E4, E5, E7, E8, F2, F3, G1, G2, G4, H4,
    parse_square,
)
from chessrules.game.interfaces import GameEndReason, GamePhase
from chessrules.game.state import GameState, IllegalMoveError

W, B = Color.WHITE, Color.BLACK


def _new_game(board: Board | None = None) -> GameState:
    gs = GameState()
    gs.setup(board)
    return gs


def _fools_mate(gs: GameState) -> None:
    gs.play(F2, F3)
    gs.play(E7, E5)
    gs.play(G2, G4)
    gs.play(D8, H4)


class TestGameStateSetup:
    def test_board_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == W

    def test_setup_default(self) -> None:
        gs = _new_game()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.end_reason == GameEndReason.NONE
        assert gs.side_to_move == W
        assert gs.last_record is None

    def test_setup_resets_finished_game(self) -> None:
        gs = _new_game()
        _fools_mate(gs)
        assert gs.is_game_over
        gs.setup()
        assert not gs.is_game_over
        assert gs.board == Board.initial()

    def test_setup_from_stalemate_ends_immediately(self, make_board) -> None:
        board = make_board(
            (PieceType.KING, B, parse_square("h8")),
            (PieceType.KING, W, parse_square("f6")),
            (PieceType.QUEEN, W, parse_square("g6")),
            side_to_move=B,
            moved=True,
        )
        gs = _new_game(board)
        assert gs.is_game_over
        assert gs.result == GameResult.DRAW
        assert gs.end_reason == GameEndReason.STALEMATE


class TestPlay:
    def test_legal_move_switches_side(self) -> None:
        gs = _new_game()
        record = gs.play(E2, E4)
        assert gs.side_to_move == B
        assert record.mover == W
        assert record.move.flag == MoveFlag.DOUBLE_PAWN
        assert not record.was_capture
        assert gs.last_record is record

    def test_moved_piece_position(self) -> None:
        gs = _new_game()
        gs.play(E2, E4)
        pawn = gs.piece_at(E4)
        assert pawn is not None and pawn.position == E4
        assert gs.piece_at(E2) is None

    def test_illegal_move_rejected(self) -> None:
        gs = _new_game()
        before = gs.board.copy()
        with pytest.raises(IllegalMoveError, match="Illegal move"):
            gs.play(E2, E5)
        assert gs.board == before
        assert gs.side_to_move == W

    def test_out_of_turn_rejected(self) -> None:
        gs = _new_game()
        with pytest.raises(IllegalMoveError):
            gs.play(E7, E5)

    def test_off_board_rejected(self) -> None:
        gs = _new_game()
        with pytest.raises(IllegalMoveError):
            gs.play((-1, 0), (9, 9))

    def test_illegal_move_error_is_value_error(self) -> None:
        assert issubclass(IllegalMoveError, ValueError)

    def test_capture_recorded(self) -> None:
        gs = _new_game()
        gs.play(E2, E4)
        gs.play(D7, D5)
        record = gs.play(E4, D5)
        assert record.was_capture

    def test_en_passant_recorded(self) -> None:
        gs = _new_game()
        gs.play(E2, E4)
        gs.play(A7, parse_square("a6"))
        gs.play(E4, E5)
        gs.play(D7, D5)
        record = gs.play(E5, D6)
        assert record.move.flag == MoveFlag.EN_PASSANT
        assert record.was_capture
        assert gs.piece_at(D5) is None

    def test_promotion_recorded(self, make_board) -> None:
        board = make_board(
            (PieceType.KING, W, E1),
            (PieceType.PAWN, W, A7),
            (PieceType.KING, B, parse_square("h6")),
            moved=True,
        )
        gs = _new_game(board)
        record = gs.play(A7, A8)
        assert record.move.promotion == PieceType.QUEEN
        queen = gs.piece_at(A8)
        assert queen is not None and queen.piece_type == PieceType.QUEEN

    def test_castling_recorded(self, make_board) -> None:
        board = make_board(
            (PieceType.KING, W, E1),
            (PieceType.ROOK, W, parse_square("h1")),
            (PieceType.KING, B, E8),
        )
        gs = _new_game(board)
        record = gs.play(E1, parse_square("g1"))
        assert record.move.flag == MoveFlag.CASTLE_KINGSIDE
        rook = gs.piece_at(parse_square("f1"))
        assert rook is not None and rook.piece_type == PieceType.ROOK


class TestGameOver:
    def test_fools_mate(self) -> None:
        gs = _new_game()
        _fools_mate(gs)
        assert gs.is_game_over
        assert gs.result == GameResult.BLACK_WINS
        assert gs.end_reason == GameEndReason.CHECKMATE
        assert gs.last_record is not None and gs.last_record.was_check
        assert gs.is_checkmate(W)

    def test_no_moves_after_game_over(self) -> None:
        gs = _new_game()
        _fools_mate(gs)
        with pytest.raises(IllegalMoveError, match="not accepting moves"):
            gs.play(E1, F2)

    def test_not_started_rejects_moves(self) -> None:
        gs = GameState()
        with pytest.raises(IllegalMoveError):
            gs.play(E2, E4)

    def test_check_does_not_end_game(self) -> None:
        gs = _new_game()
        gs.play(E2, E4)
        gs.play(parse_square("f7"), parse_square("f6"))
        record = gs.play(parse_square("d1"), parse_square("h5"))
        assert record.was_check
        assert gs.is_in_check()
        assert not gs.is_game_over

    def test_game_over_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        gs = _new_game()
        with caplog.at_level(logging.INFO, logger="chessrules.game.state"):
            _fools_mate(gs)
        assert "Game over: BLACK_WINS by CHECKMATE" in caplog.text


class TestQueries:
    def test_legal_moves_at_start(self) -> None:
        gs = _new_game()
        assert len(gs.legal_moves()) == 20

    def test_is_legal_move(self) -> None:
        gs = _new_game()
        assert gs.is_legal_move(G1, F3)
        assert not gs.is_legal_move(E2, E5)

    def test_stalemate_query(self) -> None:
        gs = _new_game()
        assert not gs.is_stalemate()
        assert not gs.is_checkmate()
        assert not gs.is_in_check(B)
