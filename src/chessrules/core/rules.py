"""High-level chess rules: check, checkmate, stalemate, game result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult
from chessrules.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Every *color* argument defaults to the board's side to move.
    """

    # Draw policy: stalemate is the only draw recognised.

    @staticmethod
    def is_legal_move(board: Board, from_sq: Square, to_sq: Square) -> bool:
        return MoveGenerator(board).is_legal_move(from_sq, to_sq)

    @staticmethod
    def has_any_legal_move(board: Board, color: Color | None = None) -> bool:
        return MoveGenerator(board).has_any_legal_move(color)

    @staticmethod
    def is_in_check(board: Board, color: Color | None = None) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color | None = None) -> bool:
        gen = MoveGenerator(board)
        return gen.is_in_check(color) and not gen.has_any_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color | None = None) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_in_check(color) and not gen.has_any_legal_move(color)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Result as seen at the start of the side to move's turn."""
        gen = MoveGenerator(board)
        if gen.has_any_legal_move():
            return GameResult.IN_PROGRESS

        if gen.is_in_check():
            return (
                GameResult.BLACK_WINS
                if board.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
