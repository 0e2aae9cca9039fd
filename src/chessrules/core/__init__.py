"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveGenerator
    from chessrules.core.types import E2, E4

    board = Board.initial()
    gen = MoveGenerator(board)
    if gen.is_legal_move(E2, E4):
        board.apply_move(E2, E4)
        board.switch_turn()
"""

from chessrules.core.board import BACK_RANK, Board, MissingKingError
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import BoardView, Piece, path_clear
from chessrules.core.rules import Rules
from chessrules.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    Square,
    is_on_board,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    "is_on_board",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "BACK_RANK",
    "Board",
    "BoardView",
    "MissingKingError",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "path_clear",
]
