"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square

Placement = tuple[PieceType, Color, Square]
BoardFactory = Callable[..., Board]


def build_board(
    *placements: Placement,
    side_to_move: Color = Color.WHITE,
    moved: bool = False,
) -> Board:
    """Board holding only *placements*; pieces are flagged as moved on request."""
    board = Board(side_to_move)
    for piece_type, color, sq in placements:
        board.place(piece_type, color, sq, has_moved=moved)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Factory for hand-built positions."""
    return build_board


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
