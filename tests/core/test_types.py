"""Tests for square helpers and enums."""

import pytest

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.types import (
    A1, E1, E2, E4, H8,
    ALL_SQUARES,
    is_on_board,
    parse_square,
    square_name,
)


class TestSquares:
    def test_named_constants(self) -> None:
        assert A1 == (0, 0)
        assert E1 == (0, 4)
        assert H8 == (7, 7)

    def test_square_name_roundtrip(self) -> None:
        assert square_name(E4) == "e4"
        assert parse_square("e4") == E4
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_square_name_off_board(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            square_name((8, 0))

    def test_is_on_board(self) -> None:
        assert is_on_board((0, 0))
        assert is_on_board((7, 7))
        assert not is_on_board((-1, 3))
        assert not is_on_board((3, 8))

    def test_all_squares(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert len(set(ALL_SQUARES)) == 64


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_direction_conventions(self) -> None:
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1
        assert (Color.WHITE.home_row, Color.WHITE.promotion_row) == (0, 7)
        assert (Color.BLACK.home_row, Color.BLACK.promotion_row) == (7, 0)

    def test_str(self) -> None:
        assert str(Color.BLACK) == "black"


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4, MoveFlag.DOUBLE_PAWN)) == "e2e4"

    def test_promotion_suffix(self) -> None:
        move = Move((6, 0), (7, 0), MoveFlag.PROMOTION, PieceType.QUEEN)
        assert str(move) == "a7a8q"
