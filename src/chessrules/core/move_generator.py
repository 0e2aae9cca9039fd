"""Legal move testing and enumeration by speculative simulation.

A move is legal when the piece's own geometry allows it and, after playing it
on a throwaway copy of the board, the mover's king is not in check. The copy
is discarded immediately; the real board is never touched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece


class MoveGenerator:
    """Answers legality questions about a :class:`Board`.

    Each trial move costs one full board copy, so enumerating every move of a
    side is O(pieces × 64) copies. Nothing is cached between calls.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Single moves -------------------------------------------------------

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Legal for the side to move, own king safety included."""
        piece = self._board.piece_at(from_sq)
        if piece is None or piece.color != self._board.side_to_move:
            return False
        return self._simulate(piece, to_sq) is not None

    def is_safe_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Like :meth:`is_legal_move` but for whichever color owns the piece."""
        piece = self._board.piece_at(from_sq)
        if piece is None:
            return False
        return self._simulate(piece, to_sq) is not None

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        """All squares the piece on *from_sq* may legally move to."""
        return [sq for sq in ALL_SQUARES if self.is_legal_move(from_sq, sq)]

    # -- Whole side ---------------------------------------------------------

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """Every legal move of *color* (default: the side to move)."""
        return list(self._iter_moves(self._color_or_turn(color)))

    def has_any_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* has at least one legal move. Stops at the first."""
        return next(self._iter_moves(self._color_or_turn(color)), None) is not None

    def is_in_check(self, color: Color | None = None) -> bool:
        return self._board.is_check(self._color_or_turn(color))

    # -- Internals ----------------------------------------------------------

    def _color_or_turn(self, color: Color | None) -> Color:
        return self._board.side_to_move if color is None else color

    def _iter_moves(self, color: Color) -> Iterator[Move]:
        for piece in self._board.pieces(color):
            for to_sq in ALL_SQUARES:
                move = self._simulate(piece, to_sq)
                if move is not None:
                    yield move

    def _simulate(self, piece: Piece, to_sq: Square) -> Move | None:
        """Play the move on a copy; the classified move if the king is safe."""
        if not piece.is_valid_move(to_sq, self._board):
            return None
        trial = self._board.copy()
        move = trial.apply_move(piece.position, to_sq)
        if trial.is_check(piece.color):
            return None
        return move
