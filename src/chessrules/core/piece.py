"""Piece model: per-piece state plus movement and attack geometry.

Every piece knows two things about a target square:

* :meth:`Piece.is_valid_move`: could this piece move there right now,
  given board occupancy, ignoring whether its own king would be left in check.
* :meth:`Piece.attacks_square`: does this piece threaten that square,
  regardless of what stands on it and of whose turn it is.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import BOARD_SIZE, Square, is_on_board

_FEN_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


class BoardView(Protocol):
    """Read-only board surface used by the piece geometry."""

    def piece_at(self, sq: Square) -> Piece | None: ...

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool: ...

    def is_check(self, color: Color) -> bool: ...


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def path_clear(from_sq: Square, to_sq: Square, board: BoardView) -> bool:
    """Whether every square strictly between *from_sq* and *to_sq* is empty.

    The two squares must share a row, a column or a diagonal.
    """
    d_row = _sign(to_sq[0] - from_sq[0])
    d_col = _sign(to_sq[1] - from_sq[1])
    row, col = from_sq[0] + d_row, from_sq[1] + d_col
    while (row, col) != to_sq:
        if board.piece_at((row, col)) is not None:
            return False
        row += d_row
        col += d_col
    return True


@dataclass(slots=True)
class Piece:
    """A live (or captured) piece together with its movement state."""

    piece_type: PieceType
    color: Color
    position: Square
    alive: bool = True
    has_moved: bool = False
    en_passant_eligible: bool = False

    # ── Lifecycle ────────────────────────────────────────────────────────

    def copy(self) -> Piece:
        return Piece(
            self.piece_type,
            self.color,
            self.position,
            self.alive,
            self.has_moved,
            self.en_passant_eligible,
        )

    def kill(self) -> None:
        self.alive = False

    # ── Geometry ─────────────────────────────────────────────────────────

    def is_valid_move(self, to_sq: Square, board: BoardView) -> bool:
        """Geometric and occupancy legality, ignoring own king safety."""
        if not self.alive or not is_on_board(to_sq) or to_sq == self.position:
            return False

        if self.piece_type == PieceType.PAWN:
            return _pawn_can_move(self, to_sq, board)

        if self.piece_type == PieceType.KING and _is_castling_attempt(self, to_sq):
            return _king_can_castle(self, to_sq, board)

        target = board.piece_at(to_sq)
        if target is not None and target.color == self.color:
            return False
        return _REACH[self.piece_type](self, to_sq, board)

    def attacks_square(self, sq: Square, board: BoardView) -> bool:
        """Whether this piece threatens *sq*, whatever occupies it."""
        if not self.alive or not is_on_board(sq) or sq == self.position:
            return False
        return _REACH[self.piece_type](self, sq, board)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def symbol(self) -> str:
        """FEN-style letter (uppercase = white, lowercase = black)."""
        char = _FEN_CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    def __str__(self) -> str:
        return self.symbol


# -- Per-kind reach ---------------------------------------------------------
#
# Each function answers "does the piece's geometry connect its square with
# *sq*", including path obstruction for sliders. Destination occupancy is the
# caller's concern.

_ReachFn = Callable[[Piece, Square, BoardView], bool]


def _deltas(piece: Piece, sq: Square) -> tuple[int, int]:
    return sq[0] - piece.position[0], sq[1] - piece.position[1]


def _rook_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    d_row, d_col = _deltas(piece, sq)
    return (d_row == 0 or d_col == 0) and path_clear(piece.position, sq, board)


def _bishop_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    d_row, d_col = _deltas(piece, sq)
    return abs(d_row) == abs(d_col) and path_clear(piece.position, sq, board)


def _queen_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    return _rook_reach(piece, sq, board) or _bishop_reach(piece, sq, board)


def _knight_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    d_row, d_col = _deltas(piece, sq)
    return {abs(d_row), abs(d_col)} == {1, 2}


def _king_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    d_row, d_col = _deltas(piece, sq)
    return max(abs(d_row), abs(d_col)) == 1


def _pawn_reach(piece: Piece, sq: Square, board: BoardView) -> bool:
    # Pawns threaten the two forward diagonals only.
    d_row, d_col = _deltas(piece, sq)
    return d_row == piece.color.forward and abs(d_col) == 1


_REACH: dict[PieceType, _ReachFn] = {
    PieceType.PAWN: _pawn_reach,
    PieceType.KNIGHT: _knight_reach,
    PieceType.BISHOP: _bishop_reach,
    PieceType.ROOK: _rook_reach,
    PieceType.QUEEN: _queen_reach,
    PieceType.KING: _king_reach,
}


# -- Special moves ----------------------------------------------------------


def _pawn_can_move(pawn: Piece, to_sq: Square, board: BoardView) -> bool:
    d_row, d_col = _deltas(pawn, to_sq)
    forward = pawn.color.forward
    target = board.piece_at(to_sq)

    if d_col == 0:
        if target is not None:
            return False
        if d_row == forward:
            return True
        if d_row == 2 * forward and not pawn.has_moved:
            row, col = pawn.position
            return board.piece_at((row + forward, col)) is None
        return False

    if abs(d_col) != 1 or d_row != forward:
        return False
    if target is not None:
        return target.color != pawn.color

    # En passant: the pawn being passed sits beside the mover.
    passed = board.piece_at((pawn.position[0], to_sq[1]))
    return (
        passed is not None
        and passed.piece_type == PieceType.PAWN
        and passed.color != pawn.color
        and passed.en_passant_eligible
    )


def _is_castling_attempt(king: Piece, to_sq: Square) -> bool:
    d_row, d_col = _deltas(king, to_sq)
    return d_row == 0 and abs(d_col) == 2


def _king_can_castle(king: Piece, to_sq: Square, board: BoardView) -> bool:
    # Only the square the king passes through is tested for attack, not the
    # square it lands on.
    if king.has_moved:
        return False

    row, col = king.position
    step = 1 if to_sq[1] > col else -1
    rook_sq = (row, BOARD_SIZE - 1 if step > 0 else 0)
    rook = board.piece_at(rook_sq)
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != king.color
        or rook.has_moved
    ):
        return False

    if not path_clear(king.position, rook_sq, board):
        return False
    if board.is_check(king.color):
        return False
    return not board.is_square_attacked((row, col + step), king.color.opposite)
