"""Board - piece placement on an 8x8 grid, move application and attacks."""

from __future__ import annotations

import logging

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, is_on_board

_LOGGER = logging.getLogger(__name__)

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class MissingKingError(RuntimeError):
    """A color's king is not on the board.

    This only happens when a king has been captured, which legal play never
    allows, so callers should treat it as fatal.
    """


class Board:
    """Mutable 8x8 grid owning every piece plus the side to move."""

    __slots__ = ("_grid", "side_to_move")

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self.side_to_move = side_to_move

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = self._checked(sq)
        return self._grid[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = self._checked(sq)
        if piece is not None:
            piece.position = (row, col)
        self._grid[row][col] = piece

    @staticmethod
    def _checked(sq: Square) -> Square:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        return sq

    def piece_at(self, sq: Square) -> Piece | None:
        """Live occupant of *sq*; ``None`` for empty or off-board squares."""
        if not is_on_board(sq):
            return None
        piece = self._grid[sq[0]][sq[1]]
        if piece is None or not piece.alive:
            return None
        return piece

    def is_empty(self, sq: Square) -> bool:
        return is_on_board(sq) and self.piece_at(sq) is None

    def place(
        self,
        piece_type: PieceType,
        color: Color,
        sq: Square,
        *,
        has_moved: bool = False,
    ) -> Piece:
        """Put a new piece on *sq*, replacing whatever was there."""
        piece = Piece(piece_type, color, sq, has_moved=has_moved)
        self[sq] = piece
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """Live pieces of *color* in row-major order."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and piece.alive and piece.color == color
        ]

    def king_square(self, color: Color) -> Square:
        """Return the square of *color*'s live king."""
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return piece.position
        raise MissingKingError(f"No {color.name} king on board")

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any live piece of *by_color*?"""
        if not is_on_board(sq):
            return False
        return any(piece.attacks_square(sq, self) for piece in self.pieces(by_color))

    def is_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_square_attacked(self.king_square(color), color.opposite)

    # -- Mutation -----------------------------------------------------------

    def switch_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def clear_en_passant_flags(self) -> None:
        for row in self._grid:
            for piece in row:
                if piece is not None and piece.piece_type == PieceType.PAWN:
                    piece.en_passant_eligible = False

    def apply_move(self, from_sq: Square, to_sq: Square) -> Move:
        """Move the piece on *from_sq* to *to_sq* with all side effects.

        The move is not validated and the turn is not switched. Returns the
        move classified by what happened (castling, en passant, promotion).
        """
        piece = self.piece_at(from_sq)
        if piece is None:
            raise ValueError(f"No piece on {from_sq!r}")

        self.clear_en_passant_flags()

        flag = MoveFlag.NORMAL
        promotion: PieceType | None = None
        row, col = from_sq
        d_row = to_sq[0] - row
        d_col = to_sq[1] - col

        if piece.piece_type == PieceType.KING and abs(d_col) == 2:
            step = 1 if d_col > 0 else -1
            rook_from = (row, BOARD_SIZE - 1 if step > 0 else 0)
            self._relocate(rook_from, (row, to_sq[1] - step))
            flag = MoveFlag.CASTLE_KINGSIDE if step > 0 else MoveFlag.CASTLE_QUEENSIDE
            _LOGGER.debug("%s castles, rook %s relocated", piece.color, rook_from)
        elif piece.piece_type == PieceType.PAWN:
            if d_col != 0 and self.piece_at(to_sq) is None:
                passed_sq = (row, to_sq[1])
                passed = self.piece_at(passed_sq)
                if passed is not None:
                    passed.kill()
                self._grid[row][to_sq[1]] = None
                flag = MoveFlag.EN_PASSANT
                _LOGGER.debug("En passant capture on %s", passed_sq)
            elif not piece.has_moved and abs(d_row) == 2:
                piece.en_passant_eligible = True
                flag = MoveFlag.DOUBLE_PAWN

        captured = self.piece_at(to_sq)
        if captured is not None:
            captured.kill()

        self._relocate(from_sq, to_sq)

        if (
            piece.piece_type == PieceType.PAWN
            and to_sq[0] == piece.color.promotion_row
        ):
            piece.kill()
            self[to_sq] = Piece(PieceType.QUEEN, piece.color, to_sq, has_moved=True)
            flag = MoveFlag.PROMOTION
            promotion = PieceType.QUEEN
            _LOGGER.debug("%s pawn promoted to queen on %s", piece.color, to_sq)

        return Move(from_sq, to_sq, flag, promotion)

    def _relocate(self, from_sq: Square, to_sq: Square) -> None:
        piece = self._grid[from_sq[0]][from_sq[1]]
        if piece is None:
            return
        self[to_sq] = piece
        piece.has_moved = True
        self._grid[from_sq[0]][from_sq[1]] = None

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        """Deep copy: every piece is cloned, the side to move is kept."""
        b = Board(self.side_to_move)
        b._grid = [
            [piece.copy() if piece is not None else None for piece in row]
            for row in self._grid
        ]
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, White to move."""
        b = cls()
        for col, piece_type in enumerate(BACK_RANK):
            b.place(piece_type, Color.WHITE, (Color.WHITE.home_row, col))
            b.place(piece_type, Color.BLACK, (Color.BLACK.home_row, col))
            b.place(PieceType.PAWN, Color.WHITE, (Color.WHITE.home_row + 1, col))
            b.place(PieceType.PAWN, Color.BLACK, (Color.BLACK.home_row - 1, col))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.side_to_move == other.side_to_move and self._grid == other._grid
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at((row, col))
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
