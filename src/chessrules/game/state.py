"""Game state machine — turn alternation and terminal-state tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameResult, MoveFlag
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.rules import Rules
from chessrules.game.interfaces import GameEndReason, GamePhase

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.piece import Piece
    from chessrules.core.types import Square

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """A move command was refused."""


@dataclass
class MoveRecord:
    """What happened when a move was played."""

    move: Move
    mover: Color
    was_capture: bool = False
    was_check: bool = False


@dataclass
class GameState:
    """Owns the board for one game and enforces whose turn it is.

    Terminal states are evaluated at the start of each turn, before the side
    to move is offered a move. Once the game is over it stays over.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    last_record: MoveRecord | None = field(default=None, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Initialise (or reset) the game, optionally from a prepared board."""
        self.board = board if board is not None else Board.initial()
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.last_record = None
        self._check_game_over()

    # ── Commands ─────────────────────────────────────────────────────────

    def play(self, from_sq: Square, to_sq: Square) -> MoveRecord:
        """Play a move for the side to move and hand the turn over."""
        if self.phase != GamePhase.AWAITING_MOVE:
            raise IllegalMoveError(f"Game is not accepting moves ({self.phase.name})")
        if not self.is_legal_move(from_sq, to_sq):
            raise IllegalMoveError(f"Illegal move: {from_sq!r} -> {to_sq!r}")

        mover = self.board.side_to_move
        was_capture = self.board.piece_at(to_sq) is not None
        move = self.board.apply_move(from_sq, to_sq)
        self.board.switch_turn()

        record = MoveRecord(
            move=move,
            mover=mover,
            was_capture=was_capture or move.flag == MoveFlag.EN_PASSANT,
            was_check=self.board.is_check(self.board.side_to_move),
        )
        self.last_record = record
        _LOGGER.debug("%s played %s (%s)", mover, move, move.flag.name)

        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.board.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board.piece_at(sq)

    def is_legal_move(self, from_sq: Square, to_sq: Square) -> bool:
        return MoveGenerator(self.board).is_legal_move(from_sq, to_sq)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).generate_legal_moves()

    def is_in_check(self, color: Color | None = None) -> bool:
        return Rules.is_in_check(self.board, color)

    def is_checkmate(self, color: Color | None = None) -> bool:
        return Rules.is_checkmate(self.board, color)

    def is_stalemate(self, color: Color | None = None) -> bool:
        return Rules.is_stalemate(self.board, color)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board)
        if result == GameResult.IN_PROGRESS:
            return

        self.result = result
        self.phase = GamePhase.GAME_OVER
        self.end_reason = (
            GameEndReason.STALEMATE
            if result == GameResult.DRAW
            else GameEndReason.CHECKMATE
        )
        _LOGGER.info("Game over: %s by %s", result.name, self.end_reason.name)
