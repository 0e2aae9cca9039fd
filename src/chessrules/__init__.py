"""Two-player chess rules engine."""

from chessrules.core import (
    Board,
    Color,
    GameResult,
    MissingKingError,
    Move,
    MoveFlag,
    MoveGenerator,
    Piece,
    PieceType,
    Rules,
    Square,
)
from chessrules.game import GameEndReason, GamePhase, GameState, IllegalMoveError

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "GameEndReason",
    "GamePhase",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "MissingKingError",
    "Move",
    "MoveFlag",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Rules",
    "Square",
]
