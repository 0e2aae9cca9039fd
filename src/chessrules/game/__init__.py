"""Game management layer — turn-taking command surface over the core.

Quick start::

    from chessrules.core.types import E2, E4
    from chessrules.game import GameState

    game = GameState()
    game.setup()
    record = game.play(E2, E4)
"""

from chessrules.game.interfaces import GameEndReason, GamePhase
from chessrules.game.state import GameState, IllegalMoveError, MoveRecord

__all__ = [
    "GameEndReason",
    "GamePhase",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
]
