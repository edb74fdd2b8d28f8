"""Game management layer — action sequencing, status and history.

Quick start::

    from libchess.core import Move
    from libchess.game import Action, Game

    game = Game.default()
    game.apply(Action.make_move(Move.from_str("e2e4")))
    print(game.status, game.history)
"""

from libchess.game.history import AnnotatedMove, GameHistory
from libchess.game.state import (
    Action,
    ActionKind,
    DrawOffer,
    Game,
    GameOutcome,
    GameStatus,
)

__all__ = [
    "Action",
    "ActionKind",
    "AnnotatedMove",
    "DrawOffer",
    "Game",
    "GameHistory",
    "GameOutcome",
    "GameStatus",
]
