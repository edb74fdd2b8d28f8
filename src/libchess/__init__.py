"""Chess positions, legal move generation and game bookkeeping."""

from libchess.core import (
    BitBoard,
    BoardBuilder,
    CastlingRights,
    ChessError,
    Color,
    Move,
    Piece,
    PieceMove,
    PieceType,
    Position,
    Square,
)
from libchess.game import Action, Game, GameOutcome, GameStatus

__version__ = "0.1.0"

__all__ = [
    "Action",
    "BitBoard",
    "BoardBuilder",
    "CastlingRights",
    "ChessError",
    "Color",
    "Game",
    "GameOutcome",
    "GameStatus",
    "Move",
    "Piece",
    "PieceMove",
    "PieceType",
    "Position",
    "Square",
    "__version__",
]
