"""Core domain layer — positions, move legality and generation, hashing.

Quick start::

    from libchess.core import Move, Position

    pos = Position.default()
    for move in pos.get_legal_moves():
        print(move)
    pos = pos.make_move(Move.from_str("e2e4"))
"""

from libchess.core.attacks import AttackTables, Direction
from libchess.core.bitboard import BLANK, BitBoard
from libchess.core.builder import STARTING_FEN, BoardBuilder
from libchess.core.context import EngineContext, default_context
from libchess.core.enums import (
    AmbiguityType,
    BoardStatus,
    CastlingRights,
    Color,
    MoveOption,
    PieceType,
)
from libchess.core.errors import (
    ChessError,
    ColorsOverlapError,
    CoordinateError,
    DrawOfferNeedsAnswerError,
    DrawOfferNotFoundError,
    FenParseError,
    GameError,
    GameFinishedError,
    IllegalActionError,
    IllegalMoveError,
    InconsistentCastlingRightsError,
    InconsistentEnPassantError,
    InconsistentOccupancyError,
    InvalidFileError,
    InvalidPromotionError,
    InvalidRankError,
    InvalidSquareError,
    KingCountError,
    MoveParseError,
    OpponentInCheckError,
    PieceParseError,
    PieceTypeOverlapError,
    PositionError,
)
from libchess.core.move import Move, PieceMove
from libchess.core.piece import Piece
from libchess.core.position import Position
from libchess.core.render import render_board
from libchess.core.types import File, Rank, Square
from libchess.core.zobrist import DEFAULT_SEED, ZobristHasher

__all__ = [
    # Enums
    "AmbiguityType",
    "BoardStatus",
    "CastlingRights",
    "Color",
    "MoveOption",
    "PieceType",
    # Coordinates / sets
    "BLANK",
    "BitBoard",
    "File",
    "Rank",
    "Square",
    # Tables
    "AttackTables",
    "DEFAULT_SEED",
    "Direction",
    "EngineContext",
    "ZobristHasher",
    "default_context",
    # Domain objects
    "BoardBuilder",
    "Move",
    "Piece",
    "PieceMove",
    "Position",
    "STARTING_FEN",
    "render_board",
    # Errors
    "ChessError",
    "ColorsOverlapError",
    "CoordinateError",
    "DrawOfferNeedsAnswerError",
    "DrawOfferNotFoundError",
    "FenParseError",
    "GameError",
    "GameFinishedError",
    "IllegalActionError",
    "IllegalMoveError",
    "InconsistentCastlingRightsError",
    "InconsistentEnPassantError",
    "InconsistentOccupancyError",
    "InvalidFileError",
    "InvalidPromotionError",
    "InvalidRankError",
    "InvalidSquareError",
    "KingCountError",
    "MoveParseError",
    "OpponentInCheckError",
    "PieceParseError",
    "PieceTypeOverlapError",
    "PositionError",
]
