"""Exception hierarchy for the chess core and game layer.

Every public failure is a subclass of :class:`ChessError`.  Parsing and
construction failures additionally subclass :class:`ValueError` so callers
that only care about "bad input" can catch that.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libchess.core.move import Move


class ChessError(Exception):
    """Base class for all library errors."""


# ── Coordinates / pieces ─────────────────────────────────────────────────────


class CoordinateError(ChessError, ValueError):
    """Bad file, rank or square text, or an index off the board."""


class InvalidFileError(CoordinateError):
    pass


class InvalidRankError(CoordinateError):
    pass


class InvalidSquareError(CoordinateError):
    pass


class PieceParseError(ChessError, ValueError):
    """Unknown piece letter."""


# ── Move text ────────────────────────────────────────────────────────────────


class MoveParseError(ChessError, ValueError):
    """Malformed move string."""


class InvalidPromotionError(MoveParseError):
    """Promotion to a pawn or king, or promotion of a non-pawn."""


# ── Position construction ────────────────────────────────────────────────────


class PositionError(ChessError, ValueError):
    """A position could not be constructed."""


class FenParseError(PositionError):
    """The FEN-like construction string is malformed."""

    def __init__(self, fen: str, reason: str) -> None:
        super().__init__(f"Invalid FEN string {fen!r}: {reason}")
        self.fen = fen
        self.reason = reason


class ColorsOverlapError(PositionError):
    """A square is claimed by both colors."""


class PieceTypeOverlapError(PositionError):
    """A square is claimed by more than one piece type."""


class InconsistentOccupancyError(PositionError):
    """Piece-type occupancy differs from color occupancy."""


class KingCountError(PositionError):
    """A side does not have exactly one king."""


class OpponentInCheckError(PositionError):
    """The side that just moved is left in check."""


class InconsistentEnPassantError(PositionError):
    """En-passant target without a matching double-stepped pawn."""


class InconsistentCastlingRightsError(PositionError):
    """Castling rights held without the king and rook on their home squares."""


# ── Moves / games ────────────────────────────────────────────────────────────


class IllegalMoveError(ChessError):
    """The move is not legal in the given position."""

    def __init__(self, move: Move) -> None:
        super().__init__(f"Illegal move: {move}")
        self.move = move


class GameError(ChessError):
    """An action cannot be applied to the game in its current state."""


class IllegalActionError(GameError):
    pass


class DrawOfferNeedsAnswerError(GameError):
    """A draw offer is pending and must be accepted or declined first."""


class DrawOfferNotFoundError(GameError):
    """Accepting or declining a draw that was never offered."""


class GameFinishedError(GameError):
    """The game has already ended."""
