"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto

from libchess.core.errors import PieceParseError


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def promotion_rank(self) -> int:
        """Rank index (0–7) on which this side's pawns promote."""
        return 7 if self is Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


_PIECE_LETTERS = "PNBRQK"


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5

    @property
    def letter(self) -> str:
        """Uppercase English letter, e.g. ``N`` for a knight."""
        return _PIECE_LETTERS[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> PieceType:
        """Parse a piece letter in either case."""
        index = _PIECE_LETTERS.find(letter.upper()) if len(letter) == 1 else -1
        if index < 0:
            raise PieceParseError(f"Invalid piece letter: {letter!r}")
        return cls(index)

    def __str__(self) -> str:
        return self.letter


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


class CastlingRights(IntEnum):
    """Castling availability for one color.

    The four values form a lattice: ``+`` is union and ``-`` is relative
    complement, e.g. ``BOTH_SIDES - KING_SIDE == QUEEN_SIDE``.
    """

    NEITHER = 0
    KING_SIDE = 1
    QUEEN_SIDE = 2
    BOTH_SIDES = 3

    def __add__(self, other: object) -> CastlingRights:
        if not isinstance(other, CastlingRights):
            return NotImplemented
        return CastlingRights(self.value | other.value)

    def __sub__(self, other: object) -> CastlingRights:
        if not isinstance(other, CastlingRights):
            return NotImplemented
        return CastlingRights(self.value & ~other.value)

    def has_kingside(self) -> bool:
        return bool(self.value & CastlingRights.KING_SIDE.value)

    def has_queenside(self) -> bool:
        return bool(self.value & CastlingRights.QUEEN_SIDE.value)

    def __str__(self) -> str:
        """Lowercase FEN fragment: ``""``, ``"k"``, ``"q"`` or ``"kq"``."""
        return ("k" if self.has_kingside() else "") + (
            "q" if self.has_queenside() else ""
        )


class MoveOption(IntEnum):
    """Kind of move: a piece move or one of the two castlings."""

    MOVE_PIECE = auto()
    CASTLE_KING_SIDE = auto()
    CASTLE_QUEEN_SIDE = auto()


class BoardStatus(IntEnum):
    """Status of a single position, independent of game history."""

    ONGOING = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    THEORETICAL_DRAW = auto()


class AmbiguityType(IntEnum):
    """Extra source information needed to write a move unambiguously."""

    NEITHER = auto()
    EXTRA_FILE = auto()
    EXTRA_SQUARE = auto()
