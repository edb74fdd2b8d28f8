"""Move value objects and move text.

Move text is ``[piece letter]<source><destination>[=<promotion letter>]``
with the piece letter omitted for pawns, or the literal ``O-O`` / ``O-O-O``
for castling, e.g. ``e2e4``, ``Ng1f3``, ``e7e8=Q``.
"""

from __future__ import annotations

from dataclasses import dataclass

from libchess.core.enums import PROMOTION_TYPES, MoveOption, PieceType
from libchess.core.errors import (
    CoordinateError,
    InvalidPromotionError,
    MoveParseError,
    PieceParseError,
)
from libchess.core.types import Square

_KING_SIDE_TEXT = "O-O"
_QUEEN_SIDE_TEXT = "O-O-O"


@dataclass(frozen=True, slots=True)
class PieceMove:
    """Move of one piece from *source* to *destination*."""

    piece_type: PieceType
    source: Square
    destination: Square
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if self.promotion is None:
            return
        if self.promotion not in PROMOTION_TYPES:
            raise InvalidPromotionError(f"Cannot promote to {self.promotion.name}")
        if self.piece_type != PieceType.PAWN:
            raise InvalidPromotionError(f"Only pawns promote, not {self.piece_type.name}")

    def __str__(self) -> str:
        text = f"{self.source}{self.destination}"
        if self.piece_type != PieceType.PAWN:
            text = self.piece_type.letter + text
        if self.promotion is not None:
            text += f"={self.promotion.letter}"
        return text


@dataclass(frozen=True, slots=True)
class Move:
    """A piece move or a castling.

    Carries no board-dependent data; whether it captures or checks is only
    known relative to a position.
    """

    option: MoveOption
    piece_move: PieceMove | None = None

    def __post_init__(self) -> None:
        if (self.option == MoveOption.MOVE_PIECE) != (self.piece_move is not None):
            raise ValueError("A piece move needs a PieceMove; castling must not have one")

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def piece(
        cls,
        piece_type: PieceType,
        source: Square,
        destination: Square,
        promotion: PieceType | None = None,
    ) -> Move:
        return cls(
            MoveOption.MOVE_PIECE,
            PieceMove(piece_type, source, destination, promotion),
        )

    @classmethod
    def castle_king_side(cls) -> Move:
        return CASTLE_KING_SIDE

    @classmethod
    def castle_queen_side(cls) -> Move:
        return CASTLE_QUEEN_SIDE

    @classmethod
    def from_str(cls, text: str) -> Move:
        """Parse move text, e.g. ``'Qd1h5'`` or ``'O-O-O'``."""
        if text == _KING_SIDE_TEXT:
            return CASTLE_KING_SIDE
        if text == _QUEEN_SIDE_TEXT:
            return CASTLE_QUEEN_SIDE

        body, sep, promo_text = text.partition("=")
        promotion: PieceType | None = None
        if sep:
            if len(promo_text) != 1 or not promo_text.isupper():
                raise MoveParseError(f"Invalid promotion in move {text!r}")
            try:
                promotion = PieceType.from_letter(promo_text)
            except PieceParseError as exc:
                raise MoveParseError(f"Invalid promotion in move {text!r}") from exc

        if len(body) == 4:
            piece_type = PieceType.PAWN
        elif len(body) == 5 and body[0].isupper():
            try:
                piece_type = PieceType.from_letter(body[0])
            except PieceParseError as exc:
                raise MoveParseError(f"Invalid piece letter in move {text!r}") from exc
            body = body[1:]
        else:
            raise MoveParseError(f"Invalid move text: {text!r}")

        try:
            source = Square.from_str(body[:2])
            destination = Square.from_str(body[2:])
        except CoordinateError as exc:
            raise MoveParseError(f"Invalid square in move {text!r}") from exc

        return cls.piece(piece_type, source, destination, promotion)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.option == MoveOption.CASTLE_KING_SIDE:
            return _KING_SIDE_TEXT
        if self.option == MoveOption.CASTLE_QUEEN_SIDE:
            return _QUEEN_SIDE_TEXT
        return str(self.piece_move)


CASTLE_KING_SIDE = Move(MoveOption.CASTLE_KING_SIDE)
CASTLE_QUEEN_SIDE = Move(MoveOption.CASTLE_QUEEN_SIDE)
