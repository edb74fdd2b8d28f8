"""Unchecked staging area for constructing positions.

The builder only checks that a FEN-like string is well formed.  Whether the
result is a legal chess position is decided when a
:class:`~libchess.core.position.Position` is built from it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from libchess.core.enums import CastlingRights, Color, PieceType
from libchess.core.errors import CoordinateError, FenParseError, PieceParseError
from libchess.core.piece import Piece
from libchess.core.types import SQUARES, Square, make_square

if TYPE_CHECKING:
    from libchess.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_CASTLING_CHARS: dict[str, tuple[Color, CastlingRights]] = {
    "K": (Color.WHITE, CastlingRights.KING_SIDE),
    "Q": (Color.WHITE, CastlingRights.QUEEN_SIDE),
    "k": (Color.BLACK, CastlingRights.KING_SIDE),
    "q": (Color.BLACK, CastlingRights.QUEEN_SIDE),
}

_DIGITS = "0123456789"


def _is_counter(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


class BoardBuilder:
    """Mutable piece-per-square array plus the remaining FEN fields."""

    __slots__ = (
        "_squares",
        "side_to_move",
        "_castle_rights",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.side_to_move = Color.WHITE
        self._castle_rights = [CastlingRights.NEITHER, CastlingRights.NEITHER]
        self.en_passant: Square | None = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def castle_rights(self, color: Color) -> CastlingRights:
        return self._castle_rights[color]

    def set_castle_rights(self, color: Color, rights: CastlingRights) -> None:
        self._castle_rights[color] = rights

    def setup(self, pieces: Iterable[tuple[Square, Piece]]) -> BoardBuilder:
        """Place *pieces* on the board; returns ``self`` for chaining."""
        for sq, piece in pieces:
            self._squares[sq] = piece
        return self

    def pieces(self) -> list[tuple[Square, Piece]]:
        """Occupied squares in index order."""
        return [
            (SQUARES[sq], piece)
            for sq, piece in enumerate(self._squares)
            if piece is not None
        ]

    # -- Factories ----------------------------------------------------------

    @classmethod
    def default(cls) -> BoardBuilder:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(pt, Color.WHITE)
            b[make_square(f, 1)] = Piece(PieceType.PAWN, Color.WHITE)
            b[make_square(f, 6)] = Piece(PieceType.PAWN, Color.BLACK)
            b[make_square(f, 7)] = Piece(pt, Color.BLACK)
        b._castle_rights = [CastlingRights.BOTH_SIDES, CastlingRights.BOTH_SIDES]
        return b

    @classmethod
    def from_position(cls, position: Position) -> BoardBuilder:
        b = cls()
        for sq in range(64):
            b._squares[sq] = position.piece_at(SQUARES[sq])
        b.side_to_move = position.side_to_move
        b._castle_rights = [
            position.castle_rights(Color.WHITE),
            position.castle_rights(Color.BLACK),
        ]
        b.en_passant = position.en_passant
        b.halfmove_clock = position.halfmove_clock
        b.fullmove_number = position.fullmove_number
        return b

    @classmethod
    def from_fen(cls, fen: str) -> BoardBuilder:
        """Parse a six-field FEN string."""
        parts = fen.split(" ")
        if len(parts) != 6:
            raise FenParseError(fen, "expected 6 space-separated fields")

        placement, side_part, castling_part, ep_part, halfmove, fullmove = parts
        b = cls()

        # 1. Piece placement
        ranks = placement.split("/")
        if len(ranks) != 8:
            raise FenParseError(fen, "board must contain 8 ranks")
        for rank_idx, rank_text in enumerate(ranks):
            rank = 7 - rank_idx
            file = 0
            for ch in rank_text:
                if ch in _DIGITS:
                    step = int(ch)
                    if not 1 <= step <= 8:
                        raise FenParseError(fen, f"invalid digit {ch!r}")
                    file += step
                else:
                    if file >= 8:
                        raise FenParseError(fen, f"rank {rank + 1} is too wide")
                    try:
                        b[make_square(file, rank)] = Piece.from_char(ch)
                    except PieceParseError as exc:
                        raise FenParseError(fen, str(exc)) from exc
                    file += 1
                if file > 8:
                    raise FenParseError(fen, f"rank {rank + 1} is too wide")
            if file != 8:
                raise FenParseError(fen, f"rank {rank + 1} does not have 8 squares")

        # 2. Side to move
        if side_part == "w":
            b.side_to_move = Color.WHITE
        elif side_part == "b":
            b.side_to_move = Color.BLACK
        else:
            raise FenParseError(fen, f"invalid side to move {side_part!r}")

        # 3. Castling
        if castling_part != "-":
            seen: set[str] = set()
            for ch in castling_part:
                right = _CASTLING_CHARS.get(ch)
                if right is None or ch in seen:
                    raise FenParseError(fen, f"invalid castling field {castling_part!r}")
                seen.add(ch)
                color, side = right
                b._castle_rights[color] = b._castle_rights[color] + side

        # 4. En passant
        if ep_part != "-":
            try:
                b.en_passant = Square.from_str(ep_part)
            except CoordinateError as exc:
                raise FenParseError(fen, f"invalid en-passant square {ep_part!r}") from exc

        # 5–6. Counters
        if not _is_counter(halfmove):
            raise FenParseError(fen, f"invalid halfmove clock {halfmove!r}")
        if not _is_counter(fullmove):
            raise FenParseError(fen, f"invalid fullmove number {fullmove!r}")
        b.halfmove_clock = int(halfmove)
        b.fullmove_number = int(fullmove)

        return b

    # -- Serialisation --------------------------------------------------------

    def __str__(self) -> str:
        """FEN string."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            empty = 0
            row = ""
            for file in range(8):
                piece = self._squares[make_square(file, rank)]
                if piece is None:
                    empty += 1
                else:
                    if empty:
                        row += str(empty)
                        empty = 0
                    row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)

        side_str = "w" if self.side_to_move == Color.WHITE else "b"

        castling_str = str(self._castle_rights[Color.WHITE]).upper() + str(
            self._castle_rights[Color.BLACK]
        )
        if not castling_str:
            castling_str = "-"

        ep_str = str(self.en_passant) if self.en_passant is not None else "-"

        return (
            f"{'/'.join(rows)} {side_str} {castling_str} {ep_str} "
            f"{self.halfmove_clock} {self.fullmove_number}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardBuilder):
            return NotImplemented
        return str(self) == str(other)

    def __repr__(self) -> str:
        return f"BoardBuilder({str(self)!r})"
