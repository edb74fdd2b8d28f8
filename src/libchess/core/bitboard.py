"""An immutable set of squares backed by a 64-bit mask."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from libchess.core.errors import InvalidSquareError
from libchess.core.types import SQUARES, File, Rank, Square, make_square

FULL_MASK: Final = 0xFFFFFFFFFFFFFFFF
_FILE_A_MASK: Final = 0x0101010101010101
_RANK_1_MASK: Final = 0xFF


@dataclass(frozen=True, slots=True)
class BitBoard:
    """Set of squares; bit *i* is set iff square *i* is a member.

    Iteration yields members least-significant bit first, i.e. a1, b1, …, h8.
    """

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= FULL_MASK:
            raise ValueError(f"BitBoard mask out of 64-bit range: {self.mask:#x}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_square(cls, square: Square) -> BitBoard:
        return cls(1 << square)

    @classmethod
    def from_squares(cls, squares: Iterable[Square]) -> BitBoard:
        mask = 0
        for sq in squares:
            mask |= 1 << sq
        return cls(mask)

    @classmethod
    def from_file(cls, file: File) -> BitBoard:
        return cls(_FILE_A_MASK << file)

    @classmethod
    def from_rank(cls, rank: Rank) -> BitBoard:
        return cls(_RANK_1_MASK << (8 * rank))

    # ── Set algebra ──────────────────────────────────────────────────────

    def __and__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.mask & other.mask)

    def __or__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.mask | other.mask)

    def __xor__(self, other: BitBoard) -> BitBoard:
        return BitBoard(self.mask ^ other.mask)

    def __invert__(self) -> BitBoard:
        return BitBoard(~self.mask & FULL_MASK)

    def __contains__(self, square: object) -> bool:
        if not isinstance(square, int) or not 0 <= square < 64:
            return False
        return bool(self.mask >> square & 1)

    def __bool__(self) -> bool:
        return self.mask != 0

    def __int__(self) -> int:
        return self.mask

    def __index__(self) -> int:
        return self.mask

    # ── Members ──────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[Square]:
        mask = self.mask
        while mask:
            lsb = mask & -mask
            yield SQUARES[lsb.bit_length() - 1]
            mask ^= lsb

    def __len__(self) -> int:
        return self.mask.bit_count()

    def count(self) -> int:
        """Population count."""
        return self.mask.bit_count()

    def first(self) -> Square | None:
        """Lowest member, or ``None`` when empty."""
        if not self.mask:
            return None
        return SQUARES[(self.mask & -self.mask).bit_length() - 1]

    def last(self) -> Square | None:
        """Highest member, or ``None`` when empty."""
        if not self.mask:
            return None
        return SQUARES[self.mask.bit_length() - 1]

    def to_square(self) -> Square:
        """Lowest member; raises when the set is empty."""
        square = self.first()
        if square is None:
            raise InvalidSquareError("Empty BitBoard has no square")
        return square

    def __str__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            rows.append(
                " ".join(
                    "X" if self.mask >> make_square(file, rank) & 1 else "."
                    for file in range(8)
                )
            )
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"BitBoard({self.mask:#018x})"


BLANK: Final = BitBoard(0)
