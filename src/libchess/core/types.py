"""Board coordinates: files, ranks and squares.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

The engine works on plain ``int`` indices internally; the enums below are
the public value types and are plain ints as well.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from libchess.core.errors import InvalidFileError, InvalidRankError, InvalidSquareError

_FILE_NAMES: Final = "abcdefgh"
_RANK_NAMES: Final = "12345678"


def file_of(sq: int) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: int) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> int:
    """Square index from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: int) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return _FILE_NAMES[sq & 7] + _RANK_NAMES[sq >> 3]


class File(IntEnum):
    """Board file a–h."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, index: int) -> File:
        if not 0 <= index < 8:
            raise InvalidFileError(f"File index out of range: {index}")
        return FILES[index]

    @classmethod
    def from_str(cls, text: str) -> File:
        if len(text) != 1 or text not in _FILE_NAMES:
            raise InvalidFileError(f"Invalid file name: {text!r}")
        return FILES[_FILE_NAMES.index(text)]

    def left(self) -> File:
        """File towards the a-file."""
        return File.from_index(self.value - 1)

    def right(self) -> File:
        """File towards the h-file."""
        return File.from_index(self.value + 1)

    def __str__(self) -> str:
        return _FILE_NAMES[self.value]


class Rank(IntEnum):
    """Board rank 1–8."""

    FIRST = 0
    SECOND = 1
    THIRD = 2
    FOURTH = 3
    FIFTH = 4
    SIXTH = 5
    SEVENTH = 6
    EIGHTH = 7

    @classmethod
    def from_index(cls, index: int) -> Rank:
        if not 0 <= index < 8:
            raise InvalidRankError(f"Rank index out of range: {index}")
        return RANKS[index]

    @classmethod
    def from_str(cls, text: str) -> Rank:
        if len(text) != 1 or text not in _RANK_NAMES:
            raise InvalidRankError(f"Invalid rank name: {text!r}")
        return RANKS[_RANK_NAMES.index(text)]

    def up(self) -> Rank:
        """Rank towards the eighth rank."""
        return Rank.from_index(self.value + 1)

    def down(self) -> Rank:
        """Rank towards the first rank."""
        return Rank.from_index(self.value - 1)

    def __str__(self) -> str:
        return _RANK_NAMES[self.value]


class Square(IntEnum):
    """One of the 64 board squares."""

    A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
    A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
    A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
    A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
    A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
    A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
    A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
    A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise InvalidSquareError(f"Square index out of range: {index}")
        return SQUARES[index]

    @classmethod
    def from_str(cls, text: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(text) != 2 or text[0] not in _FILE_NAMES or text[1] not in _RANK_NAMES:
            raise InvalidSquareError(f"Invalid square name: {text!r}")
        file = _FILE_NAMES.index(text[0])
        rank = _RANK_NAMES.index(text[1])
        return SQUARES[make_square(file, rank)]

    @classmethod
    def from_file_rank(cls, file: File, rank: Rank) -> Square:
        return SQUARES[make_square(file, rank)]

    # ── Coordinates ──────────────────────────────────────────────────────

    @property
    def file(self) -> File:
        return FILES[self.value & 7]

    @property
    def rank(self) -> Rank:
        return RANKS[self.value >> 3]

    def is_light(self) -> bool:
        return (file_of(self.value) + rank_of(self.value)) % 2 == 1

    def is_dark(self) -> bool:
        return not self.is_light()

    # ── Adjacency ────────────────────────────────────────────────────────

    def _step(self, df: int, dr: int) -> Square:
        f = file_of(self.value) + df
        r = rank_of(self.value) + dr
        if not (0 <= f < 8 and 0 <= r < 8):
            raise InvalidSquareError(f"No square next to {self} in that direction")
        return SQUARES[make_square(f, r)]

    def up(self) -> Square:
        return self._step(0, 1)

    def down(self) -> Square:
        return self._step(0, -1)

    def left(self) -> Square:
        return self._step(-1, 0)

    def right(self) -> Square:
        return self._step(1, 0)

    def __str__(self) -> str:
        return square_name(self.value)


FILES: Final[tuple[File, ...]] = tuple(File)
RANKS: Final[tuple[Rank, ...]] = tuple(Rank)
SQUARES: Final[tuple[Square, ...]] = tuple(Square)
