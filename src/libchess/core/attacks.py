"""Precomputed attack, ray and between tables.

All tables are plain tuples of ``int`` masks indexed by square.  Sliding
tables ignore occupancy; blocking is resolved at query time by intersecting
:meth:`AttackTables.between` with the board occupancy.
"""

from __future__ import annotations

from enum import IntEnum

from libchess.core.bitboard import BitBoard
from libchess.core.enums import Color, PieceType
from libchess.core.types import Square, make_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Direction(IntEnum):
    """The eight ray directions."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    NORTH_EAST = 4
    NORTH_WEST = 5
    SOUTH_EAST = 6
    SOUTH_WEST = 7


# (file delta, rank delta) per Direction.
_DIRECTION_STEPS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

ROOK_DIRS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)
BISHOP_DIRS: tuple[Direction, ...] = (
    Direction.NORTH_EAST,
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
)


# -- Table builders ----------------------------------------------------------


def _build_offset_masks(offsets: tuple[tuple[int, int], ...]) -> tuple[int, ...]:
    masks: list[int] = []
    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3
        mask = 0
        for df, dr in offsets:
            af = file_idx + df
            ar = rank_idx + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                mask |= 1 << make_square(af, ar)
        masks.append(mask)
    return tuple(masks)


def _build_rays() -> tuple[tuple[int, ...], ...]:
    rays: list[tuple[int, ...]] = []
    for df, dr in _DIRECTION_STEPS:
        per_square: list[int] = []
        for sq in range(64):
            af = (sq & 7) + df
            ar = (sq >> 3) + dr
            mask = 0
            while 0 <= af < 8 and 0 <= ar < 8:
                mask |= 1 << make_square(af, ar)
                af += df
                ar += dr
            per_square.append(mask)
        rays.append(tuple(per_square))
    return tuple(rays)


def _union_rays(
    rays: tuple[tuple[int, ...], ...], directions: tuple[Direction, ...]
) -> tuple[int, ...]:
    masks: list[int] = []
    for sq in range(64):
        mask = 0
        for direction in directions:
            mask |= rays[direction][sq]
        masks.append(mask)
    return tuple(masks)


def _build_pawn_moves() -> tuple[tuple[int, ...], tuple[int, ...]]:
    white_masks: list[int] = [0] * 64
    black_masks: list[int] = [0] * 64

    for sq in range(64):
        rank_idx = sq >> 3

        if rank_idx < 7:
            white_masks[sq] |= 1 << (sq + 8)
        if rank_idx == 1:
            white_masks[sq] |= 1 << (sq + 16)

        if rank_idx > 0:
            black_masks[sq] |= 1 << (sq - 8)
        if rank_idx == 6:
            black_masks[sq] |= 1 << (sq - 16)

    return (tuple(white_masks), tuple(black_masks))


def _build_pawn_captures() -> tuple[tuple[int, ...], tuple[int, ...]]:
    white_masks: list[int] = [0] * 64
    black_masks: list[int] = [0] * 64

    for sq in range(64):
        file_idx = sq & 7
        rank_idx = sq >> 3

        white_mask = 0
        if rank_idx < 7:
            if file_idx > 0:
                white_mask |= 1 << make_square(file_idx - 1, rank_idx + 1)
            if file_idx < 7:
                white_mask |= 1 << make_square(file_idx + 1, rank_idx + 1)

        black_mask = 0
        if rank_idx > 0:
            if file_idx > 0:
                black_mask |= 1 << make_square(file_idx - 1, rank_idx - 1)
            if file_idx < 7:
                black_mask |= 1 << make_square(file_idx + 1, rank_idx - 1)

        white_masks[sq] = white_mask
        black_masks[sq] = black_mask

    return (tuple(white_masks), tuple(black_masks))


def _build_between() -> tuple[int | None, ...]:
    """Flat 64x64 table; entry ``a * 64 + b`` is symmetric in a and b."""
    table: list[int | None] = [None] * 4096
    for a in range(64):
        fa, ra = a & 7, a >> 3
        for b in range(64):
            df = (b & 7) - fa
            dr = (b >> 3) - ra
            if df and dr and abs(df) != abs(dr):
                continue
            step_f = (df > 0) - (df < 0)
            step_r = (dr > 0) - (dr < 0)
            mask = 0
            f, r = fa + step_f, ra + step_r
            for _ in range(max(abs(df), abs(dr)) - 1):
                mask |= 1 << make_square(f, r)
                f += step_f
                r += step_r
            table[a * 64 + b] = mask
    return tuple(table)


class AttackTables:
    """Immutable lookup tables shared by every position.

    The raw ``int`` tuples are public for the engine's hot paths; the
    methods wrap single lookups in :class:`BitBoard` for callers.
    """

    __slots__ = (
        "knight",
        "king",
        "rays",
        "bishop",
        "rook",
        "queen",
        "pawn_moves",
        "pawn_captures",
        "between_masks",
    )

    def __init__(self) -> None:
        self.knight = _build_offset_masks(KNIGHT_OFFSETS)
        self.king = _build_offset_masks(KING_OFFSETS)
        self.rays = _build_rays()
        self.bishop = _union_rays(self.rays, BISHOP_DIRS)
        self.rook = _union_rays(self.rays, ROOK_DIRS)
        self.queen = _union_rays(self.rays, BISHOP_DIRS + ROOK_DIRS)
        self.pawn_moves = _build_pawn_moves()
        self.pawn_captures = _build_pawn_captures()
        self.between_masks = _build_between()

    # ── Public lookups ───────────────────────────────────────────────────

    def moves(self, piece_type: PieceType, square: Square, color: Color) -> BitBoard:
        """Occupancy-free reach of *piece_type* from *square*.

        For pawns this is the union of quiet advances and captures.
        """
        if piece_type == PieceType.PAWN:
            mask = self.pawn_moves[color][square] | self.pawn_captures[color][square]
        else:
            mask = self.piece_masks(piece_type)[square]
        return BitBoard(mask)

    def piece_masks(self, piece_type: PieceType) -> tuple[int, ...]:
        """Per-square table for a non-pawn piece type."""
        if piece_type == PieceType.KNIGHT:
            return self.knight
        if piece_type == PieceType.BISHOP:
            return self.bishop
        if piece_type == PieceType.ROOK:
            return self.rook
        if piece_type == PieceType.QUEEN:
            return self.queen
        if piece_type == PieceType.KING:
            return self.king
        raise ValueError(f"Pawn reach depends on color: {piece_type!r}")

    def ray(self, direction: Direction, square: Square) -> BitBoard:
        return BitBoard(self.rays[direction][square])

    def pawn_advances(self, color: Color, square: Square) -> BitBoard:
        return BitBoard(self.pawn_moves[color][square])

    def pawn_attacks(self, color: Color, square: Square) -> BitBoard:
        return BitBoard(self.pawn_captures[color][square])

    def between(self, a: Square, b: Square) -> BitBoard | None:
        """Squares strictly between *a* and *b*.

        ``None`` when the squares share no rank, file or diagonal; an empty
        set when they are identical or adjacent.
        """
        mask = self.between_masks[a * 64 + b]
        return None if mask is None else BitBoard(mask)
