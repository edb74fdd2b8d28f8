"""Zobrist hashing keys for incremental position hashing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from libchess.core.enums import CastlingRights, Color, PieceType

if TYPE_CHECKING:
    from libchess.core.position import Position

DEFAULT_SEED: Final = 1370359990842121
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

# Key layout: pieces, then castling, then en-passant files, then side.
_PIECE_KEY_COUNT: Final = 2 * 6 * 64
_CASTLING_KEY_COUNT: Final = 2 * 4
_EN_PASSANT_KEY_COUNT: Final = 8


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


class ZobristHasher:
    """Table of random 64-bit values, one per position feature.

    The same *seed* always produces the same table, so hashes are stable
    across processes.
    """

    __slots__ = (
        "seed",
        "_piece_keys",
        "_castling_keys",
        "_en_passant_keys",
        "_black_key",
    )

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed

        def nth_key(index: int) -> int:
            return _splitmix64((seed + index * 0x9E3779B97F4A7C15) & _MASK_64)

        self._piece_keys: tuple[tuple[tuple[int, ...], ...], ...] = tuple(
            tuple(
                tuple(nth_key((color * 384) + (ptype * 64) + sq) for sq in range(64))
                for ptype in range(6)
            )
            for color in range(2)
        )
        base = _PIECE_KEY_COUNT
        self._castling_keys: tuple[tuple[int, ...], ...] = tuple(
            tuple(nth_key(base + color * 4 + rights) for rights in range(4))
            for color in range(2)
        )
        base += _CASTLING_KEY_COUNT
        self._en_passant_keys: tuple[int, ...] = tuple(
            nth_key(base + file) for file in range(8)
        )
        base += _EN_PASSANT_KEY_COUNT
        self._black_key = nth_key(base)

    # ── Per-feature values ───────────────────────────────────────────────

    def piece_value(self, piece_type: PieceType, color: Color, square: int) -> int:
        """Key for *color*'s *piece_type* standing on *square*."""
        return self._piece_keys[color][piece_type][square]

    def castling_value(self, color: Color, rights: CastlingRights) -> int:
        """Key for *color* holding *rights* (``NEITHER`` has its own key)."""
        return self._castling_keys[color][rights]

    def en_passant_value(self, file: int) -> int:
        """Key for an en-passant target on *file* (0–7)."""
        return self._en_passant_keys[file]

    def black_to_move_value(self) -> int:
        """Toggle key present when Black is to move."""
        return self._black_key

    # ── From scratch ─────────────────────────────────────────────────────

    def calculate_position_hash(self, position: Position) -> int:
        """Hash of *position* computed from its features alone."""
        key = 0
        for color in Color:
            color_mask = int(position.color_mask(color))
            for ptype in PieceType:
                mask = int(position.piece_type_mask(ptype)) & color_mask
                while mask:
                    lsb = mask & -mask
                    key ^= self.piece_value(ptype, color, lsb.bit_length() - 1)
                    mask ^= lsb
            key ^= self.castling_value(color, position.castle_rights(color))

        en_passant = position.en_passant
        if en_passant is not None:
            key ^= self.en_passant_value(en_passant & 7)
        if position.side_to_move == Color.BLACK:
            key ^= self.black_to_move_value()
        return key
