"""A validated chess position with move legality and generation.

A :class:`Position` is never mutated once handed out: :meth:`Position.make_move`
returns a new instance.  Internally the engine keeps plain ``int`` bitboards
and only wraps them in :class:`BitBoard` / :class:`Square` at the public
boundary.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Final

from libchess.core.bitboard import FULL_MASK, BitBoard
from libchess.core.builder import BoardBuilder
from libchess.core.context import EngineContext, default_context
from libchess.core.enums import (
    PROMOTION_TYPES,
    AmbiguityType,
    BoardStatus,
    CastlingRights,
    Color,
    MoveOption,
    PieceType,
)
from libchess.core.errors import (
    ColorsOverlapError,
    IllegalMoveError,
    InconsistentCastlingRightsError,
    InconsistentEnPassantError,
    InconsistentOccupancyError,
    KingCountError,
    OpponentInCheckError,
    PieceTypeOverlapError,
)
from libchess.core.move import CASTLE_KING_SIDE, CASTLE_QUEEN_SIDE, Move, PieceMove
from libchess.core.piece import Piece
from libchess.core.types import SQUARES, Square, file_of, rank_of, square_name

_PAWN: Final = PieceType.PAWN
_KNIGHT: Final = PieceType.KNIGHT
_BISHOP: Final = PieceType.BISHOP
_ROOK: Final = PieceType.ROOK
_QUEEN: Final = PieceType.QUEEN
_KING: Final = PieceType.KING

_PIECE_TYPES: Final = tuple(PieceType)

# Home squares of the king and rooks, per color (white on rank 1, black on 8).
_KING_HOME: Final = (4, 60)
_KING_SIDE_ROOK_HOME: Final = (7, 63)
_QUEEN_SIDE_ROOK_HOME: Final = (0, 56)

# (king to, rook to) for each castling, per color.
_KING_SIDE_TARGETS: Final = ((6, 5), (62, 61))
_QUEEN_SIDE_TARGETS: Final = ((2, 3), (58, 59))

# Squares that must not be attacked when castling, per color.
_KING_SIDE_TRANSIT: Final = ((5, 6), (61, 62))
_QUEEN_SIDE_TRANSIT: Final = ((3, 2), (59, 58))

_EN_PASSANT_RANK: Final = (5, 2)  # rank of a valid target when WHITE / BLACK moves


class Position:
    """Chess position: piece placement, side to move, castling, en passant.

    Also caches the pins and checks against the side to move, whether that
    side has any legal move, and the Zobrist hash.

    Build one with :meth:`default`, :meth:`from_fen`, :meth:`from_builder` or
    :meth:`from_bitboards`; construction raises a
    :class:`~libchess.core.errors.PositionError` subclass when the position
    is not a valid chess position.
    """

    __slots__ = (
        "_context",
        "_pieces",
        "_colors",
        "_combined",
        "_side",
        "_castle_rights",
        "_en_passant",
        "_halfmove_clock",
        "_fullmove_number",
        "_pinned",
        "_checks",
        "_terminal",
        "_hash",
    )

    def __init__(self) -> None:
        raise TypeError(
            "Build a Position with Position.default(), from_fen(), "
            "from_builder() or from_bitboards()"
        )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def default(cls, context: EngineContext | None = None) -> Position:
        """Standard starting position."""
        return cls.from_builder(BoardBuilder.default(), context)

    @classmethod
    def from_fen(cls, fen: str, context: EngineContext | None = None) -> Position:
        """Parse and validate a six-field FEN string."""
        return cls.from_builder(BoardBuilder.from_fen(fen), context)

    @classmethod
    def from_builder(
        cls, builder: BoardBuilder, context: EngineContext | None = None
    ) -> Position:
        """Validate a staged board and freeze it into a position."""
        pieces = [0] * 6
        colors = [0, 0]
        for sq, piece in builder.pieces():
            bit = 1 << sq
            pieces[piece.piece_type] |= bit
            colors[piece.color] |= bit
        position = cls.__new__(cls)
        position._setup(
            context or default_context(),
            pieces,
            colors,
            builder.side_to_move,
            (builder.castle_rights(Color.WHITE), builder.castle_rights(Color.BLACK)),
            builder.en_passant,
            builder.halfmove_clock,
            builder.fullmove_number,
        )
        return position

    @classmethod
    def from_bitboards(
        cls,
        pieces: Sequence[BitBoard | int],
        colors: Sequence[BitBoard | int],
        side_to_move: Color = Color.WHITE,
        castle_rights: Sequence[CastlingRights] = (
            CastlingRights.NEITHER,
            CastlingRights.NEITHER,
        ),
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        context: EngineContext | None = None,
    ) -> Position:
        """Build from raw masks: six piece-type masks (pawn..king) and two
        color masks (white, black)."""
        if len(pieces) != 6 or len(colors) != 2:
            raise InconsistentOccupancyError(
                "Expected 6 piece-type masks and 2 color masks"
            )
        piece_masks = [int(mask) for mask in pieces]
        color_masks = [int(mask) for mask in colors]
        for mask in piece_masks + color_masks:
            if not 0 <= mask <= FULL_MASK:
                raise InconsistentOccupancyError(
                    f"Mask {mask:#x} does not fit on a 64-square board"
                )
        if en_passant is not None:
            en_passant = Square.from_index(en_passant)
        position = cls.__new__(cls)
        position._setup(
            context or default_context(),
            piece_masks,
            color_masks,
            side_to_move,
            castle_rights,
            en_passant,
            halfmove_clock,
            fullmove_number,
        )
        return position

    def _setup(
        self,
        context: EngineContext,
        pieces: list[int],
        colors: list[int],
        side_to_move: Color,
        castle_rights: Sequence[CastlingRights],
        en_passant: Square | None,
        halfmove_clock: int,
        fullmove_number: int,
    ) -> None:
        self._context = context
        self._pieces = pieces
        self._colors = colors
        self._combined = colors[0] | colors[1]
        self._side = Color(side_to_move)
        self._castle_rights = [
            CastlingRights(castle_rights[0]),
            CastlingRights(castle_rights[1]),
        ]
        self._en_passant = None if en_passant is None else int(en_passant)
        self._halfmove_clock = halfmove_clock
        self._fullmove_number = fullmove_number
        self._pinned = 0
        self._checks = 0
        self._terminal = False

        self._validate()
        self._hash = context.hasher.calculate_position_hash(self)
        self._refresh()

    def _validate(self) -> None:
        pieces = self._pieces
        white, black = self._colors

        if white & black:
            raise ColorsOverlapError(
                f"Squares claimed by both colors: {_names(white & black)}"
            )

        seen = 0
        for ptype in _PIECE_TYPES:
            overlap = pieces[ptype] & seen
            if overlap:
                raise PieceTypeOverlapError(
                    f"Squares claimed by several piece types: {_names(overlap)}"
                )
            seen |= pieces[ptype]

        if seen != self._combined:
            raise InconsistentOccupancyError(
                f"Squares without both a piece type and a color: "
                f"{_names(seen ^ self._combined)}"
            )

        for color in Color:
            kings = pieces[_KING] & self._colors[color]
            if kings.bit_count() != 1:
                raise KingCountError(f"{color} has {kings.bit_count()} kings, expected 1")

        opponent = self._side.opposite
        _, checks = self._pins_and_checks(self._king_sq(opponent), opponent)
        if checks:
            raise OpponentInCheckError(f"{opponent} is in check but it is not their move")

        ep = self._en_passant
        if ep is not None:
            behind = ep - 8 if self._side == Color.WHITE else ep + 8
            if (
                rank_of(ep) != _EN_PASSANT_RANK[self._side]
                or self._combined >> ep & 1
                or not pieces[_PAWN] & self._colors[opponent] & (1 << behind)
            ):
                raise InconsistentEnPassantError(
                    f"No {opponent} pawn just double-stepped past {square_name(ep)}"
                )

        for color in Color:
            rights = self._castle_rights[color]
            own = self._colors[color]
            rooks = pieces[_ROOK] & own
            if rights != CastlingRights.NEITHER and not (
                (pieces[_KING] & own) >> _KING_HOME[color] & 1
            ):
                raise InconsistentCastlingRightsError(
                    f"{color} has castling rights but the king is not at home"
                )
            if rights.has_kingside() and not rooks >> _KING_SIDE_ROOK_HOME[color] & 1:
                raise InconsistentCastlingRightsError(
                    f"{color} has king-side castling rights without the rook"
                )
            if rights.has_queenside() and not rooks >> _QUEEN_SIDE_ROOK_HOME[color] & 1:
                raise InconsistentCastlingRightsError(
                    f"{color} has queen-side castling rights without the rook"
                )

    def _copy(self) -> Position:
        position = Position.__new__(Position)
        position._context = self._context
        position._pieces = self._pieces.copy()
        position._colors = self._colors.copy()
        position._combined = self._combined
        position._side = self._side
        position._castle_rights = self._castle_rights.copy()
        position._en_passant = self._en_passant
        position._halfmove_clock = self._halfmove_clock
        position._fullmove_number = self._fullmove_number
        position._pinned = self._pinned
        position._checks = self._checks
        position._terminal = self._terminal
        position._hash = self._hash
        return position

    def _refresh(self) -> None:
        """Recompute pins, checks and the terminal flag for the side to move."""
        side = self._side
        self._pinned, self._checks = self._pins_and_checks(self._king_sq(side), side)
        self._terminal = next(self._iter_legal_moves(), None) is None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def context(self) -> EngineContext:
        return self._context

    @property
    def side_to_move(self) -> Color:
        return self._side

    @property
    def en_passant(self) -> Square | None:
        """En-passant target square, if the last move was a pawn double step."""
        return None if self._en_passant is None else SQUARES[self._en_passant]

    @property
    def halfmove_clock(self) -> int:
        """Half-moves since the last capture or pawn move."""
        return self._halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._fullmove_number

    @property
    def zobrist_hash(self) -> int:
        """Incrementally maintained Zobrist key."""
        return self._hash

    @property
    def combined_mask(self) -> BitBoard:
        return BitBoard(self._combined)

    @property
    def check_mask(self) -> BitBoard:
        """Enemy pieces giving check to the side to move."""
        return BitBoard(self._checks)

    @property
    def pin_mask(self) -> BitBoard:
        """Pieces standing alone between the side-to-move king and a slider."""
        return BitBoard(self._pinned)

    def piece_type_mask(self, piece_type: PieceType) -> BitBoard:
        """Squares holding *piece_type* of either color."""
        return BitBoard(self._pieces[piece_type])

    def color_mask(self, color: Color) -> BitBoard:
        return BitBoard(self._colors[color])

    def castle_rights(self, color: Color) -> CastlingRights:
        return self._castle_rights[color]

    def king_square(self, color: Color) -> Square:
        return SQUARES[self._king_sq(color)]

    def piece_type_at(self, square: Square) -> PieceType | None:
        return self._piece_type_on(square)

    def color_at(self, square: Square) -> Color | None:
        bit = 1 << square
        if self._colors[Color.WHITE] & bit:
            return Color.WHITE
        if self._colors[Color.BLACK] & bit:
            return Color.BLACK
        return None

    def piece_at(self, square: Square) -> Piece | None:
        ptype = self._piece_type_on(square)
        if ptype is None:
            return None
        color = Color.WHITE if self._colors[Color.WHITE] >> square & 1 else Color.BLACK
        return Piece(ptype, color)

    def is_empty(self, square: Square) -> bool:
        return not self._combined >> square & 1

    def is_check(self) -> bool:
        return self._checks != 0

    def is_terminal(self) -> bool:
        """True when the side to move has no legal move."""
        return self._terminal

    def get_status(self) -> BoardStatus:
        if self._terminal:
            return BoardStatus.CHECKMATE if self._checks else BoardStatus.STALEMATE
        if self.is_theoretical_draw_on_board():
            return BoardStatus.THEORETICAL_DRAW
        return BoardStatus.ONGOING

    def is_theoretical_draw_on_board(self) -> bool:
        """Neither side has more than a king and one minor piece."""
        minors = self._pieces[_KNIGHT] | self._pieces[_BISHOP]
        for own in self._colors:
            count = own.bit_count()
            if count > 2 or (count == 2 and not own & minors):
                return False
        return True

    def as_fen(self) -> str:
        return str(BoardBuilder.from_position(self))

    def is_under_attack(self, square: Square) -> bool:
        """Is *square* attacked by the opponent of the side to move?"""
        return self._pins_and_checks(square, self._side)[1] != 0

    def get_pins_and_checks(self, square: Square) -> tuple[BitBoard, BitBoard]:
        """Pins and checks as if the side-to-move king stood on *square*.

        Returns ``(pinned, checkers)``.
        """
        pinned, checks = self._pins_and_checks(square, self._side)
        return BitBoard(pinned), BitBoard(checks)

    # ── Legality ─────────────────────────────────────────────────────────

    def is_legal_move(self, move: Move) -> bool:
        if move.option != MoveOption.MOVE_PIECE:
            return self._can_castle(move.option)

        pm = move.piece_move
        assert pm is not None
        side = self._side
        src = int(pm.source)
        dst = int(pm.destination)
        ptype = pm.piece_type

        if not (self._pieces[ptype] & self._colors[side]) >> src & 1:
            return False
        if not self._destinations(ptype, side, src) >> dst & 1:
            return False
        promotes = ptype == _PAWN and rank_of(dst) == side.promotion_rank
        if promotes != (pm.promotion is not None):
            return False
        return self._is_safe_after(move)

    def get_legal_moves(self) -> frozenset[Move]:
        return frozenset(self._iter_legal_moves())

    def _iter_legal_moves(self) -> Iterator[Move]:
        side = self._side
        own = self._colors[side]
        checks = self._checks
        pinned = self._pinned
        ep = self._en_passant
        promotion_rank = side.promotion_rank

        for ptype in _PIECE_TYPES:
            pieces = self._pieces[ptype] & own
            while pieces:
                lsb = pieces & -pieces
                src = lsb.bit_length() - 1
                pieces ^= lsb

                # Without check, only a pinned piece, the king or an en-passant
                # capture can expose the own king.
                trusted = not checks and not pinned & lsb and ptype != _KING
                targets = self._destinations(ptype, side, src)
                while targets:
                    tb = targets & -targets
                    dst = tb.bit_length() - 1
                    targets ^= tb

                    if ptype == _PAWN and rank_of(dst) == promotion_rank:
                        candidates = [
                            Move.piece(_PAWN, SQUARES[src], SQUARES[dst], promo)
                            for promo in PROMOTION_TYPES
                        ]
                    else:
                        candidates = [Move.piece(ptype, SQUARES[src], SQUARES[dst])]

                    if (trusted and not (ptype == _PAWN and dst == ep)) or (
                        self._is_safe_after(candidates[0])
                    ):
                        yield from candidates

        if self._can_castle(MoveOption.CASTLE_KING_SIDE):
            yield CASTLE_KING_SIDE
        if self._can_castle(MoveOption.CASTLE_QUEEN_SIDE):
            yield CASTLE_QUEEN_SIDE

    def _destinations(self, ptype: PieceType, color: Color, sq: int) -> int:
        """Pseudo-legal destination mask for a piece of *color* on *sq*."""
        tables = self._context.tables
        occupied = self._combined

        if ptype == _PAWN:
            quiet = tables.pawn_moves[color][sq] & ~occupied
            double = quiet & ~tables.king[sq]
            if double and tables.between_masks[sq * 64 + double.bit_length() - 1] & occupied:
                quiet ^= double
            enemy = self._colors[color ^ 1]
            if self._en_passant is not None:
                enemy |= 1 << self._en_passant
            return quiet | (tables.pawn_captures[color][sq] & enemy)

        if ptype == _KNIGHT:
            return tables.knight[sq] & ~self._colors[color]
        if ptype == _KING:
            return tables.king[sq] & ~self._colors[color]

        reach = tables.piece_masks(ptype)[sq] & ~self._colors[color]
        between = tables.between_masks
        base = sq * 64
        targets = 0
        while reach:
            lsb = reach & -reach
            if not between[base + lsb.bit_length() - 1] & occupied:
                targets |= lsb
            reach ^= lsb
        return targets

    def _is_safe_after(self, move: Move) -> bool:
        """Apply *move* to a scratch copy and check the mover's king."""
        mover = self._side
        scratch = self._copy()
        scratch._apply(move)
        _, checks = scratch._pins_and_checks(scratch._king_sq(mover), mover)
        return not checks

    def _can_castle(self, option: MoveOption) -> bool:
        side = self._side
        rights = self._castle_rights[side]
        if option == MoveOption.CASTLE_KING_SIDE:
            if not rights.has_kingside():
                return False
            rook = _KING_SIDE_ROOK_HOME[side]
            transit = _KING_SIDE_TRANSIT[side]
        else:
            if not rights.has_queenside():
                return False
            rook = _QUEEN_SIDE_ROOK_HOME[side]
            transit = _QUEEN_SIDE_TRANSIT[side]

        if self._checks:
            return False
        king = _KING_HOME[side]
        if self._context.tables.between_masks[king * 64 + rook] & self._combined:
            return False
        return not any(self._pins_and_checks(sq, side)[1] for sq in transit)

    def _pins_and_checks(self, square: int, color: Color) -> tuple[int, int]:
        """Pinned pieces and attackers for a *color* king standing on *square*."""
        tables = self._context.tables
        pieces = self._pieces
        enemy = self._colors[color ^ 1]
        queens = pieces[_QUEEN]

        checks = (
            (tables.knight[square] & pieces[_KNIGHT])
            | (tables.king[square] & pieces[_KING])
            | (tables.pawn_captures[color][square] & pieces[_PAWN])
        ) & enemy
        sliders = (
            (tables.bishop[square] & (pieces[_BISHOP] | queens))
            | (tables.rook[square] & (pieces[_ROOK] | queens))
        ) & enemy

        pinned = 0
        occupied = self._combined
        between = tables.between_masks
        base = square * 64
        while sliders:
            lsb = sliders & -sliders
            blockers = between[base + lsb.bit_length() - 1] & occupied
            if not blockers:
                checks |= lsb
            elif not blockers & (blockers - 1):
                pinned |= blockers
            sliders ^= lsb
        return pinned, checks

    # ── Move application ─────────────────────────────────────────────────

    def make_move(self, move: Move) -> Position:
        """Return the position after *move*; raises ``IllegalMoveError``."""
        if not self.is_legal_move(move):
            raise IllegalMoveError(move)
        position = self._copy()
        position._apply(move)
        position._refresh()
        return position

    def _apply(self, move: Move) -> None:
        """Play a pseudo-legal *move* in place, keeping the hash in step."""
        side = self._side
        enemy = side.opposite
        next_en_passant: int | None = None
        reset_clock = False

        if move.option == MoveOption.MOVE_PIECE:
            pm = move.piece_move
            assert pm is not None
            ptype = pm.piece_type
            src = int(pm.source)
            dst = int(pm.destination)

            captured = self._piece_type_on(dst)
            if captured is not None:
                self._remove(captured, enemy, dst)
                if captured == _ROOK:
                    self._revoke_rook_right(enemy, dst)
                reset_clock = True
            elif ptype == _PAWN and dst == self._en_passant and file_of(src) != file_of(dst):
                self._remove(_PAWN, enemy, dst - 8 if side == Color.WHITE else dst + 8)
                reset_clock = True

            self._remove(ptype, side, src)
            self._put(pm.promotion if pm.promotion is not None else ptype, side, dst)

            if ptype == _PAWN:
                reset_clock = True
                if abs(dst - src) == 16:
                    next_en_passant = (src + dst) // 2
            elif ptype == _KING:
                self._set_castle_rights(side, CastlingRights.NEITHER)
            elif ptype == _ROOK:
                self._revoke_rook_right(side, src)
        else:
            if move.option == MoveOption.CASTLE_KING_SIDE:
                king_to, rook_to = _KING_SIDE_TARGETS[side]
                rook_from = _KING_SIDE_ROOK_HOME[side]
            else:
                king_to, rook_to = _QUEEN_SIDE_TARGETS[side]
                rook_from = _QUEEN_SIDE_ROOK_HOME[side]
            self._remove(_KING, side, _KING_HOME[side])
            self._put(_KING, side, king_to)
            self._remove(_ROOK, side, rook_from)
            self._put(_ROOK, side, rook_to)
            self._set_castle_rights(side, CastlingRights.NEITHER)

        self._set_en_passant(next_en_passant)
        self._halfmove_clock = 0 if reset_clock else self._halfmove_clock + 1
        if side == Color.BLACK:
            self._fullmove_number += 1
        self._side = enemy
        self._hash ^= self._context.hasher.black_to_move_value()

    # ── Incremental bookkeeping ──────────────────────────────────────────

    def _put(self, ptype: PieceType, color: Color, sq: int) -> None:
        bit = 1 << sq
        self._pieces[ptype] |= bit
        self._colors[color] |= bit
        self._combined |= bit
        self._hash ^= self._context.hasher.piece_value(ptype, color, sq)

    def _remove(self, ptype: PieceType, color: Color, sq: int) -> None:
        bit = ~(1 << sq)
        self._pieces[ptype] &= bit
        self._colors[color] &= bit
        self._combined &= bit
        self._hash ^= self._context.hasher.piece_value(ptype, color, sq)

    def _set_castle_rights(self, color: Color, rights: CastlingRights) -> None:
        current = self._castle_rights[color]
        if rights == current:
            return
        hasher = self._context.hasher
        self._hash ^= hasher.castling_value(color, current)
        self._castle_rights[color] = rights
        self._hash ^= hasher.castling_value(color, rights)

    def _revoke_rook_right(self, color: Color, sq: int) -> None:
        if sq == _KING_SIDE_ROOK_HOME[color]:
            self._set_castle_rights(
                color, self._castle_rights[color] - CastlingRights.KING_SIDE
            )
        elif sq == _QUEEN_SIDE_ROOK_HOME[color]:
            self._set_castle_rights(
                color, self._castle_rights[color] - CastlingRights.QUEEN_SIDE
            )

    def _set_en_passant(self, sq: int | None) -> None:
        if sq == self._en_passant:
            return
        hasher = self._context.hasher
        if self._en_passant is not None:
            self._hash ^= hasher.en_passant_value(self._en_passant & 7)
        self._en_passant = sq
        if sq is not None:
            self._hash ^= hasher.en_passant_value(sq & 7)

    def _piece_type_on(self, sq: int) -> PieceType | None:
        bit = 1 << sq
        if not self._combined & bit:
            return None
        for ptype in _PIECE_TYPES:
            if self._pieces[ptype] & bit:
                return ptype
        raise RuntimeError(f"Occupied square {square_name(sq)} has no piece type")

    def _king_sq(self, color: Color) -> int:
        return (self._pieces[_KING] & self._colors[color]).bit_length() - 1

    # ── Notation support ─────────────────────────────────────────────────

    def get_move_ambiguity_type(self, piece_move: PieceMove) -> AmbiguityType:
        """Source information needed to write *piece_move* unambiguously."""
        move = Move(MoveOption.MOVE_PIECE, piece_move)
        if not self.is_legal_move(move):
            raise IllegalMoveError(move)

        ptype = piece_move.piece_type
        src = int(piece_move.source)
        if ptype == _PAWN:
            if file_of(src) != file_of(int(piece_move.destination)):
                return AmbiguityType.EXTRA_FILE
            return AmbiguityType.NEITHER
        if ptype == _KING:
            return AmbiguityType.NEITHER

        rivals = self._pieces[ptype] & self._colors[self._side] & ~(1 << src)
        ambiguous = False
        shares_file = False
        while rivals:
            lsb = rivals & -rivals
            other = lsb.bit_length() - 1
            rivals ^= lsb
            candidate = Move.piece(ptype, SQUARES[other], piece_move.destination)
            if self.is_legal_move(candidate):
                ambiguous = True
                shares_file = shares_file or file_of(other) == file_of(src)

        if not ambiguous:
            return AmbiguityType.NEITHER
        return AmbiguityType.EXTRA_SQUARE if shares_file else AmbiguityType.EXTRA_FILE

    def is_capture(self, move: Move) -> bool:
        """Would *move* capture a piece here (en passant included)?"""
        if move.option != MoveOption.MOVE_PIECE:
            return False
        pm = move.piece_move
        assert pm is not None
        dst = int(pm.destination)
        if self._colors[self._side ^ 1] >> dst & 1:
            return True
        return (
            pm.piece_type == _PAWN
            and dst == self._en_passant
            and file_of(int(pm.source)) != file_of(dst)
        )

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._pieces == other._pieces
            and self._colors == other._colors
            and self._side == other._side
            and self._castle_rights == other._castle_rights
            and self._en_passant == other._en_passant
            and self._halfmove_clock == other._halfmove_clock
            and self._fullmove_number == other._fullmove_number
        )

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.as_fen()

    def __repr__(self) -> str:
        return f"Position({self.as_fen()!r})"


def _names(mask: int) -> str:
    return ", ".join(str(sq) for sq in BitBoard(mask))
