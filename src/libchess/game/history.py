"""Game history: positions, annotated moves and PGN-like movetext."""

from __future__ import annotations

from dataclasses import dataclass, field

from libchess.core.enums import AmbiguityType, Color, MoveOption, PieceType
from libchess.core.move import Move
from libchess.core.position import Position


@dataclass(frozen=True, slots=True)
class AnnotatedMove:
    """A move together with what it did on the board it was played on."""

    move: Move
    is_capture: bool = False
    is_check: bool = False
    is_checkmate: bool = False
    ambiguity: AmbiguityType = AmbiguityType.NEITHER

    @classmethod
    def associate(cls, move: Move, before: Position, after: Position) -> AnnotatedMove:
        """Annotate *move*, played on *before* and resulting in *after*."""
        is_check = after.is_check()
        ambiguity = AmbiguityType.NEITHER
        pm = move.piece_move
        if pm is not None and pm.piece_type != PieceType.KING:
            ambiguity = before.get_move_ambiguity_type(pm)
        return cls(
            move=move,
            is_capture=before.is_capture(move),
            is_check=is_check,
            is_checkmate=is_check and after.is_terminal(),
            ambiguity=ambiguity,
        )

    @property
    def san(self) -> str:
        """Short algebraic text, e.g. ``Nbd7``, ``exd5``, ``e8=Q+``."""
        suffix = "#" if self.is_checkmate else "+" if self.is_check else ""
        if self.move.option != MoveOption.MOVE_PIECE:
            return f"{self.move}{suffix}"

        pm = self.move.piece_move
        assert pm is not None
        text = "" if pm.piece_type == PieceType.PAWN else pm.piece_type.letter
        if self.ambiguity == AmbiguityType.EXTRA_FILE:
            text += str(pm.source.file)
        elif self.ambiguity == AmbiguityType.EXTRA_SQUARE:
            text += str(pm.source)
        if self.is_capture:
            text += "x"
        text += str(pm.destination)
        if pm.promotion is not None:
            text += f"={pm.promotion.letter}"
        return text + suffix

    def __str__(self) -> str:
        return self.san


@dataclass
class GameHistory:
    """Every position of a game and the annotated moves between them."""

    positions: list[Position] = field(default_factory=list)
    moves: list[AnnotatedMove] = field(default_factory=list)

    @classmethod
    def from_position(cls, position: Position) -> GameHistory:
        return cls(positions=[position])

    def push(self, move: Move, position: Position) -> AnnotatedMove:
        """Record *move* leading to *position*; returns its annotation."""
        annotated = AnnotatedMove.associate(move, self.positions[-1], position)
        self.positions.append(position)
        self.moves.append(annotated)
        return annotated

    def __len__(self) -> int:
        """Number of half-moves played."""
        return len(self.moves)

    def __str__(self) -> str:
        """Movetext such as ``1.e4 e5 2.Nf3``; ``1. ... e5`` if Black began."""
        if not self.positions:
            return ""
        parts: list[str] = []
        offset = 0
        if self.positions[0].side_to_move == Color.BLACK:
            parts.append("1. ...")
            offset = 1
        for i, annotated in enumerate(self.moves):
            ply = i + offset
            if ply % 2 == 0:
                parts.append(f"{ply // 2 + 1}.{annotated}")
            else:
                parts.append(str(annotated))
        return " ".join(parts)
