"""Game state machine — sequences actions into status transitions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto

from libchess.core.context import EngineContext
from libchess.core.enums import Color
from libchess.core.errors import (
    DrawOfferNeedsAnswerError,
    DrawOfferNotFoundError,
    GameFinishedError,
    IllegalActionError,
    IllegalMoveError,
)
from libchess.core.move import Move
from libchess.core.position import Position
from libchess.game.history import AnnotatedMove, GameHistory

_LOGGER = logging.getLogger(__name__)

_REPETITION_LIMIT = 3
_FIFTY_MOVE_HALFMOVES = 100


# ── Actions ──────────────────────────────────────────────────────────────────


class ActionKind(IntEnum):
    MAKE_MOVE = auto()
    OFFER_DRAW = auto()
    ACCEPT_DRAW = auto()
    DECLINE_DRAW = auto()
    RESIGN = auto()


@dataclass(frozen=True, slots=True)
class Action:
    """Something a player does on their turn."""

    kind: ActionKind
    move: Move | None = None

    def __post_init__(self) -> None:
        if (self.kind == ActionKind.MAKE_MOVE) != (self.move is not None):
            raise IllegalActionError("A move action needs a Move; other actions must not have one")

    @classmethod
    def make_move(cls, move: Move) -> Action:
        return cls(ActionKind.MAKE_MOVE, move)

    @classmethod
    def offer_draw(cls) -> Action:
        return cls(ActionKind.OFFER_DRAW)

    @classmethod
    def accept_draw(cls) -> Action:
        return cls(ActionKind.ACCEPT_DRAW)

    @classmethod
    def decline_draw(cls) -> Action:
        return cls(ActionKind.DECLINE_DRAW)

    @classmethod
    def resign(cls) -> Action:
        return cls(ActionKind.RESIGN)

    def __str__(self) -> str:
        if self.kind == ActionKind.MAKE_MOVE:
            return str(self.move)
        return self.kind.name.lower().replace("_", " ")


# ── Status ───────────────────────────────────────────────────────────────────


class GameOutcome(IntEnum):
    ONGOING = auto()
    CHECKMATED = auto()
    RESIGNED = auto()
    FIFTY_MOVES_DRAW_DECLARED = auto()
    THEORETICAL_DRAW_DECLARED = auto()
    REPETITION_DRAW_DECLARED = auto()
    DRAW_ACCEPTED = auto()
    STALEMATE = auto()


_OUTCOME_TEXT: dict[GameOutcome, str] = {
    GameOutcome.ONGOING: "the game is ongoing",
    GameOutcome.FIFTY_MOVES_DRAW_DECLARED: "draw declared by the fifty-move rule",
    GameOutcome.THEORETICAL_DRAW_DECLARED: "draw: not enough material to checkmate",
    GameOutcome.REPETITION_DRAW_DECLARED: "draw declared by repetition of moves",
    GameOutcome.DRAW_ACCEPTED: "draw declared by agreement",
    GameOutcome.STALEMATE: "stalemate",
}


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Game outcome; *color* names the side that was mated or resigned."""

    outcome: GameOutcome
    color: Color | None = None

    @classmethod
    def ongoing(cls) -> GameStatus:
        return cls(GameOutcome.ONGOING)

    @classmethod
    def checkmated(cls, color: Color) -> GameStatus:
        return cls(GameOutcome.CHECKMATED, color)

    @classmethod
    def resigned(cls, color: Color) -> GameStatus:
        return cls(GameOutcome.RESIGNED, color)

    @property
    def is_finished(self) -> bool:
        return self.outcome != GameOutcome.ONGOING

    def __str__(self) -> str:
        if self.outcome in (GameOutcome.CHECKMATED, GameOutcome.RESIGNED):
            assert self.color is not None
            how = "checkmate" if self.outcome == GameOutcome.CHECKMATED else "resignation"
            return f"{self.color.opposite} won by {how}"
        return _OUTCOME_TEXT[self.outcome]


class DrawOffer(IntEnum):
    """Draw offer status between players."""

    NONE = 0
    OFFERED = auto()


# ── Game ─────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """A game of chess driven by :meth:`apply`.

    This is a pure data/logic class with no internal locking.
    """

    position: Position
    status: GameStatus = field(default_factory=GameStatus.ongoing, init=False)
    draw_offer: DrawOffer = field(default=DrawOffer.NONE, init=False)
    actions: list[Action] = field(default_factory=list, init=False)
    history: GameHistory = field(init=False)
    _position_counter: dict[int, int] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.history = GameHistory.from_position(self.position)
        self.status = self._position_status()
        self._count_position()

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def default(cls, context: EngineContext | None = None) -> Game:
        return cls(Position.default(context))

    @classmethod
    def from_fen(cls, fen: str, context: EngineContext | None = None) -> Game:
        return cls(Position.from_fen(fen, context))

    @classmethod
    def from_position(cls, position: Position) -> Game:
        return cls(position)

    # ── Actions ──────────────────────────────────────────────────────────

    def apply(self, action: Action) -> GameStatus:
        """Apply *action* and return the new status.

        Raises a :class:`~libchess.core.errors.GameError` subclass when the
        action is not allowed now; the game is left unchanged in that case.
        """
        if self.status.is_finished:
            _LOGGER.debug("Rejected %s: game already finished (%s)", action, self.status)
            raise GameFinishedError(f"The game is over: {self.status}")

        pending = self.draw_offer == DrawOffer.OFFERED
        kind = action.kind

        if kind == ActionKind.MAKE_MOVE:
            if pending:
                raise DrawOfferNeedsAnswerError("Answer the draw offer before moving")
            self._play(action)
        elif kind == ActionKind.OFFER_DRAW:
            if pending:
                raise DrawOfferNeedsAnswerError("A draw offer is already pending")
            self.draw_offer = DrawOffer.OFFERED
        elif kind in (ActionKind.ACCEPT_DRAW, ActionKind.DECLINE_DRAW):
            if not pending:
                raise DrawOfferNotFoundError("There is no draw offer to answer")
            self.draw_offer = DrawOffer.NONE
            if kind == ActionKind.ACCEPT_DRAW:
                self.status = GameStatus(GameOutcome.DRAW_ACCEPTED)
        elif kind == ActionKind.RESIGN:
            self.draw_offer = DrawOffer.NONE
            self.status = GameStatus.resigned(self.side_to_move)
        else:
            raise IllegalActionError(f"Unknown action: {action!r}")

        self.actions.append(action)
        if self.status.is_finished:
            _LOGGER.info("Game finished: %s", self.status)
        return self.status

    def make_move(self, move: Move) -> GameStatus:
        """Shorthand for ``apply(Action.make_move(move))``."""
        return self.apply(Action.make_move(move))

    def _play(self, action: Action) -> None:
        try:
            position = self.position.make_move(action.move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected illegal move %s", action.move)
            raise IllegalActionError(f"Illegal move: {action.move}") from exc

        self.position = position
        self._count_position()
        self.history.push(action.move, position)
        self.status = self._position_status()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.status.is_finished

    @property
    def last_move(self) -> AnnotatedMove | None:
        return self.history.moves[-1] if self.history.moves else None

    def legal_moves(self) -> frozenset[Move]:
        """Legal moves in the current position."""
        return self.position.get_legal_moves()

    def position_count(self, position: Position) -> int:
        """How many times *position* has occurred in this game."""
        return self._position_counter.get(position.zobrist_hash, 0)

    # ── Internal ─────────────────────────────────────────────────────────

    def _count_position(self) -> None:
        key = self.position.zobrist_hash
        self._position_counter[key] = self._position_counter.get(key, 0) + 1

    def _position_status(self) -> GameStatus:
        position = self.position
        if position.is_terminal():
            if position.is_check():
                return GameStatus.checkmated(position.side_to_move)
            return GameStatus(GameOutcome.STALEMATE)
        if self.position_count(position) >= _REPETITION_LIMIT:
            return GameStatus(GameOutcome.REPETITION_DRAW_DECLARED)
        if position.halfmove_clock >= _FIFTY_MOVE_HALFMOVES:
            return GameStatus(GameOutcome.FIFTY_MOVES_DRAW_DECLARED)
        if position.is_theoretical_draw_on_board():
            return GameStatus(GameOutcome.THEORETICAL_DRAW_DECLARED)
        return GameStatus.ongoing()
