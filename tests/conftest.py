"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from libchess.core import EngineContext, Position, default_context
from libchess.game import Game

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


@pytest.fixture(scope="session")
def context() -> EngineContext:
    """The process-wide engine context."""
    return default_context()


@pytest.fixture
def start() -> Position:
    """Standard starting position."""
    return Position.default()


@pytest.fixture
def kiwipete() -> Position:
    """Tactically rich position with castling, pins and en-passant chances."""
    return Position.from_fen(KIWIPETE)


@pytest.fixture
def game() -> Game:
    """A fresh game from the starting position."""
    return Game.default()
