"""Shared read-only tables that every position uses."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from libchess.core.attacks import AttackTables
from libchess.core.zobrist import DEFAULT_SEED, ZobristHasher

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineContext:
    """Attack tables plus Zobrist keys.

    Positions hold a reference to the context they were built with and pass
    it on to every position derived from them.  Hashes are only comparable
    between positions sharing a context.
    """

    tables: AttackTables
    hasher: ZobristHasher

    @classmethod
    def create(cls, seed: int = DEFAULT_SEED) -> EngineContext:
        """Build fresh tables; costs a few milliseconds."""
        return cls(tables=AttackTables(), hasher=ZobristHasher(seed))


_default: EngineContext | None = None
_default_lock = threading.Lock()


def default_context() -> EngineContext:
    """Process-wide context, built on first use."""
    global _default
    context = _default
    if context is None:
        with _default_lock:
            if _default is None:
                _LOGGER.debug("Building default engine context")
                _default = EngineContext.create()
            context = _default
    return context
