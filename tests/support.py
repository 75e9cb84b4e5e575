"""Shared fixtures for the test modules."""

from __future__ import annotations

import sys
import time
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from daily_wordle.services.catalog import PuzzleCatalog  # noqa: E402
from daily_wordle.services.clock import PuzzleClock  # noqa: E402
from daily_wordle.services.container import GameServices  # noqa: E402
from daily_wordle.services.session_service import SessionStore  # noqa: E402
from daily_wordle.services.stats_service import MemoryStatsStore, StatsRepository  # noqa: E402

DAY = 86400
ANCHOR = 1_000_000

DAILY_WORDS = ["crane", "slate", "abbey", "pious"]
OTHER_WORDS = ["crate", "trace", "adieu", "ghost", "plumb", "dwarf", "eerie", "nymph"]
LOSING_GUESSES = ["crate", "trace", "adieu", "ghost", "plumb", "dwarf"]


def day(index: int, offset: int = 60) -> float:
    """Epoch seconds inside puzzle ``index`` of the test clock."""
    return ANCHOR + index * DAY + offset


def make_services(store=None, anchor_timestamp: int = ANCHOR) -> GameServices:
    clock = PuzzleClock(anchor_index=0, anchor_timestamp=anchor_timestamp)
    catalog = PuzzleCatalog(DAILY_WORDS, OTHER_WORDS)
    stats = StatsRepository(store if store is not None else MemoryStatsStore())
    return GameServices(clock=clock, catalog=catalog, stats=stats,
                        sessions=SessionStore(clock, catalog, stats))


def make_live_services(store=None) -> GameServices:
    """Services whose puzzle 0 is the one active right now."""
    return make_services(store, anchor_timestamp=int(time.time()) - 10)


class FailingStore(MemoryStatsStore):
    """Memory store that can be switched into failure mode."""

    def __init__(self):
        super().__init__()
        self.failing = False

    def _check(self):
        from daily_wordle.errors import PersistenceError
        if self.failing:
            raise PersistenceError("store unavailable")

    def fetch(self, player_id):
        self._check()
        return super().fetch(player_id)

    def insert(self, document):
        self._check()
        super().insert(document)

    def update(self, player_id, document):
        self._check()
        super().update(player_id, document)
