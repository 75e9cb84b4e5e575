"""
Service wiring.

Builds the game core once at startup from configuration; the app factory
and the tests each hold their own instance instead of a process-wide global.
"""

from dataclasses import dataclass

from ..utils.game_logger import game_logger
from .catalog import PuzzleCatalog
from .clock import PuzzleClock
from .session_service import SessionStore
from .stats_service import MemoryStatsStore, MongoStatsStore, StatsRepository


@dataclass
class GameServices:
    clock: PuzzleClock
    catalog: PuzzleCatalog
    stats: StatsRepository
    sessions: SessionStore


def build_services(config_class) -> GameServices:
    """
    Initialize all services from a configuration class.

    Stats go to MongoDB when MONGO_URI is configured, otherwise to memory.
    """
    clock = PuzzleClock(config_class.ANCHOR_INDEX, config_class.ANCHOR_TIMESTAMP)
    catalog = PuzzleCatalog.from_files(config_class.DAILY_WORDS_FILE, config_class.GUESS_WORDS_FILE)

    if config_class.MONGO_URI:
        store = MongoStatsStore.connect(
            config_class.MONGO_URI, config_class.MONGO_DB, config_class.STATS_COLLECTION
        )
        game_logger.logger.info("Stats store: MongoDB")
    else:
        store = MemoryStatsStore()
        game_logger.logger.warning("MONGO_URI not configured, stats are kept in memory only")

    stats = StatsRepository(store)
    sessions = SessionStore(clock, catalog, stats)
    return GameServices(clock=clock, catalog=catalog, stats=stats, sessions=sessions)
