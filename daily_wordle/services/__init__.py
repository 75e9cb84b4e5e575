"""
Services Package

Contains the game core: clock, catalog, feedback, sessions, stats and sharing.
"""

from .catalog import PuzzleCatalog
from .clock import PuzzleClock
from .session_service import SessionStore
from .stats_service import MemoryStatsStore, MongoStatsStore, StatsRepository

__all__ = [
    'PuzzleCatalog', 'PuzzleClock', 'SessionStore',
    'MemoryStatsStore', 'MongoStatsStore', 'StatsRepository'
]
