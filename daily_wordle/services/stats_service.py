"""
Stats Service

Persists one statistics record per player and derives streaks and the
guess distribution from it. Storage is pluggable: MongoDB in production,
an in-memory dictionary for development and tests.
"""

import copy
import math
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..config.game_settings import MAX_GUESSES
from ..errors import PersistenceError
from ..models.game import LetterStatus
from ..models.stats import LastPlayed, PlayerStats
from ..utils.game_logger import game_logger
from ..utils.locks import KeyedLock
from .feedback import SPOILER_FREE_GLYPHS

BAR_WIDTH = 10


class MemoryStatsStore:
    """Dictionary-backed store. Documents are copied in and out."""

    def __init__(self):
        self.documents: Dict[str, Dict[str, Any]] = {}

    def fetch(self, player_id: str) -> Optional[Dict[str, Any]]:
        document = self.documents.get(player_id)
        return copy.deepcopy(document) if document is not None else None

    def insert(self, document: Dict[str, Any]) -> None:
        if document["_id"] in self.documents:
            raise PersistenceError(f"Stats for {document['_id']} already exist")
        self.documents[document["_id"]] = copy.deepcopy(document)

    def update(self, player_id: str, document: Dict[str, Any]) -> None:
        if player_id not in self.documents:
            raise PersistenceError(f"No stats for {player_id}")
        self.documents[player_id] = copy.deepcopy(document)


class MongoStatsStore:
    """
    MongoDB-backed store: one document per player keyed by ``_id``.
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str, collection_name: str) -> 'MongoStatsStore':
        """
        Create a store from a connection string.

        Raises:
            PersistenceError: If the server cannot be reached
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        try:
            client.admin.command('ping')
        except PyMongoError as e:
            client.close()
            raise PersistenceError(f"MongoDB connection error: {e}") from e
        return cls(client[db_name][collection_name])

    def fetch(self, player_id: str) -> Optional[Dict[str, Any]]:
        try:
            return self.collection.find_one({"_id": player_id})
        except PyMongoError as e:
            raise PersistenceError(f"Failed to fetch stats: {e}") from e

    def insert(self, document: Dict[str, Any]) -> None:
        try:
            self.collection.insert_one(document)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to insert stats: {e}") from e

    def update(self, player_id: str, document: Dict[str, Any]) -> None:
        try:
            result = self.collection.replace_one({"_id": player_id}, document)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to update stats: {e}") from e
        if result.matched_count == 0:
            raise PersistenceError(f"No stats for {player_id}")

    def close(self):
        """Close the MongoDB connection."""
        self.collection.database.client.close()


class StatsRepository:
    """
    Lifetime statistics per player.

    ``record`` is a read-modify-write serialized per player id, so two
    completions for the same player never interleave.
    """

    def __init__(self, store=None):
        self.store = store if store is not None else MemoryStatsStore()
        self._locks = KeyedLock()

    def get(self, player_id: str) -> Optional[PlayerStats]:
        """
        Raises:
            PersistenceError: If the store fails or the stored document is unreadable
        """
        document = self.store.fetch(player_id)
        if document is None:
            return None
        try:
            return PlayerStats.from_document(document)
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Unreadable stats document for {player_id}: {e}") from e

    def record(self, player_id: str, puzzle_index: int, guess_count: int, won: bool) -> PlayerStats:
        """
        Records a finished game and returns the updated statistics.

        A win extends the current streak by one. A loss restarts it at 1,
        counting the lost game itself. Only wins are added to the histogram.

        Raises:
            PersistenceError: If the store cannot be read or written
        """
        last_played = LastPlayed(puzzle_index=puzzle_index, guess_count=guess_count, won=won)
        win = 1 if won else 0

        with self._locks.hold(player_id):
            current = self.get(player_id)

            if current is None:
                stats = PlayerStats(
                    player_id=player_id,
                    current_streak=win,
                    max_streak=win,
                    played=1,
                    won=win,
                    guess_histogram={guess_count: win},
                    last_played=last_played
                )
                self.store.insert(stats.to_document())
            else:
                stats = current
                stats.played += 1
                stats.won += win
                stats.current_streak = stats.current_streak + 1 if won else 1
                stats.max_streak = max(stats.max_streak, stats.current_streak)
                if won:
                    stats.guess_histogram[guess_count] = stats.guess_histogram.get(guess_count, 0) + 1
                stats.last_played = last_played
                self.store.update(player_id, stats.to_document())

        game_logger.log_game_event(
            player_id, 'stats_recorded',
            puzzle_index=puzzle_index, guess_count=guess_count, won=won,
            current_streak=stats.current_streak, max_streak=stats.max_streak
        )
        return stats

    def has_played_today(self, player_id: str, today_index: int) -> bool:
        stats = self.get(player_id)
        if stats is None or stats.last_played is None:
            return False
        return stats.last_played.puzzle_index >= today_index

    def histogram_report(self, stats: PlayerStats) -> str:
        """
        One line per guess count: a bar scaled to the largest bucket, then the
        raw count. The bucket of the last completed game is highlighted.
        """
        buckets = {count: stats.guess_histogram.get(count, 0) for count in range(1, MAX_GUESSES + 1)}
        largest = max(buckets.values())
        last_count = stats.last_played.guess_count if stats.last_played else None

        lines = []
        for count, wins in buckets.items():
            glyph = SPOILER_FREE_GLYPHS[
                LetterStatus.CORRECT if count == last_count else LetterStatus.ABSENT
            ]
            length = math.floor(wins / largest * BAR_WIDTH) if largest else 0
            lines.append(f"`{count}` {glyph * length} {wins}")
        return "\n".join(lines)

    def summary_report(self, stats: PlayerStats, clock, now: Optional[float] = None) -> str:
        """Full stats reply: totals, streaks, distribution and next puzzle availability."""
        today = clock.current_index(now)
        if stats.last_played is None or today > stats.last_played.puzzle_index:
            next_puzzle = "Available now!"
        else:
            next_puzzle = clock.format_countdown(now)

        return (
            f"**Played**: {stats.played}\n"
            f"**Win %**: {stats.win_percentage:.1f}\n"
            f"**Current Streak**: {stats.current_streak}\n"
            f"**Max Streak**: {stats.max_streak}\n\n"
            f"**Guess distributions**\n{self.histogram_report(stats)}\n\n"
            f"**Next Wordle**: {next_puzzle}"
        )
