"""
Player Statistics Data Models

Contains the persisted per-player record and its document schema.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

SCHEMA_VERSION = 1


@dataclass
class LastPlayed:
    """The most recently completed puzzle."""
    puzzle_index: int
    guess_count: int
    won: bool


@dataclass
class PlayerStats:
    """Lifetime statistics for one player."""
    player_id: str
    current_streak: int = 0
    max_streak: int = 0
    played: int = 0
    won: int = 0
    guess_histogram: Dict[int, int] = field(default_factory=dict)
    last_played: Optional[LastPlayed] = None

    @property
    def win_percentage(self) -> float:
        if not self.played:
            return 0.0
        return self.won / self.played * 100

    def to_document(self) -> Dict[str, Any]:
        """
        Serialize to the stats collection schema (version 1).

        BSON keys must be strings, so histogram buckets are stored as "1".."6".
        """
        return {
            "_id": self.player_id,
            "schema_version": SCHEMA_VERSION,
            "current_streak": self.current_streak,
            "max_streak": self.max_streak,
            "played": self.played,
            "won": self.won,
            "guesses": {str(count): wins for count, wins in self.guess_histogram.items()},
            "last_played": {
                "id": self.last_played.puzzle_index,
                "guesses": self.last_played.guess_count,
                "win": self.last_played.won
            }
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'PlayerStats':
        version = document.get("schema_version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            raise ValueError(f"Unsupported stats schema version: {version}")

        last = document["last_played"]
        return cls(
            player_id=document["_id"],
            current_streak=int(document["current_streak"]),
            max_streak=int(document["max_streak"]),
            played=int(document["played"]),
            won=int(document["won"]),
            guess_histogram={int(count): int(wins) for count, wins in document.get("guesses", {}).items()},
            last_played=LastPlayed(
                puzzle_index=int(last["id"]),
                guess_count=int(last["guesses"]),
                won=bool(last["win"])
            )
        )
