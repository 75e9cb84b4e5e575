"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class LetterStatus(Enum):
    """Per-letter classification of a guess against the secret word."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class GameOutcome(Enum):
    """Session state after a guess. The values double as share outcome codes."""
    ACTIVE = 0
    WON = 1
    LOST = 2


@dataclass
class Session:
    """A player's in-progress attempt at one daily puzzle."""
    player_id: str
    puzzle_index: int
    guesses: List[str] = field(default_factory=list)
    hard_mode: bool = False
    render_target: Optional[Any] = None  # Opaque handle owned by the interaction layer

    def snapshot(self) -> 'Session':
        return Session(
            player_id=self.player_id,
            puzzle_index=self.puzzle_index,
            guesses=self.guesses.copy(),
            hard_mode=self.hard_mode,
            render_target=self.render_target
        )


@dataclass
class GuessResult:
    """What a caller gets back after an accepted guess."""
    outcome: GameOutcome
    session: Session
    rows: List[List[LetterStatus]]
    board: str
    share_token: Optional[str] = None
    stats: Optional[Any] = None  # PlayerStats, only when the game ended

    @property
    def finished(self) -> bool:
        return self.outcome is not GameOutcome.ACTIVE


@dataclass
class ShareRecord:
    """Decoded contents of a public share token."""
    outcome: GameOutcome
    puzzle_index: int
    hard_mode: bool
    secret: str
    guesses: List[str]
