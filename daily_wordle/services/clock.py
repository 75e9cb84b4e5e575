"""
Puzzle Clock

Maps wall-clock time onto puzzle indices. Index N0 starts at anchor
timestamp T0 and every following UTC day adds one.
"""

import time
from typing import Optional

from ..config.game_settings import DAY_SECONDS, DEFAULT_ANCHOR_INDEX, DEFAULT_ANCHOR_TIMESTAMP


class PuzzleClock:
    """Pure functions of time and a fixed (anchor index, anchor timestamp) pair."""

    def __init__(self, anchor_index: int = DEFAULT_ANCHOR_INDEX,
                 anchor_timestamp: int = DEFAULT_ANCHOR_TIMESTAMP):
        self.anchor_index = anchor_index
        self.anchor_timestamp = anchor_timestamp

    def current_index(self, now: Optional[float] = None) -> int:
        """Puzzle index active at ``now`` (epoch seconds, defaults to the current time)."""
        if now is None:
            now = time.time()
        return self.anchor_index + int((now - self.anchor_timestamp) // DAY_SECONDS)

    def next_index_epoch_seconds(self, now: Optional[float] = None) -> int:
        """Epoch seconds at which the next puzzle becomes available."""
        days = self.current_index(now) + 1 - self.anchor_index
        return self.anchor_timestamp + days * DAY_SECONDS

    def seconds_until_next(self, now: Optional[float] = None) -> int:
        if now is None:
            now = time.time()
        return max(0, int(self.next_index_epoch_seconds(now) - now))

    def format_countdown(self, now: Optional[float] = None) -> str:
        """Human readable wait until the next puzzle, e.g. ``in 5h 12m``."""
        remaining = self.seconds_until_next(now)
        hours, remainder = divmod(remaining, 3600)
        minutes = remainder // 60
        if hours:
            return f"in {hours}h {minutes}m"
        if minutes:
            return f"in {minutes}m"
        return "in less than a minute"
