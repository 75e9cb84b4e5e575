"""
Puzzle Catalog

Read-only word data: the ordered daily answers (position == puzzle index)
and the extra words accepted as guesses.
"""

import re
from typing import Iterable, Tuple

from ..config.game_settings import WORD_LENGTH, load_word_list
from ..errors import CatalogExhaustedError

_LETTERS = re.compile(r'^[a-zA-Z]+$')


class PuzzleCatalog:
    """
    Secret word lookup and guess acceptance.

    Acceptance does not depend on which puzzle is active: every word in
    either list is a valid guess on every day.
    """

    def __init__(self, daily_words: Iterable[str], other_words: Iterable[str] = ()):
        self.daily = [word.lower() for word in daily_words]
        self.accepted = set(self.daily)
        self.accepted.update(word.lower() for word in other_words)

    @classmethod
    def from_files(cls, daily_path: str, others_path: str) -> 'PuzzleCatalog':
        return cls(load_word_list(daily_path), load_word_list(others_path))

    @property
    def size(self) -> int:
        return len(self.daily)

    def word_for(self, index: int) -> str:
        """
        Returns the secret word for a puzzle index.

        Raises:
            CatalogExhaustedError: If the index is outside the daily list
        """
        if index < 0 or index >= len(self.daily):
            raise CatalogExhaustedError(index)
        return self.daily[index]

    def has_word_for(self, index: int) -> bool:
        return 0 <= index < len(self.daily)

    def is_accepted_guess(self, candidate: str) -> bool:
        word = candidate.lower()
        return len(word) == WORD_LENGTH and word in self.accepted

    def validate_guess(self, candidate: str) -> Tuple[bool, str]:
        """
        Validates a guess as typed so far.

        Args:
            candidate: Raw text from the player

        Returns:
            Tuple of (is_valid, reason) where reason is a MESSAGES key, empty when valid
        """
        if not candidate:
            return False, "type_something"

        if not _LETTERS.match(candidate):
            return False, "invalid_char"

        if len(candidate) < WORD_LENGTH:
            return False, "continue"

        if len(candidate) > WORD_LENGTH:
            return False, "too_long"

        if not self.is_accepted_guess(candidate):
            return False, "unknown_word"

        return True, ""
