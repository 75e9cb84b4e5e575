"""
Error Taxonomy

Every failure the game core reports to a player carries a ``message_key``
into ``MESSAGES``, so the interaction layer can turn any of them into a reply
without knowing which operation raised it.
"""

from typing import Optional


MESSAGES = {
    'unknown_error': "Unknown Error!",
    'not_playing': "You're not playing the game!",
    'type_something': "Start typing your Guess!",
    'continue': "Continue typing a 5 letter word...",
    'invalid_char': "Your guess contains invalid characters!",
    'too_long': "Word must be of exactly 5 letters!",
    'unknown_word': "The word seems unknown!",
    'already_played': "You've already played today!",
    'out_of_words': "I've run out of words!",
    'stats_unavailable': "Stats are temporarily unavailable, please submit your guess again.",
    'no_stats': "You haven't played Wordle! Get started using `/wordle`.",
}


class DailyWordleError(Exception):
    """Base class for all errors raised by the game core."""

    message_key = 'unknown_error'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or MESSAGES[self.message_key])

    @property
    def user_message(self) -> str:
        return MESSAGES[self.message_key]


class UserInputError(DailyWordleError):
    """Recoverable error caused by what the player sent."""


class NotPlayingError(UserInputError):
    message_key = 'not_playing'


class AlreadyPlayedTodayError(UserInputError):
    message_key = 'already_played'

    def __init__(self, next_puzzle_at: int):
        super().__init__()
        self.next_puzzle_at = next_puzzle_at


class InvalidGuessError(UserInputError):
    """Guess rejected before being applied; ``reason`` is a MESSAGES key."""

    def __init__(self, reason: str):
        self.reason = reason
        self.message_key = reason
        super().__init__()


class CatalogExhaustedError(DailyWordleError):
    """No secret word exists for the requested puzzle index."""

    message_key = 'out_of_words'

    def __init__(self, puzzle_index: int):
        super().__init__(f"No word for puzzle {puzzle_index}")
        self.puzzle_index = puzzle_index


class MalformedShareTokenError(DailyWordleError):
    """A share token could not be decoded. Callers ignore it."""


class PersistenceError(DailyWordleError):
    """The stats store could not be read or written."""

    message_key = 'stats_unavailable'


class StatsUnavailableError(PersistenceError):
    """A finished game could not be recorded; the session is still live."""
