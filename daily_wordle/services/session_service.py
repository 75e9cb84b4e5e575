"""
Session Service

Owns the in-memory registry of live daily sessions: at most one per player.
"""

from typing import Any, Dict, Optional

from ..config.game_settings import MAX_GUESSES
from ..errors import (
    AlreadyPlayedTodayError,
    InvalidGuessError,
    NotPlayingError,
    PersistenceError,
    StatsUnavailableError,
)
from ..models.game import GameOutcome, GuessResult, Session
from ..utils.game_logger import game_logger
from ..utils.locks import KeyedLock
from . import share
from .catalog import PuzzleCatalog
from .clock import PuzzleClock
from .feedback import classify_rows, render_board
from .stats_service import StatsRepository


class SessionStore:
    """
    Single source of truth for "is this player currently playing".

    This class handles:
    - Daily eligibility checks and session creation
    - Resuming an existing session instead of creating a duplicate
    - Guess validation, evaluation and termination
    - Flushing finished sessions into the stats repository

    All reads and writes of one player's entry happen under that player's
    lock; different players never contend.
    """

    def __init__(self, clock: PuzzleClock, catalog: PuzzleCatalog,
                 stats: StatsRepository, max_guesses: int = MAX_GUESSES):
        self.clock = clock
        self.catalog = catalog
        self.stats = stats
        self.max_guesses = max_guesses
        self.sessions: Dict[str, Session] = {}
        self._locks = KeyedLock()

    def start(self, player_id: str, now: Optional[float] = None,
              hard_mode: bool = False, render_target: Optional[Any] = None) -> Session:
        """
        Starts today's game, or resumes the live one.

        Args:
            player_id: Opaque player identifier
            now: Epoch seconds, defaults to the current time
            hard_mode: Recorded on new sessions only
            render_target: Handle of the message showing the board

        Returns:
            Snapshot of the player's session

        Raises:
            AlreadyPlayedTodayError: If today's puzzle (or a later one) is already recorded
            CatalogExhaustedError: If there is no word for today
        """
        today = self.clock.current_index(now)

        with self._locks.hold(player_id):
            if self.stats.has_played_today(player_id, today):
                raise AlreadyPlayedTodayError(self.clock.next_index_epoch_seconds(now))

            self.catalog.word_for(today)

            session = self.sessions.get(player_id)
            if session is not None:
                if render_target is not None:
                    session.render_target = render_target
                game_logger.log_game_event(
                    player_id, 'game_resumed',
                    puzzle_index=session.puzzle_index, guesses_used=len(session.guesses)
                )
                return session.snapshot()

            session = Session(
                player_id=player_id,
                puzzle_index=today,
                hard_mode=hard_mode,
                render_target=render_target
            )
            self.sessions[player_id] = session

        game_logger.log_game_event(player_id, 'game_started', puzzle_index=today, hard_mode=hard_mode)
        return session.snapshot()

    def guess(self, player_id: str, candidate: str) -> GuessResult:
        """
        Applies a guess to the player's live session.

        A finished session is recorded in the stats repository and then
        removed. If recording fails the guess is rolled back and the session
        stays live, so the same guess can be submitted again.

        Raises:
            NotPlayingError: If the player has no live session
            InvalidGuessError: If the guess is rejected (reason in ``error.reason``)
            StatsUnavailableError: If a finished game could not be recorded
        """
        with self._locks.hold(player_id):
            session = self.sessions.get(player_id)
            if session is None:
                raise NotPlayingError()

            is_valid, reason = self.catalog.validate_guess(candidate)
            if not is_valid:
                raise InvalidGuessError(reason)

            word = candidate.lower()
            secret = self.catalog.word_for(session.puzzle_index)
            session.guesses.append(word)

            if word == secret:
                outcome = GameOutcome.WON
            elif len(session.guesses) >= self.max_guesses:
                outcome = GameOutcome.LOST
            else:
                outcome = GameOutcome.ACTIVE

            share_token = None
            stats = None
            if outcome is not GameOutcome.ACTIVE:
                try:
                    stats = self.stats.record(
                        player_id, session.puzzle_index, len(session.guesses),
                        outcome is GameOutcome.WON
                    )
                except PersistenceError as e:
                    session.guesses.pop()
                    game_logger.log_error(player_id, e, 'record_stats', puzzle_index=session.puzzle_index)
                    game_logger.log_game_event(
                        player_id, 'stats_unavailable',
                        puzzle_index=session.puzzle_index, outcome=outcome.name.lower()
                    )
                    raise StatsUnavailableError(str(e)) from e
                except Exception:
                    session.guesses.pop()
                    raise

                del self.sessions[player_id]
                share_token = share.encode(
                    outcome, session.puzzle_index, session.hard_mode, secret, session.guesses
                )

            result = GuessResult(
                outcome=outcome,
                session=session.snapshot(),
                rows=classify_rows(secret, session.guesses),
                board=render_board(secret, session.guesses),
                share_token=share_token,
                stats=stats
            )

        if outcome is GameOutcome.WON:
            game_logger.log_game_event(
                player_id, 'game_won',
                puzzle_index=session.puzzle_index, guesses_used=len(session.guesses)
            )
        elif outcome is GameOutcome.LOST:
            game_logger.log_game_event(player_id, 'game_lost', puzzle_index=session.puzzle_index)

        return result

    def get(self, player_id: str) -> Optional[Session]:
        with self._locks.hold(player_id):
            session = self.sessions.get(player_id)
            return session.snapshot() if session else None

    def is_playing(self, player_id: str) -> bool:
        return player_id in self.sessions

    def active_count(self) -> int:
        return len(self.sessions)

    def secret_for(self, session: Session) -> str:
        return self.catalog.word_for(session.puzzle_index)

    def discard(self, player_id: str) -> bool:
        """
        Removes a live session without recording it.

        Returns:
            bool: True if a session was removed
        """
        with self._locks.hold(player_id):
            return self.sessions.pop(player_id, None) is not None
