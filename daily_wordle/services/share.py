"""
Share Codec

A finished game travels through public, comma-delimited fields (button
custom ids) as

    outcome,puzzle_index,hard,secret,guess1,guess2,...

Only the spoiler-free board is ever shown from a decoded token; the secret is
carried solely so the board can be recomputed.
"""

from typing import Sequence

from ..config.game_settings import MAX_GUESSES
from ..errors import MalformedShareTokenError
from ..models.game import GameOutcome, ShareRecord
from .feedback import render_board

DELIMITER = ","
MIN_FIELDS = 4
SHARE_PREFIX = "share:"


def encode(outcome: GameOutcome, puzzle_index: int, hard_mode: bool,
           secret: str, guesses: Sequence[str]) -> str:
    fields = [
        str(outcome.value),
        str(puzzle_index),
        "true" if hard_mode else "false",
        secret,
        *guesses,
    ]
    return DELIMITER.join(fields)


def decode(token: str) -> ShareRecord:
    """
    Parses a share token.

    Raises:
        MalformedShareTokenError: If the token is too short or a field does not parse
    """
    fields = token.split(DELIMITER)
    if len(fields) < MIN_FIELDS:
        raise MalformedShareTokenError(f"Expected at least {MIN_FIELDS} fields, got {len(fields)}")

    code, index, hard, secret, *guesses = fields

    try:
        outcome = GameOutcome(int(code))
        puzzle_index = int(index)
    except ValueError as e:
        raise MalformedShareTokenError(f"Unparseable share token: {token!r}") from e

    if outcome is GameOutcome.ACTIVE:
        raise MalformedShareTokenError("Unfinished games cannot be shared")

    return ShareRecord(
        outcome=outcome,
        puzzle_index=puzzle_index,
        hard_mode=hard == "true",
        secret=secret,
        guesses=guesses
    )


def score_label(outcome: GameOutcome, guess_count: int) -> str:
    if outcome is GameOutcome.LOST:
        return f"X/{MAX_GUESSES}"
    return f"{guess_count}/{MAX_GUESSES}"


def render_share(record: ShareRecord, player_label: str) -> str:
    """Public message for a decoded share: header plus spoiler-free board."""
    header = (
        f"{player_label}'s Wordle {record.puzzle_index} "
        f"{score_label(record.outcome, len(record.guesses))}"
        f"{'*' if record.hard_mode else ''}"
    )
    return f"{header}\n\n{render_board(record.secret, record.guesses, spoiler_free=True)}"
