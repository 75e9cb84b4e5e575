"""
Feedback Engine

Letter classification and board rendering.

Classification is positional and not count-limited: a guess letter that is
not an exact match is PRESENT whenever the secret contains it anywhere, so a
repeated guess letter can be marked PRESENT more than once even if the secret
holds a single copy.
"""

from typing import List, Sequence

from ..models.game import LetterStatus

SPOILER_FREE_GLYPHS = {
    LetterStatus.CORRECT: "\U0001F7E9",  # green square
    LetterStatus.PRESENT: "\U0001F7E8",  # yellow square
    LetterStatus.ABSENT: "\u2B1B",  # black square
}

LETTER_TEMPLATES = {
    LetterStatus.CORRECT: "[{}]",
    LetterStatus.PRESENT: "({})",
    LetterStatus.ABSENT: " {} ",
}


def classify(secret: str, guess: str) -> List[LetterStatus]:
    """Label each position of ``guess`` against ``secret``."""
    labels = []
    for i, letter in enumerate(guess):
        if i < len(secret) and letter == secret[i]:
            labels.append(LetterStatus.CORRECT)
        elif letter in secret:
            labels.append(LetterStatus.PRESENT)
        else:
            labels.append(LetterStatus.ABSENT)
    return labels


def classify_rows(secret: str, guesses: Sequence[str]) -> List[List[LetterStatus]]:
    return [classify(secret, guess) for guess in guesses]


def render(labels: Sequence[LetterStatus], letters: str, spoiler_free: bool = False) -> str:
    """
    Renders one guess row.

    In spoiler-free mode only the classification glyph is shown, so the row
    can be posted publicly without revealing letters.
    """
    if spoiler_free:
        return "".join(SPOILER_FREE_GLYPHS[label] for label in labels)
    return "".join(
        LETTER_TEMPLATES[label].format(letter.upper())
        for label, letter in zip(labels, letters)
    )


def render_board(secret: str, guesses: Sequence[str], spoiler_free: bool = False) -> str:
    """Renders every guess row, one per line."""
    return "\n".join(
        render(classify(secret, guess), guess, spoiler_free)
        for guess in guesses
    )
