"""
Game Configuration Constants Module

Fixed rules of the daily puzzle and the loader for the bundled word lists.
Everything here is immutable reference data; runtime overrides live in
app_config.py.
"""

import json
import os
from typing import List, Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every accepted guess."""

MAX_GUESSES: Final[int] = 6
"""Maximum number of guess attempts allowed per daily session."""

DAY_SECONDS: Final[int] = 60 * 60 * 24

# 2022-02-10T00:00:00Z was puzzle 236
DEFAULT_ANCHOR_INDEX: Final[int] = 236
DEFAULT_ANCHOR_TIMESTAMP: Final[int] = 1644451200

_WORDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')
DEFAULT_DAILY_WORDS_FILE: Final[str] = os.path.join(_WORDS_DIR, 'daily.json')
DEFAULT_GUESS_WORDS_FILE: Final[str] = os.path.join(_WORDS_DIR, 'others.json')


def load_word_list(json_file_path: str) -> List[str]:
    """
    Load a word list from a JSON file.

    Args:
        json_file_path: Path to a JSON array of words

    Returns:
        List[str]: Lower-cased 5-letter words, in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = [str(word).lower() for word in word_list]

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    return words
