"""Word list loading and filtering."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from promocodes.errors import EmptyPool, InvalidArgument, SourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = "/usr/share/dict/words"
MIN_WORD_LEN = 3
MAX_WORD_LEN = 6


def check_length_band(min_len: int, max_len: int) -> None:
    """Raise InvalidArgument unless min_len and max_len are ints with 1 <= min_len <= max_len."""
    for name, value in (("min_len", min_len), ("max_len", max_len)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"{name} must be an integer, got {value!r}.")
    if min_len < 1:
        raise InvalidArgument(f"min_len must be at least 1, got {min_len}.")
    if max_len < min_len:
        raise InvalidArgument(f"max_len ({max_len}) must not be less than min_len ({min_len}).")


def is_eligible(word: str, min_len: int = MIN_WORD_LEN, max_len: int = MAX_WORD_LEN) -> bool:
    """True if word fits the length band and starts with a lowercase ASCII letter.

    Capitalized entries (proper nouns) and punctuation-led entries are rejected.
    """
    if not min_len <= len(word) <= max_len:
        return False
    return "a" <= word[0] <= "z"


def filter_words(
    lines: Iterable[str],
    min_len: int = MIN_WORD_LEN,
    max_len: int = MAX_WORD_LEN,
) -> list[str]:
    """Return the eligible words from lines, in input order.

    Lines are stripped of surrounding whitespace before the check. Duplicates
    are kept. Raises EmptyPool if no line qualifies.
    """
    check_length_band(min_len, max_len)
    words = []
    for line in lines:
        word = line.strip()
        if is_eligible(word, min_len, max_len):
            words.append(word)
    if not words:
        raise EmptyPool(f"No words of length {min_len}-{max_len} starting with a-z found.")
    return words


def load_wordlist(
    path: str = DEFAULT_WORDLIST,
    min_len: int = MIN_WORD_LEN,
    max_len: int = MAX_WORD_LEN,
) -> list[str]:
    """Read the word source at path once and return the filtered pool.

    Raises SourceUnavailable if the file cannot be opened or read.
    """
    check_length_band(min_len, max_len)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            words = filter_words(f, min_len, max_len)
    except OSError as e:
        raise SourceUnavailable(f"Cannot read word list '{path}': {e.strerror or e}") from e
    logger.debug("Loaded %d eligible words from %s", len(words), path)
    return words
