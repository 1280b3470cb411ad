"""Word sanitization utilities."""

import re
import unicodedata
from typing import Iterable, List


_NON_LETTERS = re.compile(r'[^A-Z]')


def sanitize_word(word: str) -> str:
    """
    Normalize a word for placement on the grid.

    Strips accents (LEÃO -> LEAO), uppercases, and removes every
    character that is not A-Z. Idempotent.
    """
    decomposed = unicodedata.normalize("NFD", word)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LETTERS.sub("", stripped.upper())


def sanitize_words(words: Iterable[str], max_length: int, min_length: int = 2) -> List[str]:
    """
    Sanitize a word list, dropping words outside [min_length, max_length]
    and duplicates (first spelling wins).
    """
    result: List[str] = []
    seen = set()
    for word in words:
        clean = sanitize_word(word)
        if len(clean) < min_length or len(clean) > max_length:
            continue
        if clean in seen:
            continue
        seen.add(clean)
        result.append(clean)
    return result
