# text_utils.py
# Text normalisation shared by insertion, lookup and search.
# The trie only ever indexes the 26 uppercase ASCII letters.

from __future__ import annotations

import re
from typing import Iterable, Iterator, List

from .errors import InvalidCharacterError

LETTERS = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

_NON_LETTERS = re.compile(r"[^A-Z]+")
_FIRST = ord(LETTERS[0])


def sanitize(text: str) -> str:
    """Uppercase `text` and strip every character that is not A-Z."""
    return _NON_LETTERS.sub("", text.upper())


def letter_index(c: str) -> int:
    """
    Map a letter to its branch slot 0..25.
    Lowercase letters are accepted; anything else raises InvalidCharacterError.
    """
    upper = c.upper()
    if len(upper) != 1:
        raise InvalidCharacterError(c)
    idx = ord(upper) - _FIRST
    if idx < 0 or idx >= len(LETTERS):
        raise InvalidCharacterError(c)
    return idx


def get_letters(text: str) -> List[str]:
    """Sanitize `text` and return it as a list of letters."""
    return list(sanitize(text))


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens across an iterable of lines."""
    for line in lines:
        yield from line.split()
