# errors.py
# Exception types raised by the spell checker core.
# Lookup errors are recoverable by the caller (e.g. treat as frequency 0).


class SpellCheckError(Exception):
    """Base class for all spell checker errors."""


class WordNotFoundError(SpellCheckError, KeyError):
    """Raised when a word's path does not exist in the dictionary trie."""

    def __init__(self, word: str) -> None:
        super().__init__(word)
        self.word = word

    def __str__(self) -> str:
        return f"word not found: {self.word!r}"


class InvalidCharacterError(SpellCheckError, ValueError):
    """Raised when a non-letter reaches the alphabet index mapping."""

    def __init__(self, char: str) -> None:
        super().__init__(char)
        self.char = char

    def __str__(self) -> str:
        return f"the character {self.char!r} is not a letter"
