"""Spelling suggestions from a frequency-weighted word list."""

from .core import Checker, Suggestion, WordNotFoundError

__all__ = ["Checker", "Suggestion", "WordNotFoundError"]

__version__ = "0.1.0"
