"""
spell_suggester.core

The spelling-suggestion engine.
Contains:
 - text normalisation to the 26-letter alphabet
 - the 26-way prefix tree (TrieNode, Trie)
 - the Checker dictionary and its bounded edit-distance search
 - Suggestion records and their ranking
 - comparator-driven in-place sorting (HeapSorter)
"""

from .checker import MAX_EDIT_DISTANCE, Checker
from .distance import levenshtein_with_cutoff
from .errors import InvalidCharacterError, SpellCheckError, WordNotFoundError
from .sorter import HeapSorter, Sorter, array_to_string, default_comparator
from .suggestion import SpellingComparator, Suggestion, spelling_comparator
from .text_utils import LETTERS, get_letters, letter_index, sanitize
from .trie import Trie, TrieNode

__all__ = [
    "MAX_EDIT_DISTANCE",
    "Checker",
    "levenshtein_with_cutoff",
    "InvalidCharacterError",
    "SpellCheckError",
    "WordNotFoundError",
    "HeapSorter",
    "Sorter",
    "array_to_string",
    "default_comparator",
    "SpellingComparator",
    "Suggestion",
    "spelling_comparator",
    "LETTERS",
    "get_letters",
    "letter_index",
    "sanitize",
    "Trie",
    "TrieNode",
]
