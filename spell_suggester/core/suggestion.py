# suggestion.py
# A ranked spelling correction and the ordering used to rank them:
#  - smaller edit distance first
#  - then higher corpus frequency
#  - then alphabetical

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """
    A single suggested correction for some string.
    string: the suggested word (uppercase letters only)
    edit_distance: minimum edit distance from the query (0, 1 or 2)
    frequency: corpus frequency of the suggested word (>= 1)
    """

    string: str
    edit_distance: int
    frequency: int

    def __str__(self) -> str:
        return (
            f'[Suggestion: "{self.string}" (edit distance {self.edit_distance}) '
            f"(frequency {self.frequency})]"
        )


def spelling_comparator(a: Suggestion, b: Suggestion) -> int:
    """Negative if `a` ranks before `b`, positive if after, 0 if equal."""
    if a.edit_distance != b.edit_distance:
        return a.edit_distance - b.edit_distance
    if a.frequency != b.frequency:
        return b.frequency - a.frequency
    if a.string < b.string:
        return -1
    if a.string > b.string:
        return 1
    return 0


class SpellingComparator:
    """Callable wrapper so the ranking can be passed around as an object."""

    def __call__(self, a: Suggestion, b: Suggestion) -> int:
        return spelling_comparator(a, b)
