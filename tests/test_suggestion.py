# tests/test_suggestion.py
import dataclasses

import pytest

from spell_suggester.core.sorter import HeapSorter
from spell_suggester.core.suggestion import (
    SpellingComparator,
    Suggestion,
    spelling_comparator,
)


def test_structural_equality():
    assert Suggestion("CAT", 1, 3) == Suggestion("CAT", 1, 3)
    assert Suggestion("CAT", 1, 3) != Suggestion("CAT", 2, 3)
    assert len({Suggestion("CAT", 1, 3), Suggestion("CAT", 1, 3)}) == 1


def test_immutable():
    s = Suggestion("CAT", 0, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.frequency = 10


def test_str():
    assert str(Suggestion("CAT", 1, 3)) == (
        '[Suggestion: "CAT" (edit distance 1) (frequency 3)]'
    )


@pytest.mark.parametrize(
    "a, b",
    [
        (Suggestion("ZZZ", 0, 1), Suggestion("AAA", 1, 99)),  # distance first
        (Suggestion("ZZZ", 1, 5), Suggestion("AAA", 1, 4)),  # then frequency, high first
        (Suggestion("AAA", 1, 5), Suggestion("AAB", 1, 5)),  # then alphabetical
    ],
)
def test_comparator_order(a, b):
    assert spelling_comparator(a, b) < 0
    assert spelling_comparator(b, a) > 0


def test_comparator_equal():
    s = Suggestion("CAT", 1, 1)
    assert spelling_comparator(s, Suggestion("CAT", 1, 1)) == 0


def test_comparator_object_drives_heap_sort():
    cmp = SpellingComparator()
    items = [
        Suggestion("B", 1, 1),
        Suggestion("A", 1, 1),
        Suggestion("C", 0, 1),
        Suggestion("D", 1, 7),
    ]
    HeapSorter(cmp).sort(items)
    for a, b in zip(items, items[1:]):
        assert cmp(a, b) < 0
    assert [s.string for s in items] == ["C", "D", "A", "B"]
