# tests/test_suggest.py
# bounded edit-distance search over the trie and the ranking of its results

import pytest

from spell_suggester.core.checker import MAX_EDIT_DISTANCE, Checker
from spell_suggester.core.distance import levenshtein_with_cutoff
from spell_suggester.core.suggestion import Suggestion, spelling_comparator
from spell_suggester.core.text_utils import sanitize

QUERIES = [
    "cat", "cst", "caat", "ct", "cats", "tha", "thn", "dgo", "dogz",
    "abcd", "b", "", "zzzzzz", "c@t!", "kart", "bonee", "oc",
]


def brute_force(checker, query):
    """Every word within MAX_EDIT_DISTANCE by plain Levenshtein."""
    target = sanitize(query)
    out = set()
    for word, freq in checker.words():
        d = levenshtein_with_cutoff(target, word, MAX_EDIT_DISTANCE)
        if d <= MAX_EDIT_DISTANCE:
            out.add(Suggestion(word, d, freq))
    return out


def test_ranking_example(cat_checker):
    assert cat_checker.suggest("CAT") == [
        Suggestion("CAT", 0, 5),
        Suggestion("BAT", 1, 2),
        Suggestion("CATS", 1, 1),
    ]


def test_distance_beats_frequency(cat_checker):
    assert cat_checker.suggest("bats") == [
        Suggestion("BAT", 1, 2),
        Suggestion("CATS", 1, 1),
        Suggestion("CAT", 2, 5),
    ]


def test_alphabetical_tie_break():
    c = Checker.from_text("hat cat bat", "")
    assert [s.string for s in c.suggest("xat")] == ["BAT", "CAT", "HAT"]


@pytest.mark.parametrize("query", QUERIES)
def test_matches_brute_force(checker, query):
    result = checker.suggest(query)
    assert set(result) == brute_force(checker, query)


@pytest.mark.parametrize("query", QUERIES)
def test_no_duplicates(checker, query):
    strings = [s.string for s in checker.suggest(query)]
    assert len(strings) == len(set(strings))


@pytest.mark.parametrize("query", QUERIES)
def test_results_are_ranked(checker, query):
    result = checker.suggest(query)
    for a, b in zip(result, result[1:]):
        assert spelling_comparator(a, b) < 0
        assert (
            a.edit_distance < b.edit_distance
            or (a.edit_distance == b.edit_distance and a.frequency > b.frequency)
            or (
                a.edit_distance == b.edit_distance
                and a.frequency == b.frequency
                and a.string <= b.string
            )
        )


@pytest.mark.parametrize("word", ["cat", "the", "a", "dogs", "abc", "bone"])
def test_dictionary_word_comes_first_at_distance_zero(checker, word):
    result = checker.suggest(word)
    assert result[0] == Suggestion(word.upper(), 0, checker.frequency_of(word))


def test_query_is_sanitized(checker):
    assert sanitize("c@t!") == "CT"
    assert checker.suggest("c@t!") == checker.suggest("CT")
    assert checker.suggest("c-a-t!") == checker.suggest("CAT")
    assert checker.suggest("C.A.T")[0] == Suggestion("CAT", 0, 4)
    assert checker.suggest("  Cat ") == checker.suggest("cat")


def test_empty_query_finds_short_words(checker):
    assert checker.suggest("") == [
        Suggestion("A", 1, 4),
        Suggestion("AB", 2, 1),
        Suggestion("DO", 2, 1),
    ]


def test_nothing_within_radius(checker):
    assert checker.suggest("zzzzzz") == []
    assert Checker().suggest("") == []


def test_limit_truncates_ranked_list(checker):
    full = checker.suggest("cat")
    assert len(full) > 3
    assert checker.suggest("cat", limit=3) == full[:3]
    assert checker.suggest("cat", limit=0) == []


def test_negative_limit_raises(checker):
    with pytest.raises(ValueError):
        checker.suggest("cat", limit=-1)


def test_get_suggestions_alias(checker):
    assert checker.get_suggestions("thn") == checker.suggest("thn")


def test_more_than_a_hundred_matches():
    # every two-letter word is within distance 2 of the empty query
    words = " ".join(a + b for a in "ABCDEFGHIJ" for b in "ABCDEFGHIJKLM")
    c = Checker.from_text(words, "")
    result = c.suggest("")
    assert len(result) == 130
    assert all(s.edit_distance == 2 for s in result)
    assert result[0].string == "AA"
    assert result[-1].string == "JM"


def test_long_words():
    long_word = "A" * 60
    c = Checker.from_text(long_word + " B", "")
    assert c.suggest(long_word)[0] == Suggestion(long_word, 0, 1)
    assert c.suggest(long_word[:-1]) == [Suggestion(long_word, 1, 1)]
    assert c.suggest("X" * 3000) == []


def test_search_counts_visits_without_changing_results(checker):
    before = checker.nodes_visited
    first = checker.suggest("cst")
    used = checker.nodes_visited - before
    assert used > 0
    assert checker.suggest("cst") == first
    assert checker.nodes_visited == before + 2 * used


def test_search_reflects_frequency_updates(cat_checker):
    for _ in range(5):
        cat_checker.increment_frequency("cats")
    ranked = [s.string for s in cat_checker.suggest("cat")]
    assert ranked == ["CAT", "CATS", "BAT"]
