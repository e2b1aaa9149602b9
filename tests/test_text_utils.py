# tests/test_text_utils.py
import pytest

from spell_suggester.core.errors import InvalidCharacterError
from spell_suggester.core.text_utils import (
    LETTERS,
    get_letters,
    iter_tokens,
    letter_index,
    sanitize,
)


@pytest.mark.parametrize(
    "raw, clean",
    [
        ("hello", "HELLO"),
        ("Hello, World 42!", "HELLOWORLD"),
        ("don't", "DONT"),
        ("1234 -- !!", ""),
        ("", ""),
        ("naïve", "NAVE"),
    ],
)
def test_sanitize(raw, clean):
    assert sanitize(raw) == clean


def test_letters_are_the_alphabet_in_order():
    assert len(LETTERS) == 26
    assert "".join(LETTERS) == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_letter_index_maps_both_cases():
    assert letter_index("A") == 0
    assert letter_index("z") == 25
    assert [letter_index(c) for c in LETTERS] == list(range(26))


@pytest.mark.parametrize("bad", ["1", "!", " ", "", "AB", "é"])
def test_letter_index_rejects_non_letters(bad):
    with pytest.raises(InvalidCharacterError) as info:
        letter_index(bad)
    assert isinstance(info.value, ValueError)
    assert info.value.char == bad


def test_get_letters():
    assert get_letters("a-b c") == ["A", "B", "C"]


def test_iter_tokens_spans_lines():
    lines = ["  one two\n", "\n", "three\tfour  five"]
    assert list(iter_tokens(lines)) == ["one", "two", "three", "four", "five"]
