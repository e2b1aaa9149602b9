# tests/conftest.py
import pytest

from spell_suggester.core.checker import Checker

WORDS = """
cat bat cats car care cart hat that the then than
dog dogs do done bone cone
a ab abc
"""

CORPUS = """
the cat sat on the mat. The cat! a dog, a cat and a bat.
that hat; then than the car. Car cart -- carts? xyzzy
"""


@pytest.fixture
def checker():
    return Checker.from_text(WORDS, CORPUS)


@pytest.fixture
def cat_checker():
    # CAT:5, BAT:2, CATS:1
    return Checker.from_text("CAT BAT CATS", "cat cat cat cat bat")


@pytest.fixture
def source_files(tmp_path):
    words = tmp_path / "words.txt"
    corpus = tmp_path / "corpus.txt"
    words.write_text(WORDS)
    corpus.write_text(CORPUS)
    return words, corpus
