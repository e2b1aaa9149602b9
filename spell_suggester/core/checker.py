# checker.py
# Spell checker: a dictionary of correctly spelled words with corpus
# frequencies, and a fuzzy search returning ranked corrections.
#
# suggest() walks the query and the trie together instead of generating
# candidate strings. Each work item is (edits, pos, node) and branches on:
#  - match:        follow the query's letter at pos, free
#  - insertion:    follow any child, pos unchanged, +1 edit
#  - substitution: follow any child, pos + 1, +1 edit
#  - deletion:     stay on node, pos + 1, +1 edit
# A node reached with pos == len(query) and frequency > 0 is a hit.

from __future__ import annotations

from os import PathLike
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..utils.logger_utils import Log, engine_log
from .protocols import CheckerStats
from .sorter import HeapSorter
from .suggestion import Suggestion, spelling_comparator
from .text_utils import LETTERS, iter_tokens, sanitize
from .trie import Trie, TrieNode

# Only words this many edits (Levenshtein) from the query are suggested.
MAX_EDIT_DISTANCE = 2

_WorkItem = Tuple[int, int, TrieNode]


class Checker:
    """
    Dictionary of correctly spelled words backed by a 26-way Trie.

    Build phase (add_word / increment_frequency) must finish before the
    query phase; the instance is not safe for concurrent mutation.
    """

    def __init__(self, log: Optional[Log] = None) -> None:
        self._trie = Trie()
        self._log = log or engine_log
        self._sorter: HeapSorter[Suggestion] = HeapSorter(spelling_comparator)

    # construction ------------------------------------------------------------
    @classmethod
    def from_lines(
        cls,
        dictionary: Iterable[str],
        corpus: Iterable[str],
        log: Optional[Log] = None,
    ) -> "Checker":
        """
        Build from two line sources. Every dictionary token becomes a word;
        every corpus token that is already a word bumps its frequency.
        Tokens that sanitize to nothing are skipped.
        """
        checker = cls(log=log)
        with checker._log.time_block("build dictionary"):
            added = checker._load_words(dictionary)
            counted = checker._load_corpus(corpus)
        if checker._log.enabled_for("DEBUG"):
            checker._log.debug(
                f"dictionary built: {added} word tokens, {counted} corpus hits, "
                f"{len(checker)} words, {checker._trie.node_count} nodes"
            )
        return checker

    @classmethod
    def from_text(
        cls, dictionary_text: str, corpus_text: str, log: Optional[Log] = None
    ) -> "Checker":
        return cls.from_lines(
            dictionary_text.splitlines(), corpus_text.splitlines(), log=log
        )

    @classmethod
    def from_files(
        cls,
        dictionary_path: Union[str, PathLike],
        corpus_path: Union[str, PathLike],
        encoding: Optional[str] = None,
        log: Optional[Log] = None,
    ) -> "Checker":
        """
        Build from a word-list file and a corpus file (whitespace separated).
        Raises OSError (e.g. FileNotFoundError) if either file is unreadable.
        """
        with open(dictionary_path, "r", encoding=encoding) as dict_file, open(
            corpus_path, "r", encoding=encoding
        ) as corpus_file:
            return cls.from_lines(dict_file, corpus_file, log=log)

    def _load_words(self, lines: Iterable[str]) -> int:
        added = 0
        for token in iter_tokens(lines):
            word = sanitize(token)
            if not word:
                continue
            self._trie.insert(word)
            added += 1
        return added

    def _load_corpus(self, lines: Iterable[str]) -> int:
        counted = 0
        for token in iter_tokens(lines):
            word = sanitize(token)
            if not word:
                continue
            node = self._trie.find(word)
            # unknown words and bare prefixes are ignored
            if node is None or not node.is_word:
                continue
            node.increment_frequency()
            counted += 1
        return counted

    # dictionary operations -----------------------------------------------------
    def add_word(self, word: str) -> None:
        """
        Add a word with frequency 1. Re-adding a known word changes nothing,
        including its frequency.
        """
        self._trie.insert(sanitize(word))

    def is_word(self, word: str) -> bool:
        node = self._trie.find(sanitize(word))
        return node is not None and node.is_word

    def frequency_of(self, word: str) -> int:
        """
        Corpus frequency of `word`.
        Raises WordNotFoundError if the word's path isn't in the trie.
        """
        return self._trie.require(sanitize(word)).frequency

    def increment_frequency(self, word: str) -> None:
        """
        Add one to the frequency of `word`.
        Raises WordNotFoundError if the path is missing; the root (empty
        string) is never incremented.
        """
        node = self._trie.require(sanitize(word))
        if node is not self._trie.root:
            node.increment_frequency()

    # search ------------------------------------------------------------------
    def suggest(self, query: str, limit: Optional[int] = None) -> List[Suggestion]:
        """
        Return every dictionary word within MAX_EDIT_DISTANCE of `query`,
        ranked by edit distance, then frequency (high first), then
        alphabetically. A correctly spelled query comes back first with
        distance 0. `limit` truncates the ranked list; a negative limit
        raises ValueError.
        """
        target = sanitize(query)
        found = self._search(target)
        self._sorter.sort(found)
        if limit is not None:
            if limit < 0:
                raise ValueError(f"limit must be >= 0, got {limit}")
            del found[limit:]
        return found

    get_suggestions = suggest

    def _search(self, target: str) -> List[Suggestion]:
        """Collect raw hits, one entry per word at its lowest distance."""
        n = len(target)
        hits: List[Suggestion] = []
        slot_of: Dict[str, int] = {}

        stack: List[_WorkItem] = [(0, 0, self._trie.root)]
        seen: Set[Tuple[int, int, int]] = set()
        while stack:
            edits, pos, node = stack.pop()
            # the same state reached along another path has the same future
            state = (edits, pos, id(node))
            if state in seen:
                continue
            seen.add(state)

            if pos == n and node.frequency > 0:
                self._record_hit(hits, slot_of, node, edits)

            if pos < n:
                child = node.get_child(target[pos])
                if child is not None:
                    stack.append((edits, pos + 1, child))

            if edits < MAX_EDIT_DISTANCE:
                for letter in LETTERS:
                    child = node.get_child(letter)
                    if child is None:
                        continue
                    stack.append((edits + 1, pos, child))
                    if pos < n:
                        stack.append((edits + 1, pos + 1, child))
                if pos < n:
                    stack.append((edits + 1, pos + 1, node))
        return hits

    @staticmethod
    def _record_hit(
        hits: List[Suggestion], slot_of: Dict[str, int], node: TrieNode, edits: int
    ) -> None:
        word = node.word
        slot = slot_of.get(word)
        if slot is None:
            slot_of[word] = len(hits)
            hits.append(Suggestion(word, edits, node.frequency))
        elif edits < hits[slot].edit_distance:
            # rediscovered more cheaply: overwrite in place
            hits[slot] = Suggestion(word, edits, node.frequency)

    # inspection --------------------------------------------------------------
    @property
    def nodes_visited(self) -> int:
        """Cumulative number of trie child lookups/creations; never reset."""
        return self._trie.nodes_visited

    def words(self) -> Iterator[Tuple[str, int]]:
        """Yield (word, frequency) for every word, alphabetically."""
        return self._trie.iter_words()

    def stats(self) -> CheckerStats:
        return CheckerStats(
            words=len(self),
            nodes=self._trie.node_count,
            nodes_visited=self.nodes_visited,
        )

    def __len__(self) -> int:
        return sum(1 for _ in self._trie.iter_words())

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __repr__(self) -> str:
        return f"Checker(nodes={self._trie.node_count}, nodes_visited={self.nodes_visited})"
