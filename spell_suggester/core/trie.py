# trie.py
# 26-way prefix tree backing the spell checker dictionary.
# Each node knows its parent, depth and the letter leading to it, so the
# string a node represents can be rebuilt without storing it.
# Frequency doubles as the word marker: 0 means "not a complete word".
# Every child lookup or creation is counted on the owning Trie.

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .errors import WordNotFoundError
from .text_utils import LETTERS, letter_index

Candidate = Tuple[str, int]


class TrieNode:
    """
    A single node in the Trie.
    children: 26 slots, one per letter, None until first insertion
    parent: non-owning back-reference (None for the root)
    frequency: corpus count, > 0 iff this path spells a real word
    """

    __slots__ = ("_owner", "parent", "depth", "letter", "frequency", "children")

    def __init__(
        self, owner: "Trie", parent: Optional["TrieNode"] = None, letter: str = ""
    ) -> None:
        self._owner = owner
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self.letter = letter  # "" for the root
        self.frequency = 0
        self.children: List[Optional[TrieNode]] = [None] * len(LETTERS)

    def get_child(self, letter: str) -> Optional["TrieNode"]:
        """Return the child reached by `letter`, or None if there isn't one."""
        self._owner._nodes_visited += 1
        return self.children[letter_index(letter)]

    def add_child(self, letter: str) -> "TrieNode":
        """Return the child for `letter`, creating it first if needed."""
        idx = letter_index(letter)
        child = self.children[idx]
        if child is None:
            child = TrieNode(self._owner, self, LETTERS[idx])
            self.children[idx] = child
            self._owner._node_count += 1
        self._owner._nodes_visited += 1
        return child

    def increment_frequency(self) -> None:
        self.frequency += 1

    @property
    def is_word(self) -> bool:
        return self.frequency > 0

    @property
    def word(self) -> str:
        """The string spelled from the root down to this node."""
        letters = [""] * self.depth
        node = self
        for i in range(self.depth - 1, -1, -1):
            letters[i] = node.letter
            node = node.parent
        return "".join(letters)

    def __str__(self) -> str:
        return self.word

    def __repr__(self) -> str:
        return f"TrieNode({self.word!r}, depth={self.depth}, frequency={self.frequency})"


class Trie:
    """
    Owns the root node and the work counters for a single dictionary.
    Callers pass already-sanitized strings; the Checker takes care of that.
    """

    def __init__(self) -> None:
        self._nodes_visited = 0
        self._node_count = 1
        self.root = TrieNode(self)

    @property
    def nodes_visited(self) -> int:
        """Cumulative child lookups/creations. Never reset."""
        return self._nodes_visited

    @property
    def node_count(self) -> int:
        return self._node_count

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> TrieNode:
        """
        Walk/create the path for `word` and return its terminal node.
        Marks the terminal as a word (frequency 1) only if it wasn't one yet.
        """
        node = self.root
        for ch in word:
            node = node.add_child(ch)
        if node is not self.root and node.frequency == 0:
            node.increment_frequency()
        return node

    # lookup ---------------------------------------------------------
    def find(self, word: str) -> Optional[TrieNode]:
        """Return the node for `word`, or None as soon as a step is missing."""
        node = self.root
        for ch in word:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    def require(self, word: str) -> TrieNode:
        """Like find() but raises WordNotFoundError for a missing path."""
        node = self.find(word)
        if node is None:
            raise WordNotFoundError(word)
        return node

    # traversal ------------------------------------------------------
    def iter_words(self) -> Iterator[Candidate]:
        """
        Yield (word, frequency) for every recognized word, alphabetically.
        Reads the child slots directly so inspection doesn't count as work.
        """
        stack: List[Tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix, node.frequency
            # push in reverse so "A" is popped first
            for child in reversed(node.children):
                if child is not None:
                    stack.append((child, prefix + child.letter))
