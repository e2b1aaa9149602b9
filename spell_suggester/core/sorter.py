# sorter.py
# In-place array sorting with a pluggable ordering.
# A sorter rearranges a mutable sequence from smallest to largest, where
# "smaller" is decided by a two-argument comparator (negative/0/positive).
# HeapSorter: Theta(n log n) in every case, O(1) extra space, not stable.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, MutableSequence, Optional, Sequence, TypeVar

from .protocols import Comparator

T = TypeVar("T")


def default_comparator(left: Any, right: Any) -> int:
    """Orders elements by their own natural (<) ordering."""
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def array_to_string(array: Sequence[Any]) -> str:
    """Debug representation: [a, b, c]"""
    return "[" + ", ".join(str(x) for x in array) + "]"


class Sorter(ABC, Generic[T]):
    """Base class for sorters; defaults to natural ordering."""

    def __init__(self, comparator: Optional[Comparator[T]] = None) -> None:
        if comparator is None:
            comparator = default_comparator
        self.comparator: Comparator[T] = comparator

    @abstractmethod
    def sort(self, array: MutableSequence[T]) -> None:
        """Rearrange `array` in place so it runs smallest to largest."""


class HeapSorter(Sorter[T]):
    """Heap sort: build a max heap, then repeatedly move the max to the end."""

    def sort(self, array: MutableSequence[T]) -> None:
        self.build_max_heap(array)
        for end in range(len(array) - 1, 0, -1):
            array[0], array[end] = array[end], array[0]
            self.max_heapify_down(array, end)

    def build_max_heap(self, array: MutableSequence[T]) -> None:
        """Rearrange an arbitrary array into a max heap."""
        n = len(array)
        for start in range(n // 2 - 1, -1, -1):
            self.max_heapify_down(array, n, start)

    def max_heapify_down(
        self, array: MutableSequence[T], range_: int, start: int = 0
    ) -> None:
        """
        Sift array[start] down until the first `range_` elements form a max
        heap again. Elements at index >= range_ are never touched.
        """
        cmp = self.comparator
        while True:
            left = 2 * start + 1
            right = left + 1
            largest = start
            if left < range_ and cmp(array[largest], array[left]) < 0:
                largest = left
            if right < range_ and cmp(array[largest], array[right]) < 0:
                largest = right
            if largest == start:
                return
            array[start], array[largest] = array[largest], array[start]
            start = largest
