# spell_suggester/core/protocols.py
"""
Small typing helpers shared by the core modules.

Comparator describes the two-argument ordering functions the sorters take.
CheckerStats is the snapshot returned by Checker.stats() and shown by the CLI
and the profiling tool.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from typing_extensions import TypedDict

T_contra = TypeVar("T_contra", contravariant=True)


class Comparator(Protocol[T_contra]):
    """Negative if left < right, 0 if equal, positive if left > right."""

    def __call__(self, left: T_contra, right: T_contra) -> int:
        ...


class CheckerStats(TypedDict):
    words: int
    nodes: int
    nodes_visited: int
