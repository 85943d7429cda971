"""
Ordering policies for IndexedMinHeap.

A policy is any callable ``compare(x, y) -> int`` returning a negative
number, zero, or a positive number when x is less than, equal to, or
greater than y. Two heaps can be merged only when their policies are equal
(``==``), so prefer the module-level functions or `KeyOrdering` over fresh
lambdas when heaps are meant to be merged.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable

Compare = Callable[[Any, Any], int]


def natural_order(x: Any, y: Any) -> int:
    """Order keys by their own ``<``."""
    if x < y:
        return -1
    if y < x:
        return 1
    return 0


def reverse_order(x: Any, y: Any) -> int:
    """Natural order reversed (turns the heap into a max-heap)."""
    return natural_order(y, x)


@dataclass(frozen=True)
class KeyOrdering:
    """Order keys by ``key(k)``; equal whenever the key functions are equal."""

    key: Callable[[Any], Any]
    reverse: bool = False

    def __call__(self, x: Any, y: Any) -> int:
        result = natural_order(self.key(x), self.key(y))
        return -result if self.reverse else result
