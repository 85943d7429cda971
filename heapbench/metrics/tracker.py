"""
Operation counters for empirical complexity analysis.

A `PerformanceTracker` is injected into a heap and receives one call per
primitive operation: key comparisons, swaps, element reads (gets), element
writes (sets), and allocations (entry creations). The counters only ever
increase until `reset()` is called.
"""
from __future__ import annotations
from dataclasses import dataclass, astuple


@dataclass(frozen=True)
class TrackerSnapshot:
    """Immutable copy of a tracker's counters."""

    comparisons: int = 0
    swaps: int = 0
    array_gets: int = 0
    array_sets: int = 0
    allocations: int = 0

    def as_tuple(self) -> tuple:
        return astuple(self)


class PerformanceTracker:
    """Counts comparisons, swaps, array gets/sets and allocations."""

    __slots__ = ("_comparisons", "_swaps", "_array_gets", "_array_sets", "_allocations")

    def __init__(self) -> None:
        self.reset()

    # -----------------------------
    # Hooks called by the heap
    # -----------------------------
    def inc_comparison(self) -> None:
        self._comparisons += 1

    def inc_swap(self) -> None:
        self._swaps += 1

    def inc_get(self) -> None:
        self._array_gets += 1

    def inc_set(self) -> None:
        self._array_sets += 1

    def inc_allocation(self) -> None:
        self._allocations += 1

    # -----------------------------
    # Read-only counters
    # -----------------------------
    @property
    def comparisons(self) -> int:
        return self._comparisons

    @property
    def swaps(self) -> int:
        return self._swaps

    @property
    def array_gets(self) -> int:
        return self._array_gets

    @property
    def array_sets(self) -> int:
        return self._array_sets

    @property
    def allocations(self) -> int:
        return self._allocations

    def reset(self) -> None:
        """Zero every counter."""
        self._comparisons = 0
        self._swaps = 0
        self._array_gets = 0
        self._array_sets = 0
        self._allocations = 0

    def snapshot(self) -> TrackerSnapshot:
        return TrackerSnapshot(
            self._comparisons,
            self._swaps,
            self._array_gets,
            self._array_sets,
            self._allocations,
        )

    def __repr__(self) -> str:
        return (
            f"PerformanceTracker(comparisons={self._comparisons}, swaps={self._swaps}, "
            f"array_gets={self._array_gets}, array_sets={self._array_sets}, "
            f"allocations={self._allocations})"
        )


class NullTracker(PerformanceTracker):
    """A tracker that ignores every hook; counters stay at zero."""

    __slots__ = ()

    def inc_comparison(self) -> None:  # pragma: no cover - trivial
        pass

    def inc_swap(self) -> None:  # pragma: no cover - trivial
        pass

    def inc_get(self) -> None:  # pragma: no cover - trivial
        pass

    def inc_set(self) -> None:  # pragma: no cover - trivial
        pass

    def inc_allocation(self) -> None:  # pragma: no cover - trivial
        pass

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "NullTracker()"


NULL_TRACKER = NullTracker()
