from __future__ import annotations
import logging
from typing import Generic, List, Optional, Tuple, TypeVar

from ..metrics.tracker import NULL_TRACKER, PerformanceTracker
from .errors import (
    EmptyHeapError,
    IncompatibleOrderingError,
    InvalidArgumentError,
    InvalidHandleError,
    InvalidKeyError,
    KeyIncreaseRejectedError,
)
from .ordering import Compare, natural_order

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

_INVALID = -1


class Handle:
    """Opaque token identifying one live entry of the heap that issued it.

    Returned by `IndexedMinHeap.insert` and passed back to `key_of` and
    `decrease_key`. The heap keeps the handle's position current as the
    entry moves; once the entry is extracted the handle is invalidated for
    good.
    """

    __slots__ = ("_index",)

    def __init__(self, index: int) -> None:
        self._index = index

    @property
    def is_valid(self) -> bool:
        return self._index >= 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        state = "valid" if self.is_valid else "invalidated"
        return f"<Handle {state}>"


class _Entry(Generic[K, V]):
    """One (key, value, handle) triple stored in the heap array."""

    __slots__ = ("key", "value", "handle")

    def __init__(self, key: K, value: V, handle: Handle) -> None:
        self.key = key
        self.value = value
        self.handle = handle


class IndexedMinHeap(Generic[K, V]):
    """A binary min-heap with stable handles, decrease-key and O(n) merge.

    Keys are ordered by ``compare`` (see `heapbench.datastructures.ordering`),
    defaulting to the keys' natural order. An optional `PerformanceTracker`
    receives one call per comparison, swap, element read/write and
    allocation.

    Not thread-safe: callers sharing a heap across threads must serialize
    access themselves.
    """

    __slots__ = ("_data", "_compare", "_tracker", "_perf")

    def __init__(
        self,
        compare: Optional[Compare] = None,
        tracker: Optional[PerformanceTracker] = None,
    ) -> None:
        self._data: List[_Entry[K, V]] = []
        self._compare: Compare = compare if compare is not None else natural_order
        self._tracker = tracker
        # Hooks always go through _perf so the hot paths need no None checks
        self._perf: PerformanceTracker = tracker if tracker is not None else NULL_TRACKER

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _cmp(self, x: K, y: K) -> int:
        self._perf.inc_comparison()
        return self._compare(x, y)

    def _get(self, i: int) -> _Entry[K, V]:
        self._perf.inc_get()
        return self._data[i]

    def _set(self, i: int, entry: _Entry[K, V]) -> None:
        self._perf.inc_set()
        self._data[i] = entry

    def _swap(self, i: int, j: int) -> None:
        """Exchange two entries and move their handles with them."""
        if i == j:
            return
        self._perf.inc_swap()
        ei = self._get(i)
        ej = self._get(j)
        self._set(i, ej)
        self._set(j, ei)
        ej.handle._index = i
        ei.handle._index = j

    def _sift_up(self, idx: int) -> None:
        while idx > 0:
            parent = self._parent(idx)
            if self._cmp(self._get(idx).key, self._get(parent).key) >= 0:
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        n = len(self._data)
        while True:
            left = 2 * idx + 1
            right = 2 * idx + 2
            smallest = idx
            if left < n and self._cmp(self._get(left).key, self._get(smallest).key) < 0:
                smallest = left
            # Strict comparison: an equal right child never beats the left one
            if right < n and self._cmp(self._get(right).key, self._get(smallest).key) < 0:
                smallest = right
            if smallest == idx:
                break
            self._swap(idx, smallest)
            idx = smallest

    def _heapify(self) -> None:
        """Bottom-up build-heap over the current array in O(n) time."""
        for i in range(len(self._data)):
            self._get(i).handle._index = i
        for i in reversed(range(len(self._data) // 2)):
            self._sift_down(i)

    def _ensure_not_empty(self) -> None:
        if not self._data:
            raise EmptyHeapError("heap is empty")

    def _check_handle(self, handle: Handle) -> int:
        if not isinstance(handle, Handle) or not handle.is_valid:
            raise InvalidHandleError("invalid handle")
        idx = handle._index
        if idx >= len(self._data) or self._get(idx).handle is not handle:
            raise InvalidHandleError("handle does not belong to this heap")
        return idx

    @staticmethod
    def _check_key(key: Optional[K]) -> None:
        if key is None:
            raise InvalidKeyError("key must not be None")

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def compare(self) -> Compare:
        return self._compare

    @property
    def tracker(self) -> Optional[PerformanceTracker]:
        return self._tracker

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def insert(self, key: K, value: Optional[V] = None) -> Handle:
        """Insert (key, value) in O(log n); the handle allows decrease_key later."""
        self._check_key(key)
        handle = Handle(len(self._data))
        self._data.append(_Entry(key, value, handle))
        self._perf.inc_allocation()
        self._sift_up(handle._index)
        return handle

    def peek_min(self) -> V:
        """Return the value at the root without removing it (O(1))."""
        self._ensure_not_empty()
        return self._get(0).value

    def extract_min(self) -> Tuple[K, V]:
        """Remove the root and return its (key, value) pair (O(log n)).

        The removed entry's handle is invalidated.
        """
        self._ensure_not_empty()
        root = self._get(0)
        self._swap(0, len(self._data) - 1)
        removed = self._data.pop()
        self._perf.inc_set()  # shrink
        removed.handle._index = _INVALID
        if self._data:
            self._sift_down(0)
        return root.key, root.value

    def key_of(self, handle: Handle) -> K:
        """Return the current key of the entry behind ``handle``."""
        idx = self._check_handle(handle)
        return self._get(idx).key

    def decrease_key(self, handle: Handle, new_key: K) -> None:
        """Lower the key of the entry behind ``handle`` in O(log n).

        Raises `KeyIncreaseRejectedError` if ``new_key`` is strictly greater
        than the current key; an equal key is accepted.
        """
        idx = self._check_handle(handle)
        self._check_key(new_key)
        entry = self._get(idx)
        if self._cmp(new_key, entry.key) > 0:
            raise KeyIncreaseRejectedError("new key is greater than the current key")
        entry.key = new_key
        self._sift_up(idx)

    @classmethod
    def merge(
        cls, left: IndexedMinHeap[K, V], right: IndexedMinHeap[K, V]
    ) -> IndexedMinHeap[K, V]:
        """Meld two heaps into a new one in O(n). Both sources are emptied.

        Entries (and their handles) move into the new heap. The tracker is
        taken from ``left`` if it has one, else from ``right``.
        """
        if not isinstance(left, IndexedMinHeap) or not isinstance(right, IndexedMinHeap):
            raise InvalidArgumentError("merge requires two heaps")
        if left is right:
            raise InvalidArgumentError("cannot merge a heap with itself")
        if left._compare != right._compare:
            raise IncompatibleOrderingError("orderings must match for merge")

        entries = left._data + right._data
        tracker = left._tracker if left._tracker is not None else right._tracker
        logger.debug("merging heaps of size %d and %d", len(left._data), len(right._data))
        left._data = []
        right._data = []

        merged = cls(left._compare, tracker)
        merged._data = entries
        merged._heapify()
        return merged

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = [(e.key, e.value) for e in self._data]
        return f"IndexedMinHeap({pairs!r})"


merge = IndexedMinHeap.merge
