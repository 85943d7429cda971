import random

import pytest

from heapbench.datastructures import (
    IndexedMinHeap,
    IncompatibleOrderingError,
    InvalidArgumentError,
    InvalidHandleError,
    KeyOrdering,
    merge,
    natural_order,
    reverse_order,
)
from heapbench.metrics import PerformanceTracker


def drain_keys(heap):
    keys = []
    while heap:
        keys.append(heap.extract_min()[0])
    return keys


def make_heap(pairs, compare=None, tracker=None):
    h = IndexedMinHeap(compare, tracker)
    for key, value in pairs:
        h.insert(key, value)
    return h


def test_merge_ok():
    h1 = make_heap([(4, "a"), (2, "b")])
    h2 = make_heap([(3, "c"), (1, "d")])
    m = IndexedMinHeap.merge(h1, h2)
    assert h1.is_empty() and h2.is_empty()
    assert len(m) == 4
    assert [m.extract_min() for _ in range(4)] == [(1, "d"), (2, "b"), (3, "c"), (4, "a")]


def test_free_function_merge():
    m = merge(make_heap([(2, "x")]), make_heap([(1, "y")]))
    assert m.peek_min() == "y"


def test_merge_comparator_mismatch_leaves_inputs_untouched():
    h1 = make_heap([(1, "a"), (5, "b")], natural_order)
    h2 = make_heap([(2, "c"), (7, "d")], reverse_order)
    with pytest.raises(IncompatibleOrderingError):
        IndexedMinHeap.merge(h1, h2)
    assert len(h1) == 2 and len(h2) == 2
    assert drain_keys(h1) == [1, 5]
    assert drain_keys(h2) == [7, 2]


def test_merge_rejects_distinct_lambdas():
    h1 = make_heap([(1, "a")], lambda x, y: x - y)
    h2 = make_heap([(2, "b")], lambda x, y: x - y)
    with pytest.raises(IncompatibleOrderingError):
        merge(h1, h2)


def test_merge_accepts_equal_key_orderings():
    h1 = make_heap([(-5, "a")], KeyOrdering(abs))
    h2 = make_heap([(2, "b"), (-1, "c")], KeyOrdering(abs))
    m = merge(h1, h2)
    assert drain_keys(m) == [-1, 2, -5]


def test_default_and_explicit_natural_order_are_compatible():
    m = merge(make_heap([(3, "a")]), make_heap([(1, "b")], natural_order))
    assert drain_keys(m) == [1, 3]


@pytest.mark.parametrize("left,right", [(None, "heap"), ("heap", None), ([1, 2], "heap")])
def test_merge_invalid_argument(left, right):
    h = make_heap([(1, "a")])
    left = h if left == "heap" else left
    right = h if right == "heap" else right
    with pytest.raises(InvalidArgumentError):
        merge(left, right)
    assert len(h) == 1


def test_merge_with_itself_rejected():
    h = make_heap([(1, "a"), (2, "b")])
    with pytest.raises(InvalidArgumentError):
        merge(h, h)
    assert len(h) == 2


def test_merge_empty_heaps():
    m = merge(IndexedMinHeap(), IndexedMinHeap())
    assert m.is_empty()
    m2 = merge(IndexedMinHeap(), make_heap([(1, "a")]))
    assert m2.extract_min() == (1, "a")


def test_merge_random_sizes_drains_sorted_union():
    rnd = random.Random(11)
    for m_size, n_size in [(0, 5), (1, 1), (17, 40), (200, 3)]:
        ka = [rnd.randint(0, 50) for _ in range(m_size)]
        kb = [rnd.randint(0, 50) for _ in range(n_size)]
        a = make_heap([(k, k) for k in ka])
        b = make_heap([(k, k) for k in kb])
        merged = merge(a, b)
        assert len(merged) == m_size + n_size
        assert a.is_empty() and b.is_empty()
        assert drain_keys(merged) == sorted(ka + kb)


def test_handles_move_with_their_entries():
    a = IndexedMinHeap()
    b = IndexedMinHeap()
    ha = a.insert(10, "a")
    hb = b.insert(20, "b")
    b.insert(5, "c")
    merged = merge(a, b)

    assert ha.is_valid and hb.is_valid
    assert merged.key_of(ha) == 10
    with pytest.raises(InvalidHandleError):
        a.key_of(ha)

    merged.decrease_key(hb, 1)
    assert merged.extract_min() == (1, "b")
    assert not hb.is_valid


def test_sources_remain_usable_after_merge():
    a = make_heap([(3, "a")])
    b = make_heap([(4, "b")])
    merge(a, b)
    a.insert(1, "new")
    assert a.extract_min() == (1, "new")


def test_tracker_taken_from_left_then_right():
    left_tracker = PerformanceTracker()
    right_tracker = PerformanceTracker()

    m = merge(IndexedMinHeap(tracker=left_tracker), IndexedMinHeap(tracker=right_tracker))
    assert m.tracker is left_tracker

    m = merge(IndexedMinHeap(), IndexedMinHeap(tracker=right_tracker))
    assert m.tracker is right_tracker

    m = merge(IndexedMinHeap(), IndexedMinHeap())
    assert m.tracker is None


def test_merge_build_heap_is_linear():
    tracker = PerformanceTracker()
    rnd = random.Random(5)
    a = make_heap([(rnd.random(), None) for _ in range(500)], tracker=tracker)
    b = make_heap([(rnd.random(), None) for _ in range(500)])
    before = tracker.comparisons
    merged = merge(a, b)
    # Build-heap does at most two comparisons per unit of node height
    assert tracker.comparisons - before <= 2 * len(merged)
