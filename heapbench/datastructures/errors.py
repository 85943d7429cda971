"""
Error kinds raised by the indexed min-heap.

Every error derives from `HeapError` and from the builtin exception a caller
would naturally catch for that situation (e.g. `IndexError` for an empty
heap), so both styles of handling work.
"""


class HeapError(Exception):
    """Base class for all heap errors."""


class EmptyHeapError(HeapError, IndexError):
    """peek/extract on a heap with zero elements."""


class InvalidKeyError(HeapError, ValueError):
    """A None key was given to insert or decrease_key."""


class InvalidHandleError(HeapError, LookupError):
    """The handle is invalidated, foreign, or does not match its entry."""


class KeyIncreaseRejectedError(HeapError, ValueError):
    """decrease_key was given a key strictly greater than the current one."""


class IncompatibleOrderingError(HeapError, ValueError):
    """merge was given two heaps whose orderings are not equal."""


class InvalidArgumentError(HeapError, TypeError):
    """merge was given a missing or non-heap argument."""
