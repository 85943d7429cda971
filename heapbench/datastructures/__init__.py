from .errors import (
    HeapError,
    EmptyHeapError,
    InvalidKeyError,
    InvalidHandleError,
    KeyIncreaseRejectedError,
    IncompatibleOrderingError,
    InvalidArgumentError,
)
from .heap import Handle, IndexedMinHeap, merge
from .ordering import KeyOrdering, natural_order, reverse_order

__all__ = [
    "IndexedMinHeap",
    "Handle",
    "merge",
    "natural_order",
    "reverse_order",
    "KeyOrdering",
    "HeapError",
    "EmptyHeapError",
    "InvalidKeyError",
    "InvalidHandleError",
    "KeyIncreaseRejectedError",
    "IncompatibleOrderingError",
    "InvalidArgumentError",
]
