"""Input arrays for the benchmark under a named distribution."""
from __future__ import annotations
from typing import Optional

import numpy as np

from ..config import DISTRIBUTIONS

_RANDOM_SEED = 1
_NEARLY_SEED = 123


def sorted_array(n: int) -> np.ndarray:
    return np.arange(n, dtype=np.int64)


def reversed_array(n: int) -> np.ndarray:
    """n, n-1, ..., 1."""
    return np.arange(n, 0, -1, dtype=np.int64)


def nearly_sorted_array(n: int, seed: Optional[int] = None) -> np.ndarray:
    """Sorted input with n // 100 random pair swaps (about 1% noise)."""
    a = sorted_array(n)
    rng = np.random.default_rng(_NEARLY_SEED if seed is None else seed)
    for _ in range(n // 100):
        i, j = rng.integers(0, n, size=2)
        a[i], a[j] = a[j], a[i]
    return a


def random_array(n: int, seed: Optional[int] = None) -> np.ndarray:
    """Uniform signed 32-bit integers."""
    rng = np.random.default_rng(_RANDOM_SEED if seed is None else seed)
    info = np.iinfo(np.int32)
    return rng.integers(info.min, info.max, size=n, endpoint=True, dtype=np.int64)


def generate(n: int, dist: str = "random", seed: Optional[int] = None) -> np.ndarray:
    """Return ``n`` integers drawn from distribution ``dist``.

    ``seed`` overrides the distribution's fixed default seed, so repeated
    calls without one return identical arrays.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    name = dist.lower()
    if name == "sorted":
        return sorted_array(n)
    if name == "reversed":
        return reversed_array(n)
    if name == "nearly":
        return nearly_sorted_array(n, seed)
    if name == "random":
        return random_array(n, seed)
    raise ValueError(f"unknown distribution {dist!r}; choose from {', '.join(DISTRIBUTIONS)}")
