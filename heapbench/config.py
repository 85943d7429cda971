"""
Benchmark configuration.

This module centralizes the defaults used by the workload runner and CLI:
- Input sizes, trial count and data distribution.
- Decrease-key sampling parameters (fraction of n, RNG seed, max decrement).
- The CSV header shared by every exporter.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

DISTRIBUTIONS: Tuple[str, ...] = ("random", "sorted", "reversed", "nearly")

# Input sizes benchmarked when none are given
DEFAULT_SIZES: Tuple[int, ...] = (100, 1000, 10000)
DEFAULT_TRIALS = 3
DEFAULT_DIST = "random"

# One decrease-key attempt per ten elements
DECREASE_FRACTION = 0.1
DECREASE_SEED = 42
# New key = old key - randint(0, MAX_DECREMENT - 1)
MAX_DECREMENT = 10

CSV_HEADER: Tuple[str, ...] = (
    "n",
    "trial",
    "time_ms",
    "comparisons",
    "swaps",
    "arrayGets",
    "arraySets",
    "allocations",
)


def parse_sizes(text: str) -> Tuple[int, ...]:
    """Parse a comma-separated list of sizes, e.g. ``"100,1000"``."""
    parts = [p.strip() for p in text.split(",") if p.strip()]
    if not parts:
        raise ValueError("at least one size is required")
    sizes = tuple(int(p) for p in parts)
    if any(n < 0 for n in sizes):
        raise ValueError(f"sizes must be non-negative: {text!r}")
    return sizes


@dataclass(frozen=True)
class BenchmarkConfig:
    """Parameters for one benchmark run."""

    sizes: Tuple[int, ...] = DEFAULT_SIZES
    trials: int = DEFAULT_TRIALS
    dist: str = DEFAULT_DIST
    seed: Optional[int] = None
    decrease_fraction: float = DECREASE_FRACTION
    decrease_seed: int = DECREASE_SEED

    def __post_init__(self) -> None:
        if any(n < 0 for n in self.sizes):
            raise ValueError(f"sizes must be non-negative, got {self.sizes}")
        if self.trials < 1:
            raise ValueError(f"trials must be >= 1, got {self.trials}")
        if self.dist.lower() not in DISTRIBUTIONS:
            raise ValueError(
                f"unknown distribution {self.dist!r}; choose from {', '.join(DISTRIBUTIONS)}"
            )
        if not 0.0 <= self.decrease_fraction <= 1.0:
            raise ValueError(f"decrease_fraction must be in [0, 1], got {self.decrease_fraction}")
