"""
Benchmark workload for IndexedMinHeap.

For each (n, trial) pair the runner builds a fresh heap with natural ordering
and a fresh PerformanceTracker, then:
1. inserts every generated value (key = value),
2. attempts n * decrease_fraction sampled decrease-key calls,
3. drains the heap with extract_min,
and records the elapsed time plus the five operation counters as one row.

Rows can be written as CSV (`write_csv`) or aggregated per size
(`summarize`), mirroring the timing tables of the older benchmark scripts.
"""
from __future__ import annotations
import csv
import logging
import random
import statistics
import time
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, TextIO

from ..config import CSV_HEADER, MAX_DECREMENT, BenchmarkConfig
from ..datastructures import IndexedMinHeap, KeyIncreaseRejectedError, natural_order
from ..metrics import PerformanceTracker
from .generators import generate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkRow:
    """Measurements for one (n, trial) pair."""

    n: int
    trial: int
    time_ms: float
    comparisons: int
    swaps: int
    array_gets: int
    array_sets: int
    allocations: int

    def as_csv_row(self) -> List[str]:
        return [
            str(self.n),
            str(self.trial),
            f"{self.time_ms:.3f}",
            str(self.comparisons),
            str(self.swaps),
            str(self.array_gets),
            str(self.array_sets),
            str(self.allocations),
        ]


@dataclass(frozen=True)
class SizeSummary:
    """Per-size aggregate over all trials."""

    n: int
    trials: int
    mean_time_ms: float
    stdev_time_ms: float
    mean_comparisons: float
    mean_swaps: float
    mean_array_gets: float
    mean_array_sets: float
    mean_allocations: float

    def __str__(self) -> str:
        return (
            f"n={self.n:<8} | trials={self.trials} | Avg Time: {self.mean_time_ms:.3f} ms | "
            f"Std: {self.stdev_time_ms:.3f} ms | comparisons={self.mean_comparisons:.1f} | "
            f"swaps={self.mean_swaps:.1f}"
        )


class BenchmarkRunner:
    """Runs the insert / decrease-key / drain workload for every size and trial."""

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        on_row: Optional[Callable[[BenchmarkRow], None]] = None,
    ) -> None:
        self.config = config or BenchmarkConfig()
        self.on_row = on_row

    def run(self) -> Iterator[BenchmarkRow]:
        cfg = self.config
        logger.info("Min-heap benchmark: sizes=%s, trials=%d, dist=%s", list(cfg.sizes), cfg.trials, cfg.dist)
        for n in cfg.sizes:
            for trial in range(1, cfg.trials + 1):
                row = self.run_trial(n, trial)
                logger.info("n=%d trial=%d time_ms=%.3f comparisons=%d", n, trial, row.time_ms, row.comparisons)
                if self.on_row is not None:
                    self.on_row(row)
                yield row

    def run_trial(self, n: int, trial: int) -> BenchmarkRow:
        cfg = self.config
        tracker = PerformanceTracker()
        heap: IndexedMinHeap[int, int] = IndexedMinHeap(natural_order, tracker)
        data = generate(n, cfg.dist, cfg.seed).tolist()

        start = time.perf_counter()
        handles = [heap.insert(x, x) for x in data]

        rnd = random.Random(cfg.decrease_seed)
        rejected = 0
        for _ in range(int(n * cfg.decrease_fraction)):
            idx = rnd.randrange(n)
            handle = handles[idx]
            if not handle.is_valid:
                continue
            new_key = data[idx] - rnd.randrange(MAX_DECREMENT)
            try:
                heap.decrease_key(handle, new_key)
            except KeyIncreaseRejectedError:
                # An earlier decrease on the same handle went lower already
                rejected += 1
        if rejected:
            logger.debug("n=%d trial=%d: %d decrease-key calls rejected", n, trial, rejected)

        while heap:
            heap.extract_min()
        elapsed_ms = (time.perf_counter() - start) * 1000

        return BenchmarkRow(n, trial, elapsed_ms, *tracker.snapshot().as_tuple())


def write_csv(rows: Iterable[BenchmarkRow], stream: TextIO) -> int:
    """Write the header and one line per row to ``stream``; return the row count."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for row in rows:
        writer.writerow(row.as_csv_row())
        count += 1
    return count


def summarize(rows: Iterable[BenchmarkRow]) -> List[SizeSummary]:
    """Aggregate rows per n: mean and std deviation of time, mean counters."""
    by_size: Dict[int, List[BenchmarkRow]] = defaultdict(list)
    for row in rows:
        by_size[row.n].append(row)

    summaries = []
    for n, group in by_size.items():
        times = [r.time_ms for r in group]
        summaries.append(
            SizeSummary(
                n=n,
                trials=len(group),
                mean_time_ms=statistics.mean(times),
                stdev_time_ms=statistics.stdev(times) if len(times) > 1 else 0.0,
                mean_comparisons=statistics.mean(r.comparisons for r in group),
                mean_swaps=statistics.mean(r.swaps for r in group),
                mean_array_gets=statistics.mean(r.array_gets for r in group),
                mean_array_sets=statistics.mean(r.array_sets for r in group),
                mean_allocations=statistics.mean(r.allocations for r in group),
            )
        )
    return summaries
