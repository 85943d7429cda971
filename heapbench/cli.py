"""
Min-Heap Benchmark Command-Line Interface (CLI)

Runs the IndexedMinHeap workload (bulk inserts, sampled decrease-key calls,
full drain) and reports elapsed time plus operation counters per
(size, trial). It ties together:
- Data generators (named input distributions)
- The benchmark runner (CSV rows and per-size summaries)
- The heap itself, for a short demonstration

Usage examples:
    python -m heapbench.cli run --n 1000,10000 --trials 5 --dist random --csv results.csv
    python -m heapbench.cli summary --n 100,1000 --dist nearly
    python -m heapbench.cli demo
"""

import argparse
import logging
import sys

from .config import (
    DEFAULT_DIST,
    DEFAULT_SIZES,
    DEFAULT_TRIALS,
    DISTRIBUTIONS,
    BenchmarkConfig,
    parse_sizes,
)
from .datastructures import IndexedMinHeap
from .metrics import PerformanceTracker
from .workload import BenchmarkRunner, summarize, write_csv

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: build the run configuration from parsed arguments
# -------------------------------------------------------------------
def config_from_args(args):
    """Translate argparse options into a BenchmarkConfig."""
    return BenchmarkConfig(
        sizes=args.n,
        trials=args.trials,
        dist=args.dist,
        seed=args.seed,
    )


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_run(args):
    """Run the benchmark and write one CSV row per (size, trial)."""
    runner = BenchmarkRunner(config_from_args(args))
    if args.csv:
        with open(args.csv, "w", newline="") as f:
            count = write_csv(runner.run(), f)
        print(f"Wrote {count} rows to {args.csv}")
    else:
        write_csv(runner.run(), sys.stdout)


def cmd_summary(args):
    """Run the benchmark and print mean/std-dev per size."""
    runner = BenchmarkRunner(config_from_args(args))
    for s in summarize(runner.run()):
        print(s)


def cmd_demo(args):
    """Walk through decrease-key and merge on tiny heaps."""
    tracker = PerformanceTracker()
    heap = IndexedMinHeap(tracker=tracker)
    hc = heap.insert(10, "C")
    heap.insert(5, "B")
    heap.decrease_key(hc, 1)
    print("decrease-key:", [heap.extract_min() for _ in range(len(heap))])

    a = IndexedMinHeap(tracker=tracker)
    b = IndexedMinHeap()
    for key, value in ((4, "a"), (2, "b")):
        a.insert(key, value)
    for key, value in ((3, "c"), (1, "d")):
        b.insert(key, value)
    merged = IndexedMinHeap.merge(a, b)
    print("merge:", [merged.extract_min() for _ in range(len(merged))])
    print(f"sources empty: {a.is_empty() and b.is_empty()}")
    print(tracker)


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def add_workload_options(s):
    """Options shared by the run and summary subcommands."""
    s.add_argument("--n", type=parse_sizes, default=DEFAULT_SIZES,
                   help="comma-separated input sizes (default: %(default)s)")
    s.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    s.add_argument("--dist", choices=DISTRIBUTIONS, default=DEFAULT_DIST)
    s.add_argument("--seed", type=int, default=None, help="override the distribution's fixed seed")


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m heapbench.cli", description="Min-Heap Benchmark")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- benchmarks ---
    s = sub.add_parser("run", help="Run the benchmark and export CSV")
    add_workload_options(s)
    s.add_argument("--csv", default=None, help="output path (default: stdout)")
    s.set_defaults(func=cmd_run)

    s = sub.add_parser("summary", help="Print per-size averages")
    add_workload_options(s)
    s.set_defaults(func=cmd_summary)

    # --- demonstration ---
    s = sub.add_parser("demo", help="Show decrease-key and merge on small heaps")
    s.set_defaults(func=cmd_demo)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heapbench.cli`."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        args.func(args)
    except ValueError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
