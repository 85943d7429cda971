"""
heapbench: an indexed binary min-heap with instrumentation for empirical
complexity analysis.

- `heapbench.datastructures`: IndexedMinHeap, handles, orderings, errors
- `heapbench.metrics`: PerformanceTracker operation counters
- `heapbench.workload`: data generators and the benchmark runner
- `heapbench.cli`: command-line entry point
"""
from .datastructures import Handle, IndexedMinHeap, merge
from .metrics import PerformanceTracker

__version__ = "0.1.0"

__all__ = ["IndexedMinHeap", "Handle", "merge", "PerformanceTracker", "__version__"]
