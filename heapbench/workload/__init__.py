from .generators import generate
from .runner import BenchmarkRow, BenchmarkRunner, SizeSummary, summarize, write_csv

__all__ = [
    "generate",
    "BenchmarkRow",
    "BenchmarkRunner",
    "SizeSummary",
    "summarize",
    "write_csv",
]
