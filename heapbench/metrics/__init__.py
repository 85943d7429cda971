from .tracker import NULL_TRACKER, NullTracker, PerformanceTracker, TrackerSnapshot

__all__ = [
    "PerformanceTracker",
    "NullTracker",
    "NULL_TRACKER",
    "TrackerSnapshot",
]
