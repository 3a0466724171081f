"""
Sweep backends.

Available backends:
    CPUSweepBackend: serial reference implementation
    ParallelSweepBackend: joblib worker pool, one task per severity
"""

from ldarobust.experiments.backends.cpu import CPUSweepBackend
from ldarobust.experiments.backends.parallel import ParallelSweepBackend

__all__ = [
    "CPUSweepBackend",
    "ParallelSweepBackend",
]
