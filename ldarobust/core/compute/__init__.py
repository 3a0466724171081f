"""
Shared compute infrastructure for ldarobust.

This module provides the random source, timing utilities and numerical
thresholds that are shared across all domain-specific code.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    random: Seedable RandomSource with independent child streams
    timing: Execution timing utilities
    tolerances: Degeneracy limits and test tolerance tiers
"""

from ldarobust.core.compute.random import RandomSource, as_random_source
from ldarobust.core.compute.timing import Timer, timed

__all__ = [
    "RandomSource",
    "as_random_source",
    "Timer",
    "timed",
]
