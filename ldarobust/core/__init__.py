"""
Core infrastructure for ldarobust.

This module provides shared abstractions and utilities used by all
domain-specific submodules (sampling, discriminant, experiments).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Random source, timing, numerical thresholds
"""

from ldarobust.core.result import Result
from ldarobust.core.exceptions import (
    LDARobustError,
    ValidationError,
    DimensionError,
    LengthMismatchError,
    NumericalError,
    SingularMatrixError,
    DegenerateFitError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "LDARobustError",
    "ValidationError",
    "DimensionError",
    "LengthMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateFitError",
]
