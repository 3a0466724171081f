"""
Generic result container for all ldarobust computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (seed, trial counts, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and interpreter versions, recorded with every result."""
    import numpy
    import scipy
    from ldarobust import __version__

    return {
        'ldarobust_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, mean errors, etc.)
        info: Structured metadata (method, seed, failed trials)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=LDAParams(...),
        ...     info={'method': 'pooled_cholesky', 'n': 1400},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_lda'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
