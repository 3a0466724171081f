"""
Numerical thresholds.

Defines the limits used to declare a fit degenerate and the tolerance
tiers used by the test suite:
- CPU FP64: exact linear algebra checks
- Monte Carlo: statistical agreement of simulated error rates
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Deterministic linear algebra in double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Mean error rates estimated from 100+ trials of n=2000
MONTE_CARLO = ToleranceTier(
    rtol=0.0,
    atol=0.02,
    name='monte_carlo',
    description='Monte Carlo estimate of an error rate',
)

# Pooled covariance matrices with a larger 2-norm condition number are
# treated as singular.
MAX_CONDITION_NUMBER = 1.0 / (1e3 * np.finfo(np.float64).eps)
