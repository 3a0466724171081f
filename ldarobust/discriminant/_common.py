"""
Common data structures for linear discriminant analysis.

ClassStatistics and LDAParams are the parameter payloads wrapped by
Result[P] and exposed through LDASolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ClassStatistics:
    """
    Per-class summaries estimated from the training rows.

    - classes: class labels in ascending order
    - counts: training rows per class
    - priors: empirical priors n_k / n
    - means: class mean vectors, one row per class
    - covariance: pooled within-class covariance, divisor n - K
    """
    classes: NDArray[np.int64]                 # shape (K,)
    counts: NDArray[np.int64]                  # shape (K,)
    priors: NDArray[np.floating[Any]]          # shape (K,)
    means: NDArray[np.floating[Any]]           # shape (K, p)
    covariance: NDArray[np.floating[Any]]      # shape (p, p)


@dataclass(frozen=True)
class LDAParams:
    """
    Parameter payload for a fitted LDA model.

    The discriminant score of class k at x is
        delta_k(x) = x' coefficients[k] + intercepts[k]
    with coefficients[k] = Sigma^-1 mu_k and
    intercepts[k] = -1/2 mu_k' Sigma^-1 mu_k + log(pi_k).
    """
    statistics: ClassStatistics
    coefficients: NDArray[np.floating[Any]]    # shape (K, p)
    intercepts: NDArray[np.floating[Any]]      # shape (K,)
    df_residual: int                           # n - K
