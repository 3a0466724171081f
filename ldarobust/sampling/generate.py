"""
Synthetic two-class data generation.

Two latent columns Z1, Z2 are drawn from the chosen distribution and
mixed into two predictors with a class-dependent mean shift:

    X1 = 3*Z1 + 2*Z2 + 6*y
    X2 =   Z1 - 4*Z2 + 4*y

Both classes share the covariance A A' with A = [[3, 2], [1, -4]], which
is exactly the setting LDA assumes when the latents are normal.

Row order convention: the first ``n_class1`` rows have y = 1, the next
``n_class0`` rows have y = 0, and row identifiers run 0..n-1 in that order.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from ldarobust.core.compute.random import RandomSource, SeedLike, as_random_source
from ldarobust.core.validation import check_positive_int, check_probability
from ldarobust.sampling._common import Sample, Normal, Distribution


# Latent-to-predictor mixing matrix and class-1 mean shift.
MIXING = np.array([[3.0, 2.0], [1.0, -4.0]])
SHIFT = np.array([6.0, 4.0])


def generate(
    n_class0: int,
    n_class1: int,
    distribution: Distribution | None = None,
    *,
    source: RandomSource | SeedLike = None,
) -> Sample:
    """
    Generate a labelled two-predictor sample.

    Args:
        n_class0: Number of rows with label 0. Must be >= 1.
        n_class1: Number of rows with label 1. Must be >= 1.
        distribution: Latent distribution, Normal() (default) or
            StudentT(dof).
        source: RandomSource, integer seed, or None.

    Returns:
        Sample with p = 2 predictors.

    Raises:
        ValidationError: If a class size is not a positive integer.

    Example:
        >>> sample = generate(1000, 1000, StudentT(4), source=42)
        >>> sample.class_counts()
        {0: 1000, 1: 1000}
    """
    n_class0 = check_positive_int(n_class0, 'n_class0')
    n_class1 = check_positive_int(n_class1, 'n_class1')
    if distribution is None:
        distribution = Normal()
    source = as_random_source(source)

    n = n_class0 + n_class1
    # First n draws form Z1, the next n form Z2.
    latent = distribution.draw(source, 2 * n).reshape(2, n).T

    y = np.concatenate([
        np.ones(n_class1, dtype=np.int64),
        np.zeros(n_class0, dtype=np.int64),
    ])
    X = latent @ MIXING.T + np.outer(y, SHIFT)

    return Sample._frozen(X, y, np.arange(n, dtype=np.int64))


def population_covariance() -> NDArray[np.floating]:
    """Shared class covariance of the predictors under normal latents."""
    return MIXING @ MIXING.T


def bayes_error_rate(prior_class1: float = 0.5) -> float:
    """
    Theoretical minimum error of the normal-latent generating model.

    With equal priors this is Phi(-Delta / 2), where Delta is the
    Mahalanobis distance between the class means. For unequal priors the
    optimal rule shifts its threshold by log(pi0 / pi1) and the error is
    the prior-weighted sum of the two one-sided tail areas.

    Args:
        prior_class1: Probability of label 1, in (0, 1).

    Raises:
        ValidationError: If prior_class1 is outside (0, 1).
    """
    prior_class1 = check_probability(prior_class1, 'prior_class1')

    sigma = population_covariance()
    delta = float(np.sqrt(SHIFT @ np.linalg.solve(sigma, SHIFT)))
    prior_class0 = 1.0 - prior_class1
    k = np.log(prior_class0 / prior_class1) / delta

    miss1 = stats.norm.cdf(k - delta / 2)
    miss0 = stats.norm.cdf(-k - delta / 2)
    return float(prior_class1 * miss1 + prior_class0 * miss0)
