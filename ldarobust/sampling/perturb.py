"""
Training-set corruptions.

Both perturbations take a training Sample and a severity ``m`` in [0, 1]
and return a new Sample; the input and the test partition are never
modified.

imbalance:
    Keeps ``round((1 - m) * n1)`` rows of class 1 and ``round(m * n0)``
    rows of class 0, each drawn uniformly without replacement. So ``m`` is
    the fraction of class 0 retained (equivalently, the fraction of class 1
    removed); on a balanced training set the resulting class-1 proportion
    is about ``1 - m``. At m = 0 or m = 1 one class disappears entirely.

flip_labels:
    Chooses exactly ``round(m * n)`` rows uniformly, regardless of their
    label, and replaces y with 1 - y.
"""

from __future__ import annotations

import numpy as np

from ldarobust.core.compute.random import RandomSource, SeedLike, as_random_source
from ldarobust.core.validation import check_unit_interval
from ldarobust.sampling._common import Sample


def imbalance(
    train: Sample,
    m: float,
    *,
    source: RandomSource | SeedLike = None,
) -> Sample:
    """
    Skew the class balance of a training sample.

    Args:
        train: Training sample.
        m: Fraction of class-0 rows retained; 1 - m of class-1 rows are
            retained. Must be in [0, 1].
        source: RandomSource, integer seed, or None.

    Returns:
        New sample with the retained class-1 rows first, then the retained
        class-0 rows. Identifiers are unchanged.

    Raises:
        ValidationError: If m is outside [0, 1].
    """
    m = check_unit_interval(m, 'm')
    source = as_random_source(source)

    ones = train.ids[train.y == 1]
    zeros = train.ids[train.y == 0]
    kept_ones = source.choose(ones, int(round((1.0 - m) * ones.shape[0])))
    kept_zeros = source.choose(zeros, int(round(m * zeros.shape[0])))

    return Sample.concat(train.with_ids(kept_ones), train.with_ids(kept_zeros))


def flip_labels(
    train: Sample,
    m: float,
    *,
    source: RandomSource | SeedLike = None,
) -> Sample:
    """
    Invert the labels of a random share of training rows.

    Args:
        train: Training sample.
        m: Fraction of rows to relabel, in [0, 1].
        source: RandomSource, integer seed, or None.

    Returns:
        New sample with the same rows and identifiers; exactly
        ``round(m * n)`` labels are inverted.

    Raises:
        ValidationError: If m is outside [0, 1].
    """
    m = check_unit_interval(m, 'm')
    source = as_random_source(source)

    flipped = source.choose(train.ids, int(round(m * train.n)))
    mask = np.isin(train.ids, flipped)
    y = train.y.copy()
    y[mask] = 1 - y[mask]
    return train.with_labels(y)
