"""
Train/test partitioning.

The test set is always computed as an anti-join on row identifiers against
the training rows, so train and test are disjoint and together cover the
input exactly.
"""

from __future__ import annotations

import numpy as np

from ldarobust.core.compute.random import RandomSource, SeedLike, as_random_source
from ldarobust.core.validation import check_fraction, check_min_samples
from ldarobust.sampling._common import Sample


def stratified_split(
    sample: Sample,
    train_fraction: float,
    *,
    source: RandomSource | SeedLike = None,
    stratify: bool = True,
) -> tuple[Sample, Sample]:
    """
    Randomly partition a sample into training and test rows.

    With ``stratify=True`` each label is sampled separately:
    ``round(train_fraction * count)`` rows of that label are drawn uniformly
    without replacement into the training set. Labels are processed in
    ascending order (0, then 1). Without stratification,
    ``round(train_fraction * n)`` rows are drawn from the whole sample.

    Args:
        sample: Sample to partition.
        train_fraction: Share of rows used for training, in (0, 1].
        source: RandomSource, integer seed, or None.
        stratify: Sample within each label (default) or across the sample.

    Returns:
        (train, test). Both keep the row order of ``sample``.

    Raises:
        ValidationError: If train_fraction is outside (0, 1] or the sample
            is empty.
    """
    train_fraction = check_fraction(train_fraction, 'train_fraction')
    check_min_samples(sample.y, 1, 'sample')
    source = as_random_source(source)

    if stratify:
        chosen = [
            _draw_ids(sample.ids[sample.y == label], train_fraction, source)
            for label in (0, 1)
        ]
        train_ids = np.concatenate(chosen)
    else:
        train_ids = _draw_ids(sample.ids, train_fraction, source)

    train = sample.with_ids(train_ids)
    test = sample.without_ids(train.ids)
    return train, test


def _draw_ids(ids: np.ndarray, fraction: float, source: RandomSource) -> np.ndarray:
    k = int(round(fraction * ids.shape[0]))
    return source.choose(ids, k)
