"""
Common data structures for simulated samples.

Sample is the labelled data set that flows through generation, splitting
and perturbation. Normal and StudentT describe the distribution of the
latent columns used by the generator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ldarobust.core.compute.random import RandomSource
from ldarobust.core.validation import (
    check_array,
    check_labels,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
    check_dof,
)
from ldarobust.core.exceptions import ValidationError


@dataclass(frozen=True)
class Sample:
    """
    Labelled two-class sample with stable row identifiers.

    Attributes:
        X: Feature matrix, shape (n, p).
        y: Class labels in {0, 1}, shape (n,).
        ids: Unique row identifiers, shape (n,). Assigned at generation
            time and carried unchanged through splitting and perturbation,
            so set operations between samples are done on identifiers.

    Arrays are stored read-only. Use the methods below to derive new
    samples; they always copy.
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.int64]
    ids: NDArray[np.int64]

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        ids: ArrayLike | None = None,
    ) -> Sample:
        """
        Build a validated Sample.

        Args:
            X: Features, shape (n, p). A 1D array is treated as p = 1.
            y: Labels, shape (n,), values in {0, 1}.
            ids: Row identifiers. Defaults to 0..n-1.

        Raises:
            ValidationError: On non-finite features, labels outside {0, 1}
                or duplicate identifiers.
            DimensionError: On inconsistent shapes.
        """
        X_arr = check_array(X, 'X').astype(np.float64, copy=True)
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        check_2d(X_arr, 'X')
        check_finite(X_arr, 'X')

        y_arr = check_labels(y, 'y').copy()
        if not np.all((y_arr == 0) | (y_arr == 1)):
            bad = np.unique(y_arr[(y_arr != 0) & (y_arr != 1)])
            raise ValidationError(f"y: labels must be 0 or 1, got {bad.tolist()}")

        if ids is None:
            ids_arr = np.arange(X_arr.shape[0], dtype=np.int64)
        else:
            ids_arr = check_labels(ids, 'ids').copy()

        check_consistent_length(X_arr, y_arr, ids_arr, names=('X', 'y', 'ids'))

        if np.unique(ids_arr).shape[0] != ids_arr.shape[0]:
            raise ValidationError("ids: row identifiers must be unique")

        return cls._frozen(X_arr, y_arr, ids_arr)

    @classmethod
    def _frozen(cls, X: NDArray, y: NDArray, ids: NDArray) -> Sample:
        """Trusted constructor: marks the arrays read-only, no validation."""
        for arr in (X, y, ids):
            arr.setflags(write=False)
        return cls(X=X, y=y, ids=ids)

    # === Properties ===

    @property
    def n(self) -> int:
        """Number of rows."""
        return int(self.y.shape[0])

    @property
    def p(self) -> int:
        """Number of predictors."""
        return int(self.X.shape[1])

    def __len__(self) -> int:
        return self.n

    def class_counts(self) -> dict[int, int]:
        """Number of rows per label, for labels 0 and 1."""
        return {label: int(np.sum(self.y == label)) for label in (0, 1)}

    def class_one_proportion(self) -> float:
        """Share of rows labelled 1, or NaN for an empty sample."""
        if self.n == 0:
            return float('nan')
        return float(np.mean(self.y == 1))

    # === Derivation ===

    def take(self, positions: ArrayLike) -> Sample:
        """Rows at the given positions (or boolean mask), copied."""
        positions = np.asarray(positions)
        return Sample._frozen(
            self.X[positions].copy(),
            self.y[positions].copy(),
            self.ids[positions].copy(),
        )

    def with_ids(self, ids: ArrayLike) -> Sample:
        """Rows whose identifier is in ``ids``, in this sample's order."""
        return self.take(np.isin(self.ids, np.asarray(ids)))

    def without_ids(self, ids: ArrayLike) -> Sample:
        """Rows whose identifier is not in ``ids`` (anti-join)."""
        return self.take(~np.isin(self.ids, np.asarray(ids)))

    def with_labels(self, y: NDArray[np.int64]) -> Sample:
        """Same rows and identifiers with replacement labels."""
        y = np.asarray(y, dtype=np.int64).copy()
        check_1d(y, 'y')
        check_consistent_length(self.y, y, names=('sample.y', 'y'))
        return Sample._frozen(self.X.copy(), y, self.ids.copy())

    @staticmethod
    def concat(*samples: Sample) -> Sample:
        """
        Stack samples row-wise.

        Raises:
            ValidationError: If the samples share any identifier.
        """
        if not samples:
            raise ValidationError("concat: need at least one sample")
        ids = np.concatenate([s.ids for s in samples])
        if np.unique(ids).shape[0] != ids.shape[0]:
            raise ValidationError("concat: samples share row identifiers")
        return Sample._frozen(
            np.concatenate([s.X for s in samples], axis=0),
            np.concatenate([s.y for s in samples]),
            ids,
        )

    def __repr__(self) -> str:
        counts = self.class_counts()
        return f"Sample(n={self.n}, p={self.p}, class0={counts[0]}, class1={counts[1]})"


@dataclass(frozen=True)
class Normal:
    """Standard normal latent columns (the baseline scenario)."""

    name = 'normal'

    def draw(self, source: RandomSource, size: int) -> NDArray[np.floating[Any]]:
        return source.normal(size)

    def __str__(self) -> str:
        return "Normal(0, 1)"


@dataclass(frozen=True)
class StudentT:
    """
    Student-t latent columns with ``dof`` degrees of freedom.

    ``dof`` must be strictly positive; ``math.inf`` is the normal limit.
    """
    dof: float

    name = 'student_t'

    def __post_init__(self):
        object.__setattr__(self, 'dof', check_dof(self.dof, 'dof'))

    def draw(self, source: RandomSource, size: int) -> NDArray[np.floating[Any]]:
        return source.student_t(self.dof, size)

    @property
    def is_normal_limit(self) -> bool:
        return math.isinf(self.dof)

    def __str__(self) -> str:
        return f"StudentT(dof={self.dof:g})"


Distribution = Union[Normal, StudentT]
