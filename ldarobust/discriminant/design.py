"""
LDA Design.

Design wraps the training features and labels and the set of classes the
model must distinguish. Classes are fixed up front rather than inferred
from the labels, so a training set that lost a class entirely is reported
as a degenerate fit instead of quietly becoming a one-class model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ldarobust.core.exceptions import ValidationError
from ldarobust.core.validation import (
    check_array,
    check_labels,
    check_finite,
    check_2d,
    check_consistent_length,
)
from ldarobust.sampling._common import Sample


DEFAULT_CLASSES = (0, 1)


@dataclass(frozen=True)
class LDADesign:
    """
    Training data specification for an LDA fit.

    Construction:
        LDADesign.from_sample(train)
        LDADesign.from_arrays(X, y, classes=(0, 1, 2))
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.int64]
    _classes: NDArray[np.int64]
    _n: int
    _p: int

    @classmethod
    def from_sample(cls, sample: Sample, classes: tuple[int, ...] = DEFAULT_CLASSES) -> LDADesign:
        """Build Design from a training Sample."""
        return cls._build(np.asarray(sample.X, dtype=np.float64), sample.y, classes)

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        classes: tuple[int, ...] = DEFAULT_CLASSES,
    ) -> LDADesign:
        """Build Design directly from arrays."""
        X_arr = check_array(X, 'X').astype(np.float64)
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        y_arr = check_labels(y, 'y')
        return cls._build(X_arr, y_arr, classes)

    @classmethod
    def _build(cls, X: NDArray, y: NDArray, classes: tuple[int, ...]) -> LDADesign:
        """Internal builder with validation."""
        check_2d(X, 'X')
        check_finite(X, 'X')
        check_consistent_length(X, y, names=('X', 'y'))

        classes_arr = np.asarray(sorted(set(int(c) for c in classes)), dtype=np.int64)
        if classes_arr.shape[0] < 2:
            raise ValidationError(
                f"classes: need at least 2 distinct classes, got {list(classes)}"
            )

        unknown = np.setdiff1d(np.unique(y), classes_arr)
        if unknown.shape[0] > 0:
            raise ValidationError(
                f"y: labels {unknown.tolist()} are not among classes {classes_arr.tolist()}"
            )

        n, p = X.shape
        return cls(_X=X, _y=np.asarray(y, dtype=np.int64), _classes=classes_arr, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Training features (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.int64]:
        """Training labels (n,)."""
        return self._y

    @property
    def classes(self) -> NDArray[np.int64]:
        """Class labels in ascending order."""
        return self._classes

    @property
    def n(self) -> int:
        return self._n

    @property
    def p(self) -> int:
        return self._p

    @property
    def n_classes(self) -> int:
        return int(self._classes.shape[0])

    def class_counts(self) -> dict[int, int]:
        """Training rows per class, including classes with no rows."""
        return {int(k): int(np.sum(self._y == k)) for k in self._classes}
