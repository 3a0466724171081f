"""
Input validation utilities for ldarobust.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every sampling and perturbation
entry point runs its validators before touching the random source, so an
invalid argument never advances the generator state.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from ldarobust.core.exceptions import (
    ValidationError,
    DimensionError,
    LengthMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating point numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_labels(labels: ArrayLike, name: str) -> NDArray[np.int64]:
    """
    Validate and convert class labels to a 1D int64 array.

    Labels may be given as integers, booleans, or floats holding integral
    values. Anything else is rejected.

    Raises:
        ValidationError: If labels are non-numeric or non-integral
        DimensionError: If labels are not 1D
    """
    arr = np.asarray(labels)
    if arr.dtype == object or not (
        np.issubdtype(arr.dtype, np.number) or arr.dtype == np.bool_
    ):
        raise ValidationError(f"{name}: labels must be integers, got dtype {arr.dtype}")
    check_1d(arr, name)
    if np.issubdtype(arr.dtype, np.floating):
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.round(arr)):
            raise ValidationError(f"{name}: labels must be integral values")
    return arr.astype(np.int64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray, ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray, name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray, name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray,
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        LengthMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = {name: arr.shape[0] for arr, name in zip(arrays, names)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise LengthMismatchError(f"Inconsistent lengths: {details}", lengths=lengths)


def check_min_samples(array: NDArray, min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Booleans are rejected even though they are ints in Python.

    Returns:
        The value as a plain int
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected a positive integer, got {value!r}")
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_fraction(value: Any, name: str) -> float:
    """
    Verify value lies in the half-open interval (0, 1].

    Used for train fractions, where an empty training set is meaningless
    but an empty test set is allowed.
    """
    value = _as_real(value, name)
    if not (0.0 < value <= 1.0):
        raise ValidationError(f"{name}: must be in (0, 1], got {value}")
    return value


def check_real(value: Any, name: str) -> float:
    """Verify value is a finite real number; return it as float."""
    return _as_real(value, name)


def check_probability(value: Any, name: str) -> float:
    """
    Verify value lies in the open interval (0, 1).

    Used for class priors, where both endpoints make a class impossible.
    """
    value = _as_real(value, name)
    if not (0.0 < value < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {value}")
    return value


def check_unit_interval(value: Any, name: str) -> float:
    """
    Verify value lies in the closed interval [0, 1].

    Used for severity parameters of the imbalance and label-flip
    perturbations.
    """
    value = _as_real(value, name)
    if not (0.0 <= value <= 1.0):
        raise ValidationError(f"{name}: must be in [0, 1], got {value}")
    return value


def check_dof(value: Any, name: str) -> float:
    """
    Verify a Student-t degrees-of-freedom parameter is strictly positive.

    ``math.inf`` is accepted and denotes the normal limit.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if math.isnan(value) or value <= 0:
        raise ValidationError(f"{name}: must be > 0, got {value}")
    return value


def _as_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")
    return value
