"""
Tests for input validation utilities.

Validates the validators in core/validation.py:
    - check_array / check_labels: conversion and dtype rejection
    - check_finite, check_1d, check_2d
    - check_consistent_length: raises LengthMismatchError with lengths
    - check_positive_int, check_fraction, check_unit_interval, check_dof
"""

import math

import numpy as np
import pytest

from ldarobust.core.exceptions import (
    DimensionError,
    LengthMismatchError,
    ValidationError,
)
from ldarobust.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_dof,
    check_finite,
    check_fraction,
    check_labels,
    check_min_samples,
    check_positive_int,
    check_probability,
    check_real,
    check_unit_interval,
)


# ═══════════════════════════════════════════════════════════════════════
# Arrays and labels
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_int_array_promoted_to_float(self):
        result = check_array([1, 2, 3], "X")
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "X")

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")


class TestCheckLabels:

    def test_ints_pass(self):
        result = check_labels([0, 1, 1], "y")
        assert result.dtype == np.int64

    def test_booleans_pass(self):
        np.testing.assert_array_equal(check_labels([True, False], "y"), [1, 0])

    def test_integral_floats_pass(self):
        np.testing.assert_array_equal(check_labels([0.0, 1.0], "y"), [0, 1])

    def test_fractional_floats_rejected(self):
        with pytest.raises(ValidationError, match="integral"):
            check_labels([0.5, 1.0], "y")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError):
            check_labels(["a", "b"], "y")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_labels([[0, 1]], "y")


class TestShapeChecks:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "X")

    def test_check_1d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "y")

    def test_check_2d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 3"):
            check_min_samples(np.zeros((2, 2)), 3, "X")


class TestConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))

    def test_mismatch_raises_with_lengths(self):
        with pytest.raises(LengthMismatchError) as excinfo:
            check_consistent_length(np.zeros(3), np.zeros(4), names=("a", "b"))
        assert excinfo.value.lengths == {"a": 3, "b": 4}

    def test_names_count_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:

    @pytest.mark.parametrize("value", [1, 10, np.int64(5)])
    def test_positive_int_accepts(self, value):
        assert check_positive_int(value, "n") == int(value)

    @pytest.mark.parametrize("value", [0, -1, 1.5, True, "3"])
    def test_positive_int_rejects(self, value):
        with pytest.raises(ValidationError):
            check_positive_int(value, "n")

    @pytest.mark.parametrize("value", [0.7, 1.0, 1e-9])
    def test_fraction_accepts(self, value):
        assert check_fraction(value, "f") == value

    @pytest.mark.parametrize("value", [0.0, -0.1, 1.01, math.nan, math.inf])
    def test_fraction_rejects(self, value):
        with pytest.raises(ValidationError, match="f"):
            check_fraction(value, "f")

    @pytest.mark.parametrize("value", [0.0, 0.5, 1.0])
    def test_unit_interval_accepts(self, value):
        assert check_unit_interval(value, "m") == value

    @pytest.mark.parametrize("value", [-0.01, 1.5, math.nan])
    def test_unit_interval_rejects(self, value):
        with pytest.raises(ValidationError):
            check_unit_interval(value, "m")

    @pytest.mark.parametrize("value", [0.01, 0.5, 0.99])
    def test_probability_accepts(self, value):
        assert check_probability(value, "prior") == value

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.5, math.nan])
    def test_probability_rejects(self, value):
        with pytest.raises(ValidationError, match="prior"):
            check_probability(value, "prior")

    def test_real_accepts_numpy_scalar(self):
        assert check_real(np.float64(2.5), "s") == 2.5

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "1", True])
    def test_real_rejects(self, value):
        with pytest.raises(ValidationError, match="s"):
            check_real(value, "s")

    def test_dof_accepts_infinity(self):
        assert check_dof(math.inf, "dof") == math.inf

    @pytest.mark.parametrize("value", [0, -2, math.nan, "4"])
    def test_dof_rejects(self, value):
        with pytest.raises(ValidationError):
            check_dof(value, "dof")
