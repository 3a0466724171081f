"""
Tests for synthetic data generation.

Verifies the row-order convention, the exact latent mixing, the
population moments, and the theoretical Bayes error of the model.
"""

import math

import numpy as np
import pytest

from ldarobust.core.compute.random import RandomSource
from ldarobust.core.exceptions import ValidationError
from ldarobust.sampling import (
    Normal,
    StudentT,
    bayes_error_rate,
    generate,
    population_covariance,
)


class TestShapeAndOrder:

    def test_shapes(self):
        sample = generate(30, 20, source=1)
        assert sample.X.shape == (50, 2)
        assert sample.y.shape == (50,)

    def test_class_ones_first(self):
        sample = generate(30, 20, source=1)
        np.testing.assert_array_equal(sample.y[:20], 1)
        np.testing.assert_array_equal(sample.y[20:], 0)

    def test_ids_sequential(self):
        sample = generate(3, 4, source=1)
        np.testing.assert_array_equal(sample.ids, np.arange(7))

    def test_class_counts(self):
        assert generate(30, 20, source=1).class_counts() == {0: 30, 1: 20}


class TestMixing:

    def test_predictors_are_fixed_linear_combinations(self):
        n0, n1 = 15, 10
        sample = generate(n0, n1, Normal(), source=RandomSource(5))

        z = RandomSource(5).normal(2 * (n0 + n1)).reshape(2, -1)
        y = sample.y
        np.testing.assert_allclose(sample.X[:, 0], 3 * z[0] + 2 * z[1] + 6 * y)
        np.testing.assert_allclose(sample.X[:, 1], z[0] - 4 * z[1] + 4 * y)

    def test_student_t_uses_t_draws(self):
        sample = generate(5, 5, StudentT(3), source=RandomSource(2))
        t = RandomSource(2).student_t(3, 20).reshape(2, -1)
        np.testing.assert_allclose(sample.X[:, 0], 3 * t[0] + 2 * t[1] + 6 * sample.y)

    def test_infinite_dof_matches_normal(self):
        a = generate(10, 10, StudentT(math.inf), source=3)
        b = generate(10, 10, Normal(), source=3)
        np.testing.assert_array_equal(a.X, b.X)

    def test_reproducible(self):
        np.testing.assert_array_equal(generate(10, 10, source=4).X, generate(10, 10, source=4).X)


class TestMoments:

    def test_class_mean_shift(self):
        sample = generate(10_000, 10_000, source=11)
        mean0 = sample.X[sample.y == 0].mean(axis=0)
        mean1 = sample.X[sample.y == 1].mean(axis=0)
        np.testing.assert_allclose(mean0, [0.0, 0.0], atol=0.15)
        np.testing.assert_allclose(mean1, [6.0, 4.0], atol=0.15)

    def test_shared_covariance(self):
        sample = generate(10_000, 10_000, source=12)
        expected = population_covariance()
        np.testing.assert_array_equal(expected, [[13.0, -5.0], [-5.0, 17.0]])
        for label in (0, 1):
            cov = np.cov(sample.X[sample.y == label].T)
            np.testing.assert_allclose(cov, expected, atol=1.0)


class TestBayesError:

    def test_equal_priors(self):
        assert bayes_error_rate() == pytest.approx(0.1225, abs=1e-3)

    def test_symmetric_in_priors(self):
        assert bayes_error_rate(0.2) == pytest.approx(bayes_error_rate(0.8), rel=1e-12)

    @pytest.mark.parametrize("prior", [0.0, 1.0, -0.2, float("nan")])
    def test_invalid_prior(self, prior):
        with pytest.raises(ValidationError, match="prior_class1"):
            bayes_error_rate(prior)


class TestValidation:

    @pytest.mark.parametrize("n0,n1", [(0, 10), (10, 0), (-1, 5), (2.5, 3)])
    def test_invalid_sizes(self, n0, n1):
        with pytest.raises(ValidationError):
            generate(n0, n1, source=1)

    @pytest.mark.parametrize("dof", [0, -1, float("nan")])
    def test_invalid_dof(self, dof):
        with pytest.raises(ValidationError):
            StudentT(dof)

    def test_invalid_sizes_consume_no_randomness(self):
        source = RandomSource(21)
        with pytest.raises(ValidationError):
            generate(0, 10, source=source)
        np.testing.assert_array_equal(source.normal(3), RandomSource(21).normal(3))
