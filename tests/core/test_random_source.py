"""
Tests for RandomSource.

Validates seeding, the three draw types, and independence of spawned
child sources.
"""

import math

import numpy as np
import pytest

from ldarobust.core.compute.random import RandomSource, as_random_source


class TestSeeding:

    def test_same_seed_same_draws(self):
        np.testing.assert_array_equal(
            RandomSource(3).normal(50), RandomSource(3).normal(50)
        )

    def test_different_seeds_differ(self):
        assert not np.allclose(RandomSource(3).normal(50), RandomSource(4).normal(50))

    def test_seed_sequence_accepted(self):
        seq = np.random.SeedSequence(11)
        np.testing.assert_array_equal(
            RandomSource(seq).normal(5), RandomSource(11).normal(5)
        )

    def test_as_random_source_passthrough(self, source):
        assert as_random_source(source) is source

    def test_as_random_source_from_int(self):
        assert isinstance(as_random_source(5), RandomSource)


class TestDraws:

    def test_normal_moments(self, source):
        z = source.normal(100_000)
        assert np.mean(z) == pytest.approx(0.0, abs=0.02)
        assert np.var(z) == pytest.approx(1.0, abs=0.02)

    def test_student_t_infinite_dof_is_normal(self):
        np.testing.assert_array_equal(
            RandomSource(9).student_t(math.inf, 20), RandomSource(9).normal(20)
        )

    def test_student_t_heavier_tails(self, source):
        t = source.student_t(3.0, 100_000)
        z = RandomSource(1).normal(100_000)
        assert np.mean(np.abs(t) > 4) > np.mean(np.abs(z) > 4)

    def test_choose_without_replacement(self, source):
        chosen = source.choose(np.arange(100), 40)
        assert len(chosen) == 40
        assert len(np.unique(chosen)) == 40
        assert np.all((chosen >= 0) & (chosen < 100))

    def test_choose_zero(self, source):
        assert source.choose(np.arange(5), 0).shape == (0,)

    def test_choose_all(self, source):
        np.testing.assert_array_equal(np.sort(source.choose(np.arange(5), 5)), np.arange(5))

    def test_choose_too_many(self, source):
        with pytest.raises(ValueError, match="cannot choose"):
            source.choose(np.arange(5), 6)


class TestSpawn:

    def test_children_are_independent(self, source):
        a, b = source.spawn(2)
        assert not np.allclose(a.normal(20), b.normal(20))

    def test_spawn_is_reproducible(self):
        first = [c.normal(5) for c in RandomSource(8).spawn(3)]
        second = [c.normal(5) for c in RandomSource(8).spawn(3)]
        for x, y in zip(first, second):
            np.testing.assert_array_equal(x, y)
