"""
Tests for scenario definitions, sweep designs and the single-trial pipeline.
"""

import numpy as np
import pytest

from ldarobust.core.compute.random import RandomSource
from ldarobust.core.exceptions import DegenerateFitError, ValidationError
from ldarobust.experiments import (
    SCENARIOS,
    Baseline,
    HeavyTail,
    Imbalance,
    LabelFlip,
    SweepDesign,
    get_scenario,
    run_trial,
)
from ldarobust.sampling import Normal, StudentT, generate, stratified_split


# ---------------------------------------------------------------------------
# Scenario hooks
# ---------------------------------------------------------------------------

class TestScenarios:

    def test_registry(self):
        assert set(SCENARIOS) == {'baseline', 'heavy_tail', 'imbalance', 'label_flip'}

    def test_lookup_by_name_and_instance(self):
        assert isinstance(get_scenario('heavy_tail'), HeavyTail)
        scenario = LabelFlip()
        assert get_scenario(scenario) is scenario

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="unknown"):
            get_scenario('outliers')

    def test_distributions(self):
        assert Baseline().distribution(4.0) == Normal()
        assert HeavyTail().distribution(4.0) == StudentT(4.0)
        assert Imbalance().distribution(0.3) == Normal()
        assert LabelFlip().distribution(0.3) == Normal()

    def test_baseline_leaves_training_set(self, small_sample, source):
        assert Baseline().perturb(small_sample, 10.0, source) is small_sample

    def test_reported_parameters(self):
        train, _ = stratified_split(generate(100, 100, source=1), 0.7, source=2)
        skewed = Imbalance().perturb(train, 0.2, RandomSource(3))
        assert Imbalance().reported_parameter(0.2, skewed) == pytest.approx(56 / 70)
        assert LabelFlip().reported_parameter(0.2, train) == 0.2
        assert HeavyTail().reported_parameter(6.0, train) == 6.0

    @pytest.mark.parametrize("scenario,bad", [
        (HeavyTail(), 0.0),
        (HeavyTail(), -3.0),
        (Imbalance(), 1.01),
        (LabelFlip(), -0.1),
        (Baseline(), "many"),
        (Baseline(), float("nan")),
        (Baseline(), float("-inf")),
    ])
    def test_invalid_severity(self, scenario, bad):
        with pytest.raises(ValidationError):
            scenario.check_severity(bad)

    def test_default_grids(self):
        assert len(HeavyTail.default_severities) == 20
        assert HeavyTail.default_severities[0] == 2.0
        assert HeavyTail.default_severities[-1] == 40.0
        assert len(Imbalance.default_severities) == 99
        assert len(LabelFlip.default_severities) == 100
        assert LabelFlip.default_severities[-1] == 1.0

    def test_describe(self):
        assert Imbalance().describe() == {
            'scenario': 'imbalance', 'parameter': 'class_one_proportion',
        }


# ---------------------------------------------------------------------------
# SweepDesign
# ---------------------------------------------------------------------------

class TestSweepDesign:

    def test_defaults(self):
        design = SweepDesign.for_sweep('label_flip')
        assert design.n_severities == 100
        assert design.trials == 100
        assert design.n_class0 == design.n_class1 == 1000
        assert design.train_fraction == 0.7
        assert design.on_degenerate == 'skip'

    def test_scalar_severity(self):
        design = SweepDesign.for_sweep('heavy_tail', 5)
        np.testing.assert_array_equal(design.severities, [5.0])

    def test_decreasing_severities_rejected(self):
        with pytest.raises(ValidationError, match="increasing"):
            SweepDesign.for_sweep('label_flip', [0.5, 0.1])

    def test_repeated_severities_rejected(self):
        with pytest.raises(ValidationError, match="increasing"):
            SweepDesign.for_sweep('label_flip', [0.1, 0.1])

    def test_empty_grid_rejected(self):
        with pytest.raises(ValidationError, match="at least one"):
            SweepDesign.for_sweep('label_flip', [])

    def test_2d_grid_rejected(self):
        with pytest.raises(ValidationError, match="1D"):
            SweepDesign.for_sweep('label_flip', [[0.1, 0.2]])

    def test_severity_checked_by_scenario(self):
        with pytest.raises(ValidationError):
            SweepDesign.for_sweep('imbalance', [0.5, 1.5])

    @pytest.mark.parametrize("kwargs", [
        {'trials': 0},
        {'n_class0': 0},
        {'n_class1': -5},
        {'train_fraction': 0.0},
        {'train_fraction': 1.2},
        {'on_degenerate': 'ignore'},
    ])
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValidationError):
            SweepDesign.for_sweep('baseline', [1.0], **kwargs)

    @pytest.mark.parametrize("fraction,n0,n1", [
        (1.0, 50, 50),
        (0.9, 2, 3),
        (0.95, 5, 5),
    ])
    def test_no_test_rows_rejected(self, fraction, n0, n1):
        """Every class rounds to a full training share, so nothing is left to score."""
        with pytest.raises(ValidationError, match="train_fraction"):
            SweepDesign.for_sweep(
                'baseline', [1.0], n_class0=n0, n_class1=n1, train_fraction=fraction,
            )

    def test_one_test_row_is_enough(self):
        design = SweepDesign.for_sweep('baseline', [1.0], n_class0=2, n_class1=10, train_fraction=0.9)
        assert design.train_fraction == 0.9

    def test_no_test_rows_fails_before_any_trial(self, monkeypatch):
        from ldarobust.experiments import _trial, run_sweep
        calls = []
        monkeypatch.setattr(_trial, 'run_trial', lambda *a, **k: calls.append(a))
        with pytest.raises(ValidationError, match="no test rows"):
            run_sweep('baseline', [1.0], trials=3, n_class0=50, n_class1=50,
                      train_fraction=1.0, seed=1)
        assert calls == []

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_baseline_severity_rejected(self, bad):
        with pytest.raises(ValidationError, match="severity"):
            SweepDesign.for_sweep('baseline', [1.0, bad])

    def test_seed_sequences_reproducible(self):
        design = SweepDesign.for_sweep('label_flip', [0.1, 0.2], seed=9)
        _, a = design.seed_sequences()
        _, b = design.seed_sequences()
        assert len(a) == 2
        assert [s.generate_state(2).tolist() for s in a] == [
            s.generate_state(2).tolist() for s in b
        ]

    def test_seed_sequence_argument_not_advanced(self):
        seed = np.random.SeedSequence(123)
        design = SweepDesign.for_sweep('label_flip', [0.1, 0.2], seed=seed)
        design.seed_sequences()
        assert seed.n_children_spawned == 0


# ---------------------------------------------------------------------------
# run_trial
# ---------------------------------------------------------------------------

class TestRunTrial:

    def test_baseline_trial(self):
        outcome = run_trial(
            Baseline(), 1.0, n_class0=1000, n_class1=1000, train_fraction=0.7, source=4,
        )
        assert 0.0 <= outcome.error <= 1.0
        assert outcome.error == pytest.approx(0.1225, abs=0.05)
        assert outcome.reported == 1.0

    def test_deterministic(self):
        kwargs = dict(n_class0=200, n_class1=200, train_fraction=0.7)
        a = run_trial(HeavyTail(), 3.0, source=RandomSource(8), **kwargs)
        b = run_trial(HeavyTail(), 3.0, source=RandomSource(8), **kwargs)
        assert a == b

    def test_full_flip_inverts_predictions(self):
        """
        Flipping every training label swaps the class means, so each test
        prediction is inverted and the error is exactly 1 - baseline error
        on the same generated data.
        """
        kwargs = dict(n_class0=500, n_class1=500, train_fraction=0.7)
        clean = run_trial(LabelFlip(), 0.0, source=RandomSource(12), **kwargs)
        flipped = run_trial(LabelFlip(), 1.0, source=RandomSource(12), **kwargs)
        assert flipped.error == pytest.approx(1.0 - clean.error, abs=1e-12)

    def test_timer_sections(self):
        from ldarobust.core.compute.timing import Timer
        timer = Timer()
        timer.start()
        run_trial(Baseline(), 1.0, n_class0=50, n_class1=50, train_fraction=0.7,
                  source=1, timer=timer)
        timer.stop()
        assert {'generate', 'split', 'perturb', 'fit', 'score'} <= set(timer.result())

    def test_degenerate_propagates(self):
        with pytest.raises(DegenerateFitError):
            run_trial(Imbalance(), 0.0, n_class0=50, n_class1=50, train_fraction=0.7, source=1)
