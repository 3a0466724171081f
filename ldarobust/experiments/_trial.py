"""
Single-trial pipeline and per-severity trial loop.

Both are module-level functions so that the parallel backend can ship
them to worker processes.
"""

from __future__ import annotations

import numpy as np

from ldarobust.core.compute.random import RandomSource, SeedLike, as_random_source
from ldarobust.core.compute.timing import Timer
from ldarobust.core.exceptions import DegenerateFitError
from ldarobust.discriminant.solvers import lda
from ldarobust.discriminant.scoring import misclassification_error
from ldarobust.experiments._common import TrialOutcome, SeverityOutcome
from ldarobust.experiments.scenarios import Scenario
from ldarobust.sampling.generate import generate
from ldarobust.sampling.split import stratified_split


def run_trial(
    scenario: Scenario,
    severity: float,
    *,
    n_class0: int,
    n_class1: int,
    train_fraction: float,
    source: RandomSource | SeedLike = None,
    timer: Timer | None = None,
) -> TrialOutcome:
    """
    Run generate -> split -> perturb -> fit -> predict -> score once.

    All randomness is drawn from ``source`` in that order, so a trial is
    fully determined by its source state.

    Raises:
        DegenerateFitError: If the (perturbed) training set cannot be fit.
    """
    source = as_random_source(source)
    timer = timer or Timer()

    with timer.section('generate'):
        sample = generate(n_class0, n_class1, scenario.distribution(severity), source=source)
    with timer.section('split'):
        train, test = stratified_split(sample, train_fraction, source=source)
    with timer.section('perturb'):
        train = scenario.perturb(train, severity, source)
    with timer.section('fit'):
        model = lda(train)
    with timer.section('score'):
        error = misclassification_error(model.predict(test.X), test.y)

    return TrialOutcome(error=error, reported=scenario.reported_parameter(severity, train))


def run_severity(
    scenario: Scenario,
    severity: float,
    seed_sequence: np.random.SeedSequence,
    *,
    trials: int,
    n_class0: int,
    n_class1: int,
    train_fraction: float,
    on_degenerate: str,
) -> SeverityOutcome:
    """
    Run all trials for one severity value.

    Each trial gets its own child stream of ``seed_sequence``. A degenerate
    fit either propagates (on_degenerate="raise") or leaves NaN in that
    trial's slot and is listed in ``failures``.
    """
    timer = Timer()
    timer.start()

    errors = np.full(trials, np.nan, dtype=np.float64)
    reported = np.full(trials, np.nan, dtype=np.float64)
    failures: list[str] = []

    for t, child in enumerate(seed_sequence.spawn(trials)):
        try:
            outcome = run_trial(
                scenario, severity,
                n_class0=n_class0,
                n_class1=n_class1,
                train_fraction=train_fraction,
                source=RandomSource(child),
                timer=timer,
            )
        except DegenerateFitError as e:
            if on_degenerate == "raise":
                raise DegenerateFitError(
                    f"{scenario.name} severity={severity:g} trial={t}: {e}",
                    class_counts=e.class_counts,
                    condition_number=e.condition_number,
                    rank=e.rank,
                    expected_rank=e.expected_rank,
                ) from e
            failures.append(f"{scenario.name} severity={severity:g} trial={t}: {e}")
            continue
        errors[t] = outcome.error
        reported[t] = outcome.reported

    timer.stop()
    return SeverityOutcome(
        errors=errors,
        reported=reported,
        failures=tuple(failures),
        timing=timer.result(),
    )
