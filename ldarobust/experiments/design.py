"""
Design class for scenario sweeps.

SweepDesign encapsulates everything a backend needs to run a sweep:
the scenario, its severity grid, the number of trials per severity, the
sample sizes, the train fraction and the seed. Immutable, validated at
construction, before any random numbers are drawn.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ldarobust.core.compute.random import SeedLike
from ldarobust.core.exceptions import ValidationError
from ldarobust.core.validation import check_positive_int, check_fraction
from ldarobust.experiments._common import (
    DEFAULT_N_PER_CLASS,
    DEFAULT_TRIALS,
    DEFAULT_TRAIN_FRACTION,
    VALID_ON_DEGENERATE,
)
from ldarobust.experiments.scenarios import Scenario, get_scenario


@dataclass(frozen=True)
class SweepDesign:
    """
    Frozen design for a severity sweep.

    Attributes:
        scenario: Scenario being swept.
        severities: Severity values, strictly increasing.
        trials: Independent trials per severity value.
        n_class0: Generated rows with label 0.
        n_class1: Generated rows with label 1.
        train_fraction: Share of each class used for training, in (0, 1].
        seed: Root seed, expanded into one stream per (severity, trial).
        on_degenerate: "raise" aborts on a degenerate fit; "skip" drops
            the trial from its mean and reports it as a warning.
    """
    scenario: Scenario
    severities: NDArray[np.floating]
    trials: int
    n_class0: int
    n_class1: int
    train_fraction: float
    seed: SeedLike
    on_degenerate: str

    @classmethod
    def for_sweep(
        cls,
        scenario: str | Scenario,
        severities: ArrayLike | None = None,
        *,
        trials: int = DEFAULT_TRIALS,
        n_class0: int = DEFAULT_N_PER_CLASS,
        n_class1: int = DEFAULT_N_PER_CLASS,
        train_fraction: float = DEFAULT_TRAIN_FRACTION,
        seed: SeedLike = None,
        on_degenerate: str = "skip",
    ) -> SweepDesign:
        """
        Create a sweep design with validation.

        Args:
            scenario: Scenario name ('baseline', 'heavy_tail', 'imbalance',
                'label_flip') or a Scenario instance.
            severities: Severity grid. Defaults to the scenario's grid.
            trials: Trials per severity. Must be >= 1.
            n_class0: Rows of class 0 per generated sample. Must be >= 1.
            n_class1: Rows of class 1 per generated sample. Must be >= 1.
            train_fraction: In (0, 1], leaving at least one test row.
            seed: Integer seed, SeedSequence, or None.
            on_degenerate: "raise" or "skip".

        Returns:
            Validated SweepDesign.

        Raises:
            ValidationError: If any input is invalid.
        """
        scenario_obj = get_scenario(scenario)

        if severities is None:
            severities = scenario_obj.default_severities
        raw = np.asarray(severities)
        if raw.ndim == 0:
            raw = raw.reshape(1)
        if raw.ndim != 1:
            raise ValidationError(f"severities: expected 1D, got {raw.ndim}D")
        if raw.shape[0] == 0:
            raise ValidationError("severities: need at least one value")

        severity_arr = np.array(
            [scenario_obj.check_severity(s) for s in raw.tolist()],
            dtype=np.float64,
        )
        if not np.all(np.diff(severity_arr) > 0):
            raise ValidationError(
                "severities: values must be distinct and in increasing order"
            )

        if on_degenerate not in VALID_ON_DEGENERATE:
            raise ValidationError(
                f"on_degenerate must be 'raise' or 'skip', got {on_degenerate!r}"
            )

        trials = check_positive_int(trials, 'trials')
        n_class0 = check_positive_int(n_class0, 'n_class0')
        n_class1 = check_positive_int(n_class1, 'n_class1')
        train_fraction = check_fraction(train_fraction, 'train_fraction')

        # Every trial is scored on the held-out rows, so at least one must remain.
        n_train0 = int(round(train_fraction * n_class0))
        n_train1 = int(round(train_fraction * n_class1))
        if n_train0 == n_class0 and n_train1 == n_class1:
            raise ValidationError(
                f"train_fraction: {train_fraction:g} of {n_class0} + {n_class1} rows "
                f"leaves no test rows to score"
            )

        return cls(
            scenario=scenario_obj,
            severities=severity_arr,
            trials=trials,
            n_class0=n_class0,
            n_class1=n_class1,
            train_fraction=train_fraction,
            seed=seed,
            on_degenerate=on_degenerate,
        )

    @property
    def n_severities(self) -> int:
        return int(self.severities.shape[0])

    def seed_sequences(self) -> tuple[np.random.SeedSequence, list[np.random.SeedSequence]]:
        """
        Root SeedSequence and one child per severity.

        Each child is further spawned into one stream per trial by the
        worker, so results do not depend on how severities are scheduled.
        """
        root = root_seed_sequence(self.seed)
        return root, root.spawn(self.n_severities)


def root_seed_sequence(seed: SeedLike) -> np.random.SeedSequence:
    """
    SeedSequence for ``seed`` that is safe to spawn from.

    A SeedSequence passed in is copied, since spawn() on the caller's
    object would advance it.
    """
    if isinstance(seed, np.random.SeedSequence):
        return np.random.SeedSequence(
            seed.entropy,
            spawn_key=seed.spawn_key,
            pool_size=seed.pool_size,
        )
    return np.random.SeedSequence(seed)
