"""
Common data structures and default configuration for sweeps.

SweepParams is the parameter payload wrapped by Result[P] and exposed
through SweepSolution. The DEFAULT_* constants are the study's documented
configuration; every one of them can be overridden through the keyword
arguments of run_sweep() and run_study().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


DEFAULT_N_PER_CLASS = 1000
DEFAULT_TRIALS = 100
DEFAULT_TRAIN_FRACTION = 0.7

# Student-t degrees of freedom 2, 4, ..., 40
DEFAULT_DOF_GRID = tuple(float(dof) for dof in range(2, 41, 2))
# Imbalance severity 1%, ..., 99%
DEFAULT_IMBALANCE_GRID = tuple(k / 100 for k in range(1, 100))
# Flip proportion 1%, ..., 100%
DEFAULT_FLIP_GRID = tuple(k / 100 for k in range(1, 101))

VALID_ON_DEGENERATE = ("raise", "skip")


@dataclass(frozen=True)
class TrialOutcome:
    """
    Result of one generate/split/perturb/fit/score pipeline.

    - error: misclassification error on the test partition
    - reported: the scenario's reported parameter for this trial
      (e.g. realised class-1 proportion of the perturbed training set)
    """
    error: float
    reported: float


@dataclass(frozen=True)
class SeverityOutcome:
    """
    All trials at one severity value, as produced by a backend worker.

    Failed trials hold NaN in ``errors`` and ``reported``.
    """
    errors: NDArray[np.floating[Any]]          # shape (trials,)
    reported: NDArray[np.floating[Any]]        # shape (trials,)
    failures: tuple[str, ...]
    timing: dict[str, float]


@dataclass(frozen=True)
class SweepParams:
    """
    Parameter payload for a scenario sweep.

    - severities: severity values in increasing order
    - mean_errors: mean test error over successful trials per severity
      (NaN where every trial failed)
    - errors: per-trial errors, NaN for failed trials
    - reported: mean reported parameter per severity (degrees of freedom,
      class-1 training proportion, or flip proportion)
    """
    scenario: str
    parameter_name: str
    severities: NDArray[np.floating[Any]]      # shape (S,)
    mean_errors: NDArray[np.floating[Any]]     # shape (S,)
    errors: NDArray[np.floating[Any]]          # shape (S, trials)
    reported: NDArray[np.floating[Any]]        # shape (S,)
    n_trials: int
    n_failed: NDArray[np.int64]                # shape (S,)
