"""
Solver dispatch for scenario sweeps.

Public API:
    run_sweep(): one scenario over its severity grid
    run_study(): baseline, heavy_tail, imbalance and label_flip together
"""

from __future__ import annotations

import warnings
from typing import Literal

from numpy.typing import ArrayLike

from ldarobust.core.compute.random import SeedLike
from ldarobust.core.exceptions import ValidationError
from ldarobust.experiments._common import (
    DEFAULT_N_PER_CLASS,
    DEFAULT_TRIALS,
    DEFAULT_TRAIN_FRACTION,
    DEFAULT_DOF_GRID,
    DEFAULT_IMBALANCE_GRID,
    DEFAULT_FLIP_GRID,
)
from ldarobust.experiments.design import SweepDesign, root_seed_sequence
from ldarobust.experiments.scenarios import Scenario
from ldarobust.experiments.solution import SweepSolution, StudySolution
from ldarobust.experiments.backends.cpu import CPUSweepBackend


BackendChoice = Literal['auto', 'cpu', 'parallel']
OnDegenerate = Literal['raise', 'skip']


def run_sweep(
    scenario: str | Scenario,
    severities: ArrayLike | None = None,
    *,
    trials: int = DEFAULT_TRIALS,
    n_class0: int = DEFAULT_N_PER_CLASS,
    n_class1: int = DEFAULT_N_PER_CLASS,
    train_fraction: float = DEFAULT_TRAIN_FRACTION,
    seed: SeedLike = None,
    on_degenerate: OnDegenerate = 'skip',
    backend: BackendChoice = 'auto',
    n_jobs: int | None = None,
) -> SweepSolution:
    """
    Estimate the mean LDA test error at each severity of a scenario.

    For each severity, in order, runs ``trials`` independent pipelines
    generate -> stratified split -> perturb training rows -> fit LDA ->
    predict test rows -> misclassification error, and averages them.

    Args:
        scenario: 'baseline', 'heavy_tail', 'imbalance', 'label_flip', or
            a Scenario instance.
        severities: Increasing severity grid. Defaults to the scenario's
            grid (dof 2..40, imbalance 0.01..0.99, flip 0.01..1.00).
        trials: Trials per severity.
        n_class0: Generated rows of class 0.
        n_class1: Generated rows of class 1.
        train_fraction: Share of each class used for training.
        seed: Root seed. With a seed, results are reproducible and do not
            depend on the backend.
        on_degenerate: What to do when a trial's training set cannot be
            fit. 'raise' aborts the sweep; 'skip' drops that trial from
            its severity's mean and emits a RuntimeWarning.
        backend: 'auto'/'cpu' run serially; 'parallel' distributes
            severities across joblib workers.
        n_jobs: Worker count for the parallel backend (default: all cores).

    Returns:
        SweepSolution with mean_errors, reported_parameter and table().

    Raises:
        ValidationError: If any argument is invalid.
        DegenerateFitError: If on_degenerate='raise' and a fit fails.

    Example:
        >>> sweep = run_sweep('label_flip', [0.0, 0.5, 1.0], trials=20, seed=1)
        >>> sweep.table()
    """
    design = SweepDesign.for_sweep(
        scenario,
        severities,
        trials=trials,
        n_class0=n_class0,
        n_class1=n_class1,
        train_fraction=train_fraction,
        seed=seed,
        on_degenerate=on_degenerate,
    )

    backend_impl = _get_backend(backend, n_jobs)
    result = backend_impl.solve(design)

    if result.warnings:
        warnings.warn(
            f"{len(result.warnings)} trial(s) of the {design.scenario.name} sweep "
            f"had a degenerate fit and were excluded from their mean. "
            f"First: {result.warnings[0]}",
            RuntimeWarning,
            stacklevel=2,
        )

    return SweepSolution(_result=result, _design=design)


def run_study(
    *,
    trials: int = DEFAULT_TRIALS,
    n_per_class: int = DEFAULT_N_PER_CLASS,
    train_fraction: float = DEFAULT_TRAIN_FRACTION,
    baseline_severities: ArrayLike | None = None,
    dof_grid: ArrayLike = DEFAULT_DOF_GRID,
    imbalance_grid: ArrayLike = DEFAULT_IMBALANCE_GRID,
    flip_grid: ArrayLike = DEFAULT_FLIP_GRID,
    seed: SeedLike = None,
    on_degenerate: OnDegenerate = 'skip',
    backend: BackendChoice = 'auto',
    n_jobs: int | None = None,
) -> StudySolution:
    """
    Run the baseline and the three misspecification sweeps.

    Each scenario gets an independent child of the root seed. The baseline
    sweep repeats the unperturbed pipeline once per entry of
    ``baseline_severities`` (default: the dof grid, used only as a repeat
    count); its grand mean becomes ``baseline_error``.

    Returns:
        StudySolution with one SweepSolution per scenario and
        baseline_error.
    """
    if baseline_severities is None:
        baseline_severities = dof_grid

    grids = {
        'baseline': baseline_severities,
        'heavy_tail': dof_grid,
        'imbalance': imbalance_grid,
        'label_flip': flip_grid,
    }
    children = root_seed_sequence(seed).spawn(len(grids))

    sweeps = {}
    for (name, grid), child in zip(grids.items(), children):
        sweeps[name] = run_sweep(
            name,
            grid,
            trials=trials,
            n_class0=n_per_class,
            n_class1=n_per_class,
            train_fraction=train_fraction,
            seed=child,
            on_degenerate=on_degenerate,
            backend=backend,
            n_jobs=n_jobs,
        )

    return StudySolution(sweeps=sweeps, baseline_error=sweeps['baseline'].grand_mean)


def _get_backend(choice: BackendChoice, n_jobs: int | None):
    """
    Select and instantiate the sweep backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu'):
        return CPUSweepBackend()

    if choice == 'parallel':
        from ldarobust.experiments.backends.parallel import ParallelSweepBackend
        return ParallelSweepBackend(n_jobs=n_jobs)

    raise ValidationError(f"Unknown backend: {choice!r}")
