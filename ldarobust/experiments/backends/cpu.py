"""
CPU backend for scenario sweeps.

CPUSweepBackend: runs every severity and trial serially in this process.
assemble_result() turns per-severity outcomes into Result[SweepParams] and
is shared with the parallel backend.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ldarobust.core.result import Result
from ldarobust.core.compute.timing import Timer
from ldarobust.experiments._common import SweepParams, SeverityOutcome
from ldarobust.experiments._trial import run_severity
from ldarobust.experiments.design import SweepDesign


class CPUSweepBackend:
    """
    Serial sweep backend.
    """

    @property
    def name(self) -> str:
        return 'cpu_sweep'

    def solve(self, design: SweepDesign) -> Result[SweepParams]:
        """Run the sweep and return Result[SweepParams]."""
        timer = Timer()
        timer.start()

        root, children = design.seed_sequences()
        outcomes = []
        for severity, child in zip(design.severities, children):
            outcome = run_severity(
                design.scenario, float(severity), child,
                trials=design.trials,
                n_class0=design.n_class0,
                n_class1=design.n_class1,
                train_fraction=design.train_fraction,
                on_degenerate=design.on_degenerate,
            )
            timer.merge(outcome.timing)
            outcomes.append(outcome)

        timer.stop()
        return assemble_result(design, outcomes, root, timer, self.name)


def assemble_result(
    design: SweepDesign,
    outcomes: list[SeverityOutcome],
    root: np.random.SeedSequence,
    timer: Timer,
    backend_name: str,
) -> Result[SweepParams]:
    """
    Average the trials of each severity.

    Failed trials are excluded from their mean; a severity whose trials all
    failed gets a NaN mean.
    """
    errors = np.vstack([o.errors for o in outcomes])
    reported_trials = np.vstack([o.reported for o in outcomes])
    ok = ~np.isnan(errors)
    n_ok = ok.sum(axis=1)

    mean_errors = np.full(design.n_severities, np.nan, dtype=np.float64)
    reported = np.full(design.n_severities, np.nan, dtype=np.float64)
    has_ok = n_ok > 0
    mean_errors[has_ok] = (
        np.where(ok, errors, 0.0).sum(axis=1)[has_ok] / n_ok[has_ok]
    )
    reported[has_ok] = (
        np.where(ok, reported_trials, 0.0).sum(axis=1)[has_ok] / n_ok[has_ok]
    )

    params = SweepParams(
        scenario=design.scenario.name,
        parameter_name=design.scenario.parameter_name,
        severities=design.severities.copy(),
        mean_errors=mean_errors,
        errors=errors,
        reported=reported,
        n_trials=design.trials,
        n_failed=(design.trials - n_ok).astype(np.int64),
    )

    failures = tuple(msg for o in outcomes for msg in o.failures)
    info: dict[str, Any] = {
        'scenario': design.scenario.name,
        'n_severities': design.n_severities,
        'trials': design.trials,
        'n_class0': design.n_class0,
        'n_class1': design.n_class1,
        'train_fraction': design.train_fraction,
        'entropy': root.entropy,
        'n_failed_total': int(params.n_failed.sum()),
    }

    return Result(
        params=params,
        info=info,
        timing=timer.result(),
        backend_name=backend_name,
        warnings=failures,
    )
