"""
Process-parallel backend for scenario sweeps.

Severity values are independent, so each one is shipped to a joblib worker
together with its own SeedSequence child. Workers share no generator
state, and since the streams are fixed before dispatch the result is
identical to the serial backend for the same seed.
"""

from __future__ import annotations

from joblib import Parallel, delayed

from ldarobust.core.result import Result
from ldarobust.core.compute.timing import Timer
from ldarobust.experiments._common import SweepParams
from ldarobust.experiments._trial import run_severity
from ldarobust.experiments.backends.cpu import assemble_result
from ldarobust.experiments.design import SweepDesign


class ParallelSweepBackend:
    """
    joblib backend distributing severities across worker processes.

    Args:
        n_jobs: Number of workers, joblib semantics (-1 = all cores).
        prefer: joblib backend hint, "processes" or "threads".
    """

    def __init__(self, n_jobs: int | None = None, prefer: str = "processes"):
        self._n_jobs = -1 if n_jobs is None else n_jobs
        self._prefer = prefer

    @property
    def name(self) -> str:
        return 'parallel_sweep'

    def solve(self, design: SweepDesign) -> Result[SweepParams]:
        """Run the sweep across workers and return Result[SweepParams]."""
        timer = Timer()
        timer.start()

        root, children = design.seed_sequences()
        tasks = (
            delayed(run_severity)(
                design.scenario, float(severity), child,
                trials=design.trials,
                n_class0=design.n_class0,
                n_class1=design.n_class1,
                train_fraction=design.train_fraction,
                on_degenerate=design.on_degenerate,
            )
            for severity, child in zip(design.severities, children)
        )
        # joblib returns results in submission order.
        outcomes = Parallel(n_jobs=self._n_jobs, prefer=self._prefer)(tasks)

        for outcome in outcomes:
            timer.merge(outcome.timing)
        timer.stop()
        return assemble_result(design, list(outcomes), root, timer, self.name)
