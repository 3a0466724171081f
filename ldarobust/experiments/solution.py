"""
Solution wrappers for sweep results.

SweepSolution wraps Result[SweepParams] for one scenario. StudySolution
collects the four scenario sweeps and the baseline reference error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from ldarobust.core.result import Result
from ldarobust.experiments._common import SweepParams

if TYPE_CHECKING:
    from ldarobust.experiments.design import SweepDesign


@dataclass
class SweepSolution:
    """
    User-facing sweep results.

    One mean error per severity, in increasing order of severity, plus the
    scenario's reported parameter for plotting against.
    """
    _result: Result[SweepParams]
    _design: 'SweepDesign'

    # --- Core fields ---

    @property
    def scenario(self) -> str:
        return self._result.params.scenario

    @property
    def parameter_name(self) -> str:
        """Meaning of reported_parameter: degrees_of_freedom, class_one_proportion, ..."""
        return self._result.params.parameter_name

    @property
    def severities(self) -> NDArray[np.floating[Any]]:
        return self._result.params.severities

    @property
    def mean_errors(self) -> NDArray[np.floating[Any]]:
        """Mean test error per severity, shape (S,)."""
        return self._result.params.mean_errors

    @property
    def errors(self) -> NDArray[np.floating[Any]]:
        """Per-trial test errors, shape (S, trials); NaN for failed trials."""
        return self._result.params.errors

    @property
    def reported_parameter(self) -> NDArray[np.floating[Any]]:
        """Mean reported parameter per severity, shape (S,)."""
        return self._result.params.reported

    @property
    def n_trials(self) -> int:
        return self._result.params.n_trials

    @property
    def n_failed(self) -> NDArray[np.int64]:
        return self._result.params.n_failed

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Monte Carlo standard error of each mean, sd / sqrt(successful trials).

        NaN where fewer than two trials succeeded.
        """
        ok = ~np.isnan(self.errors)
        n_ok = ok.sum(axis=1)
        se = np.full(len(n_ok), np.nan, dtype=np.float64)
        for i in np.flatnonzero(n_ok >= 2):
            se[i] = np.std(self.errors[i, ok[i]], ddof=1) / np.sqrt(n_ok[i])
        return se

    @property
    def grand_mean(self) -> float:
        """Mean of the per-severity means, ignoring severities with no result."""
        valid = self.mean_errors[~np.isnan(self.mean_errors)]
        if valid.shape[0] == 0:
            return float('nan')
        return float(np.mean(valid))

    def table(self) -> list[tuple[float, float]]:
        """(reported parameter, mean error) pairs in severity order."""
        return [
            (float(x), float(e))
            for x, e in zip(self.reported_parameter, self.mean_errors)
        ]

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """
        Sweep table.

        Produces:
            SWEEP: heavy_tail (degrees_of_freedom)

            Trials per value: 100, n = 1000 + 1000, train fraction 0.7

              severity      parameter     mean error     std. error   failed
                     2              2        0.16612        0.00101        0
                     ...
        """
        lines = [
            f"\nSWEEP: {self.scenario} ({self.parameter_name})",
            "",
            f"Trials per value: {self.n_trials}, "
            f"n = {self._design.n_class0} + {self._design.n_class1}, "
            f"train fraction {self._design.train_fraction:g}",
            "",
            f"{'severity':>10s} {'parameter':>14s} {'mean error':>14s} "
            f"{'std. error':>14s} {'failed':>8s}",
        ]
        for s, x, e, se, f in zip(
            self.severities, self.reported_parameter, self.mean_errors,
            self.standard_errors, self.n_failed,
        ):
            lines.append(f"{s:10.4g} {x:14.5g} {e:14.5f} {se:14.5f} {int(f):8d}")
        lines.append("")
        lines.append(f"Grand mean error: {self.grand_mean:.5f}")
        if self.warnings:
            lines.append(f"Failed trials: {int(self.n_failed.sum())} (see .warnings)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SweepSolution(scenario={self.scenario!r}, "
            f"n_severities={len(self.severities)}, trials={self.n_trials}, "
            f"backend={self.backend_name!r})"
        )


@dataclass
class StudySolution:
    """
    The full robustness study.

    ``baseline_error`` is the grand mean of the baseline sweep and is the
    reference line the other scenarios are compared against.
    """
    sweeps: dict[str, SweepSolution]
    baseline_error: float

    @property
    def baseline(self) -> SweepSolution:
        return self.sweeps['baseline']

    @property
    def heavy_tail(self) -> SweepSolution:
        return self.sweeps['heavy_tail']

    @property
    def imbalance(self) -> SweepSolution:
        return self.sweeps['imbalance']

    @property
    def label_flip(self) -> SweepSolution:
        return self.sweeps['label_flip']

    def __getitem__(self, scenario: str) -> SweepSolution:
        return self.sweeps[scenario]

    def summary(self) -> str:
        lines = [
            "\nLDA ROBUSTNESS STUDY",
            "",
            f"Baseline error: {self.baseline_error:.5f}",
        ]
        for sweep in self.sweeps.values():
            lines.append(sweep.summary())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"StudySolution(scenarios={list(self.sweeps)}, "
            f"baseline_error={self.baseline_error:.4g})"
        )
