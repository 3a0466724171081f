"""
Monte Carlo robustness sweeps.

Runs the LDA pipeline repeatedly across the severity grid of each
scenario and averages the test error per severity value.

Usage:
    from ldarobust.experiments import run_sweep, run_study

    sweep = run_sweep('heavy_tail', trials=100, seed=42)
    sweep.table()  # [(dof, mean_error), ...]

    study = run_study(trials=100, seed=42)
    study.baseline_error
"""

from ldarobust.experiments.scenarios import (
    Scenario,
    Baseline,
    HeavyTail,
    Imbalance,
    LabelFlip,
    SCENARIOS,
    get_scenario,
)
from ldarobust.experiments.design import SweepDesign
from ldarobust.experiments.solution import SweepSolution, StudySolution
from ldarobust.experiments.solvers import run_sweep, run_study
from ldarobust.experiments._trial import run_trial

__all__ = [
    "run_sweep",
    "run_study",
    "run_trial",
    "SweepDesign",
    "SweepSolution",
    "StudySolution",
    "Scenario",
    "Baseline",
    "HeavyTail",
    "Imbalance",
    "LabelFlip",
    "SCENARIOS",
    "get_scenario",
]
