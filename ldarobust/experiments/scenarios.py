"""
Scenario definitions.

A scenario says, for a given severity value, which latent distribution
generates the data, how the training partition is corrupted, and which
number is reported against the mean error:

    baseline     normal latents, no corruption; severity is nominal
    heavy_tail   Student-t latents; severity = degrees of freedom
    imbalance    imbalance(train, m); reports realised class-1 proportion
    label_flip   flip_labels(train, m); reports the flip proportion
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ldarobust.core.compute.random import RandomSource
from ldarobust.core.exceptions import ValidationError
from ldarobust.core.validation import check_unit_interval, check_dof, check_real
from ldarobust.experiments._common import (
    DEFAULT_DOF_GRID,
    DEFAULT_IMBALANCE_GRID,
    DEFAULT_FLIP_GRID,
)
from ldarobust.sampling._common import Sample, Normal, StudentT, Distribution
from ldarobust.sampling.perturb import imbalance, flip_labels


@dataclass(frozen=True)
class Scenario:
    """
    Base scenario: normal latents, untouched training set.

    Subclasses override the hooks they change.
    """
    name: ClassVar[str] = 'baseline'
    parameter_name: ClassVar[str] = 'nominal'
    default_severities: ClassVar[tuple[float, ...]] = DEFAULT_DOF_GRID

    def check_severity(self, severity: float) -> float:
        """Validate one severity value; return it as a finite float."""
        return check_real(severity, 'severity')

    def distribution(self, severity: float) -> Distribution:
        return Normal()

    def perturb(self, train: Sample, severity: float, source: RandomSource) -> Sample:
        return train

    def reported_parameter(self, severity: float, train: Sample) -> float:
        return severity

    def describe(self) -> dict[str, Any]:
        return {'scenario': self.name, 'parameter': self.parameter_name}


@dataclass(frozen=True)
class Baseline(Scenario):
    """No misspecification. The severity axis is only used to repeat trials."""


@dataclass(frozen=True)
class HeavyTail(Scenario):
    """Student-t latents with severity = degrees of freedom."""
    name: ClassVar[str] = 'heavy_tail'
    parameter_name: ClassVar[str] = 'degrees_of_freedom'
    default_severities: ClassVar[tuple[float, ...]] = DEFAULT_DOF_GRID

    def check_severity(self, severity: float) -> float:
        return check_dof(severity, 'severity')

    def distribution(self, severity: float) -> Distribution:
        return StudentT(severity)


@dataclass(frozen=True)
class Imbalance(Scenario):
    """
    Class-imbalanced training set.

    Severity m keeps a fraction m of class 0 and 1 - m of class 1.
    """
    name: ClassVar[str] = 'imbalance'
    parameter_name: ClassVar[str] = 'class_one_proportion'
    default_severities: ClassVar[tuple[float, ...]] = DEFAULT_IMBALANCE_GRID

    def check_severity(self, severity: float) -> float:
        return check_unit_interval(severity, 'severity')

    def perturb(self, train: Sample, severity: float, source: RandomSource) -> Sample:
        return imbalance(train, severity, source=source)

    def reported_parameter(self, severity: float, train: Sample) -> float:
        return train.class_one_proportion()


@dataclass(frozen=True)
class LabelFlip(Scenario):
    """Label noise: severity m is the share of training labels inverted."""
    name: ClassVar[str] = 'label_flip'
    parameter_name: ClassVar[str] = 'flip_proportion'
    default_severities: ClassVar[tuple[float, ...]] = DEFAULT_FLIP_GRID

    def check_severity(self, severity: float) -> float:
        return check_unit_interval(severity, 'severity')

    def perturb(self, train: Sample, severity: float, source: RandomSource) -> Sample:
        return flip_labels(train, severity, source=source)


SCENARIOS: dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in (Baseline(), HeavyTail(), Imbalance(), LabelFlip())
}


def get_scenario(scenario: str | Scenario) -> Scenario:
    """Look up a scenario by name, or pass a Scenario instance through."""
    if isinstance(scenario, Scenario):
        return scenario
    try:
        return SCENARIOS[scenario]
    except KeyError as e:
        raise ValidationError(
            f"scenario: unknown {scenario!r}, expected one of {sorted(SCENARIOS)}"
        ) from e
