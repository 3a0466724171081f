"""
Simulated data for the robustness study.

Provides generation of the two-class, two-predictor sample, stratified
train/test splitting, and the two training-set corruptions.

Usage:
    from ldarobust.sampling import generate, stratified_split, StudentT

    sample = generate(1000, 1000, StudentT(4), source=42)
    train, test = stratified_split(sample, 0.7, source=43)
    noisy = flip_labels(train, 0.2, source=44)
"""

from ldarobust.sampling._common import Sample, Normal, StudentT, Distribution
from ldarobust.sampling.generate import (
    generate,
    bayes_error_rate,
    population_covariance,
)
from ldarobust.sampling.split import stratified_split
from ldarobust.sampling.perturb import imbalance, flip_labels

__all__ = [
    "Sample",
    "Normal",
    "StudentT",
    "Distribution",
    "generate",
    "bayes_error_rate",
    "population_covariance",
    "stratified_split",
    "imbalance",
    "flip_labels",
]
