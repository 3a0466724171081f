"""
ldarobust: Monte Carlo robustness study of linear discriminant analysis.

Generates two-class, two-predictor samples, fits a shared-covariance LDA
classifier and measures its test error while the training data is
misspecified in three ways: heavy-tailed latents, class imbalance and
label noise.

Submodules:
    sampling: Data generation, stratified splitting, perturbations
    discriminant: LDA fit/predict and misclassification error
    experiments: Severity sweeps and the full study
"""

__version__ = "0.1.0"

from ldarobust import sampling
from ldarobust import discriminant
from ldarobust import experiments
from ldarobust.experiments import run_sweep, run_study

__all__ = [
    "__version__",
    "sampling",
    "discriminant",
    "experiments",
    "run_sweep",
    "run_study",
]
