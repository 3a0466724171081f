"""
Linear discriminant analysis.

Shared-covariance Gaussian discriminant model with empirical priors and
the misclassification error used to score it.

Public API:
    lda(train) -> LDASolution
    LDASolution.predict(X) -> labels
    misclassification_error(predicted, true) -> float

Example:
    >>> from ldarobust.discriminant import lda, misclassification_error
    >>> model = lda(train)
    >>> misclassification_error(model.predict(test), test.y)
"""

from ldarobust.discriminant._common import ClassStatistics, LDAParams
from ldarobust.discriminant.design import LDADesign
from ldarobust.discriminant.solution import LDASolution
from ldarobust.discriminant.solvers import lda
from ldarobust.discriminant.scoring import misclassification_error

__all__ = [
    "lda",
    "misclassification_error",
    "LDADesign",
    "LDASolution",
    "LDAParams",
    "ClassStatistics",
]
