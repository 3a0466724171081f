"""
Solver dispatch for linear discriminant analysis.

This module provides the lda() function (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from ldarobust.core.exceptions import ValidationError
from ldarobust.discriminant.design import LDADesign, DEFAULT_CLASSES
from ldarobust.discriminant.solution import LDASolution
from ldarobust.discriminant.backends.cpu import CPULDABackend
from ldarobust.sampling._common import Sample


BackendChoice = Literal['auto', 'cpu']


def lda(
    data: ArrayLike | Sample,
    y: ArrayLike | None = None,
    *,
    classes: tuple[int, ...] = DEFAULT_CLASSES,
    backend: BackendChoice = 'auto',
) -> LDASolution:
    """
    Fit a shared-covariance linear discriminant model.

    Args:
        data: Training Sample, or a feature matrix (n x p) when ``y`` is
            given.
        y: Training labels (n,). Required with a feature matrix, must be
            omitted with a Sample.
        classes: Labels the model distinguishes. Every class must have at
            least one training row.
        backend: 'auto' or 'cpu'.

    Returns:
        LDASolution with class statistics, discriminant coefficients,
        predict() and predict_proba().

    Raises:
        ValidationError: If inputs are malformed.
        DegenerateFitError: If a class has no rows or the pooled covariance
            cannot be inverted.

    Example:
        >>> model = lda(train)
        >>> error = misclassification_error(model.predict(test), test.y)
    """
    if isinstance(data, Sample):
        if y is not None:
            raise ValidationError("y: must be omitted when fitting on a Sample")
        design = LDADesign.from_sample(data, classes)
    else:
        if y is None:
            raise ValidationError("y: labels are required when fitting on arrays")
        design = LDADesign.from_arrays(data, y, classes)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design)
    return LDASolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """Select and instantiate the appropriate backend."""
    if choice in ('auto', 'cpu'):
        return CPULDABackend()
    raise ValidationError(f"Unknown backend: {choice!r}")
