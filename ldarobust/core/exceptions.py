"""
Exception hierarchy for ldarobust.

All exceptions inherit from LDARobustError so callers can catch any
library-specific error in one place. Invalid arguments surface as
ValidationError before any random numbers are drawn; numerical failures
during a fit surface as NumericalError subclasses.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LDARobustError(Exception):
    """Base exception for all ldarobust errors."""
    pass


class ValidationError(LDARobustError):
    """
    Input validation failed.

    Raised for out-of-range severities, fractions, class sizes and
    degrees of freedom, and for malformed arrays.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    """
    pass


class LengthMismatchError(DimensionError):
    """
    Two sequences that must be aligned element-wise differ in length.

    Attributes:
        lengths: Mapping of parameter name to observed length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths or {}


class NumericalError(LDARobustError):
    """
    Numerical computation failed.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateFitError(SingularMatrixError):
    """
    A discriminant model could not be fitted.

    Raised when a class has no training rows, when there are too few rows
    to estimate the pooled covariance, or when the pooled covariance is
    not invertible.

    Attributes:
        class_counts: Mapping of class label to number of training rows
    """

    def __init__(
        self,
        message: str,
        class_counts: dict[int, int] | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(
            message,
            matrix_name='pooled covariance',
            condition_number=condition_number,
            rank=rank,
            expected_rank=expected_rank,
        )
        self.class_counts = class_counts or {}
