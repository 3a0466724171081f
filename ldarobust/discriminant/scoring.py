"""
Classification scoring.
"""

from numpy.typing import ArrayLike
import numpy as np

from ldarobust.core.exceptions import ValidationError
from ldarobust.core.validation import check_labels, check_consistent_length


def misclassification_error(predicted: ArrayLike, true: ArrayLike) -> float:
    """
    Share of positions where the predicted label differs from the true one.

    Args:
        predicted: Predicted labels (n,).
        true: True labels (n,).

    Returns:
        1 - (number of matches) / n, a value in [0, 1].

    Raises:
        LengthMismatchError: If the sequences differ in length.
        ValidationError: If the sequences are empty or not integer labels.
    """
    predicted_arr = check_labels(predicted, 'predicted')
    true_arr = check_labels(true, 'true')
    check_consistent_length(predicted_arr, true_arr, names=('predicted', 'true'))
    if true_arr.shape[0] == 0:
        raise ValidationError("true: cannot score an empty sequence")
    return 1.0 - float(np.mean(predicted_arr == true_arr))
