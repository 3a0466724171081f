"""
LDA solution types.

LDASolution wraps Result[LDAParams] and provides prediction, posterior
probabilities and an R-style summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.special import logsumexp

from ldarobust.core.result import Result
from ldarobust.core.exceptions import DimensionError
from ldarobust.core.validation import check_array, check_finite, check_2d
from ldarobust.discriminant._common import ClassStatistics, LDAParams
from ldarobust.sampling._common import Sample

if TYPE_CHECKING:
    from ldarobust.discriminant.design import LDADesign


@dataclass
class LDASolution:
    """
    User-facing fitted LDA model.

    The fitted parameters are immutable; this wrapper only reads them.
    Prediction picks the class with the largest discriminant score. Ties
    go to the lowest class label.
    """
    _result: Result[LDAParams]
    _design: 'LDADesign'

    # --- Fitted parameters ---

    @property
    def statistics(self) -> ClassStatistics:
        return self._result.params.statistics

    @property
    def classes(self) -> NDArray[np.int64]:
        """Class labels in ascending order."""
        return self.statistics.classes

    @property
    def priors(self) -> NDArray[np.floating[Any]]:
        return self.statistics.priors

    @property
    def means(self) -> NDArray[np.floating[Any]]:
        """Class means, shape (K, p)."""
        return self.statistics.means

    @property
    def counts(self) -> NDArray[np.int64]:
        return self.statistics.counts

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Pooled within-class covariance, shape (p, p)."""
        return self.statistics.covariance

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Discriminant weight vectors w_k, shape (K, p)."""
        return self._result.params.coefficients

    @property
    def intercepts(self) -> NDArray[np.floating[Any]]:
        """Discriminant intercepts b_k, shape (K,)."""
        return self._result.params.intercepts

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

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

    # --- Prediction ---

    def decision_function(self, X: ArrayLike | Sample) -> NDArray[np.floating[Any]]:
        """
        Discriminant scores delta_k(x) = x' w_k + b_k.

        Args:
            X: Feature rows, shape (m, p), or a Sample.

        Returns:
            Scores, shape (m, K), columns in class order.
        """
        X_arr = self._check_features(X)
        return X_arr @ self.coefficients.T + self.intercepts

    def predict(self, X: ArrayLike | Sample) -> NDArray[np.int64]:
        """Predicted class label for each row."""
        scores = self.decision_function(X)
        return self.classes[np.argmax(scores, axis=1)]

    def predict_proba(self, X: ArrayLike | Sample) -> NDArray[np.floating[Any]]:
        """
        Posterior class probabilities, shape (m, K).

        Normalises the discriminant scores on the log scale, which is the
        Gaussian posterior under the fitted shared-covariance model.
        """
        scores = self.decision_function(X)
        return np.exp(scores - logsumexp(scores, axis=1, keepdims=True))

    def _check_features(self, X: ArrayLike | Sample) -> NDArray[np.floating[Any]]:
        if isinstance(X, Sample):
            X_arr = np.asarray(X.X, dtype=np.float64)
        else:
            X_arr = check_array(X, 'X')
            if X_arr.ndim == 1:
                X_arr = X_arr.reshape(1, -1)
        check_2d(X_arr, 'X')
        check_finite(X_arr, 'X')
        p = self.coefficients.shape[1]
        if X_arr.shape[1] != p:
            raise DimensionError(
                f"X: model was fitted on {p} predictors, got {X_arr.shape[1]}"
            )
        return X_arr

    # --- Display ---

    def summary(self) -> str:
        """
        R print.lda style output.

        Produces:
            Prior probabilities of groups:
                  0       1
            0.50000 0.50000

            Group means:
                     x1        x2
            0   0.01234  -0.02345
            1   6.01234   3.98765

            Coefficients of linear discriminants:
            ...
        """
        classes = [str(int(k)) for k in self.classes]
        p = self.means.shape[1]
        predictors = [f"x{j + 1}" for j in range(p)]

        lines = ["Linear Discriminant Analysis", "", "Prior probabilities of groups:"]
        lines.append(" ".join(f"{k:>10s}" for k in classes))
        lines.append(" ".join(f"{pi:10.5f}" for pi in self.priors))

        lines.append("")
        lines.append("Group means:")
        lines.append(f"{'':>6s} " + " ".join(f"{name:>12s}" for name in predictors))
        for k, row in zip(classes, self.means):
            lines.append(f"{k:>6s} " + " ".join(f"{v:12.5f}" for v in row))

        lines.append("")
        lines.append("Coefficients of linear discriminants:")
        lines.append(
            f"{'':>6s} " + " ".join(f"{name:>12s}" for name in predictors)
            + f" {'intercept':>12s}"
        )
        for k, w, b in zip(classes, self.coefficients, self.intercepts):
            lines.append(
                f"{k:>6s} " + " ".join(f"{v:12.5f}" for v in w) + f" {b:12.5f}"
            )

        lines.append("")
        lines.append(f"Training rows: {self._design.n} (df = {self.df_residual})")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LDASolution(n={self._design.n}, p={self._design.p}, "
            f"classes={self.classes.tolist()}, backend={self.backend_name!r})"
        )
