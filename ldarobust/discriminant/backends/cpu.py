"""
CPU reference backend for linear discriminant analysis.

Estimates class priors and means, the pooled within-class covariance, and
solves for the discriminant coefficients through a Cholesky factorization
(LAPACK via SciPy). Matches the plug-in estimates of R's MASS::lda with
method = "moment".
"""

from typing import Any

import numpy as np
from scipy import linalg

from ldarobust.core.result import Result
from ldarobust.core.compute.timing import Timer
from ldarobust.core.compute.tolerances import MAX_CONDITION_NUMBER
from ldarobust.core.exceptions import DegenerateFitError
from ldarobust.discriminant._common import ClassStatistics, LDAParams
from ldarobust.discriminant.design import LDADesign


class CPULDABackend:
    """
    CPU backend for shared-covariance LDA.

    Implements design -> Result[LDAParams].
    """

    @property
    def name(self) -> str:
        return 'cpu_lda'

    def solve(self, design: LDADesign) -> Result[LDAParams]:
        """
        Fit the discriminant model.

        Algorithm:
            1. pi_k = n_k / n, mu_k = mean of class-k rows
            2. Sigma = sum_i (x_i - mu_{y_i})(x_i - mu_{y_i})' / (n - K)
            3. Cholesky: Sigma = L L', then W = Sigma^-1 M' by two
               triangular solves
            4. b_k = -1/2 mu_k' w_k + log(pi_k)

        Raises:
            DegenerateFitError: If a class has no rows, n <= K, or Sigma
                is singular or numerically singular.
        """
        timer = Timer()
        timer.start()

        X, y = design.X, design.y
        classes = design.classes
        n, p, K = design.n, design.p, design.n_classes
        counts_by_class = design.class_counts()

        empty = [k for k, c in counts_by_class.items() if c == 0]
        if empty:
            raise DegenerateFitError(
                f"classes {empty} have no training rows "
                f"(counts {counts_by_class})",
                class_counts=counts_by_class,
            )
        if n - K < 1:
            raise DegenerateFitError(
                f"need more than {K} training rows to pool the covariance, got {n}",
                class_counts=counts_by_class,
            )

        # === Class Statistics ===
        with timer.section('class_statistics'):
            counts = np.array([counts_by_class[int(k)] for k in classes], dtype=np.int64)
            priors = counts / n
            group = np.searchsorted(classes, y)
            means = np.zeros((K, p), dtype=np.float64)
            np.add.at(means, group, X)
            means /= counts[:, np.newaxis]

        # === Pooled Covariance ===
        with timer.section('pooled_covariance'):
            centered = X - means[group]
            covariance = centered.T @ centered / (n - K)
            condition_number = float(np.linalg.cond(covariance))

        if not np.isfinite(condition_number) or condition_number > MAX_CONDITION_NUMBER:
            raise DegenerateFitError(
                f"pooled covariance is singular (condition number {condition_number:.3g})",
                class_counts=counts_by_class,
                condition_number=condition_number,
                rank=int(np.linalg.matrix_rank(covariance)),
                expected_rank=p,
            )

        # === Discriminant Coefficients ===
        with timer.section('discriminant_coefficients'):
            try:
                factor = linalg.cho_factor(covariance, lower=True)
            except linalg.LinAlgError as e:
                raise DegenerateFitError(
                    f"pooled covariance is not positive definite: {e}",
                    class_counts=counts_by_class,
                    condition_number=condition_number,
                ) from e
            coefficients = linalg.cho_solve(factor, means.T).T
            intercepts = -0.5 * np.sum(means * coefficients, axis=1) + np.log(priors)

        timer.stop()

        statistics = ClassStatistics(
            classes=classes.copy(),
            counts=counts,
            priors=priors,
            means=means,
            covariance=covariance,
        )
        params = LDAParams(
            statistics=statistics,
            coefficients=coefficients,
            intercepts=intercepts,
            df_residual=n - K,
        )

        info: dict[str, Any] = {
            'method': 'pooled_cholesky',
            'n': n,
            'p': p,
            'n_classes': K,
            'condition_number': condition_number,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
