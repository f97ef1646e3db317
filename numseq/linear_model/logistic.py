"""Simple logistic regression for binary labels, fitted by gradient descent.

The descent loop follows the log-loss gradient with one twist kept from the
reference design: the residual is taken between the current *thresholded*
labels and the truth, not between probabilities and the truth. Training
therefore stops moving as soon as every sample is classified correctly.

Stopping rule:
    Descent stops as soon as both relative gradients
    ``|grad| / max(|param|, 1e-12)`` are at or below ``gradient_threshold``,
    or when ``iteration_threshold`` iterations have run, whichever comes
    first. Reaching the cap without converging emits a
    :class:`~numseq.errors.ConvergenceWarning`.
"""

from __future__ import annotations

import logging
import warnings

import numpy as np

from .. import maths
from .._sequence import (
    ArrayLike,
    as_array,
    as_float_array,
    check_min_size,
    check_same_size,
    like,
)
from ..config import (
    DEFAULT_GRADIENT_THRESHOLD,
    DEFAULT_ITERATION_THRESHOLD,
    DEFAULT_LEARNING_RATE,
    PROBABILITY_THRESHOLD,
    RELATIVE_GRADIENT_FLOOR,
    GradientDescentConfig,
)
from ..errors import ConvergenceWarning, InvalidValueError
from ..stats.metrics import accuracy_score
from .base import FittedParams, SimpleRegressionBase

logger = logging.getLogger(__name__)


def _relative_gradient(gradient: float, param: float) -> float:
    return abs(gradient) / max(abs(param), RELATIVE_GRADIENT_FLOOR)


def _labels(x: np.ndarray, coeff: float, intercept: float) -> np.ndarray:
    proba = maths.sigmoid(maths.linear(x, coeff, intercept))
    return (proba >= PROBABILITY_THRESHOLD).astype(int)


class SimpleLogisticRegression(SimpleRegressionBase):
    """Binary classifier ``P(y=1 | x) = sigmoid(coeff * x + intercept)``.

    Args:
        learning_rate (float, optional): Gradient-descent step size, > 0.
        gradient_threshold (float, optional): Relative-gradient convergence
            tolerance in ``(0, 1)``.
        iteration_threshold (int, optional): Maximum number of iterations,
            > 0.

    Hyperparameters are checked when :meth:`fit` runs and raise
    :class:`~numseq.errors.HyperparameterError`.

    Attributes:
        config (GradientDescentConfig): Frozen hyperparameters.
        n_iter_ (int): Iterations run by the last successful fit.
        converged_ (bool): Whether the last fit met the gradient tolerance.
    """

    def __init__(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        gradient_threshold: float = DEFAULT_GRADIENT_THRESHOLD,
        iteration_threshold: int = DEFAULT_ITERATION_THRESHOLD,
    ) -> None:
        super().__init__()
        self.config = GradientDescentConfig(
            learning_rate=learning_rate,
            gradient_threshold=gradient_threshold,
            iteration_threshold=iteration_threshold,
        )
        self.n_iter_: int = 0
        self.converged_: bool = False

    @staticmethod
    def _check_targets(y: np.ndarray) -> None:
        classes = maths.approx_set(y)
        if classes.size != 2:
            raise InvalidValueError("Targets must contain two classes of values.")
        if not np.all(np.isin(classes, (0, 1))):
            raise InvalidValueError("Targets must contain binary values, 0 or 1.")

    def fit(self, x: ArrayLike, y: ArrayLike) -> "SimpleLogisticRegression":
        """Fit the model by batch gradient descent starting from zero.

        Args:
            x: Training values.
            y: Binary targets, containing both 0 and 1.

        Returns:
            SimpleLogisticRegression: ``self``.

        Raises:
            HyperparameterError: If a hyperparameter is out of range.
            SizeMismatchError: If ``x`` and ``y`` differ in length.
            InsufficientDataError: If fewer than two samples are given.
            InvalidValueError: If ``y`` is not made of exactly the values 0
                and 1.
        """
        cfg = self.config
        cfg.validate()

        xa = as_float_array(x)
        ya = as_array(y)
        check_same_size(xa, ya)
        check_min_size(xa, 2, "fit")
        self._check_targets(ya)
        truth = ya.astype(float)

        coeff = 0.0
        intercept = 0.0
        n_iter = 0
        converged = False
        while True:
            residual = _labels(xa, coeff, intercept) - truth
            d_coeff = float(np.mean(xa * residual))
            d_intercept = float(np.mean(residual))
            coeff -= cfg.learning_rate * d_coeff
            intercept -= cfg.learning_rate * d_intercept
            n_iter += 1

            converged = (
                _relative_gradient(d_coeff, coeff) <= cfg.gradient_threshold
                and _relative_gradient(d_intercept, intercept)
                <= cfg.gradient_threshold
            )
            logger.debug(
                "iteration %d: coeff=%.6g intercept=%.6g d_coeff=%.3g d_intercept=%.3g",
                n_iter,
                coeff,
                intercept,
                d_coeff,
                d_intercept,
            )
            if converged or n_iter >= cfg.iteration_threshold:
                break

        self._params = FittedParams(coeff=coeff, intercept=intercept)
        self.n_iter_ = n_iter
        self.converged_ = converged

        if converged:
            logger.debug("Gradient descent converged after %d iterations", n_iter)
        else:
            warnings.warn(
                f"Gradient descent stopped after {n_iter} iterations without "
                f"reaching gradient_threshold={cfg.gradient_threshold}.",
                ConvergenceWarning,
                stacklevel=2,
            )
        return self

    def predict_proba(self, x: ArrayLike):
        """Return ``P(y=1)`` for each element of ``x``."""
        params = self.fitted_params()
        xa = as_float_array(x)
        return like(x, maths.sigmoid(maths.linear(xa, params.coeff, params.intercept)))

    def predict(self, x: ArrayLike):
        """Return integer labels, 1 where the probability is at least 0.5."""
        params = self.fitted_params()
        xa = as_float_array(x)
        return like(x, _labels(xa, params.coeff, params.intercept))

    def score(self, x: ArrayLike, y: ArrayLike) -> float:
        """Accuracy of :meth:`predict` on ``x`` against the labels ``y``."""
        return accuracy_score(y, self.predict(x))
