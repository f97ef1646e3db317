"""Simple linear regression by ordinary least squares."""

from __future__ import annotations

import logging
import math
import warnings

import numpy as np

from .._sequence import (
    ArrayLike,
    as_float_array,
    check_min_size,
    check_not_empty,
    check_same_size,
    like,
)
from .base import FittedParams, SimpleRegressionBase

logger = logging.getLogger(__name__)


class SimpleLinearRegression(SimpleRegressionBase):
    """Fit ``y = coeff * x + intercept`` in closed form.

    Example:
        >>> model = SimpleLinearRegression().fit([1, 2, 3, 4], [2, 4, 6, 8])
        >>> model.coeff, model.intercept
        (2.0, 0.0)
    """

    def fit(self, x: ArrayLike, y: ArrayLike) -> "SimpleLinearRegression":
        """Fit the line with the normal-equation formulas.

        ``coeff = (n*Sxy - Sx*Sy) / (n*Sxx - Sx**2)`` and
        ``intercept = (Sy - coeff*Sx) / n``, where ``S`` are raw sums.

        Args:
            x: Training values.
            y: Target values, same length as ``x``.

        Returns:
            SimpleLinearRegression: ``self``.

        Raises:
            SizeMismatchError: If ``x`` and ``y`` differ in length.
            InsufficientDataError: If fewer than two pairs are given.

        Note:
            Constant ``x`` makes the slope denominator exactly zero. The fit
            then stores ``nan`` for both parameters and emits a
            ``RuntimeWarning`` instead of raising.
        """
        xa = as_float_array(x)
        ya = as_float_array(y)
        check_same_size(xa, ya)
        check_min_size(xa, 2, "fit")

        size = float(xa.size)
        sx = float(np.sum(xa))
        sy = float(np.sum(ya))
        sxx = float(np.dot(xa, xa))
        sxy = float(np.dot(xa, ya))
        num = size * sxy - sx * sy
        denom = size * sxx - sx * sx

        if denom != 0:
            coeff = num / denom
        else:
            coeff = math.nan
            warnings.warn(
                "Training values have zero spread; slope is undefined (nan).",
                RuntimeWarning,
                stacklevel=2,
            )
        intercept = (sy - coeff * sx) / size

        self._params = FittedParams(coeff=float(coeff), intercept=float(intercept))
        logger.debug(
            "Fitted linear model on %d points: coeff=%.6g intercept=%.6g",
            xa.size,
            coeff,
            intercept,
        )
        return self

    def predict(self, x: ArrayLike):
        """Return ``coeff * x + intercept`` for each element of ``x``."""
        params = self.fitted_params()
        xa = as_float_array(x)
        return like(x, params.coeff * xa + params.intercept)

    def score(self, x: ArrayLike, y: ArrayLike) -> float:
        """Coefficient of determination ``1 - SSres / SStot`` of the prediction.

        ``SStot`` is the spread of ``y`` around its own mean, so a constant
        ``y`` returns ``nan``.

        Raises:
            ModelNotFittedError: If the model has not been fitted.
            SizeMismatchError: If ``x`` and ``y`` differ in length.
            InsufficientDataError: If the inputs are empty.
        """
        self.fitted_params()
        xa = as_float_array(x)
        ya = as_float_array(y)
        check_same_size(xa, ya)
        check_not_empty(xa, "score")

        res = ya - self.predict(xa)
        ssres = float(np.dot(res, res))
        y_centered = ya - np.mean(ya)
        sstot = float(np.dot(y_centered, y_centered))
        if sstot <= 0:
            return math.nan
        return 1.0 - ssres / sstot
