"""
One-feature supervised estimators.

Modules:
    linear:
        ``SimpleLinearRegression``, closed-form ordinary least squares with an
        R^2 ``score``.

    logistic:
        ``SimpleLogisticRegression``, binary classification by batch
        gradient descent with an accuracy ``score``.

Both estimators start unfit and raise ``ModelNotFittedError`` from
``predict``/``score`` until ``fit`` has succeeded.
"""

from .base import FittedParams
from .linear import SimpleLinearRegression
from .logistic import SimpleLogisticRegression

__all__ = ["FittedParams", "SimpleLinearRegression", "SimpleLogisticRegression"]
