"""Define the exception and warning types raised across numseq.

Input-precondition errors subclass :class:`ValueError` as well as
:class:`NumseqError`, so callers that already guard numeric code with
``except ValueError`` keep working.

Returned NaN values are not errors: degenerate correlations, R^2 on a
constant target and similar undefined results are reported as ``nan``.
"""

from __future__ import annotations


class NumseqError(Exception):
    """Base class for every error raised by numseq."""


class SizeMismatchError(NumseqError, ValueError):
    """Two related sequences differ in length."""


class InsufficientDataError(NumseqError, ValueError):
    """A sequence is empty or too short for the requested statistic."""


class InvalidValueError(NumseqError, ValueError):
    """A domain precondition is violated (zero, non-positive, wrong shape)."""


class DegenerateDivisionError(NumseqError, ZeroDivisionError):
    """A structurally required denominator is zero for otherwise valid input."""


class HyperparameterError(NumseqError, ValueError):
    """An estimator was configured with an out-of-range parameter."""


class ModelNotFittedError(NumseqError, RuntimeError):
    """An estimator was used for prediction before a successful ``fit``."""


class ConvergenceWarning(UserWarning):
    """Gradient descent stopped at its iteration cap without converging."""
