"""Summarize sequences and one-feature fits as plain dicts and DataFrames.

This module is the reporting boundary between the numeric core and tabular
output: it turns statistics and fitted estimators into records that can be
printed or written to CSV.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Mapping

import numpy as np
import pandas as pd

from . import maths
from ._sequence import ArrayLike, as_float_array
from .errors import NumseqError
from .linear_model import SimpleLinearRegression, SimpleLogisticRegression
from .stats import (
    gmean,
    hmean,
    kurtosis,
    mean,
    median,
    median_abs_deviation,
    pearsonr,
    skewness,
    spearmanr,
    std,
)

logger = logging.getLogger(__name__)


def _safe(func: Callable[[], float], name: str) -> float:
    """Evaluate one statistic, reporting precondition failures as ``nan``."""
    try:
        return float(func())
    except NumseqError as exc:
        logger.debug("Statistic '%s' unavailable: %s", name, exc)
        return math.nan


def describe(x: ArrayLike, ddof: int = 1) -> Dict[str, float]:
    """Compute a descriptive summary of one sequence.

    Args:
        x: Numeric sequence.
        ddof (int, optional): Degrees-of-freedom offset for ``std``.
            Defaults to ``1`` (sample statistics).

    Returns:
        dict[str, float]: Keys ``n``, ``mean``, ``std``, ``median``, ``mad``,
        ``skewness``, ``kurtosis``, ``gmean`` and ``hmean``. Statistics whose
        preconditions fail on ``x`` (too few values, non-positive values for
        the geometric and harmonic means) are ``nan``.
    """
    arr = as_float_array(x)
    return {
        "n": float(arr.size),
        "mean": _safe(lambda: mean(arr), "mean"),
        "std": _safe(lambda: std(arr, ddof), "std"),
        "median": _safe(lambda: median(arr), "median"),
        "mad": _safe(lambda: median_abs_deviation(arr), "mad"),
        "skewness": _safe(lambda: skewness(arr), "skewness"),
        "kurtosis": _safe(lambda: kurtosis(arr), "kurtosis"),
        "gmean": _safe(lambda: gmean(arr), "gmean"),
        "hmean": _safe(lambda: hmean(arr), "hmean"),
    }


def describe_table(columns: Mapping[str, ArrayLike], ddof: int = 1) -> pd.DataFrame:
    """Apply :func:`describe` to several named sequences.

    Returns:
        pandas.DataFrame: One column per input name, one row per statistic.
    """
    return pd.DataFrame(
        {name: describe(values, ddof) for name, values in columns.items()}
    )


def is_binary(y: ArrayLike) -> bool:
    """Return ``True`` if ``y`` holds exactly the two labels 0 and 1."""
    arr = as_float_array(y)
    if arr.size == 0:
        return False
    classes = maths.approx_set(arr)
    return classes.size == 2 and bool(np.all(np.isin(classes, (0, 1))))


def fit_summary(
    x: ArrayLike,
    y: ArrayLike,
    logistic: SimpleLogisticRegression | None = None,
) -> Dict[str, object]:
    """Fit the one-feature models and collect their diagnostics.

    A :class:`SimpleLinearRegression` is always fitted. When ``y`` is binary
    a :class:`SimpleLogisticRegression` is fitted as well (``logistic`` may
    supply one with custom hyperparameters).

    Args:
        x: Training values.
        y: Target values, same length as ``x``.
        logistic: Optional unfitted logistic estimator to use.

    Returns:
        dict: ``n``, ``linear_coeff``, ``linear_intercept``, ``r2``,
        ``pearson_r``, ``spearman_r`` and, for binary targets,
        ``logistic_coeff``, ``logistic_intercept``, ``accuracy``,
        ``logistic_n_iter`` and ``logistic_converged``. The fitted estimators
        are returned under ``models``.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If fewer than two pairs are given.
    """
    linear = SimpleLinearRegression().fit(x, y)
    summary: Dict[str, object] = {
        "n": int(as_float_array(x).size),
        "linear_coeff": linear.coeff,
        "linear_intercept": linear.intercept,
        "r2": linear.score(x, y),
        "pearson_r": pearsonr(x, y),
        "spearman_r": spearmanr(x, y),
    }
    models: Dict[str, object] = {"linear": linear}

    if is_binary(y):
        model = logistic if logistic is not None else SimpleLogisticRegression()
        model.fit(x, y)
        summary.update(
            {
                "logistic_coeff": model.coeff,
                "logistic_intercept": model.intercept,
                "accuracy": model.score(x, y),
                "logistic_n_iter": model.n_iter_,
                "logistic_converged": model.converged_,
            }
        )
        models["logistic"] = model

    logger.debug("Fitted %s on %d points", ", ".join(sorted(models)), summary["n"])
    summary["models"] = models
    return summary


def summary_frame(summary: Mapping[str, object]) -> pd.DataFrame:
    """Return a one-row DataFrame of the scalar entries of ``summary``."""
    row = {key: value for key, value in summary.items() if key != "models"}
    return pd.DataFrame([row])
