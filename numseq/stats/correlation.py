"""Linear and rank correlation, and the ranking helper they share."""

from __future__ import annotations

import math

import numpy as np

from .._sequence import (
    ArrayLike,
    as_array,
    as_float_array,
    check_not_empty,
    check_same_size,
)


def rankdata(x: ArrayLike) -> np.ndarray:
    """Return the original positions of ``x`` in ascending-value order.

    The sort is stable, so equal values keep their input order. The result is
    a permutation of ``0..n-1`` (an argsort), not tie-averaged ranks, and
    ``x[rankdata(x)]`` is sorted ascending.

    Args:
        x: Numeric sequence; may be empty.

    Returns:
        numpy.ndarray: Integer positions, same length as ``x``.
    """
    arr = as_array(x)
    return np.argsort(arr, kind="stable").astype(np.int64)


def pearsonr(x: ArrayLike, y: ArrayLike) -> float:
    """Pearson product-moment correlation coefficient.

    Computed as ``sum(xc * yc) / (||xc|| * ||yc||)`` on the centered inputs
    and clamped to ``[-1, 1]``.

    Args:
        x: Numeric sequence.
        y: Numeric sequence of the same length as ``x``.

    Returns:
        float: Correlation in ``[-1, 1]``, or ``nan`` when either input has
        zero spread.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If the inputs are empty.
    """
    xa = as_float_array(x)
    ya = as_float_array(y)
    check_same_size(xa, ya)
    check_not_empty(xa, "pearsonr")

    xc = xa - np.mean(xa)
    yc = ya - np.mean(ya)
    sxx = float(np.dot(xc, xc))
    syy = float(np.dot(yc, yc))
    sxy = float(np.dot(xc, yc))

    denom = math.sqrt(sxx) * math.sqrt(syy)
    if denom <= 0:
        return math.nan
    r = sxy / denom
    return max(min(r, 1.0), -1.0)


def spearmanr(x: ArrayLike, y: ArrayLike) -> float:
    """Rank correlation: :func:`pearsonr` of the two :func:`rankdata` results.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If the inputs are empty.
    """
    xa = as_array(x)
    ya = as_array(y)
    check_same_size(xa, ya)
    check_not_empty(xa, "spearmanr")
    return pearsonr(rankdata(xa), rankdata(ya))
