"""Dispersion and shape statistics.

Variance-like functions take ``ddof``, the degrees-of-freedom offset
subtracted from the sample size: ``0`` for population statistics, ``1`` for
the sample-corrected estimate.

Sums of powered deviations are formed directly from the centered values;
no compensated summation is attempted.
"""

from __future__ import annotations

import math

import numpy as np

from .. import maths
from .._sequence import ArrayLike, as_float_array, check_min_size
from ..errors import DegenerateDivisionError, InvalidValueError
from .summary import mean


def _check_ddof(ddof) -> int:
    if int(ddof) != ddof or ddof < 0:
        raise InvalidValueError(f"ddof must be a non-negative integer; got {ddof!r}.")
    return int(ddof)


def _deviations(arr: np.ndarray) -> np.ndarray:
    return arr - mean(arr)


def var(x: ArrayLike, ddof: int = 0) -> float:
    """Variance ``sum((x - mean) ** 2) / (n - ddof)``.

    Args:
        x: Numeric sequence with at least two values.
        ddof (int, optional): Degrees-of-freedom offset. Defaults to ``0``.

    Returns:
        float: Variance of ``x``; ``nan`` when ``ddof`` exceeds ``n``.

    Raises:
        InsufficientDataError: If ``x`` has fewer than two values.
        DegenerateDivisionError: If ``n - ddof`` is zero.
    """
    ddof = _check_ddof(ddof)
    arr = as_float_array(x)
    check_min_size(arr, 2, "var")
    denom = arr.size - ddof
    if denom == 0:
        raise DegenerateDivisionError("Size minus degree of freedom is 0.")
    if denom < 0:
        return math.nan
    centered = _deviations(arr)
    sxx = float(np.dot(centered, centered))
    return sxx / denom


def std(x: ArrayLike, ddof: int = 0) -> float:
    """Standard deviation, the square root of :func:`var`."""
    return math.sqrt(var(x, ddof))


def hstd(x: ArrayLike, ddof: int = 0) -> float:
    """Harmonic standard deviation ``1 / std(1 / x)``.

    Raises:
        InvalidValueError: If any element is zero.
    """
    s = std(maths.reciprocal(x), ddof)
    with np.errstate(divide="ignore"):
        return float(np.divide(1.0, s))


def gstd(x: ArrayLike, ddof: int = 0) -> float:
    """Geometric standard deviation ``exp(std(log(x)))``.

    Raises:
        InvalidValueError: If any element is zero or negative.
    """
    return math.exp(std(maths.log(x), ddof))


def skewness(x: ArrayLike) -> float:
    """Moment skewness ``sum(c ** 3) * sqrt(n) / sum(c ** 2) ** 1.5``.

    ``c`` are the deviations from the mean. Constant input returns ``nan``.

    Raises:
        InsufficientDataError: If ``x`` has fewer than two values.
    """
    arr = as_float_array(x)
    check_min_size(arr, 2, "skewness")
    centered = _deviations(arr)
    s2 = float(np.sum(centered**2))
    if s2 <= 0:
        return math.nan
    s3 = float(np.sum(centered**3))
    return s3 * math.sqrt(arr.size) / s2**1.5


def kurtosis(x: ArrayLike) -> float:
    """Moment kurtosis ``sum(c ** 4) * n / sum(c ** 2) ** 2``.

    This is the Pearson (non-excess) kurtosis, 3 for normal data. Constant
    input returns ``nan``.

    Raises:
        InsufficientDataError: If ``x`` has fewer than two values.
    """
    arr = as_float_array(x)
    check_min_size(arr, 2, "kurtosis")
    centered = _deviations(arr)
    s2 = float(np.sum(centered**2))
    if s2 <= 0:
        return math.nan
    s4 = float(np.sum(centered**4))
    return s4 * arr.size / s2**2
