"""Location statistics: arithmetic, harmonic, geometric and power means,
median and median absolute deviation.
"""

from __future__ import annotations

import numpy as np

from .. import maths
from .._sequence import ArrayLike, as_float_array, check_not_empty
from ..config import MAD_NORMAL_SCALE
from ..errors import InvalidValueError


def mean(x: ArrayLike) -> float:
    """Arithmetic mean.

    Args:
        x: Numeric sequence; promoted to float.

    Returns:
        float: ``sum(x) / n``.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_float_array(x)
    check_not_empty(arr, "mean")
    return float(np.sum(arr) / arr.size)


def hmean(x: ArrayLike) -> float:
    """Harmonic mean ``n / sum(1 / x)``.

    Raises:
        InsufficientDataError: If ``x`` is empty.
        InvalidValueError: If any element is zero.
    """
    arr = as_float_array(x)
    check_not_empty(arr, "hmean")
    recip = maths.reciprocal(arr)
    return float(arr.size / np.sum(recip))


def gmean(x: ArrayLike) -> float:
    """Geometric mean ``prod(x) ** (1 / n)``.

    The product is formed directly, so very long or large inputs can
    overflow to ``inf``.

    Raises:
        InsufficientDataError: If ``x`` is empty.
        InvalidValueError: If any element is zero or negative.
    """
    arr = as_float_array(x)
    check_not_empty(arr, "gmean")
    if not maths.is_positive(arr):
        raise InvalidValueError("Input must be strictly positive for gmean.")
    return float(maths.prod(arr) ** (1.0 / arr.size))


def pmean(x: ArrayLike, p: float) -> float:
    """Power (generalized) mean ``(sum(x ** p) / n) ** (1 / p)``.

    ``p == 0`` is the limiting case and returns :func:`gmean`.

    Args:
        x: Strictly positive numeric sequence.
        p (float): Exponent of the mean; ``1`` is the arithmetic mean and
            ``-1`` the harmonic mean.

    Raises:
        InsufficientDataError: If ``x`` is empty.
        InvalidValueError: If any element is zero or negative.
    """
    arr = as_float_array(x)
    check_not_empty(arr, "pmean")
    if not maths.is_positive(arr):
        raise InvalidValueError("Input must be strictly positive for pmean.")
    p = float(p)
    if p == 0:
        return gmean(arr)
    powered = maths.power(arr, p)
    return float((np.sum(powered) / arr.size) ** (1.0 / p))


def median(x: ArrayLike) -> float:
    """Median of a sorted copy; the mean of the two middle values for even n.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_float_array(x)
    check_not_empty(arr, "median")
    x_sorted = np.sort(arr)
    size = x_sorted.size
    if size % 2 == 0:
        return float((x_sorted[size // 2 - 1] + x_sorted[size // 2]) / 2)
    return float(x_sorted[size // 2])


def median_abs_deviation(x: ArrayLike, is_rescaled: bool = False) -> float:
    """Median absolute deviation ``median(|x - median(x)|)``.

    Args:
        x: Non-empty numeric sequence.
        is_rescaled (bool, optional): If ``True``, multiply by ``1.4826`` so
            the result estimates the standard deviation of normal data.
            Defaults to ``False``.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_float_array(x)
    med = median(arr)
    mad = median(np.abs(arr - med))
    if is_rescaled:
        mad *= MAD_NORMAL_SCALE
    return float(mad)
