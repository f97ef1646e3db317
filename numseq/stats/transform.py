"""Element-wise standardizing transforms: centering and z-scores."""

from __future__ import annotations

import numpy as np

from .. import maths
from .._sequence import ArrayLike, as_float_array, like
from .dispersion import std
from .summary import mean


def center(x: ArrayLike):
    """Subtract the mean from every element.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_float_array(x)
    return like(x, arr - mean(arr))


def zscore(x: ArrayLike, ddof: int = 0):
    """Standard scores ``(x - mean(x)) / std(x, ddof)``.

    A constant sequence has zero spread and yields ``nan`` elements.

    Raises:
        InsufficientDataError: If ``x`` has fewer than two values.
        DegenerateDivisionError: If ``n - ddof`` is zero.
    """
    arr = as_float_array(x)
    s = std(arr, ddof)
    centered = arr - mean(arr)
    with np.errstate(divide="ignore", invalid="ignore"):
        z = centered / s
    return like(x, z)


def gzscore(x: ArrayLike, ddof: int = 0):
    """Geometric standard scores, :func:`zscore` of ``log(x)``.

    Raises:
        InvalidValueError: If any element is zero or negative.
    """
    return zscore(maths.log(x), ddof)
