"""Elementary math over integers and flat numeric sequences.

This module is the bottom layer of numseq. It provides integer arithmetic,
positivity checks, reductions, element-wise maps and near-duplicate
elimination. All functions are pure: inputs are never modified and every
sequence result is a new container.

Container policy:
    Element-wise maps return a :class:`pandas.Series` (same index and name)
    for Series input and a :class:`numpy.ndarray` otherwise. Derived values
    are ``float64``; :func:`absolute` keeps the input dtype.
"""

from __future__ import annotations

import math
import numbers

import numpy as np

from ._sequence import ArrayLike, as_array, as_float_array, check_not_empty, like
from .config import DEFAULT_EPSILON
from .errors import InvalidValueError


def _as_int(value, name: str) -> int:
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise InvalidValueError(f"Parameter {name} must be an integer; got {value!r}.")


def gcd(m, n) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    Signs are ignored and ``gcd(0, 0) == 0``.

    Args:
        m (int): First integer.
        n (int): Second integer.

    Returns:
        int: Non-negative greatest common divisor of ``m`` and ``n``.

    Raises:
        InvalidValueError: If either argument is not integral.
    """
    m = abs(_as_int(m, "m"))
    n = abs(_as_int(n, "n"))
    if m > n:
        m, n = n, m
    while n != 0:
        m, n = n, m % n
    return m


def factorial(n) -> int:
    """Factorial of ``|n|`` as an iterative product; ``factorial(0) == 1``."""
    n = abs(_as_int(n, "n"))
    f = 1
    for c in range(1, n + 1):
        f *= c
    return f


def is_positive(x: ArrayLike) -> bool:
    """Return ``True`` if every element is strictly positive.

    An empty sequence is vacuously positive.
    """
    arr = as_array(x)
    return bool(np.all(arr > 0))


def prod(x: ArrayLike):
    """Product of all elements.

    Integer input is reduced with Python integers, so the result cannot
    wrap around like a fixed-width numpy product.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_array(x)
    check_not_empty(arr, "prod")
    return math.prod(arr.tolist())


def absolute(x: ArrayLike):
    """Element-wise magnitude, keeping the input dtype."""
    arr = as_array(x)
    return like(x, np.abs(arr))


def reciprocal(x: ArrayLike):
    """Element-wise ``1 / x`` as floats.

    Raises:
        InvalidValueError: If any element is exactly zero.
    """
    arr = as_float_array(x)
    if np.any(arr == 0):
        raise InvalidValueError("Input must not contain zero for reciprocal.")
    return like(x, 1.0 / arr)


def linear(x: ArrayLike, a: float, b: float):
    """Element-wise affine map ``a * x + b``."""
    arr = as_float_array(x)
    return like(x, float(a) * arr + float(b))


def power(x: ArrayLike, exponent: float):
    """Element-wise ``x ** exponent`` in floating point.

    Negative bases with fractional exponents produce NaN, and zero raised to
    a negative exponent produces ``inf``; neither is treated as an error.
    """
    arr = as_float_array(x)
    with np.errstate(invalid="ignore", divide="ignore"):
        out = np.power(arr, float(exponent))
    return like(x, out)


def log(x: ArrayLike):
    """Element-wise natural logarithm.

    Raises:
        InvalidValueError: If any element is zero or negative.
    """
    if not is_positive(x):
        raise InvalidValueError("Input must be strictly positive for log.")
    return like(x, np.log(as_float_array(x)))


def exp(x: ArrayLike):
    arr = as_float_array(x)
    with np.errstate(over="ignore"):
        out = np.exp(arr)
    return like(x, out)


def sigmoid(x: ArrayLike):
    """Element-wise logistic function ``1 / (1 + exp(-x))``.

    Large negative inputs overflow ``exp`` to ``inf`` and saturate to 0.
    """
    arr = as_float_array(x)
    with np.errstate(over="ignore"):
        out = 1.0 / (1.0 + np.exp(-arr))
    return like(x, out)


def approx_set(x: ArrayLike, epsilon: float = DEFAULT_EPSILON) -> np.ndarray:
    """Remove near-duplicates, keeping first occurrences in input order.

    The first element is always kept. Each later element is kept only if no
    already-kept value lies within ``epsilon`` of it (absolute distance).
    Cost is O(n * k) for ``k`` kept values, which is fine for the small label
    sets this is used on.

    Args:
        x: Non-empty numeric sequence.
        epsilon (float): Absolute tolerance. Defaults to ``1e-6``.

    Returns:
        numpy.ndarray: Kept values, same dtype as ``x``; may be shorter than
        ``x``.

    Raises:
        InsufficientDataError: If ``x`` is empty.
    """
    arr = as_array(x)
    check_not_empty(arr, "set")

    kept = [arr[0]]
    for value in arr[1:]:
        distances = np.abs(np.asarray(kept, dtype=float) - float(value))
        if not np.any(distances <= epsilon):
            kept.append(value)
    return np.asarray(kept, dtype=arr.dtype)
