"""Shared conversion and precondition helpers for flat numeric sequences.

Every public function funnels its inputs through these helpers, so the
accepted container types (lists, tuples, ranges, numpy arrays, pandas
Series) and the precondition messages are the same everywhere.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

from .errors import InsufficientDataError, InvalidValueError, SizeMismatchError

ArrayLike = Union[Sequence[float], np.ndarray, pd.Series]


def as_array(x: ArrayLike, dtype: Any = None) -> np.ndarray:
    """Return ``x`` as a 1-D numpy array without copying when possible.

    Args:
        x: Ordered numeric sequence.
        dtype: Optional target dtype; ``None`` keeps the inferred dtype.

    Returns:
        numpy.ndarray: One-dimensional view or copy of ``x``.

    Raises:
        InvalidValueError: If ``x`` is a scalar or has more than one axis, or
            holds non-numeric values.
    """
    if isinstance(x, pd.Series):
        arr = x.to_numpy(dtype=dtype)
    else:
        if not isinstance(x, np.ndarray) and not hasattr(x, "__len__"):
            # generators and other one-shot iterables
            x = list(x)
        arr = np.asarray(x, dtype=dtype)
    if arr.ndim != 1:
        raise InvalidValueError(
            f"Input must be a flat sequence; got an array with {arr.ndim} dimensions."
        )
    if arr.size and arr.dtype.kind not in "biuf":
        raise InvalidValueError(f"Input must be numeric; got dtype {arr.dtype}.")
    return arr


def as_float_array(x: ArrayLike) -> np.ndarray:
    """Return ``x`` promoted to a 1-D ``float64`` array."""
    return as_array(x, dtype=float)


def like(template: ArrayLike, values: np.ndarray):
    """Wrap ``values`` in the container family of ``template``.

    A :class:`pandas.Series` template yields a Series sharing its index and
    name; any other template yields the numpy array unchanged.
    """
    if isinstance(template, pd.Series):
        return pd.Series(values, index=template.index, name=template.name)
    return values


def check_not_empty(arr: np.ndarray, what: str) -> None:
    if arr.size == 0:
        raise InsufficientDataError(f"Input has not enough values for {what}.")


def check_min_size(arr: np.ndarray, min_size: int, what: str) -> None:
    if arr.size < min_size:
        raise InsufficientDataError(
            f"Input has not enough values for {what}: "
            f"found {arr.size}, minimum {min_size} required."
        )


def check_same_size(x: np.ndarray, y: np.ndarray) -> None:
    if x.size != y.size:
        raise SizeMismatchError(
            f"Inputs have not the same size: {x.size} != {y.size}."
        )
