"""Classification metrics."""

from __future__ import annotations

import numpy as np

from .._sequence import ArrayLike, as_array, check_not_empty, check_same_size


def accuracy_score(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Fraction of positions where ``y_pred`` equals ``y_true`` exactly.

    Raises:
        SizeMismatchError: If the label sequences differ in length.
        InsufficientDataError: If they are empty.
    """
    t = as_array(y_true)
    p = as_array(y_pred)
    check_same_size(t, p)
    check_not_empty(t, "accuracy_score")
    return float(np.mean(t == p))
