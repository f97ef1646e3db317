"""Render one-feature fits: data scatter with the fitted curve."""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np

from .._sequence import ArrayLike, as_float_array, check_not_empty, check_same_size
from ..config import PROBABILITY_THRESHOLD
from ..linear_model import SimpleLinearRegression, SimpleLogisticRegression
from .style import COLORS, STYLE, apply_rcparams, clean_axis, save_figure


def _fit_grid(xa: np.ndarray, n_points: int = 200) -> np.ndarray:
    lo, hi = float(np.min(xa)), float(np.max(xa))
    if lo == hi:
        lo, hi = lo - 0.5, hi + 0.5
    return np.linspace(lo, hi, n_points)


def _prepare(x: ArrayLike, y: ArrayLike):
    xa = as_float_array(x)
    ya = as_float_array(y)
    check_same_size(xa, ya)
    check_not_empty(xa, "plotting")
    return xa, ya


def plot_linear_fit(
    x: ArrayLike,
    y: ArrayLike,
    model: SimpleLinearRegression,
    output_dir: str = "output",
    filename: str = "linear_fit.png",
) -> str:
    """Plot the data and the fitted least-squares line.

    Args:
        x: Independent values.
        y: Dependent values, same length as ``x``.
        model (SimpleLinearRegression): Fitted estimator.
        output_dir (str, optional): Directory for the PNG. Defaults to
            ``"output"``.
        filename (str, optional): PNG file name.

    Returns:
        str: Path of the saved PNG.

    Raises:
        ModelNotFittedError: If ``model`` has not been fitted.
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If ``x`` is empty.
    """
    params = model.fitted_params()
    xa, ya = _prepare(x, y)

    apply_rcparams()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(
        xa, ya, color=COLORS["points"], alpha=STYLE.ALPHA_POINTS, label="data"
    )
    grid = _fit_grid(xa)
    ax.plot(
        grid,
        model.predict(grid),
        color=COLORS["fit"],
        label=f"y = {params.coeff:.4g} x + {params.intercept:.4g}",
    )
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"Linear fit ($R^2$ = {model.score(xa, ya):.4f})")
    clean_axis(ax)
    ax.legend(loc="best")

    return save_figure(fig, os.path.join(output_dir, filename))


def plot_logistic_fit(
    x: ArrayLike,
    y: ArrayLike,
    model: SimpleLogisticRegression,
    output_dir: str = "output",
    filename: str = "logistic_fit.png",
) -> str:
    """Plot binary labels, the fitted probability curve and the 0.5 cut.

    Raises:
        ModelNotFittedError: If ``model`` has not been fitted.
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If ``x`` is empty.
    """
    model.fitted_params()
    xa, ya = _prepare(x, y)

    apply_rcparams()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(
        xa, ya, color=COLORS["points"], alpha=STYLE.ALPHA_POINTS, label="labels"
    )
    grid = _fit_grid(xa)
    ax.plot(grid, model.predict_proba(grid), color=COLORS["fit"], label="P(y = 1)")
    ax.axhline(
        PROBABILITY_THRESHOLD,
        color=COLORS["threshold"],
        linestyle="--",
        linewidth=STYLE.LINEWIDTH_THIN,
        label="decision threshold",
    )
    ax.set_ylim(-0.05, 1.05)
    ax.set_xlabel("x")
    ax.set_ylabel("probability")
    ax.set_title(f"Logistic fit (accuracy = {model.score(xa, ya):.3f})")
    clean_axis(ax)
    ax.legend(loc="best")

    return save_figure(fig, os.path.join(output_dir, filename))
