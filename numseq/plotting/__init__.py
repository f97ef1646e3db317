"""
Plotting utilities for one-feature fits.

Modules:
    fit_plots:
        Scatter plots of the training data with the fitted linear model or
        the logistic probability curve.

    style:
        Shared rcParams, axis cleanup and PNG save helpers.

Design Principle:
    No fitting happens here. Functions receive already fitted estimators
    and only render them.
"""

from .fit_plots import plot_linear_fit, plot_logistic_fit
from .style import apply_rcparams

__all__ = ["plot_linear_fit", "plot_logistic_fit", "apply_rcparams"]
