"""
A Python package for elementary math, statistics and one-feature regression
over flat numeric sequences.

Every function accepts lists, tuples, numpy arrays and pandas Series of any
integer or floating dtype. Element-wise results keep the pandas container
when given a Series and are numpy arrays otherwise.

Modules:
    - maths: Integer arithmetic, reductions, element-wise maps and
      near-duplicate elimination.
    - stats: Means, dispersion, shape, robust statistics, z-scores,
      correlation, ranking and accuracy.
    - linear_model: Simple linear (least squares) and logistic (gradient
      descent) regression estimators.
    - reporting: Descriptive summaries and fit diagnostics as tables.
    - io: CSV loading for paired columns.
    - plotting: Figures of fitted models.
    - errors: Exception taxonomy.
"""

__version__ = "1.0.0"

from . import maths
from .errors import (
    ConvergenceWarning,
    DegenerateDivisionError,
    HyperparameterError,
    InsufficientDataError,
    InvalidValueError,
    ModelNotFittedError,
    NumseqError,
    SizeMismatchError,
)
from .linear_model import SimpleLinearRegression, SimpleLogisticRegression
from .stats import (
    accuracy_score,
    center,
    gmean,
    gstd,
    gzscore,
    hmean,
    hstd,
    kurtosis,
    mean,
    median,
    median_abs_deviation,
    pearsonr,
    pmean,
    rankdata,
    skewness,
    spearmanr,
    std,
    var,
    zscore,
)

__all__ = [
    "maths",
    # Statistics
    "mean",
    "hmean",
    "gmean",
    "pmean",
    "var",
    "std",
    "hstd",
    "gstd",
    "skewness",
    "kurtosis",
    "median",
    "median_abs_deviation",
    "center",
    "zscore",
    "gzscore",
    "pearsonr",
    "spearmanr",
    "rankdata",
    "accuracy_score",
    # Estimators
    "SimpleLinearRegression",
    "SimpleLogisticRegression",
    # Errors
    "NumseqError",
    "SizeMismatchError",
    "InsufficientDataError",
    "InvalidValueError",
    "DegenerateDivisionError",
    "HyperparameterError",
    "ModelNotFittedError",
    "ConvergenceWarning",
]
