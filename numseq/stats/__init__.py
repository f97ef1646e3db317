"""
Statistics built on numseq.maths.

All functions accept any flat numeric sequence (list, tuple, numpy array,
pandas Series), promote it to float internally and return Python floats for
scalar statistics.

Modules:
    summary:
        Arithmetic, harmonic, geometric and power means; median and median
        absolute deviation.

    dispersion:
        Variance and standard deviation (plus harmonic and geometric
        variants), skewness and kurtosis, with a ``ddof`` offset.

    transform:
        Centering and z-scores (arithmetic and geometric).

    correlation:
        Pearson and Spearman correlation and the ``rankdata`` helper.

    metrics:
        Classification accuracy.

Design Principle:
    Undefined results (zero-spread correlation, constant-input shape
    statistics) are returned as ``nan``. Invalid inputs raise the errors in
    :mod:`numseq.errors` before any computation.
"""

from .correlation import pearsonr, rankdata, spearmanr
from .dispersion import gstd, hstd, kurtosis, skewness, std, var
from .metrics import accuracy_score
from .summary import gmean, hmean, mean, median, median_abs_deviation, pmean
from .transform import center, gzscore, zscore

__all__ = [
    "mean",
    "hmean",
    "gmean",
    "pmean",
    "median",
    "median_abs_deviation",
    "var",
    "std",
    "hstd",
    "gstd",
    "skewness",
    "kurtosis",
    "center",
    "zscore",
    "gzscore",
    "pearsonr",
    "spearmanr",
    "rankdata",
    "accuracy_score",
]
