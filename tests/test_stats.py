import math

import numpy as np
import pandas as pd
import pytest

from numseq.errors import (
    DegenerateDivisionError,
    InsufficientDataError,
    InvalidValueError,
)
from numseq.stats import (
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
    pmean,
    skewness,
    std,
    var,
    zscore,
)


def test_means():
    x = [1, 2, 4]
    assert math.isclose(mean(x), 7 / 3)
    assert math.isclose(hmean(x), 3 / 1.75)
    assert math.isclose(gmean(x), 2.0)
    assert math.isclose(pmean(x, 1), mean(x))
    assert math.isclose(pmean(x, -1), hmean(x))
    assert math.isclose(pmean(x, 0), gmean(x))
    assert math.isclose(pmean([1, 4], 2), math.sqrt(8.5))


def test_mean_failures():
    with pytest.raises(InsufficientDataError):
        mean([])
    with pytest.raises(InsufficientDataError):
        hmean([])
    with pytest.raises(InvalidValueError):
        hmean([1, 0])
    with pytest.raises(InvalidValueError):
        gmean([1, -2])
    with pytest.raises(InsufficientDataError):
        gmean([])
    with pytest.raises(InvalidValueError):
        pmean([1, 0], 2)


def test_var_and_std():
    assert math.isclose(var([1, 2, 3, 4]), 1.25)
    assert math.isclose(var([1, 2, 3, 4], ddof=1), 5 / 3)
    assert math.isclose(std([2, 4, 4, 4, 5, 5, 7, 9]), 2.0)
    small = np.array([1, 2, 3, 4], dtype=np.uint8)
    assert math.isclose(std(small, ddof=1), math.sqrt(5 / 3))


def test_var_failures_and_nan_policy():
    with pytest.raises(InsufficientDataError):
        var([1])
    with pytest.raises(DegenerateDivisionError):
        var([1, 2], ddof=2)
    assert math.isnan(var([1, 2], ddof=3))
    with pytest.raises(InsufficientDataError):
        std([])


def test_harmonic_and_geometric_std():
    x = [1.0, 2.0, 4.0]
    assert math.isclose(hstd(x), 1.0 / np.std([1.0, 0.5, 0.25]))
    assert math.isclose(gstd(x, ddof=1), math.exp(np.std(np.log(x), ddof=1)))
    with pytest.raises(InvalidValueError):
        hstd([1.0, 0.0])
    with pytest.raises(InvalidValueError):
        gstd([1.0, -1.0])


def test_shape_statistics():
    assert math.isclose(skewness([1, 2, 3]), 0.0, abs_tol=1e-12)
    assert math.isclose(kurtosis([1, 2, 3]), 1.5)
    assert skewness([1, 2, 10]) > 0
    assert math.isnan(skewness([5, 5, 5]))
    assert math.isnan(kurtosis([5, 5, 5]))
    with pytest.raises(InsufficientDataError):
        skewness([1])
    with pytest.raises(InsufficientDataError):
        kurtosis([])


def test_median_and_mad():
    assert median([1, 3, 2, 4]) == 2.5
    assert median([1, 3, 2]) == 2
    x = [1, 1, 2, 2, 4, 6, 9]
    assert median_abs_deviation(x) == 1.0
    assert math.isclose(median_abs_deviation(x, is_rescaled=True), 1.4826)
    with pytest.raises(InsufficientDataError):
        median([])
    with pytest.raises(InsufficientDataError):
        median_abs_deviation([])


def test_inputs_are_not_mutated():
    x = [3, 1, 2]
    arr = np.array([3.0, 1.0, 2.0])
    median(x)
    median(arr)
    center(arr)
    assert x == [3, 1, 2]
    np.testing.assert_array_equal(arr, [3.0, 1.0, 2.0])


def test_center_has_zero_mean_and_keeps_series_index():
    series = pd.Series([1.0, 2.0, 6.0], index=list("abc"))
    centered = center(series)
    assert isinstance(centered, pd.Series)
    assert list(centered.index) == ["a", "b", "c"]
    assert math.isclose(mean(centered), 0.0, abs_tol=1e-12)


@pytest.mark.parametrize("ddof", [0, 1])
def test_zscore_is_standardized(ddof):
    rng = np.random.default_rng(7)
    x = rng.normal(loc=10.0, scale=3.0, size=50)
    z = zscore(x, ddof=ddof)
    assert math.isclose(mean(z), 0.0, abs_tol=1e-12)
    assert math.isclose(std(z, ddof=ddof), 1.0)


def test_zscore_failures_and_constant_input():
    with pytest.raises(InsufficientDataError):
        zscore([1])
    with pytest.raises(DegenerateDivisionError):
        zscore([1, 2], ddof=2)
    assert np.all(np.isnan(zscore([3, 3, 3])))


def test_gzscore_matches_zscore_of_logs():
    np.testing.assert_allclose(
        gzscore([1, 10, 100]), zscore([0, 1, 2]), atol=1e-12
    )
    with pytest.raises(InvalidValueError):
        gzscore([1, -1])
