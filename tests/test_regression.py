import math

import numpy as np
import pandas as pd
import pytest

from numseq.errors import (
    InsufficientDataError,
    ModelNotFittedError,
    SizeMismatchError,
)
from numseq.linear_model import FittedParams, SimpleLinearRegression


def test_fit_recovers_exact_line():
    model = SimpleLinearRegression()
    assert model.fit([1, 2, 3, 4], [2, 4, 6, 8]) is model
    assert math.isclose(model.coeff, 2.0)
    assert math.isclose(model.intercept, 0.0, abs_tol=1e-12)
    assert math.isclose(model.score([1, 2, 3, 4], [2, 4, 6, 8]), 1.0)
    assert model.params == FittedParams(coeff=model.coeff, intercept=model.intercept)


def test_fit_matches_polyfit_on_noisy_data():
    rng = np.random.default_rng(11)
    x = np.linspace(0.0, 10.0, 40)
    y = 3.0 * x + 1.0 + rng.normal(scale=0.5, size=x.size)
    model = SimpleLinearRegression().fit(x, y)
    m, b = np.polyfit(x, y, 1)
    assert math.isclose(model.coeff, m, rel_tol=1e-9)
    assert math.isclose(model.intercept, b, rel_tol=1e-9)


def test_score_known_r2():
    x = [1, 2, 3, 4]
    y = [1, 3, 2, 4]
    model = SimpleLinearRegression().fit(x, y)
    assert math.isclose(model.coeff, 0.8)
    assert math.isclose(model.intercept, 0.5)
    assert math.isclose(model.score(x, y), 0.64)


def test_fit_preconditions():
    model = SimpleLinearRegression()
    with pytest.raises(InsufficientDataError):
        model.fit([1], [1])
    with pytest.raises(SizeMismatchError):
        model.fit([1, 2, 3], [1, 2])
    assert not model.is_fitted


def test_unfit_model_raises():
    model = SimpleLinearRegression()
    assert repr(model) == "SimpleLinearRegression(unfit)"
    with pytest.raises(ModelNotFittedError):
        model.predict([1, 2])
    with pytest.raises(ModelNotFittedError):
        model.score([1, 2], [1, 2])
    with pytest.raises(ModelNotFittedError):
        _ = model.coeff


def test_failed_refit_keeps_previous_parameters():
    model = SimpleLinearRegression().fit([1, 2, 3, 4], [2, 4, 6, 8])
    with pytest.raises(InsufficientDataError):
        model.fit([1], [2])
    assert math.isclose(model.coeff, 2.0)


def test_constant_x_gives_nan_slope_with_warning():
    with pytest.warns(RuntimeWarning, match="zero spread"):
        model = SimpleLinearRegression().fit([2, 2, 2], [1, 2, 3])
    assert math.isnan(model.coeff)
    assert math.isnan(model.intercept)


def test_score_on_constant_target_is_nan():
    model = SimpleLinearRegression().fit([1, 2, 3], [5, 5, 5])
    assert math.isclose(model.coeff, 0.0, abs_tol=1e-12)
    assert math.isnan(model.score([1, 2, 3], [5, 5, 5]))


def test_score_preconditions():
    model = SimpleLinearRegression().fit([1, 2, 3], [1, 2, 3])
    with pytest.raises(SizeMismatchError):
        model.score([1, 2], [1])
    with pytest.raises(InsufficientDataError):
        model.score([], [])


def test_predict_keeps_series_container():
    model = SimpleLinearRegression().fit([0, 1, 2], [1, 3, 5])
    x = pd.Series([3.0, 4.0], index=[10, 11])
    pred = model.predict(x)
    assert isinstance(pred, pd.Series)
    assert list(pred.index) == [10, 11]
    np.testing.assert_allclose(pred.to_numpy(), [7.0, 9.0])
