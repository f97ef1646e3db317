import math

import numpy as np
import pytest

from numseq.errors import SizeMismatchError
from numseq.reporting import (
    describe,
    describe_table,
    fit_summary,
    is_binary,
    summary_frame,
)


def test_describe_values():
    out = describe([1, 2, 3, 4])
    assert out["n"] == 4
    assert math.isclose(out["mean"], 2.5)
    assert math.isclose(out["std"], math.sqrt(5 / 3))
    assert math.isclose(out["median"], 2.5)
    assert math.isclose(out["mad"], 1.0)
    assert math.isclose(out["skewness"], 0.0, abs_tol=1e-12)
    assert math.isclose(out["gmean"], 24 ** 0.25)


def test_describe_reports_unavailable_statistics_as_nan():
    out = describe([0, 1, 2])
    assert math.isnan(out["gmean"])
    assert math.isnan(out["hmean"])
    assert math.isclose(out["mean"], 1.0)

    single = describe([5])
    assert single["mean"] == 5.0
    assert math.isnan(single["std"])
    assert math.isnan(single["kurtosis"])


def test_describe_table_shape():
    table = describe_table({"a": [1, 2, 3], "b": [4, 5, 7]})
    assert list(table.columns) == ["a", "b"]
    assert "mean" in table.index
    assert math.isclose(table.loc["mean", "b"], 16 / 3)


def test_is_binary():
    assert is_binary([0, 1, 1, 0])
    assert is_binary(np.array([1.0, 0.0]))
    assert not is_binary([0, 0])
    assert not is_binary([0, 1, 2])
    assert not is_binary([])


def test_fit_summary_continuous_target():
    summary = fit_summary([1, 2, 3, 4], [2, 4, 6, 8])
    assert math.isclose(summary["linear_coeff"], 2.0)
    assert math.isclose(summary["r2"], 1.0)
    assert math.isclose(summary["pearson_r"], 1.0)
    assert math.isclose(summary["spearman_r"], 1.0)
    assert "accuracy" not in summary
    assert set(summary["models"]) == {"linear"}


def test_fit_summary_binary_target():
    summary = fit_summary([-5, -4, -3, 3, 4, 5], [0, 0, 0, 1, 1, 1])
    assert summary["accuracy"] == 1.0
    assert summary["logistic_converged"] is True
    assert summary["logistic_coeff"] > 0
    assert set(summary["models"]) == {"linear", "logistic"}

    frame = summary_frame(summary)
    assert len(frame) == 1
    assert "models" not in frame.columns
    assert frame.loc[0, "n"] == 6


def test_fit_summary_size_mismatch():
    with pytest.raises(SizeMismatchError):
        fit_summary([1, 2, 3], [1, 2])
