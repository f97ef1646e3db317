import os

import pandas as pd

import main


def test_main_writes_outputs_for_binary_target(tmp_path):
    csv_path = tmp_path / "data.csv"
    pd.DataFrame(
        {"dose": [-5, -4, -3, 3, 4, 5], "response": [0, 0, 0, 1, 1, 1]}
    ).to_csv(csv_path, index=False)
    outdir = tmp_path / "out"

    code = main.main(
        [
            "--input",
            str(csv_path),
            "--x-col",
            "dose",
            "--y-col",
            "response",
            "--outdir",
            str(outdir),
        ]
    )

    assert code == 0
    for name in ("describe.csv", "summary.csv", "linear_fit.png", "logistic_fit.png"):
        assert os.path.exists(outdir / name)
    summary = pd.read_csv(outdir / "summary.csv")
    assert summary.loc[0, "accuracy"] == 1.0


def test_main_rejects_too_few_rows(tmp_path):
    csv_path = tmp_path / "tiny.csv"
    pd.DataFrame({"x": [1.0, None], "y": [2.0, 3.0]}).to_csv(csv_path, index=False)
    code = main.main(
        ["--input", str(csv_path), "--x-col", "x", "--y-col", "y", "--no-plots"]
    )
    assert code == 1
