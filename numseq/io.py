"""
Load paired numeric columns from CSV tables.
"""

# Columns are coerced to numbers with pandas; rows where either value is
# missing or non-numeric are dropped (and counted in the log) so the
# estimators always receive equal-length float sequences.

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def load_table(filepath):
    """
    Load a table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded DataFrame.
    """
    return pd.read_csv(filepath)


def extract_xy(df, x_col, y_col):
    """Extract two aligned numeric columns from a table.

    Both columns are coerced with ``pd.to_numeric(errors="coerce")``; any row
    where either value is missing afterwards is dropped.

    Args:
        df: Source :class:`pandas.DataFrame`.
        x_col (str): Name of the independent-variable column.
        y_col (str): Name of the dependent-variable column.

    Returns:
        tuple[pd.Series, pd.Series]: ``(x, y)`` float Series sharing a fresh
        ``RangeIndex``.

    Raises:
        KeyError: If either column is missing from ``df``.
    """
    missing = [col for col in (x_col, y_col) if col not in df.columns]
    if missing:
        raise KeyError(f"Columns not found in table: {missing}")

    working = pd.DataFrame(
        {
            x_col: pd.to_numeric(df[x_col], errors="coerce"),
            y_col: pd.to_numeric(df[y_col], errors="coerce"),
        }
    )
    n_before = len(working)
    working = working.dropna(subset=[x_col, y_col]).reset_index(drop=True)
    dropped = n_before - len(working)
    if dropped:
        logger.warning(
            "Dropped %d of %d rows with missing or non-numeric values in '%s'/'%s'",
            dropped,
            n_before,
            x_col,
            y_col,
        )

    return working[x_col].astype(float), working[y_col].astype(float)
