#!/usr/bin/env python3
"""
Main script for summarizing and fitting two numeric columns of a CSV table.
"""

# Pipeline overview:
# 1) Load the CSV and coerce the two requested columns to numbers, dropping
#    incomplete rows.
# 2) Describe each column (means, spread, shape, robust statistics).
# 3) Fit a simple linear regression, and a logistic regression when the
#    target column is binary 0/1.
# 4) Export the descriptive table, the fit summary and the fit figures.

import argparse
import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from numseq.io import extract_xy, load_table
from numseq.linear_model import SimpleLogisticRegression
from numseq.plotting import plot_linear_fit, plot_logistic_fit
from numseq.reporting import describe_table, fit_summary, summary_frame

DEFAULT_OUTPUT_DIR = "output"


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for script execution."""
    parser = argparse.ArgumentParser(
        description="Describe two numeric CSV columns and fit one-feature models."
    )
    parser.add_argument("--input", required=True, help="Path to input CSV file.")
    parser.add_argument("--x-col", required=True, help="Independent column name.")
    parser.add_argument("--y-col", required=True, help="Dependent column name.")
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--ddof",
        type=int,
        default=1,
        help="Degrees-of-freedom offset for the standard deviation (default: 1).",
    )
    parser.add_argument(
        "--learning-rate",
        type=float,
        default=0.001,
        help="Logistic regression learning rate.",
    )
    parser.add_argument(
        "--gradient-threshold",
        type=float,
        default=0.01,
        help="Logistic regression relative-gradient tolerance in (0, 1).",
    )
    parser.add_argument(
        "--iteration-threshold",
        type=int,
        default=100,
        help="Logistic regression maximum number of iterations.",
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip writing fit figures."
    )
    return parser


def main(argv=None):
    """Main execution function with step timing logs."""

    args = _build_arg_parser().parse_args(argv)
    start_time = time.time()
    logging.info("Loading %s", args.input)

    df = load_table(args.input)
    x, y = extract_xy(df, args.x_col, args.y_col)
    logging.info("Using %d complete rows from table of shape %s", len(x), df.shape)

    if len(x) < 2:
        logging.error(
            "At least two complete rows are required for fitting. Terminating execution."
        )
        return 1

    os.makedirs(args.outdir, exist_ok=True)
    logging.info("Output directory ensured: %s", args.outdir)

    describe_df = describe_table({args.x_col: x, args.y_col: y}, ddof=args.ddof)
    print(describe_df.to_string())
    describe_path = os.path.join(args.outdir, "describe.csv")
    describe_df.to_csv(describe_path, index_label="statistic")

    step_start = time.time()
    logistic = SimpleLogisticRegression(
        learning_rate=args.learning_rate,
        gradient_threshold=args.gradient_threshold,
        iteration_threshold=args.iteration_threshold,
    )
    summary = fit_summary(x, y, logistic=logistic)
    logging.info("Model fitting completed in %.2f seconds", time.time() - step_start)
    logging.info(
        "Linear fit: coeff=%.6g intercept=%.6g r2=%.4f",
        summary["linear_coeff"],
        summary["linear_intercept"],
        summary["r2"],
    )
    if "logistic" in summary["models"]:
        logging.info(
            "Logistic fit: coeff=%.6g intercept=%.6g accuracy=%.3f after %d iterations",
            summary["logistic_coeff"],
            summary["logistic_intercept"],
            summary["accuracy"],
            summary["logistic_n_iter"],
        )

    summary_path = os.path.join(args.outdir, "summary.csv")
    summary_frame(summary).to_csv(summary_path, index=False)

    figure_paths = []
    if not args.no_plots:
        models = summary["models"]
        figure_paths.append(plot_linear_fit(x, y, models["linear"], args.outdir))
        if "logistic" in models:
            figure_paths.append(
                plot_logistic_fit(x, y, models["logistic"], args.outdir)
            )

    logging.info(f"Total execution time: {time.time() - start_time:.2f} seconds")
    logging.info("Generated output files:")
    logging.info("  - Descriptive statistics CSV: %s", describe_path)
    logging.info("  - Fit summary CSV: %s", summary_path)
    for path in figure_paths:
        logging.info("  - Figure: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
