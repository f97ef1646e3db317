"""Centralized plotting style and save helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    ALPHA_POINTS: float = 0.75
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

COLORS = {
    "points": "#4A4A4A",
    "fit": "#1f77b4",
    "threshold": "#d62728",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib rcParams scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def apply_rcparams() -> None:
    """Apply the global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def clean_axis(ax: Axes, *, nbins: int = 6) -> None:
    """Apply consistent ticks, light y-grid and hidden top/right spines."""
    ax.xaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=4))
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(True, axis="y", alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)


def save_figure(fig: Figure, png_path: str | Path, dpi: int = FIGURE_DPI) -> str:
    """Save ``fig`` as PNG, creating parent directories, then close it."""
    target = Path(png_path).with_suffix(".png")
    target.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(target), dpi=dpi, bbox_inches="tight", pad_inches=0.12)
    plt.close(fig)
    return str(target)
