"""
Diagnostics History Plots for MAC grid runs.

Plots divergence norms, kinetic energy and max speed over simulated time.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from . import style

log = logging.getLogger(__name__)


def plot_diagnostics(timeseries_df: pd.DataFrame, output_dir: Path, title: str = "") -> Path:
    """Plot per-step diagnostics (log scale) against simulated time."""
    if timeseries_df.empty:
        log.warning("No timeseries data available for diagnostics plot")
        return None

    sns.set_style("darkgrid")

    fig, ax = plt.subplots()

    x_col = "time" if "time" in timeseries_df.columns else "step"
    for col in timeseries_df.columns:
        if col in ("step", "time"):
            continue
        data = timeseries_df[col].dropna()
        data = data[data > 0]  # log axis
        if len(data) > 0:
            ax.semilogy(
                timeseries_df.loc[data.index, x_col],
                data,
                label=col.replace("_", " ").capitalize(),
                color=style.DIAGNOSTIC_COLORS.get(col),
            )

    ax.set_xlabel(r"$t$" if x_col == "time" else "Step")
    ax.set_ylabel("Value")
    ax.set_title(title or "Diagnostics History")
    if ax.get_legend_handles_labels()[0]:
        ax.legend(frameon=True)
    else:
        log.warning("All diagnostics are zero; nothing drawn on log axis")

    # Transparent figure, but keep darkgrid axes background
    fig.patch.set_alpha(0.0)

    output_path = Path(output_dir) / "diagnostics.png"
    fig.savefig(output_path, dpi=150, facecolor=(0, 0, 0, 0))
    plt.close(fig)

    return output_path


def divergence_reduction(timeseries_df: pd.DataFrame) -> float:
    """Ratio of final to initial interior divergence L1 norm (nan if initial is 0)."""
    l1 = timeseries_df["divergence_l1"].to_numpy()
    if l1.size == 0 or l1[0] == 0:
        return float(np.nan)
    return float(l1[-1] / l1[0])
