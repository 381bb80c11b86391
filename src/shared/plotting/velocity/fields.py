"""
Field Visualization Plots for MAC grid runs.

Velocity is drawn as short line segments from interior cell centres, scaled
from the sampled velocity. Pressure and divergence are drawn as contour plots.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from scipy.interpolate import RectBivariateSpline

from fluid.mac import MACGrid, compute_divergence, sample_velocity_array

from . import style

log = logging.getLogger(__name__)


def velocity_segments(grid: MACGrid, scale: float = 2.0) -> np.ndarray:
    """Line segments (x, y) -> (x + u*scale, y + v*scale) at interior cell centres.

    Cells on the outer ring are skipped.

    Returns
    -------
    np.ndarray
        Shape (n_segments, 2, 2): segment, endpoint, coordinate.
    """
    i, j = np.meshgrid(np.arange(1, grid.nx - 1), np.arange(1, grid.ny - 1))
    x, y = grid.cell_center(i.ravel(), j.ravel())
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    u, v = sample_velocity_array(grid, x, y)

    start = np.stack([x, y], axis=-1)
    end = np.stack([x + u * scale, y + v * scale], axis=-1)
    return np.stack([start, end], axis=1)


def draw_velocity_segments(ax, grid: MACGrid, scale: float = 2.0) -> LineCollection:
    """Add the velocity segments of grid to ax and frame the domain."""
    lines = LineCollection(
        velocity_segments(grid, scale),
        colors=[style.SEGMENT_COLOR],
        linewidths=style.SEGMENT_WIDTH,
    )
    ax.add_collection(lines)
    ax.set_facecolor(style.BACKGROUND)
    ax.set_xlim(0.0, grid.width)
    ax.set_ylim(0.0, grid.height)
    ax.set_aspect("equal")
    ax.grid(False)
    return lines


def plot_velocity_field(
    grid: MACGrid, output_dir: Path, scale: float = 2.0, title: str = ""
) -> Path:
    """Render the velocity segments to velocity.png."""
    fig, ax = plt.subplots(figsize=(6, 6))
    draw_velocity_segments(ax, grid, scale)
    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$y$")
    if title:
        ax.set_title(title, fontsize=11)

    output_path = Path(output_dir) / "velocity.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight", facecolor=style.BACKGROUND)
    plt.close(fig)

    return output_path


def _cell_axes(grid: MACGrid):
    x = (np.arange(grid.nx) + 0.5) * grid.dx
    y = (np.arange(grid.ny) + 0.5) * grid.dx
    return x, y


def _draw_scalar(ax, grid, values_2d, label, cmap, n_fine):
    x, y = _cell_axes(grid)

    if grid.nx >= 2 and grid.ny >= 2:
        k_rows = min(3, grid.ny - 1)
        k_cols = min(3, grid.nx - 1)
        x_fine = np.linspace(x[0], x[-1], n_fine)
        y_fine = np.linspace(y[0], y[-1], n_fine)
        fine = RectBivariateSpline(y, x, values_2d, kx=k_rows, ky=k_cols)(y_fine, x_fine)
        X_fine, Y_fine = np.meshgrid(x_fine, y_fine)
        mappable = ax.contourf(X_fine, Y_fine, fine, levels=30, cmap=cmap)
    else:
        mappable = ax.pcolormesh(values_2d, cmap=cmap)

    ax.set_xlabel(r"$x$", fontsize=11)
    ax.set_ylabel(r"$y$", fontsize=11)
    ax.set_aspect("equal")
    cbar = plt.colorbar(mappable, ax=ax, label=label)
    cbar.ax.tick_params(labelsize=9)


def plot_scalar_fields(grid: MACGrid, output_dir: Path, title: str = "", n_fine: int = 200) -> Path:
    """Generate pressure and divergence contour plots in fields.png."""
    divergence_2d = compute_divergence(grid).reshape(grid.p_2d.shape)

    fig, axes = plt.subplots(1, 2, figsize=(11, 4.5))

    _draw_scalar(axes[0], grid, grid.p_2d, r"$p$", "viridis", n_fine)
    axes[0].set_title("Pressure", fontsize=12)

    _draw_scalar(axes[1], grid, divergence_2d, r"$\nabla \cdot \mathbf{u}$", "RdBu_r", n_fine)
    axes[1].set_title("Divergence", fontsize=12)

    if title:
        fig.suptitle(title, fontsize=13, y=1.00)

    plt.tight_layout()

    output_path = Path(output_dir) / "fields.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)

    return output_path
