"""Diagnostics of a MAC grid state (pure functions, never mutate the grid)."""

import numpy as np

from ..metrics import discrete_l1_norm, discrete_l2_norm, discrete_linf_norm

from .grid import MACGrid
from .pressure import compute_divergence
from .sampler import sample_velocity_array


def interior_divergence(grid: MACGrid) -> np.ndarray:
    """Divergence at interior cells [1, nx-2] x [1, ny-2], as a flat array."""
    divergence = compute_divergence(grid)
    i, j = np.meshgrid(np.arange(1, grid.nx - 1), np.arange(1, grid.ny - 1))
    return divergence[grid.p_idx(i, j)].ravel()


def divergence_norms(grid: MACGrid) -> dict:
    """L1 (sum), L2 and max norms of the interior divergence."""
    div = interior_divergence(grid)
    return {
        "divergence_l1": discrete_l1_norm(div),
        "divergence_l2": discrete_l2_norm(div, grid.dx * grid.dx),
        "max_divergence": discrete_linf_norm(div),
    }


def kinetic_energy(grid: MACGrid) -> float:
    """E = 0.5 * sum over faces of (velocity^2 * dA), density 1."""
    dA = grid.dx * grid.dx
    return 0.5 * float((np.sum(grid.u**2) + np.sum(grid.v**2)) * dA)


def cell_centre_velocity(grid: MACGrid):
    """Sampled velocity at every cell centre.

    Returns
    -------
    x, y, u, v : np.ndarray
        Flat arrays indexed like the pressure field.
    """
    i, j = grid.p_coords(np.arange(grid.p_size))
    x, y = grid.cell_center(i, j)
    u, v = sample_velocity_array(grid, x, y)
    return x, y, u, v


def max_speed(grid: MACGrid) -> float:
    """Largest sampled speed over the cell centres."""
    _, _, u, v = cell_centre_velocity(grid)
    return float(np.max(np.hypot(u, v)))


def summarize(grid: MACGrid) -> dict:
    """All scalar diagnostics in one dict."""
    return {
        **divergence_norms(grid),
        "kinetic_energy": kinetic_energy(grid),
        "max_speed": max_speed(grid),
    }
