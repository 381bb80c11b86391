"""Pressure solve: velocity divergence and Jacobi relaxation of the Poisson equation.

Density is taken as 1 and absorbed into the pressure scale; it must match the
projection step.
"""

import logging
import numbers

import numpy as np

from .grid import MACGrid

log = logging.getLogger(__name__)

# Fixed sweep count: bounds per-step cost, not an exact solve.
DEFAULT_PRESSURE_ITERATIONS = 50


def compute_divergence(grid: MACGrid) -> np.ndarray:
    """Discrete divergence per cell, (u_right - u_left + v_top - v_bot) / dx.

    Returns
    -------
    np.ndarray
        Flat array of size nx * ny, indexed like the pressure field.
    """
    i, j = np.meshgrid(np.arange(grid.nx), np.arange(grid.ny))

    u_right = grid.u[grid.u_idx(i + 1, j)]
    u_left = grid.u[grid.u_idx(i, j)]
    v_top = grid.v[grid.v_idx(i, j + 1)]
    v_bot = grid.v[grid.v_idx(i, j)]

    divergence = np.empty(grid.p_size)
    divergence[grid.p_idx(i, j)] = (u_right - u_left + v_top - v_bot) / grid.dx
    return divergence


def jacobi_relax(grid: MACGrid, divergence: np.ndarray, iterations: int) -> np.ndarray:
    """Run Jacobi sweeps on the interior cells, starting from grid.p.

    Each sweep reads only the previous sweep's values and writes a separate
    buffer. Border cells are never written and keep their incoming values.

    Parameters
    ----------
    grid : MACGrid
        Grid providing the initial pressure guess and geometry.
    divergence : np.ndarray
        Right-hand side, flat, indexed like the pressure field.
    iterations : int
        Number of full sweeps.

    Returns
    -------
    np.ndarray
        Relaxed pressure field (grid.p is not modified).
    """
    dx2 = grid.dx * grid.dx
    p = grid.p.copy()

    # interior cells [1, nx-2] x [1, ny-2]
    i, j = np.meshgrid(np.arange(1, grid.nx - 1), np.arange(1, grid.ny - 1))
    centre = grid.p_idx(i, j)
    right = grid.p_idx(i + 1, j)
    left = grid.p_idx(i - 1, j)
    top = grid.p_idx(i, j + 1)
    bot = grid.p_idx(i, j - 1)
    rhs = divergence[centre] * dx2

    for _ in range(iterations):
        p_new = p.copy()
        p_new[centre] = (p[right] + p[left] + p[top] + p[bot] - rhs) / 4.0
        p = p_new

    return p


def solve_pressure(grid: MACGrid, iterations: int = DEFAULT_PRESSURE_ITERATIONS) -> np.ndarray:
    """Relax the pressure field against the current velocity divergence.

    The result replaces grid.p and is also the initial guess of the next solve.

    Returns
    -------
    np.ndarray
        Divergence that was used as the right-hand side.
    """
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise ValueError(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    divergence = compute_divergence(grid)
    grid.p = jacobi_relax(grid, divergence, iterations)

    log.debug(
        f"Pressure solve: {iterations} sweeps, max|div|={np.max(np.abs(divergence)):.3e}"
    )
    return divergence
