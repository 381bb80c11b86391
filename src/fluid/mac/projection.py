"""Velocity projection: subtract the pressure gradient from the advected field."""

import numpy as np

from .grid import MACGrid

RHO = 1.0  # must match the density absorbed in the pressure solve


def project(grid: MACGrid, dt: float) -> None:
    """Correct interior face velocities with the pressure gradient.

    u faces: rows [1, ny-2], columns [1, nx-1]
    v faces: rows [1, ny-1], columns [1, nx-2]

    Wall faces are untouched here; the boundary pass sets them.
    """
    scale = dt / (RHO * grid.dx)
    p = grid.p

    i, j = np.meshgrid(np.arange(1, grid.nx), np.arange(1, grid.ny - 1))
    p_left = p[grid.p_idx(i - 1, j)]
    p_right = p[grid.p_idx(i, j)]
    u_new = grid.u.copy()
    u_new[grid.u_idx(i, j)] -= scale * (p_right - p_left)

    i, j = np.meshgrid(np.arange(1, grid.nx - 1), np.arange(1, grid.ny))
    p_bot = p[grid.p_idx(i, j - 1)]
    p_top = p[grid.p_idx(i, j)]
    v_new = grid.v.copy()
    v_new[grid.v_idx(i, j)] -= scale * (p_top - p_bot)

    grid.u = u_new
    grid.v = v_new
