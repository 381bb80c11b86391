"""No-flow wall condition on the four domain sides."""

import numpy as np

from .grid import MACGrid


def enforce_no_flow(grid: MACGrid) -> None:
    """Zero the normal velocity on every wall.

    u at columns 0 and nx (left/right walls), v at rows 0 and ny (bottom/top).
    """
    rows = np.arange(grid.ny)
    grid.u[grid.u_idx(0, rows)] = 0.0
    grid.u[grid.u_idx(grid.nx, rows)] = 0.0

    cols = np.arange(grid.nx)
    grid.v[grid.v_idx(cols, 0)] = 0.0
    grid.v[grid.v_idx(cols, grid.ny)] = 0.0


def wall_velocities(grid: MACGrid) -> np.ndarray:
    """All wall-normal velocities, concatenated (left, right, bottom, top)."""
    rows = np.arange(grid.ny)
    cols = np.arange(grid.nx)
    return np.concatenate(
        [
            grid.u[grid.u_idx(0, rows)],
            grid.u[grid.u_idx(grid.nx, rows)],
            grid.v[grid.v_idx(cols, 0)],
            grid.v[grid.v_idx(cols, grid.ny)],
        ]
    )
