"""Semi-Lagrangian advection of the staggered velocity field."""

import numpy as np

from .grid import MACGrid
from .sampler import sample_velocity_array


def _trace_back(grid, x, y, dt):
    """First-order backward characteristic from (x, y) over one time step."""
    u, v = sample_velocity_array(grid, x, y)
    return x - dt * u, y - dt * v


def advect(grid: MACGrid, dt: float) -> None:
    """Move the velocity field along itself.

    Every interior face traces back to where its value was one step ago and
    takes the interpolated velocity there. Wall faces (u columns 0 and nx,
    v rows 0 and ny) are left for the boundary pass. All samples read the
    pre-step field; the results are swapped in once both sweeps are done.
    """
    u_new = grid.u.copy()
    v_new = grid.v.copy()

    # u faces: all rows, interior columns 1..nx-1
    i, j = np.meshgrid(np.arange(1, grid.nx), np.arange(grid.ny))
    x, y = grid.u_position(i, j)
    x_prev, y_prev = _trace_back(grid, x, y, dt)
    u_advected, _ = sample_velocity_array(grid, x_prev, y_prev)
    u_new[grid.u_idx(i, j)] = u_advected

    # v faces: interior rows 1..ny-1, all columns
    i, j = np.meshgrid(np.arange(grid.nx), np.arange(1, grid.ny))
    x, y = grid.v_position(i, j)
    x_prev, y_prev = _trace_back(grid, x, y, dt)
    _, v_advected = sample_velocity_array(grid, x_prev, y_prev)
    v_new[grid.v_idx(i, j)] = v_advected

    grid.u = u_new
    grid.v = v_new
