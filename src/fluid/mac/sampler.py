"""Bilinear velocity sampling on the staggered grid.

Points outside the domain are clamped to the nearest boundary point, and each
of the four neighbour indices is clamped to the valid face range, so lookups
near the walls degrade to edge replication instead of failing.
"""

import numpy as np

from .grid import MACGrid


def _bilinear(field, index, fx, fy, max_i, max_j):
    """Blend the four faces surrounding fractional face coordinates (fx, fy).

    Parameters
    ----------
    field : np.ndarray
        Flat face array (u or v).
    index : callable
        Index function of the field, (i, j) -> flat offset.
    fx, fy : np.ndarray
        Fractional face coordinates.
    max_i, max_j : int
        Largest valid face column / row.
    """
    i0 = np.floor(fx).astype(np.intp)
    j0 = np.floor(fy).astype(np.intp)
    tx = fx - i0
    ty = fy - j0

    i1 = np.clip(i0 + 1, 0, max_i)
    j1 = np.clip(j0 + 1, 0, max_j)
    i0 = np.clip(i0, 0, max_i)
    j0 = np.clip(j0, 0, max_j)

    f00 = field[index(i0, j0)]
    f10 = field[index(i1, j0)]
    f01 = field[index(i0, j1)]
    f11 = field[index(i1, j1)]

    return (
        f00 * (1.0 - tx) * (1.0 - ty)
        + f10 * tx * (1.0 - ty)
        + f01 * (1.0 - tx) * ty
        + f11 * tx * ty
    )


def sample_velocity_array(grid: MACGrid, x, y):
    """Vectorised velocity sampling at arrays of points.

    Returns
    -------
    u, v : np.ndarray
        Interpolated velocity components, same shape as the broadcast of x, y.
    """
    x = np.clip(np.asarray(x, dtype=np.float64), 0.0, grid.width)
    y = np.clip(np.asarray(y, dtype=np.float64), 0.0, grid.height)
    x, y = np.broadcast_arrays(x, y)

    gx = x / grid.dx
    gy = y / grid.dx

    # u faces: columns at integer x/dx, rows offset by half a cell
    u = _bilinear(grid.u, grid.u_idx, gx, gy - 0.5, grid.nx, grid.ny - 1)

    # v faces: rows at integer y/dx, columns offset by half a cell
    v = _bilinear(grid.v, grid.v_idx, gx - 0.5, gy, grid.nx - 1, grid.ny)

    return u, v


def sample_velocity(grid: MACGrid, x: float, y: float) -> tuple[float, float]:
    """Interpolated velocity (u, v) at domain point (x, y).

    Never mutates the grid; safe to call from a renderer between steps.
    """
    u, v = sample_velocity_array(grid, x, y)
    return float(u), float(v)
