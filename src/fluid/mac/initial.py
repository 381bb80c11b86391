"""Initial conditions."""

import numbers
from typing import Optional

from .grid import MACGrid


def seed_vertical_velocity(
    grid: MACGrid, value: float, col: Optional[int] = None, row: Optional[int] = None
) -> None:
    """Set a single vertical-face velocity, by default at the grid centre (nx//2, ny//2)."""
    col = grid.nx // 2 if col is None else col
    row = grid.ny // 2 if row is None else row
    for name, index in (("col", col), ("row", row)):
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise ValueError(f"{name} must be an integer, got {index!r}")
    if not (0 <= col < grid.nx and 0 <= row <= grid.ny):
        raise ValueError(f"v face ({col}, {row}) outside grid {grid.nx}x{grid.ny}")
    grid.v[grid.v_idx(col, row)] = value
