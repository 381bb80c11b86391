"""Staggered-grid (MAC) incompressible flow core.

Three operations are exposed to the outside:
- MACGrid(nx, ny, dx)            construct a zero-initialised grid
- step(grid, dt)                 advance one explicit time step in place
- sample_velocity(grid, x, y)    interpolated velocity at a domain point
"""

from .advection import advect
from .boundary import enforce_no_flow, wall_velocities
from .grid import MACGrid
from .initial import seed_vertical_velocity
from .pressure import (
    DEFAULT_PRESSURE_ITERATIONS,
    compute_divergence,
    jacobi_relax,
    solve_pressure,
)
from .projection import project
from .sampler import sample_velocity, sample_velocity_array
from .stepping import step

__all__ = [
    "MACGrid",
    "step",
    "sample_velocity",
    "sample_velocity_array",
    # Phases
    "advect",
    "compute_divergence",
    "jacobi_relax",
    "solve_pressure",
    "project",
    "enforce_no_flow",
    "wall_velocities",
    "DEFAULT_PRESSURE_ITERATIONS",
    # Initial conditions
    "seed_vertical_velocity",
]
