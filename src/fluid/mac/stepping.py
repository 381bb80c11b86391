"""One explicit time step: Advect -> SolvePressure -> Project -> EnforceBoundaries."""

import logging

from .advection import advect
from .boundary import enforce_no_flow
from .grid import MACGrid
from .pressure import DEFAULT_PRESSURE_ITERATIONS, solve_pressure
from .projection import project

log = logging.getLogger(__name__)


def step(grid: MACGrid, dt: float, pressure_iterations: int = DEFAULT_PRESSURE_ITERATIONS) -> None:
    """Advance grid by dt in place.

    The four phases always run, in this order, to completion.
    """
    if not dt > 0:
        raise ValueError(f"dt must be positive, got {dt}")

    advect(grid, dt)
    solve_pressure(grid, pressure_iterations)
    project(grid, dt)
    enforce_no_flow(grid)
