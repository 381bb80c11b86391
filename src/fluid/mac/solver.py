"""MAC-grid solver: semi-Lagrangian advection with Jacobi pressure projection.

This module wires the grid, the four step phases and the diagnostics into the
FluidSolver run loop.
"""

import logging

from ..base import FluidSolver
from ..datastructures import Fields, MACParameters
from .diagnostics import cell_centre_velocity, summarize
from .grid import MACGrid
from .initial import seed_vertical_velocity
from . import stepping

log = logging.getLogger(__name__)


class MACSolver(FluidSolver):
    """Incompressible flow on a staggered grid with no-flow walls.

    Parameters
    ----------
    params : MACParameters
        Grid size and spacing, time step, pressure iteration count and
        initial vertical velocity seed.
    """

    Parameters = MACParameters

    def __init__(self, **kwargs):
        """Initialize MAC solver and apply the initial condition."""
        super().__init__(**kwargs)

        self.grid = MACGrid(self.params.nx, self.params.ny, self.params.dx)

        if self.params.seed_velocity:
            seed_vertical_velocity(
                self.grid,
                self.params.seed_velocity,
                col=self.params.seed_col,
                row=self.params.seed_row,
            )
            log.info(
                f"Seeded v={self.params.seed_velocity} on "
                f"{self.params.nx}x{self.params.ny} grid (dx={self.params.dx})"
            )

    def step(self):
        """Advect -> SolvePressure -> Project -> EnforceBoundaries."""
        stepping.step(self.grid, self.params.dt, self.params.pressure_iterations)

    def diagnostics(self) -> dict:
        return summarize(self.grid)

    @property
    def fields(self) -> Fields:
        """Snapshot of velocity and pressure at cell centres (copies)."""
        x, y, u, v = cell_centre_velocity(self.grid)
        return Fields(u=u, v=v, p=self.grid.p.copy(), x=x, y=y)
