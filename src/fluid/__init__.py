"""2D incompressible fluid solver framework.

Solver Hierarchy:
-----------------
FluidSolver (abstract base - fixed-dt run loop and diagnostics)
└── MACSolver (staggered grid, semi-Lagrangian advection, Jacobi projection)

The numerical core lives in fluid.mac.
"""

from .base import FluidSolver
from .datastructures import (
    # Base classes (shared by all solvers)
    Parameters,
    Metrics,
    Fields,
    TimeSeries,
    # MAC-specific
    MACParameters,
)
from fluid.mac import MACGrid, sample_velocity, step
from fluid.mac.solver import MACSolver


__all__ = [
    # Base solver
    "FluidSolver",
    # Shared data structures
    "Parameters",
    "Metrics",
    "Fields",
    "TimeSeries",
    # MAC solver
    "MACSolver",
    "MACParameters",
    # Core operations
    "MACGrid",
    "step",
    "sample_velocity",
]
