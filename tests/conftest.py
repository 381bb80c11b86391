"""Pytest configuration and fixtures for MAC grid solver tests."""

import sys
from pathlib import Path

import matplotlib
import numpy as np
import pytest

# Non-interactive backend for plot tests
matplotlib.use("Agg")

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def small_grid():
    """Zero-initialised 6x5 grid with unit spacing."""
    from fluid.mac import MACGrid

    return MACGrid(6, 5, 1.0)


@pytest.fixture
def random_grid():
    """8x6 grid (dx=0.5) filled with reproducible random velocities and pressure."""
    from fluid.mac import MACGrid

    grid = MACGrid(8, 6, 0.5)
    rng = np.random.default_rng(1234)
    grid.u = rng.standard_normal(grid.u_size)
    grid.v = rng.standard_normal(grid.v_size)
    grid.p = rng.standard_normal(grid.p_size)
    return grid


@pytest.fixture
def seeded_grid():
    """40x40 grid, dx=15, vertical velocity 100 at the centre face."""
    from fluid.mac import MACGrid, seed_vertical_velocity

    grid = MACGrid(40, 40, 15.0)
    seed_vertical_velocity(grid, 100.0)
    return grid


@pytest.fixture
def small_solver_params():
    """Parameters for a small, fast MAC solver run."""
    return {
        "nx": 12,
        "ny": 10,
        "dx": 15.0,
        "dt": 0.016,
        "n_steps": 5,
        "log_every": 2,
        "pressure_iterations": 20,
        "seed_velocity": 100.0,
    }
