"""Data structures for solver configuration and results.

Structure:
- Parameters: Input configuration (logged to MLflow at start)
- Metrics: Output results (logged to MLflow at end)
- Fields: Cell-centre snapshot of the solution for plotting
- TimeSeries: Per-step diagnostics history
"""

import numbers
from dataclasses import dataclass, asdict
from typing import Optional, List

import numpy as np
import pandas as pd
from mlflow.entities import Metric


def _check_integer(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")


# ========================================================
# Parameters (Input Configuration)
# ========================================================


@dataclass
class Parameters:
    """Base solver parameters - grid and time stepping."""

    nx: int = 40
    ny: int = 40
    dx: float = 15.0
    dt: float = 0.016  # 60 updates per second
    n_steps: int = 100
    log_every: int = 10
    method: str = ""

    def __post_init__(self):
        for name in ("nx", "ny", "n_steps", "log_every"):
            _check_integer(name, getattr(self, name))
        if self.nx <= 0 or self.ny <= 0:
            raise ValueError(f"Grid dimensions must be positive, got nx={self.nx}, ny={self.ny}")
        if not self.dx > 0:
            raise ValueError(f"dx must be positive, got {self.dx}")
        if not self.dt > 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {self.n_steps}")
        if self.log_every <= 0:
            raise ValueError(f"log_every must be positive, got {self.log_every}")

    def to_dataframe(self):
        return pd.DataFrame([asdict(self)])

    def to_mlflow(self) -> dict:
        """Flat dict for mlflow.log_params (None values dropped)."""
        return {k: v for k, v in asdict(self).items() if v is not None}


# ========================================================
# Metrics (Output Results)
# ========================================================


@dataclass
class Metrics:
    """Solver metrics - output results computed after running."""

    steps: int = 0
    simulated_time: float = 0.0
    wall_time_seconds: float = 0.0
    divergence_l1: float = 0.0
    divergence_l2: float = 0.0
    max_divergence: float = 0.0
    kinetic_energy: float = 0.0
    max_speed: float = 0.0

    def to_dataframe(self):
        return pd.DataFrame([asdict(self)])

    def to_mlflow(self) -> dict:
        return {k: float(v) for k, v in asdict(self).items()}


# ========================================================
# Fields (Spatial Solution Data)
# ========================================================


@dataclass
class Fields:
    """Velocity (u, v) and pressure p sampled at cell centres (x, y)."""

    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    x: np.ndarray
    y: np.ndarray

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with one row per cell."""
        return pd.DataFrame(asdict(self))


# ========================================================
# Time Series (Per-step Diagnostics)
# ========================================================


@dataclass
class TimeSeries:
    """Diagnostics history (one value per recorded step)."""

    step: List[int]
    time: List[float]
    divergence_l1: List[float]
    divergence_l2: List[float]
    kinetic_energy: List[float]
    max_speed: Optional[List[float]] = None

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to DataFrame with one row per recorded step."""
        return pd.DataFrame({k: v for k, v in asdict(self).items() if v is not None})

    def to_mlflow_batch(self, timestamp: int = 0) -> list:
        """Step-indexed MLflow metrics for MlflowClient.log_batch."""
        batch = []
        for key, values in asdict(self).items():
            if key in ("step", "time") or values is None:
                continue
            for step, value in zip(self.step, values):
                batch.append(Metric(key=key, value=float(value), timestamp=timestamp, step=int(step)))
        return batch


# =============================================================
# MAC Specific
# =============================================================


@dataclass
class MACParameters(Parameters):
    """MAC solver parameters (extends Parameters with projection and seeding settings)."""

    pressure_iterations: int = 50  # fixed Jacobi sweeps per step
    seed_velocity: float = 100.0  # initial vertical velocity at one face
    seed_col: Optional[int] = None  # defaults to nx // 2
    seed_row: Optional[int] = None  # defaults to ny // 2
    method: str = "MAC-SemiLagrangian"

    def __post_init__(self):
        super().__post_init__()
        _check_integer("pressure_iterations", self.pressure_iterations)
        for name in ("seed_col", "seed_row"):
            if getattr(self, name) is not None:
                _check_integer(name, getattr(self, name))
        if self.pressure_iterations < 0:
            raise ValueError(
                f"pressure_iterations must be non-negative, got {self.pressure_iterations}"
            )
