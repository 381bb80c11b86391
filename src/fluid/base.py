"""Abstract base solver for time-stepped 2D incompressible flow."""

from abc import ABC, abstractmethod
import logging
import time

import numpy as np
import mlflow

from .datastructures import Metrics, TimeSeries

log = logging.getLogger(__name__)


class FluidSolver(ABC):
    """Abstract base solver driving a fixed-dt simulation.

    Handles:
    - Parameter management (input configuration)
    - Metrics tracking (output results)
    - Step loop with per-step diagnostics
    - Live MLflow logging when a run is active

    Subclasses must:
    - Set Parameters class attribute (e.g., MACParameters)
    - Implement step() - advance one time step
    - Implement diagnostics() - scalar diagnostics of the current state
    """

    Parameters = None  # Subclasses set this to e.g. MACParameters

    def __init__(self, params=None, **kwargs):
        """Initialize solver with parameters.

        Parameters
        ----------
        params : Parameters, optional
            Parameters object. If not provided, kwargs are used to create params.
        **kwargs
            Configuration parameters passed to Parameters class if params is None.
        """
        if params is None:
            if self.Parameters is None:
                raise ValueError("Subclass must define Parameters class attribute")
            params = self.Parameters(**kwargs)

        self.params = params
        self.metrics = Metrics()
        self.time_series = None  # Populated after run()
        self.steps_taken = 0
        self.time = 0.0

    @abstractmethod
    def step(self):
        """Advance the state by one time step of params.dt."""
        pass

    @abstractmethod
    def diagnostics(self) -> dict:
        """Scalar diagnostics of the current state.

        Returns
        -------
        dict
            Must contain 'divergence_l1', 'divergence_l2', 'max_divergence',
            'kinetic_energy' and 'max_speed'.
        """
        pass

    def advance(self):
        """Run one step and update the step counter and simulated time."""
        self.step()
        self.steps_taken += 1
        self.time += self.params.dt

    def _store_results(self, history, wall_time, max_timeseries_points: int = 1000):
        """Store run results in self.time_series and self.metrics."""

        # Downsample time series to max_timeseries_points
        def downsample(data):
            if data is None or len(data) <= max_timeseries_points:
                return data
            indices = np.linspace(0, len(data) - 1, max_timeseries_points, dtype=int)
            return [data[i] for i in indices]

        def column(key):
            return downsample([h[key] for h in history])

        self.time_series = TimeSeries(
            step=column("step"),
            time=column("time"),
            divergence_l1=column("divergence_l1"),
            divergence_l2=column("divergence_l2"),
            kinetic_energy=column("kinetic_energy"),
            max_speed=column("max_speed"),
        )

        # Final values come from the current state, not the downsampled series
        final = self.diagnostics()
        self.metrics = Metrics(
            steps=self.steps_taken,
            simulated_time=self.time,
            wall_time_seconds=wall_time,
            divergence_l1=final["divergence_l1"],
            divergence_l2=final["divergence_l2"],
            max_divergence=final["max_divergence"],
            kinetic_energy=final["kinetic_energy"],
            max_speed=final["max_speed"],
        )

    def run(self, n_steps: int = None):
        """Advance the simulation n_steps times, recording diagnostics each step.

        Stores results in solver attributes:
        - self.time_series : TimeSeries dataclass with per-step diagnostics
        - self.metrics : Metrics dataclass with final diagnostics

        Parameters
        ----------
        n_steps : int, optional
            Number of steps. If None, uses params.n_steps.
        """
        if n_steps is None:
            n_steps = self.params.n_steps
        if n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {n_steps}")

        history = [{"step": self.steps_taken, "time": self.time, **self.diagnostics()}]

        time_start = time.time()
        mlflow_time = 0.0  # Track time spent on MLflow logging

        for i in range(n_steps):
            self.advance()

            record = {"step": self.steps_taken, "time": self.time, **self.diagnostics()}
            history.append(record)

            if i % self.params.log_every == 0 or i == n_steps - 1:
                log.info(
                    f"Step {self.steps_taken}: t={self.time:.3f}, "
                    f"div_l2={record['divergence_l2']:.6e}, "
                    f"energy={record['kinetic_energy']:.6e}, "
                    f"max_speed={record['max_speed']:.4f}"
                )

                # Live MLflow logging (timed separately)
                if mlflow.active_run():
                    t_log_start = time.time()
                    live_metrics = {
                        "divergence_l2": record["divergence_l2"],
                        "kinetic_energy": record["kinetic_energy"],
                    }
                    mlflow.log_metrics(live_metrics, step=self.steps_taken)
                    mlflow_time += time.time() - t_log_start

        wall_time = time.time() - time_start - mlflow_time  # Exclude MLflow logging time
        log.info(f"Run finished in {wall_time:.2f} seconds (excl. {mlflow_time:.2f}s logging).")

        self._store_results(history, wall_time)
