"""
Velocity Field Plotting Package.

Provides rendering of MAC grid solver states and run diagnostics.
"""

from .animation import animate
from .convergence import divergence_reduction, plot_diagnostics
from .fields import (
    draw_velocity_segments,
    plot_scalar_fields,
    plot_velocity_field,
    velocity_segments,
)
from .mlflow_utils import upload_plots_to_mlflow
from .orchestrator import generate_plots_for_run

# Import style module to trigger sns.set_theme() on package import
from . import style  # noqa: F401

__all__ = [
    "generate_plots_for_run",
    "velocity_segments",
    "draw_velocity_segments",
    "plot_velocity_field",
    "plot_scalar_fields",
    "plot_diagnostics",
    "divergence_reduction",
    "animate",
    "upload_plots_to_mlflow",
]
