"""
Plot Generation for MAC grid runs.

Renders the final state and diagnostics history of a solver and optionally
uploads them to MLflow.
"""

import logging
from pathlib import Path
from typing import Optional

from fluid.metrics import build_parameter_string

from .convergence import divergence_reduction, plot_diagnostics
from .fields import plot_scalar_fields, plot_velocity_field
from .mlflow_utils import upload_plots_to_mlflow

log = logging.getLogger(__name__)


def generate_plots_for_run(
    solver,
    output_dir: Path,
    arrow_scale: float = 2.0,
    run_id: Optional[str] = None,
    tracking_uri: Optional[str] = None,
    upload_to_mlflow: bool = False,
) -> list[Path]:
    """Generate all plots for a completed run.

    Artifacts generated:
    - velocity.png (velocity segments)
    - fields.png (pressure and divergence)
    - diagnostics.png (only if the solver has been run)
    """
    if upload_to_mlflow and (run_id is None or tracking_uri is None):
        raise ValueError("run_id and tracking_uri are required to upload plots")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    params = solver.params
    title = build_parameter_string(
        {"nx": params.nx, "ny": params.ny, "dt": params.dt, "t": f"{solver.time:.3f}"}
    )
    log.info(f"Generating plots for {params.method} {params.nx}x{params.ny}, t={solver.time:.3f}")

    plot_paths = [
        plot_velocity_field(solver.grid, output_dir, scale=arrow_scale, title=title),
        plot_scalar_fields(solver.grid, output_dir, title=title),
    ]
    if solver.time_series is not None:
        df = solver.time_series.to_dataframe()
        log.info(f"Interior divergence L1 ratio final/initial: {divergence_reduction(df):.3e}")
        plot_paths.append(plot_diagnostics(df, output_dir))

    plot_paths = [p for p in plot_paths if p is not None]
    log.info(f"Generated {len(plot_paths)} plots in {output_dir}")

    if upload_to_mlflow:
        upload_plots_to_mlflow(run_id, plot_paths, tracking_uri)

    return plot_paths
