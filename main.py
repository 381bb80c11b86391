"""
Fluid Sim - Unified entry point for running and rendering the MAC grid solver.

Usage:
    uv run python main.py
    uv run python main.py nx=64 ny=64 n_steps=300
    uv run python main.py render.live=true
    uv run python main.py -m dt=0.008,0.016 pressure_iterations=20,50
"""

import logging
import os
import sys
from pathlib import Path

import hydra
import mlflow
from dotenv import load_dotenv
from hydra.utils import instantiate
from mlflow.tracking import MlflowClient
from omegaconf import DictConfig, OmegaConf

load_dotenv()
sys.path.insert(0, str(Path(__file__).parent / "src"))

from cli.console import dim, header, ok, print_run_summary  # noqa: E402
from utilities.mlflow import setup_mlflow  # noqa: E402

log = logging.getLogger(__name__)

MLFLOW_BATCH_LIMIT = 1000  # metrics per log_batch request


def create_solver(cfg: DictConfig):
    """Instantiate solver using Hydra's instantiate on solver subtree.

    Common parameters from root config are passed to the solver constructor.
    """
    return instantiate(
        {"_target_": cfg.solver._target_},
        nx=cfg.nx,
        ny=cfg.ny,
        dx=cfg.dx,
        dt=cfg.dt,
        n_steps=cfg.n_steps,
        log_every=cfg.log_every,
        pressure_iterations=cfg.pressure_iterations,
        seed_velocity=cfg.seed.vertical_velocity,
        seed_col=cfg.seed.col,
        seed_row=cfg.seed.row,
        _convert_="partial",
    )


def output_dir() -> Path:
    return Path(hydra.core.hydra_config.HydraConfig.get().runtime.output_dir)


def run_live(cfg: DictConfig, solver) -> None:
    """Open a window and step the solver once per frame until it is closed."""
    import matplotlib.pyplot as plt

    from shared.plotting.velocity import animate

    anim = animate(solver, arrow_scale=cfg.render.arrow_scale, fps=cfg.render.fps)  # noqa: F841
    plt.show()
    log.info(f"Window closed after {solver.steps_taken} steps (t={solver.time:.3f})")


def run_batch(cfg: DictConfig, solver) -> None:
    """Run n_steps, log to MLflow and render the final state."""
    from shared.plotting.velocity import generate_plots_for_run

    if not cfg.mlflow.enabled:
        solver.run()
        paths = generate_plots_for_run(solver, output_dir(), arrow_scale=cfg.render.arrow_scale)
        ok(f"Saved {len(paths)} plots to {output_dir()}")
        print_run_summary(solver.params, solver.metrics)
        return

    experiment_name = setup_mlflow(cfg)
    log.info(f"MLflow experiment: {experiment_name}")
    dim(f"Tracking to {os.environ['MLFLOW_TRACKING_URI']} ({experiment_name})")
    run_name = f"{cfg.solver.name}_{cfg.nx}x{cfg.ny}"

    with mlflow.start_run(run_name=run_name, tags={"solver": cfg.solver.name}) as run:
        mlflow.log_params(solver.params.to_mlflow())
        mlflow.log_dict(OmegaConf.to_container(cfg), "config.yaml")

        solver.run()

        mlflow.log_metrics(solver.metrics.to_mlflow())
        batch = solver.time_series.to_mlflow_batch()
        client = MlflowClient()
        for start in range(0, len(batch), MLFLOW_BATCH_LIMIT):
            client.log_batch(run.info.run_id, metrics=batch[start : start + MLFLOW_BATCH_LIMIT])

        paths = generate_plots_for_run(
            solver,
            output_dir(),
            arrow_scale=cfg.render.arrow_scale,
            run_id=run.info.run_id,
            tracking_uri=os.environ["MLFLOW_TRACKING_URI"],
            upload_to_mlflow=True,
        )
        ok(f"Uploaded {len(paths)} plots to run {run.info.run_id}")

    print_run_summary(solver.params, solver.metrics)


@hydra.main(config_path="conf", config_name="config", version_base=None)
def main(cfg: DictConfig) -> None:
    """Main entry point."""
    header(f"Fluid Sim: {cfg.solver.name} {cfg.nx}x{cfg.ny}")
    log.info(f"Solver: {cfg.solver.name}, grid={cfg.nx}x{cfg.ny}, dx={cfg.dx}, dt={cfg.dt}")
    solver = create_solver(cfg)

    if cfg.render.live:
        run_live(cfg, solver)
    else:
        run_batch(cfg, solver)


if __name__ == "__main__":
    main()
