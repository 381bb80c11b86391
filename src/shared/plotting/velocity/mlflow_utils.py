"""
MLflow utilities for velocity field plotting.

Rendered plots are attached to the run that produced them.
"""

import logging
from pathlib import Path

from mlflow.tracking import MlflowClient

log = logging.getLogger(__name__)


def upload_plots_to_mlflow(run_id: str, plot_paths: list, tracking_uri: str) -> int:
    """Log existing plot files as artifacts of run_id under plots/.

    Returns the number of files uploaded; missing paths are skipped.
    """
    client = MlflowClient(tracking_uri=tracking_uri)

    uploaded = 0
    for path in plot_paths:
        if path is None or not Path(path).exists():
            log.warning(f"Skipping missing plot: {path}")
            continue
        client.log_artifact(run_id, str(path), artifact_path="plots")
        uploaded += 1

    log.info(f"Uploaded {uploaded} plots to run {run_id}")
    return uploaded
