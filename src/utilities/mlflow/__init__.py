"""MLflow utilities for experiment tracking."""

from .io import get_experiment_name, resolve_tracking_uri, setup_mlflow

__all__ = [
    "get_experiment_name",
    "resolve_tracking_uri",
    "setup_mlflow",
]
