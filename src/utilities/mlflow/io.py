"""MLflow I/O utilities for experiment tracking."""

import logging
import os

import mlflow
from omegaconf import DictConfig

log = logging.getLogger(__name__)

DEFAULT_TRACKING_URI = "sqlite:///mlflow.db"
TRACKING_MODES = ("local", "env")


def get_experiment_name(cfg: DictConfig) -> str:
    """Build full experiment name with optional prefix."""
    name = cfg.experiment_name
    prefix = cfg.mlflow.get("project_prefix", "")
    if prefix and not name.startswith("/"):
        return f"{prefix}/{name}"
    return name


def resolve_tracking_uri(cfg: DictConfig) -> str:
    """Tracking URI for the configured mode.

    "local" always uses cfg.mlflow.tracking_uri and ignores the environment.
    "env" keeps an MLFLOW_TRACKING_URI inherited from the environment (e.g. a
    .env file) and only falls back to cfg.mlflow.tracking_uri when unset.
    """
    mode = str(cfg.mlflow.get("mode", "local")).lower()
    if mode not in TRACKING_MODES:
        raise ValueError(f"mlflow.mode must be one of {TRACKING_MODES}, got {mode!r}")

    configured = str(cfg.mlflow.get("tracking_uri", None) or DEFAULT_TRACKING_URI)
    if mode == "env":
        return os.environ.get("MLFLOW_TRACKING_URI") or configured
    return configured


def setup_mlflow(cfg: DictConfig) -> str:
    """Setup MLflow tracking and return experiment name.

    Falls back to "<name>-restored" when the experiment cannot be activated,
    typically because it was deleted.
    """
    tracking_uri = resolve_tracking_uri(cfg)
    os.environ["MLFLOW_TRACKING_URI"] = tracking_uri
    mlflow.set_tracking_uri(tracking_uri)

    experiment_name = get_experiment_name(cfg)
    try:
        mlflow.set_experiment(experiment_name)
    except Exception as exc:
        fallback = f"{experiment_name}-restored"
        log.warning(
            "MLflow set_experiment failed for '%s' (%s); falling back to '%s'",
            experiment_name,
            exc,
            fallback,
        )
        experiment_name = fallback
        mlflow.set_experiment(experiment_name)

    return experiment_name
