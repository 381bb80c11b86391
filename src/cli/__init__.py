"""Console helpers for simulation runs."""

from .console import console, dim, header, ok, print_run_summary, run_summary_table

__all__ = [
    "console",
    "ok",
    "dim",
    "header",
    "print_run_summary",
    "run_summary_table",
]
