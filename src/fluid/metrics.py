"""Shared norms and formatting utilities for solvers."""

from __future__ import annotations

from typing import Any

import numpy as np


# -----------------------------------------------------------------------------
# Norms
# -----------------------------------------------------------------------------


def discrete_l1_norm(values: np.ndarray) -> float:
    """Sum of absolute values."""
    return float(np.sum(np.abs(values)))


def discrete_l2_norm(values: np.ndarray, h: float) -> float:
    """Approximate L2 norm with cell measure h."""
    return float(np.sqrt(h * np.sum(np.abs(values) ** 2)))


def discrete_linf_norm(values: np.ndarray) -> float:
    """Maximum absolute value (0 for an empty array)."""
    if values.size == 0:
        return 0.0
    return float(np.max(np.abs(values)))


# -----------------------------------------------------------------------------
# Formatting helpers
# -----------------------------------------------------------------------------


def format_dt_latex(dt: float | str) -> str:
    """Format a timestep value as scientific notation (matplotlib mathtext)."""
    if dt == "?":
        return "?"

    dt_str = f"{float(dt):.2e}"
    mantissa, exp = dt_str.split("e")
    exp_int = int(exp)
    return rf"{mantissa} \times 10^{{{exp_int}}}"


def build_parameter_string(
    params: dict[str, Any],
    separator: str = ", ",
    latex: bool = True,
) -> str:
    """Build a parameter string from a dictionary."""
    parts = []
    for name, value in params.items():
        if "dt" in name.lower():
            value_str = format_dt_latex(value)
            parts.append(
                rf"${name} = {value_str}$" if latex else f"{name} = {float(value):g}"
            )
        else:
            parts.append(rf"${name} = {value}$" if latex else f"{name} = {value}")
    return separator.join(parts)
