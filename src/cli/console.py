"""Rich console output helpers."""

from rich.console import Console
from rich.table import Table

console = Console()


def ok(msg: str):
    """Print success message."""
    console.print(f"  [green]✓[/green] {msg}")


def dim(msg: str):
    """Print dimmed message."""
    console.print(f"  [dim]{msg}[/dim]")


def header(msg: str):
    """Print bold header."""
    console.print(f"\n[bold]{msg}[/bold]")


def run_summary_table(params, metrics) -> Table:
    """Two-column table of run parameters and final metrics."""
    table = Table(title=f"{params.method} {params.nx}x{params.ny}", show_header=True)
    table.add_column("Quantity")
    table.add_column("Value", justify="right")

    table.add_row("dx", f"{params.dx:g}")
    table.add_row("dt", f"{params.dt:g}")
    table.add_row("steps", str(metrics.steps))
    table.add_row("simulated time", f"{metrics.simulated_time:.3f}")
    table.add_row("wall time [s]", f"{metrics.wall_time_seconds:.2f}")
    table.add_row("divergence L1", f"{metrics.divergence_l1:.4e}")
    table.add_row("divergence L2", f"{metrics.divergence_l2:.4e}")
    table.add_row("kinetic energy", f"{metrics.kinetic_energy:.4e}")
    table.add_row("max speed", f"{metrics.max_speed:.4f}")
    return table


def print_run_summary(params, metrics):
    """Print the run summary table."""
    console.print(run_summary_table(params, metrics))
