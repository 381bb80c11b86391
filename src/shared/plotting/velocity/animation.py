"""
Live velocity field window.

Drives the solver from a matplotlib timer: every frame advances one step of
params.dt and redraws the velocity segments. The solver is never stepped
while a frame is being drawn.
"""

import logging

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from . import style
from .fields import draw_velocity_segments, velocity_segments

log = logging.getLogger(__name__)


def animate(solver, arrow_scale: float = 2.0, fps: float = 60.0, max_frames: int = None):
    """Create a live animation of solver; call plt.show() to open the window.

    Parameters
    ----------
    solver : FluidSolver
        Solver with a .grid attribute (e.g. MACSolver).
    arrow_scale : float
        Segment length per unit velocity.
    fps : float
        Target updates per second.
    max_frames : int, optional
        Stop after this many steps; run until the window closes if None.

    Returns
    -------
    FuncAnimation
        Keep a reference, otherwise the timer is garbage collected.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor(style.BACKGROUND)
    lines = draw_velocity_segments(ax, solver.grid, arrow_scale)
    ax.set_axis_off()
    if fig.canvas.manager is not None:
        fig.canvas.manager.set_window_title("Fluid Sim")

    def update(_frame):
        solver.advance()
        lines.set_segments(velocity_segments(solver.grid, arrow_scale))
        return (lines,)

    log.info(f"Animating at {fps:g} updates/s")
    return FuncAnimation(
        fig,
        update,
        frames=max_frames,
        interval=1000.0 / fps,
        blit=True,
        cache_frame_data=False,
        repeat=False,
    )
