import logging
from typing import List, Optional

import numpy as np
import plotly.graph_objects as go

from wavefield.core import PDESolver

logger = logging.getLogger(__name__)


class PhysicsAnimator:
    """
    Frame-driven animation of a wave-field simulation.

    Plays the role of the render loop: each frame calls
    ``solver.multi_step(steps_per_frame)`` once and keeps a snapshot of the
    returned field, then builds a Plotly heatmap animation.

    Parameters
    ----------
    solver : PDESolver
        Configured simulation.
    n_frames : int
        Number of frames to record.
    steps_per_frame : int, default=1
        Time steps advanced between consecutive frames.

    Attributes
    ----------
    history : list of np.ndarray
        Stored field snapshots, shape ``(height, width)``.
    time_steps : list of float
        Simulation time of each snapshot.
    energies : list of float
        Energy of each snapshot.
    """

    def __init__(self, solver: PDESolver, n_frames: int, steps_per_frame: int = 1) -> None:
        if n_frames < 1:
            raise ValueError(f"n_frames must be at least 1, got {n_frames}")
        if steps_per_frame < 0:
            raise ValueError(f"steps_per_frame must be non-negative, got {steps_per_frame}")

        self.solver = solver
        self.n_frames = n_frames
        self.steps_per_frame = steps_per_frame

        self.history: List[np.ndarray] = []
        self.time_steps: List[float] = []
        self.energies: List[float] = []

        grid = self.solver.grid
        self.x_axis = grid.x
        self.y_axis = grid.y

    def run(self) -> None:
        """Advance the solver frame by frame and store the snapshots."""
        total = self.n_frames * self.steps_per_frame
        logger.info("Simulating %d frames (%d steps, %.4es)...", self.n_frames, total, total * self.solver.dt)

        for _ in range(self.n_frames):
            field = self.solver.multi_step(self.steps_per_frame)
            self.history.append(np.array(field).reshape(self.solver.grid.shape))
            self.time_steps.append(self.solver.time())
            self.energies.append(self.solver.energy())

        logger.info("Simulation complete.")

    def create_animation(
        self,
        skip_frames: int = 1,
        skip_spatial: int = 1,
        filename: Optional[str] = None
    ) -> Optional[go.Figure]:
        """
        Generate an interactive Plotly heatmap animation.

        Parameters
        ----------
        skip_frames : int, default=1
            Temporal subsampling factor.
        skip_spatial : int, default=1
            Spatial subsampling factor.
        filename : str, optional
            If provided, saves the animation as an HTML file.

        Returns
        -------
        go.Figure or None
            Plotly figure with animation controls, or None if no data.
        """
        if not self.history:
            logger.warning("No data! Run .run() first.")
            return None

        display_data = self.history[::skip_frames]
        display_times = self.time_steps[::skip_frames]
        s_slice = slice(None, None, skip_spatial)

        stack = np.array(display_data)
        z_max = float(np.nanmax(np.abs(stack)))
        if z_max == 0.0:
            z_max = 1.0
            logger.warning("Simulation appears to be flat (max |u| == 0).")

        def heatmap(frame: np.ndarray) -> go.Heatmap:
            return go.Heatmap(
                x=self.x_axis[s_slice], y=self.y_axis[s_slice], z=frame[s_slice, s_slice],
                colorscale='RdBu', reversescale=True, zmin=-z_max, zmax=z_max
            )

        frames = [
            go.Frame(data=[heatmap(frame)], name=f"f{i}", layout=go.Layout(title=f"t = {t:.4e}s"))
            for i, (frame, t) in enumerate(zip(display_data, display_times))
        ]

        updatemenus = [dict(
            type="buttons", showactive=False,
            x=0.1, y=0, xanchor="right", yanchor="top", pad=dict(t=0, r=10),
            buttons=[
                dict(label="▶ Play", method="animate",
                     args=[None, dict(frame=dict(duration=20, redraw=True), fromcurrent=True)]),
                dict(label="|| Pause", method="animate",
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode="immediate", transition=dict(duration=0))])
            ]
        )]

        layout = go.Layout(
            title=f"t = {display_times[0]:.4e}s",
            xaxis=dict(title="X [m]"),
            yaxis=dict(title="Y [m]", scaleanchor="x"),
            template="plotly_white",
            updatemenus=updatemenus
        )
        fig = go.Figure(data=[heatmap(display_data[0])], layout=layout, frames=frames)

        if filename:
            fig.write_html(filename)
            logger.info("Animation saved to %s", filename)

        return fig
