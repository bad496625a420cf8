from typing import Optional
import numpy as np
import matplotlib.pyplot as plt

from wavefield.core import PDESolver


def preview(solver: PDESolver, ax: Optional[plt.Axes] = None, clamp: Optional[float] = None, show: bool = True):
    """
    Plot the current displacement field with sources and listeners.

    Parameters
    ----------
    solver : PDESolver
        Simulation to snapshot.
    ax : matplotlib.axes.Axes, optional
        Target axes. A new figure is created when omitted.
    clamp : float, optional
        Symmetric color limit. Defaults to the field's maximum magnitude.
    show : bool, default=True
        Call ``plt.show()`` after drawing.

    Returns
    -------
    matplotlib.image.AxesImage
        The drawn image.
    """
    grid = solver.grid
    u = np.asarray(solver.field).reshape(grid.shape)

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    if clamp is None:
        clamp = float(np.max(np.abs(u))) if np.any(u) else 1.0

    extent = [0, grid.width * grid.h, 0, grid.height * grid.h]
    image = ax.imshow(u, origin='lower', cmap='seismic', vmin=-clamp, vmax=clamp, extent=extent)
    plt.colorbar(image, ax=ax, label="Displacement u")

    def cell_center(idx):
        row, col = idx
        return (col + 0.5) * grid.h, (row + 0.5) * grid.h

    for i, s in enumerate(solver.sources):
        x, y = cell_center(s.grid_idx)
        ax.plot(x, y, 'k*', markersize=12, label='Source' if i == 0 else None)

    for j, l in enumerate(solver.listeners):
        x, y = cell_center(l.grid_idx)
        ax.plot(x, y, 'go', markersize=8, label='Probe' if j == 0 else None)

    ax.set_title(f"{solver.scheme.value} | t = {solver.time():.4e}s | E = {solver.energy():.4e}")
    ax.set_xlabel("X [m]")
    ax.set_ylabel("Y [m]")
    if solver.sources or solver.listeners:
        ax.legend(loc='upper right')

    if show:
        plt.show()

    return image
