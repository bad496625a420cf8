import numpy as np

from wavefield.core.grid import Grid


def energy(u: np.ndarray, ut: np.ndarray, c: float, grid: Grid) -> float:
    """
    Discrete energy of the wave field.

    Computes ``0.5 * sum(ut**2 + c**2 * (ux**2 + uy**2))`` with centered
    gradients ``ux = (right - left) / 2h`` and ``uy = (bottom - top) / 2h``,
    taking neighbors through the zero Dirichlet boundary. Approximates the
    kinetic plus potential energy of the continuous field and is non-negative.

    Parameters
    ----------
    u : np.ndarray
        Displacement, shape ``(height, width)``.
    ut : np.ndarray
        Velocity du/dt, same shape as ``u``.
    c : float
        Wave speed.
    grid : Grid
        Grid providing spacing and neighbor lookup.

    Returns
    -------
    float
        Total energy.
    """
    u = np.asarray(u, dtype=float).reshape(grid.shape)
    ut = np.asarray(ut, dtype=float).reshape(grid.shape)

    left, right, top, bottom = grid.neighbor_fields(u)
    ux = (right - left) / (2.0 * grid.h)
    uy = (bottom - top) / (2.0 * grid.h)

    return float(0.5 * np.sum(ut**2 + c**2 * (ux**2 + uy**2)))


def mean_abs_displacement(u: np.ndarray) -> float:
    """
    Mean absolute displacement ``sum(|u|) / (width * height)``.

    Cheap debugging signal only: it is not a conserved or physical quantity.
    """
    u = np.asarray(u, dtype=float)
    return float(np.sum(np.abs(u)) / u.size)
