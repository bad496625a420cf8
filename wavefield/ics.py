from typing import Callable, Dict, Optional, Tuple, Union
import numpy as np

from wavefield.config import InitialCondition, SimulationConfig
from wavefield.core.grid import Grid


def quiescent(grid: Grid) -> np.ndarray:
    """All-zero field."""
    return np.zeros(grid.shape)


def gaussian_value(
    offset: Tuple[Union[float, np.ndarray], Union[float, np.ndarray]],
    amplitude: float,
    sigma: float
) -> Union[float, np.ndarray]:
    """
    Normalized Gaussian evaluated at a cell offset from the pulse center.

    Parameters
    ----------
    offset : tuple
        ``(dx, dy)`` in cell units. Scalars or arrays.
    amplitude : float
        Scale factor applied to the normalized profile.
    sigma : float
        Standard deviation in cell units.

    Returns
    -------
    float or np.ndarray
        ``exp(-0.5 * (dist / sigma)**2) / (sigma * sqrt(2*pi)) * amplitude``.
        Depends on the offset only through its length, so the pulse is
        radially symmetric.
    """
    dx, dy = offset
    dist = np.sqrt(np.square(dx) + np.square(dy))
    return np.exp(-0.5 * (dist / sigma)**2) / (sigma * np.sqrt(2.0 * np.pi)) * amplitude


def gaussian_pulse(
    grid: Grid,
    amplitude: float,
    sigma: float,
    center: Optional[Tuple[int, int]] = None
) -> np.ndarray:
    """
    Gaussian pulse centered on a cell.

    Parameters
    ----------
    grid : Grid
        Target grid.
    amplitude : float
        Pulse amplitude (``init_amplitude``).
    sigma : float
        Pulse width in cell units.
    center : tuple of int, optional
        ``(row, col)`` of the pulse center. Defaults to the grid center.
    """
    center_row, center_col = grid.center if center is None else center

    rows, cols = np.indices(grid.shape)
    return gaussian_value((cols - center_col, rows - center_row), amplitude, sigma)


def impulse(grid: Grid, amplitude: float, neighbor_ratio: float = 0.5) -> np.ndarray:
    """
    Point impulse at the grid center.

    The center cell is set to ``amplitude`` and its four axis neighbors to
    ``amplitude * neighbor_ratio`` (``neighbor_ratio=1.0`` gives the
    full-amplitude cross). Neighbors falling outside tiny grids are skipped.
    """
    u = np.zeros(grid.shape)
    row, col = grid.center

    for d_row, d_col in [(0, -1), (0, 1), (-1, 0), (1, 0)]:
        if grid.contains(row + d_row, col + d_col):
            u[row + d_row, col + d_col] = amplitude * neighbor_ratio
    u[row, col] = amplitude

    return u


def get_normal_mode_dirichlet(
    n: int,
    m: int,
    Lx: float,
    Ly: float,
    origin: Tuple[float, float] = (0.0, 0.0)
) -> Callable[[np.ndarray, np.ndarray], np.ndarray]:
    """
    Generate a Dirichlet normal mode shape for a rectangular domain.

    Parameters
    ----------
    n : int
        Mode number in x-direction.
    m : int
        Mode number in y-direction.
    Lx : float
        Distance between the two zero lines in x.
    Ly : float
        Distance between the two zero lines in y.
    origin : tuple of float, default=(0.0, 0.0)
        Position of the lower zero lines.

    Returns
    -------
    callable
        Function computing sin(nπ(x-x0)/Lx) * sin(mπ(y-y0)/Ly).
    """
    x0, y0 = origin

    def displacement(x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.sin(n * np.pi * (x - x0) / Lx) * np.sin(m * np.pi * (y - y0) / Ly)

    return displacement


def grid_normal_mode(grid: Grid, n: int, m: int) -> Callable[[np.ndarray, np.ndarray], np.ndarray]:
    """
    Normal mode vanishing on the zero ghost cells just outside ``grid``.

    The ghost ring sits at ``x = -h`` and ``x = width * h`` (likewise in y),
    which makes the mode an exact eigenvector of the 5-point Laplacian.
    """
    Lx = (grid.width + 1) * grid.h
    Ly = (grid.height + 1) * grid.h
    return get_normal_mode_dirichlet(n, m, Lx, Ly, origin=(-grid.h, -grid.h))


INITIALIZERS: Dict[InitialCondition, Callable[[Grid, SimulationConfig], np.ndarray]] = {
    InitialCondition.QUIESCENT: lambda grid, config: quiescent(grid),
    InitialCondition.GAUSSIAN: lambda grid, config: gaussian_pulse(grid, config.init_amplitude, config.sigma),
    InitialCondition.IMPULSE: lambda grid, config: impulse(
        grid, config.init_amplitude, config.impulse_neighbor_ratio
    ),
}


def initial_displacement(grid: Grid, config: SimulationConfig) -> np.ndarray:
    """Build the configured initial displacement field."""
    return INITIALIZERS[config.initial_condition](grid, config)
