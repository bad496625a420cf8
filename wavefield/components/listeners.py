from typing import List, Optional, Tuple, Union
import numpy as np

from wavefield.core.grid import Grid
from wavefield.utils.utils import find_first_arrival


class Listener:
    """
    Point probe recording the displacement of one cell after every step.

    Parameters
    ----------
    cell : tuple of int, optional
        ``(row, col)`` of the probed cell.
    pos : float or list of float, optional
        Physical ``[x, y]`` position, used when ``cell`` is not given.
    tag : str, default='probe'
        Label for plotting and debugging.

    Attributes
    ----------
    grid_idx : tuple of int or None
        Cell assigned by :meth:`register`.
    history : list of float
        Recorded displacement values.
    times : list of float
        Simulation times of the recorded values.
    """

    def __init__(
        self,
        cell: Optional[Tuple[int, int]] = None,
        pos: Optional[Union[float, List[float]]] = None,
        tag: str = 'probe'
    ) -> None:
        if cell is None and pos is None:
            raise ValueError(f"Listener '{tag}' needs either a cell or a position")
        self.cell = cell
        self.pos = None if pos is None else np.atleast_1d(np.array(pos, dtype=float))
        self.tag = tag
        self.grid_idx: Optional[Tuple[int, int]] = None
        self.history: List[float] = []
        self.times: List[float] = []

    def register(self, grid: Grid) -> None:
        """Resolve the probed cell on ``grid``. Called by the solver."""
        if self.cell is not None:
            row, col = self.cell
            if not grid.contains(row, col):
                raise ValueError(f"Listener '{self.tag}' cell {self.cell} lies outside {grid}")
            self.grid_idx = (int(row), int(col))
        else:
            self.grid_idx = grid.physical_to_index(self.pos)

    def reset(self) -> None:
        """Clear recorded data for a new simulation run."""
        self.history = []
        self.times = []

    def record(self, t: float, u_field) -> None:
        if self.grid_idx is None:
            raise ValueError(f"Listener '{self.tag}' has not been registered with a solver.")

        self.history.append(float(u_field[self.grid_idx]))
        self.times.append(t)

    def get_time_series(self) -> Tuple[np.ndarray, np.ndarray]:
        return np.array(self.times), np.array(self.history)

    def compute_spectrum(self) -> Tuple[Optional[np.ndarray], Optional[np.ndarray]]:
        """Compute frequency spectrum using Real FFT."""
        times, signal = self.get_time_series()
        n = len(signal)
        if n < 2:
            return None, None

        dt = times[1] - times[0]
        fft_data = np.fft.rfft(signal)
        freqs = np.fft.rfftfreq(n, d=dt)

        return freqs, np.abs(fft_data)

    def first_arrival_time(self, threshold_ratio: float = 0.1) -> Optional[float]:
        """
        Time of the first significant peak of ``|u|`` at this probe.

        Returns None when nothing has been recorded or the signal stayed at zero.
        """
        times, signal = self.get_time_series()
        if len(signal) == 0 or not np.any(signal):
            return None

        idx = find_first_arrival(np.abs(signal), threshold_ratio=threshold_ratio)
        return float(times[idx])
