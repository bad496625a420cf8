from typing import List, Optional, Tuple, Union
import numpy as np

from wavefield.core.grid import Grid


class PointSource:
    """
    Hard point source that overwrites one cell after every update.

    The cell is given either directly (``cell``) or as a physical position
    (``pos``); with neither, the source sits at the grid center.

    Parameters
    ----------
    cell : tuple of int, optional
        ``(row, col)`` of the driven cell.
    pos : float or list of float, optional
        Physical ``[x, y]`` position, converted when registered.

    Attributes
    ----------
    grid_idx : tuple of int or None
        ``(row, col)`` assigned by :meth:`register`.
    """

    def __init__(
        self,
        cell: Optional[Tuple[int, int]] = None,
        pos: Optional[Union[float, List[float]]] = None
    ) -> None:
        self.cell = cell
        self.pos = None if pos is None else np.atleast_1d(np.array(pos, dtype=float))
        self.grid_idx: Optional[Tuple[int, int]] = None

    def register(self, grid: Grid) -> None:
        """Resolve the driven cell on ``grid``. Called by the solver."""
        if self.cell is not None:
            # A partially specified cell falls back to the center along the missing axis
            center_row, center_col = grid.center
            row, col = self.cell
            row = center_row if row is None else row
            col = center_col if col is None else col
            if not grid.contains(row, col):
                raise ValueError(f"Source cell {(row, col)} lies outside {grid}")
            self.grid_idx = (int(row), int(col))
        elif self.pos is not None:
            self.grid_idx = grid.physical_to_index(self.pos)
        else:
            self.grid_idx = grid.center

    def value(self, t: float) -> float:
        """Displacement imposed at time ``t``."""
        raise NotImplementedError("Each source must define its signal")


class HarmonicSource(PointSource):
    """
    Sinusoidal driver ``amplitude * sin(angular_frequency * t + phase)``.
    """

    def __init__(
        self,
        angular_frequency: float = 5.0,
        amplitude: float = 1.0,
        phase: float = 0.0,
        cell: Optional[Tuple[int, int]] = None,
        pos: Optional[Union[float, List[float]]] = None
    ) -> None:
        super().__init__(cell=cell, pos=pos)
        self.angular_frequency = angular_frequency
        self.amplitude = amplitude
        self.phase = phase

    @classmethod
    def from_config(cls, source_config) -> "HarmonicSource":
        cell = None
        if source_config.row is not None or source_config.col is not None:
            cell = (source_config.row, source_config.col)
        return cls(
            angular_frequency=source_config.angular_frequency,
            amplitude=source_config.amplitude,
            cell=cell,
        )

    def value(self, t: float) -> float:
        return self.amplitude * np.sin(self.angular_frequency * t + self.phase)


class RickerSource(PointSource):
    """
    Ricker ("Mexican hat") wavelet, a band-limited single pulse.

    Parameters
    ----------
    peak_freq : float
        Peak frequency [Hz].
    delay : float
        Time of the wavelet maximum.
    amplitude : float, default=1.0
        Peak displacement.
    """

    def __init__(
        self,
        peak_freq: float,
        delay: float,
        amplitude: float = 1.0,
        cell: Optional[Tuple[int, int]] = None,
        pos: Optional[Union[float, List[float]]] = None
    ) -> None:
        super().__init__(cell=cell, pos=pos)
        self.fp = peak_freq
        self.dr = delay
        self.amp = amplitude

    def value(self, t: float) -> float:
        tau = np.pi * self.fp * (t - self.dr)
        return self.amp * (1 - 2 * tau**2) * np.exp(-tau**2)
