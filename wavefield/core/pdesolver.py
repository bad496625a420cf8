import logging
import warnings
from typing import Callable, List, Optional

import numpy as np

from wavefield.components.sources import HarmonicSource
from wavefield.config import Scheme, SimulationConfig
from wavefield.core import diagnostics
from wavefield.core.grid import Grid
from wavefield.core.state import FieldState
from wavefield.exceptions import DivergenceError, InstabilityWarning
from wavefield import ics

logger = logging.getLogger(__name__)

FieldInitializer = Callable[[np.ndarray, np.ndarray], np.ndarray]


class PDESolver:
    """
    Base class for explicit finite-difference wave-field integrators.

    Binds the configuration to a :class:`Grid`, owns the :class:`FieldState`,
    and provides the stepping API, the 5-point Laplacian with zero Dirichlet
    ghost cells, driven sources and listeners. Child classes implement the
    scheme-specific ``initialize_state`` and ``advance``.

    Parameters
    ----------
    config : SimulationConfig
        Validated simulation configuration.
    initial_u : callable, optional
        Initial displacement u(X, Y). Overrides ``config.initial_condition``.
    initial_ut : callable, optional
        Initial velocity du/dt(X, Y). Defaults to zero.

    Attributes
    ----------
    grid : Grid
        Grid accessor.
    c : float
        Wave speed.
    dt : float
        Time step.
    state : FieldState
        Current generation of the field.
    sources : list
        Registered driven sources.
    listeners : list
        Registered probes.
    """

    scheme: Scheme

    def __init__(
        self,
        config: SimulationConfig,
        initial_u: Optional[FieldInitializer] = None,
        initial_ut: Optional[FieldInitializer] = None
    ) -> None:
        self.config = config
        self.grid = Grid.from_config(config)
        self.c = config.wave_speed
        self.dt = config.timestep
        self.phi = initial_u
        self.psi = initial_ut
        self.sources: List = []
        self.listeners: List = []
        self.state: FieldState

        if config.courant_number > 1.0:
            message = (
                f"CFL condition violated: c*dt/h = {config.courant_number:.3f} > 1; "
                f"the {self.scheme.value} scheme is not guaranteed to be stable."
            )
            logger.warning(message)
            warnings.warn(message, InstabilityWarning, stacklevel=2)

        if config.source is not None:
            self.add_source(HarmonicSource.from_config(config.source))

        self.initialize_state()

        logger.info(
            "Created %s solver on %dx%d grid (h=%.3e, c=%.3e, dt=%.3e, Courant=%.3e)",
            self.scheme.value, self.grid.width, self.grid.height,
            self.grid.h, self.c, self.dt, config.courant_number
        )

    # --- Initial conditions ---

    def initial_displacement(self) -> np.ndarray:
        """Initial u from the explicit callable or the configured initializer."""
        if self.phi is not None:
            u = np.asarray(self.phi(*self.grid.grids), dtype=float)
        else:
            u = ics.initial_displacement(self.grid, self.config)
        return np.broadcast_to(u, self.grid.shape).astype(float)

    def initial_velocity(self) -> np.ndarray:
        """Initial du/dt from the explicit callable, zero otherwise."""
        if self.psi is None:
            return np.zeros(self.grid.shape)
        ut = np.asarray(self.psi(*self.grid.grids), dtype=float)
        return np.broadcast_to(ut, self.grid.shape).astype(float)

    def initialize_state(self) -> None:
        """Initialize field variables. Must be implemented by child classes."""
        raise NotImplementedError("Child solver must implement initialize_state")

    # --- Spatial operators and sources ---

    def laplacian(self, u: np.ndarray) -> np.ndarray:
        """
        5-point Laplacian with zero ghost cells outside the grid.

        Parameters
        ----------
        u : np.ndarray
            Field of shape ``(height, width)``.

        Returns
        -------
        np.ndarray
            ``(l - 2u + r)/h² + (t - 2u + b)/h²`` for every cell.
        """
        left, right, top, bottom = self.grid.neighbor_fields(u)
        h_sq = self.grid.h**2
        return (left - 2 * u + right) / h_sq + (top - 2 * u + bottom) / h_sq

    def add_source(self, source) -> None:
        """Register a driven source; its cell is resolved on this grid."""
        source.register(self.grid)
        self.sources.append(source)

    def add_listener(self, listener) -> None:
        """Register a probe; its cell is resolved on this grid."""
        listener.register(self.grid)
        self.listeners.append(listener)

    def impose_sources(self, u: np.ndarray, t: float) -> np.ndarray:
        """Overwrite each source cell of ``u`` with the source value at time ``t``."""
        for source in self.sources:
            u[source.grid_idx] = source.value(t)
        return u

    # --- Stepping API ---

    def advance(self) -> None:
        """Replace ``self.state`` with the next generation. Must be implemented by child classes."""
        raise NotImplementedError("Child solver must implement its own time-stepping logic.")

    def step(self) -> np.ndarray:
        """
        Advance the solution by exactly one time step.

        Returns
        -------
        np.ndarray
            Read-only flat view of the displacement field after the step.

        Raises
        ------
        DivergenceError
            If ``halt_on_divergence`` is set and the field became non-finite.
        """
        self.advance()

        if self.config.halt_on_divergence:
            self._check_divergence()

        for listener in self.listeners:
            listener.record(self.t, self.state.displacement)

        return self.field

    def multi_step(self, n: int) -> np.ndarray:
        """
        Advance ``n`` time steps by calling :meth:`step` sequentially.

        ``n == 0`` leaves the state untouched and returns the current field.
        """
        if n < 0:
            raise ValueError(f"Number of steps must be non-negative, got {n}")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("sim time: %.4e | energy: %.4e", self.time(), self.energy())

        for _ in range(n):
            self.step()

        return self.field

    def _check_divergence(self) -> None:
        if not np.all(np.isfinite(np.asarray(self.state.displacement))):
            logger.warning("Non-finite field detected at t=%.4e", self.t)
            raise DivergenceError(self.t, self.config.courant_number)

    def reset(self) -> None:
        """
        Reset simulation to its initial state.

        Clears listener history and reinitializes field variables while
        keeping sources and listeners registered.
        """
        for listener in self.listeners:
            listener.reset()

        self.initialize_state()
        logger.info("Solver reset to t=0.0s.")

    # --- Read access and diagnostics ---

    @property
    def t(self) -> float:
        return self.state.sim_time

    def time(self) -> float:
        """Elapsed simulated time."""
        return self.state.sim_time

    @property
    def field(self) -> np.ndarray:
        """Read-only row-major view of the displacement, length ``width * height``."""
        view = np.asarray(self.state.displacement).reshape(-1).view()
        view.flags.writeable = False
        return view

    def velocity(self) -> np.ndarray:
        """du/dt at the current time. Must be implemented by child classes."""
        raise NotImplementedError("Child solver must implement velocity")

    def energy(self) -> float:
        """Quadratic kinetic plus potential energy of the current state."""
        return diagnostics.energy(self.state.displacement, self.velocity(), self.c, self.grid)

    def mean_abs_displacement(self) -> float:
        """Mean |u| over the grid; a non-physical debugging signal."""
        return diagnostics.mean_abs_displacement(self.state.displacement)
