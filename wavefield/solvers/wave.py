import numpy as np

from wavefield.config import Scheme
from wavefield.core import PDESolver
from wavefield.core.state import CentralDifferenceState, VelocityState


class VelocityWave(PDESolver):
    """
    Wave solver in velocity form (semi-implicit / symplectic Euler).

    Solves ∂²u/∂t² = c²∇²u as the first-order system u_t = v, v_t = c²∇²u.
    Each step reads only the previous generation::

        v' = v + c²∇²u * dt
        u' = u + v * dt

    The displacement update uses the pre-update velocity ``v``.

    Attributes
    ----------
    state : VelocityState
        Current ``displacement`` and ``velocity``.
    """

    scheme = Scheme.VELOCITY

    def initialize_state(self) -> None:
        """Set displacement from the initializer and velocity from ``initial_ut``."""
        u = self.initial_displacement()
        v = self.initial_velocity()
        self.state = VelocityState(u, v)

    def advance(self) -> None:
        u = self.state.displacement
        v = self.state.velocity
        t = self.state.sim_time

        accel = self.c**2 * self.laplacian(u)
        v_next = v + accel * self.dt
        u_next = u + v * self.dt

        self.impose_sources(u_next, t)

        self.state = VelocityState(u_next, v_next, t + self.dt)

    def velocity(self) -> np.ndarray:
        return self.state.velocity


class CentralDifferenceWave(PDESolver):
    """
    Wave solver using the explicit three-level central-difference (leapfrog) scheme.

    Computes u^{n+1} = 2u^n - u^{n-1} + (c*dt)²∇²u^n, then overwrites the
    driven source cells with their value at the pre-step time.

    Attributes
    ----------
    state : CentralDifferenceState
        ``current`` (u^n) and ``previous`` (u^{n-1}).
    """

    scheme = Scheme.CENTRAL_DIFFERENCE

    def initialize_state(self) -> None:
        """Set u^0 from the initializer and u^{-1} = u^0 - dt * u_t(0)."""
        u_curr = self.initial_displacement()
        u_prev = u_curr - self.dt * self.initial_velocity()
        self.state = CentralDifferenceState(u_curr, u_prev)

    def advance(self) -> None:
        u_curr = self.state.current
        u_prev = self.state.previous
        t = self.state.sim_time

        u_next = 2 * u_curr - u_prev + (self.c * self.dt)**2 * self.laplacian(u_curr)

        self.impose_sources(u_next, t)

        self.state = CentralDifferenceState(u_next, u_curr, t + self.dt)

    def velocity(self) -> np.ndarray:
        """Backward-difference estimate (u^n - u^{n-1}) / dt."""
        return (self.state.current - self.state.previous) / self.dt
