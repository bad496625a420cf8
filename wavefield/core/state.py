from typing import Any


class FieldState:
    """
    Per-cell arrays owned by a solver plus the elapsed simulation time.

    Arrays are 2D ``(height, width)`` in row-major order. Each step replaces
    them with a new generation rather than writing into them.
    """

    def __init__(self, sim_time: float = 0.0) -> None:
        self.sim_time = float(sim_time)

    @property
    def displacement(self) -> Any:
        raise NotImplementedError("Child state must expose its displacement field")

    @staticmethod
    def _check_shapes(a: Any, b: Any) -> None:
        if a.shape != b.shape:
            raise ValueError(f"Field arrays must share a shape, got {a.shape} and {b.shape}")


class VelocityState(FieldState):
    """
    State of the velocity (symplectic Euler) scheme.

    Attributes
    ----------
    displacement : array
        u at the current time.
    velocity : array
        du/dt at the current time.
    """

    def __init__(self, displacement: Any, velocity: Any, sim_time: float = 0.0) -> None:
        super().__init__(sim_time)
        self._check_shapes(displacement, velocity)
        self._displacement = displacement
        self.velocity = velocity

    @property
    def displacement(self) -> Any:
        return self._displacement

    @displacement.setter
    def displacement(self, value: Any) -> None:
        self._displacement = value


class CentralDifferenceState(FieldState):
    """
    State of the three-level central-difference (leapfrog) scheme.

    Attributes
    ----------
    current : array
        u at time t (u_n).
    previous : array
        u at time t - dt (u_{n-1}).
    """

    def __init__(self, current: Any, previous: Any, sim_time: float = 0.0) -> None:
        super().__init__(sim_time)
        self._check_shapes(current, previous)
        self.current = current
        self.previous = previous

    @property
    def displacement(self) -> Any:
        return self.current
