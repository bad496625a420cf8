"""
Exception and warning classes raised by the wave-field solvers.
"""

from typing import Optional


class WaveFieldError(Exception):
    """
    Base exception for wavefield errors.

    Parameters
    ----------
    message : str
        Description of the failure.
    suggested_action : str, optional
        Hint appended to the message to help the caller recover.
    """

    def __init__(self, message: str, suggested_action: Optional[str] = None) -> None:
        self.suggested_action = suggested_action

        full_message = message
        if suggested_action:
            full_message += f"\nSuggestion: {suggested_action}"

        super().__init__(full_message)


class InvalidConfigurationError(WaveFieldError, ValueError):
    """Raised when a simulation configuration record is rejected."""


class DivergenceError(WaveFieldError):
    """
    Raised when the field becomes non-finite and divergence checking is enabled.

    Attributes
    ----------
    sim_time : float
        Simulated time at which the non-finite values were detected.
    """

    def __init__(self, sim_time: float, courant_number: float) -> None:
        self.sim_time = sim_time
        self.courant_number = courant_number
        super().__init__(
            f"Field became non-finite at t={sim_time:.4e}s (Courant number {courant_number:.3f}).",
            suggested_action="Reduce the timestep so that wave_speed * timestep / cell_spacing <= 1.",
        )


class InstabilityWarning(UserWarning):
    """Issued when the configuration violates the CFL stability bound."""
