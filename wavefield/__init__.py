"""
Explicit finite-difference integration of the 2D wave equation.

Typical use::

    from wavefield import create_simulation

    sim = create_simulation({"width": 100, "height": 100, "waveSpeed": 0.01, "timestep": 1e-4})
    field = sim.multi_step(10)
"""

import logging

from wavefield.exceptions import DivergenceError, InstabilityWarning, InvalidConfigurationError, WaveFieldError
from wavefield.config import Backend, InitialCondition, Scheme, SimulationConfig, SourceConfig, load_config
from wavefield.core import Grid, PDESolver
from wavefield.solvers import CentralDifferenceWave, VelocityWave
from wavefield.simulation import create_simulation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.2.0"

__all__ = [
    "Backend",
    "CentralDifferenceWave",
    "DivergenceError",
    "Grid",
    "InitialCondition",
    "InstabilityWarning",
    "InvalidConfigurationError",
    "PDESolver",
    "Scheme",
    "SimulationConfig",
    "SourceConfig",
    "VelocityWave",
    "WaveFieldError",
    "create_simulation",
    "load_config",
]
