"""
Construction of wave-field simulations from a configuration record.

The integration scheme is a tagged selector in the configuration; this module
maps each tag (and the requested array backend) to its solver class.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Type, Union

from wavefield.config import Backend, Scheme, SimulationConfig, load_config
from wavefield.core import PDESolver
from wavefield.core.pdesolver import FieldInitializer
from wavefield.solvers import CentralDifferenceWave, VelocityWave

logger = logging.getLogger(__name__)

SOLVERS: Dict[Scheme, Type[PDESolver]] = {
    Scheme.VELOCITY: VelocityWave,
    Scheme.CENTRAL_DIFFERENCE: CentralDifferenceWave,
}


def create_simulation(
    config: Union[SimulationConfig, Mapping[str, Any]],
    initial_u: Optional[FieldInitializer] = None,
    initial_ut: Optional[FieldInitializer] = None
) -> PDESolver:
    """
    Build the solver selected by ``config.scheme`` and ``config.backend``.

    Parameters
    ----------
    config : SimulationConfig or mapping
        Validated config, or a plain record validated with :func:`load_config`.
    initial_u : callable, optional
        Initial displacement u(X, Y), overriding ``config.initial_condition``.
    initial_ut : callable, optional
        Initial velocity du/dt(X, Y).

    Returns
    -------
    PDESolver
        Ready-to-step simulation exposing ``step``, ``multi_step``, ``energy``,
        ``time`` and ``field``.

    Raises
    ------
    InvalidConfigurationError
        If a plain record fails validation.
    """
    if not isinstance(config, SimulationConfig):
        config = load_config(config)

    if config.backend is Backend.JAX:
        from wavefield.solvers.wave_jax import WaveJAX
        return WaveJAX(config, initial_u=initial_u, initial_ut=initial_ut)

    solver_class = SOLVERS[config.scheme]
    logger.debug("Selected %s for scheme '%s'", solver_class.__name__, config.scheme.value)
    return solver_class(config, initial_u=initial_u, initial_ut=initial_ut)
