"""
Simulation configuration.

The configuration record is validated once with pydantic and is immutable
afterwards. Keys may be given in snake_case or in the camelCase spelling
used by external loaders (``waveSpeed``, ``cellSpacing``, ``initAmplitude``...).
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel, to_snake

from wavefield.exceptions import InvalidConfigurationError


class Scheme(str, Enum):
    """Time-integration scheme selector."""
    VELOCITY = "velocity"
    CENTRAL_DIFFERENCE = "central_difference"


class InitialCondition(str, Enum):
    """Initial displacement selector."""
    QUIESCENT = "quiescent"
    GAUSSIAN = "gaussian"
    IMPULSE = "impulse"


class Backend(str, Enum):
    """Array backend used by the integrator."""
    NUMPY = "numpy"
    JAX = "jax"


class SourceConfig(BaseModel):
    """
    Driven harmonic point source, ``amplitude * sin(angular_frequency * t)``.

    The source cell defaults to the grid center when ``row``/``col`` are omitted.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False, extra="forbid"
    )

    angular_frequency: float = Field(5.0, description="Angular frequency omega [rad/s]")
    amplitude: float = Field(1.0, description="Peak displacement imposed at the source cell")
    row: Optional[int] = Field(None, ge=0, description="Source row (default: height // 2)")
    col: Optional[int] = Field(None, ge=0, description="Source column (default: width // 2)")


class SimulationConfig(BaseModel):
    """
    Configuration record for a wave-field simulation.

    Attributes
    ----------
    width, height : int
        Cell counts along each axis.
    extent : float, optional
        Physical size along the width axis. Cell spacing is ``extent / width``.
    cell_spacing : float, optional
        Direct cell spacing. Mutually exclusive with ``extent``.
    wave_speed : float
        Propagation speed c.
    timestep : float
        Time step dt.
    init_amplitude : float
        Amplitude used by the Gaussian and impulse initializers.
    scheme : Scheme
        Velocity (symplectic Euler) or central-difference (leapfrog) integration.
    initial_condition : InitialCondition
        Quiescent, Gaussian pulse or impulse.
    sigma : float
        Gaussian pulse width in cell units.
    impulse_neighbor_ratio : float
        Fraction of ``init_amplitude`` given to the four neighbors of an impulse.
    source : SourceConfig, optional
        Driven source overwriting one cell after each step.
    backend : Backend
        ``numpy`` or ``jax``.
    halt_on_divergence : bool
        Raise ``DivergenceError`` as soon as the field becomes non-finite.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False, extra="forbid"
    )

    width: int = Field(..., gt=0, description="Number of cells along x")
    height: int = Field(..., gt=0, description="Number of cells along y")
    extent: Optional[float] = Field(None, gt=0.0, description="Physical size along x")
    cell_spacing: Optional[float] = Field(None, gt=0.0, description="Cell spacing h")
    wave_speed: float = Field(..., gt=0.0, description="Wave propagation speed c")
    timestep: float = Field(..., gt=0.0, description="Time step dt")
    init_amplitude: float = Field(1.0, description="Initial condition amplitude")
    scheme: Scheme = Scheme.VELOCITY
    initial_condition: InitialCondition = InitialCondition.GAUSSIAN
    sigma: float = Field(4.0, gt=0.0, description="Gaussian pulse width in cells")
    impulse_neighbor_ratio: float = Field(0.5, ge=0.0, description="Impulse neighbor amplitude ratio")
    source: Optional[SourceConfig] = None
    backend: Backend = Backend.NUMPY
    halt_on_divergence: bool = False

    @field_validator("scheme", "initial_condition", "backend", mode="before")
    @classmethod
    def normalize_selector(cls, v: Any) -> Any:
        """Accept camelCase spellings such as ``centralDifference``."""
        if isinstance(v, str) and not isinstance(v, Enum):
            return to_snake(v)
        return v

    @model_validator(mode="after")
    def validate_spacing(self) -> "SimulationConfig":
        if self.extent is not None and self.cell_spacing is not None:
            raise ValueError("Specify either 'extent' or 'cell_spacing', not both")
        if self.source is not None:
            if self.source.row is not None and self.source.row >= self.height:
                raise ValueError(f"Source row {self.source.row} outside grid of height {self.height}")
            if self.source.col is not None and self.source.col >= self.width:
                raise ValueError(f"Source column {self.source.col} outside grid of width {self.width}")
        return self

    @property
    def h(self) -> float:
        """Cell spacing derived from ``cell_spacing`` or ``extent``."""
        if self.cell_spacing is not None:
            return self.cell_spacing
        extent = self.extent if self.extent is not None else 1.0
        return extent / self.width

    @property
    def courant_number(self) -> float:
        """
        CFL number ``c * dt / h``.

        Values above 1 trigger an ``InstabilityWarning``. The strict bound for
        the 5-point stencil in 2D is ``1 / sqrt(2)``, so numbers between that
        and 1 may still grow slowly.
        """
        return self.wave_speed * self.timestep / self.h


def load_config(record: Mapping[str, Any]) -> SimulationConfig:
    """
    Validate a plain configuration mapping.

    Raises
    ------
    InvalidConfigurationError
        If any field is missing, out of range or inconsistent.
    """
    try:
        return SimulationConfig.model_validate(dict(record))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}" for err in exc.errors()
        )
        raise InvalidConfigurationError(
            f"Invalid simulation configuration ({problems})",
            suggested_action="width and height must be positive integers; wave_speed and timestep must be > 0.",
        ) from exc
