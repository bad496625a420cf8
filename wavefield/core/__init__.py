from .grid import Grid
from .state import CentralDifferenceState, FieldState, VelocityState
from .pdesolver import PDESolver

__all__ = ["CentralDifferenceState", "FieldState", "Grid", "PDESolver", "VelocityState"]
