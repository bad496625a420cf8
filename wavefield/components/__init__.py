from .sources import HarmonicSource, PointSource, RickerSource
from .listeners import Listener

__all__ = ["HarmonicSource", "Listener", "PointSource", "RickerSource"]
