from .wave import CentralDifferenceWave, VelocityWave

__all__ = ["CentralDifferenceWave", "VelocityWave"]
