from .core.vector import Vector3, parse_vector

__version__ = "1.0.0"

__all__ = ["Vector3", "parse_vector", "__version__"]
