"""2D vector arithmetic.

Key components:
- Vector: mutable, chainable 2D vector
- rad_to_deg / deg_to_rad / random: standalone helpers
- VectorConfig: random range and seed settings

Usage:
    from vector2d import Vector, deg_to_rad
"""

from .config import VectorConfig, get_config, get_rng, reset_config, seed, set_config
from .utils import deg_to_rad, rad_to_deg, random
from .vector import Vector


__all__ = [
    # Vector
    "Vector",
    # Helpers
    "rad_to_deg",
    "deg_to_rad",
    "random",
    # Config
    "VectorConfig",
    "get_config",
    "set_config",
    "reset_config",
    "get_rng",
    "seed",
]
