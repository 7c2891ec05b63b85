"""Seedable pseudorandom generators and the sampling helpers built on them.

Not suitable for cryptographic use.
"""

from .config import GeneratorConfig, build_randomness, load_config
from .core import Randomness, default_randomness
from .exceptions import ConfigError, InvalidArgument, RandomnessError, SelectionError, WeightError
from .generators import DefaultGenerator, LinearCongruential, MersenneTwister, UnitGenerator
from .weighting import normalize_weights

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DefaultGenerator",
    "GeneratorConfig",
    "InvalidArgument",
    "LinearCongruential",
    "MersenneTwister",
    "Randomness",
    "RandomnessError",
    "SelectionError",
    "UnitGenerator",
    "WeightError",
    "build_randomness",
    "default_randomness",
    "load_config",
    "normalize_weights",
    "__version__",
]
