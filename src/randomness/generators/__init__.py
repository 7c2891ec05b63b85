"""Unit generators: zero-argument callables producing floats in [0, 1)."""

from .base import DefaultGenerator, UnitGenerator, resolve_seed
from .linear_congruential import LinearCongruential
from .mersenne_twister import MersenneTwister

__all__ = [
    "DefaultGenerator",
    "LinearCongruential",
    "MersenneTwister",
    "UnitGenerator",
    "resolve_seed",
]
