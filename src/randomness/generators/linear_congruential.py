"""Linear congruential pseudorandom generator.

See https://en.wikipedia.org/wiki/Linear_congruential_generator. Python
integers never overflow, so ``multiplier * current`` is exact for any modulus.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Optional, Tuple

from ..exceptions import InvalidArgument
from .base import resolve_seed

logger = logging.getLogger(__name__)

NUMERICAL_RECIPES = (0xFFFFFFFF, 1664525, 1013904223)
BORLAND_C = (0xFFFFFFFF, 22695477, 1)
GLIBC = (0xFFFFFFFF, 1103515245, 12345)


class LinearCongruential:
    """``current = (multiplier * current + increment) % modulus``, emitting ``current / modulus``."""

    def __init__(self, modulus: int, multiplier: int, increment: int, seed: Optional[Any] = None) -> None:
        if not isinstance(modulus, Integral) or modulus <= 0:
            raise InvalidArgument(f"Modulus must be a positive integer, got {modulus!r}")
        self._modulus = int(modulus)
        self._multiplier = int(multiplier)
        self._increment = int(increment)
        self._seed = resolve_seed(seed)
        # Same recurrence output as the raw seed, but keeps current within [0, modulus)
        self.current = self._seed % self._modulus

    @property
    def parameters(self) -> Tuple[int, int, int, int]:
        """``(modulus, multiplier, increment, seed)`` as resolved at construction."""
        return self._modulus, self._multiplier, self._increment, self._seed

    def __call__(self) -> float:
        self.current = (self._multiplier * self.current + self._increment) % self._modulus
        return self.current / self._modulus

    def __repr__(self) -> str:
        m, a, c, seed = self.parameters
        return f"LinearCongruential(modulus={m:#x}, multiplier={a}, increment={c}, seed={seed})"

    # Presets

    @classmethod
    def numerical_recipes(cls, seed: Optional[Any] = None) -> "LinearCongruential":
        """Constants from Numerical Recipes."""
        logger.debug("Building numerical_recipes LCG")
        return cls(*NUMERICAL_RECIPES, seed=seed)

    @classmethod
    def borland_c(cls, seed: Optional[Any] = None) -> "LinearCongruential":
        """Constants used by the Borland C/C++ runtime."""
        logger.debug("Building borland_c LCG")
        return cls(*BORLAND_C, seed=seed)

    @classmethod
    def glibc(cls, seed: Optional[Any] = None) -> "LinearCongruential":
        """Constants used by glibc's ``rand``."""
        logger.debug("Building glibc LCG")
        return cls(*GLIBC, seed=seed)


__all__ = ["LinearCongruential", "NUMERICAL_RECIPES", "BORLAND_C", "GLIBC"]
