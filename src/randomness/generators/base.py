from __future__ import annotations

import logging
import math
import random
import threading
import time
from numbers import Real
from typing import Any, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class UnitGenerator(Protocol):
    """Anything that produces a pseudorandom float in [0, 1) when called without arguments.

    Drawing mutates generator state, so a single generator instance must not be
    shared between threads without external locking. ``DefaultGenerator`` is the
    only variant that guards its own draws.
    """

    def __call__(self) -> float:
        ...


def resolve_seed(seed: Any) -> int:
    """Return ``floor(seed)`` or, if the seed is not a usable number, the wall clock in ms."""
    if isinstance(seed, Real) and not isinstance(seed, bool) and math.isfinite(seed):
        return math.floor(seed)
    now = int(time.time() * 1000)
    if seed is None:
        logger.debug("No seed given; seeding from wall clock: %d", now)
    else:
        logger.debug("Unusable seed %r; seeding from wall clock: %d", seed, now)
    return now


class DefaultGenerator:
    """Unit generator backed by the host platform's ``random.Random``.

    Each draw takes an internal lock, so one instance can be shared process-wide.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._lock = threading.Lock()
        self._rng = random.Random(seed)
        if seed is not None:
            logger.debug("Initialized DefaultGenerator with deterministic seed=%s", seed)
        else:
            logger.debug("Initialized DefaultGenerator with non-deterministic seed")

    def __call__(self) -> float:
        with self._lock:
            return self._rng.random()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["UnitGenerator", "DefaultGenerator", "resolve_seed"]
