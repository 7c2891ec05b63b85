from __future__ import annotations

import logging
import math
import threading
from typing import Any, Callable, ClassVar, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, TypeVar

from .exceptions import InvalidArgument, SelectionError
from .generators.base import DefaultGenerator
from .weighting import WeightedValues, as_weight_dict, normalize_weights

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Slack for float summation error so normalized weights always select their last item
WEIGHT_EPSILON = 1e-15

_MISSING = object()


def _as_list(values: Any) -> List[Any]:
    if values is None:
        raise TypeError("Expected an iterable of values, got None")
    try:
        return list(values)
    except TypeError as exc:
        raise TypeError(f"Expected an iterable of values, got {type(values).__name__}") from exc


class Randomness:
    """Derived random values built on a single unit generator.

    The generator is any zero-argument callable returning a float in [0, 1). Every
    operation here pulls draws from it and transforms them; nothing else is stored.
    Drawing mutates the generator, so an instance must only be used from one thread
    at a time unless its generator locks its own draws (``DefaultGenerator`` does).

    Usage:
        rand = Randomness(MersenneTwister(123))
        rand.random_int(1, 7)
        rand.weighted_choice({"sword": 0.1, "potion": 0.9})
    """

    _default: ClassVar[Optional["Randomness"]] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    normalize_weights = staticmethod(normalize_weights)

    def __init__(self, generator: Optional[Callable[[], float]] = None) -> None:
        if generator is None:
            generator = DefaultGenerator()
        elif not callable(generator):
            raise InvalidArgument(f"Unsupported random number generator {generator!r}!")
        self._generator = generator

    @classmethod
    def default(cls) -> "Randomness":
        """Process-wide instance over ``DefaultGenerator``, built on first use."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    logger.debug("Creating default Randomness instance")
                    cls._default = Randomness()
        return cls._default

    @property
    def generator(self) -> Callable[[], float]:
        return self._generator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._generator!r})"

    # ------------------------ Numbers ------------------------
    def random(self, low: Optional[float] = None, high: Optional[float] = None) -> float:
        """Return a random float.

        - no bounds: in [0, 1)
        - only ``low``: in [0, low)
        - both: in [low, high), computed as ``(1 - n) * low + n * high``

        The upper bounds are exclusive only while the generator stays below 1.
        ``MersenneTwister`` emits ``word / 0xFFFFFFFF`` and so returns exactly 1.0
        for an all-ones word (about once in 2**32 draws); the result then equals
        ``low`` (one bound) or ``high`` (two bounds).
        """
        n = self._generator()
        if high is None:
            if low is None:
                return n
            return n * low
        if low is None:
            raise TypeError("A high bound requires a low bound")
        return (1 - n) * low + n * high

    def random_int(self, low: Optional[float] = None, high: Optional[float] = None) -> int:
        """Like ``random`` but floored to an int; defaults to the range [0, 100).

        A unit draw of exactly 1.0 (see ``random``) yields the upper bound itself,
        e.g. 100 with no bounds given.
        """
        if low is None and high is None:
            low, high = 0, 100
        return math.floor(self.random(low, high))

    def random_bool(self, probability: float = 0.5) -> bool:
        return self.random() < float(probability)

    def randoms(self, n: int, low: Optional[float] = None, high: Optional[float] = None) -> Iterator[float]:
        """Lazily yield ``n`` independent ``random(low, high)`` values."""
        for _ in range(max(int(n), 0)):
            yield self.random(low, high)

    # ------------------------ Sequences ------------------------
    def _index(self, size: int) -> int:
        # A unit draw of exactly 1.0 (MersenneTwister's all-ones word) still maps to the last index
        return min(self.random_int(size), size - 1)

    def choice(self, values: Iterable[T]) -> Optional[T]:
        """Return a random element, or None when ``values`` is empty."""
        if values is None:
            raise TypeError("Expected an iterable of values, got None")
        seq = values if isinstance(values, Sequence) else _as_list(values)
        if len(seq) < 1:
            return None
        return seq[self._index(len(seq))]

    def choices(self, n: int, values: Iterable[T]) -> List[T]:
        """Return ``n`` distinct positions of ``values`` in random order."""
        return self.split(n, values)[0]

    def split(self, n: int, values: Iterable[T]) -> Tuple[List[T], List[T]]:
        """Randomly split ``values`` into ``(taken, remaining)`` with ``len(taken) == n``.

        ``n`` is clamped to [0, len(values)]. ``taken`` is in removal order and the
        input is never modified.
        """
        source = _as_list(values)
        taken: List[T] = []
        for _ in range(min(len(source), max(int(n), 0))):
            taken.append(source.pop(self._index(len(source))))
        return taken, source

    def shuffle(self, values: Iterable[T]) -> List[T]:
        """Return a shuffled copy of ``values``.

        Built on ``choices`` so each removal is O(n), O(n^2) overall.
        """
        source = _as_list(values)
        return self.choices(len(source), source)

    # ------------------------ Weighted choices ------------------------
    def weighted_choice(self, weighted_values: WeightedValues, default: Any = _MISSING) -> Any:
        """Choose one item with probability given by its (already normalized) weight.

        Raises:
            SelectionError: if the weights run out before the draw is reached and
                no ``default`` was given. Usually the weights were not normalized.
        """
        weights = weighted_values if isinstance(weighted_values, Mapping) else as_weight_dict(weighted_values)
        chance = self.random()
        for value, weight in weights.items():
            chance -= weight
            if chance <= WEIGHT_EPSILON:
                return value
        if default is _MISSING:
            raise SelectionError("Weighted choice failed. Are weights normalized?")
        return default

    def weighted_choices(self, n: int, weighted_values: WeightedValues) -> Iterator[Any]:
        """Lazily choose up to ``n`` distinct items, weighted, without replacement.

        When ``n`` covers the whole mapping every item is returned in mapping order
        and the weights are not consulted.
        """
        weights = as_weight_dict(weighted_values)
        count = max(int(n), 0)
        if count >= len(weights):
            return iter(list(weights))
        return self._sample_without_replacement(count, weights)

    def _sample_without_replacement(self, n: int, weights: Dict[Any, float]) -> Iterator[Any]:
        # Chosen weights are not renormalized; the draw range shrinks instead.
        remaining_mass = 1.0
        for _ in range(n):
            chance = self.random(remaining_mass)
            chosen = _MISSING
            for value, weight in weights.items():
                chance -= weight
                if chance <= 0:
                    chosen = value
                    break
            if chosen is _MISSING:
                continue
            remaining_mass -= weights.pop(chosen)
            yield chosen

    # ------------------------ Distributions ------------------------
    def averaged_distribution(self, k: int = 2) -> "Randomness":
        """Build a Randomness whose draws average ``k`` (at least 2) draws of this one.

        Range stays [0, 1) while the density bunches around 0.5 as ``k`` grows.
        """
        count = max(int(k), 2)
        generator = self._generator

        def averaged() -> float:
            total = 0.0
            for _ in range(count):
                total += generator()
            return total / count

        return Randomness(averaged)


def default_randomness() -> Randomness:
    """Shortcut for ``Randomness.default()``."""
    return Randomness.default()


__all__ = ["Randomness", "default_randomness", "WEIGHT_EPSILON"]
