from __future__ import annotations

import math
from typing import Any, Dict, Hashable, Iterable, Mapping, Tuple, TypeVar, Union

from .exceptions import WeightError

T = TypeVar("T", bound=Hashable)

WeightedValues = Union[Mapping[T, float], Iterable[Tuple[T, float]]]


def as_weight_dict(weighted_values: Any) -> Dict[Any, float]:
    """Copy a mapping (or iterable of ``(item, weight)`` pairs) into a new ordered dict.

    Raises TypeError for ``None`` and anything that is not a mapping or pair iterable.
    """
    if weighted_values is None:
        raise TypeError("Expected a mapping of weights, got None")
    if isinstance(weighted_values, Mapping):
        return dict(weighted_values.items())
    try:
        return dict(weighted_values)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected a mapping of weights, got {type(weighted_values).__name__}") from exc


def normalize_weights(weighted_values: WeightedValues) -> Dict[T, float]:
    """Scale weights proportionally so they add up to 1.

    If every weight is zero each item gets ``1 / len(mapping)``. The input is left
    untouched and a new dict is returned.

    Raises:
        WeightError: if any weight is negative or NaN.
    """
    weights = as_weight_dict(weighted_values)
    weight_sum = 0.0
    for value, weight in weights.items():
        if math.isnan(weight) or weight < 0:
            raise WeightError(f"Cannot normalize with weight {weight} for {value!r}")
        weight_sum += weight
    size = len(weights)
    if weight_sum == 0:
        return {value: 1 / size for value in weights}
    return {value: weight / weight_sum for value, weight in weights.items()}


__all__ = ["normalize_weights", "as_weight_dict", "WeightedValues"]
