"""Helpers shared by the topology builders."""

from __future__ import annotations

import math
import numbers

from netinsight.config import CanvasConfig
from netinsight.errors import InvalidParameterError
from netinsight.graph_store import GraphStore, Node
from netinsight.random_source import RandomSource, uniform

DEFAULT_CANVAS = CanvasConfig()


def require_int(name: str, value: int, minimum: int, maximum: int | None = None) -> int:
    """Validate an integer parameter and return it as a plain ``int``.

    Any :class:`numbers.Integral` is accepted (numpy integers included) except
    ``bool``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise InvalidParameterError(f"{name} must be <= {maximum}, got {value}")
    return int(value)


def require_unit_interval(name: str, value: float) -> float:
    """Validate a probability-like parameter in ``[0, 1]``."""
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from e
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidParameterError(f"{name} must be within [0, 1], got {value}")
    return value


def random_point(rng: RandomSource, canvas: CanvasConfig) -> tuple[float, float]:
    return uniform(rng, 0.0, canvas.size), uniform(rng, 0.0, canvas.size)


def scatter_nodes(
    store: GraphStore, count: int, rng: RandomSource, canvas: CanvasConfig
) -> list[Node]:
    """Add ``count`` nodes at uniform random canvas positions."""
    return [store.add_node(*random_point(rng, canvas)) for _ in range(count)]
