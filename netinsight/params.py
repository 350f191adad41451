"""Parameter bag for topology generation requests."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from netinsight.errors import InvalidParameterError

# Request keys as sent by the UI layer, mapped to field names.
CAMEL_CASE_KEYS: dict[str, str] = {
    "nodeCount": "node_count",
    "rows": "rows",
    "cols": "cols",
    "probability": "probability",
    "edgesToAttach": "edges_to_attach",
    "nearestNeighbors": "nearest_neighbors",
    "rewiringProbability": "rewiring_probability",
    "degree": "degree",
    "branchingFactor": "branching_factor",
    "height": "height",
    "dimensions": "dimensions",
    "radius": "radius",
    "exponent": "exponent",
    "generations": "generations",
}


@dataclass(frozen=True)
class GenerationParams:
    """Every parameter any topology reads; each topology ignores the rest."""

    node_count: int = 50
    rows: int = 5
    cols: int = 5
    probability: float = 0.5
    edges_to_attach: int = 3
    nearest_neighbors: int = 4
    rewiring_probability: float = 0.1
    degree: int = 3
    branching_factor: int = 2
    height: int = 3
    dimensions: int = 3
    radius: float = 0.5
    exponent: float = 2.5
    generations: int = 3

    @classmethod
    def from_mapping(
        cls, bag: Mapping[str, Any] | None, base: GenerationParams | None = None
    ) -> GenerationParams:
        """Build parameters from a request bag.

        Accepts camelCase request keys and snake_case field names. Unknown keys
        are ignored. Values are coerced to the field type.

        Args:
            bag: Raw parameter mapping (may be ``None``).
            base: Defaults for keys missing from ``bag``.

        Raises:
            InvalidParameterError: If a value cannot be coerced.
        """
        base = base if base is not None else cls()
        if not bag:
            return base
        types = {f.name: f.type for f in fields(cls)}
        updates: dict[str, Any] = {}
        for key, value in bag.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name not in types:
                continue
            updates[name] = _coerce(name, value, int if types[name] in ("int", int) else float)
        return replace(base, **updates)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _coerce(name: str, value: Any, kind: type) -> int | float:
    if isinstance(value, bool):
        raise InvalidParameterError(f"Parameter '{name}' must be numeric, got {value!r}")
    try:
        if kind is int:
            as_float = float(value)
            if not as_float.is_integer():
                raise InvalidParameterError(
                    f"Parameter '{name}' must be an integer, got {value!r}"
                )
            return int(as_float)
        return float(value)
    except (TypeError, ValueError) as e:
        if isinstance(e, InvalidParameterError):
            raise
        raise InvalidParameterError(
            f"Parameter '{name}' must be numeric, got {value!r}"
        ) from e
