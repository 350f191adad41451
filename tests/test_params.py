"""Tests for generation request parameters."""

from __future__ import annotations

import pytest

from netinsight.errors import InvalidParameterError
from netinsight.params import CAMEL_CASE_KEYS, GenerationParams


def test_defaults() -> None:
    p = GenerationParams()
    assert p.node_count == 50
    assert (p.rows, p.cols) == (5, 5)
    assert p.probability == 0.5
    assert p.rewiring_probability == 0.1
    assert p.exponent == 2.5


def test_from_mapping_accepts_both_key_styles() -> None:
    p = GenerationParams.from_mapping(
        {"nodeCount": "20", "edges_to_attach": 4, "rewiringProbability": "0.25"}
    )
    assert p.node_count == 20
    assert p.edges_to_attach == 4
    assert p.rewiring_probability == 0.25


def test_from_mapping_ignores_unknown_keys() -> None:
    assert GenerationParams.from_mapping({"speed": 3, "": 1}) == GenerationParams()


def test_from_mapping_uses_base() -> None:
    base = GenerationParams(node_count=12, radius=0.1)
    p = GenerationParams.from_mapping({"radius": 0.3}, base=base)
    assert (p.node_count, p.radius) == (12, 0.3)
    assert GenerationParams.from_mapping(None, base=base) is base


def test_integral_floats_coerced_to_int() -> None:
    assert GenerationParams.from_mapping({"height": 4.0}).height == 4


@pytest.mark.parametrize(
    "bag",
    [{"nodeCount": "many"}, {"height": 2.5}, {"radius": None}, {"degree": True}],
)
def test_bad_values_rejected(bag) -> None:
    with pytest.raises(InvalidParameterError):
        GenerationParams.from_mapping(bag)


def test_every_request_key_maps_to_a_field() -> None:
    fields = set(GenerationParams().to_dict())
    assert set(CAMEL_CASE_KEYS.values()) <= fields
