from __future__ import annotations

import networkx as nx
import pytest

from netinsight.degree import degree_histogram, node_degrees
from netinsight.errors import InvalidParameterError
from netinsight.topologies import named


def test_petersen_graph(store, rng, check_invariants) -> None:
    named.petersen_graph(store, rng=rng)
    check_invariants(store)
    assert store.node_count == 10
    assert store.edge_count == 15
    assert degree_histogram(store) == {3: 10}
    assert nx.is_isomorphic(nx.Graph(store.to_networkx()), nx.petersen_graph())


def test_petersen_layout_of_ids(store, rng) -> None:
    named.petersen_graph(store, rng=rng)
    assert store.has_edge_between(1, 2) and store.has_edge_between(5, 1)
    assert store.has_edge_between(1, 6)
    assert store.has_edge_between(6, 8) and store.has_edge_between(10, 7)


def test_krackhardt_kite_graph(store, rng, check_invariants) -> None:
    named.krackhardt_kite_graph(store, rng=rng)
    check_invariants(store)
    assert store.node_count == 10
    assert store.edge_count == 18
    degrees = node_degrees(store)
    # "Diane" has the most ties, the tail ends in a pendant node.
    assert max(degrees.values()) == degrees[4] == 6
    assert degrees[10] == 1
    assert nx.is_isomorphic(nx.Graph(store.to_networkx()), nx.krackhardt_kite_graph())


@pytest.mark.parametrize("generations", [0, 1, 2, 3, 5])
def test_dgm_counts(store, rng, check_invariants, generations) -> None:
    named.dorogovtsev_goltsev_mendes_graph(store, generations, rng=rng)
    check_invariants(store)
    assert store.node_count == (3**generations + 3) // 2
    assert store.edge_count == 3**generations
    degrees = node_degrees(store)
    # The two seed nodes double their degree every generation.
    assert degrees[1] == degrees[2] == 2**generations


def test_dgm_first_generation_is_triangle(store, rng) -> None:
    named.dorogovtsev_goltsev_mendes_graph(store, 1, rng=rng)
    assert nx.is_isomorphic(nx.Graph(store.to_networkx()), nx.cycle_graph(3))


def test_dgm_degree_distribution(store, rng) -> None:
    # After n generations there are 3^(n-1) nodes of degree 2.
    named.dorogovtsev_goltsev_mendes_graph(store, 4, rng=rng)
    assert degree_histogram(store)[2] == 27


@pytest.mark.parametrize("generations", [-1, 11])
def test_dgm_rejects_out_of_range(store, generations) -> None:
    with pytest.raises(InvalidParameterError):
        named.dorogovtsev_goltsev_mendes_graph(store, generations)
    assert store.node_count == 0
