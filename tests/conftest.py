"""Pytest configuration and shared fixtures for netinsight tests."""

import pytest

from netinsight.graph_store import GraphStore
from netinsight.random_source import NumpyRandomSource


@pytest.fixture
def store():
    """Empty graph store."""
    return GraphStore()


@pytest.fixture
def rng():
    """Seeded random source so randomized generators are reproducible."""
    return NumpyRandomSource(seed=12345)


@pytest.fixture
def sample_config():
    """Sample configuration dictionary for testing."""
    return {
        "canvas": {"size": 800.0, "grid_spacing": 40.0, "grid_jitter": 5.0},
        "generation": {
            "seed": 7,
            "max_attempts": 50,
            "defaults": {"nodeCount": 20, "probability": 0.2},
        },
        "export": {
            "adjacency_list_filename": "list.csv",
            "adjacency_matrix_filename": "matrix.csv",
            "histogram_filename": "hist.png",
        },
    }


@pytest.fixture
def temp_config_file(tmp_path, sample_config):
    """Create a temporary configuration file for testing."""
    import yaml

    config_file = tmp_path / "test_config.yml"
    with open(config_file, "w") as f:
        yaml.dump(sample_config, f, default_flow_style=False, indent=2)
    return config_file


@pytest.fixture
def invalid_config_file(tmp_path):
    """Create an invalid YAML configuration file for testing."""
    config_file = tmp_path / "invalid_config.yml"
    config_file.write_text("invalid: yaml: content: [unclosed")
    return config_file



@pytest.fixture
def check_invariants():
    """Return a checker for store invariants.

    Node ids must be 1..N, edge ids e1..eM, no edge may dangle, and with
    ``simple=True`` there may be no self-loop or parallel edge.
    """

    def _check(graph, simple=True):
        node_ids = [n.id for n in graph.nodes]
        assert node_ids == list(range(1, len(node_ids) + 1))
        assert [e.id for e in graph.edges] == [
            f"e{i}" for i in range(1, graph.edge_count + 1)
        ]
        present = set(node_ids)
        for e in graph.edges:
            assert e.source in present and e.target in present
        if simple:
            keys = [e.key for e in graph.edges]
            assert all(len(k) == 2 for k in keys), "self-loop found"
            assert len(keys) == len(set(keys)), "parallel edge found"

    return _check
