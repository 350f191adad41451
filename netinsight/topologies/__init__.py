"""Topology generators.

Builders append to a :class:`~netinsight.graph_store.GraphStore`; use
:func:`generate` to replace a store's contents by topology name.
"""

from __future__ import annotations

from .classic import (
    balanced_tree,
    circular_ladder_graph,
    clique_graph,
    complete_graph,
    cycle_graph,
    grid_graph,
    hypercube_graph,
    ladder_graph,
    lollipop_graph,
    path_graph,
    star_graph,
    wheel_graph,
)
from .named import dorogovtsev_goltsev_mendes_graph, krackhardt_kite_graph, petersen_graph
from .registry import (
    TOPOLOGIES,
    ParameterSpec,
    Topology,
    generate,
    get_topology,
    topology_names,
)
from .stochastic import (
    barabasi_albert_graph,
    erdos_renyi_graph,
    power_law_tree,
    random_geometric_graph,
    random_regular_graph,
    watts_strogatz_graph,
)

__all__ = [
    "TOPOLOGIES",
    "ParameterSpec",
    "Topology",
    "generate",
    "get_topology",
    "topology_names",
    "balanced_tree",
    "barabasi_albert_graph",
    "circular_ladder_graph",
    "clique_graph",
    "complete_graph",
    "cycle_graph",
    "dorogovtsev_goltsev_mendes_graph",
    "erdos_renyi_graph",
    "grid_graph",
    "hypercube_graph",
    "krackhardt_kite_graph",
    "ladder_graph",
    "lollipop_graph",
    "path_graph",
    "petersen_graph",
    "power_law_tree",
    "random_geometric_graph",
    "random_regular_graph",
    "star_graph",
    "watts_strogatz_graph",
]
