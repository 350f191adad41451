"""Named graphs with a fixed or recursively defined structure."""

from __future__ import annotations

from netinsight.config import CanvasConfig
from netinsight.graph_store import GraphStore, Node
from netinsight.log_config import get_logger
from netinsight.random_source import RandomSource, default_source

from ._common import DEFAULT_CANVAS, require_int, scatter_nodes

logger = get_logger(__name__)

# Zero-based adjacency of Krackhardt's kite (Krackhardt 1990): ten actors,
# eighteen ties. Each pair is listed once, lower index first.
KRACKHARDT_KITE_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (0, 2), (0, 3), (0, 5),
    (1, 3), (1, 4), (1, 6),
    (2, 3), (2, 5),
    (3, 4), (3, 5), (3, 6),
    (4, 6),
    (5, 6), (5, 7),
    (6, 7),
    (7, 8),
    (8, 9),
)  # fmt: skip

# Generations beyond this explode (3^n edges).
MAX_DGM_GENERATIONS = 10


def _add_fixed_graph(
    store: GraphStore,
    node_count: int,
    edges: tuple[tuple[int, int], ...] | list[tuple[int, int]],
    rng: RandomSource | None,
    canvas: CanvasConfig | None,
) -> list[Node]:
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    for a, b in edges:
        store.add_edge(nodes[a].id, nodes[b].id)
    return nodes


def petersen_graph(
    store: GraphStore,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """The Petersen graph: 10 nodes, 15 edges, 3-regular, girth 5.

    Ids 1-5 form the outer 5-cycle, ids 6-10 the inner pentagram, and spoke
    ``i`` joins outer node ``i`` to inner node ``i + 5``.
    """
    edges: list[tuple[int, int]] = []
    for i in range(5):
        edges.append((i, (i + 1) % 5))
    for i in range(5):
        edges.append((i, i + 5))
    for i in range(5):
        edges.append((5 + i, 5 + (i + 2) % 5))
    return _add_fixed_graph(store, 10, edges, rng, canvas)


def krackhardt_kite_graph(
    store: GraphStore,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Krackhardt's kite social network: 10 nodes, 18 edges."""
    return _add_fixed_graph(store, 10, KRACKHARDT_KITE_EDGES, rng, canvas)


def dorogovtsev_goltsev_mendes_graph(
    store: GraphStore,
    generations: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Deterministic scale-free fractal of Dorogovtsev, Goltsev and Mendes.

    Generation 0 is a single edge. Every later generation adds, for each edge
    ``(u, v)`` present at the start of the generation, a new node ``w`` joined
    to both ``u`` and ``v``. After ``n`` generations the graph has
    ``(3^n + 3) / 2`` nodes and ``3^n`` edges.
    """
    generations = require_int("generations", generations, 0, MAX_DGM_GENERATIONS)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    nodes = scatter_nodes(store, 2, rng, canvas)
    pairs: list[tuple[int, int]] = [(nodes[0].id, nodes[1].id)]
    store.add_edge(*pairs[0])
    for gen in range(1, generations + 1):
        fresh: list[tuple[int, int]] = []
        for u, v in pairs:
            (w,) = scatter_nodes(store, 1, rng, canvas)
            nodes.append(w)
            store.add_edge(w.id, u)
            store.add_edge(w.id, v)
            fresh.extend(((w.id, u), (w.id, v)))
        pairs.extend(fresh)
        logger.debug(f"dgm generation {gen}: {len(nodes)} nodes, {len(pairs)} edges")
    return nodes
