"""Deterministic-structure topologies.

Structure depends only on the parameters; the random source is used for
placement hints alone. Builders append to the store without clearing it, so
composite shapes (wheel, lollipop, circular ladder) reuse the simpler ones and
node ids stay sequential across the composition.
"""

from __future__ import annotations

from netinsight.config import CanvasConfig
from netinsight.errors import InvalidParameterError
from netinsight.graph_store import GraphStore, Node
from netinsight.log_config import get_logger
from netinsight.random_source import RandomSource, default_source, uniform

from ._common import DEFAULT_CANVAS, require_int, scatter_nodes

logger = get_logger(__name__)


def complete_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Edge between every unordered pair; N(N-1)/2 edges."""
    node_count = require_int("node_count", node_count, 1)
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    for i in range(node_count):
        for j in range(i + 1, node_count):
            store.add_edge(nodes[i].id, nodes[j].id)
    return nodes


def clique_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Alias of :func:`complete_graph`."""
    return complete_graph(store, node_count, rng=rng, canvas=canvas)


def cycle_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Ring ``i - (i+1 mod N)``; N edges.

    Needs three nodes: smaller rings would need a loop or a repeated edge.
    """
    node_count = require_int("node_count", node_count, 3)
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    for i in range(node_count):
        store.add_edge(nodes[i].id, nodes[(i + 1) % node_count].id)
    return nodes


def path_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    node_count = require_int("node_count", node_count, 1)
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    for i in range(node_count - 1):
        store.add_edge(nodes[i].id, nodes[i + 1].id)
    return nodes


def star_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """First node is the hub, joined to every other node."""
    node_count = require_int("node_count", node_count, 1)
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    hub = nodes[0]
    for leaf in nodes[1:]:
        store.add_edge(hub.id, leaf.id)
    return nodes


def wheel_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Cycle on N-1 nodes plus a hub (the last id) joined to all of them."""
    node_count = require_int("node_count", node_count, 4)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    rim = cycle_graph(store, node_count - 1, rng=rng, canvas=canvas)
    (hub,) = scatter_nodes(store, 1, rng, canvas)
    for node in rim:
        store.add_edge(hub.id, node.id)
    return rim + [hub]


def ladder_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Two rails of N/2 nodes with a rung between corresponding nodes.

    Rail one holds ids 1..N/2, rail two the rest. Edges per step are rail
    one, rail two, then the rung; the last rung closes the ladder. 3L-2 edges
    for rails of length L.
    """
    node_count = require_int("node_count", node_count, 2)
    if node_count % 2:
        raise InvalidParameterError(
            f"ladder graph needs an even node_count, got {node_count}"
        )
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas or DEFAULT_CANVAS)
    half = node_count // 2
    for i in range(half - 1):
        store.add_edge(nodes[i].id, nodes[i + 1].id)
        store.add_edge(nodes[half + i].id, nodes[half + i + 1].id)
        store.add_edge(nodes[i].id, nodes[half + i].id)
    store.add_edge(nodes[half - 1].id, nodes[node_count - 1].id)
    return nodes


def circular_ladder_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Ladder whose rails are each closed into a cycle; 3L edges."""
    node_count = require_int("node_count", node_count, 6)
    nodes = ladder_graph(store, node_count, rng=rng, canvas=canvas)
    half = node_count // 2
    store.add_edge(nodes[0].id, nodes[half - 1].id)
    store.add_edge(nodes[half].id, nodes[node_count - 1].id)
    return nodes


def lollipop_graph(
    store: GraphStore,
    node_count: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Clique of floor(N/2) nodes fused to a path of ceil(N/2) nodes.

    The last clique node is joined to every path node.
    """
    node_count = require_int("node_count", node_count, 2)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    clique = complete_graph(store, node_count // 2, rng=rng, canvas=canvas)
    stick = path_graph(store, node_count - node_count // 2, rng=rng, canvas=canvas)
    joint = clique[-1]
    for node in stick:
        store.add_edge(joint.id, node.id)
    return clique + stick


def grid_graph(
    store: GraphStore,
    rows: int,
    cols: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """rows x cols lattice in row-major id order.

    Each node is linked to the node above it, then to the node on its left.
    Positions sit on a jittered lattice instead of being scattered.
    """
    rows = require_int("rows", rows, 1)
    cols = require_int("cols", cols, 1)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    nodes: list[Node] = []
    for r in range(rows):
        for c in range(cols):
            x = c * canvas.grid_spacing + uniform(rng, 0.0, canvas.grid_jitter)
            y = r * canvas.grid_spacing + uniform(rng, 0.0, canvas.grid_jitter)
            node = store.add_node(x, y)
            nodes.append(node)
            if r > 0:
                store.add_edge(nodes[(r - 1) * cols + c].id, node.id)
            if c > 0:
                store.add_edge(nodes[r * cols + c - 1].id, node.id)
    return nodes


def balanced_tree(
    store: GraphStore,
    branching_factor: int,
    height: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Full b-ary tree of the given height, ids in pre-order.

    The root (id 1) sits at depth 0; nodes at depth ``height`` are leaves.
    """
    branching_factor = require_int("branching_factor", branching_factor, 1)
    height = require_int("height", height, 0)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    (root,) = scatter_nodes(store, 1, rng, canvas)
    nodes = [root]

    def _grow(parent: Node, depth: int) -> None:
        if depth >= height:
            return
        for _ in range(branching_factor):
            (child,) = scatter_nodes(store, 1, rng, canvas)
            nodes.append(child)
            store.add_edge(parent.id, child.id)
            _grow(child, depth + 1)

    _grow(root, 0)
    logger.debug(f"balanced_tree: b={branching_factor} h={height} -> {len(nodes)} nodes")
    return nodes


def hypercube_graph(
    store: GraphStore,
    dimensions: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """d-dimensional hypercube: 2^d nodes, d*2^(d-1) edges.

    Node ``label + 1`` carries the d-bit label; two nodes are adjacent iff
    their labels differ in exactly one bit. Each edge is added once, from the
    lower label.
    """
    dimensions = require_int("dimensions", dimensions, 0)
    count = 1 << dimensions
    nodes = scatter_nodes(store, count, default_source(rng), canvas or DEFAULT_CANVAS)
    for label in range(count):
        for bit in range(dimensions):
            neighbor = label ^ (1 << bit)
            if neighbor > label:
                store.add_edge(nodes[label].id, nodes[neighbor].id)
    return nodes
