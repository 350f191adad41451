"""Randomized topologies.

All randomness goes through the injected :class:`RandomSource`. Constructions
that can fail (random regular pairing) settle the whole edge set before
touching the store, so a failure never leaves a partial graph behind.
"""

from __future__ import annotations

import math

import networkx as nx
import numpy as np

from netinsight.config import CanvasConfig
from netinsight.errors import GenerationError, InvalidParameterError
from netinsight.graph_store import GraphStore, Node
from netinsight.log_config import get_logger
from netinsight.random_source import (
    RandomSource,
    default_source,
    random_index,
    shuffle,
    weighted_index,
)

from ._common import DEFAULT_CANVAS, require_int, require_unit_interval, scatter_nodes
from .classic import complete_graph

logger = get_logger(__name__)


def erdos_renyi_graph(
    store: GraphStore,
    node_count: int,
    probability: float,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """G(n, p): each unordered pair is an edge independently with probability p."""
    node_count = require_int("node_count", node_count, 0)
    probability = require_unit_interval("probability", probability)
    rng = default_source(rng)
    nodes = scatter_nodes(store, node_count, rng, canvas or DEFAULT_CANVAS)
    for i in range(node_count):
        for j in range(i + 1, node_count):
            if rng.next_float() < probability:
                store.add_edge(nodes[i].id, nodes[j].id)
    return nodes


def barabasi_albert_graph(
    store: GraphStore,
    node_count: int,
    edges_to_attach: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Preferential attachment grown from a complete seed graph.

    The first ``m`` nodes form a clique. Every later node attaches to ``m``
    distinct earlier nodes; each pick is proportional to current degree among
    the nodes not yet picked in that step, uniform if they all have degree 0.
    Edge count is ``m(m-1)/2 + (N-m)m``.
    """
    edges_to_attach = require_int("edges_to_attach", edges_to_attach, 1)
    node_count = require_int("node_count", node_count, edges_to_attach)
    rng = default_source(rng)
    canvas = canvas or DEFAULT_CANVAS
    m = edges_to_attach

    nodes = complete_graph(store, m, rng=rng, canvas=canvas)
    degrees = [m - 1] * m
    for _ in range(m, node_count):
        (newcomer,) = scatter_nodes(store, 1, rng, canvas)
        available = list(range(len(nodes)))
        targets: list[int] = []
        for _ in range(m):
            pick = weighted_index(rng, [degrees[i] for i in available])
            targets.append(available.pop(pick))
        for t in targets:
            store.add_edge(newcomer.id, nodes[t].id)
            degrees[t] += 1
        nodes.append(newcomer)
        degrees.append(m)
    return nodes


def watts_strogatz_graph(
    store: GraphStore,
    node_count: int,
    nearest_neighbors: int,
    rewiring_probability: float,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Small-world ring lattice with random rewiring.

    Node ``i`` is linked to the ``k // 2`` following nodes on the ring, so an
    odd ``k`` behaves like ``k - 1``. Each lattice edge ``(u, v)`` is then,
    with probability ``beta``, replaced by ``(u, w)`` where ``w`` is uniform
    over the nodes that are neither ``u`` nor already adjacent to ``u``. When
    no such ``w`` exists the edge is kept. Rewiring is settled before edges
    are inserted, so the graph always has ``N * (k // 2)`` simple edges.
    """
    nearest_neighbors = require_int("nearest_neighbors", nearest_neighbors, 2)
    node_count = require_int("node_count", node_count, nearest_neighbors + 1)
    beta = require_unit_interval("rewiring_probability", rewiring_probability)
    rng = default_source(rng)
    n = node_count

    pairs: list[tuple[int, int]] = []
    adjacency: list[set[int]] = [set() for _ in range(n)]
    for i in range(n):
        for j in range(1, nearest_neighbors // 2 + 1):
            target = (i + j) % n
            pairs.append((i, target))
            adjacency[i].add(target)
            adjacency[target].add(i)

    rewired = 0
    for idx, (u, v) in enumerate(pairs):
        if rng.next_float() >= beta:
            continue
        candidates = [w for w in range(n) if w != u and w not in adjacency[u]]
        if not candidates:
            continue
        w = candidates[random_index(rng, len(candidates))]
        adjacency[u].discard(v)
        adjacency[v].discard(u)
        adjacency[u].add(w)
        adjacency[w].add(u)
        pairs[idx] = (u, w)
        rewired += 1

    nodes = scatter_nodes(store, n, rng, canvas or DEFAULT_CANVAS)
    for u, v in pairs:
        store.add_edge(nodes[u].id, nodes[v].id)
    logger.debug(f"watts_strogatz: rewired {rewired}/{len(pairs)} lattice edges")
    return nodes


def random_geometric_graph(
    store: GraphStore,
    node_count: int,
    radius: float,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Random points in the canvas square, joined when close enough.

    Two nodes are adjacent iff their Euclidean distance is at most
    ``radius * canvas.size``.
    """
    node_count = require_int("node_count", node_count, 0)
    radius = require_unit_interval("radius", radius)
    canvas = canvas or DEFAULT_CANVAS
    nodes = scatter_nodes(store, node_count, default_source(rng), canvas)
    if node_count < 2:
        return nodes

    coords = np.array([(n.x, n.y) for n in nodes], dtype=float)
    deltas = coords[:, None, :] - coords[None, :, :]
    distances = np.sqrt((deltas**2).sum(axis=-1))
    threshold = radius * canvas.size
    for i in range(node_count):
        for j in range(i + 1, node_count):
            if distances[i, j] <= threshold:
                store.add_edge(nodes[i].id, nodes[j].id)
    return nodes


def random_regular_graph(
    store: GraphStore,
    node_count: int,
    degree: int,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
    max_attempts: int = 100,
) -> list[Node]:
    """Uniform-ish random d-regular simple graph (Steger-Wormald pairing).

    Stubs (``d`` per node) are shuffled and paired; pairs forming a loop or a
    repeat edge go back into the pool, which is reshuffled while a usable pair
    remains. A dead end restarts the construction.

    Raises:
        GenerationError: If ``max_attempts`` restarts all dead-end.
    """
    node_count = require_int("node_count", node_count, 0)
    degree = require_int("degree", degree, 0)
    if degree > 0 and degree >= node_count:
        raise InvalidParameterError(
            f"degree must be < node_count ({node_count}), got {degree}"
        )
    if (node_count * degree) % 2:
        raise InvalidParameterError(
            f"node_count * degree must be even, got {node_count} * {degree}"
        )
    max_attempts = require_int("max_attempts", max_attempts, 1)
    rng = default_source(rng)

    edges: dict[tuple[int, int], None] | None = None
    for attempt in range(1, max_attempts + 1):
        edges = _pair_stubs(node_count, degree, rng)
        if edges is not None:
            logger.debug(f"random_regular: pairing succeeded on attempt {attempt}")
            break
    if edges is None:
        raise GenerationError(
            f"Could not build a {degree}-regular graph on {node_count} nodes "
            f"in {max_attempts} attempts"
        )

    nodes = scatter_nodes(store, node_count, rng, canvas or DEFAULT_CANVAS)
    for u, v in edges:
        store.add_edge(nodes[u].id, nodes[v].id)
    return nodes


def _pair_stubs(n: int, d: int, rng: RandomSource) -> dict[tuple[int, int], None] | None:
    """One pairing run; returns ordered edge set or ``None`` on a dead end."""
    edges: dict[tuple[int, int], None] = {}
    stubs = [node for node in range(n) for _ in range(d)]
    while stubs:
        leftover: dict[int, int] = {}
        shuffle(rng, stubs)
        for k in range(0, len(stubs), 2):
            a, b = sorted((stubs[k], stubs[k + 1]))
            if a != b and (a, b) not in edges:
                edges[(a, b)] = None
            else:
                leftover[a] = leftover.get(a, 0) + 1
                leftover[b] = leftover.get(b, 0) + 1
        if not _has_usable_pair(edges, leftover):
            return None
        stubs = [node for node, count in leftover.items() for _ in range(count)]
    return edges


def _has_usable_pair(edges: dict[tuple[int, int], None], leftover: dict[int, int]) -> bool:
    if not leftover:
        return True
    pending = sorted(leftover)
    for i, a in enumerate(pending):
        for b in pending[i + 1 :]:
            if (a, b) not in edges:
                return True
    return False


def power_law_tree(
    store: GraphStore,
    node_count: int,
    exponent: float,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
) -> list[Node]:
    """Random tree whose degree sequence follows a power law.

    Degrees are drawn from a discrete Pareto law ``P(k) ~ k^-gamma`` (capped at
    ``N-1``) and adjusted to sum to ``2(N-1)``: surplus is trimmed one unit at a
    time from a uniformly chosen node of degree > 1, a deficit is filled one
    unit at a time preferentially by degree. The sequence is realised as a
    uniformly random tree with exactly those degrees by decoding a shuffled
    Prufer sequence in which node ``v`` appears ``deg(v) - 1`` times.
    """
    node_count = require_int("node_count", node_count, 1)
    try:
        gamma = float(exponent)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"exponent must be a number, got {exponent!r}") from e
    if not math.isfinite(gamma) or gamma <= 1.0:
        raise InvalidParameterError(f"exponent must be > 1, got {exponent}")
    rng = default_source(rng)
    n = node_count

    if n == 1:
        return scatter_nodes(store, 1, rng, canvas or DEFAULT_CANVAS)

    degrees = _power_law_degrees(n, gamma, rng)
    prufer = [v for v, k in enumerate(degrees) for _ in range(k - 1)]
    shuffle(rng, prufer)

    nodes = scatter_nodes(store, n, rng, canvas or DEFAULT_CANVAS)
    for u, v in nx.from_prufer_sequence(prufer).edges():
        store.add_edge(nodes[u].id, nodes[v].id)
    return nodes


def _power_law_degrees(n: int, gamma: float, rng: RandomSource) -> list[int]:
    cap = n - 1
    log_cap = math.log(cap)
    degrees: list[int] = []
    for _ in range(n):
        u = rng.next_float()
        # Inverse transform of a Pareto(alpha = gamma - 1) tail, floored.
        log_x = -math.log1p(-u) / (gamma - 1.0)
        degrees.append(cap if log_x >= log_cap else max(1, int(math.exp(log_x))))

    excess = sum(degrees) - 2 * (n - 1)
    while excess > 0:
        trimmable = [v for v, k in enumerate(degrees) if k > 1]
        degrees[trimmable[random_index(rng, len(trimmable))]] -= 1
        excess -= 1
    while excess < 0:
        weights = [k if k < cap else 0 for k in degrees]
        degrees[weighted_index(rng, weights)] += 1
        excess += 1
    return degrees

