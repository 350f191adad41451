"""Topology registry and generation requests.

Maps the topology identifiers used by the UI layer to builders, together with
the parameter metadata (ranges, defaults) a slider panel needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from netinsight.config import CanvasConfig
from netinsight.errors import UnknownTopologyError
from netinsight.graph_store import GraphStore
from netinsight.log_config import get_logger
from netinsight.params import GenerationParams
from netinsight.random_source import RandomSource, default_source

from . import classic, named, stochastic

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParameterSpec:
    """Slider metadata for one generation parameter."""

    name: str
    label: str
    minimum: float
    maximum: float
    step: float
    default: float


@dataclass(frozen=True)
class BuildContext:
    """Everything a builder needs besides the parameter values."""

    rng: RandomSource
    canvas: CanvasConfig | None
    max_attempts: int


Builder = Callable[[GraphStore, GenerationParams, BuildContext], Any]


@dataclass(frozen=True)
class Topology:
    """Registered topology family."""

    name: str
    label: str
    builder: Builder
    parameters: tuple[ParameterSpec, ...]

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)


NODE_COUNT = ParameterSpec("node_count", "Number of Nodes", 10, 100, 1, 50)
ROWS = ParameterSpec("rows", "Grid Rows", 2, 10, 1, 5)
COLS = ParameterSpec("cols", "Grid Columns", 2, 10, 1, 5)
PROBABILITY = ParameterSpec("probability", "Probability", 0, 1, 0.01, 0.5)
EDGES_TO_ATTACH = ParameterSpec("edges_to_attach", "Edges to Attach", 1, 10, 1, 3)
NEAREST_NEIGHBORS = ParameterSpec("nearest_neighbors", "Nearest Neighbors", 2, 10, 1, 4)
REWIRING = ParameterSpec("rewiring_probability", "Rewiring Probability", 0, 1, 0.01, 0.1)
DEGREE = ParameterSpec("degree", "Degree", 1, 10, 1, 3)
BRANCHING = ParameterSpec("branching_factor", "Branching Factor", 2, 5, 1, 2)
HEIGHT = ParameterSpec("height", "Height", 1, 5, 1, 3)
DIMENSIONS = ParameterSpec("dimensions", "Dimensions", 1, 10, 1, 3)
RADIUS = ParameterSpec("radius", "Radius", 0, 1, 0.01, 0.5)
EXPONENT = ParameterSpec("exponent", "Attachment Exponent", 2, 5, 0.1, 2.5)
GENERATIONS = ParameterSpec("generations", "Generations", 0, 6, 1, 3)


def _sized(fn: Callable[..., Any]) -> Builder:
    """Adapt a builder that only reads ``node_count``."""

    def _build(store: GraphStore, p: GenerationParams, ctx: BuildContext) -> Any:
        return fn(store, p.node_count, rng=ctx.rng, canvas=ctx.canvas)

    return _build


def _fixed(fn: Callable[..., Any]) -> Builder:
    def _build(store: GraphStore, p: GenerationParams, ctx: BuildContext) -> Any:
        return fn(store, rng=ctx.rng, canvas=ctx.canvas)

    return _build


_REGISTRY: tuple[Topology, ...] = (
    Topology("complete_graph", "Complete Graph", _sized(classic.complete_graph), (NODE_COUNT,)),
    Topology("cycle_graph", "Cycle Graph", _sized(classic.cycle_graph), (NODE_COUNT,)),
    Topology("path_graph", "Path Graph", _sized(classic.path_graph), (NODE_COUNT,)),
    Topology("star_graph", "Star Graph", _sized(classic.star_graph), (NODE_COUNT,)),
    Topology("wheel_graph", "Wheel Graph", _sized(classic.wheel_graph), (NODE_COUNT,)),
    Topology("ladder_graph", "Ladder Graph", _sized(classic.ladder_graph), (NODE_COUNT,)),
    Topology("clique_graph", "Clique Graph", _sized(classic.clique_graph), (NODE_COUNT,)),
    Topology(
        "circular_ladder_graph",
        "Circular Ladder Graph",
        _sized(classic.circular_ladder_graph),
        (NODE_COUNT,),
    ),
    Topology(
        "krackhardt_kite_graph", "Krackhardt Kite Graph", _fixed(named.krackhardt_kite_graph), ()
    ),
    Topology("lollipop_graph", "Lollipop Graph", _sized(classic.lollipop_graph), (NODE_COUNT,)),
    Topology("petersen_graph", "Petersen Graph", _fixed(named.petersen_graph), ()),
    Topology(
        "grid_graph",
        "Grid Graph",
        lambda store, p, ctx: classic.grid_graph(
            store, p.rows, p.cols, rng=ctx.rng, canvas=ctx.canvas
        ),
        (ROWS, COLS),
    ),
    Topology(
        "erdos_renyi_graph",
        "Erdős–Rényi Graph",
        lambda store, p, ctx: stochastic.erdos_renyi_graph(
            store, p.node_count, p.probability, rng=ctx.rng, canvas=ctx.canvas
        ),
        (NODE_COUNT, PROBABILITY),
    ),
    Topology(
        "barabasi_albert_graph",
        "Barabási–Albert Graph",
        lambda store, p, ctx: stochastic.barabasi_albert_graph(
            store, p.node_count, p.edges_to_attach, rng=ctx.rng, canvas=ctx.canvas
        ),
        (NODE_COUNT, EDGES_TO_ATTACH),
    ),
    Topology(
        "watts_strogatz_graph",
        "Watts–Strogatz Graph",
        lambda store, p, ctx: stochastic.watts_strogatz_graph(
            store,
            p.node_count,
            p.nearest_neighbors,
            p.rewiring_probability,
            rng=ctx.rng,
            canvas=ctx.canvas,
        ),
        (NODE_COUNT, NEAREST_NEIGHBORS, REWIRING),
    ),
    Topology(
        "random_regular_graph",
        "Random Regular Graph",
        lambda store, p, ctx: stochastic.random_regular_graph(
            store,
            p.node_count,
            p.degree,
            rng=ctx.rng,
            canvas=ctx.canvas,
            max_attempts=ctx.max_attempts,
        ),
        (NODE_COUNT, DEGREE),
    ),
    Topology(
        "balanced_tree",
        "Balanced Tree",
        lambda store, p, ctx: classic.balanced_tree(
            store, p.branching_factor, p.height, rng=ctx.rng, canvas=ctx.canvas
        ),
        (BRANCHING, HEIGHT),
    ),
    Topology(
        "hypercube_graph",
        "Hypercube Graph",
        lambda store, p, ctx: classic.hypercube_graph(
            store, p.dimensions, rng=ctx.rng, canvas=ctx.canvas
        ),
        (DIMENSIONS,),
    ),
    Topology(
        "random_geometric_graph",
        "Random Geometric Graph",
        lambda store, p, ctx: stochastic.random_geometric_graph(
            store, p.node_count, p.radius, rng=ctx.rng, canvas=ctx.canvas
        ),
        (NODE_COUNT, RADIUS),
    ),
    Topology(
        "dorogovtsev_goltsev_mendes_graph",
        "Dorogovtsev–Goltsev–Mendes Graph",
        lambda store, p, ctx: named.dorogovtsev_goltsev_mendes_graph(
            store, p.generations, rng=ctx.rng, canvas=ctx.canvas
        ),
        (GENERATIONS,),
    ),
    Topology(
        "power_law_tree",
        "Power-Law Tree",
        lambda store, p, ctx: stochastic.power_law_tree(
            store, p.node_count, p.exponent, rng=ctx.rng, canvas=ctx.canvas
        ),
        (NODE_COUNT, EXPONENT),
    ),
)

TOPOLOGIES: dict[str, Topology] = {t.name: t for t in _REGISTRY}


def topology_names() -> list[str]:
    return list(TOPOLOGIES)


def get_topology(name: str) -> Topology:
    """Look up a topology by identifier.

    Raises:
        UnknownTopologyError: If ``name`` is not registered.
    """
    try:
        return TOPOLOGIES[name]
    except KeyError:
        raise UnknownTopologyError(
            f"Unknown topology '{name}'. Available: {', '.join(TOPOLOGIES)}"
        ) from None


def generate(
    store: GraphStore,
    name: str,
    params: GenerationParams | Mapping[str, Any] | None = None,
    *,
    rng: RandomSource | None = None,
    canvas: CanvasConfig | None = None,
    max_attempts: int = 100,
    defaults: GenerationParams | None = None,
) -> GraphStore:
    """Replace the contents of ``store`` with a freshly generated topology.

    The topology is built in a scratch store first and copied over only when
    construction succeeds, so invalid parameters leave the current graph
    untouched. Keys the topology does not read are ignored.

    Args:
        store: Graph store to repopulate.
        name: Topology identifier (see :func:`topology_names`).
        params: Parameter object or raw request bag.
        rng: Random source; unseeded numpy source when omitted.
        canvas: Placement settings.
        max_attempts: Restart budget for constructions that can dead-end.
        defaults: Values for keys missing from a raw request bag.

    Returns:
        The same ``store``, for chaining.

    Raises:
        UnknownTopologyError: If ``name`` is not registered.
        InvalidParameterError: If parameters are out of range.
        GenerationError: If a randomized construction gives up.
    """
    topology = get_topology(name)
    if not isinstance(params, GenerationParams):
        params = GenerationParams.from_mapping(params, base=defaults)
    ctx = BuildContext(rng=default_source(rng), canvas=canvas, max_attempts=max_attempts)

    used = {k: getattr(params, k) for k in topology.parameter_names}
    logger.debug(f"Generating {name} with {used}")

    scratch = GraphStore()
    try:
        topology.builder(scratch, params, ctx)
    except Exception as e:
        logger.warning(f"Generation of {name} failed: {e}")
        raise

    store.clear()
    for node in scratch.nodes:
        store.add_node(node.x, node.y)
    for edge in scratch.edges:
        store.add_edge(edge.source, edge.target)

    logger.info(
        f"Generated {name}: {store.node_count} nodes, {store.edge_count} edges"
    )
    return store
