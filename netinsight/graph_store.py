"""Canonical in-memory graph: the single source of truth for nodes and edges.

Generators and the interactive editor are the only writers. Readers (degree
analysis, CSV export, a renderer) either poll the current state or subscribe
to change events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import networkx as nx

from netinsight.errors import GraphInvariantError
from netinsight.log_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Node:
    """Graph node with a placement hint."""

    id: int
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Edge:
    """Undirected edge between two node ids.

    ``source``/``target`` keep the order the edge was created in; equality of
    relationships should go through :attr:`key`.
    """

    id: str
    source: int
    target: int

    @property
    def key(self) -> frozenset[int]:
        return frozenset((self.source, self.target))

    @property
    def is_loop(self) -> bool:
        return self.source == self.target

    def touches(self, node_id: int) -> bool:
        return self.source == node_id or self.target == node_id

    def other(self, node_id: int) -> int:
        """Return the endpoint opposite ``node_id``."""
        if self.source == node_id:
            return self.target
        if self.target == node_id:
            return self.source
        raise GraphInvariantError(f"Node {node_id} is not an endpoint of {self.id}")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass(frozen=True)
class GraphEvent:
    """Notification sent to subscribers after every mutation.

    ``kind`` is one of ``cleared``, ``node_added``, ``node_removed``,
    ``edge_added`` or ``edge_removed``.
    """

    kind: str
    revision: int
    node_id: int | None = None
    edge_id: str | None = None


Listener = Callable[[GraphEvent], None]


class GraphStore:
    """Owns every Node and Edge record of one graph.

    Node ids come from a counter that only moves forward until ``clear()``,
    so ids stay unique even after removals. Edge ids are ``e1``, ``e2``, ...
    from a second counter. Storage order is insertion order.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._edges: dict[str, Edge] = {}
        self._node_counter = 0
        self._edge_counter = 0
        self._revision = 0
        self._listeners: list[Listener] = []

    # -----------------
    # READ ACCESS
    # -----------------

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges.values())

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def revision(self) -> int:
        """Mutation counter; changes whenever the graph changes."""
        return self._revision

    def node(self, node_id: int) -> Node | None:
        return self._nodes.get(node_id)

    def edge(self, edge_id: str) -> Edge | None:
        return self._edges.get(edge_id)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def incident_edges(self, node_id: int) -> list[Edge]:
        """Edges touching ``node_id`` in insertion order."""
        return [e for e in self._edges.values() if e.touches(node_id)]

    def neighbors(self, node_id: int) -> list[int]:
        """Neighbour ids in edge insertion order (repeats for parallel edges)."""
        return [e.other(node_id) for e in self.incident_edges(node_id)]

    def has_edge_between(self, a: int, b: int) -> bool:
        key = frozenset((a, b))
        return any(e.key == key for e in self._edges.values())

    # -----------------
    # MUTATION
    # -----------------

    def clear(self) -> None:
        """Drop every node and edge and reset both id counters."""
        self._nodes.clear()
        self._edges.clear()
        self._node_counter = 0
        self._edge_counter = 0
        self._notify("cleared")

    def add_node(self, x: float, y: float) -> Node:
        """Insert a node at ``(x, y)`` under the next sequential id."""
        self._node_counter += 1
        node = Node(self._node_counter, float(x), float(y))
        if node.id in self._nodes:
            raise GraphInvariantError(f"Node id {node.id} already exists")
        self._nodes[node.id] = node
        self._notify("node_added", node_id=node.id)
        return node

    def remove_node(self, node_id: int) -> list[Edge]:
        """Remove a node together with all of its incident edges.

        Unknown ids are ignored.

        Returns:
            The edges removed with the node.
        """
        if node_id not in self._nodes:
            logger.debug(f"remove_node: node {node_id} not present, ignoring")
            return []
        dropped = [e for e in self._edges.values() if e.touches(node_id)]
        for e in dropped:
            del self._edges[e.id]
        del self._nodes[node_id]
        self._notify("node_removed", node_id=node_id)
        return dropped

    def add_edge(self, source_id: int, target_id: int) -> Edge:
        """Insert an undirected edge between two existing nodes.

        Duplicate edges and self-loops are allowed at this level; callers own
        that policy.

        Raises:
            GraphInvariantError: If either endpoint is missing.
        """
        for endpoint in (source_id, target_id):
            if endpoint not in self._nodes:
                raise GraphInvariantError(
                    f"Cannot add edge {source_id}-{target_id}: node {endpoint} does not exist"
                )
        self._edge_counter += 1
        edge = Edge(f"e{self._edge_counter}", source_id, target_id)
        if edge.id in self._edges:
            raise GraphInvariantError(f"Edge id {edge.id} already exists")
        self._edges[edge.id] = edge
        self._notify("edge_added", edge_id=edge.id)
        return edge

    def remove_edge(self, edge_id: str) -> Edge | None:
        """Remove an edge by id; unknown ids are ignored."""
        edge = self._edges.pop(edge_id, None)
        if edge is None:
            logger.debug(f"remove_edge: edge {edge_id} not present, ignoring")
            return None
        self._notify("edge_removed", edge_id=edge_id)
        return edge

    # -----------------
    # OBSERVERS
    # -----------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, kind: str, *, node_id: int | None = None, edge_id: str | None = None) -> None:
        self._revision += 1
        event = GraphEvent(kind, self._revision, node_id=node_id, edge_id=edge_id)
        for listener in list(self._listeners):
            listener(event)

    # -----------------
    # SNAPSHOTS
    # -----------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self._nodes.values()],
            "edges": [e.to_dict() for e in self._edges.values()],
        }

    def to_networkx(self) -> nx.MultiGraph:
        """Return a ``networkx.MultiGraph`` copy keyed by node id.

        Node attributes carry ``x``/``y``; edge keys are the edge ids.
        """
        G = nx.MultiGraph()
        for n in self._nodes.values():
            G.add_node(n.id, x=n.x, y=n.y)
        for e in self._edges.values():
            G.add_edge(e.source, e.target, key=e.id)
        return G

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.node_count}, edges={self.edge_count})"
