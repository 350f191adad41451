"""Degree distribution of the current graph."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from netinsight.graph_store import GraphStore


def node_degrees(store: GraphStore) -> dict[int, int]:
    """Degree of every node, in node storage order.

    A self-loop contributes 2 to its node's degree; parallel edges each count.
    """
    degrees = {node.id: 0 for node in store.nodes}
    for edge in store.edges:
        degrees[edge.source] += 1
        degrees[edge.target] += 1
    return degrees


def degree_histogram(store: GraphStore) -> dict[int, int]:
    """Map each degree value present to the number of nodes having it.

    Keys are sorted ascending; values sum to the node count.
    """
    counts: dict[int, int] = {}
    for degree in node_degrees(store).values():
        counts[degree] = counts.get(degree, 0) + 1
    return dict(sorted(counts.items()))


@dataclass(frozen=True)
class DegreeSummary:
    node_count: int
    edge_count: int
    min_degree: int
    max_degree: int
    mean_degree: float


class DegreeAnalyzer:
    """Pull-based degree view over a store, cached per store revision.

    Any mutation bumps ``store.revision`` and invalidates the cache, so the
    values returned always match the store.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self._revision: int | None = None
        self._degrees: dict[int, int] = {}
        self._histogram: dict[int, int] = {}

    def _refresh(self) -> None:
        if self._revision == self.store.revision:
            return
        self._degrees = node_degrees(self.store)
        counts: dict[int, int] = {}
        for degree in self._degrees.values():
            counts[degree] = counts.get(degree, 0) + 1
        self._histogram = dict(sorted(counts.items()))
        self._revision = self.store.revision

    def degrees(self) -> dict[int, int]:
        self._refresh()
        return dict(self._degrees)

    def degree(self, node_id: int) -> int:
        self._refresh()
        return self._degrees[node_id]

    def histogram(self) -> dict[int, int]:
        self._refresh()
        return dict(self._histogram)

    def summary(self) -> DegreeSummary:
        self._refresh()
        if not self._degrees:
            return DegreeSummary(0, self.store.edge_count, 0, 0, 0.0)
        values = np.fromiter(self._degrees.values(), dtype=int)
        return DegreeSummary(
            node_count=len(values),
            edge_count=self.store.edge_count,
            min_degree=int(values.min()),
            max_degree=int(values.max()),
            mean_degree=float(values.mean()),
        )
