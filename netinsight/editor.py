"""Interactive edit operations: click to add nodes, click two nodes to join them."""

from __future__ import annotations

from netinsight.errors import GraphInvariantError
from netinsight.graph_store import Edge, GraphStore, Node
from netinsight.log_config import get_logger

logger = get_logger(__name__)


class GraphEditor:
    """Two-click edge creation on top of a :class:`GraphStore`.

    Selection rules:
    - The first click on a node makes it pending.
    - Clicking the pending node again does nothing; it stays pending.
    - Clicking a second, different node joins the two and clears the
      selection. If they are already joined, no duplicate edge is added but
      the selection is still cleared.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store
        self._pending: int | None = None

    @property
    def pending_selection(self) -> tuple[int, ...]:
        return () if self._pending is None else (self._pending,)

    def cancel_selection(self) -> None:
        self._pending = None

    def click_add_node(self, x: float, y: float) -> Node:
        return self.store.add_node(x, y)

    def click_select_node(self, node_id: int) -> Edge | None:
        """Register a click on a node.

        Returns:
            The new edge when the click completes a pair, else ``None``.

        Raises:
            GraphInvariantError: If the node is not in the graph.
        """
        if not self.store.has_node(node_id):
            raise GraphInvariantError(f"Clicked node {node_id} is not in the graph")

        if self._pending is None:
            self._pending = node_id
            return None
        if self._pending == node_id:
            logger.debug(f"Node {node_id} selected twice; keeping pending selection")
            return None

        first, self._pending = self._pending, None
        if self.store.has_edge_between(first, node_id):
            logger.debug(f"Nodes {first} and {node_id} already joined; no edge added")
            return None
        return self.store.add_edge(first, node_id)

    def remove_node(self, node_id: int) -> list[Edge]:
        """Remove a node and its edges; unknown ids are ignored."""
        if self._pending == node_id:
            self._pending = None
        return self.store.remove_node(node_id)

    def remove_edge(self, edge_id: str) -> Edge | None:
        return self.store.remove_edge(edge_id)
