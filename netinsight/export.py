"""CSV encodings of the current graph.

Both encodings follow the layout the browser front end downloads:

Adjacency list::

    Node,Connected Nodes
    1,2;3
    2,1
    3,1

Adjacency matrix::

    ,1,2,3
    1,0,1,1
    2,1,0,0
    3,1,0,0

Rows follow node storage order; neighbours follow edge insertion order.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

import numpy as np

from netinsight.graph_store import GraphStore
from netinsight.log_config import get_logger

logger = get_logger(__name__)

DATA_URI_PREFIX = "data:text/csv;charset=utf-8,"
ADJACENCY_LIST_HEADER = "Node,Connected Nodes"

# Characters a browser's encodeURI leaves untouched besides alphanumerics.
_ENCODE_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"

EXPORT_KINDS = ("adjacency_list", "adjacency_matrix")


def to_adjacency_list(store: GraphStore) -> str:
    """One ``id,n1;n2;...`` line per node under a fixed header.

    A self-loop lists the node as its own neighbour once.
    """
    lines = [ADJACENCY_LIST_HEADER]
    for node in store.nodes:
        neighbors = ";".join(str(n) for n in store.neighbors(node.id))
        lines.append(f"{node.id},{neighbors}")
    return "\n".join(lines) + "\n"


def adjacency_matrix(store: GraphStore) -> np.ndarray:
    """Symmetric 0/1 matrix indexed by node storage order."""
    index = {node.id: i for i, node in enumerate(store.nodes)}
    matrix = np.zeros((len(index), len(index)), dtype=int)
    for edge in store.edges:
        i, j = index[edge.source], index[edge.target]
        matrix[i, j] = 1
        matrix[j, i] = 1
    return matrix


def to_adjacency_matrix(store: GraphStore) -> str:
    """Header row of node ids, then one ``id,0,1,...`` row per node."""
    ids = [str(node.id) for node in store.nodes]
    matrix = adjacency_matrix(store)
    lines = ["," + ",".join(ids)]
    for node_id, row in zip(ids, matrix):
        lines.append(node_id + "," + ",".join(str(int(v)) for v in row))
    return "\n".join(lines) + "\n"


def to_data_uri(body: str) -> str:
    """Wrap CSV text as a downloadable ``data:`` URI."""
    return DATA_URI_PREFIX + quote(body, safe=_ENCODE_URI_SAFE)


def encode(store: GraphStore, kind: str) -> str:
    if kind == "adjacency_list":
        return to_adjacency_list(store)
    if kind == "adjacency_matrix":
        return to_adjacency_matrix(store)
    raise ValueError(f"Unknown export kind '{kind}'; expected one of {EXPORT_KINDS}")


def write_csv(store: GraphStore, path: Path, kind: str = "adjacency_list") -> Path:
    """Write one encoding of ``store`` to ``path``.

    Returns:
        The written path.
    """
    path = Path(path)
    body = encode(store, kind)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        f.write(body)
    logger.info(f"Wrote {kind.replace('_', ' ')} ({store.node_count} nodes) to {path}")
    return path


def edges_from_adjacency_list(text: str) -> set[frozenset[int]]:
    """Unordered edge set described by an adjacency-list export."""
    edges: set[frozenset[int]] = set()
    lines = text.splitlines()
    if not lines or lines[0] != ADJACENCY_LIST_HEADER:
        raise ValueError("Adjacency list must start with the header row")
    for line in lines[1:]:
        if not line:
            continue
        node, _, rest = line.partition(",")
        for neighbor in filter(None, rest.split(";")):
            edges.add(frozenset((int(node), int(neighbor))))
    return edges


def edges_from_adjacency_matrix(text: str) -> set[frozenset[int]]:
    """Unordered edge set described by an adjacency-matrix export."""
    lines = [line for line in text.splitlines() if line]
    if not lines or not lines[0].startswith(","):
        raise ValueError("Adjacency matrix must start with the header row")
    ids = [int(v) for v in lines[0].split(",")[1:] if v]
    edges: set[frozenset[int]] = set()
    for line in lines[1:]:
        cells = line.split(",")
        row_id = int(cells[0])
        for col_id, value in zip(ids, cells[1:]):
            if int(value):
                edges.add(frozenset((row_id, col_id)))
    return edges
