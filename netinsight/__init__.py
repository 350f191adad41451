"""Network Insight Studio core.

Builds graphs interactively or from canonical topology generators, tracks the
degree distribution and exports adjacency-list / adjacency-matrix CSV.
"""

__version__ = "0.1.0"

from .config import StudioConfig
from .degree import DegreeAnalyzer, degree_histogram, node_degrees
from .editor import GraphEditor
from .export import to_adjacency_list, to_adjacency_matrix, to_data_uri, write_csv
from .graph_store import Edge, GraphEvent, GraphStore, Node
from .params import GenerationParams
from .random_source import NumpyRandomSource, RandomSource, SequenceRandomSource
from .topologies import generate, topology_names

__all__ = [
    "__version__",
    "DegreeAnalyzer",
    "Edge",
    "GenerationParams",
    "GraphEditor",
    "GraphEvent",
    "GraphStore",
    "Node",
    "NumpyRandomSource",
    "RandomSource",
    "SequenceRandomSource",
    "StudioConfig",
    "degree_histogram",
    "generate",
    "node_degrees",
    "to_adjacency_list",
    "to_adjacency_matrix",
    "to_data_uri",
    "topology_names",
    "write_csv",
]
