"""densepath - shortest paths and minimum spanning trees on dense cost matrices."""

__version__ = "0.1.0"

# Configuration
from .config import (
    DEFAULT_NO_EDGE,
    debug_context,
    get_default_no_edge,
    is_debug_enabled,
    no_edge_context,
    set_debug_enabled,
    set_default_no_edge,
)

# Graph container
from .core import DenseGraph

# Labeling engine
from .engine import INF, NO_PARENT, Labeling, RelaxationRule, label_vertices

# Errors and warnings
from .errors import InvalidWeightError, OutOfRangeError, UnreachableVertexWarning

# Text I/O
from .io import (
    format_shortest_paths,
    format_spanning_tree,
    parse_problem_file,
    parse_problem_string,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Algorithms
from .mst import UnionFind, kruskal_mst, prim_mst
from .reconstruct import SpanningTree, all_paths, path_to, trace_path, tree_edges
from .shortest import dijkstra, shortest_path

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_NO_EDGE",
    "get_default_no_edge",
    "set_default_no_edge",
    "no_edge_context",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graph container
    "DenseGraph",
    # Engine
    "INF",
    "NO_PARENT",
    "Labeling",
    "RelaxationRule",
    "label_vertices",
    # Errors
    "OutOfRangeError",
    "InvalidWeightError",
    "UnreachableVertexWarning",
    # I/O
    "parse_problem_string",
    "parse_problem_file",
    "format_shortest_paths",
    "format_spanning_tree",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Algorithms
    "dijkstra",
    "shortest_path",
    "prim_mst",
    "kruskal_mst",
    "UnionFind",
    "SpanningTree",
    "path_to",
    "all_paths",
    "trace_path",
    "tree_edges",
]
