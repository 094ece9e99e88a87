"""
Single-source shortest paths on a dense cost matrix (Dijkstra).

Requires non-negative weights; negative entries are rejected when the matrix
is validated.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Any, List, Optional, Tuple

from .engine import Labeling, RelaxationRule, label_vertices
from .reconstruct import path_to


def dijkstra(matrix: Any, source: int, *, no_edge: Optional[float] = None) -> Labeling:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        matrix: Square cost matrix (list of lists, numpy array, torch tensor
            or DenseGraph). ``matrix[u][v]`` is the cost of edge u -> v.
        source: Source vertex.
        no_edge: Value marking an absent edge (default from densepath.config,
            99 unless overridden).

    Returns:
        Labeling whose ``labels`` are shortest distances (``inf`` if
        unreachable) and whose ``parents`` are shortest-path predecessors.

    Raises:
        OutOfRangeError: If source is out of range or the matrix is not square.
        InvalidWeightError: If the matrix has negative or NaN weights.

    Complexity: O(n^2).

    Example:
        >>> labeling = dijkstra([[0, 1, 4], [99, 0, 2], [99, 99, 0]], 0)
        >>> labeling.labels.tolist()
        [0.0, 1.0, 3.0]
    """
    return label_vertices(matrix, source, RelaxationRule.PATH_COST, no_edge=no_edge)


def shortest_path(
    matrix: Any, source: int, target: int, *, no_edge: Optional[float] = None
) -> Tuple[float, Optional[List[int]]]:
    """
    Shortest distance and path from source to target.

    Returns:
        ``(distance, path)``; ``(inf, None)`` if target is unreachable, in
        which case an UnreachableVertexWarning is also issued.
    """
    labeling = dijkstra(matrix, source, no_edge=no_edge)
    target = labeling.graph.check_vertex(target, "target")
    return float(labeling.labels[target]), path_to(labeling, target)
