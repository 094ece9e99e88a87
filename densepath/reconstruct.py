"""
Path and tree reconstruction from a finished Labeling.

Paths are recovered by walking parent pointers iteratively, so deep
shortest-path trees never touch the interpreter's recursion limit.
Unreachable targets are reported through UnreachableVertexWarning and a
``None`` result.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .engine import NO_PARENT, Labeling
from .errors import UnreachableVertexWarning
from .logging import get_logger
from .utils import check_vertex

logger = get_logger(__name__)


@dataclass
class SpanningTree:
    """
    Edge set of a minimum spanning tree (or of the tree of the source's
    component when the graph is disconnected).

    Attributes:
        n: Number of vertices in the graph.
        edges: (parent, child, weight) tuples ordered by child.
        unreachable: Vertices the tree does not touch.
    """

    n: int
    edges: List[Tuple[int, int, float]] = field(default_factory=list)
    unreachable: List[int] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        """Number of tree edges."""
        return len(self.edges)

    @property
    def total_weight(self) -> float:
        """Sum of the edge weights."""
        return float(sum(w for _, _, w in self.edges))

    @property
    def is_spanning(self) -> bool:
        """True if the edges connect all n vertices (n - 1 edges)."""
        return self.edge_count == self.n - 1


def trace_path(labeling: Labeling, target: int) -> List[int]:
    """Follow parents from a reachable ``target`` back to the source, source first."""
    path = [target]
    current = target
    # A valid parent table reaches the source in at most n - 1 hops.
    for _ in range(labeling.n):
        if current == labeling.source:
            path.reverse()
            return path
        current = int(labeling.parents[current])
        if current == NO_PARENT:
            break
        path.append(current)
    raise ValueError(
        f"Parent table does not lead from {target} back to source {labeling.source}"
    )


def path_to(labeling: Labeling, target: int) -> Optional[List[int]]:
    """
    Reconstruct the path from the labeling's source to ``target``.

    Args:
        labeling: Result of a PATH_COST run (see densepath.shortest).
        target: Destination vertex.

    Returns:
        Vertices from source to target inclusive; ``[source]`` when target is
        the source; None when target is unreachable.

    Raises:
        OutOfRangeError: If target is not in [0, n).
        ValueError: If the parent table cycles or does not reach the source.

    Warns:
        UnreachableVertexWarning: If target is unreachable.

    Example:
        >>> labeling = dijkstra([[0, 1, 99], [99, 0, 2], [99, 99, 0]], 0)
        >>> path_to(labeling, 2)
        [0, 1, 2]
    """
    target = check_vertex(target, labeling.n, "target")
    if not labeling.reachable[target]:
        warnings.warn(UnreachableVertexWarning([target], labeling.source), stacklevel=2)
        return None
    return trace_path(labeling, target)


def all_paths(labeling: Labeling) -> Dict[int, Optional[List[int]]]:
    """
    Reconstruct the path to every vertex other than the source.

    Unreachable vertices map to None; a single UnreachableVertexWarning
    names all of them.

    Returns:
        Dictionary vertex -> path (or None), in vertex order. Empty for a
        one-vertex graph.
    """
    paths: Dict[int, Optional[List[int]]] = {}
    missing: List[int] = []
    for v in range(labeling.n):
        if v == labeling.source:
            continue
        if labeling.reachable[v]:
            paths[v] = trace_path(labeling, v)
        else:
            paths[v] = None
            missing.append(v)

    if missing:
        warnings.warn(UnreachableVertexWarning(missing, labeling.source), stacklevel=2)
    return paths


def tree_edges(labeling: Labeling) -> SpanningTree:
    """
    Collect ``(parent[v], v, label[v])`` for every vertex with a parent.

    For an EDGE_WEIGHT labeling this is Prim's tree. The edge count is
    n - 1 exactly when every vertex was reached; callers detect a
    disconnected input through ``is_spanning`` or ``unreachable``.
    """
    edges = [
        (int(labeling.parents[v]), v, float(labeling.labels[v]))
        for v in range(labeling.n)
        if labeling.parents[v] != NO_PARENT
    ]
    tree = SpanningTree(n=labeling.n, edges=edges, unreachable=labeling.unreachable)
    if not tree.is_spanning:
        logger.info(
            "tree from source %d covers %d of %d vertices",
            labeling.source,
            tree.edge_count + 1,
            tree.n,
        )
    return tree
