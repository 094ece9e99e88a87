"""
Relaxation-based single-source labeling engine.

One routine serves both Dijkstra's shortest paths and Prim's minimum
spanning tree. Each of the n iterations selects the unvisited vertex with the
smallest label (lowest index on ties), marks it visited and relaxes its
unvisited neighbours. The only difference between the two algorithms is the
candidate label offered to a neighbour:

- ``RelaxationRule.PATH_COST``: ``label[u] + w(u, v)`` (Dijkstra)
- ``RelaxationRule.EDGE_WEIGHT``: ``w(u, v)`` (Prim)

Selection and relaxation are O(n) array scans, O(n^2) in total.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.2 (Prim) and 24.3 (Dijkstra).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

import numpy as np

from .config import is_debug_enabled
from .core import DenseGraph
from .logging import get_logger

logger = get_logger(__name__)

NO_PARENT = -1
INF = float("inf")


class RelaxationRule(Enum):
    """Value offered to a neighbour when relaxing an edge."""

    PATH_COST = "path_cost"
    EDGE_WEIGHT = "edge_weight"

    def candidates(self, label_u: float, row: np.ndarray) -> np.ndarray:
        """Return the candidate labels for every vertex given u's weight row."""
        if self is RelaxationRule.PATH_COST:
            return label_u + row
        return row


@dataclass(frozen=True, eq=False)
class Labeling:
    """
    Final state of one engine run.

    Attributes:
        labels: Read-only float64 array. Distance from the source
            (PATH_COST) or weight of the cheapest connecting tree edge
            (EDGE_WEIGHT); ``inf`` for vertices not reachable from the source.
        parents: Read-only int64 array of predecessors, ``NO_PARENT`` (-1)
            for the source and unreachable vertices.
        source: Source vertex.
        rule: Relaxation rule the run used.
        order: Vertices in the order they were selected (length n).
        graph: The graph the run labeled.
    """

    labels: np.ndarray
    parents: np.ndarray
    source: int
    rule: RelaxationRule
    order: Tuple[int, ...]
    graph: DenseGraph

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self.labels.shape[0]

    @property
    def reachable(self) -> np.ndarray:
        """Boolean array, True where a vertex is reachable from the source."""
        return np.isfinite(self.labels)

    @property
    def unreachable(self) -> List[int]:
        """Sorted list of vertices with no path from the source."""
        return [int(v) for v in np.flatnonzero(~self.reachable)]


def _select(labels: np.ndarray, visited: np.ndarray) -> int:
    # argmin returns the first minimum, so ties (including all-inf) go to the
    # lowest unvisited index.
    candidates = np.flatnonzero(~visited)
    return int(candidates[np.argmin(labels[candidates])])


def label_vertices(
    graph: Any,
    source: int,
    rule: RelaxationRule = RelaxationRule.PATH_COST,
    *,
    no_edge: Optional[float] = None,
) -> Labeling:
    """
    Run best-first selection with relaxation from ``source``.

    Args:
        graph: DenseGraph, or any square matrix accepted by DenseGraph.
        source: Source vertex index.
        rule: Candidate label rule; PATH_COST for Dijkstra, EDGE_WEIGHT for
            Prim.
        no_edge: Sentinel for "no edge" when ``graph`` is a raw matrix.

    Returns:
        Labeling with final labels, parents and selection order.
        A vertex selected with an infinite label relaxes nothing, so under
        EDGE_WEIGHT the tree covers only the source's component.

    Raises:
        OutOfRangeError: If source is not in [0, n) or the matrix is not
            square. Raised before any relaxation.
        InvalidWeightError: If the matrix has negative or NaN weights.

    Example:
        >>> labeling = label_vertices([[0, 1], [1, 0]], 0)
        >>> labeling.labels.tolist()
        [0.0, 1.0]
    """
    graph = DenseGraph.from_matrix(graph, no_edge=no_edge)
    source = graph.check_vertex(source, "source")
    n = graph.n
    debug = is_debug_enabled()

    labels = np.full(n, INF)
    parents = np.full(n, NO_PARENT, dtype=np.int64)
    visited = np.zeros(n, dtype=bool)
    labels[source] = 0.0

    order: List[int] = []

    for iteration in range(n):
        u = _select(labels, visited)
        visited[u] = True
        order.append(u)

        # A vertex selected at inf is unreachable; under EDGE_WEIGHT relaxing
        # from it would grow a second tree, so it relaxes nothing.
        if not np.isfinite(labels[u]):
            if debug:
                logger.debug("iteration %d: vertex %d unreachable, skipped", iteration, u)
            continue

        candidate = rule.candidates(labels[u], graph.weights[u])
        improve = graph.edge_mask[u] & ~visited & (candidate < labels)

        if debug:
            before = labels.copy()
            logger.debug(
                "iteration %d: selected %d (label %s), relaxing %s",
                iteration,
                u,
                labels[u],
                np.flatnonzero(improve).tolist(),
            )

        labels[improve] = candidate[improve]
        parents[improve] = u

        if debug and np.any(labels > before):
            raise RuntimeError(f"iteration {iteration}: a label increased")

    labels.setflags(write=False)
    parents.setflags(write=False)

    logger.info(
        "%s run from source %d over %d vertices: %d unreachable",
        rule.value,
        source,
        n,
        int(np.count_nonzero(~np.isfinite(labels))),
    )

    return Labeling(
        labels=labels,
        parents=parents,
        source=source,
        rule=rule,
        order=tuple(order),
        graph=graph,
    )
