"""
Core graph data structure.

Provides DenseGraph, a validated adjacency cost matrix with an explicit
"no edge" sentinel. Vertices are the integers 0..n-1. All edge queries are
answered from a precomputed boolean mask so the engine can scan a whole row
at once.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from .config import resolve_no_edge
from .errors import InvalidWeightError
from .utils import check_square_matrix, check_vertex, to_numpy


@dataclass(eq=False)
class DenseGraph:
    """
    Weighted graph stored as a dense ``n x n`` cost matrix.

    ``weights[u, v]`` is the cost of the edge from u to v. An entry equal to
    ``no_edge``, or an infinite entry, means there is no such edge. Diagonal
    entries are ignored: self-loops are never relaxed.

    Attributes:
        weights: Read-only float64 matrix of shape (n, n).
        no_edge: Sentinel value marking an absent edge.
        edge_mask: Read-only boolean matrix, True where an edge exists.

    Complexity:
        - construction: O(n^2)
        - has_edge, weight: O(1)
        - edges: O(n^2)
    """

    weights: np.ndarray
    no_edge: float
    edge_mask: np.ndarray = field(repr=False)

    def __init__(self, matrix: Any, no_edge: Optional[float] = None):
        """
        Validate and store a weight matrix.

        Args:
            matrix: Square matrix as a list of lists, numpy array or torch
                tensor.
            no_edge: Sentinel for "no edge". Defaults to the configured
                value (99 unless overridden through densepath.config).

        Raises:
            OutOfRangeError: If the matrix is empty or not square.
            InvalidWeightError: If an off-diagonal entry is negative or NaN.
        """
        weights = to_numpy(matrix)
        n = check_square_matrix(weights)
        no_edge = resolve_no_edge(no_edge)

        off_diagonal = ~np.eye(n, dtype=bool)
        missing = (weights == no_edge) | np.isinf(weights)
        checked = off_diagonal & ~missing
        if np.any(np.isnan(weights[checked])):
            raise InvalidWeightError("Weight matrix contains NaN values")
        negative = np.argwhere((weights < 0) & checked)
        if negative.size:
            u, v = (int(i) for i in negative[0])
            raise InvalidWeightError(
                f"Weights must be non-negative. "
                f"Found weight {weights[u, v]} on edge ({u}, {v})"
            )

        mask = checked

        weights.setflags(write=False)
        mask.setflags(write=False)
        self.weights = weights
        self.no_edge = no_edge
        self.edge_mask = mask

    @classmethod
    def from_matrix(cls, matrix: Any, no_edge: Optional[float] = None) -> "DenseGraph":
        """Return ``matrix`` unchanged if it already is a DenseGraph."""
        if isinstance(matrix, DenseGraph):
            if no_edge is None or resolve_no_edge(no_edge) == matrix.no_edge:
                return matrix
            return cls(matrix.weights, no_edge=no_edge)
        return cls(matrix, no_edge=no_edge)

    @property
    def n(self) -> int:
        """Number of vertices."""
        return self.weights.shape[0]

    def check_vertex(self, vertex: Any, name: str = "vertex") -> int:
        """Validate a vertex index against this graph."""
        return check_vertex(vertex, self.n, name)

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if an edge u -> v exists."""
        u = self.check_vertex(u, "u")
        v = self.check_vertex(v, "v")
        return bool(self.edge_mask[u, v])

    def weight(self, u: int, v: int) -> float:
        """
        Return the weight of edge u -> v, or ``inf`` if there is none.

        Raises:
            OutOfRangeError: If u or v is not a vertex.
        """
        if not self.has_edge(u, v):
            return float("inf")
        return float(self.weights[u, v])

    def is_symmetric(self) -> bool:
        """Return True if every edge u -> v has a matching v -> u of equal weight."""
        if not np.array_equal(self.edge_mask, self.edge_mask.T):
            return False
        present = self.edge_mask
        return bool(np.all(self.weights[present] == self.weights.T[present]))

    def edges(self, directed: bool = True) -> List[Tuple[int, int, float]]:
        """
        Return all edges as (u, v, weight) tuples in row-major order.

        Args:
            directed: If False, read only the upper triangle (u < v) so
                each undirected edge appears once.
        """
        mask = self.edge_mask if directed else np.triu(self.edge_mask, k=1)
        return [(int(u), int(v), float(self.weights[u, v])) for u, v in np.argwhere(mask)]
