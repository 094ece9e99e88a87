"""
Minimum spanning tree algorithms on a dense cost matrix: Prim and Kruskal.

Prim runs on the shared labeling engine with the EDGE_WEIGHT rule and builds
the tree of the source's component. Kruskal uses a union-find structure and
returns a minimum spanning forest; it serves as an independent reference for
Prim's total weight.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from typing import Any, List, Optional

from .core import DenseGraph
from .engine import RelaxationRule, label_vertices
from .logging import get_logger
from .reconstruct import SpanningTree, tree_edges

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) over vertices 0..n-1 with path compression and
    union by rank.
    """

    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n

    def find(self, x: int) -> int:
        """Find root of x, compressing the path on the way back."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union the sets containing x and y.

        Returns:
            True if x and y were in different sets, False otherwise.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


def prim_mst(matrix: Any, source: int = 0, *, no_edge: Optional[float] = None) -> SpanningTree:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from ``source`` by repeatedly adding the cheapest edge to a
    vertex not yet in the tree. The matrix should be symmetric; only row u is
    read when u joins the tree, and an asymmetric matrix is logged.

    Args:
        matrix: Square cost matrix or DenseGraph.
        source: Starting vertex (default 0).
        no_edge: Value marking an absent edge.

    Returns:
        SpanningTree of the source's component. ``is_spanning`` is False and
        ``unreachable`` is non-empty when the graph is disconnected.

    Raises:
        OutOfRangeError: If source is out of range or the matrix is not square.
        InvalidWeightError: If the matrix has negative or NaN weights.

    Complexity: O(n^2).

    Example:
        >>> tree = prim_mst([[0, 1, 3], [1, 0, 2], [3, 2, 0]])
        >>> tree.total_weight
        3.0
    """
    graph = DenseGraph.from_matrix(matrix, no_edge=no_edge)
    if not graph.is_symmetric():
        logger.warning("Prim received an asymmetric matrix; reading rows only")

    labeling = label_vertices(graph, source, RelaxationRule.EDGE_WEIGHT)
    return tree_edges(labeling)


def kruskal_mst(matrix: Any, *, no_edge: Optional[float] = None) -> SpanningTree:
    """
    Kruskal's algorithm for minimum spanning forest.

    Edges are read from the upper triangle (u < v) and considered in
    ``(weight, u, v)`` order.

    Args:
        matrix: Square cost matrix or DenseGraph.
        no_edge: Value marking an absent edge.

    Returns:
        SpanningTree holding the forest edges in the order they were
        accepted. ``unreachable`` is empty: a forest covers every vertex.

    Complexity: O(n^2 log n).

    Example:
        >>> kruskal_mst([[0, 1, 3], [1, 0, 2], [3, 2, 0]]).edges
        [(0, 1, 1.0), (1, 2, 2.0)]
    """
    graph = DenseGraph.from_matrix(matrix, no_edge=no_edge)
    edge_list = graph.edges(directed=False)
    edge_list.sort(key=lambda e: (e[2], e[0], e[1]))

    uf = UnionFind(graph.n)
    forest = [(u, v, w) for u, v, w in edge_list if uf.union(u, v)]
    return SpanningTree(n=graph.n, edges=forest)
