"""
Example: shortest paths and spanning trees on a dense cost matrix

Builds one small weighted network, then runs Dijkstra and Prim on it through
the shared labeling engine, cross-checks Prim against Kruskal, and shows how
an unreachable vertex is reported.
"""

import warnings

import numpy as np
import torch

from densepath import (
    UnreachableVertexWarning,
    all_paths,
    dijkstra,
    format_shortest_paths,
    format_spanning_tree,
    kruskal_mst,
    parse_problem_string,
    prim_mst,
)

PROBLEM = """\
5
 0  3 99  7  8
 3  0  4  2 99
99  4  0  5  6
 7  2  5  0  3
 8 99  6  3  0
0
"""


def example_shortest_paths():
    """Example: Dijkstra from the console-format problem."""
    print("=" * 60)
    print("Example 1: Shortest paths")
    print("=" * 60)

    graph, source = parse_problem_string(PROBLEM)
    labeling = dijkstra(graph, source)
    print(f"Shortest paths from source {source}:")
    print(format_shortest_paths(labeling))
    print()


def example_spanning_tree():
    """Example: Prim's tree, checked against Kruskal."""
    print("=" * 60)
    print("Example 2: Minimum spanning tree")
    print("=" * 60)

    graph, source = parse_problem_string(PROBLEM)
    tree = prim_mst(graph, source)
    print(format_spanning_tree(tree))
    print(f"Kruskal total weight: {kruskal_mst(graph).total_weight:g}")
    print()


def example_unreachable():
    """Example: a disconnected tensor input."""
    print("=" * 60)
    print("Example 3: Unreachable vertices")
    print("=" * 60)

    matrix = torch.tensor(
        [
            [0.0, 1.5, np.inf],
            [1.5, 0.0, np.inf],
            [np.inf, np.inf, 0.0],
        ]
    )
    labeling = dijkstra(matrix, 0)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", UnreachableVertexWarning)
        paths = all_paths(labeling)
    print(f"Labels: {labeling.labels.tolist()}")
    print(f"Paths: {paths}")
    for warning in caught:
        print(f"Warning: {warning.message}")
    print(format_shortest_paths(labeling))
    print()


if __name__ == "__main__":
    example_shortest_paths()
    example_spanning_tree()
    example_unreachable()
