"""Text input and output for dense-matrix problems.

The input format is the one the classic console lab programs read: a vertex
count ``n``, then ``n * n`` matrix entries in row-major order, then the
source vertex, all separated by arbitrary whitespace::

    4
    0  1  4 99
    1  0  2  6
    4  2  0  3
    99 6  3  0
    0

Rendering produces one line per destination for shortest paths and an
``Edge / Weight`` table for spanning trees.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .core import DenseGraph
from .engine import Labeling
from .errors import OutOfRangeError
from .reconstruct import SpanningTree, trace_path


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError as exc:
        raise ValueError(f"Expected a number, got {token!r}") from exc


def _parse_count(token: str, what: str) -> int:
    value = _parse_number(token)
    if not value.is_integer():
        raise ValueError(f"{what} must be an integer, got {token!r}")
    return int(value)


def parse_problem_string(
    text: str, *, no_edge: Optional[float] = None
) -> Tuple[DenseGraph, int]:
    """
    Parse ``n``, an ``n x n`` matrix and a source vertex from text.

    Parameters
    ----------
    text : str
        Whitespace-separated tokens. Matrix entries may be integers,
        decimals or ``inf``.
    no_edge : float, optional
        Sentinel for "no edge"; defaults to the configured value.

    Returns
    -------
    (DenseGraph, int)
        The validated graph and the source vertex.

    Raises
    ------
    ValueError
        If a token is not a number or n is not a positive integer.
    OutOfRangeError
        If the token count does not match ``n`` or the source is out of
        range.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("Empty problem text")

    n = _parse_count(tokens[0], "Vertex count")
    if n <= 0:
        raise ValueError(f"Vertex count must be positive, got {n}")

    expected = 1 + n * n + 1
    if len(tokens) != expected:
        raise OutOfRangeError(
            f"Expected {n * n} matrix entries and a source vertex "
            f"({expected} tokens), got {len(tokens)} tokens"
        )

    values = [_parse_number(tok) for tok in tokens[1 : 1 + n * n]]
    matrix = [values[row * n : (row + 1) * n] for row in range(n)]
    graph = DenseGraph(matrix, no_edge=no_edge)
    source = graph.check_vertex(_parse_count(tokens[-1], "Source vertex"), "source")
    return graph, source


def parse_problem_file(
    path: Union[str, Path], *, no_edge: Optional[float] = None
) -> Tuple[DenseGraph, int]:
    """Read a problem file and parse it with :func:`parse_problem_string`."""
    return parse_problem_string(Path(path).read_text(), no_edge=no_edge)


def format_weight(value: float) -> str:
    """Render integral weights without a decimal point."""
    if math.isinf(value):
        return "inf"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_shortest_paths(labeling: Labeling) -> str:
    """
    Render one line per vertex other than the source.

    Reachable vertices read ``"0 -> 1 -> 2 = 3"``; unreachable ones read
    ``"0 -> 3 : unreachable"``. A one-vertex graph renders as an empty
    string.
    """
    lines: List[str] = []
    for v in range(labeling.n):
        if v == labeling.source:
            continue
        if labeling.reachable[v]:
            route = " -> ".join(str(x) for x in trace_path(labeling, v))
            lines.append(f"{route} = {format_weight(labeling.labels[v])}")
        else:
            lines.append(f"{labeling.source} -> {v} : unreachable")
    return "\n".join(lines)


def format_spanning_tree(tree: SpanningTree) -> str:
    """
    Render a spanning tree as an ``Edge / Weight`` table with its total.

    A partial tree gets a final line naming the vertices it does not reach.
    """
    lines = ["Edge\tWeight"]
    for u, v, w in tree.edges:
        lines.append(f"{u} - {v}\t{format_weight(w)}")
    lines.append(f"Total weight: {format_weight(tree.total_weight)}")
    if tree.unreachable:
        listed = ", ".join(str(v) for v in tree.unreachable)
        lines.append(f"Unreachable: {listed}")
    return "\n".join(lines)
