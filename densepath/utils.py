"""Utility helpers for matrix conversion and index validation."""

from __future__ import annotations

from typing import Any

import numpy as np
import torch

from .errors import OutOfRangeError


def to_numpy(matrix: Any) -> np.ndarray:
    """Convert a list of lists, numpy array or torch tensor to float64.

    Args:
        matrix: Array-like weight matrix. Tensors may live on any device and
            may require grad; they are detached and copied to host memory.

    Returns:
        A new float64 numpy array.

    Raises:
        OutOfRangeError: If a sequence of rows has rows of unequal length.
        ValueError: If the input cannot be converted to real numbers.
    """
    if isinstance(matrix, torch.Tensor):
        if matrix.is_complex():
            raise ValueError("Complex weights are not supported.")
        matrix = matrix.detach().cpu().to(torch.float64).numpy()
    elif isinstance(matrix, (list, tuple)):
        lengths = {
            len(row)
            for row in matrix
            if hasattr(row, "__len__") and not isinstance(row, (str, bytes))
        }
        if len(lengths) > 1:
            raise OutOfRangeError("Weight matrix rows have unequal lengths")
    try:
        array = np.array(matrix, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError("Weight matrix cannot be converted to float64.") from exc
    return array


def check_square_matrix(array: np.ndarray) -> int:
    """Validate that ``array`` is a non-empty square 2D matrix.

    Returns:
        The number of vertices ``n``.

    Raises:
        OutOfRangeError: If the matrix is empty or not square.
    """
    if array.ndim != 2:
        raise OutOfRangeError(f"Expected 2D weight matrix, got {array.ndim}D array")
    rows, cols = array.shape
    if rows != cols:
        raise OutOfRangeError(f"Weight matrix must be square, got shape {array.shape}")
    if rows == 0:
        raise OutOfRangeError("Weight matrix must have at least one vertex")
    return rows


def check_vertex(vertex: Any, n: int, name: str = "vertex") -> int:
    """Validate a vertex index and return it as a plain int.

    Raises:
        OutOfRangeError: If ``vertex`` is not an integer in ``[0, n)``.
    """
    if isinstance(vertex, (bool, np.bool_)) or not isinstance(
        vertex, (int, np.integer)
    ):
        raise OutOfRangeError(f"{name} must be an integer index, got {vertex!r}")
    if not 0 <= vertex < n:
        raise OutOfRangeError(f"{name} {vertex} out of range [0, {n})")
    return int(vertex)
