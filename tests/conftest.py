"""Pytest configuration and shared fixtures for densepath tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Small reference graphs shared across test modules
- Isolation of the process-wide densepath configuration
"""

import os

import numpy as np
import pytest
import torch

import densepath.config as config

NE = 99


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    generator = torch.Generator()
    generator.manual_seed(seed)
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_config():
    """Undo any change a test makes to the default sentinel or debug flag."""
    no_edge = config.get_default_no_edge()
    debug = config.is_debug_enabled()
    config.set_default_no_edge(99)
    config.set_debug_enabled(False)
    yield
    config.set_default_no_edge(no_edge)
    config.set_debug_enabled(debug)


@pytest.fixture
def directed_four():
    """Directed graph: 0->1 (1), 0->2 (4), 1->2 (2), 1->3 (6), 2->3 (3)."""
    return [
        [0, 1, 4, NE],
        [NE, 0, 2, 6],
        [NE, NE, 0, 3],
        [NE, NE, NE, 0],
    ]


@pytest.fixture
def undirected_four():
    """Undirected version of ``directed_four``."""
    return [
        [0, 1, 4, NE],
        [1, 0, 2, 6],
        [4, 2, 0, 3],
        [NE, 6, 3, 0],
    ]


@pytest.fixture
def random_matrix(rng):
    """Factory for random non-negative matrices with missing edges.

    ``random_matrix(n, density=0.6, symmetric=False, max_weight=9)`` draws
    integer weights in [0, max_weight] and marks the remaining entries with
    the 99 sentinel.
    """

    def make(n, density=0.6, symmetric=False, max_weight=9):
        weights = rng.integers(0, max_weight + 1, size=(n, n)).astype(float)
        present = rng.random((n, n)) < density
        if symmetric:
            weights = np.triu(weights, 1)
            weights = weights + weights.T
            present = np.triu(present, 1)
            present = present | present.T
        matrix = np.where(present, weights, float(NE))
        np.fill_diagonal(matrix, 0.0)
        return matrix

    return make
