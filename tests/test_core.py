"""Tests for the DenseGraph container and matrix validation."""

import math

import numpy as np
import pytest
import torch

from densepath import DenseGraph, InvalidWeightError, OutOfRangeError, no_edge_context


class TestConstruction:
    """Tests for DenseGraph construction."""

    def test_from_lists(self, directed_four):
        """Lists of lists become a float64 matrix."""
        G = DenseGraph(directed_four)
        assert G.n == 4
        assert G.weights.dtype == np.float64
        assert G.no_edge == 99.0

    def test_from_numpy(self):
        """numpy input is copied, not aliased."""
        matrix = np.array([[0, 2], [2, 0]])
        G = DenseGraph(matrix)
        matrix[0, 1] = 7
        assert G.weights[0, 1] == 2.0

    def test_from_torch(self, torch_rng):
        """torch tensors are detached and converted."""
        tensor = torch.randint(1, 9, (3, 3), generator=torch_rng).float()
        tensor.requires_grad_(True)
        G = DenseGraph(tensor)
        np.testing.assert_array_equal(G.weights, tensor.detach().double().numpy())

    def test_complex_tensor_rejected(self):
        """Complex tensors are not weight matrices."""
        with pytest.raises(ValueError, match="Complex"):
            DenseGraph(torch.zeros((2, 2), dtype=torch.complex64))

    def test_weights_read_only(self, directed_four):
        """The stored matrix cannot be mutated."""
        G = DenseGraph(directed_four)
        with pytest.raises(ValueError):
            G.weights[0, 1] = 3.0

    def test_from_matrix_reuses_graph(self, directed_four):
        """from_matrix returns the same DenseGraph when the sentinel matches."""
        G = DenseGraph(directed_four)
        assert DenseGraph.from_matrix(G) is G
        assert DenseGraph.from_matrix(G, no_edge=99) is G

    def test_from_matrix_rebuilds_for_new_sentinel(self, directed_four):
        """A different sentinel rebuilds the edge mask."""
        G = DenseGraph(directed_four)
        H = DenseGraph.from_matrix(G, no_edge=6)
        assert H is not G
        assert H.has_edge(0, 3)
        assert not H.has_edge(1, 3)


class TestValidation:
    """Tests for matrix validation failures."""

    def test_empty_matrix(self):
        """Zero vertices is out of range."""
        with pytest.raises(OutOfRangeError):
            DenseGraph(np.zeros((0, 0)))

    def test_non_square(self):
        """Rectangular matrices are rejected."""
        with pytest.raises(OutOfRangeError, match="square"):
            DenseGraph([[0, 1, 2], [1, 0, 2]])

    def test_ragged_rows(self):
        """Rows of unequal length are rejected."""
        with pytest.raises(OutOfRangeError, match="unequal"):
            DenseGraph([[0, 1], [1]])

    def test_ragged_numpy_rows(self):
        """A list of numpy rows of unequal length is rejected the same way."""
        with pytest.raises(OutOfRangeError, match="unequal"):
            DenseGraph([np.array([0.0, 1.0]), np.array([1.0])])

    def test_one_dimensional(self):
        """Vectors are not matrices."""
        with pytest.raises(OutOfRangeError, match="2D"):
            DenseGraph([0, 1, 2])

    def test_negative_weight(self):
        """Negative off-diagonal weights are rejected with their location."""
        with pytest.raises(InvalidWeightError, match=r"\(1, 0\)"):
            DenseGraph([[0, 1], [-2, 0]])

    def test_nan_weight(self):
        """NaN weights are rejected."""
        with pytest.raises(InvalidWeightError, match="NaN"):
            DenseGraph([[0, float("nan")], [1, 0]])

    def test_negative_diagonal_ignored(self):
        """The diagonal is not validated because it is never read."""
        G = DenseGraph([[-1, 1], [1, -1]])
        assert G.has_edge(0, 1)

    def test_non_numeric(self):
        """Entries that are not numbers raise ValueError."""
        with pytest.raises(ValueError):
            DenseGraph([["a", "b"], ["c", "d"]])

    def test_invalid_weight_is_value_error(self):
        """InvalidWeightError belongs to the ValueError family."""
        assert issubclass(InvalidWeightError, ValueError)
        assert issubclass(OutOfRangeError, ValueError)


class TestEdges:
    """Tests for edge queries."""

    def test_has_edge(self, directed_four):
        """Sentinel and diagonal entries are not edges."""
        G = DenseGraph(directed_four)
        assert G.has_edge(0, 1)
        assert not G.has_edge(1, 0)
        assert not G.has_edge(2, 2)

    def test_has_edge_out_of_range(self, directed_four):
        """Edge queries validate both endpoints."""
        G = DenseGraph(directed_four)
        with pytest.raises(OutOfRangeError):
            G.has_edge(0, 4)

    def test_weight(self, directed_four):
        """Missing edges weigh infinity."""
        G = DenseGraph(directed_four)
        assert G.weight(1, 3) == 6.0
        assert math.isinf(G.weight(3, 0))

    def test_infinite_entries_are_missing(self):
        """inf entries mean no edge regardless of the sentinel."""
        G = DenseGraph([[0, math.inf], [3, 0]])
        assert not G.has_edge(0, 1)
        assert G.has_edge(1, 0)

    def test_custom_sentinel(self):
        """An explicit sentinel overrides the default."""
        G = DenseGraph([[0, 1000], [99, 0]], no_edge=1000)
        assert not G.has_edge(0, 1)
        assert G.has_edge(1, 0)

    def test_negative_sentinel(self):
        """A negative sentinel marks missing edges instead of failing validation."""
        G = DenseGraph([[0, -1, 4], [-1, 0, -1], [4, -1, 0]], no_edge=-1)
        assert not G.has_edge(0, 1)
        assert G.has_edge(0, 2)
        assert G.edges(directed=False) == [(0, 2, 4.0)]

    def test_negative_weight_with_negative_sentinel(self):
        """Other negative weights are still rejected under a negative sentinel."""
        with pytest.raises(InvalidWeightError, match=r"\(0, 1\)"):
            DenseGraph([[0, -2], [-1, 0]], no_edge=-1)

    def test_configured_sentinel(self):
        """The configured default applies when no sentinel is given."""
        with no_edge_context(0):
            G = DenseGraph([[0, 0, 5], [0, 0, 0], [5, 0, 0]])
        assert G.no_edge == 0.0
        assert G.edges() == [(0, 2, 5.0), (2, 0, 5.0)]

    def test_directed_edges(self, directed_four):
        """Directed edge listing is row-major."""
        G = DenseGraph(directed_four)
        assert G.edges() == [
            (0, 1, 1.0),
            (0, 2, 4.0),
            (1, 2, 2.0),
            (1, 3, 6.0),
            (2, 3, 3.0),
        ]

    def test_undirected_edges(self, undirected_four):
        """Undirected listing reads the upper triangle only."""
        G = DenseGraph(undirected_four)
        assert G.edges(directed=False) == [
            (0, 1, 1.0),
            (0, 2, 4.0),
            (1, 2, 2.0),
            (1, 3, 6.0),
            (2, 3, 3.0),
        ]

    def test_is_symmetric(self, directed_four, undirected_four):
        """Symmetry compares edge presence and weight."""
        assert DenseGraph(undirected_four).is_symmetric()
        assert not DenseGraph(directed_four).is_symmetric()
        assert not DenseGraph([[0, 1], [2, 0]]).is_symmetric()
