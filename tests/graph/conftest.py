"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from cyclewitness.graph.matrix import AdjacencyMatrix


@pytest.fixture
def empty_matrix() -> AdjacencyMatrix:
    return AdjacencyMatrix.empty()


@pytest.fixture
def cyclic_matrix() -> AdjacencyMatrix:
    """0 -> 1, 1 -> 2, 1 -> 3, 3 -> 1"""
    return AdjacencyMatrix([
        [0, 1, 0, 0],
        [0, 0, 1, 1],
        [0, 0, 0, 0],
        [0, 1, 0, 0],
    ])


@pytest.fixture
def acyclic_matrix() -> AdjacencyMatrix:
    """0 -> 1 -> 3, 0 -> 2 -> 3"""
    return AdjacencyMatrix([
        [0, 1, 1, 0],
        [0, 0, 0, 1],
        [0, 0, 0, 1],
        [0, 0, 0, 0],
    ])


@pytest.fixture
def triangle_with_tail() -> AdjacencyMatrix:
    """0 -> 1 -> 2 -> 0, plus 2 -> 3 -> 4"""
    return AdjacencyMatrix.from_edges(
        5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4)]
    )
