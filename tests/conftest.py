# tests/conftest.py
import pytest
import numpy as np

from algsgraph import Edge, GraphBase
from algsgraph.classes.utils import read_uint64


class ListGraph(GraphBase):
    """Undirected graph storing Edge objects in adjacency lists."""

    def __init__(self, num_vertices, num_edges=0):
        super().__init__(num_vertices, num_edges)
        self.adj = [[] for _ in range(num_vertices)]

    def add_edge(self, v, w):
        self._validate_vertices(v, w)
        edge = Edge(v, w)
        self.adj[v].append(edge)
        if v != w:
            self.adj[w].append(edge)

    def _read_edges(self, stream):
        for _ in range(self.num_edges):
            self.add_edge(read_uint64(stream), read_uint64(stream))

    def has_edge(self, v, w):
        self._validate_vertices(v, w)
        return any(self.get_vertex(v, e) == w for e in self.adj[v])

    def _num_adjacent(self, v):
        return len(self.adj[v])


class MatrixGraph(GraphBase):
    """Directed graph on a boolean matrix; the edge count is set after loading."""

    def __init__(self, num_vertices, num_edges=0):
        super().__init__(num_vertices)
        self.matrix = np.zeros((num_vertices, num_vertices), dtype=bool)

    def load(self, pairs):
        for v, w in pairs:
            self._validate_vertices(v, w)
            self.matrix[v, w] = True
        self._set_num_edges(int(self.matrix.sum()))

    def has_edge(self, v, w):
        self._validate_vertices(v, w)
        return bool(self.matrix[v, w])

    def _num_adjacent(self, v):
        return int(self.matrix[v].sum())


@pytest.fixture
def triangle_with_tail():
    # 0-1, 1-2, 2-0, 2-3 ; degrees 2, 2, 3, 1
    graph = ListGraph(4)
    for v, w in [(0, 1), (1, 2), (2, 0), (2, 3)]:
        graph.add_edge(v, w)
    return graph


@pytest.fixture
def directed_star():
    # 0 -> 1, 0 -> 2, 0 -> 3, 3 -> 0 ; out-degrees 3, 0, 0, 1
    graph = MatrixGraph(4)
    graph.load([(0, 1), (0, 2), (0, 3), (3, 0)])
    return graph


@pytest.fixture
def empty_graph():
    return ListGraph(0)
