"""
Core graph contract shared by every graph representation.

This module provides the abstract base without any adjacency storage of
its own. Concrete representations (adjacency list, adjacency matrix, ...)
own their topology and plug into the contract through two hooks.
"""

import logging
import weakref
from functools import singledispatch
from typing import Iterator, TextIO, Tuple, Union
from abc import ABC, abstractmethod

import numpy as np

from ..classes.edge import Owned, SupportsOther, is_vertex_id
from ..classes.utils import UINT64_MAX, read_header
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Shapes accepted by GraphBase.get_vertex: a vertex id, an edge, or an edge
# behind a shared (weakref.ref) or exclusive (Owned) reference.
EdgeRef = Union[int, np.integer, SupportsOther, 'weakref.ref', Owned]


@singledispatch
def _other_endpoint(edge_ref, known: int) -> int:
    # duck-typed so weakref.proxy and other forwarding wrappers pass through
    other = getattr(edge_ref, 'other', None)
    if callable(other):
        return other(known)
    raise TypeError(
        f"edge reference must be a vertex id, an edge exposing other(), "
        f"or a reference to one; got {type(edge_ref).__name__}"
    )


@_other_endpoint.register(int)
@_other_endpoint.register(np.integer)
def _(edge_ref, known: int) -> int:
    return int(edge_ref)


@_other_endpoint.register(bool)
def _(edge_ref, known: int) -> int:
    raise TypeError("edge reference must be a vertex id, not a bool")


def _referenced_edge(target):
    # a reference must lead to an edge, never to a bare vertex id
    if is_vertex_id(target) or isinstance(target, bool):
        raise TypeError(f"edge reference must point to an edge, not to {type(target).__name__}")
    return target


@_other_endpoint.register(weakref.ref)
def _(edge_ref, known: int) -> int:
    target = edge_ref()
    if target is None:
        raise ReferenceError("edge reference points to an object that no longer exists")
    return _other_endpoint(_referenced_edge(target), known)


@_other_endpoint.register(Owned)
def _(edge_ref, known: int) -> int:
    return _other_endpoint(_referenced_edge(edge_ref.get()), known)


class GraphBase(ABC):
    """
    Abstract base class for all graph types.

    Holds the vertex and edge counts, validates vertex ids and computes
    degree statistics. Subclasses supply the adjacency knowledge through:
    - has_edge: whether an edge connects two vertices
    - _num_adjacent: number of edges sourced at a vertex

    Whether the graph is directed, undirected or weighted is up to the
    subclass.
    """

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def __init__(self, num_vertices: int, num_edges: int = 0):
        """
        Initialize the graph counts.

        Args:
            num_vertices: Number of vertices, fixed for the life of the graph
            num_edges: Number of edges. Only subclasses that already know
                their edge count pass this; it defaults to 0.

        Raises:
            InvalidArgumentError: If either count is not a non-negative integer
        """
        for name, count in (('num_vertices', num_vertices), ('num_edges', num_edges)):
            if not is_vertex_id(count) or count < 0:
                raise InvalidArgumentError(f"{name} must be a non-negative integer, got {count!r}")

        self._num_vertices = int(num_vertices)
        self._num_edges = int(num_edges)
        self._num_edges_updated = False

        logger.debug(f"Initialized {type(self).__name__} with {self._num_vertices} vertices "
                     f"and {self._num_edges} edges")

    @classmethod
    def from_stream(cls, stream: TextIO) -> 'GraphBase':
        """
        Build a graph from a text stream.

        The stream starts with ``<num_vertices> <num_edges>``. The subclass is
        constructed from the vertex count alone, then both header counts are
        stored on the instance. After that the instance gets the same stream
        through ``_read_edges``, so a subclass can parse the edge list that
        follows.

        Args:
            stream: Open text stream, e.g. ``sys.stdin`` or ``io.StringIO``

        Returns:
            The constructed graph

        Raises:
            MalformedInputError: If the header is missing or malformed
        """
        num_vertices, num_edges = cls.read_header(stream)
        graph = cls(num_vertices)

        # header counts win over whatever the subclass constructor stored
        graph._num_vertices = num_vertices
        graph._num_edges = num_edges
        logger.debug(f"Built {type(graph).__name__} from stream header: "
                     f"{num_vertices} vertices, {num_edges} edges")

        graph._read_edges(stream)
        return graph

    @staticmethod
    def read_header(stream: TextIO) -> Tuple[int, int]:
        """Read the two-integer graph header, leaving the rest of the stream."""
        return read_header(stream)

    def _read_edges(self, stream: TextIO) -> None:
        """Hook for subclasses that read an edge list after the header."""

    # ========================================================================
    # COUNTS & VERTICES
    # ========================================================================

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def _set_num_edges(self, num: int) -> None:
        """
        Update the edge count once, for subclasses that learn it late.

        Raises:
            InvalidArgumentError: If num is not a non-negative integer
            RuntimeError: If the edge count has already been updated
        """
        if self._num_edges_updated:
            raise RuntimeError("edge count can only be updated once")
        if not is_vertex_id(num) or num < 0:
            raise InvalidArgumentError(f"num_edges must be a non-negative integer, got {num!r}")

        logger.debug(f"Edge count updated from {self._num_edges} to {num}")
        self._num_edges = int(num)
        self._num_edges_updated = True

    def has_vertex(self, v: int) -> bool:
        return is_vertex_id(v) and 0 <= v < self._num_vertices

    def vertices(self) -> Iterator[int]:
        """Iterate over all vertex ids."""
        return iter(range(self._num_vertices))

    # ========================================================================
    # DEGREE QUERIES
    # ========================================================================

    def degree(self, v: int) -> int:
        """
        Get the degree of a vertex.

        Args:
            v: Vertex ID

        Returns:
            Number of edges sourced at v

        Raises:
            InvalidArgumentError: If v is not a vertex of this graph
        """
        self._validate_vertex(v)
        return self._num_adjacent(v)

    def degrees(self) -> np.ndarray:
        """Get the degree of every vertex, indexed by vertex ID."""
        n = self._num_vertices
        return np.fromiter((self._num_adjacent(v) for v in range(n)), dtype=np.uint64, count=n)

    def min_degree(self) -> int:
        # an empty graph reports the identity of min
        if self._num_vertices == 0:
            return UINT64_MAX
        return int(self.degrees().min())

    def max_degree(self) -> int:
        if self._num_vertices == 0:
            return 0
        return int(self.degrees().max())

    def avg_degree(self) -> float:
        """
        Get the average vertex degree.

        The sum is taken in float64 and divided by the vertex count with
        IEEE semantics, so a graph without vertices yields NaN.
        """
        total = self.degrees().sum(dtype=np.float64)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(total / np.float64(self._num_vertices))

    # ========================================================================
    # ABSTRACT HOOKS
    # ========================================================================

    @abstractmethod
    def has_edge(self, v: int, w: int) -> bool:
        """Whether an edge connects v and w. Direction is the subclass's choice."""

    @abstractmethod
    def _num_adjacent(self, v: int) -> int:
        """Number of edges sourced at v. Called with valid vertex IDs only."""

    # ========================================================================
    # VERTEX NORMALIZATION
    # ========================================================================

    @staticmethod
    def get_vertex(v: int, e: EdgeRef) -> int:
        """
        Get the vertex at the other end of an edge reference.

        Adjacency containers hold either bare vertex ids or edges, and the
        edges may be stored directly or behind a reference. This resolves
        all of them the same way.

        Args:
            v: The known endpoint
            e: A vertex id (returned unchanged), an edge exposing ``other()``,
               or a ``weakref.ref``/``Owned`` wrapping either, nested to any depth

        Returns:
            The opposite endpoint

        Raises:
            TypeError: If e is none of the supported shapes
            ReferenceError: If a weak reference has expired
        """
        return _other_endpoint(e, v)

    # ========================================================================
    # VALIDATION
    # ========================================================================

    def _validate_vertex(self, v: int) -> None:
        """
        Check that v is a vertex of this graph.

        Raises:
            InvalidArgumentError: Unless 0 <= v < num_vertices
        """
        if not is_vertex_id(v) or not self.has_vertex(v):
            raise InvalidArgumentError(
                f"vertex {v!r} is not between 0 and {self._num_vertices - 1}"
            )

    def _validate_vertices(self, v: int, w: int) -> None:
        """
        Check that both v and w are vertices of this graph.

        Raises:
            InvalidArgumentError: Unless 0 <= v, w < num_vertices; the message
                says whether v, w or both are invalid
        """
        v_ok = is_vertex_id(v) and self.has_vertex(v)
        w_ok = is_vertex_id(w) and self.has_vertex(w)
        limit = self._num_vertices - 1

        if not v_ok and not w_ok:
            raise InvalidArgumentError(f"vertices v={v!r} and w={w!r} are not between 0 and {limit}")
        if not v_ok:
            raise InvalidArgumentError(f"vertex v={v!r} is not between 0 and {limit}")
        if not w_ok:
            raise InvalidArgumentError(f"vertex w={w!r} is not between 0 and {limit}")

    def __repr__(self):
        return f"{type(self).__name__}(num_vertices={self._num_vertices}, num_edges={self._num_edges})"
