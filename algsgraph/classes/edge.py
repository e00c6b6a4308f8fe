"""
Edge representation between vertices.

An edge only has to answer one question for the graph contract: given one
of its endpoints, which vertex is at the other end. ``SupportsOther`` names
that capability; ``Edge`` is the value type the library ships with it.
"""

import logging
from typing import Any, Generic, Protocol, Tuple, TypeVar, runtime_checkable

import numpy as np

from ..core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def is_vertex_id(value: Any) -> bool:
    """Return True for a plain or NumPy integer that is not a boolean."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@runtime_checkable
class SupportsOther(Protocol):
    """Anything that can name the endpoint opposite a known one."""

    def other(self, vertex: int) -> int:
        ...


class Edge:
    """
    Weighted edge between two vertices.

    The weight is optional and defaults to 0.0 for unweighted graphs.
    Edges compare by weight, so they can be sorted or pushed onto a heap
    directly.
    """

    __slots__ = ('_v', '_w', '_weight', '__weakref__')

    def __init__(self, v: int, w: int, weight: float = 0.0):
        """
        Create an edge.

        Args:
            v: One endpoint
            w: The other endpoint
            weight: Edge weight

        Raises:
            InvalidArgumentError: If an endpoint is not a non-negative integer
        """
        for vertex in (v, w):
            if not is_vertex_id(vertex) or vertex < 0:
                raise InvalidArgumentError(f"edge endpoint must be a non-negative integer, got {vertex!r}")

        self._v = int(v)
        self._w = int(w)
        self._weight = float(weight)

    @property
    def weight(self) -> float:
        return self._weight

    def either(self) -> int:
        """Return one endpoint of the edge."""
        return self._v

    def other(self, vertex: int) -> int:
        """
        Return the endpoint opposite ``vertex``.

        Args:
            vertex: One endpoint of this edge

        Returns:
            The other endpoint (the same vertex for a self-loop)

        Raises:
            InvalidArgumentError: If ``vertex`` is not an endpoint of this edge
        """
        if vertex == self._v:
            return self._w
        if vertex == self._w:
            return self._v
        raise InvalidArgumentError(f"vertex {vertex} is not an endpoint of {self!r}")

    def endpoints(self) -> Tuple[int, int]:
        return self._v, self._w

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._v, self._w, self._weight) == (other._v, other._w, other._weight)

    def __hash__(self):
        return hash((self._v, self._w, self._weight))

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self._weight < other._weight

    def __repr__(self):
        return f"Edge({self._v}, {self._w}, weight={self._weight:.5f})"


class Owned(Generic[T]):
    """
    Box holding the only reference to a value.

    Used to hand an edge to code that must dereference it explicitly,
    the way a ``weakref.ref`` is dereferenced for a shared edge.
    """

    __slots__ = ('_value', '__weakref__')

    def __init__(self, value: T):
        self._value = value

    def get(self) -> T:
        return self._value

    def __repr__(self):
        return f"Owned({self._value!r})"
