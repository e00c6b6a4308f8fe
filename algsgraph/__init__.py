"""
algsgraph - Graph Contract for the algs4 Teaching Library

A Python library holding the abstract contract every graph representation
in the library shares: a fixed vertex count, a caller-asserted edge count,
degree queries, and resolution of the vertex at the other end of an edge.

Main Classes:
    GraphBase: Abstract base class for graph representations
    Edge: Weighted edge between two vertices
    Owned: Exclusive-ownership box for an edge

Example:
    >>> import sys
    >>> from algsgraph import GraphBase
    >>> class Graph(GraphBase):
    ...     ...
    >>> graph = Graph.from_stream(sys.stdin)
    >>> graph.avg_degree()
"""

__version__ = "0.1.0"
__author__ = "Prakash Easwar"

# Core must be imported before classes: the collaborators import its exceptions
from algsgraph.core.exceptions import GraphError, InvalidArgumentError, MalformedInputError
from algsgraph.core.graph import GraphBase, EdgeRef
from algsgraph.classes.edge import Edge, Owned, SupportsOther
from algsgraph.classes.utils import read_header, read_uint64

__all__ = [
    'GraphBase',
    'EdgeRef',
    'Edge',
    'Owned',
    'SupportsOther',
    'GraphError',
    'InvalidArgumentError',
    'MalformedInputError',
    'read_header',
    'read_uint64',
]
