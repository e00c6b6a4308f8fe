"""
Core graph contract and its error types.

This module contains the abstract base shared by every graph
representation, without any adjacency storage of its own.
"""

from .exceptions import GraphError, InvalidArgumentError, MalformedInputError
from .graph import GraphBase, EdgeRef

__all__ = [
    'GraphBase',
    'EdgeRef',
    'GraphError',
    'InvalidArgumentError',
    'MalformedInputError',
]
