"""
Collaborator classes for the graph contract.

This module contains the edge value type and the text reader used to
build graphs from a stream.
"""

from .edge import Edge, Owned, SupportsOther, is_vertex_id
from .utils import read_header, read_uint64

__all__ = [
    'Edge',
    'Owned',
    'SupportsOther',
    'is_vertex_id',
    'read_header',
    'read_uint64',
]
