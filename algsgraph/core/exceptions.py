"""
Exception types raised by the graph contract.

All errors propagate to the caller unchanged; nothing in the package
recovers from them.
"""


class GraphError(Exception):
    """Base class for errors raised by algsgraph."""


class InvalidArgumentError(GraphError, ValueError):
    """A vertex id or count lies outside the range the graph accepts."""


class MalformedInputError(GraphError, ValueError):
    """A text stream does not hold the expected unsigned integer tokens."""
