"""
Utility functions for reading graph input.

This module provides the token reader shared across the algsgraph package.
Graph input is plain text: whitespace or newline separated unsigned
integers, starting with a ``<num_vertices> <num_edges>`` header.
"""

import logging
from typing import TextIO, Tuple

import numpy as np

from ..core.exceptions import MalformedInputError

logger = logging.getLogger(__name__)

UINT64_MAX = int(np.iinfo(np.uint64).max)


def read_token(stream: TextIO) -> str:
    """
    Read the next whitespace-delimited token from a text stream.

    Leading whitespace is skipped. The character that terminates the token
    is consumed; nothing past it is read, so a caller can keep reading the
    same stream afterwards.

    Args:
        stream: Text stream positioned before the token

    Returns:
        The token, or an empty string if the stream ended first
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)

    return ''.join(chars)


def read_uint64(stream: TextIO) -> int:
    """
    Read one unsigned 64-bit integer from a text stream.

    Args:
        stream: Text stream positioned before the integer

    Returns:
        The parsed value

    Raises:
        MalformedInputError: If the stream is exhausted, the token is not a
            decimal number, or the value does not fit in 64 bits
    """
    token = read_token(stream)
    if not token:
        raise MalformedInputError("unexpected end of input: expected an unsigned integer")

    # str.isdigit() also accepts superscripts and other unicode digits
    if not (token.isascii() and token.isdigit()):
        raise MalformedInputError(f"expected an unsigned integer, got {token!r}")

    value = int(token)
    if value > UINT64_MAX:
        raise MalformedInputError(f"value {token} does not fit in an unsigned 64-bit integer")

    return value


def read_header(stream: TextIO) -> Tuple[int, int]:
    """
    Read the ``<num_vertices> <num_edges>`` header of a graph description.

    Only the two header tokens are consumed; an edge list following them is
    left in the stream.

    Args:
        stream: Text stream positioned at the start of the header

    Returns:
        Tuple of (num_vertices, num_edges)

    Raises:
        MalformedInputError: If either count is missing or malformed
    """
    num_vertices = read_uint64(stream)
    num_edges = read_uint64(stream)
    logger.debug(f"Read graph header: {num_vertices} vertices, {num_edges} edges")
    return num_vertices, num_edges
