"""Exceptions raised while decoding LEB128 byte sequences.

All decode failures derive from LEB128Error, which is itself a ValueError, so
callers that already guard codec calls with ``except ValueError`` keep working.
Encoders never raise these; invalid encoder arguments raise the builtin
TypeError or ValueError instead.
"""


class LEB128Error(ValueError):
    """Base class for errors found in an encoded byte sequence.

    Args:
        message: Human readable description of the problem
        offset: Position in the input buffer where the problem was detected
    """

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class InvalidEncoding(LEB128Error):
    """The input is empty, truncated, or has no terminating group."""


class Overflow(LEB128Error):
    """The encoded value does not fit into the target fixed-width integer."""
