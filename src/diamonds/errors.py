"""
Errors raised by the diamond game core.
"""


class InvalidArgument(ValueError):
    """
    Raised when a level, board size or bomb count is out of range.

    Subclasses ValueError so callers that already guard configuration
    with ``except ValueError`` keep working.
    """
