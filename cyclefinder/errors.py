# cyclefinder/errors.py
"""
Exception hierarchy

-----------------------------
Purpose:
    - One base class so callers can catch everything raised by the package
    - Each subclass also derives from the matching builtin, so plain
      ``except ValueError`` style handlers keep working
"""

from typing import Optional


class CycleFinderError(Exception):
    """Base class for all errors raised by cyclefinder"""


class AdjacencyFormatError(CycleFinderError, ValueError):
    """
    A line of an adjacency file does not match ``u: v w v w ...``

    Attributes
    ----------
    line_number : Optional[int]
        1-based line number of the offending line
    line : Optional[str]
        The offending line as read
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class VertexOutOfRangeError(CycleFinderError, IndexError):
    """A vertex index lies outside ``[0, vertex_count)``"""


class GraphFrozenError(CycleFinderError, RuntimeError):
    """Mutation attempted on a graph that has already been frozen"""


class DeadlineExceededError(CycleFinderError, TimeoutError):
    """The cycle search ran past its deadline"""
