"""
Error taxonomy for diagram verification.

All of these abort a verification run. A diagram that simply fails to
commute is not an error -- see DoesNotCommute in checker.py.
"""


class CommutativeDiagramError(Exception):
    """Base class for everything diagram_commutes can raise."""


class CyclicGraphError(CommutativeDiagramError):
    """The graph contains a cycle, so its paths cannot be enumerated."""

    def __init__(self, message: str = "Graph contains at least one cycle - this is currently unsupported"):
        super().__init__(message)


class PropertyCheckError(CommutativeDiagramError):
    """
    An element failed a Set's check predicate.

    at_source is True when the element was a generating element of the
    path's source set, False when it was produced by a map along the path.
    """

    def __init__(self, message: str, element=None, at_source: bool = True):
        super().__init__(message)
        self.element = element
        self.at_source = at_source


class ContractViolation(CommutativeDiagramError):
    """
    The diagram was built wrong: a map index out of range, or an element
    routed into a map or set whose declared type does not match it.
    """
