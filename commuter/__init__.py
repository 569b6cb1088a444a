"""
Commuter: check that commutative diagrams actually commute.

A diagram is a directed acyclic graph whose nodes are sets of values and
whose edges are functions between them. It commutes when any two paths
between the same pair of sets agree on every generating element. This
turns algebraic laws ("is addition associative?") into diagrams that can
be checked exhaustively.

Usage:
    python -m commuter --diagram associativity
    python -m commuter --diagram broken_associativity
    python -m commuter --diagram distributivity --size 8 --paths
    python -m commuter --diagram commutativity --dot commutativity.dot
"""

from .core.errors import CommutativeDiagramError, CyclicGraphError, PropertyCheckError, ContractViolation
from .core.graph import DiGraph, AdjacencyGraph, SimpleEdge, all_paths
from .core.elements import Element
from .core.sets import Set
from .core.maps import Map
from .core.diagram import Diagram, DiagramEdge
from .core.checker import CommutativeDiagramResult, Commutes, DoesNotCommute, diagram_commutes

__all__ = [
    "CommutativeDiagramError", "CyclicGraphError", "PropertyCheckError", "ContractViolation",
    "DiGraph", "AdjacencyGraph", "SimpleEdge", "all_paths",
    "Element", "Set", "Map",
    "Diagram", "DiagramEdge",
    "CommutativeDiagramResult", "Commutes", "DoesNotCommute", "diagram_commutes",
]
