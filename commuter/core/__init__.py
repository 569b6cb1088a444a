from .errors import CommutativeDiagramError, CyclicGraphError, PropertyCheckError, ContractViolation
from .graph import DiGraph, SimpleEdge, AdjacencyGraph, all_paths, path_source, path_target
from .elements import Element, erase
from .sets import Set
from .maps import Map
from .diagram import Diagram, DiagramEdge, PATH_SEPARATOR
from .checker import (
    CommutativeDiagramResult, Commutes, DoesNotCommute,
    diagram_commutes, replay, paths_are_coterminal,
)

__all__ = [
    "CommutativeDiagramError", "CyclicGraphError", "PropertyCheckError", "ContractViolation",
    "DiGraph", "SimpleEdge", "AdjacencyGraph", "all_paths", "path_source", "path_target",
    "Element", "erase",
    "Set", "Map",
    "Diagram", "DiagramEdge", "PATH_SEPARATOR",
    "CommutativeDiagramResult", "Commutes", "DoesNotCommute",
    "diagram_commutes", "replay", "paths_are_coterminal",
]
