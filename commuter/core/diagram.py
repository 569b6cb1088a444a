"""
Diagrams: sets as nodes, maps as edges.

A Diagram is itself a graph: its nodes are the indices of its sets, and
each map contributes one edge. Several maps may connect the same two
sets; their edges are told apart by the map index they carry.
"""

from dataclasses import dataclass

from .errors import ContractViolation
from .graph import DiGraph, all_paths
from .maps import Map
from .sets import Set


PATH_SEPARATOR = " -> "


@dataclass(frozen=True)
class DiagramEdge:
    """One edge of a diagram: source set, target set, and which map."""
    source: int
    target: int
    ix: int

    def __repr__(self):
        return f"{self.source}->{self.target}[{self.ix}]"


class Diagram(DiGraph):
    """An ordered list of Sets and an ordered list of Maps between them."""

    def __init__(self, sets: list, maps: list):
        self.sets = tuple(sets)
        for i, s in enumerate(self.sets):
            if not isinstance(s, Set):
                raise ContractViolation(f"Node {i} is not a Set: {s!r}")

        bound = []
        for ix, m in enumerate(maps):
            if not isinstance(m, Map):
                raise ContractViolation(f"Edge {ix} is not a Map: {m!r}")
            for end in (m.source, m.target):
                if not isinstance(end, int) or not 0 <= end < len(self.sets):
                    raise ContractViolation(
                        f"Map {m.name!r} refers to set {end!r}, "
                        f"but the diagram only has {len(self.sets)} sets"
                    )
            bound.append(m.bound_to(self.sets[m.source].element_type))
        self.maps = tuple(bound)

    def nodes(self):
        return list(range(len(self.sets)))

    def outbounds(self, node):
        return [
            DiagramEdge(m.source, m.target, ix)
            for ix, m in enumerate(self.maps)
            if m.source == node
        ]

    def edges(self):
        return [DiagramEdge(m.source, m.target, ix) for ix, m in enumerate(self.maps)]

    def paths(self) -> list:
        """Every path through the diagram. Raises CyclicGraphError on cycles."""
        return all_paths(self)

    def map_for(self, edge: DiagramEdge) -> Map:
        return self.maps[edge.ix]

    def describe_path(self, path) -> str:
        """Map names along the path, e.g. '(+,id) -> (+)'."""
        return PATH_SEPARATOR.join(self.map_for(edge).name for edge in path)

    def __repr__(self):
        return f"Diagram({len(self.sets)} sets, {len(self.maps)} maps)"
