"""
Directed graphs and path enumeration.

A graph is anything with:
    nodes()          -> iterable of nodes
    outbounds(node)  -> iterable of edges leaving node

and an edge is anything with `source` and `target` attributes. Nodes
only need to support ==. Nothing here knows what a node means.

Only acyclic graphs are supported.
"""

from dataclasses import dataclass
from typing import Hashable

from .errors import CyclicGraphError


class DiGraph:
    """Minimal graph interface. Subclass it or just duck-type it."""

    def nodes(self):
        raise NotImplementedError

    def outbounds(self, node):
        raise NotImplementedError


@dataclass(frozen=True)
class SimpleEdge:
    """A bare (source, target) edge."""
    source: Hashable
    target: Hashable

    def __repr__(self):
        return f"{self.source}->{self.target}"


class AdjacencyGraph(DiGraph):
    """A graph given as a node list and an edge list."""

    def __init__(self, nodes, edges):
        self._nodes = list(nodes)
        self._edges = list(edges)

    def nodes(self):
        return list(self._nodes)

    def outbounds(self, node):
        return [e for e in self._edges if e.source == node]

    @classmethod
    def from_pairs(cls, nodes, pairs):
        return cls(nodes, [SimpleEdge(a, b) for a, b in pairs])


def all_paths(graph) -> list:
    """
    Compute *all* paths in the graph.

    Every path of length >= 1 reachable by following edges forward from
    any node is returned, so every prefix of a returned path is also
    returned. Each path is a tuple of edges. Paths come out in depth-first
    preorder: node order first, then outbound order.

    Raises CyclicGraphError as soon as a path would step back onto a node
    it has already visited -- either the node the current search started
    from, or any node in between.
    """
    paths = []

    for initial_vertex in graph.nodes():
        # Explicit stack instead of recursion; children are pushed reversed
        # so they pop in outbound order.
        stack = [(edge,) for edge in reversed(list(graph.outbounds(initial_vertex)))]

        while stack:
            current_path = stack.pop()
            paths.append(current_path)

            current_destination = current_path[-1].target
            if current_destination == initial_vertex:
                raise CyclicGraphError()
            if any(current_destination == edge.target for edge in current_path[:-1]):
                raise CyclicGraphError()

            for next_edge in reversed(list(graph.outbounds(current_destination))):
                stack.append(current_path + (next_edge,))

    return paths


def path_source(path):
    """The node a path starts from, or None for an empty path."""
    return path[0].source if path else None


def path_target(path):
    """The node a path ends at, or None for an empty path."""
    return path[-1].target if path else None
