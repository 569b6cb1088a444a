"""
Maps: the edges of a diagram.

A Map is a named function from one set (by node index) to another. It
is invoked on type-erased Elements: if the element is not of the map's
declared input type, invoke() returns None instead of calling the
function.
"""

from typing import Callable, Optional

from .elements import Element, erase


class Map:
    """A named function between two sets of a diagram."""

    def __init__(
        self,
        source: int,
        target: int,
        fn: Callable,
        name: str,
        domain: Optional[type] = None,
    ):
        self.source = source
        self.target = target
        self.fn = fn
        self.name = name
        self.domain = domain

    def accepts(self, element: Element) -> bool:
        return element.is_a(self.domain)

    def invoke(self, element: Element) -> Optional[Element]:
        """Apply the map, or return None if the element has the wrong type."""
        if not self.accepts(element):
            return None
        return erase(self.fn(element.value))

    def bound_to(self, domain: Optional[type]) -> "Map":
        """A copy of this map with its input type filled in."""
        if self.domain is not None or domain is None:
            return self
        return Map(self.source, self.target, self.fn, self.name, domain=domain)

    def __repr__(self):
        return f"Map({self.name!r}: {self.source} -> {self.target})"
