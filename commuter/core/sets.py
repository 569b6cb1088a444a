"""
Sets: the nodes of a diagram.

A Set holds its generating elements (the explicit seeds verification
starts from) and two predicates:

    check   -- a correctness property. An element failing it aborts
               verification with PropertyCheckError.
    filter  -- a scope restriction. An element failing it is quietly
               dropped from the comparison it was part of.

A set with no generating elements is still useful: it gets populated
by the images of maps coming into it.
"""

from typing import Callable, Iterable, Iterator, Optional

from .elements import Element, erase


def _accept_all(_value) -> bool:
    return True


def common_type(types) -> Optional[type]:
    """
    The most specific class every one of types derives from.

    None when the only shared base is object: [None, 1] or [0, 0.5] get no
    declared type rather than the type of whichever seed came first.
    """
    types = list(dict.fromkeys(types))
    if not types:
        return None
    for candidate in types[0].__mro__:
        if all(issubclass(t, candidate) for t in types[1:]):
            return None if candidate is object else candidate
    return None


class Set:
    """A typed collection of generating elements with check/filter predicates."""

    def __init__(
        self,
        elements: Iterable = (),
        check: Optional[Callable] = None,
        filter: Optional[Callable] = None,
        element_type: Optional[type] = None,
        name: str = "",
    ):
        self._elements = tuple(erase(e) for e in elements)
        self._check = check or _accept_all
        self._filter = filter or _accept_all
        self.name = name
        if element_type is None and self._elements:
            element_type = common_type(e.type_tag for e in self._elements)
        self.element_type = element_type

    @classmethod
    def unseeded(
        cls,
        check: Optional[Callable] = None,
        filter: Optional[Callable] = None,
        element_type: Optional[type] = None,
        name: str = "",
    ) -> "Set":
        """A set with no generating elements, only reached through maps."""
        return cls((), check=check, filter=filter, element_type=element_type, name=name)

    @property
    def is_checked(self) -> bool:
        return self._check is not _accept_all

    @property
    def is_filtered(self) -> bool:
        return self._filter is not _accept_all

    def elements(self) -> Iterator[Element]:
        """A fresh iterator over the generating elements. Safe to call repeatedly."""
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def check(self, element: Element) -> bool:
        """False means the element violates this set's property."""
        return bool(self._check(element.downcast(self.element_type)))

    def filter(self, element: Element) -> bool:
        """False means the element should be left out of testing."""
        return bool(self._filter(element.downcast(self.element_type)))

    @property
    def label(self) -> str:
        if self.name:
            return self.name
        if self.element_type is not None:
            return self.element_type.__name__
        return "?"

    def __repr__(self):
        return f"Set({self.label}, {len(self._elements)} generating)"
