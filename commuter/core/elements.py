"""
Type-erased elements.

A diagram mixes sets of different value types: triples of ints, pairs,
plain ints. Everything that flows between sets is wrapped in an Element,
which remembers the runtime type of its value so maps and sets can check
they were handed what they expect.
"""

from dataclasses import dataclass
from typing import Any

from .errors import ContractViolation


@dataclass(frozen=True)
class Element:
    """A value plus its runtime type tag."""
    value: Any

    @property
    def type_tag(self) -> type:
        return type(self.value)

    @property
    def name(self) -> str:
        return repr(self.value)

    def eq(self, other: "Element") -> bool:
        """
        Structural equality across possibly different types.

        Elements whose values have different runtime types are never equal.
        Comparing them is not an error.
        """
        if not isinstance(other, Element):
            return False
        if self.type_tag is not other.type_tag:
            return False
        return bool(self.value == other.value)

    def is_a(self, expected_type) -> bool:
        return expected_type is None or isinstance(self.value, expected_type)

    def downcast(self, expected_type):
        """Return the bare value, or raise ContractViolation on a type mismatch."""
        if not self.is_a(expected_type):
            raise ContractViolation(
                f"Expected an element of type {expected_type.__name__}, "
                f"got {self.type_tag.__name__}: {self.name}"
            )
        return self.value

    def __repr__(self):
        return f"Element({self.name})"


def erase(value) -> Element:
    """Wrap a bare value. Elements pass through unchanged."""
    if isinstance(value, Element):
        return value
    return Element(value)
