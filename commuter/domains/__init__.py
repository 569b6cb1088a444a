"""
Diagram registry.

Each entry describes a ready-made diagram:
    make_diagram:  (size) -> Diagram
    commutes:      whether the law actually holds
    description:   str
"""

from .associativity import (
    triples,
    make_associativity_diagram, make_broken_associativity_diagram,
    make_filtered_associativity_diagram, make_subtraction_diagram,
)
from .laws import pairs, make_commutativity_diagram, make_distributivity_diagram


DOMAINS = {
    "associativity": {
        "make_diagram": make_associativity_diagram,
        "commutes":     True,
        "description":  "(a+b)+c == a+(b+c) on integer triples",
    },
    "broken_associativity": {
        "make_diagram": make_broken_associativity_diagram,
        "commutes":     False,
        "description":  "Associativity with the right side off by one when c == 4",
    },
    "filtered_associativity": {
        "make_diagram": make_filtered_associativity_diagram,
        "commutes":     True,
        "description":  "Associativity restricted by filters on the intermediate pairs",
    },
    "subtraction": {
        "make_diagram": make_subtraction_diagram,
        "commutes":     False,
        "description":  "(a-b)-c vs a-(b-c): subtraction is not associative",
    },
    "commutativity": {
        "make_diagram": make_commutativity_diagram,
        "commutes":     True,
        "description":  "a+b == b+a through a swap map",
    },
    "distributivity": {
        "make_diagram": make_distributivity_diagram,
        "commutes":     True,
        "description":  "a*(b+c) == a*b + a*c",
    },
}


def make_diagram_by_name(name: str, size: int = 20):
    if name not in DOMAINS:
        raise ValueError(f"Unknown diagram: {name}. "
                         f"Choose from: {', '.join(DOMAINS)}")
    return DOMAINS[name]["make_diagram"](size)
