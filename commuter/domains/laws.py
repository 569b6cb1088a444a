"""
Domain: other laws of integer arithmetic.

    commutativity:   a + b == b + a        (through a swap map)
    distributivity:  a * (b + c) == a*b + a*c
"""

from itertools import product

from ..core.maps import Map
from ..core.sets import Set
from ..core.diagram import Diagram
from .associativity import triples


def pairs(values) -> list:
    values = list(values)
    return list(product(values, values))


def make_commutativity_diagram(size: int = 20) -> Diagram:
    return Diagram(
        [
            Set(pairs(range(size)), name="pairs"),
            Set.unseeded(element_type=tuple, name="swapped"),
            Set.unseeded(element_type=int, name="sums"),
        ],
        [
            Map(0, 2, lambda p: p[0] + p[1], "(+)"),
            Map(0, 1, lambda p: (p[1], p[0]), "swap"),
            Map(1, 2, lambda p: p[0] + p[1], "(+)"),
        ],
    )


def make_distributivity_diagram(size: int = 20) -> Diagram:
    return Diagram(
        [
            Set(triples(range(size)), name="triples"),
            Set.unseeded(element_type=tuple, name="a, b+c"),
            Set.unseeded(element_type=tuple, name="ab, ac"),
            Set.unseeded(element_type=int, name="products"),
        ],
        [
            Map(0, 1, lambda t: (t[0], t[1] + t[2]), "(id,+)"),
            Map(0, 2, lambda t: (t[0] * t[1], t[0] * t[2]), "(*b,*c)"),
            Map(1, 3, lambda p: p[0] * p[1], "(*)"),
            Map(2, 3, lambda p: p[0] + p[1], "(+)"),
        ],
    )
