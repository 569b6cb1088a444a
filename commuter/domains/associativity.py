"""
Domain: associativity of integer arithmetic.

The diagram for "is + associative?" on triples:

          (+,id)              (+)
    (a,b,c) -----> (a+b, c) -----> a+b+c
       |                             ^
       | (id,+)                      | (+)
       v                             |
    (a, b+c) ------------------------+

The triples are the generating elements. The pair sets are mostly
unseeded: they get their members as images of the triples. The
right-hand pair set carries a couple of extra seeds of its own.
"""

from itertools import product

from ..core.maps import Map
from ..core.sets import Set
from ..core.diagram import Diagram


def triples(values) -> list:
    """Every (a, b, c) with a, b, c drawn from values."""
    values = list(values)
    return [(a, b, c) for a, b, c in product(values, values, values)]


def left_add(t):
    a, b, c = t
    return (a + b, c)


def right_add(t):
    a, b, c = t
    return (a, b + c)


def add_pair(p):
    a, b = p
    return a + b


def make_associativity_diagram(size: int = 20) -> Diagram:
    """(a+b)+c == a+(b+c) over a, b, c in range(size). Commutes."""
    return Diagram(
        [
            Set(triples(range(size)), name="triples"),
            Set.unseeded(element_type=tuple, name="left pairs"),
            Set([(5, 3), (100, 100)], name="right pairs"),
            Set.unseeded(check=lambda x: x >= 0, element_type=int, name="sums"),
        ],
        [
            Map(0, 1, left_add, "(+,id)"),
            Map(0, 2, right_add, "(id,+)"),
            Map(2, 3, add_pair, "(+)"),
            Map(1, 3, add_pair, "(+)"),
        ],
    )


def make_broken_associativity_diagram(size: int = 20) -> Diagram:
    """Same as associativity, but the right side is off by one when c == 4."""
    def broken_right_add(t):
        a, b, c = t
        return (a, b + c + (1 if c == 4 else 0))

    return Diagram(
        [
            Set(triples(range(size)), name="triples"),
            Set.unseeded(element_type=tuple, name="left pairs"),
            Set.unseeded(element_type=tuple, name="right pairs"),
            Set.unseeded(element_type=int, name="sums"),
        ],
        [
            Map(0, 1, left_add, "(+,id)"),
            Map(0, 2, broken_right_add, "(id,+')"),
            Map(2, 3, add_pair, "(+)"),
            Map(1, 3, add_pair, "(+)"),
        ],
    )


def make_filtered_associativity_diagram(size: int = 20) -> Diagram:
    """
    Associativity with filters on the pair sets and a check on the sums.

    Pairs summing below the filter thresholds are out of scope, so every
    sum that survives is at least 5 and the check never fires.
    """
    return Diagram(
        [
            Set(triples(range(size)), name="triples"),
            Set.unseeded(filter=lambda p: p[0] + p[1] >= 6, element_type=tuple, name="left pairs"),
            Set.unseeded(filter=lambda p: p[0] + p[1] >= 5, element_type=tuple, name="right pairs"),
            Set.unseeded(check=lambda x: x >= 5, element_type=int, name="sums"),
        ],
        [
            Map(0, 1, left_add, "(+,id)"),
            Map(0, 2, right_add, "(id,+)"),
            Map(2, 3, add_pair, "(+)"),
            Map(1, 3, add_pair, "(+)"),
        ],
    )


def make_subtraction_diagram(size: int = 20) -> Diagram:
    """(a-b)-c vs a-(b-c). Subtraction is not associative."""
    return Diagram(
        [
            Set(triples(range(size)), name="triples"),
            Set.unseeded(element_type=tuple, name="left pairs"),
            Set.unseeded(element_type=tuple, name="right pairs"),
            Set.unseeded(element_type=int, name="differences"),
        ],
        [
            Map(0, 1, lambda t: (t[0] - t[1], t[2]), "(-,id)"),
            Map(0, 2, lambda t: (t[0], t[1] - t[2]), "(id,-)"),
            Map(1, 3, lambda p: p[0] - p[1], "(-)"),
            Map(2, 3, lambda p: p[0] - p[1], "(-)"),
        ],
    )
