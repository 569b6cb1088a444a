"""
The commutativity check.

For every pair of paths that start at the same set and end at the same
set, push each generating element of the start set through both paths
and compare what comes out. The first disagreement is the witness; if
there is none, the diagram commutes.

Filters and checks are applied at every hop:
    filter fails -> drop this element for this pair of paths, move on
    check fails  -> PropertyCheckError, the whole run stops
"""

from dataclasses import dataclass, field
from typing import Optional

from .diagram import Diagram
from .elements import Element
from .errors import ContractViolation, PropertyCheckError
from .graph import path_source, path_target


class CommutativeDiagramResult:
    """Outcome of a completed verification run: Commutes or DoesNotCommute."""
    commutes = False

    def __bool__(self):
        return self.commutes


@dataclass(frozen=True)
class Commutes(CommutativeDiagramResult):
    """Every co-terminal pair of paths agreed on every eligible element."""
    pairs_checked: int = 0
    comparisons: int = 0
    commutes = True

    def __repr__(self):
        return f"Commutes(pairs={self.pairs_checked}, comparisons={self.comparisons})"


@dataclass(frozen=True)
class DoesNotCommute(CommutativeDiagramResult):
    """Two paths disagreed. reason is the human-readable counterexample."""
    reason: str
    left_path: tuple = field(default=(), compare=False)
    right_path: tuple = field(default=(), compare=False)
    element: Optional[Element] = field(default=None, compare=False)
    left_value: Optional[Element] = field(default=None, compare=False)
    right_value: Optional[Element] = field(default=None, compare=False)

    def __repr__(self):
        return f"DoesNotCommute({self.reason!r})"


def paths_are_coterminal(path_a, path_b) -> bool:
    """Same first source, same last target. Empty paths never match."""
    if not path_a or not path_b:
        return False
    return (path_source(path_a) == path_source(path_b)
            and path_target(path_a) == path_target(path_b))


def replay(diagram: Diagram, path, element: Element) -> Optional[Element]:
    """
    Push one element along a path.

    Returns the final element, or None if a filter dropped it on the way.
    Raises PropertyCheckError if an intermediate set's check fails, and
    ContractViolation if a map refuses the element it was handed.
    """
    current = element
    for edge in path:
        map_ = diagram.map_for(edge)
        target_set = diagram.sets[edge.target]

        result = map_.invoke(current)
        if result is None:
            raise ContractViolation(
                f"Map {map_.name!r} cannot be applied to {current.name} "
                f"(expected {map_.domain.__name__}, got {current.type_tag.__name__})"
            )
        current = result

        if not target_set.filter(current):
            return None

        if not target_set.check(current):
            raise PropertyCheckError(
                f"Element does not satisfy target set property: {current.name}",
                element=current,
                at_source=False,
            )
    return current


def diagram_commutes(diagram: Diagram, verbose: bool = False) -> CommutativeDiagramResult:
    """
    Decide whether a diagram commutes.

    Args:
        diagram:  the Diagram to verify. It is never modified.
        verbose:  print each pair of paths as it is checked.

    Returns:
        Commutes, or DoesNotCommute carrying the first counterexample found
        (pairs in path enumeration order, then elements in generating order).

    Raises:
        CyclicGraphError:    the diagram has a cycle.
        PropertyCheckError:  some element failed a set's check predicate.
        ContractViolation:   a map was handed an element of the wrong type.
    """
    all_possible_paths = diagram.paths()

    if verbose:
        print(f"Found {len(all_possible_paths)} paths through {diagram!r}")

    pairs_checked = 0
    comparisons = 0

    for path_a in all_possible_paths:
        for path_b in all_possible_paths:
            if not paths_are_coterminal(path_a, path_b):
                continue

            pairs_checked += 1
            source_set = diagram.sets[path_source(path_a)]

            if verbose:
                print(f"  [pair] {diagram.describe_path(path_a)}  vs  "
                      f"{diagram.describe_path(path_b)}")

            for element in source_set.elements():
                if not source_set.filter(element):
                    continue

                if not source_set.check(element):
                    raise PropertyCheckError(
                        f"Element does not satisfy source set property: {element.name}",
                        element=element,
                        at_source=True,
                    )

                left = replay(diagram, path_a, element)
                if left is None:
                    continue
                right = replay(diagram, path_b, element)
                if right is None:
                    continue

                comparisons += 1
                if not left.eq(right):
                    path_a_description = diagram.describe_path(path_a)
                    path_b_description = diagram.describe_path(path_b)
                    reason = (
                        f"{path_a_description} and {path_b_description} "
                        f"don't agree on {element.name}. "
                        f"Left gets {left.name} while right gets {right.name}"
                    )
                    if verbose:
                        print(f"  [disagree] {reason}")
                    return DoesNotCommute(
                        reason=reason,
                        left_path=tuple(path_a),
                        right_path=tuple(path_b),
                        element=element,
                        left_value=left,
                        right_value=right,
                    )

    if verbose:
        print(f"  [commutes] {pairs_checked} pairs, {comparisons} comparisons")

    return Commutes(pairs_checked=pairs_checked, comparisons=comparisons)
