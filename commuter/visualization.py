"""
Visualization and reporting utilities.
"""

from .core.diagram import Diagram
from .core.checker import CommutativeDiagramResult, DoesNotCommute


def print_diagram(diagram: Diagram):
    """Print the sets and maps of a diagram."""
    print(f"\n{'='*60}")
    print(f"Sets ({len(diagram.sets)}):")
    for i, s in enumerate(diagram.sets):
        flags = []
        if s.is_checked:
            flags.append("checked")
        if s.is_filtered:
            flags.append("filtered")
        extra = f" [{', '.join(flags)}]" if flags else ""
        print(f"  {i}: {s.label} ({len(s)} generating){extra}")
    print(f"Maps ({len(diagram.maps)}):")
    for m in diagram.maps:
        print(f"  {m.name}: {m.source} -> {m.target}")
    print(f"{'='*60}")


def print_paths(diagram: Diagram):
    """Print every path through the diagram."""
    paths = diagram.paths()
    print(f"\n{'='*60}")
    print(f"Paths ({len(paths)}):")
    print(f"{'='*60}")
    for path in paths:
        print(f"  {path[0].source} => {path[-1].target}: {diagram.describe_path(path)}")


def print_result(result: CommutativeDiagramResult):
    """Pretty-print the outcome of diagram_commutes."""
    print(f"\n{'='*60}")
    if isinstance(result, DoesNotCommute):
        print("DOES NOT COMMUTE")
        print(f"{'='*60}")
        print(f"  {result.reason}")
    else:
        print("COMMUTES")
        print(f"{'='*60}")
        print(f"  {result.pairs_checked} pairs of paths, {result.comparisons} comparisons")
    print(f"{'='*60}")


def export_dot(diagram: Diagram, path="diagram.dot"):
    """Export the diagram as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write("digraph commuter {\n")
        f.write("  rankdir=LR;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for i, s in enumerate(diagram.sets):
            label = f"{i}: {s.label}".replace('"', '\\"')
            color = "lightblue" if len(s) else "lightgray"
            f.write(f'  n{i} [label="{label}", fillcolor={color}, style=filled];\n')
        for edge in diagram.edges():
            label = diagram.map_for(edge).name.replace('"', '\\"')
            f.write(f'  n{edge.source} -> n{edge.target} [label="{label}"];\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
