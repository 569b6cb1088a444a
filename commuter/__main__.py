"""
CLI entry point. Run as: python -m commuter --diagram <name>
"""

import argparse
import sys

from .core.errors import CommutativeDiagramError
from .core.checker import diagram_commutes
from .visualization import print_diagram, print_paths, print_result, export_dot
from .domains import DOMAINS, make_diagram_by_name


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check that a commutative diagram commutes")
    parser.add_argument(
        "--diagram",
        choices=list(DOMAINS.keys()),
        default="associativity",
        help="Which example diagram to check",
    )
    parser.add_argument("--size",  type=int, default=20,   help="Generating integers are range(size)")
    parser.add_argument("--paths", action="store_true",    help="Print every enumerated path")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    diagram = make_diagram_by_name(args.diagram, args.size)

    print(f"Diagram: {args.diagram} -- {DOMAINS[args.diagram]['description']}")
    if not args.quiet:
        print_diagram(diagram)

    try:
        if args.paths:
            print_paths(diagram)
        result = diagram_commutes(diagram, verbose=not args.quiet)
    except CommutativeDiagramError as e:
        print(f"\nVerification failed: {type(e).__name__}: {e}")
        return 2

    print_result(result)

    if args.dot:
        export_dot(diagram, args.dot)

    return 0 if result else 1


if __name__ == "__main__":
    sys.exit(main())
