"""cyclewitness CLI entry point.

Usage: cyclewitness [-v] {demo,check} ...

Exit status for check: 0 acyclic or empty, 1 cyclic, 2 unreadable or
malformed input.
"""
import argparse
import logging
import sys

from cyclewitness.graph.cycle_detector import detect_cycle
from cyclewitness.graph.matrix import MalformedMatrixError

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CYCLIC = 1
EXIT_BAD_INPUT = 2


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "demo",
        help="Run detection on the built-in example graphs.",
    )


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Check a matrix file (JSON or whitespace-separated rows).",
    )
    p.add_argument(
        "path",
        help="Matrix file to read, or - for standard input.",
    )
    p.add_argument(
        "--quiet", action="store_true",
        help="Print only the result, not the matrix.",
    )


def _run_demo(args: argparse.Namespace) -> int:
    from cyclewitness.report import format_matrix, format_result
    from cyclewitness.samples import SAMPLES

    print("--- BFS Cycle Detection (Kahn's Algorithm) ---")
    for n, (title, matrix) in enumerate(SAMPLES.items(), start=1):
        print()
        print(f"--- Test Case {n}: {title} ---")
        print(format_matrix(matrix))
        print(format_result(detect_cycle(matrix)))
    return EXIT_OK


def _run_check(args: argparse.Namespace) -> int:
    from cyclewitness.loader import load_matrix
    from cyclewitness.report import format_matrix, format_result

    try:
        matrix = load_matrix(args.path)
    except (MalformedMatrixError, OSError) as exc:
        log.debug("rejected input %s", args.path)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if not args.quiet:
        print(format_matrix(matrix))
    result = detect_cycle(matrix)
    print(format_result(result))
    return EXIT_CYCLIC if result.has_cycle else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cyclewitness",
        description="Directed cycle detection with Kahn's algorithm.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log algorithm traces at DEBUG level to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_demo_parser(subparsers)
    _add_check_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    if args.command == "demo":
        return _run_demo(args)
    return _run_check(args)


if __name__ == "__main__":
    sys.exit(main())
