#!/usr/bin/env python3
# run_transform.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Command-line interface for expression transformations with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from boolexps import (
    MALFORMED_JSON_RESPONSE,
    TRANSFORMATIONS,
    UnknownTransformationError,
    all_vars,
    deserialize,
    get_transformation,
    is_equivalent_to,
    serialize,
    truth_table,
)
from boolexps.analysis import depth, size
from boolexps.ast_nodes import Expr
from utils.expression_reader import ExpressionFileError, read_expression, read_expression_text
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_FILE_ERROR = 2
EXIT_UNKNOWN_TRANSFORMATION = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5
EXIT_TOO_DEEP = 6


def format_truth_table(expr: Expr) -> List[str]:
    """Render the truth table of an expression as aligned text rows.

    Args:
        expr: Expression to tabulate

    Returns:
        Header row followed by one row per interpretation
    """
    names = sorted(all_vars(expr))
    widths = [max(len(name), 5) for name in names]

    header = " | ".join(name.ljust(width) for name, width in zip(names, widths))
    lines = [f"{header} || {expr}" if names else f"|| {expr}"]

    for interpretation, value in truth_table(expr):
        cells = " | ".join(
            str(interpretation[name]).lower().ljust(width)
            for name, width in zip(names, widths)
        )
        result = str(value).lower()
        lines.append(f"{cells} || {result}" if names else f"|| {result}")

    return lines


def visualize(expr: Expr, result: Expr, base_name: str, transformation: str, fmt: str) -> None:
    """Render the input and result trees as two image files."""
    from utils.tree_visualizer import render_expression_tree

    render_expression_tree(expr, f"{base_name}_input", fmt=fmt, title="input")
    render_expression_tree(result, f"{base_name}_{transformation}", fmt=fmt, title=transformation)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Boolexps Boolean expression transformations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_transform.py -e expr.json
  python run_transform.py -e expr.json -t NNF
  python run_transform.py -e expr.json -t simplify --compare other.json
  python run_transform.py -e expr.json --show-table --debug

Expression file format:
  A JSON document such as

  expr.json:
    ["AND", ["OR", "p", "q"], ["NOT", "r"]]
        """,
    )

    parser.add_argument(
        "-e", "--expression", required=True, type=Path, help="Path to JSON expression file"
    )

    parser.add_argument(
        "-t",
        "--transformation",
        default="DNF",
        help=f"Transformation to apply, one of {', '.join(TRANSFORMATIONS)} (default: DNF)",
    )

    parser.add_argument(
        "--compare",
        type=Path,
        help="Path to a second expression file to check for logical equivalence",
    )

    parser.add_argument(
        "--show-table", action="store_true", help="Print the truth table of the input expression"
    )

    parser.add_argument(
        "--visualize", metavar="NAME", help="Render input and result trees with Graphviz"
    )

    parser.add_argument(
        "--format", default="png", choices=["png", "svg", "pdf"], help="Image format for --visualize"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the transformation tool.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        transformation = get_transformation(args.transformation)

        text = read_expression_text(args.expression)
        expr = deserialize(text)

        if expr is None:
            print(MALFORMED_JSON_RESPONSE)
            return EXIT_MALFORMED

        logger.info(f"📋 Expression loaded ({size(expr)} nodes, depth {depth(expr)}): {expr}")

        result = transformation(expr)
        print(serialize(result))

        if args.show_table:
            for line in format_truth_table(expr):
                print(line)

        if args.compare:
            other = read_expression(args.compare)
            verdict = is_equivalent_to(expr, other)
            print(f"Equivalent to {args.compare}: {str(verdict).lower()}")

        if args.visualize:
            visualize(expr, result, args.visualize, args.transformation, args.format)

        return EXIT_OK

    except UnknownTransformationError:
        logger.error(
            f"Unknown transformation: {args.transformation} "
            f"(choose from {', '.join(TRANSFORMATIONS)})"
        )
        return EXIT_UNKNOWN_TRANSFORMATION

    except ExpressionFileError as e:
        logger.error(f"Expression file error: {e}")
        return EXIT_FILE_ERROR

    except RecursionError:
        logger.error(
            f"Expression in {args.expression} is nested too deeply "
            f"(recursion limit {sys.getrecursionlimit()})"
        )
        return EXIT_TOO_DEEP

    except KeyboardInterrupt:
        logger.error("Transformation interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
