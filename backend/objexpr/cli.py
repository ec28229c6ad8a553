"""
Command line interface: evaluate, render and check prefix expressions.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import ExpressionError
from .logic.expression import format_number
from .logic.parser import parse_prefix
from .runner import run_suite_file

EXIT_OK = 0
EXIT_CASES_FAILED = 1
EXIT_PARSE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="objexpr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_p = subparsers.add_parser("eval", help="Evaluate a prefix expression.")
    eval_p.add_argument("expression")
    for name in ("x", "y", "z"):
        eval_p.add_argument(f"--{name}", type=float, default=0.0, help=f"Value of {name}.")

    postfix_p = subparsers.add_parser("postfix", help="Print the postfix form.")
    postfix_p.add_argument("expression")

    prefix_p = subparsers.add_parser("prefix", help="Print the normalized prefix form.")
    prefix_p.add_argument("expression")

    check_p = subparsers.add_parser("check", help="Run a YAML case suite.")
    check_p.add_argument("file", type=Path)
    check_p.add_argument("--tolerance", type=float, default=None, help="Override the suite tolerance.")
    check_p.add_argument("--json", action="store_true", help="Print the result as JSON.")

    return parser


def parse_args(argv: List[str]) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _cmd_check(args: argparse.Namespace) -> int:
    result = run_suite_file(args.file, tolerance=args.tolerance)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, allow_nan=False))
    else:
        print(result.summary())
    return EXIT_OK if result.valid else EXIT_CASES_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        return _cmd_check(args)

    try:
        tree = parse_prefix(args.expression)
    except ExpressionError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.command == "eval":
        print(format_number(tree.evaluate(args.x, args.y, args.z)))
    elif args.command == "postfix":
        print(tree.to_postfix())
    else:
        print(tree.to_prefix())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
