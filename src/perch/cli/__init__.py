"""Perch CLI — inspect and exercise a router from the shell.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — ordered pattern routing for paths and command grammars.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="module:attribute, or a module that registers on Router.shared()",
    )

    # -- perch match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path against a router")
    match_parser.add_argument(
        "router",
        help="module:attribute, or a module that registers on Router.shared()",
    )
    match_parser.add_argument("path", help="Path to resolve")
    match_parser.add_argument(
        "--method",
        "-m",
        default="GET",
        help="Method token (default: GET)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from perch.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from perch.cli._match import run_match

        run_match(args)
