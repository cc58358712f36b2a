"""``perch match`` — resolve one path from the command line."""

import argparse
import sys

from perch.cli._load import load_router
from perch.errors import RouteNotFound


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.path`` with ``args.method`` and print the outcome.

    Exits with code 1 when the router cannot be loaded or the path is
    unmatched and no default route exists.
    """
    try:
        router = load_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        result = router.route(args.path, args.method)
    except RouteNotFound as exc:
        print(f"Error: {exc} ({exc.method} {exc.path!r})", file=sys.stderr)
        raise SystemExit(1) from exc

    pattern = result.record.path_pattern if result.record is not None else "(default)"
    print(f"{result.method} {result.path}")
    print(f"  pattern: {pattern}")
    print(f"  payload: {result.payload!r}")
    for name, value in result.params.items():
        print(f"  {name} = {value!r}")
