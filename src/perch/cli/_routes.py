"""``perch routes`` — list registered routes.

Resolves an import string to a Router and prints every registered
pattern in resolution order.
"""

import argparse
import sys

from perch.cli._load import load_router
from perch.routing.route import RouteRecord


def _kind(record: RouteRecord) -> str:
    if record.is_greedy:
        return "greedy"
    if record.literal is not None:
        return "static"
    return "typed"


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATTERN, KIND and PAYLOAD.

    Rows appear in registration order, which is also the order the
    router tries them in.
    """
    try:
        router = load_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for record in routes:
        methods_str = ", ".join(sorted(m or '""' for m in record.methods))
        payload = getattr(record.payload, "__name__", repr(record.payload))
        rows.append((methods_str, record.path_pattern, _kind(record), payload))

    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_kind = 6

    fmt = f"{{:<{max_methods}}}  {{:<{max_pattern}}}  {{:<{max_kind}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "KIND", "PAYLOAD"))
    sep_len = max_methods + max_pattern + max_kind + 6 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
