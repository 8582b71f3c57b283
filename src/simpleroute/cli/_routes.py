"""``simpleroute routes`` — list registered routes."""

import argparse

from simpleroute.cli._resolve import load_router


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATH / HANDLER table for every handler-bearing node."""
    router = load_router(args.router)

    routes = router.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(path, getattr(handler, "__name__", repr(handler))) for path, handler in routes]

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    fmt = f"{{:<{max_path}}}  {{}}"
    print(fmt.format("PATH", "HANDLER"))
    sep_len = max_path + 2 + max(len(r[1]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, handler_name in rows:
        print(fmt.format(path, handler_name))
