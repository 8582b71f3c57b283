"""``simpleroute dispatch`` — dispatch one path and print the result."""

import argparse
import sys

from simpleroute.cli._resolve import load_router
from simpleroute.errors import RouteError


def run_dispatch(args: argparse.Namespace) -> None:
    """Dispatch ``args.path`` through the resolved router.

    Prints the handler's return value (nothing for None). Route errors
    not absorbed by a failure handler exit with status 1.
    """
    router = load_router(args.router)

    try:
        result = router.dispatch(args.path)
    except RouteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if result is not None:
        print(result)
