"""SimpleRoute CLI — route listing and one-off dispatch.

Entry point registered as ``simpleroute`` in ``pyproject.toml``::

    [project.scripts]
    simpleroute = "simpleroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``simpleroute`` command."""
    parser = argparse.ArgumentParser(
        prog="simpleroute",
        description="SimpleRoute — a hierarchical URL router.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log dispatch activity to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- simpleroute routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- simpleroute dispatch -----------------------------------------------
    dispatch_parser = subparsers.add_parser("dispatch", help="Dispatch a path and print the result")
    dispatch_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    dispatch_parser.add_argument("path", help="Path to dispatch (e.g. /auth/login)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.command == "routes":
        from simpleroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "dispatch":
        from simpleroute.cli._dispatch import run_dispatch

        run_dispatch(args)
