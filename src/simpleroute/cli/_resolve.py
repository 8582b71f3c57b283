"""Router import resolution — turns ``"module:attribute"`` into a Router.

Shared by ``simpleroute routes`` and ``simpleroute dispatch``. The target
may be a Router, a NodeTree or a bare root Node; trees and nodes are
wrapped in a default Router. A zero-argument factory returning any of
those is called first.
"""

import importlib
import sys

from simpleroute.routing.node import Node
from simpleroute.routing.router import Router
from simpleroute.routing.tree import NodeTree

DEFAULT_ATTRIBUTE = "router"


def _as_router(obj: object) -> Router | None:
    if isinstance(obj, Router):
        return obj
    if isinstance(obj, NodeTree):
        return Router(obj)
    if isinstance(obj, Node):
        return Router(NodeTree(obj))
    return None


def resolve_router(import_string: str) -> Router:
    """Resolve *import_string* to a Router.

    ``"myapp"`` is shorthand for ``"myapp:router"``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the target is neither routable nor a factory
            producing something routable.

    """
    module_path, _, attr_name = import_string.partition(":")
    target = getattr(importlib.import_module(module_path), attr_name or DEFAULT_ATTRIBUTE)

    router = _as_router(target)
    if router is not None:
        return router

    if callable(target):
        try:
            produced = target()
        except Exception as exc:
            msg = f"Factory {import_string!r} failed: {exc}"
            raise TypeError(msg) from exc
        router = _as_router(produced)
        if router is not None:
            return router
        target = produced

    msg = f"{import_string!r} is a {type(target).__name__}; expected a Router, NodeTree or Node"
    raise TypeError(msg)


def load_router(import_string: str) -> Router:
    """``resolve_router()`` for CLI commands: failures exit with status 1."""
    try:
        return resolve_router(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
