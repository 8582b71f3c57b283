"""SimpleRoute — a hierarchical URL router.

Paths are split into segments and matched one segment at a time against
a tree of named nodes; the handler attached to the matched node is invoked.

Basic usage::

    from simpleroute import Router

    router = Router()

    @router.route("/auth/login")
    def login():
        return "login page"

    router.dispatch("/auth/login")

Building the tree by hand::

    from simpleroute import Node, NodeTree, Router, SegmentCursor

    root = Node("root", handler=home)
    auth = Node("auth", parent=root)
    auth.add_children([Node("login", handler=login), Node("register", handler=register)])

    router = Router(NodeTree(root), failure_handler=not_found)
    router(SegmentCursor("/auth/login"))
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ChildKeyMismatchError",
    "ChildNotFoundError",
    "ConfigurationError",
    "DispatchState",
    "EmptyKeyError",
    "InvalidChildError",
    "InvalidRouteError",
    "NoHandlerError",
    "Node",
    "NodeError",
    "NodeNotInTreeError",
    "NodeTree",
    "NodeTreeError",
    "RouteError",
    "RouteMatch",
    "RouteNotFoundError",
    "Router",
    "RouterConfig",
    "SegmentCursor",
    "SelfReferenceError",
    "SimpleRouteError",
]

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    # Routing
    "DispatchState": "simpleroute.routing.router",
    "Node": "simpleroute.routing.node",
    "NodeTree": "simpleroute.routing.tree",
    "RouteMatch": "simpleroute.routing.router",
    "Router": "simpleroute.routing.router",
    "SegmentCursor": "simpleroute.routing.cursor",
    # Config
    "RouterConfig": "simpleroute.config",
    # Errors
    "ChildKeyMismatchError": "simpleroute.errors",
    "ChildNotFoundError": "simpleroute.errors",
    "ConfigurationError": "simpleroute.errors",
    "EmptyKeyError": "simpleroute.errors",
    "InvalidChildError": "simpleroute.errors",
    "InvalidRouteError": "simpleroute.errors",
    "NoHandlerError": "simpleroute.errors",
    "NodeError": "simpleroute.errors",
    "NodeNotInTreeError": "simpleroute.errors",
    "NodeTreeError": "simpleroute.errors",
    "RouteError": "simpleroute.errors",
    "RouteNotFoundError": "simpleroute.errors",
    "SelfReferenceError": "simpleroute.errors",
    "SimpleRouteError": "simpleroute.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import simpleroute`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    return getattr(importlib.import_module(module_path), name)
