"""Router — drives a SegmentCursor through a NodeTree and runs the handler.

A dispatch moves through three states: ``TRAVERSING`` while segments are
consumed, then ``MATCHED`` or ``FAILED``. Only ``RouteError`` failures are
handed to the failure handler; errors raised by a route handler always
reach the caller.
"""

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from simpleroute._internal.types import FailureHandler, Handler
from simpleroute.config import RouterConfig
from simpleroute.errors import InvalidRouteError, NoHandlerError, RouteError, RouteNotFoundError
from simpleroute.routing.cursor import SegmentCursor
from simpleroute.routing.node import Node
from simpleroute.routing.tree import NodeTree

logger = logging.getLogger("simpleroute.router")


class DispatchState(enum.Enum):
    """Where the most recent dispatch ended up."""

    IDLE = "idle"
    TRAVERSING = "traversing"
    MATCHED = "matched"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match."""

    node: Node
    path_keys: tuple[str, ...]
    path: str

    @property
    def handler(self) -> Handler:
        handler = self.node.handler
        if handler is None:
            msg = f"Node {self.node.key!r} has no handler."
            raise NoHandlerError(msg)
        return handler


class Router:
    """Match paths against a NodeTree and invoke the matched handler.

    Usage::

        router = Router()

        @router.route("/auth/login")
        def login():
            return "login page"

        router.dispatch("/auth/login")   # -> "login page"
        router(SegmentCursor("/auth/login"))

    With a failure handler, ``RouteNotFoundError`` and ``InvalidRouteError``
    are passed to it and its return value becomes the dispatch result::

        router.failure_handler = lambda exc: f"404 {exc.path}"
    """

    __slots__ = ("_config", "_failure_handler", "_state", "_tree")

    def __init__(
        self,
        tree: NodeTree | None = None,
        failure_handler: FailureHandler | None = None,
        *,
        config: RouterConfig | None = None,
    ) -> None:
        self._config = config or RouterConfig()
        self._tree = tree if tree is not None else NodeTree(Node(self._config.root_key))
        self._failure_handler = failure_handler
        self._state = DispatchState.IDLE

    # -- Properties ------------------------------------------------------

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def tree(self) -> NodeTree:
        return self._tree

    @tree.setter
    def tree(self, tree: NodeTree) -> None:
        self._tree = tree

    def get_node_tree(self) -> NodeTree:
        return self._tree

    def set_node_tree(self, tree: NodeTree) -> None:
        self._tree = tree

    @property
    def failure_handler(self) -> FailureHandler | None:
        return self._failure_handler

    @failure_handler.setter
    def failure_handler(self, handler: FailureHandler | None) -> None:
        self._failure_handler = handler

    def get_failure_handler(self) -> FailureHandler | None:
        return self._failure_handler

    def set_failure_handler(self, handler: FailureHandler | None) -> None:
        self._failure_handler = handler

    @property
    def state(self) -> DispatchState:
        """State reached by the most recent ``match()`` or ``dispatch()``."""
        return self._state

    # -- Registration ----------------------------------------------------

    def add_route(self, path: str, handler: Handler) -> Node:
        """Attach *handler* at *path*, creating intermediate nodes."""
        return self._tree.insert(path, handler, separator=self._config.separator)

    def route(self, path: str) -> Callable[[Handler], Handler]:
        """Decorator form of ``add_route()``."""

        def decorator(func: Handler) -> Handler:
            self.add_route(path, func)
            return func

        return decorator

    @property
    def routes(self) -> list[tuple[str, Handler]]:
        """Every handler-bearing node as ``(path, handler)``, depth-first."""
        sep = self._config.separator
        result: list[tuple[str, Handler]] = []
        for keys, node in self._tree.walk():
            if node.handler is not None:
                result.append((sep + sep.join(keys), node.handler))
        return result

    # -- Matching --------------------------------------------------------

    def _cursor(self, target: SegmentCursor | str) -> SegmentCursor:
        if isinstance(target, SegmentCursor):
            return target
        return SegmentCursor(target, separator=self._config.separator)

    def match(self, target: SegmentCursor | str) -> RouteMatch:
        """Walk the tree with the cursor's remaining segments.

        Resets the tree's active node first; the cursor is consumed from
        its current position and is not reset.

        Raises ``RouteNotFoundError`` when a segment has no matching child
        and ``InvalidRouteError`` when the final node has no handler.
        A miss puts the active node back on the root before raising.
        """
        cursor = self._cursor(target)
        path = str(cursor)
        tree = self._tree

        self._state = DispatchState.TRAVERSING
        tree.reset_active_node()
        node = tree.root
        logger.debug("Dispatching %r", path)

        for segment in cursor:
            child = tree.step_to_child(segment)
            if self._config.log_steps:
                logger.debug("Step %r -> %s", segment, "miss" if child is None else "hit")
            if child is None:
                # The absent active node must not outlive the failed step.
                tree.reset_active_node()
                self._state = DispatchState.FAILED
                raise RouteNotFoundError(path, segment)
            node = child

        if not node.has_handler():
            self._state = DispatchState.FAILED
            raise InvalidRouteError(path)

        self._state = DispatchState.MATCHED
        return RouteMatch(node=node, path_keys=tuple(tree.get_path_keys(node)), path=path)

    def dispatch(self, target: SegmentCursor | str) -> Any:
        """Match *target* and return the handler's result.

        The handler is called without arguments. Route errors go to the
        failure handler when one is set, otherwise they propagate.
        """
        try:
            match = self.match(target)
        except RouteError as exc:
            if self._failure_handler is None:
                raise
            logger.info("Route failure for %r delegated to failure handler: %s", exc.path, exc)
            return self._failure_handler(exc)

        logger.debug("Matched %r -> %r", match.path, match.node.key)
        return match.node.execute()

    def __call__(self, target: SegmentCursor | str) -> Any:
        return self.dispatch(target)

    def __repr__(self) -> str:
        return f"Router(tree={self._tree!r}, state={self._state.value!r})"
