"""SimpleRoute exception hierarchy.

Shared across Node, NodeTree, and Router so every module raises and
catches the same types. Only ``RouteError`` subclasses are eligible for
interception by a router's failure handler; everything else propagates.
"""


class SimpleRouteError(Exception):
    """Base for all simpleroute-specific errors."""


class ConfigurationError(SimpleRouteError):
    """Raised when router configuration is invalid."""


# -- Node ----------------------------------------------------------------


class NodeError(SimpleRouteError):
    """Structural error raised by a ``Node``."""


class EmptyKeyError(NodeError):
    """A node was created with a blank or whitespace-only key."""


class SelfReferenceError(NodeError):
    """A node was added as its own child."""


class InvalidChildError(NodeError):
    """A non-Node value was supplied where a child node was required."""


class ChildNotFoundError(NodeError):
    """No child exists under the requested key."""


class ChildKeyMismatchError(NodeError):
    """Item assignment used a key that differs from the child's own key."""


class NoHandlerError(NodeError):
    """``execute()`` was called on a node without a handler."""


# -- NodeTree ------------------------------------------------------------


class NodeTreeError(SimpleRouteError):
    """Error raised by a ``NodeTree``."""


class NodeNotInTreeError(NodeTreeError):
    """Path tracing could not reach the requested stop node."""


# -- Router --------------------------------------------------------------


class RouteError(SimpleRouteError):
    """Base for router-taxonomy errors.

    These are the only errors a router hands to its failure handler.
    ``path`` is the path that was being dispatched.
    """

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        self.detail = detail
        super().__init__(detail or path)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.path}: {self.detail}"
        return self.path


class RouteNotFoundError(RouteError):
    """A path segment had no matching child during traversal."""

    def __init__(self, path: str, segment: str | None = None) -> None:
        self.segment = segment
        if segment is None:
            detail = "no route matches"
        else:
            detail = f"no route matches segment {segment!r}"
        super().__init__(path, detail)


class InvalidRouteError(RouteError):
    """Traversal ended on a node that exists but has no handler."""

    def __init__(self, path: str, detail: str = "route has no handler") -> None:
        super().__init__(path, detail)
