"""Tests for simpleroute.routing.router — matching, dispatch, failure delegation."""

import logging

import pytest

from simpleroute.config import RouterConfig
from simpleroute.errors import (
    InvalidRouteError,
    NoHandlerError,
    RouteError,
    RouteNotFoundError,
)
from simpleroute.routing.cursor import SegmentCursor
from simpleroute.routing.node import Node
from simpleroute.routing.router import DispatchState, RouteMatch, Router
from simpleroute.routing.tree import NodeTree


def _login() -> str:
    return "login page"


def _build_tree() -> NodeTree:
    """root(home) -> login; root -> dashboard -> users (no handler)."""
    root = Node("root", handler=lambda: "home")
    root.add_child(Node("login", handler=_login))
    dashboard = root.add_child(Node("dashboard"))
    dashboard.add_child(Node("users"))
    return NodeTree(root)


class TestDispatchScenarios:
    def test_leaf_handler(self) -> None:
        calls: list[tuple[object, ...]] = []

        def handler(*args: object) -> str:
            calls.append(args)
            return "H1"

        root = Node("root")
        root.add_child(Node("login", handler=handler))
        router = Router(NodeTree(root))

        assert router.dispatch(SegmentCursor("/login/")) == "H1"
        assert calls == [()]

    def test_handlerless_node_is_invalid_route(self) -> None:
        router = Router(_build_tree())
        with pytest.raises(InvalidRouteError) as exc_info:
            router.dispatch(SegmentCursor("/dashboard/users/"))
        assert exc_info.value.path == "/dashboard/users"

    def test_unknown_segment_is_route_not_found(self) -> None:
        root = Node("root")
        root.add_child(Node("login", handler=_login))
        router = Router(NodeTree(root))
        with pytest.raises(RouteNotFoundError) as exc_info:
            router.dispatch(SegmentCursor("/unknown/"))
        assert exc_info.value.segment == "unknown"
        assert exc_info.value.path == "/unknown"

    @pytest.mark.parametrize("path", ["/", ""])
    def test_empty_path_matches_root(self, path: str) -> None:
        router = Router(_build_tree())
        assert router.dispatch(SegmentCursor(path)) == "home"

    def test_empty_path_without_root_handler(self) -> None:
        router = Router(NodeTree(Node("root")))
        with pytest.raises(InvalidRouteError):
            router.dispatch("/")

    def test_trailing_segments_past_leaf_not_found(self) -> None:
        router = Router(_build_tree())
        with pytest.raises(RouteNotFoundError) as exc_info:
            router.dispatch("/login/extra")
        assert exc_info.value.segment == "extra"

    def test_string_target(self) -> None:
        assert Router(_build_tree()).dispatch("/login") == "login page"

    def test_call_is_dispatch(self) -> None:
        router = Router(_build_tree())
        assert router(SegmentCursor("/login")) == "login page"


class TestFailureHandler:
    def test_receives_route_not_found(self) -> None:
        received: list[Exception] = []

        def fallback(exc: RouteError) -> str:
            received.append(exc)
            return "fallback"

        router = Router(_build_tree(), failure_handler=fallback)
        assert router.dispatch("/nonexistent") == "fallback"
        assert len(received) == 1
        assert isinstance(received[0], RouteNotFoundError)

    def test_receives_invalid_route(self) -> None:
        router = Router(_build_tree(), failure_handler=lambda exc: type(exc).__name__)
        assert router.dispatch("/dashboard") == "InvalidRouteError"

    def test_handler_errors_not_intercepted(self) -> None:
        def boom() -> None:
            raise ValueError("boom")

        root = Node("root", handler=boom)
        router = Router(NodeTree(root), failure_handler=lambda exc: "fallback")
        with pytest.raises(ValueError, match="boom"):
            router.dispatch("/")

    def test_handler_raising_node_error_not_intercepted(self) -> None:
        inner = Node("inner")
        root = Node("root", handler=inner.execute)
        router = Router(NodeTree(root), failure_handler=lambda exc: "fallback")
        with pytest.raises(NoHandlerError):
            router.dispatch("/")

    def test_handler_raising_route_error_not_intercepted(self) -> None:
        def reroute() -> None:
            raise RouteNotFoundError("/elsewhere")

        root = Node("root", handler=reroute)
        router = Router(NodeTree(root), failure_handler=lambda exc: "fallback")
        with pytest.raises(RouteNotFoundError):
            router.dispatch("/")

    def test_without_failure_handler_errors_propagate(self) -> None:
        with pytest.raises(RouteNotFoundError):
            Router(_build_tree()).dispatch("/nope")

    def test_property_and_accessors(self) -> None:
        router = Router(_build_tree())
        assert router.failure_handler is None
        router.failure_handler = lambda exc: "a"
        assert router.dispatch("/nope") == "a"
        router.set_failure_handler(lambda exc: "b")
        assert router.get_failure_handler() is not None
        assert router.dispatch("/nope") == "b"
        router.failure_handler = None
        with pytest.raises(RouteNotFoundError):
            router.dispatch("/nope")


class TestIdempotence:
    def test_repeat_dispatch_same_result(self) -> None:
        router = Router(_build_tree())
        assert router.dispatch(SegmentCursor("/login")) == "login page"
        assert router.dispatch(SegmentCursor("/login")) == "login page"

    def test_repeat_dispatch_same_terminal_state(self) -> None:
        tree = _build_tree()
        router = Router(tree)
        router.dispatch(SegmentCursor("/login"))
        first = tree.active_node
        router.dispatch(SegmentCursor("/login"))
        assert tree.active_node is first

    def test_dispatch_after_failure(self) -> None:
        tree = _build_tree()
        router = Router(tree, failure_handler=lambda exc: None)
        router.dispatch("/missing")
        assert tree.active_node is tree.root
        assert router.dispatch("/login") == "login page"

    def test_failed_match_restores_active_node(self) -> None:
        tree = _build_tree()
        router = Router(tree)
        with pytest.raises(RouteNotFoundError):
            router.dispatch("/login/extra")
        assert tree.active_node is tree.root

    def test_consumed_cursor_is_not_reset(self) -> None:
        router = Router(_build_tree())
        cursor = SegmentCursor("/login")
        router.dispatch(cursor)
        assert cursor.has_next() is False
        # Nothing left to consume: matches the root.
        assert router.dispatch(cursor) == "home"
        assert router.dispatch(cursor.reset()) == "login page"


class TestMatch:
    def test_returns_route_match(self) -> None:
        router = Router(_build_tree())
        match = router.match("/login")
        assert isinstance(match, RouteMatch)
        assert match.node.key == "login"
        assert match.path_keys == ("login",)
        assert match.path == "/login"
        assert match.handler is _login

    def test_handler_cleared_after_match(self) -> None:
        router = Router(_build_tree())
        match = router.match("/login")
        match.node.set_handler(None)
        with pytest.raises(NoHandlerError):
            _ = match.handler

    def test_does_not_invoke_handler(self) -> None:
        calls: list[int] = []
        root = Node("root", handler=lambda: calls.append(1))
        Router(NodeTree(root)).match("/")
        assert calls == []

    def test_states(self) -> None:
        router = Router(_build_tree())
        assert router.state is DispatchState.IDLE
        router.match("/login")
        assert router.state is DispatchState.MATCHED
        with pytest.raises(RouteNotFoundError):
            router.match("/missing")
        assert router.state is DispatchState.FAILED
        with pytest.raises(InvalidRouteError):
            router.match("/dashboard")
        assert router.state is DispatchState.FAILED


class TestTreeProperty:
    def test_default_tree_uses_config_root_key(self) -> None:
        router = Router(config=RouterConfig(root_key="app"))
        assert router.tree.root.key == "app"

    def test_replace_tree(self) -> None:
        router = Router()
        new_tree = _build_tree()
        router.tree = new_tree
        assert router.tree is new_tree
        assert router.get_node_tree() is new_tree
        assert router.dispatch("/login") == "login page"

    def test_set_node_tree(self) -> None:
        router = Router()
        tree = _build_tree()
        router.set_node_tree(tree)
        assert router.tree is tree


class TestRegistration:
    def test_add_route(self) -> None:
        router = Router()
        router.add_route("/auth/login", _login)
        assert router.dispatch("/auth/login") == "login page"
        with pytest.raises(InvalidRouteError):
            router.dispatch("/auth")

    def test_route_decorator(self) -> None:
        router = Router()

        @router.route("/")
        def home() -> str:
            return "home"

        @router.route("/users/list")
        def users() -> str:
            return "users"

        assert home() == "home"
        assert router.dispatch("/") == "home"
        assert router.dispatch("/users/list/") == "users"

    def test_routes_listing(self) -> None:
        router = Router(_build_tree())
        paths = [path for path, _ in router.routes]
        assert paths == ["/", "/login"]

    def test_custom_separator(self) -> None:
        router = Router(config=RouterConfig(separator="."))
        router.add_route("a.b", _login)
        assert router.dispatch("a.b") == "login page"
        assert router.routes == [(".a.b", _login)]


class TestLogging:
    def test_delegation_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        router = Router(_build_tree(), failure_handler=lambda exc: None)
        with caplog.at_level(logging.INFO, logger="simpleroute.router"):
            router.dispatch("/missing")
        assert "delegated to failure handler" in caplog.text

    def test_steps_logged_when_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        router = Router(_build_tree(), config=RouterConfig(log_steps=True))
        with caplog.at_level(logging.DEBUG, logger="simpleroute.router"):
            router.dispatch("/login")
        assert "Step 'login' -> hit" in caplog.text

    def test_steps_not_logged_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        router = Router(_build_tree())
        with caplog.at_level(logging.DEBUG, logger="simpleroute.router"):
            router.dispatch("/login")
        assert "Step" not in caplog.text
