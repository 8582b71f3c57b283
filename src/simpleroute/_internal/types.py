"""Shared type aliases used across simpleroute modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — user-defined function with variable signature
Handler: TypeAlias = Callable[..., Any]

# Failure handler — receives the RouteError and returns the dispatch result
FailureHandler: TypeAlias = Callable[[Any], Any]
