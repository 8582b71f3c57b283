"""Routing — segment cursor, node tree, and dispatching router.

Paths are walked one segment at a time through a tree of named nodes;
the handler on the node where the walk ends is invoked.
"""

from simpleroute.routing.cursor import SegmentCursor
from simpleroute.routing.node import Node
from simpleroute.routing.router import DispatchState, RouteMatch, Router
from simpleroute.routing.tree import NodeTree

__all__ = ["DispatchState", "Node", "NodeTree", "RouteMatch", "Router", "SegmentCursor"]
