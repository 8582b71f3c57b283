"""Node tree — a root node plus the active traversal position.

The active node is mutable state owned by the tree. ``step_to_child()``
moves it one level down; a failed step leaves it at ``None`` until the
next ``reset_active_node()``. Concurrent dispatches against one tree
must be serialised by the caller. ``find()`` is a pure lookup that never
touches the active node.
"""

import logging
import warnings
from collections.abc import Iterator

from simpleroute._internal.types import Handler
from simpleroute.errors import InvalidChildError, NodeNotInTreeError
from simpleroute.routing.cursor import split_path
from simpleroute.routing.node import Node

logger = logging.getLogger("simpleroute.tree")


class NodeTree:
    """A routing tree with a movable active node.

    Usage::

        root = Node("root")
        root.add_child(Node("login", handler=show_login))
        tree = NodeTree(root)

        tree.step_to_child("login")   # -> Node("login")
        tree.get_path_keys(tree.active_node)  # -> ["login"]
    """

    __slots__ = ("_active", "_root")

    def __init__(self, root: Node) -> None:
        if not isinstance(root, Node):
            msg = f"Tree root must be a Node, got {type(root).__name__}."
            raise InvalidChildError(msg)
        self._root = root
        self._active: Node | None = root

    # -- Root / active node ----------------------------------------------

    @property
    def root(self) -> Node:
        return self._root

    @root.setter
    def root(self, node: Node) -> None:
        self.set_root_node(node)

    @property
    def active_node(self) -> Node | None:
        return self._active

    def get_root_node(self) -> Node:
        return self._root

    def get_active_node(self) -> Node | None:
        return self._active

    def set_root_node(self, node: Node) -> None:
        """Replace the root and move the active node to it.

        Nodes reachable only from the previous root stop belonging to
        this tree.
        """
        if not isinstance(node, Node):
            msg = f"Tree root must be a Node, got {type(node).__name__}."
            raise InvalidChildError(msg)
        self._root = node
        self._active = node

    def reset_active_node(self) -> None:
        """Move the active node back to the root."""
        self._active = self._root

    # -- Traversal -------------------------------------------------------

    def step_to_child(self, key: str) -> Node | None:
        """Move the active node to its child under *key*.

        Returns the new active node. When there is no such child the
        active node becomes None and None is returned.
        """
        if self._active is None:
            return None
        self._active = self._active.get_child(key)
        return self._active

    def next_node(self, key: str) -> Node | None:
        """Deprecated alias of ``step_to_child()``."""
        warnings.warn(
            "NodeTree.next_node() is deprecated, use step_to_child() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.step_to_child(key)

    def __call__(self, key: str) -> Node | None:
        return self.step_to_child(key)

    def find(self, path: str, separator: str = "/") -> Node | None:
        """Return the node at *path* below the root, or None.

        Unlike ``step_to_child()`` this leaves the active node alone.
        """
        node = self._root
        for segment in split_path(path, separator):
            child = node.get_child(segment)
            if child is None:
                return None
            node = child
        return node

    # -- Path tracing ----------------------------------------------------

    @staticmethod
    def trace_path_keys(node: Node, stop_at: Node | None = None) -> list[str]:
        """Collect the keys from *node* up to *stop_at*, top to bottom.

        *stop_at* itself is excluded. Without *stop_at* the walk runs to
        the top of the parent chain, so the topmost key is included.
        Tracing a node to itself yields an empty list.

        Raises ``NodeNotInTreeError`` if *stop_at* is given but never
        reached.
        """
        keys: list[str] = []
        current: Node | None = node
        while current is not None and current is not stop_at:
            keys.append(current.key)
            current = current.parent

        if stop_at is not None and current is not stop_at:
            msg = f"Node {node.key!r} is not under the specified stop node {stop_at.key!r}."
            raise NodeNotInTreeError(msg)

        keys.reverse()
        return keys

    def get_path_keys(self, node: Node) -> list[str]:
        """Keys from the root (excluded) down to *node*.

        Raises ``NodeNotInTreeError`` if *node* is not in this tree.
        """
        return self.trace_path_keys(node, self._root)

    def contains(self, node: Node) -> bool:
        if node is self._root:
            return True
        try:
            self.get_path_keys(node)
        except NodeNotInTreeError:
            return False
        return True

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.contains(node)

    # -- Building / introspection ----------------------------------------

    def insert(self, path: str, handler: Handler | None = None, separator: str = "/") -> Node:
        """Create any missing nodes along *path* and return the last one.

        When *handler* is given it is attached to that node. An empty
        path targets the root.
        """
        node = self._root
        for segment in split_path(path, separator):
            child = node.get_child(segment.strip())
            if child is None:
                child = node.add_child(Node(segment))
                logger.debug("Created node %r under %r", segment, node.key)
            node = child
        if handler is not None:
            node.set_handler(handler)
        return node

    def walk(self) -> Iterator[tuple[list[str], Node]]:
        """Yield ``(path_keys, node)`` depth-first, root first."""
        stack: list[tuple[list[str], Node]] = [([], self._root)]
        while stack:
            keys, node = stack.pop()
            yield keys, node
            children = list(node)
            for child in reversed(children):
                stack.append(([*keys, child.key], child))

    def __repr__(self) -> str:
        active = self._active.key if self._active is not None else None
        return f"NodeTree(root={self._root.key!r}, active={active!r})"
