"""Route tree node — a named vertex owning children and an optional handler.

A parent owns its children through a plain dict keyed by child key. The
child's back-reference to its parent is a weak reference: it exists only
for upward path tracing and never keeps a parent alive.
"""

import uuid
import weakref
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from simpleroute._internal.types import Handler
from simpleroute.errors import (
    ChildKeyMismatchError,
    ChildNotFoundError,
    EmptyKeyError,
    InvalidChildError,
    NoHandlerError,
    SelfReferenceError,
)


class Node:
    """A node in the routing tree.

    Usage::

        auth = Node("auth")
        login = Node("login", handler=show_login)
        auth.add_child(login)
        auth.get_child("login").execute()

    Keys are unique among siblings: adding a child whose key is already
    taken replaces the previous occupant and clears that occupant's parent.
    A node has at most one parent; attaching it elsewhere detaches it first.
    """

    __slots__ = ("__weakref__", "_children", "_handler", "_key", "_parent", "_uuid")

    def __init__(
        self,
        key: str,
        handler: Handler | None = None,
        parent: "Node | None" = None,
    ) -> None:
        key = key.strip()
        if not key:
            msg = "Node key must not be empty."
            raise EmptyKeyError(msg)
        self._key = key
        self._uuid = str(uuid.uuid4())
        self._children: dict[str, Node] = {}
        self._handler = handler
        self._parent: weakref.ref[Node] | None = None
        if parent is not None:
            parent.add_child(self)

    # -- Identity --------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def uuid(self) -> str:
        """Random identifier distinguishing nodes that share a key."""
        return self._uuid

    @property
    def parent(self) -> "Node | None":
        if self._parent is None:
            return None
        return self._parent()

    # -- Children --------------------------------------------------------

    @property
    def children(self) -> Mapping[str, "Node"]:
        """Read-only view of the children, keyed by child key."""
        return MappingProxyType(self._children)

    def add_child(self, child: "Node") -> "Node":
        """Attach *child* under its own key and return it.

        Raises ``SelfReferenceError`` if *child* is this node and
        ``InvalidChildError`` if it is not a Node.
        """
        if child is self:
            msg = f"Node {self._key!r} cannot be its own child."
            raise SelfReferenceError(msg)
        if not isinstance(child, Node):
            msg = f"Children must be Node instances, got {type(child).__name__}."
            raise InvalidChildError(msg)

        child.detach()

        previous = self._children.get(child._key)
        if previous is not None and previous is not child:
            previous._parent = None

        self._children[child._key] = child
        child._parent = weakref.ref(self)
        return child

    def add_children(self, children: Iterable["Node"]) -> None:
        """Attach every node in *children*.

        Stops at the first non-Node with ``InvalidChildError``. Children
        attached before the offending element stay attached.
        """
        for child in children:
            if not isinstance(child, Node):
                msg = f"Children must be Node instances, got {type(child).__name__}."
                raise InvalidChildError(msg)
            self.add_child(child)

    def get_child(self, key: str) -> "Node | None":
        return self._children.get(key)

    def has_child(self, key: str) -> bool:
        return key in self._children

    def remove_child(self, key: str) -> "Node":
        """Detach and return the child under *key*.

        Raises ``ChildNotFoundError`` if there is none; use
        ``discard_child()`` for a non-raising variant.
        """
        child = self.discard_child(key)
        if child is None:
            msg = f"Node {self._key!r} has no child {key!r}."
            raise ChildNotFoundError(msg)
        return child

    def discard_child(self, key: str) -> "Node | None":
        """Detach and return the child under *key*, or None if absent."""
        child = self._children.pop(key, None)
        if child is not None:
            child._parent = None
        return child

    def detach(self) -> None:
        """Remove this node from its parent, if it has one."""
        parent = self.parent
        if parent is not None and parent._children.get(self._key) is self:
            del parent._children[self._key]
        self._parent = None

    def is_leaf(self) -> bool:
        return not self._children

    def child_count(self) -> int:
        return len(self._children)

    # -- Handler ---------------------------------------------------------

    @property
    def handler(self) -> Handler | None:
        return self._handler

    @handler.setter
    def handler(self, handler: Handler | None) -> None:
        self._handler = handler

    def set_handler(self, handler: Handler | None) -> None:
        """Attach *handler*, or clear it with None."""
        self._handler = handler

    def has_handler(self) -> bool:
        return self._handler is not None

    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Call the handler and return its result.

        Raises ``NoHandlerError`` if no handler is attached. Exceptions
        raised by the handler propagate unchanged.
        """
        if self._handler is None:
            msg = f"Node {self._key!r} has no handler."
            raise NoHandlerError(msg)
        return self._handler(*args, **kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.execute(*args, **kwargs)

    # -- Container protocol ----------------------------------------------

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator["Node"]:
        return iter(list(self._children.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __getitem__(self, key: str) -> "Node | None":
        # Mirrors get_child(): a missing key yields None, not KeyError.
        return self._children.get(key)

    def __setitem__(self, key: str, child: "Node") -> None:
        if not isinstance(child, Node):
            msg = f"Children must be Node instances, got {type(child).__name__}."
            raise InvalidChildError(msg)
        if key != child._key:
            msg = f"Key {key!r} does not match child key {child._key!r}."
            raise ChildKeyMismatchError(msg)
        self.add_child(child)

    def __delitem__(self, key: str) -> None:
        self.remove_child(key)

    def __bool__(self) -> bool:
        # Nodes are truthy regardless of child count.
        return True

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"Node({self._key!r}, children={len(self._children)})"
