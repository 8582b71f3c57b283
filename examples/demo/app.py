"""Demo — a small site routed through a hand-built node tree.

Builds the tree explicitly (root, auth, dashboard and their children),
plugs in a 404 failure handler, and serialises dispatches with a lock
because the tree's active node is shared between calls.

Run:
    cd examples/demo && python app.py /dashboard/product_list
"""

import sys
import threading
from dataclasses import dataclass

from simpleroute import Node, NodeTree, RouteError, Router, SegmentCursor

# ---------------------------------------------------------------------------
# Fake data
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    price: float
    quantity: int


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str


PRODUCTS = (
    Product(1, "Laptop", 750.00, 10),
    Product(2, "Smartphone", 500.00, 25),
    Product(3, "Tablet", 300.00, 15),
    Product(4, "Headphones", 80.00, 50),
    Product(5, "Keyboard", 40.00, 40),
)

USERS = (
    User(1, "Alice", "alice@example.com"),
    User(2, "Bob", "bob@example.com"),
    User(3, "Charlie", "charlie@example.com"),
)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def home() -> str:
    return "Welcome — try /auth/login, /auth/register or /dashboard"


def login() -> str:
    return "Login form"


def register() -> str:
    return "Registration form"


def dashboard() -> str:
    return f"Dashboard: {len(USERS)} users, {len(PRODUCTS)} products"


def user_list() -> str:
    return "\n".join(f"{u.id}. {u.name} <{u.email}>" for u in USERS)


def product_list() -> str:
    total = sum(p.price * p.quantity for p in PRODUCTS)
    lines = [f"{p.id}. {p.name} x{p.quantity} @ {p.price:.2f}" for p in PRODUCTS]
    lines.append(f"Stock value: {total:.2f}")
    return "\n".join(lines)


def not_found(exc: RouteError) -> str:
    return f"404 — {exc.path} does not exist"


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

root = Node("root", handler=home)

auth = Node("auth")
auth.add_children([Node("login", handler=login), Node("register", handler=register)])

board = Node("dashboard", handler=dashboard)
board.add_children([Node("users_list", handler=user_list), Node("product_list", handler=product_list)])

root.add_children([auth, board])

router = Router(NodeTree(root), failure_handler=not_found)

_lock = threading.Lock()


def serve(path: str) -> str:
    """Dispatch *path* with exclusive use of the tree."""
    with _lock:
        return router.dispatch(SegmentCursor(path))


if __name__ == "__main__":
    print(serve(sys.argv[1] if len(sys.argv) > 1 else "/"))
