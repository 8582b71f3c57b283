"""Segment cursor — sequential, resettable consumption of path segments."""

from collections.abc import Iterable, Iterator


def split_path(path: str, separator: str = "/") -> tuple[str, ...]:
    """Split a path into its non-empty segments.

    Examples::

        "/auth/login"   -> ("auth", "login")
        "//auth//login/" -> ("auth", "login")
        "/"             -> ()
    """
    return tuple(part for part in path.split(separator) if part)


class SegmentCursor:
    """Walks the segments of a path one at a time.

    Usage::

        cursor = SegmentCursor("/auth/login/edit")
        while cursor.has_next():
            print(cursor.next())
        # auth, login, edit

    The segment sequence never changes after construction; only the
    position moves, forward through ``next()`` and back to zero through
    ``reset()``.
    """

    __slots__ = ("_path", "_position", "_segments", "_separator")

    def __init__(self, path: str = "", separator: str = "/") -> None:
        self._path = path
        self._separator = separator
        self._segments = split_path(path, separator) if path else ()
        self._position = 0

    @classmethod
    def from_segments(cls, segments: Iterable[str], separator: str = "/") -> "SegmentCursor":
        """Build a cursor from ready-made segments.

        The canonical path is reconstructed by joining the segments and
        prefixing one separator, so ``["a", "b"]`` becomes ``"/a/b"``.
        """
        cursor = cls(separator=separator)
        cursor._segments = tuple(segments)
        cursor._path = separator + separator.join(cursor._segments)
        return cursor

    @property
    def path(self) -> str:
        """The path string this cursor was built from."""
        return self._path

    @property
    def canonical_path(self) -> str:
        """The path rebuilt from the segments, e.g. ``"/auth/login"``."""
        return self._separator + self._separator.join(self._segments)

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def position(self) -> int:
        """Current 0-based position in the segment sequence."""
        return self._position

    def has_next(self) -> bool:
        """Return True while unconsumed segments remain."""
        return self._position < len(self._segments)

    def next(self) -> str | None:
        """Return the current segment and advance, or None when exhausted."""
        if not self.has_next():
            return None
        segment = self._segments[self._position]
        self._position += 1
        return segment

    def current(self) -> str | None:
        """Return the current segment without advancing."""
        if not self.has_next():
            return None
        return self._segments[self._position]

    def reset(self) -> "SegmentCursor":
        """Move back to the first segment. Returns self for chaining."""
        self._position = 0
        return self

    def remaining_segments(self) -> list[str]:
        """Drain and return every unconsumed segment.

        The cursor ends up exhausted::

            cursor = SegmentCursor("/auth/login/edit")
            cursor.next()                 # "auth"
            cursor.remaining_segments()   # ["login", "edit"]
            cursor.has_next()             # False
        """
        remaining = list(self._segments[self._position :])
        self._position = len(self._segments)
        return remaining

    def __call__(self) -> str | None:
        return self.next()

    def __iter__(self) -> Iterator[str]:
        while self._position < len(self._segments):
            segment = self._segments[self._position]
            self._position += 1
            yield segment

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentCursor):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return self.canonical_path

    def __repr__(self) -> str:
        return f"SegmentCursor({self._path!r}, position={self._position})"
