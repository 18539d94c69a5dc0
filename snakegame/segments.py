"""Ordered chain of grid cells, used for the snake's body and for the apples."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class Segment:
    """One occupied cell: its pixel position and the heading it carries."""

    x: int
    y: int
    direction: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


class SegmentList:
    """A sequence of segments with cheap access and insertion at both ends."""

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self._items: deque[Segment] = deque(segments)

    @property
    def head(self) -> Segment:
        """The first segment; raises IndexError when the list is empty."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items[0]

    @property
    def tail(self) -> Segment:
        """The last segment; raises IndexError when the list is empty."""
        if not self._items:
            raise IndexError("list is empty")
        return self._items[-1]

    def push_front(self, segment: Segment) -> None:
        self._items.appendleft(segment)

    def push_back(self, segment: Segment) -> None:
        self._items.append(segment)

    def pop_front(self) -> Segment:
        if not self._items:
            raise IndexError("list is empty")
        return self._items.popleft()

    def pop_back(self) -> Segment:
        if not self._items:
            raise IndexError("list is empty")
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, segment: object) -> bool:
        """True when some segment occupies the same cell, whatever its heading."""
        x = getattr(segment, "x", None)
        y = getattr(segment, "y", None)
        return any(item.x == x and item.y == y for item in self._items)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def lines(self) -> Iterator[str]:
        """Yield each segment's position as an "x y" line."""
        for item in self._items:
            yield f"{item.x} {item.y}"