from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .node import FamilyNode


def iter_breadth_first(
    start: "FamilyNode", include_self: bool = True
) -> Iterator["FamilyNode"]:
    """
    Yield nodes reachable from ``start`` level by level.

    ``start`` itself comes first when ``include_self`` is set; after that
    every child of a dequeued node is yielded in stored order before it is
    queued. All breadth-first queries on the tree are built on this walker.
    """
    if include_self:
        yield start

    queue = deque([start])
    while queue:
        current = queue.popleft()
        for child in current.children:
            yield child
            queue.append(child)
