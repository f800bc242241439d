from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO

from family_tree.logging import get_logger

from .exceptions import MemberNotFoundError, NoGrandchildrenError, RootRemovalError
from .traversal import iter_breadth_first

log = get_logger("core.node")

# Number of parent hops from a member to its grandparent
GRANDPARENT_LEVEL = 2

BRANCH = "├── "
TAIL = "└── "
PIPE_PAD = "│   "
BLANK_PAD = "    "


@dataclass(eq=False)
class FamilyNode:
    """
    One member of a family tree.

    Attributes:
        name: Member name. Names are assumed to be unique across the tree;
            nothing checks this.
        children: Owned child nodes, in the order they were added.
        parent: Back-reference to the node holding this one in its
            ``children`` list, or None for the root. It does not own the
            parent and is never followed when rendering or searching.

    Nodes compare by identity. Every query runs from this node (the
    receiver) over the part of the tree reachable downward from it.
    """

    name: str
    children: List["FamilyNode"] = field(default_factory=list)
    parent: Optional["FamilyNode"] = field(default=None, repr=False)

    # ---------- Structure ----------

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def root(self) -> "FamilyNode":
        """Follow parent links up to the parentless node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def iter_subtree(self) -> Iterator["FamilyNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def grandchild_count(self) -> int:
        """Number of grandchildren: the children of each direct child."""
        return sum(len(child.children) for child in self.children)

    # ---------- Mutation ----------

    def add_child(self, parent_name: str, child_name: str) -> "FamilyNode":
        """
        Attach a new member named ``child_name`` under ``parent_name``.

        Raises:
            MemberNotFoundError: ``parent_name`` is not reachable from here.
        """
        parent = self.find(parent_name)
        if parent is None:
            raise MemberNotFoundError(parent_name)

        child = FamilyNode(child_name, parent=parent)
        parent.children.append(child)
        log.debug(f"Added {child_name!r} under {parent_name!r}")
        return child

    def remove_child(self, child_name: str) -> "FamilyNode":
        """
        Detach the member named ``child_name`` from its parent.

        The detached node keeps its own parent reference and its whole
        subtree, it is just no longer reachable from the root.

        Raises:
            MemberNotFoundError: ``child_name`` is not reachable from here.
            RootRemovalError: the target is this node or has no parent.
        """
        target = self.find(child_name)
        if target is None:
            raise MemberNotFoundError(child_name)
        if target.parent is None:
            raise RootRemovalError(
                f"Cannot remove {child_name!r}: it has no parent to detach from"
            )
        if target is self:
            raise RootRemovalError(
                f"Cannot remove {child_name!r}: a member cannot remove itself"
            )

        target.parent.children.remove(target)
        log.debug(f"Removed {child_name!r} from {target.parent.name!r}")
        return target

    # ---------- Queries ----------

    def find(self, name: str) -> Optional["FamilyNode"]:
        """Return the first node named ``name`` in breadth-first order, or None."""
        for node in iter_breadth_first(self):
            if node.name == name:
                return node
        return None

    def get_grandparent(self, name: str) -> Optional[str]:
        """
        Return the name two parent hops above ``name``.

        None means the member has no grandparent (it is the root or a child
        of the root).

        Raises:
            MemberNotFoundError: ``name`` is not reachable from here.
        """
        current = self.find(name)
        if current is None:
            raise MemberNotFoundError(name)

        for _ in range(GRANDPARENT_LEVEL):
            current = current.parent
            if current is None:
                return None
        return current.name

    def get_only_children(self) -> List[str]:
        """
        Names of members without siblings, in breadth-first order.

        A member counts when its parent has exactly one child, or when it
        has no parent at all, so the root is always listed.
        """
        return [
            node.name
            for node in iter_breadth_first(self)
            if node.parent is None or len(node.parent.children) == 1
        ]

    def get_people_without_kids(self) -> List[str]:
        """Names of the leaves below this node, in breadth-first order."""
        return [
            node.name
            for node in iter_breadth_first(self, include_self=False)
            if node.is_leaf
        ]

    def most_grand_kids(self) -> str:
        """
        Name of the descendant with the most grandchildren.

        Ties go to whoever is reached first breadth-first.

        Raises:
            NoGrandchildrenError: no descendant has any grandchildren.
        """
        best: Optional[FamilyNode] = None
        best_count = 0
        for node in iter_breadth_first(self, include_self=False):
            count = node.grandchild_count()
            if count > best_count:
                best, best_count = node, count

        if best is None:
            raise NoGrandchildrenError(
                f"No member below {self.name!r} has grandchildren"
            )
        return best.name

    # ---------- Rendering ----------

    def render(self) -> str:
        """Render this subtree as a connector-style tree diagram."""
        lines: List[str] = []
        self._render_into(lines, "", True)
        return "\n".join(lines)

    def _render_into(self, lines: List[str], prefix: str, is_tail: bool) -> None:
        lines.append(prefix + (TAIL if is_tail else BRANCH) + self.name)
        child_prefix = prefix + (BLANK_PAD if is_tail else PIPE_PAD)
        last = len(self.children) - 1
        for index, child in enumerate(self.children):
            child._render_into(lines, child_prefix, index == last)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered subtree to ``file`` (stdout by default)."""
        print(self.render(), file=file if file is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"<FamilyNode {self.name!r} children={len(self.children)}>"
