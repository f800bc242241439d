from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TextIO

from family_tree.core.node import FamilyNode
from family_tree.core.traversal import iter_breadth_first


@dataclass
class FamilyTree:
    """
    Caller-owned handle on a family tree.

    Holds the root FamilyNode and forwards every operation to it, so all
    searches and queries cover the whole tree. There is no shared or
    module-level tree: build one, pass it around, drop it when done.

    Attributes:
        root: The single parentless member.
    """

    root: FamilyNode

    @classmethod
    def with_root(cls, name: str) -> "FamilyTree":
        return cls(root=FamilyNode(name))

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return sum(1 for _ in iter_breadth_first(self.root))

    def __iter__(self) -> Iterator[FamilyNode]:
        return iter_breadth_first(self.root)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.root.find(name) is not None

    def members(self) -> List[str]:
        """Every member name, in breadth-first order."""
        return [node.name for node in self]

    def generations(self) -> int:
        """Number of levels in the tree (1 for a lone root)."""
        depth = 0
        level = [self.root]
        while level:
            depth += 1
            level = [child for node in level for child in node.children]
        return depth

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def add_child(self, parent_name: str, child_name: str) -> FamilyNode:
        return self.root.add_child(parent_name, child_name)

    def remove_child(self, child_name: str) -> FamilyNode:
        return self.root.remove_child(child_name)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find(self, name: str) -> Optional[FamilyNode]:
        return self.root.find(name)

    def get_grandparent(self, name: str) -> Optional[str]:
        return self.root.get_grandparent(name)

    def get_only_children(self) -> List[str]:
        return self.root.get_only_children()

    def get_people_without_kids(self) -> List[str]:
        return self.root.get_people_without_kids()

    def most_grand_kids(self) -> str:
        return self.root.most_grand_kids()

    def render(self) -> str:
        return self.root.render()

    def print(self, file: Optional[TextIO] = None) -> None:
        self.root.print(file=file)

    # ------------------------------------------------------------------ #
    # Conversion
    # ------------------------------------------------------------------ #

    def to_dict(self) -> Dict[str, Any]:
        """
        Nested mapping ``{name: {child: {...}}}``; leaves map to an empty dict.
        """
        def _branch(node: FamilyNode) -> Dict[str, Any]:
            return {child.name: _branch(child) for child in node.children}

        return {self.root.name: _branch(self.root)}

    def __repr__(self) -> str:
        return f"<FamilyTree root={self.root.name!r} members={len(self)}>"
