"""
family_tree - an in-memory family tree with traversal queries.

    from family_tree import FamilyTree

    tree = FamilyTree.with_root("Nancy")
    tree.add_child("Nancy", "Jill")
    tree.add_child("Jill", "Kevin")
    tree.get_grandparent("Kevin")   # 'Nancy'
"""

from __future__ import annotations

__version__ = "0.1.0"

from family_tree.core import (
    FamilyNode,
    FamilyTreeError,
    MemberNotFoundError,
    NoGrandchildrenError,
    RootRemovalError,
    TreeLoadError,
    iter_breadth_first,
)
from family_tree.exporter import export_tree_json, tree_to_json
from family_tree.loader import build_tree, build_tree_from_pairs, load_tree
from family_tree.tree import FamilyTree

__all__ = [
    "FamilyNode",
    "FamilyTree",
    "iter_breadth_first",
    "build_tree",
    "build_tree_from_pairs",
    "load_tree",
    "export_tree_json",
    "tree_to_json",
    "FamilyTreeError",
    "MemberNotFoundError",
    "NoGrandchildrenError",
    "RootRemovalError",
    "TreeLoadError",
]
