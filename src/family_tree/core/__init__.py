"""
Core family tree structure: nodes, breadth-first traversal and errors.
"""

from __future__ import annotations

from .exceptions import (
    FamilyTreeError,
    MemberNotFoundError,
    NoGrandchildrenError,
    RootRemovalError,
    TreeLoadError,
)
from .node import GRANDPARENT_LEVEL, FamilyNode
from .traversal import iter_breadth_first

__all__ = [
    "FamilyNode",
    "GRANDPARENT_LEVEL",
    "iter_breadth_first",
    "FamilyTreeError",
    "MemberNotFoundError",
    "NoGrandchildrenError",
    "RootRemovalError",
    "TreeLoadError",
]
