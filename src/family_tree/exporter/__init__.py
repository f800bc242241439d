"""
Exporter package.

Re-exports the JSON export entry points.
"""

from __future__ import annotations

from .json_exporter import export_tree_json, tree_to_json

__all__ = ["export_tree_json", "tree_to_json"]
