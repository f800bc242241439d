"""
json_exporter.py
JSON exporter for FamilyTree objects.

The exported document is the tree's nested mapping, which the loader reads
back unchanged.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from family_tree.logging import get_logger
from family_tree.tree import FamilyTree

log = get_logger("json_exporter")


def tree_to_json(tree: FamilyTree, *, indent: int | None = 2) -> str:
    """Serialize ``tree`` to a JSON string."""
    data: Dict[str, Any] = tree.to_dict()
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)


def export_tree_json(tree: FamilyTree, output_path: Path, *, indent: int | None = 2) -> Path:
    """Write ``tree`` as JSON to ``output_path``, creating parent folders."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(tree_to_json(tree, indent=indent), encoding="utf-8")
    log.info(f"Exported {len(tree)} members to {output_path}")
    return output_path
