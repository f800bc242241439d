"""
loader.py
Build FamilyTree instances from nested mappings, parent/child pairs or files.

Two input shapes are accepted:

    Nancy:                     root: Nancy
      Adam:                    relations:
      Jill:                      - [Nancy, Adam]
        Kevin:                   - [Nancy, Jill]
                                 - [Jill, Kevin]

The nested form maps each name to its children (a mapping, a list whose
entries are leaf names or single-key mappings, or null for a leaf). The pair
form lists (parent, child) edges in the order they should be attached;
every parent must already exist.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence, Union

import yaml

from family_tree.core.exceptions import FamilyTreeError, TreeLoadError
from family_tree.core.node import FamilyNode
from family_tree.logging import get_logger
from family_tree.tree import FamilyTree

log = get_logger("loader")

YAML_SUFFIXES = {".yml", ".yaml"}
JSON_SUFFIXES = {".json"}


def _require_name(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise TreeLoadError(f"Member names must be non-empty strings, got {value!r}")
    return value


def _attach(node: FamilyNode, children: Any) -> None:
    if children is None:
        return

    if isinstance(children, Mapping):
        for name, grandchildren in children.items():
            child = node.add_child(node.name, _require_name(name))
            _attach(child, grandchildren)
        return

    if isinstance(children, list):
        for entry in children:
            if isinstance(entry, Mapping):
                if len(entry) != 1:
                    raise TreeLoadError(
                        f"Mappings listed under {node.name!r} must have exactly "
                        f"one member name, got {len(entry)}"
                    )
                _attach(node, entry)
            elif isinstance(entry, str):
                node.add_child(node.name, _require_name(entry))
            else:
                raise TreeLoadError(
                    f"Entries listed under {node.name!r} must be a name or a "
                    f"single-key mapping, got {entry!r}"
                )
        return

    raise TreeLoadError(
        f"Children of {node.name!r} must be a mapping, a list or null, "
        f"got {type(children).__name__}"
    )


def build_tree(mapping: Mapping[str, Any]) -> FamilyTree:
    """Build a tree from a single-key nested mapping ``{root: {child: ...}}``."""
    if not isinstance(mapping, Mapping) or len(mapping) != 1:
        raise TreeLoadError("A nested tree description needs exactly one root name")

    (root_name, children), = mapping.items()
    tree = FamilyTree.with_root(_require_name(root_name))
    _attach(tree.root, children)
    return tree


def build_tree_from_pairs(
    root_name: str, pairs: Iterable[Sequence[str]]
) -> FamilyTree:
    """
    Build a tree by attaching each ``(parent, child)`` pair in order.

    Raises:
        TreeLoadError: a pair is malformed or names an unknown parent.
    """
    tree = FamilyTree.with_root(_require_name(root_name))
    for pair in pairs:
        if (
            not isinstance(pair, Sequence)
            or isinstance(pair, (str, bytes))
            or len(pair) != 2
        ):
            raise TreeLoadError(f"Expected a [parent, child] pair, got {pair!r}")
        parent_name, child_name = pair
        try:
            tree.add_child(_require_name(parent_name), _require_name(child_name))
        except FamilyTreeError as exc:
            raise TreeLoadError(str(exc)) from exc
    return tree


def tree_from_data(data: Any) -> FamilyTree:
    """Dispatch on the shape of already-parsed YAML/JSON data."""
    if isinstance(data, Mapping) and "relations" in data:
        if "root" not in data:
            raise TreeLoadError("A 'relations' description also needs a 'root' name")
        relations = data.get("relations") or []
        if not isinstance(relations, list):
            raise TreeLoadError("'relations' must be a list of [parent, child] pairs")
        return build_tree_from_pairs(data["root"], relations)
    return build_tree(data)


def _read_data(path: Path) -> Any:
    suffix = path.suffix.lower()
    with open(path, "r", encoding="utf-8") as f:
        if suffix in JSON_SUFFIXES:
            return json.load(f)
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(f)
    raise TreeLoadError(f"Unsupported tree file type: {path.suffix or path.name}")


def load_tree(path: Union[str, Path]) -> FamilyTree:
    """
    Read a tree description from a ``.yml``/``.yaml``/``.json`` file.

    Raises:
        TreeLoadError: the file is missing, unparsable or malformed.
    """
    path = Path(path)
    log.info(f"Loading family tree: {path}")

    try:
        data = _read_data(path)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        log.error(f"Could not read {path}: {exc}")
        raise TreeLoadError(f"Could not read {path}: {exc}") from exc

    tree = tree_from_data(data)
    log.info(f"Loaded {len(tree)} members rooted at {tree.root.name!r}")
    return tree
