# tests/test_exporter.py

from __future__ import annotations

import json

from family_tree import export_tree_json, load_tree, tree_to_json


def test_tree_to_json_compact(nancy_tree) -> None:
    payload = tree_to_json(nancy_tree, indent=None)
    assert "\n" not in payload
    assert json.loads(payload) == nancy_tree.to_dict()


def test_export_writes_loadable_file(nancy_tree, tmp_path) -> None:
    out = tmp_path / "nested" / "family.json"
    written = export_tree_json(nancy_tree, out)

    assert written == out
    assert out.exists()
    reloaded = load_tree(out)
    assert reloaded.render() == nancy_tree.render()
