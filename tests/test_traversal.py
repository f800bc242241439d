# tests/test_traversal.py

from __future__ import annotations

from family_tree import FamilyNode, iter_breadth_first


def test_breadth_first_visits_level_by_level(nancy_tree) -> None:
    names = [node.name for node in iter_breadth_first(nancy_tree.root)]
    assert names == [
        "Nancy",
        "Adam", "Jill", "Carl",
        "Kevin", "Catherine", "Joseph",
        "Samuel", "George", "James", "Aaron",
        "Patrick", "Robert", "Mary",
    ]


def test_breadth_first_can_skip_start(nancy_tree) -> None:
    names = [node.name for node in iter_breadth_first(nancy_tree.root, include_self=False)]
    assert "Nancy" not in names
    assert names[:3] == ["Adam", "Jill", "Carl"]


def test_breadth_first_only_walks_downward(nancy_tree) -> None:
    kevin = nancy_tree.find("Kevin")
    names = {node.name for node in iter_breadth_first(kevin)}
    assert names == {"Kevin", "Samuel", "George", "James", "Aaron", "Patrick", "Robert", "Mary"}


def test_breadth_first_lone_node() -> None:
    lone = FamilyNode("Solo")
    assert list(iter_breadth_first(lone)) == [lone]
    assert list(iter_breadth_first(lone, include_self=False)) == []
