# tests/test_tree.py

from __future__ import annotations

from family_tree import FamilyNode, FamilyTree


def test_with_root_builds_single_member_tree() -> None:
    tree = FamilyTree.with_root("Nancy")
    assert isinstance(tree.root, FamilyNode)
    assert len(tree) == 1
    assert tree.members() == ["Nancy"]
    assert tree.generations() == 1


def test_reference_tree_shape(nancy_tree) -> None:
    assert len(nancy_tree) == 14
    assert nancy_tree.generations() == 5
    assert nancy_tree.members()[:4] == ["Nancy", "Adam", "Jill", "Carl"]


def test_contains_uses_names(nancy_tree) -> None:
    assert "Mary" in nancy_tree
    assert "Nobody" not in nancy_tree
    assert 42 not in nancy_tree


def test_tree_delegates_queries_to_root(nancy_tree) -> None:
    root = nancy_tree.root
    assert nancy_tree.get_only_children() == root.get_only_children()
    assert nancy_tree.get_people_without_kids() == root.get_people_without_kids()
    assert nancy_tree.most_grand_kids() == root.most_grand_kids()
    assert nancy_tree.render() == root.render()


def test_remove_shrinks_tree(nancy_tree) -> None:
    nancy_tree.remove_child("Carl")
    assert len(nancy_tree) == 11
    assert "Joseph" not in nancy_tree


def test_trees_are_independent() -> None:
    first = FamilyTree.with_root("Nancy")
    second = FamilyTree.with_root("Nancy")
    first.add_child("Nancy", "Adam")
    assert "Adam" in first
    assert "Adam" not in second


def test_to_dict_nested_mapping(nancy_tree) -> None:
    data = nancy_tree.to_dict()
    assert list(data) == ["Nancy"]
    assert list(data["Nancy"]) == ["Adam", "Jill", "Carl"]
    assert data["Nancy"]["Adam"] == {}
    assert data["Nancy"]["Jill"]["Kevin"]["James"] == {"Mary": {}}


def test_repr(nancy_tree) -> None:
    assert repr(nancy_tree) == "<FamilyTree root='Nancy' members=14>"
