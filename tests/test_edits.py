"""Tests for visibility and title edits."""

from __future__ import annotations

import pytest

from navedit.edits import set_title, set_visibility, toggle_visibility
from navedit.schemas import NavTree
from navedit.tree import find_node


class TestSetVisibility:
    """Tests for set_visibility and toggle_visibility."""

    def test_child_scenario(self, tree: NavTree) -> None:
        """Only node 2-2 changes; the copy chain runs back to the root."""
        result = set_visibility(tree, "2-2", True)

        node = find_node(result, "2-2")
        assert node is not None and node.visible
        assert result[0] is tree[0]
        assert result[1] is not tree[1]
        assert result[1].title == tree[1].title
        assert result[1].visible == tree[1].visible
        assert result[1].children[0] is tree[1].children[0]  # type: ignore[index]

    def test_toggle_twice_restores(self, tree: NavTree) -> None:
        once = toggle_visibility(tree, "2-1")
        twice = toggle_visibility(once, "2-1")

        assert find_node(once, "2-1").visible is False  # type: ignore[union-attr]
        assert twice == tree

    def test_set_twice_restores(self, tree: NavTree) -> None:
        hidden = set_visibility(tree, "1", False)
        assert set_visibility(hidden, "1", True) == tree

    def test_hidden_node_keeps_position(self, tree: NavTree) -> None:
        result = set_visibility(tree, "1", False)
        assert [n.id for n in result] == ["1", "2"]

    def test_missing_id_is_noop(self, tree: NavTree) -> None:
        assert set_visibility(tree, "missing", False) is tree
        assert toggle_visibility(tree, "missing") is tree


class TestSetTitle:
    """Tests for set_title."""

    def test_renames_top_level(self, tree: NavTree) -> None:
        result = set_title(tree, "1", "Home")
        assert result[0].title == "Home"
        assert tree[0].title == "Dashboard"

    def test_renames_child(self, tree: NavTree) -> None:
        result = set_title(tree, "2-2", "Beta")
        assert find_node(result, "2-2").title == "Beta"  # type: ignore[union-attr]
        assert find_node(result, "2-1") is find_node(tree, "2-1")

    @pytest.mark.parametrize("title", ["", "   ", "Ünïcode ✓"])
    def test_title_passthrough(self, tree: NavTree, title: str) -> None:
        result = set_title(tree, "2", title)
        assert result[1].title == title

    def test_keeps_children_and_target(self, tree: NavTree) -> None:
        result = set_title(tree, "2", "Applications")
        assert result[1].children is tree[1].children
        assert result[1].target == tree[1].target

    def test_missing_id_is_noop(self, tree: NavTree) -> None:
        assert set_title(tree, "missing", "x") is tree
