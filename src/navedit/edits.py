"""Field edits applied to a node by id anywhere in the tree."""

from __future__ import annotations

from navedit.schemas import NavTree
from navedit.tree import update_node


def set_visibility(tree: NavTree, node_id: str, visible: bool) -> NavTree:
    """Set ``visible`` on the node with ``node_id``; absent ids are a no-op."""
    return update_node(tree, node_id, lambda node: node.model_copy(update={"visible": visible}))


def toggle_visibility(tree: NavTree, node_id: str) -> NavTree:
    """Flip ``visible`` on the node with ``node_id``."""
    return update_node(
        tree, node_id, lambda node: node.model_copy(update={"visible": not node.visible})
    )


def set_title(tree: NavTree, node_id: str, title: str) -> NavTree:
    """Rename the node with ``node_id``. Empty titles are passed through."""
    return update_node(tree, node_id, lambda node: node.model_copy(update={"title": title}))
