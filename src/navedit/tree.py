"""Pure lookups and rewrites over a two-level navigation tree."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from pydantic import TypeAdapter, ValidationError

from navedit.exceptions import TreeShapeError
from navedit.schemas import GroupKey, NavNode, NavTree

_TREE_ADAPTER: TypeAdapter[tuple[NavNode, ...]] = TypeAdapter(tuple[NavNode, ...])


def load_tree(data: Any) -> NavTree:
    """Validate wire data (a JSON array of nodes) into a NavTree.

    Args:
        data: Decoded JSON, or a JSON string/bytes.

    Returns:
        The validated tree.

    Raises:
        TreeShapeError: If the data does not match the node shape or nests
            deeper than two levels.
    """
    try:
        if isinstance(data, (str, bytes)):
            tree = _TREE_ADAPTER.validate_json(data)
        else:
            tree = _TREE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise TreeShapeError(f"Malformed navigation data: {exc}") from exc
    check_depth(tree)
    return tree


def dump_tree(tree: NavTree) -> list[dict[str, Any]]:
    """Serialize a tree to its wire shape; ``children`` is omitted for leaves."""
    return [node.model_dump(mode="json", by_alias=True, exclude_none=True) for node in tree]


def check_depth(tree: NavTree) -> None:
    """Raise TreeShapeError if any child has children of its own."""
    for node in tree:
        for child in node.children or ():
            if child.children is not None:
                raise TreeShapeError(
                    f"Node {child.id!r} under {node.id!r} has children; "
                    "navigation is limited to two levels"
                )


def find_node(tree: NavTree, node_id: str) -> NavNode | None:
    """Find a node by id among top-level nodes and their children."""
    for node in tree:
        if node.id == node_id:
            return node
        for child in node.children or ():
            if child.id == node_id:
                return child
    return None


def update_node(
    tree: NavTree, node_id: str, fn: Callable[[NavNode], NavNode]
) -> NavTree:
    """Return a tree where every node with ``node_id`` is replaced by ``fn(node)``.

    Unaffected nodes and child tuples are shared with the input. When no node
    matches, the input tree itself is returned.
    """
    return _rewrite(tree, node_id, fn)


def _rewrite(
    nodes: NavTree, node_id: str, fn: Callable[[NavNode], NavNode]
) -> NavTree:
    result: list[NavNode] = []
    changed = False
    for node in nodes:
        new_node = fn(node) if node.id == node_id else node
        if new_node.children:
            children = _rewrite(new_node.children, node_id, fn)
            if children is not new_node.children:
                new_node = new_node.model_copy(update={"children": children})
        changed = changed or new_node is not node
        result.append(new_node)
    return tuple(result) if changed else nodes


def sibling_group(tree: NavTree, group: GroupKey | str) -> NavTree | None:
    """Resolve a group key to its ordered sibling sequence.

    Returns None when the named parent is missing or is a leaf.
    """
    key = GroupKey.parse(group)
    if key.is_top_level:
        return tree
    parent = next((node for node in tree if node.id == key.parent_id), None)
    if parent is None:
        return None
    return parent.children


def replace_sibling_group(
    tree: NavTree, group: GroupKey | str, new_siblings: Iterable[NavNode]
) -> NavTree:
    """Return a tree with one sibling group replaced by ``new_siblings``.

    A children group whose parent is missing or is a leaf leaves the tree
    unchanged.
    """
    key = GroupKey.parse(group)
    siblings = tuple(new_siblings)
    if key.is_top_level:
        return siblings
    result: list[NavNode] = []
    changed = False
    for node in tree:
        if node.id == key.parent_id and node.children is not None:
            node = node.model_copy(update={"children": siblings})
            changed = True
        result.append(node)
    return tuple(result) if changed else tree
