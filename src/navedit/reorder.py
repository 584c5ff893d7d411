"""Single-element reordering within one sibling group."""

from __future__ import annotations

from typing import NamedTuple

from navedit.exceptions import CrossGroupMoveError, MoveIndexError
from navedit.schemas import GroupKey, MoveRecord, NavTree
from navedit.tree import replace_sibling_group, sibling_group


class MoveResult(NamedTuple):
    """Outcome of a move: the new tree, whether it changed, and the record."""

    tree: NavTree
    changed: bool
    record: MoveRecord | None = None


def move(
    tree: NavTree,
    group: GroupKey | str,
    from_index: int,
    to_index: int,
    *,
    destination: GroupKey | str | None = None,
) -> MoveResult:
    """Move one entry within a sibling group.

    The entry at ``from_index`` is removed, then inserted at ``to_index`` of
    the shortened sequence, which is what a drop "before what is now at
    position N" means.

    Args:
        tree: The tree to reorder.
        group: Sibling group holding both positions.
        from_index: Current position of the entry.
        to_index: Position the entry ends up at.
        destination: Group the entry was dropped into, if the caller tracks
            it separately. Must equal ``group``.

    Returns:
        MoveResult. ``changed`` is False (and no record is produced) when the
        indices are equal or the group's parent does not exist.

    Raises:
        CrossGroupMoveError: If ``destination`` differs from ``group``.
        MoveIndexError: If either index falls outside the group.
    """
    source_key = GroupKey.parse(group)
    if destination is not None and GroupKey.parse(destination) != source_key:
        raise CrossGroupMoveError(
            f"Cannot move from {source_key} to {GroupKey.parse(destination)}"
        )

    siblings = sibling_group(tree, source_key)
    if siblings is None:
        return MoveResult(tree, False)

    size = len(siblings)
    for name, index in (("from_index", from_index), ("to_index", to_index)):
        if not 0 <= index < size:
            raise MoveIndexError(
                f"{name}={index} out of range for {source_key} of length {size}"
            )

    if from_index == to_index:
        return MoveResult(tree, False)

    reordered = list(siblings)
    moved = reordered.pop(from_index)
    reordered.insert(to_index, moved)

    record = MoveRecord(item_id=moved.id, from_index=from_index, to_index=to_index)
    return MoveResult(replace_sibling_group(tree, source_key, reordered), True, record)
