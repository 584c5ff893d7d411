"""Sibling group keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from navedit.exceptions import InvalidGroupKeyError

TOP_LEVEL_KEY: Final[str] = "navigation-list"
CHILDREN_PREFIX: Final[str] = "children-"


@dataclass(frozen=True)
class GroupKey:
    """Identifies one sibling group: the top level, or one parent's children.

    The string forms are ``"navigation-list"`` and ``"children-<parentId>"``.
    """

    parent_id: str | None = None

    @classmethod
    def parse(cls, value: GroupKey | str) -> GroupKey:
        """Build a key from its string form (keys pass through unchanged).

        Raises:
            InvalidGroupKeyError: If ``value`` names no sibling group.
        """
        if isinstance(value, GroupKey):
            return value
        if not isinstance(value, str):
            raise InvalidGroupKeyError(f"Unknown sibling group: {value!r}")
        if value == TOP_LEVEL_KEY:
            return cls()
        if value.startswith(CHILDREN_PREFIX) and len(value) > len(CHILDREN_PREFIX):
            return cls(parent_id=value[len(CHILDREN_PREFIX) :])
        raise InvalidGroupKeyError(f"Unknown sibling group: {value!r}")

    @classmethod
    def children_of(cls, parent_id: str) -> GroupKey:
        return cls(parent_id=parent_id)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def __str__(self) -> str:
        if self.parent_id is None:
            return TOP_LEVEL_KEY
        return f"{CHILDREN_PREFIX}{self.parent_id}"


TOP_LEVEL = GroupKey()
