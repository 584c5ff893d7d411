"""Navigation tree models."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field


class NavNode(BaseModel):
    """A navigation entry.

    A node with ``children`` set (even to an empty tuple) is a parent; a node
    with ``children=None`` is a leaf. Nodes are immutable: edits produce new
    nodes through ``model_copy``.

    Attributes:
        id: Stable identifier, the only key used for lookups and updates.
        title: Display text.
        target: Link reference, serialized as ``url``.
        visible: Hidden nodes keep their position but are rendered muted.
        children: Ordered child entries, or None for a leaf.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    target: str = Field(default="", alias="url")
    visible: bool
    children: tuple["NavNode", ...] | None = None

    @property
    def is_parent(self) -> bool:
        return self.children is not None


NavTree: TypeAlias = tuple[NavNode, ...]


class MoveRecord(BaseModel):
    """Analytics payload describing one successful reorder."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    item_id: str = Field(alias="id")
    from_index: int = Field(alias="from", ge=0)
    to_index: int = Field(alias="to", ge=0)

    def to_wire(self) -> dict[str, str | int]:
        """Serialize as ``{"id", "from", "to"}``."""
        return self.model_dump(by_alias=True)
