"""In-memory storage behind the reference navigation service."""

from __future__ import annotations

from navedit.schemas import MoveRecord, NavTree
from navedit.seed import seed_tree


class NavigationStore:
    """Holds the current tree and the move events received so far."""

    def __init__(self, tree: NavTree | None = None) -> None:
        self.tree: NavTree = seed_tree() if tree is None else tree
        self.events: list[MoveRecord] = []

    def replace(self, tree: NavTree) -> None:
        self.tree = tree

    def track(self, record: MoveRecord) -> None:
        self.events.append(record)
