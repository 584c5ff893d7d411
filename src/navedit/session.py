"""Editing session: working and committed trees, edit mode, save and discard."""

from __future__ import annotations

import logging
from enum import Enum

from navedit.config import NAVEDIT_PRESS_DWELL_MS
from navedit.edits import set_title, set_visibility, toggle_visibility
from navedit.exceptions import ServerError, UnavailableError
from navedit.gateway import AnalyticsSink, PersistenceGateway
from navedit.reorder import MoveResult, move
from navedit.reporter import ChangeReporter
from navedit.schemas import GroupKey, NavTree
from navedit.seed import seed_tree
from navedit.timer import AsyncioDwellTimer, DwellTimer

logger = logging.getLogger(__name__)


class EditMode(str, Enum):
    """Whether the navigation is being browsed or rearranged."""

    VIEWING = "viewing"
    EDITING = "editing"


class NavigationSession:
    """Holds one editing session over a navigation tree.

    Mutations replace ``working`` with a new tree value; ``committed`` only
    changes when a save succeeds. Mutations are accepted in either mode:
    callers decide which controls to offer while viewing.

    Attributes:
        mode: Current EditMode.
        committed: Last tree known to be stored.
        working: Live candidate tree.
        error: Readable message from the last failed fetch or save.
        degraded: True once the service was found unreachable; stores are
            then skipped and the seed tree is used.
        pressed_item_id: Row currently held down, if any.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        analytics: AnalyticsSink | None = None,
        *,
        timer: DwellTimer | None = None,
        dwell_ms: int = NAVEDIT_PRESS_DWELL_MS,
        tree: NavTree = (),
    ) -> None:
        self.gateway = gateway
        self.reporter = ChangeReporter(analytics)
        self.timer: DwellTimer = timer or AsyncioDwellTimer()
        self.dwell_ms = dwell_ms

        self.mode = EditMode.VIEWING
        self.committed: NavTree = tree
        self.working: NavTree = tree
        self.error: str | None = None
        self.degraded = False
        self.saving = False
        self.pressed_item_id: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.mode is EditMode.EDITING

    @property
    def is_dirty(self) -> bool:
        """True when the working tree differs from the committed one."""
        return self.working != self.committed

    async def load(self) -> NavTree:
        """Load the tree from the gateway, falling back to the seed tree.

        A server failure leaves both trees untouched and sets ``error``.
        """
        self.error = None
        if self.degraded:
            tree = seed_tree()
        else:
            try:
                tree = await self.gateway.fetch_tree()
            except UnavailableError as exc:
                logger.info("Navigation service unavailable, using seed navigation: %s", exc)
                self._enter_degraded()
                tree = seed_tree()
            except ServerError as exc:
                logger.error("Failed to fetch navigation: %s", exc)
                self.error = str(exc)
                return self.working
        self.committed = tree
        self.working = tree
        return tree

    def enter_edit(self) -> None:
        if self.mode is EditMode.VIEWING:
            logger.debug("Entering edit mode")
        self.mode = EditMode.EDITING

    def toggle_edit(self) -> None:
        """Flip between viewing and editing (the explicit edit control)."""
        self.mode = EditMode.VIEWING if self.is_editing else EditMode.EDITING

    def press_start(self, item_id: str) -> None:
        """Start holding a row; editing begins once the dwell time passes."""
        self.pressed_item_id = item_id
        self.timer.start(self.dwell_ms / 1000, self._on_dwell_elapsed)

    def press_end(self) -> None:
        """Release the held row, cancelling a pending switch to editing."""
        self.timer.cancel()
        self.pressed_item_id = None

    def _on_dwell_elapsed(self) -> None:
        self.enter_edit()

    def move(
        self,
        group: GroupKey | str,
        from_index: int,
        to_index: int,
        *,
        destination: GroupKey | str | None = None,
    ) -> MoveResult:
        """Reorder within one sibling group and report the change.

        Raises:
            CrossGroupMoveError: If ``destination`` names another group.
            MoveIndexError: If an index is outside the group.
        """
        result = move(self.working, group, from_index, to_index, destination=destination)
        if result.changed:
            self.working = result.tree
            if result.record is not None:
                self.reporter.report(result.record)
        return result

    def set_visibility(self, node_id: str, visible: bool) -> NavTree:
        self.working = set_visibility(self.working, node_id, visible)
        return self.working

    def toggle_visibility(self, node_id: str) -> NavTree:
        self.working = toggle_visibility(self.working, node_id)
        return self.working

    def set_title(self, node_id: str, title: str) -> NavTree:
        self.working = set_title(self.working, node_id, title)
        return self.working

    async def save(self) -> bool:
        """Store the working tree and return to viewing.

        Returns:
            True if the tree was committed. False if the store failed (the
            session stays in editing with ``error`` set) or another save was
            still in flight.
        """
        if self.saving:
            logger.debug("Save already in progress; ignoring")
            return False

        self.saving = True
        self.error = None
        tree = self.working
        try:
            if self.degraded:
                logger.info("Offline mode: keeping navigation locally (%d entries)", len(tree))
            else:
                await self.gateway.store_tree(tree)
        except UnavailableError as exc:
            logger.info("Navigation service unavailable, keeping changes locally: %s", exc)
            self._enter_degraded()
        except ServerError as exc:
            logger.error("Failed to save navigation: %s", exc)
            self.error = str(exc)
            return False
        finally:
            self.saving = False

        self.committed = tree
        self.mode = EditMode.VIEWING
        return True

    def discard(self) -> None:
        """Drop unsaved changes and return to viewing."""
        self.press_end()
        self.working = self.committed
        self.mode = EditMode.VIEWING
        self.error = None

    async def aclose(self) -> None:
        """Cancel the press timer and wait for outstanding reports."""
        self.press_end()
        await self.reporter.drain()

    def _enter_degraded(self) -> None:
        self.degraded = True
        self.reporter.offline = True
