"""Persistence gateway and analytics sink for the navigation service."""

from __future__ import annotations

from typing import Any, Final, Protocol

import httpx

from navedit.config import NAVEDIT_API_BASE_URL
from navedit.http_utils import new_client, send_with_retries
from navedit.schemas import MoveRecord, NavTree
from navedit.tree import dump_tree, load_tree

NAV_PATH: Final[str] = "/nav"
TRACK_PATH: Final[str] = "/track"


class PersistenceGateway(Protocol):
    """Loads and stores the navigation tree."""

    async def fetch_tree(self) -> NavTree: ...

    async def store_tree(self, tree: NavTree) -> None: ...


class AnalyticsSink(Protocol):
    """Receives one record per successful reorder."""

    async def record_move(self, record: MoveRecord) -> None: ...


class NavigationApiClient:
    """HTTP client for ``/nav`` and ``/track``.

    Implements both PersistenceGateway and AnalyticsSink. Pass ``client`` to
    reuse a pooled ``httpx.AsyncClient``; otherwise a client is opened for
    each request.
    """

    def __init__(
        self,
        base_url: str = NAVEDIT_API_BASE_URL,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = client

    async def fetch_tree(self) -> NavTree:
        """Fetch the stored tree.

        Raises:
            UnavailableError: If the service cannot be reached.
            ServerError: If the service answers with a failure status.
            TreeShapeError: If the payload is not a valid two-level tree.
        """
        response = await self._send("GET", NAV_PATH)
        return load_tree(response.content)

    async def store_tree(self, tree: NavTree) -> None:
        """Replace the stored tree."""
        await self._send("POST", NAV_PATH, json=dump_tree(tree))

    async def record_move(self, record: MoveRecord) -> None:
        """Post a move record. Never retried."""
        await self._send("POST", TRACK_PATH, json=record.to_wire(), max_retries=0)

    async def _send(
        self, method: str, path: str, *, json: Any = None, max_retries: int | None = None
    ) -> httpx.Response:
        if self._client is not None:
            return await send_with_retries(
                self._client, method, path, json=json, max_retries=max_retries
            )
        async with new_client(self.base_url) as client:
            return await send_with_retries(client, method, path, json=json, max_retries=max_retries)
