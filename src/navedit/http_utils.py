"""HTTP helpers for talking to the navigation service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final

import httpx

from navedit.config import (
    NAVEDIT_API_BACKOFF_S,
    NAVEDIT_API_MAX_RETRIES,
    NAVEDIT_API_TIMEOUT_S,
    NAVEDIT_USER_AGENT,
)
from navedit.exceptions import ServerError, UnavailableError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def new_client(base_url: str) -> httpx.AsyncClient:
    """Create an AsyncClient configured for the navigation service."""
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(NAVEDIT_API_TIMEOUT_S),
        headers={
            "Content-Type": "application/json",
            "User-Agent": NAVEDIT_USER_AGENT,
        },
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    )


async def send_with_retries(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    json: Any = None,
    max_retries: int | None = None,
) -> httpx.Response:
    """Send a request, retrying transient failure statuses.

    Transport failures are not retried: the service is treated as
    unreachable straight away.

    Args:
        client: Client to send through.
        method: HTTP method.
        url: URL or path relative to the client's base URL.
        json: Optional JSON body.
        max_retries: Retries for statuses in RETRY_STATUS_CODES. Defaults to
            NAVEDIT_API_MAX_RETRIES.

    Returns:
        The successful response.

    Raises:
        UnavailableError: If the request could not be delivered.
        ServerError: If the final response is not 2xx.
    """
    retries = NAVEDIT_API_MAX_RETRIES if max_retries is None else max_retries

    for attempt in range(retries + 1):
        try:
            response = await client.request(method, url, json=json)
        except httpx.RequestError as exc:
            raise UnavailableError(f"Navigation service unreachable ({method} {url}): {exc}") from exc

        if response.status_code in RETRY_STATUS_CODES and attempt < retries:
            backoff = NAVEDIT_API_BACKOFF_S * (2**attempt)
            logger.debug(
                "HTTP %s from %s %s, retrying in %.2fs", response.status_code, method, url, backoff
            )
            await asyncio.sleep(backoff)
            continue

        if not response.is_success:
            raise ServerError(response.status_code, response.reason_phrase)
        return response

    # Unreachable: the last attempt either returns or raises.
    raise UnavailableError(f"No response for {method} {url}")
