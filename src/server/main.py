"""FastAPI application serving ``/nav`` and ``/track``."""

from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request, Response, status

from navedit.exceptions import TreeShapeError
from navedit.schemas import MoveRecord
from navedit.tree import dump_tree, load_tree
from navedit.utils.logging_config import get_logger
from server.store import NavigationStore

logger = get_logger(__name__)


def create_app(store: NavigationStore | None = None) -> FastAPI:
    """Build the service around ``store`` (a seeded store by default)."""
    app = FastAPI(title="navedit navigation service")
    app.state.store = store or NavigationStore()
    app.add_api_route("/nav", get_navigation, methods=["GET"])
    app.add_api_route(
        "/nav", save_navigation, methods=["POST"], status_code=status.HTTP_204_NO_CONTENT
    )
    app.add_api_route("/track", list_events, methods=["GET"])
    app.add_api_route(
        "/track", track_move, methods=["POST"], status_code=status.HTTP_204_NO_CONTENT
    )
    return app


def get_store(request: Request) -> NavigationStore:
    return request.app.state.store


async def get_navigation(store: NavigationStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Return the current navigation tree."""
    return dump_tree(store.tree)


async def save_navigation(
    payload: list[dict[str, Any]] = Body(...),
    store: NavigationStore = Depends(get_store),
) -> Response:
    """Replace the navigation tree.

    **Raises**

    - **HTTPException**: **422** - payload is not a valid two-level tree
    """
    try:
        tree = load_tree(payload)
    except TreeShapeError as exc:
        logger.warning("Rejected navigation payload", extra={"error": str(exc)})
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    store.replace(tree)
    logger.info("Navigation saved", extra={"entries": len(tree)})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def track_move(record: MoveRecord, store: NavigationStore = Depends(get_store)) -> Response:
    """Record one reorder event."""
    store.track(record)
    logger.info("Move tracked", extra=record.to_wire())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_events(store: NavigationStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Return the move events received so far."""
    return [record.to_wire() for record in store.events]


app = create_app()
