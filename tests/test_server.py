"""Tests for the reference navigation service."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from navedit.seed import seed_tree
from navedit.tree import dump_tree
from server.main import create_app
from server.store import NavigationStore


@pytest.fixture
def store() -> NavigationStore:
    return NavigationStore()


@pytest.fixture
def client(store: NavigationStore) -> TestClient:
    return TestClient(create_app(store))


class TestNavigationEndpoints:
    """Tests for GET and POST /nav."""

    def test_get_returns_seed(self, client: TestClient) -> None:
        response = client.get("/nav")

        assert response.status_code == 200
        assert response.json() == dump_tree(seed_tree())

    def test_post_replaces_tree(self, client: TestClient, store: NavigationStore) -> None:
        payload = [
            {"id": "9", "title": "Only", "url": "/only", "visible": False},
        ]

        response = client.post("/nav", json=payload)

        assert response.status_code == 204
        assert store.tree[0].id == "9"
        assert client.get("/nav").json() == payload

    def test_post_rejects_third_level(self, client: TestClient, store: NavigationStore) -> None:
        payload = [
            {
                "id": "1",
                "title": "Top",
                "url": "/",
                "visible": True,
                "children": [
                    {
                        "id": "1-1",
                        "title": "Mid",
                        "url": "/m",
                        "visible": True,
                        "children": [{"id": "x", "title": "x", "url": "/x", "visible": True}],
                    }
                ],
            }
        ]

        response = client.post("/nav", json=payload)

        assert response.status_code == 422
        assert "two levels" in response.json()["detail"]
        assert store.tree == seed_tree()

    def test_post_rejects_malformed(self, client: TestClient) -> None:
        response = client.post("/nav", json=[{"id": "1"}])
        assert response.status_code == 422


class TestTrackEndpoints:
    """Tests for POST and GET /track."""

    def test_track_records_event(self, client: TestClient, store: NavigationStore) -> None:
        response = client.post("/track", json={"id": "2", "from": 0, "to": 1})

        assert response.status_code == 204
        assert len(store.events) == 1
        assert client.get("/track").json() == [{"id": "2", "from": 0, "to": 1}]

    def test_track_rejects_negative_index(self, client: TestClient, store: NavigationStore) -> None:
        response = client.post("/track", json={"id": "2", "from": -1, "to": 1})

        assert response.status_code == 422
        assert store.events == []
