"""Test setup for navedit."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from navedit.schemas import NavTree  # noqa: E402
from navedit.tree import load_tree  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests that run the client against the reference service",
    )


@pytest.fixture
def tree() -> NavTree:
    """Two top-level entries, the second with two children."""
    return load_tree(
        [
            {"id": "1", "title": "Dashboard", "visible": True},
            {
                "id": "2",
                "title": "Apps",
                "visible": True,
                "children": [
                    {"id": "2-1", "title": "A", "visible": True},
                    {"id": "2-2", "title": "B", "visible": False},
                ],
            },
        ]
    )


@pytest.fixture
def wide_tree() -> NavTree:
    """Four top-level leaves plus a parent with an empty children list."""
    return load_tree(
        [
            {"id": "a", "title": "A", "url": "/a", "visible": True},
            {"id": "b", "title": "B", "url": "/b", "visible": True},
            {"id": "c", "title": "C", "url": "/c", "visible": False},
            {"id": "d", "title": "D", "url": "/d", "visible": True},
            {"id": "e", "title": "E", "url": "/e", "visible": True, "children": []},
        ]
    )
