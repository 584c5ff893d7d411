"""Fixed navigation used when the navigation service is unreachable."""

from __future__ import annotations

from navedit.schemas import NavTree
from navedit.tree import load_tree

_SEED_DATA = [
    {"id": "1", "title": "Dashboard", "url": "/", "visible": True},
    {
        "id": "2",
        "title": "Job Applications",
        "url": "/applications",
        "visible": True,
        "children": [
            {
                "id": "2-1",
                "title": "John Doe",
                "url": "/applications/john-doe",
                "visible": True,
            },
            {
                "id": "2-2",
                "title": "James Bond",
                "url": "/applications/james-bond",
                "visible": False,
            },
        ],
    },
    {"id": "3", "title": "Settings", "url": "/settings", "visible": True},
]


def seed_tree() -> NavTree:
    """Return the demo navigation tree."""
    return load_tree(_SEED_DATA)
