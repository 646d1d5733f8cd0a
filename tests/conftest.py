"""Shared pytest fixtures for photo search tests."""

from __future__ import annotations

from typing import Any

import pytest

from photo_search.config import get_settings
from photo_search.publisher import get_shared_client

ACCESS_KEY = "test-access-key"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("PHOTO_SEARCH_DEFAULT_PER_PAGE", "PHOTO_SEARCH_REQUEST_TIMEOUT_SECONDS", "PHOTO_SEARCH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PHOTO_SEARCH_ACCESS_KEY", ACCESS_KEY)
    get_settings.cache_clear()
    get_shared_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_shared_client.cache_clear()


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return {
        "total": 133,
        "total_pages": 7,
        "results": [
            {
                "id": "eOLpJytrbsQ",
                "created_at": "2014-11-18T14:35:36-05:00",
                "width": 4000,
                "height": 3000,
                "color": "#A7A2A1",
                "description": "A man drinking a coffee.",
                "alt_description": None,
                "likes": 286,
                "urls": {
                    "raw": "https://images.unsplash.com/photo-1416339306562-f3d12fefd36f",
                    "regular": "https://images.unsplash.com/photo-1416339306562-f3d12fefd36f?w=1080",
                    "thumb": "https://images.unsplash.com/photo-1416339306562-f3d12fefd36f?w=200",
                },
                "user": {"id": "Ul0QVz12Goo", "username": "ugmonk", "name": "Jeff Sheldon"},
            },
            {
                "id": "Dwu85P9SOIk",
                "width": 2448,
                "height": 3264,
                "description": None,
                "alt_description": "laptop on a desk",
                "urls": {"raw": "https://images.unsplash.com/photo-2"},
                "user": {"id": "QPxL2MGqfrw", "username": "exampleuser"},
            },
        ],
    }
