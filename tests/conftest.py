"""
Shared Test Fixtures

API response bodies used by more than one test package.

To use pytest:
    pip install -e ".[test]"
    pytest tests/
"""

import pytest


def make_video_body(video_id: str = "12345", name: str = "Untitled") -> dict:
    """Minimal but realistic GET /videos/{id} body"""
    return {
        "uri": f"/videos/{video_id}",
        "name": name,
        "description": None,
        "link": f"https://vimeo.com/{video_id}",
        "duration": 62,
        "width": 1920,
        "height": 1080,
        "language": "en",
        "created_time": "2025-10-12T18:30:45+00:00",
        "modified_time": "2025-10-12T18:35:00+00:00",
        "release_time": "2025-10-12T18:30:45+00:00",
        "content_rating": ["safe"],
        "license": None,
        "privacy": {
            "view": "unlisted",
            "embed": "public",
            "download": False,
            "add": True,
            "comments": "anybody",
        },
        "embed": {
            "buttons": {"like": True, "share": False},
            "playbar": True,
            "volume": False,
            "color": "00adef",
        },
        "pictures": {
            "uri": f"/videos/{video_id}/pictures/1",
            "active": True,
            "type": "custom",
            "sizes": [
                {"width": 100, "height": 75, "link": "https://i.vimeocdn.com/s.jpg"},
                {"width": 640, "height": 360, "link": "https://i.vimeocdn.com/l.jpg"},
            ],
        },
        "tags": [{"name": "boxing", "tag": "boxing"}, {"name": "training"}],
        "stats": {"plays": 7},
        "user": {"uri": "/users/1"},
        "status": "available",
        "resource_key": "abc123",
    }


@pytest.fixture
def video_body():
    """Factory for video JSON bodies"""
    return make_video_body
