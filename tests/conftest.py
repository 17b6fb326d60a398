"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from ytsearch.config import Settings

API_BASE = "https://www.googleapis.com/youtube/v3"
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


def search_item(
    id_field: str,
    result_id: str,
    title: str = "Some title",
    channel_title: str | None = "Some channel",
    published_at: str = "2026-10-13T12:00:00Z",
    description: str | None = None,
) -> dict:
    """Build one item of a search response."""
    snippet: dict = {"title": title, "publishedAt": published_at}
    if channel_title is not None:
        snippet["channelTitle"] = channel_title
    if description is not None:
        snippet["description"] = description
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#video", id_field: result_id},
        "snippet": snippet,
    }


def detail_item(result_id: str, part: str, **values: str) -> dict:
    """Build one item of a videos/channels response."""
    return {"id": result_id, part: dict(values)}


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for elapsed-time phrases."""
    return NOW


@pytest.fixture
def settings() -> Settings:
    """Settings without reading the environment file."""
    return Settings(
        _env_file=None,
        api_key="test-key",
        max_results=5,
        order="relevance",
    )


@pytest.fixture
def video_search_payload() -> dict:
    """Search response with three videos."""
    return {
        "kind": "youtube#searchListResponse",
        "items": [
            search_item("videoId", "vid_a", title="Rock &amp; Roll", channel_title="Band"),
            search_item("videoId", "vid_b", title="Second", channel_title="Other"),
            search_item("videoId", "vid_c", title="Third", channel_title="Third &quot;Ch&quot;"),
        ],
    }


@pytest.fixture
def video_statistics_payload() -> dict:
    """Statistics for two of the three videos."""
    return {
        "items": [
            detail_item("vid_b", "statistics", viewCount="1500"),
            detail_item("vid_c", "statistics", viewCount="2000000"),
        ]
    }


@pytest.fixture
def quota_error_payload() -> dict:
    """API error envelope for an exhausted quota."""
    return {
        "error": {
            "code": 403,
            "message": "The request cannot be completed because you have exceeded your "
            '<a href="/youtube/v3/getting-started#quota">quota</a>.',
            "errors": [
                {
                    "message": "quota exceeded",
                    "domain": "youtube.quota",
                    "reason": "quotaExceeded",
                }
            ],
        }
    }


@pytest.fixture
def make_search_item():
    """Factory for search response items."""
    return search_item


@pytest.fixture
def make_detail_item():
    """Factory for detail response items."""
    return detail_item
