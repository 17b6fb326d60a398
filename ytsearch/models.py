"""Result models for the search pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SearchKind(str, Enum):
    """Search categories accepted on the command line."""

    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    LIVE = "live"


# id -> {metric field name -> count}
MetricsById = dict[str, dict[str, int]]


@dataclass(frozen=True)
class SearchResultSummary:
    """Snippet data for one search result, before metric enrichment."""

    id: str
    kind: str  # API result type: video, channel or playlist
    title: str
    owner_name: str
    published_at: str
    elapsed: str
    description: str = ""


@dataclass(frozen=True)
class DisplayRecord:
    """One result row handed to the launcher."""

    id: str
    title: str
    subtitle: str
    action_url: str
    secondary_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the launcher's result item format."""
        item: dict[str, Any] = {
            "title": self.title,
            "subtitle": self.subtitle,
            "arg": self.action_url,
        }
        if self.secondary_text is not None:
            item["mods"] = {"cmd": {"subtitle": self.secondary_text}}
        return item
