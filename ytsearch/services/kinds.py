"""Per-kind search configuration.

Each search kind runs through the same pipeline; the differences between
them (id field, detail lookup, subtitle layout, link target) live in the
profiles below.
"""

from dataclasses import dataclass, field

from ytsearch.models import SearchKind

PLAYLIST_OWNER_FALLBACK = "YouTube Music"


@dataclass(frozen=True)
class KindProfile:
    """Kind-specific parameters for one search pipeline run."""

    kind: SearchKind
    search_type: str
    id_field: str
    required_snippet_fields: tuple[str, ...]
    subtitle_template: str
    url_template: str
    search_overrides: dict[str, str] = field(default_factory=dict)
    detail_endpoint: str | None = None
    detail_part: str | None = None
    metric_fields: tuple[str, ...] = ()
    empty_owner_label: str | None = None
    description_modifier: bool = False

    @property
    def has_detail_lookup(self) -> bool:
        return self.detail_endpoint is not None

    def search_params(self) -> dict[str, str]:
        """Kind-specific search query parameters."""
        return {"type": self.search_type, **self.search_overrides}

    def action_url(self, result_id: str) -> str:
        return self.url_template.format(id=result_id)


_WATCH_URL = "https://www.youtube.com/watch?v={id}"
_SNIPPET_FIELDS = ("title", "channelTitle", "publishedAt")

PROFILES: dict[SearchKind, KindProfile] = {
    SearchKind.VIDEO: KindProfile(
        kind=SearchKind.VIDEO,
        search_type="video",
        id_field="videoId",
        required_snippet_fields=_SNIPPET_FIELDS,
        subtitle_template="{owner} • {viewCount} views • {elapsed}",
        url_template=_WATCH_URL,
        detail_endpoint="videos",
        detail_part="statistics",
        metric_fields=("viewCount",),
    ),
    SearchKind.LIVE: KindProfile(
        kind=SearchKind.LIVE,
        search_type="video",
        id_field="videoId",
        required_snippet_fields=_SNIPPET_FIELDS,
        subtitle_template=(
            "{owner} • {concurrentViewers} watching now • Started streaming {elapsed}"
        ),
        url_template=_WATCH_URL,
        search_overrides={"eventType": "live"},
        detail_endpoint="videos",
        detail_part="liveStreamingDetails",
        metric_fields=("concurrentViewers",),
    ),
    SearchKind.PLAYLIST: KindProfile(
        kind=SearchKind.PLAYLIST,
        search_type="playlist",
        id_field="playlistId",
        required_snippet_fields=_SNIPPET_FIELDS,
        subtitle_template="{owner} • {elapsed}",
        url_template="https://www.youtube.com/playlist?list={id}",
        empty_owner_label=PLAYLIST_OWNER_FALLBACK,
    ),
    SearchKind.CHANNEL: KindProfile(
        kind=SearchKind.CHANNEL,
        search_type="channel",
        id_field="channelId",
        required_snippet_fields=("title", "publishedAt", "description"),
        subtitle_template=(
            "{subscriberCount} subscribers • {viewCount} views • "
            "{videoCount} videos • created {elapsed}"
        ),
        url_template="https://www.youtube.com/channel/{id}",
        detail_endpoint="channels",
        detail_part="statistics",
        metric_fields=("subscriberCount", "viewCount", "videoCount"),
        description_modifier=True,
    ),
}


def get_profile(kind: SearchKind | str) -> KindProfile:
    """Look up the profile for a search kind.

    Raises:
        ValueError: If the kind is not supported
    """
    return PROFILES[SearchKind(kind)]
