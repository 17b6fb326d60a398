"""Parsers for search and detail API payloads."""

import logging
from datetime import datetime
from typing import Any

from ytsearch.errors import StructuralError
from ytsearch.models import MetricsById, SearchResultSummary
from ytsearch.services.formatting import decode_entities, format_elapsed
from ytsearch.services.kinds import KindProfile

logger = logging.getLogger(__name__)


def _string_field(container: Any, key: str) -> str | None:
    if not isinstance(container, dict):
        return None
    value = container.get(key)
    return value if isinstance(value, str) else None


def _parse_summary(
    item: Any, profile: KindProfile, now: datetime | None
) -> SearchResultSummary | None:
    """Build a summary from one search item, or None if a field is missing."""
    if not isinstance(item, dict):
        return None

    result_id = _string_field(item.get("id"), profile.id_field)
    if result_id is None:
        return None

    snippet = item.get("snippet")
    fields = {key: _string_field(snippet, key) for key in profile.required_snippet_fields}
    if any(value is None for value in fields.values()):
        return None

    title = decode_entities(_string_field(snippet, "title") or "")
    owner_name = decode_entities(_string_field(snippet, "channelTitle") or "")
    if not owner_name and profile.empty_owner_label:
        owner_name = profile.empty_owner_label
    published_at = _string_field(snippet, "publishedAt") or ""

    return SearchResultSummary(
        id=result_id,
        kind=profile.search_type,
        title=title,
        owner_name=owner_name,
        published_at=published_at,
        elapsed=format_elapsed(published_at, now),
        description=_string_field(snippet, "description") or "",
    )


def parse_summaries(
    data: dict[str, Any],
    profile: KindProfile,
    now: datetime | None = None,
) -> list[SearchResultSummary]:
    """Extract result summaries from a search response.

    Items lacking the id or any required snippet field are skipped.

    Args:
        data: Decoded search response
        profile: Profile of the kind being searched
        now: Reference time for elapsed-time phrases

    Returns:
        Summaries in search result order

    Raises:
        StructuralError: If the response has no ``items`` list
    """
    items = data.get("items")
    if not isinstance(items, list):
        raise StructuralError("parse_summaries", "Unable to get items from JSON.")

    summaries = []
    for index, item in enumerate(items):
        summary = _parse_summary(item, profile, now)
        if summary is None:
            logger.debug("Skipping search item %d: missing required fields", index)
            continue
        summaries.append(summary)
    return summaries


def parse_count(value: Any) -> int:
    """Parse a numeric-as-string statistic; anything unusable becomes 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    # Plain ASCII digits only; signs, separators and whitespace are rejected
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return 0


def parse_metrics(
    data: dict[str, Any],
    part: str,
    fields: tuple[str, ...],
) -> MetricsById:
    """Extract per-id metrics from a detail response.

    A missing ``items`` list yields an empty mapping; missing or
    non-numeric values default to 0.

    Args:
        data: Decoded ``videos`` or ``channels`` response
        part: Resource part holding the metrics (``statistics``,
            ``liveStreamingDetails``)
        fields: Metric names to read from that part

    Returns:
        Mapping of result id to {metric name: count}
    """
    items = data.get("items")
    if not isinstance(items, list):
        logger.debug("Detail response has no items, metrics default to 0")
        return {}

    metrics: MetricsById = {}
    for item in items:
        if not isinstance(item, dict) or not isinstance(item.get("id"), str):
            continue
        section = item.get(part)
        if not isinstance(section, dict):
            section = {}
        metrics[item["id"]] = {name: parse_count(section.get(name)) for name in fields}
    return metrics
