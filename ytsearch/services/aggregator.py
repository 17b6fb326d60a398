"""Join search summaries with their metrics into display records."""

import logging

from ytsearch.models import DisplayRecord, MetricsById, SearchResultSummary
from ytsearch.services.formatting import format_count
from ytsearch.services.kinds import KindProfile

logger = logging.getLogger(__name__)


def build_subtitle(
    summary: SearchResultSummary,
    counts: dict[str, int],
    profile: KindProfile,
) -> str:
    """Render the kind's subtitle template for one summary."""
    formatted = {name: format_count(counts.get(name, 0)) for name in profile.metric_fields}
    return profile.subtitle_template.format(
        owner=summary.owner_name,
        elapsed=summary.elapsed,
        **formatted,
    )


def aggregate(
    summaries: list[SearchResultSummary],
    metrics: MetricsById,
    profile: KindProfile,
) -> list[DisplayRecord]:
    """Combine summaries and metrics into display records.

    Records keep the order of ``summaries``. A summary without metrics still
    produces a record with every count shown as 0; a summary without a
    displayable title is dropped.

    Args:
        summaries: Parsed search results
        metrics: Metrics keyed by result id
        profile: Profile of the kind being searched

    Returns:
        Display records ready for serialization
    """
    records = []
    for summary in summaries:
        if not summary.title.strip():
            logger.debug("Dropping result %s: empty title", summary.id)
            continue

        counts = metrics.get(summary.id, {})
        records.append(
            DisplayRecord(
                id=summary.id,
                title=summary.title,
                subtitle=build_subtitle(summary, counts, profile),
                action_url=profile.action_url(summary.id),
                secondary_text=summary.description if profile.description_modifier else None,
            )
        )
    return records
