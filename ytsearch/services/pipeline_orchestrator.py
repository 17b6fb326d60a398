"""Pipeline orchestrator for the two-stage search."""

import json
import logging
import time
from datetime import datetime
from enum import Enum

from ytsearch.config import Settings
from ytsearch.errors import SearchPipelineError
from ytsearch.models import DisplayRecord, MetricsById, SearchKind
from ytsearch.services.aggregator import aggregate
from ytsearch.services.kinds import KindProfile, get_profile
from ytsearch.services.parsers import parse_metrics, parse_summaries
from ytsearch.services.youtube_client import YouTubeDataClient

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    """State of a search pipeline run."""

    SEARCHING = "searching"
    ENRICHING_METRICS = "enriching_metrics"
    DONE = "done"
    ERRORED = "errored"


class SearchPipeline:
    """Runs search -> detail lookup -> aggregation for one query.

    At most two requests are made: the search itself and one batched detail
    lookup for every id it returned. Any failure moves the pipeline to
    ``ERRORED`` and is re-raised; nothing is retried.
    """

    def __init__(
        self,
        client: YouTubeDataClient,
        settings: Settings,
        now: datetime | None = None,
    ):
        self.client = client
        self.settings = settings
        self.now = now
        self.state: PipelineState | None = None

    async def run(self, kind: SearchKind | str, query: str) -> list[DisplayRecord]:
        """Run the pipeline for one query.

        Args:
            kind: Search kind (video, channel, playlist, live)
            query: Free-text search query

        Returns:
            Display records in search result order

        Raises:
            SearchPipelineError: On transport, decode, structural or API errors
        """
        profile = get_profile(kind)
        try:
            return await self._run(profile, query)
        except SearchPipelineError as e:
            logger.info(
                "stage.failed kind=%s state=%s stage=%s code=%s",
                profile.kind.value,
                self.state.value if self.state else None,
                e.stage,
                e.code,
            )
            self.state = PipelineState.ERRORED
            raise

    async def _run(self, profile: KindProfile, query: str) -> list[DisplayRecord]:
        self.state = PipelineState.SEARCHING
        t0 = time.monotonic()
        search_response = await self.client.search(query, **self._search_params(profile))
        summaries = parse_summaries(search_response, profile, self.now)
        logger.info(
            "stage.search kind=%s ms=%d results=%d",
            profile.kind.value,
            int((time.monotonic() - t0) * 1000),
            len(summaries),
        )

        self.state = PipelineState.ENRICHING_METRICS
        metrics = await self._fetch_metrics(profile, [s.id for s in summaries])

        records = aggregate(summaries, metrics, profile)
        self.state = PipelineState.DONE
        return records

    def _search_params(self, profile: KindProfile) -> dict[str, str]:
        return {
            "maxResults": str(self.settings.max_results),
            "order": self.settings.order,
            "safeSearch": self.settings.safe_search,
            **profile.search_params(),
        }

    async def _fetch_metrics(self, profile: KindProfile, ids: list[str]) -> MetricsById:
        """Look up metrics for all ids in one request."""
        if not profile.has_detail_lookup:
            return {}

        t0 = time.monotonic()
        detail_response = await self.client.list_details(
            profile.detail_endpoint or "",
            profile.detail_part or "",
            ids,
        )
        metrics = parse_metrics(detail_response, profile.detail_part or "", profile.metric_fields)
        logger.info(
            "stage.details kind=%s ms=%d ids=%d metrics=%d",
            profile.kind.value,
            int((time.monotonic() - t0) * 1000),
            len(ids),
            len(metrics),
        )
        missing = len(set(ids) - metrics.keys())
        if missing:
            logger.debug("%d result(s) without metrics, defaulting to 0", missing)
        return metrics


def serialize_records(records: list[DisplayRecord]) -> str:
    """Serialize records to the launcher's JSON result list."""
    return json.dumps({"items": [record.to_dict() for record in records]}, indent=2)


async def run_search(kind: SearchKind | str, query: str, settings: Settings) -> str:
    """Run a search with a client built from settings and serialize the result."""
    client = YouTubeDataClient(
        api_key=settings.api_key,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
    )
    records = await SearchPipeline(client, settings).run(kind, query)
    return serialize_records(records)
