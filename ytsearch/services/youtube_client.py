"""YouTube Data API v3 client for search and detail lookups."""

import logging
from typing import Any

import httpx

from ytsearch.errors import (
    UNPARSABLE_API_ERROR,
    APIError,
    DecodeError,
    TransportError,
    classify_api_error,
)

logger = logging.getLogger(__name__)


class YouTubeDataClient:
    """Issues single-attempt GET requests against the YouTube Data API.

    Every response is decoded to a JSON object; transport failures, bodies
    that are not JSON objects and API error envelopes are raised as
    pipeline errors. Nothing is retried.
    """

    API_BASE_URL = "https://www.googleapis.com/youtube/v3"
    TIMEOUT = 10.0

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: YouTube Data API key
            base_url: API root, defaults to the public v3 endpoint
            timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = (base_url or self.API_BASE_URL).rstrip("/")
        self.timeout = timeout or self.TIMEOUT

    async def search(self, query: str, **params: Any) -> dict[str, Any]:
        """Call the ``search`` endpoint.

        Args:
            query: Free-text search query
            **params: Additional query parameters (type, order, maxResults, ...)

        Returns:
            Decoded search response
        """
        return await self._get("search", "search", {"part": "snippet", "q": query, **params})

    async def list_details(self, endpoint: str, part: str, ids: list[str]) -> dict[str, Any]:
        """Fetch details for a batch of ids with a single request.

        Args:
            endpoint: Resource endpoint (``videos`` or ``channels``)
            part: Resource part to request (``statistics``, ``liveStreamingDetails``)
            ids: Result ids, sent comma-joined

        Returns:
            Decoded detail response
        """
        return await self._get("details", endpoint, {"part": part, "id": ",".join(ids)})

    async def _get(self, stage: str, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        logger.info(
            "request stage=%s endpoint=%s params=%s",
            stage,
            endpoint,
            {key: value for key, value in params.items() if key != "key"},
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params={**params, "key": self.api_key})
        except httpx.TimeoutException as e:
            raise TransportError(stage, f"Request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise TransportError(stage, str(e) or type(e).__name__) from e

        return self._decode(stage, response)

    def _decode(self, stage: str, response: httpx.Response) -> dict[str, Any]:
        """Decode a response body, raising on non-objects and API errors."""
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(stage, "Unable to parse JSON.") from e

        if not isinstance(data, dict):
            raise DecodeError(stage, "Unable to parse JSON.")

        if "error" in data:
            raise APIError(stage, classify_api_error(data), response.status_code)

        if response.is_error:
            raise APIError(stage, UNPARSABLE_API_ERROR, response.status_code)

        return data
