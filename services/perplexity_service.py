"""
Perplexity chat-completion client.
Forwards raw proxy requests and runs the AI search flow for event planning.
"""
from datetime import datetime, timezone
from typing import Any

import httpx

from config import AppConfig
from models.api_models import SearchRequest, SearchResponse, is_present
from models.upstream_models import ChatMessage, UpstreamChatRequest, UpstreamResult
from utils.constants import (
    PERPLEXITY_URL,
    SEARCH_MODEL,
    SEARCH_TEMPERATURE,
    SEARCH_MAX_TOKENS,
    SEARCH_RECENCY_FILTER,
    SEARCH_SYSTEM_PROMPT,
    NO_RESULTS_CONTENT,
    SEARCH_UPSTREAM_FALLBACK_MESSAGE,
)
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-01-31T10:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PerplexityService:
    """Service for calling the Perplexity chat-completion API."""

    def __init__(self, config: AppConfig):
        """
        Initialize PerplexityService with configuration.

        Args:
            config: Application configuration holding the API key and timeout
        """
        self.config = config

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.perplexity_api_key}",
            "Content-Type": "application/json"
        }

    async def call_upstream(self, payload: Any) -> UpstreamResult:
        """
        POST a JSON payload to the upstream API.

        Never raises for network, encoding or decoding problems; those come
        back as a TRANSPORT_ERROR result. Upstream status codes are not inspected.

        Args:
            payload: JSON-serializable request body

        Returns:
            UpstreamResult with the parsed JSON body on success
        """
        try:
            client = HTTPClientManager.get_upstream_client(self.config.upstream_timeout)
            response = await client.post(
                PERPLEXITY_URL,
                headers=self._headers(),
                json=payload
            )
            data = response.json()
            app_logger.debug(f"Upstream responded with status {response.status_code}")
            return UpstreamResult.success(data)

        except (httpx.HTTPError, ValueError, TypeError) as e:
            app_logger.error(f"Upstream call failed: {type(e).__name__}: {e}")
            return UpstreamResult.transport_error(e)

    async def forward(self, body: Any) -> UpstreamResult:
        """Forward an arbitrary request body unchanged."""
        return await self.call_upstream(body)

    @staticmethod
    def build_search_payload(query: Any) -> UpstreamChatRequest:
        """Build the fixed-parameter chat request for an AI search query."""
        return UpstreamChatRequest(
            model=SEARCH_MODEL,
            messages=[
                ChatMessage(role="system", content=SEARCH_SYSTEM_PROMPT),
                ChatMessage(role="user", content=query),
            ],
            temperature=SEARCH_TEMPERATURE,
            max_tokens=SEARCH_MAX_TOKENS,
            search_recency_filter=SEARCH_RECENCY_FILTER
        )

    async def search(self, request: SearchRequest) -> UpstreamResult:
        """
        Run an AI search for a location.

        Args:
            request: Search request with query and location already checked

        Returns:
            UpstreamResult whose data is a SearchResponse on success
        """
        payload = self.build_search_payload(request.query)
        app_logger.info(f"AI search for location '{request.location}' (level={request.level}, type={request.type})")

        result = await self.call_upstream(payload.model_dump())
        if not result.ok:
            return result

        data = result.data if isinstance(result.data, dict) else {}

        if is_present(data.get("error")):
            message = self._extract_error_message(data["error"])
            app_logger.error(f"Perplexity API error: {data['error']}")
            return UpstreamResult.upstream_error(data, message)

        response = self.shape_search_response(data, request)
        app_logger.info(f"AI search completed for location '{request.location}'")
        return UpstreamResult.success(response)

    @staticmethod
    def shape_search_response(data: dict, request: SearchRequest) -> SearchResponse:
        """Reshape an upstream payload into the simplified search contract."""
        citations = data.get("citations")
        if not is_present(citations):
            citations = []

        return SearchResponse(
            content=PerplexityService._extract_content(data),
            location=request.location,
            level=request.level,
            type=request.type,
            timestamp=utc_timestamp(),
            citations=citations
        )

    @staticmethod
    def _extract_content(data: dict) -> Any:
        """Return the first choice's message content, or the no-results text."""
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return NO_RESULTS_CONTENT

        first = choices[0] if isinstance(choices[0], dict) else {}
        message = first.get("message") if isinstance(first.get("message"), dict) else {}
        content = message.get("content")

        return content if is_present(content) else NO_RESULTS_CONTENT

    @staticmethod
    def _extract_error_message(error: Any) -> str:
        """Use the message of an upstream error object, or the generic fallback."""
        message = error.get("message") if isinstance(error, dict) else None
        if not is_present(message):
            return SEARCH_UPSTREAM_FALLBACK_MESSAGE
        return message if isinstance(message, str) else str(message)
