"""
Route handlers for Perplexity API access.
Handles the raw proxy (/api/perplexity) and the AI search (/api/ai-search).
"""
from typing import Any
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from deps import get_perplexity_service
from models.api_models import SearchRequest
from models.upstream_models import UpstreamResult
from services.perplexity_service import PerplexityService
from utils.constants import PROXY_ERROR_MESSAGE, SEARCH_MISSING_FIELDS_MESSAGE, SEARCH_ERROR_PREFIX
from utils.errors import bad_request, upstream_failure_response
from utils.logger import app_logger

router = APIRouter()


def _search_error_message(result: UpstreamResult) -> str:
    return SEARCH_ERROR_PREFIX + (result.error_message or "")


def _json_or_empty(body: Any) -> Any:
    """Parsed JSON body, or {} when the request carried none (missing or non-JSON content type)."""
    if body is None or isinstance(body, (bytes, bytearray)):
        return {}
    return body


@router.post("/api/perplexity")
async def proxy_perplexity(
    body: Any = Body(default=None),
    service: PerplexityService = Depends(get_perplexity_service)
):
    """
    Forward the request body to Perplexity and relay its JSON reply unchanged.
    The upstream status code is not propagated: any parsed reply is a 200.
    """
    result = await service.forward(_json_or_empty(body))

    if not result.ok:
        app_logger.error(f"Perplexity API error: {result.error_message}")
        return upstream_failure_response(result, lambda _: PROXY_ERROR_MESSAGE)

    return JSONResponse(content=result.data)


@router.post("/api/ai-search")
async def ai_search(
    body: Any = Body(default=None),
    service: PerplexityService = Depends(get_perplexity_service)
):
    """
    Deep research for a location using a fixed Portuguese system prompt.
    """
    body = _json_or_empty(body)
    request = SearchRequest.model_validate(body) if isinstance(body, dict) else None

    if request is None or not request.is_complete:
        return bad_request(SEARCH_MISSING_FIELDS_MESSAGE)

    try:
        result = await service.search(request)
    except Exception as e:
        app_logger.error(f"AI Search error: {str(e)}")
        result = UpstreamResult.transport_error(e)

    if not result.ok:
        return upstream_failure_response(
            result,
            transport_message=_search_error_message,
            upstream_message=lambda r: r.error_message
        )

    return JSONResponse(content=result.data.model_dump())
