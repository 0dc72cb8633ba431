"""
Error mapping for API responses.
Every failure reaches the client as a JSON object with a single "error" string.
"""
from typing import Callable, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from models.api_models import ErrorResponse
from models.upstream_models import UpstreamResult, UpstreamStatus
from utils.logger import app_logger


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the standard {"error": ...} response."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def bad_request(message: str) -> JSONResponse:
    """Client input error (HTTP 400)."""
    app_logger.warning(f"Bad request: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def upstream_failure_response(
    result: UpstreamResult,
    transport_message: Callable[[UpstreamResult], str],
    upstream_message: Optional[Callable[[UpstreamResult], str]] = None,
) -> JSONResponse:
    """
    Translate a failed UpstreamResult into an HTTP 500 response.

    Args:
        result: Failed upstream result
        transport_message: Builds the client message for network/parse failures
        upstream_message: Builds the client message for errors reported by the
            upstream API, defaults to transport_message

    Returns:
        JSONResponse with status 500
    """
    if result.ok:
        raise ValueError("upstream_failure_response called with a successful result")

    if result.status == UpstreamStatus.UPSTREAM_ERROR and upstream_message is not None:
        message = upstream_message(result)
    else:
        message = transport_message(result)

    app_logger.error(f"Responding 500 ({result.status.value}): {message}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
