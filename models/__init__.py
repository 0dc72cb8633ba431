"""
Models package exports.
"""
from models.api_models import SearchRequest, SearchResponse, ConfigResponse, ErrorResponse
from models.upstream_models import ChatMessage, UpstreamChatRequest, UpstreamStatus, UpstreamResult

__all__ = [
    'SearchRequest',
    'SearchResponse',
    'ConfigResponse',
    'ErrorResponse',
    'ChatMessage',
    'UpstreamChatRequest',
    'UpstreamStatus',
    'UpstreamResult'
]
