"""
Data models for the upstream chat-completion API.
Contains the outgoing request shape and the typed result of an upstream call.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel


class ChatMessage(BaseModel):
    """Chat message model."""
    role: str  # "system", "user" or "assistant"
    content: Any  # forwarded as sent


class UpstreamChatRequest(BaseModel):
    """Chat-completion request sent to the upstream API."""
    model: str
    messages: List[ChatMessage]
    temperature: float
    max_tokens: int
    search_recency_filter: str


class UpstreamStatus(Enum):
    """Outcome of an upstream call."""
    OK = "ok"
    UPSTREAM_ERROR = "upstream_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class UpstreamResult:
    """
    Result of a single upstream call.
    Carries the parsed payload on success, or the failure reason otherwise.
    """
    status: UpstreamStatus
    data: Any = None
    error_message: Optional[str] = None
    exception: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status == UpstreamStatus.OK

    @classmethod
    def success(cls, data: Any) -> "UpstreamResult":
        return cls(status=UpstreamStatus.OK, data=data)

    @classmethod
    def upstream_error(cls, data: Any, message: Optional[str]) -> "UpstreamResult":
        return cls(status=UpstreamStatus.UPSTREAM_ERROR, data=data, error_message=message)

    @classmethod
    def transport_error(cls, exc: BaseException) -> "UpstreamResult":
        return cls(status=UpstreamStatus.TRANSPORT_ERROR, error_message=str(exc), exception=exc)
