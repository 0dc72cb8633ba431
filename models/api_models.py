"""
Pydantic data models for API requests and responses.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


def is_present(value: Any) -> bool:
    """
    Whether an optional JSON field carries a value.

    None, False, 0 and "" count as absent; empty objects and lists do not.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


class SearchRequest(BaseModel):
    """AI search request. Values are echoed as sent; required fields are checked by the route."""
    query: Optional[Any] = None
    location: Optional[Any] = None
    level: Optional[Any] = None
    type: Optional[Any] = None

    @property
    def is_complete(self) -> bool:
        """True when both query and location are non-empty."""
        return is_present(self.query) and is_present(self.location)


class SearchResponse(BaseModel):
    """Simplified AI search result returned to the browser."""
    content: Any
    location: Any
    level: Optional[Any] = None
    type: Optional[Any] = None
    timestamp: str
    citations: Any = Field(default_factory=list)


class ConfigResponse(BaseModel):
    """Public client configuration."""
    model_config = ConfigDict(populate_by_name=True)

    supabase_url: str = Field("", alias="supabaseUrl")
    supabase_key: str = Field("", alias="supabaseKey")
    perplexity_api_key: str = Field("", alias="perplexityApiKey")


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""
    error: str
