"""
Route handler for the public client configuration.
"""
from fastapi import APIRouter, Depends

from config import AppConfig
from deps import get_config
from models.api_models import ConfigResponse

router = APIRouter()


@router.get("/api/config")
async def get_public_config(config: AppConfig = Depends(get_config)):
    """Return the Supabase settings, and the Perplexity key only when exposure is enabled."""
    response = ConfigResponse(
        supabase_url=config.supabase_url,
        supabase_key=config.supabase_anon_key,
        perplexity_api_key=config.perplexity_api_key if config.expose_perplexity_key else ""
    )
    return response.model_dump(by_alias=True)
