"""
Configuration module for the Everywhere Digital School backend.
Handles environment variables and application settings.
"""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel

from utils.constants import Page
from utils.logger import app_logger

BASE_DIR = Path(__file__).resolve().parent

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES


def _env_timeout(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        app_logger.warning(f"Ignoring invalid {name}={value!r}, upstream calls will not time out")
        return None


class AppConfig(BaseModel):
    """Application configuration, built once at startup and passed to handlers."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # API Keys
    supabase_project_ref: str = ""
    supabase_anon_key: str = ""
    perplexity_api_key: str = ""
    expose_perplexity_key: bool = False

    # Upstream (None disables the timeout)
    upstream_timeout: Optional[float] = None

    # Pages and static assets
    public_dir: Path = BASE_DIR / "public"
    brand_dir: Path = BASE_DIR / "brand"
    landing_page: str = Page.DEMO
    enable_full_route: bool = True

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Read the process environment (and a local .env file) into a config object."""
        load_dotenv()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT") or 3001),
            supabase_project_ref=os.getenv("SUPABASE_PROJECT_REF", ""),
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
            perplexity_api_key=os.getenv("PERPLEXITY_API_KEY", ""),
            expose_perplexity_key=_env_flag("EXPOSE_PERPLEXITY_KEY", False),
            upstream_timeout=_env_timeout("UPSTREAM_TIMEOUT"),
            public_dir=Path(os.getenv("PUBLIC_DIR") or BASE_DIR / "public"),
            brand_dir=Path(os.getenv("BRAND_DIR") or BASE_DIR / "brand"),
            landing_page=os.getenv("LANDING_PAGE") or Page.DEMO,
            enable_full_route=_env_flag("ENABLE_FULL_ROUTE", True),
        )

    @property
    def supabase_url(self) -> str:
        """Public Supabase URL, empty when no project ref is configured."""
        if not self.supabase_project_ref:
            return ""
        return f"https://{self.supabase_project_ref}.supabase.co"

    def warn_missing(self) -> None:
        """Log warnings for missing or risky configuration."""
        if not self.perplexity_api_key:
            app_logger.warning("PERPLEXITY_API_KEY not found in environment")
            app_logger.warning("/api/perplexity and /api/ai-search will be rejected by the upstream API")

        if not self.supabase_project_ref or not self.supabase_anon_key:
            app_logger.warning("SUPABASE_PROJECT_REF or SUPABASE_ANON_KEY not set, /api/config will return empty values")

        if self.expose_perplexity_key:
            app_logger.warning("EXPOSE_PERPLEXITY_KEY is enabled: /api/config hands the Perplexity key to any caller")
