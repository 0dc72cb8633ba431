"""
Route handlers for the static HTML pages.
No authentication is applied to any page.
"""
from pathlib import Path
from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse

from config import AppConfig
from deps import get_config
from utils.constants import Page, PAGE_NOT_FOUND_MESSAGE
from utils.errors import error_response
from utils.logger import app_logger


def _send_page(config: AppConfig, filename: str):
    """Serve a file from the public directory, or a JSON 404 when it is missing."""
    path = Path(config.public_dir) / filename
    if not path.is_file():
        app_logger.warning(f"Page file missing: {path}")
        return error_response(status.HTTP_404_NOT_FOUND, PAGE_NOT_FOUND_MESSAGE)
    return FileResponse(path, media_type="text/html")


async def landing(config: AppConfig = Depends(get_config)):
    """Dashboard (or the configured landing page)."""
    return _send_page(config, config.landing_page)


async def main_app(config: AppConfig = Depends(get_config)):
    """Main application."""
    return _send_page(config, Page.APP)


async def login(config: AppConfig = Depends(get_config)):
    """Login page."""
    return _send_page(config, Page.LOGIN)


async def full_app(config: AppConfig = Depends(get_config)):
    """Full application."""
    return _send_page(config, Page.APP)


def build_router(enable_full_route: bool = True) -> APIRouter:
    """
    Build the page router.

    Args:
        enable_full_route: Register /full alongside /, /app and /login

    Returns:
        APIRouter with the page routes
    """
    router = APIRouter(include_in_schema=False)
    router.add_api_route("/", landing, methods=["GET"])
    if enable_full_route:
        router.add_api_route("/full", full_app, methods=["GET"])
    router.add_api_route("/login", login, methods=["GET"])
    router.add_api_route("/app", main_app, methods=["GET"])
    return router
