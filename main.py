"""
Everywhere Digital School backend - FastAPI application.
Serves the static web app, the public client configuration and a Perplexity API proxy.
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from config import AppConfig
from deps import apply_cors
from routes import config_route, pages, perplexity
from services.perplexity_service import PerplexityService
from utils.constants import INVALID_BODY_MESSAGE
from utils.errors import error_response
from utils.http_client import HTTPClientManager
from utils.logger import app_logger

APP_TITLE = "Everywhere Digital School"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    yield
    await HTTPClientManager.close_all()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer malformed or invalid request bodies with a 400 error object."""
    errors = exc.errors()
    app_logger.error(f"Validation error for {request.url}")
    app_logger.error(f"Errors: {errors}")

    message = INVALID_BODY_MESSAGE
    if errors:
        first_error = errors[0]
        if first_error.get('type') != 'json_invalid':
            loc = first_error.get('loc') or []
            field = loc[-1] if loc else 'body'
            message = f"{field}: {first_error.get('msg', 'Validation error')}"

    return error_response(status.HTTP_400_BAD_REQUEST, message)


def _mount_static(app: FastAPI, path: str, directory: Path, name: str) -> None:
    if not Path(directory).is_dir():
        app_logger.warning(f"Static directory not found, skipping {path}: {directory}")
        return
    app.mount(path, StaticFiles(directory=directory), name=name)


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Build the application around a configuration object.

    Args:
        config: Configuration to use, read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = AppConfig.from_env()
    config.warn_missing()

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    app.state.config = config
    app.state.perplexity_service = PerplexityService(config)

    apply_cors(app)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(config_route.router, tags=["config"])
    app.include_router(perplexity.router, tags=["perplexity"])
    app.include_router(pages.build_router(config.enable_full_route), tags=["pages"])

    # Mounted last so API and page routes take precedence
    _mount_static(app, "/brand", config.brand_dir, "brand")
    _mount_static(app, "/", config.public_dir, "public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    app_logger.info(f"Everywhere Digital School server running at http://localhost:{app.state.config.port}")
    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
