"""
FastAPI dependencies and app wiring helpers.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import AppConfig
from services.perplexity_service import PerplexityService


def get_config(request: Request) -> AppConfig:
    """Configuration built at startup."""
    return request.app.state.config


def get_perplexity_service(request: Request) -> PerplexityService:
    """Shared Perplexity client service."""
    return request.app.state.perplexity_service


def apply_cors(app: FastAPI, origins: list[str] | None = None) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
