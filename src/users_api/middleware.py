"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def get_allowed_origins(ui_url: str | None = None) -> list[str]:
    """Get the CORS origins for the configured browser client.

    Both the http and https forms of ``ui_url`` are allowed.

    Args:
        ui_url: URL of a browser client allowed to call the API

    Returns:
        List of allowed origin URLs, empty when no client is configured
    """
    if not ui_url:
        return []

    origin = ui_url.rstrip("/")
    if origin.startswith("http://"):
        return [origin, origin.replace("http://", "https://", 1)]
    if origin.startswith("https://"):
        return [origin, origin.replace("https://", "http://", 1)]
    return [origin]


def get_cors_headers(origin: str | None, ui_url: str | None = None) -> dict[str, str]:
    """Get CORS headers for a given origin.

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if origin and origin in get_allowed_origins(ui_url):
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }
    return {}


def setup_middleware(app: FastAPI, ui_url: str | None = None) -> None:
    """Install CORS for the configured browser client, if any."""
    allowed_origins = get_allowed_origins(ui_url)
    if not allowed_origins:
        logger.info("CORS disabled: no UI_URL configured")
        return

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    logger.info("CORS enabled for origins: %s", allowed_origins)
