# app/services/request_dispatcher.py
"""
Framework-agnostic request handling for the badge endpoint.

Both the FastAPI app and the Cloud Function entry point hand the method,
path and logoColor of an inbound request to `handle_request` and turn the
returned BadgeResponse into their own response type.
"""
import logging
import requests
from typing import Optional
from app.config.settings import Settings
from app.models.badge_models import BadgeResponse
from app.services.badge_formatter import format_error_badge
from app.services.badge_pipeline import build_now_playing_badge
from app.services.errors import BadgeServiceError

logger = logging.getLogger(__name__)

BADGE_PATHS = ("/", "/api/now-playing")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

SUCCESS_CACHE_CONTROL = "public, max-age=60, s-maxage=60"
ERROR_CACHE_CONTROL = "public, max-age=30, s-maxage=30"


def cors_headers() -> dict[str, str]:
    return dict(CORS_HEADERS)


def json_headers(cache_control: Optional[str] = None) -> dict[str, str]:
    headers = {"Content-Type": "application/json", **CORS_HEADERS}
    if cache_control:
        headers["Cache-Control"] = cache_control
    return headers


def handle_request(
    method: str,
    path: str,
    settings: Settings,
    logo_color: Optional[str] = None,
    session=requests,
) -> BadgeResponse:
    method = method.upper()
    label = settings.badge_label

    # === CORS preflight ===
    if method == "OPTIONS":
        return BadgeResponse(status_code=200, headers=cors_headers())

    # === Method check ===
    if method != "GET":
        return BadgeResponse(
            status_code=405,
            headers=json_headers(),
            body=format_error_badge("Method not allowed", logo_color, label),
        )

    # === Path check ===
    if path not in BADGE_PATHS:
        return BadgeResponse(
            status_code=404,
            headers=json_headers(),
            body=format_error_badge("Not found", logo_color, label),
        )

    # === Success path ===
    try:
        logger.info("Starting Spotify badge request")
        badge = build_now_playing_badge(settings, logo_color=logo_color, session=session)
        return BadgeResponse(
            status_code=200,
            headers=json_headers(SUCCESS_CACHE_CONTROL),
            body=badge,
        )
    except BadgeServiceError as e:
        logger.error("Badge request failed: %s", e)
    except Exception:
        logger.exception("Unexpected error while building badge")

    # Always 200 so the badge still renders
    return BadgeResponse(
        status_code=200,
        headers=json_headers(ERROR_CACHE_CONTROL),
        body=format_error_badge("Service error", logo_color, label),
    )
