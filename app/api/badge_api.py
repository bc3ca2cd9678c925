# app/api/badge_api.py
import requests
from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config.settings import Settings, get_settings
from app.models.badge_models import BadgeResponse
from app.services.request_dispatcher import handle_request

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_http_session():
    """Outbound HTTP client; overridden in tests."""
    return requests


def to_response(result: BadgeResponse) -> Response:
    return Response(
        content=result.render_body(),
        status_code=result.status_code,
        headers=result.headers,
        media_type=None,
    )


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
def now_playing_badge(
    request: Request,
    settings: Settings = Depends(get_settings),
    session=Depends(get_http_session),
):
    result = handle_request(
        request.method,
        request.url.path,
        settings,
        logo_color=request.query_params.get("logoColor"),
        session=session,
    )
    return to_response(result)


async def routing_error_handler(request: Request, exc: StarletteHTTPException):
    """
    Methods the route does not list (TRACE, PROPFIND ...) never reach the
    endpoint; Starlette raises 405 instead. Answer those with a badge too.
    """
    if exc.status_code not in (404, 405):
        return await http_exception_handler(request, exc)

    # method / path 檢查不會打 Spotify，不需要 session
    result = handle_request(
        request.method,
        request.url.path,
        get_settings(),
        logo_color=request.query_params.get("logoColor"),
    )
    return to_response(result)
