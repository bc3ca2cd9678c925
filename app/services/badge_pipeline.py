# app/services/badge_pipeline.py
import logging
import requests
from typing import Optional
from app.config.settings import Settings
from app.models.badge_models import BadgeDocument
from app.services.badge_formatter import format_track_badge
from app.services.spotify_history import fetch_recently_played
from app.services.spotify_now_playing import fetch_now_playing
from app.services.spotify_token_service import get_access_token

logger = logging.getLogger(__name__)


def resolve_track(settings: Settings, session=requests) -> tuple[Optional[dict], bool]:
    """
    Token → currently playing → (fallback) recently played.
    Returns (item, is_currently_playing). Any step may raise a BadgeServiceError.
    """
    # 1. 取 token
    access_token = get_access_token(settings.credentials, session=session, timeout=settings.timeout)

    # 2. 抓 currently playing
    item = fetch_now_playing(access_token, session=session, timeout=settings.timeout)
    logger.info("Currently playing: %s", "found track" if item else "no current track")
    if item:
        return item, True

    # 3. 沒在播 → 抓最近一首
    item = fetch_recently_played(access_token, session=session, timeout=settings.timeout)
    logger.info("Recently played: %s", "found track" if item else "no recent track")
    return item, False


def build_now_playing_badge(
    settings: Settings,
    logo_color: Optional[str] = None,
    session=requests,
) -> BadgeDocument:
    item, is_currently_playing = resolve_track(settings, session=session)
    badge = format_track_badge(
        item,
        is_currently_playing=is_currently_playing,
        logo_color=logo_color,
        label=settings.badge_label,
    )
    logger.info("Badge message: %s", badge.message)
    return badge
