# app/services/badge_formatter.py
from typing import Optional
from app.models.badge_models import BadgeDocument
from app.models.track_model import Track

MAX_MESSAGE_LENGTH = 64

SPOTIFY_GREEN = "1DB954"
RECENT_BLUE = "1e90ff"
IDLE_GREY = "lightgrey"
ERROR_RED = "red"

UNKNOWN_TRACK = "Unknown Track"
UNKNOWN_ARTIST = "Unknown Artist"


def truncate_text(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_track_badge(
    item: Optional[dict],
    is_currently_playing: bool = False,
    logo_color: Optional[str] = None,
    label: str = "",
) -> BadgeDocument:
    """
    把 Spotify 的 track（或沒有 track）轉成 Shields badge。
    item 可以是 currently-playing 的 track，也可以是 recently-played 的 history item。
    """
    logo_color = logo_color or None

    if not item:
        return BadgeDocument(
            label=label,
            message="Not playing",
            color=IDLE_GREY,
            logoColor=logo_color,
        )

    track = Track.from_item(item)
    track_name = track.name or UNKNOWN_TRACK
    artist_name = (track.artists[0].name if track.artists else None) or UNKNOWN_ARTIST

    return BadgeDocument(
        label=label,
        message=truncate_text(f"{track_name} — {artist_name}"),
        color=SPOTIFY_GREEN if is_currently_playing else RECENT_BLUE,
        logoColor=logo_color,
    )


def format_error_badge(
    message: str = "Service error",
    logo_color: Optional[str] = None,
    label: str = "",
) -> BadgeDocument:
    return BadgeDocument(
        label=label,
        message=message,
        color=ERROR_RED,
        isError=True,
        logoColor=logo_color or None,
    )
