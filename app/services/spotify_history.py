import logging
import requests
from app.services.errors import FetchError

logger = logging.getLogger(__name__)

RECENTLY_PLAYED_URL = "https://api.spotify.com/v1/me/player/recently-played"

def fetch_recently_played(access_token: str, session=requests, timeout: float = 10.0):
    """
    Fetch the single most recent history item from Spotify.
    The track itself sits under item["track"]; returns None when the history is empty.
    """
    headers = {"Authorization": f"Bearer {access_token}"}
    params = {"limit": 1}

    r = session.get(RECENTLY_PLAYED_URL, headers=headers, params=params, timeout=timeout)
    logger.debug("recently-played status: %s", r.status_code)

    if not 200 <= r.status_code < 300:
        raise FetchError("recently played", r.status_code)

    items = r.json().get("items") or []
    return items[0] if items else None
