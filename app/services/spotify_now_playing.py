# app/services/spotify_now_playing.py
import logging
import requests
from app.services.errors import FetchError

logger = logging.getLogger(__name__)

NOW_PLAYING_URL = "https://api.spotify.com/v1/me/player/currently-playing"

def fetch_now_playing(access_token: str, session=requests, timeout: float = 10.0):
    """
    呼叫 Spotify Currently Playing API。
    回傳：
    - dict item：有在播放
    - None：沒有播放（204 或沒有 item）
    其他非 2xx 狀態會丟 FetchError。
    """
    headers = {"Authorization": f"Bearer {access_token}"}

    r = session.get(NOW_PLAYING_URL, headers=headers, timeout=timeout)
    logger.debug("currently-playing status: %s", r.status_code)

    # 204 -> No Content
    if r.status_code == 204:
        return None

    if not 200 <= r.status_code < 300:
        raise FetchError("currently playing", r.status_code)

    # 沒內容 → 避免 json decode 錯誤
    if not r.text:
        return None

    data = r.json()
    return data.get("item") or None
