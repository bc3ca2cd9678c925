import logging
import math
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from app.models.token_model import SpotifyCredentials

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)


def parse_timeout(raw: Optional[str]) -> float:
    """Bad or empty SPOTIFY_TIMEOUT falls back to the default instead of failing startup."""
    if not raw or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid SPOTIFY_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if not math.isfinite(value) or value <= 0:
        logger.warning("Out-of-range SPOTIFY_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


class Settings(BaseModel):
    """
    Process-wide configuration, built once at startup and passed down
    explicitly. Credentials may be missing here; that only surfaces as a
    ConfigError when a badge is requested.
    """
    model_config = ConfigDict(frozen=True)

    # Spotify
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    # Badge
    badge_label: str = ""

    # Logging
    log_level: str = "INFO"

    @property
    def credentials(self) -> SpotifyCredentials:
        return SpotifyCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            refresh_token=self.refresh_token,
        )

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            client_id=os.getenv("SPOTIFY_CLIENT_ID"),
            client_secret=os.getenv("SPOTIFY_CLIENT_SECRET"),
            refresh_token=os.getenv("SPOTIFY_REFRESH_TOKEN"),
            timeout=parse_timeout(os.getenv("SPOTIFY_TIMEOUT")),
            badge_label=os.getenv("BADGE_LABEL", ""),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@lru_cache
def get_settings() -> Settings:
    load_env()
    return Settings.from_env()
