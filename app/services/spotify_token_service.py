import base64
import logging
import requests
from app.models.token_model import SpotifyCredentials, SpotifyToken
from app.services.errors import AuthError, ConfigError

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"

def basic_auth_header(client_id: str, client_secret: str) -> str:
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("utf-8")

def get_access_token(credentials: SpotifyCredentials, session=requests, timeout: float = 10.0) -> str:
    """
    用 refresh token 換一個新的 access token（每個 request 都重新拿，不做快取）。
    """
    missing = credentials.missing()
    logger.debug(
        "Credentials present: client_id=%s client_secret=%s refresh_token=%s",
        bool(credentials.client_id),
        bool(credentials.client_secret),
        bool(credentials.refresh_token),
    )
    if missing:
        raise ConfigError(missing)

    headers = {
        "Authorization": basic_auth_header(credentials.client_id, credentials.client_secret),
        "Content-Type": "application/x-www-form-urlencoded",
    }
    payload = {
        "grant_type": "refresh_token",
        "refresh_token": credentials.refresh_token,
    }

    r = session.post(TOKEN_URL, headers=headers, data=payload, timeout=timeout)

    if not 200 <= r.status_code < 300:
        raise AuthError(r.status_code)

    data = r.json()
    if "access_token" not in data:
        raise AuthError(r.status_code, "Token response had no access_token")

    token = SpotifyToken.model_validate(data)
    logger.debug("Access token obtained (expires_in=%s)", token.expires_in)
    return token.access_token
