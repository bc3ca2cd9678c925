import base64

import pytest

from app.models.token_model import SpotifyCredentials
from app.services.errors import AuthError, ConfigError, FetchError
from app.services.spotify_history import RECENTLY_PLAYED_URL, fetch_recently_played
from app.services.spotify_now_playing import NOW_PLAYING_URL, fetch_now_playing
from app.services.spotify_token_service import TOKEN_URL, get_access_token
from tests.fakes import FakeResponse, FakeSession, track

CREDS = SpotifyCredentials(client_id="cid", client_secret="secret", refresh_token="refresh")


# --------------------------
# Token
# --------------------------
def test_access_token_request_shape(token_ok):
    session = FakeSession({TOKEN_URL: token_ok})

    assert get_access_token(CREDS, session=session, timeout=5) == "ACCESS"

    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", TOKEN_URL)
    expected = base64.b64encode(b"cid:secret").decode()
    assert kwargs["headers"]["Authorization"] == f"Basic {expected}"
    assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert kwargs["data"] == {"grant_type": "refresh_token", "refresh_token": "refresh"}
    assert kwargs["timeout"] == 5


@pytest.mark.parametrize("field", ["client_id", "client_secret", "refresh_token"])
def test_missing_credential_raises_config_error(field):
    creds = CREDS.model_copy(update={field: None})
    session = FakeSession()

    with pytest.raises(ConfigError) as exc:
        get_access_token(creds, session=session)

    assert exc.value.missing == [field]
    assert session.calls == []


@pytest.mark.parametrize("status", [400, 401, 500])
def test_rejected_token_exchange_raises_auth_error(status):
    session = FakeSession({TOKEN_URL: FakeResponse(status, {"error": "invalid_grant"})})

    with pytest.raises(AuthError) as exc:
        get_access_token(CREDS, session=session)

    assert exc.value.status_code == status


def test_token_response_without_access_token():
    session = FakeSession({TOKEN_URL: FakeResponse(200, {"token_type": "Bearer"})})

    with pytest.raises(AuthError):
        get_access_token(CREDS, session=session)


# --------------------------
# Currently playing
# --------------------------
def test_now_playing_returns_item():
    session = FakeSession({NOW_PLAYING_URL: FakeResponse(200, {"item": track()})})

    assert fetch_now_playing("ACCESS", session=session) == track()
    assert session.calls[0][2]["headers"] == {"Authorization": "Bearer ACCESS"}


def test_now_playing_204_is_absent():
    session = FakeSession({NOW_PLAYING_URL: FakeResponse(204)})
    assert fetch_now_playing("ACCESS", session=session) is None


def test_now_playing_without_item_is_absent():
    session = FakeSession({NOW_PLAYING_URL: FakeResponse(200, {"item": None, "currently_playing_type": "ad"})})
    assert fetch_now_playing("ACCESS", session=session) is None


def test_now_playing_error_status():
    session = FakeSession({NOW_PLAYING_URL: FakeResponse(401, {"error": {"status": 401}})})

    with pytest.raises(FetchError) as exc:
        fetch_now_playing("ACCESS", session=session)

    assert exc.value.status_code == 401


# --------------------------
# Recently played
# --------------------------
def test_recently_played_returns_first_item():
    first = {"track": track("First")}
    session = FakeSession({RECENTLY_PLAYED_URL: FakeResponse(200, {"items": [first, {"track": track("Second")}]})})

    assert fetch_recently_played("ACCESS", session=session) == first
    assert session.calls[0][2]["params"] == {"limit": 1}


def test_recently_played_empty_history():
    session = FakeSession({RECENTLY_PLAYED_URL: FakeResponse(200, {"items": []})})
    assert fetch_recently_played("ACCESS", session=session) is None


def test_recently_played_error_status():
    session = FakeSession({RECENTLY_PLAYED_URL: FakeResponse(503)})

    with pytest.raises(FetchError) as exc:
        fetch_recently_played("ACCESS", session=session)

    assert exc.value.status_code == 503


def test_now_playing_empty_body_is_absent():
    session = FakeSession({NOW_PLAYING_URL: FakeResponse(200)})
    assert fetch_now_playing("ACCESS", session=session) is None
