import pytest

from app.config.settings import Settings
from app.services.spotify_history import RECENTLY_PLAYED_URL
from app.services.spotify_now_playing import NOW_PLAYING_URL
from app.services.spotify_token_service import TOKEN_URL
from tests.fakes import FakeResponse, FakeSession, track


@pytest.fixture
def settings():
    return Settings(client_id="cid", client_secret="secret", refresh_token="refresh")


@pytest.fixture
def token_ok():
    return FakeResponse(200, {"access_token": "ACCESS", "token_type": "Bearer", "expires_in": 3600})


@pytest.fixture
def playing_session(token_ok):
    return FakeSession({
        TOKEN_URL: token_ok,
        NOW_PLAYING_URL: FakeResponse(200, {"is_playing": True, "item": track()}),
    })


@pytest.fixture
def idle_session(token_ok):
    return FakeSession({
        TOKEN_URL: token_ok,
        NOW_PLAYING_URL: FakeResponse(204),
        RECENTLY_PLAYED_URL: FakeResponse(200, {"items": [{"track": track("Old Song", ("Old Band",))}]}),
    })
