# app/models/token_model.py
from pydantic import BaseModel, ConfigDict

class SpotifyCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str | None = None
    client_secret: str | None = None
    refresh_token: str | None = None

    def missing(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if not value]

class SpotifyToken(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    scope: str | None = None
