# app/models/badge_models.py
from pydantic import BaseModel, Field

# Shields.io "endpoint" badge schema
class BadgeDocument(BaseModel):
    schemaVersion: int = 1
    label: str = ""
    message: str
    color: str
    namedLogo: str = "spotify"
    isError: bool = False
    logoColor: str | None = None

    def to_payload(self) -> dict:
        # logoColor only appears when it was asked for
        return self.model_dump(exclude_none=True)


class BadgeResponse(BaseModel):
    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: BadgeDocument | None = None

    def render_body(self) -> str:
        return self.body.model_dump_json(exclude_none=True) if self.body else ""
