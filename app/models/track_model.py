# app/models/track_model.py
from pydantic import BaseModel, ConfigDict

class Artist(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None

class Track(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    artists: list[Artist] | None = None

    @classmethod
    def from_item(cls, item: dict) -> "Track":
        """
        currently-playing 回的 item 本身就是 track；
        recently-played 的 item 則是把 track 包在 "track" 底下。
        """
        track = item.get("track") or item
        return cls.model_validate(track)
