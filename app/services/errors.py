# app/services/errors.py

class BadgeServiceError(Exception):
    """Base class for failures inside the badge pipeline."""


class ConfigError(BadgeServiceError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required Spotify settings: {', '.join(missing)}")


class AuthError(BadgeServiceError):
    def __init__(self, status_code: int, message: str = "Failed to refresh token"):
        self.status_code = status_code
        super().__init__(f"{message}: {status_code}")


class FetchError(BadgeServiceError):
    def __init__(self, endpoint: str, status_code: int):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"Failed to get {endpoint}: {status_code}")
