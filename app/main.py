# app/main.py
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.logging_config import setup_logging
from app.config.settings import get_settings

# === Import Routers ===
from app.api.badge_api import router as badge_router          # GET / , /api/now-playing
from app.api.badge_api import routing_error_handler

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(
    title="Spotify Now-Playing Badge",
    description=(
        "Shields.io endpoint badge for: "
        "• Currently playing track "
        "• Recently played fallback"
    ),
    version="1.0.0",
    # 只開放 badge 路徑，其它一律 404 badge
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# CORS headers are set per response by the badge router (preflight included)
app.include_router(badge_router, tags=["Badge"])

# Unlisted methods → 405 badge instead of {"detail": ...}
app.add_exception_handler(StarletteHTTPException, routing_error_handler)
