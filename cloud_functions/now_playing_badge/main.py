import logging

from app.config.logging_config import setup_logging
from app.config.settings import get_settings
from app.services.request_dispatcher import handle_request

# 讀取環境變數（部署時在 Cloud Function 設定 SPOTIFY_* secrets）
settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

def now_playing_badge(request):
    """HTTP Cloud Function entry point; returns a Flask-style (body, status, headers) tuple."""
    logger.debug("Badge function triggered: %s %s", request.method, request.path)

    result = handle_request(
        request.method,
        request.path,
        settings,
        logo_color=request.args.get("logoColor"),
    )
    return result.render_body(), result.status_code, result.headers
