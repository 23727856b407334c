import json
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from geocapture.core.config import Settings

router = APIRouter()

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"
CONFIG_PLACEHOLDER = "__CAPTURE_CONFIG__"


@lru_cache(maxsize=1)
def _page_template() -> str:
    return (STATIC_DIR / "index.html").read_text(encoding="utf-8")


def capture_config(settings: Settings) -> dict:
    return {
        "endpoint": "/api/location",
        "redirectUrl": settings.redirect_url,
        "timeoutMs": settings.geo_timeout_ms,
        "enableHighAccuracy": True,
        "maximumAge": 0,
    }


def render_page(settings: Settings) -> str:
    # "</" would let a crafted redirect URL close the inline script tag
    config_json = json.dumps(capture_config(settings)).replace("</", "<\\/")
    return _page_template().replace(CONFIG_PLACEHOLDER, config_json)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index(request: Request):
    return HTMLResponse(render_page(request.app.state.settings))
