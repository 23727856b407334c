import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

DEFAULT_REDIRECT_URL = "https://www.google.com/search?q=mern+full+stack+developer+roadmap"


@dataclass(frozen=True)
class Settings:
    database_url: str
    app_env: str = "local"
    log_level: str = "INFO"
    log_file: str | None = "logs/app.log"
    redirect_url: str = DEFAULT_REDIRECT_URL
    geo_timeout_ms: int = 15000
    sql_echo: bool = False


def _get_env(env: Mapping[str, str], key: str, default: str | None = None) -> str:
    val = env.get(key) or default
    if val is None:
        raise RuntimeError(f"Missing required env var: {key}")
    return val


def _get_bool(env: Mapping[str, str], key: str, default: str = "false") -> bool:
    return _get_env(env, key, default).lower() in ("1", "true", "yes")


def _get_positive_int(env: Mapping[str, str], key: str, default: str) -> int:
    raw = _get_env(env, key, default)
    try:
        val = int(raw)
    except ValueError:
        raise RuntimeError(f"{key} must be an integer, got {raw!r}")
    if val <= 0:
        raise RuntimeError(f"{key} must be positive, got {val}")
    return val


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read settings from the process environment (after loading .env).
    DATABASE_URL has no default: without it the service refuses to start.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return Settings(
        database_url=_get_env(environ, "DATABASE_URL"),
        app_env=_get_env(environ, "APP_ENV", "local"),
        log_level=_get_env(environ, "LOG_LEVEL", "INFO").upper(),
        log_file=environ.get("LOG_FILE", "logs/app.log") or None,
        redirect_url=_get_env(environ, "REDIRECT_URL", DEFAULT_REDIRECT_URL),
        geo_timeout_ms=_get_positive_int(environ, "GEO_TIMEOUT_MS", "15000"),
        sql_echo=_get_bool(environ, "SQL_ECHO"),
    )
