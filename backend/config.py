"""
Runtime settings for the analyzer service.

Values come from environment variables; a .env file in the backend root is
loaded automatically using python-dotenv:

FETCH_TIMEOUT_SECONDS=10
USE_FIXTURE_DATA=0
"""

from dataclasses import dataclass
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36 SiteAnalyzerBot/1.0"
)
_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    try:
        value = float(os.getenv(name, "").strip() or default)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_log_level(name: str, default: str = "INFO") -> str:
    level = os.getenv(name, "").strip().upper()
    # getLevelName maps known names to their number and echoes unknown ones back.
    return level if level and isinstance(logging.getLevelName(level), int) else default


@dataclass(frozen=True)
class Settings:
    fetch_timeout_seconds: float
    use_fixture_data: bool
    user_agent: str
    cors_allow_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    """Read settings from the current environment."""
    origins = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        fetch_timeout_seconds=_env_float("FETCH_TIMEOUT_SECONDS", 10.0),
        use_fixture_data=_env_flag("USE_FIXTURE_DATA"),
        user_agent=os.getenv("ANALYZER_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        cors_allow_origins=origins or ["*"],
        log_level=_env_log_level("LOG_LEVEL"),
    )
