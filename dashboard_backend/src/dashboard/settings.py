from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DASHBOARD_TASKS_FILE: optional JSON file with the task records; the built-in seed is used when unset
    - DEADLINE_WINDOW_DAYS: days ahead that trigger deadline notifications (default: 2)
    - AUTO_OVERDUE: 'true' to promote past-due pending/in-progress tasks to overdue (default: false)
    - NOTIFICATION_PREVIEW_LIMIT: notifications shown in the dashboard header (default: 3)
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - LOG_LEVEL: logging level name (default: INFO)
    - LOG_FILE: optional path of a log file receiving all records
    """

    tasks_file: Optional[str]
    deadline_window_days: int
    auto_overdue: bool
    notification_preview_limit: int
    cors_allow_origins: List[str]
    log_level: str
    log_file: Optional[str]


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _get_optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_non_negative_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        # Star will be handled in main via allow_origins=["*"]
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        # Fallback to INFO if unsupported
        log_level = "INFO"

    return Settings(
        tasks_file=_get_optional_env("DASHBOARD_TASKS_FILE"),
        deadline_window_days=_parse_non_negative_int(_get_env("DEADLINE_WINDOW_DAYS", "2"), 2),
        auto_overdue=_parse_bool(_get_env("AUTO_OVERDUE", "false"), False),
        notification_preview_limit=_parse_non_negative_int(_get_env("NOTIFICATION_PREVIEW_LIMIT", "3"), 3),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        log_level=log_level,
        log_file=_get_optional_env("LOG_FILE"),
    )
