from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .formatting import DEFAULT_FORMAT


@dataclass(frozen=True)
class Settings:
    web_host: str
    web_port: int

    timezone: str
    date_format: str
    ltr_time_mark: bool
    persian_digits: bool
    log_level: str


def _parse_bool(value: str, *, default: bool) -> bool:
    raw = (value or "").strip().lower()
    if raw == "":
        return default
    if raw in {"1", "true", "yes", "y", "on"}:
        return True
    if raw in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def load_settings() -> Settings:
    load_dotenv()

    web_host = os.getenv("WEB_HOST", "127.0.0.1").strip() or "127.0.0.1"
    web_port = int(os.getenv("WEB_PORT", "8000"))

    timezone = os.getenv("TIMEZONE", "Asia/Tehran").strip() or "UTC"
    date_format = os.getenv("DATE_FORMAT", "") or DEFAULT_FORMAT
    ltr_time_mark = _parse_bool(os.getenv("LTR_TIME_MARK", ""), default=False)
    persian_digits = _parse_bool(os.getenv("PERSIAN_DIGITS", ""), default=False)
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        web_host=web_host,
        web_port=web_port,
        timezone=timezone,
        date_format=date_format,
        ltr_time_mark=ltr_time_mark,
        persian_digits=persian_digits,
        log_level=log_level,
    )
