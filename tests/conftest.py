from datetime import UTC, datetime

import pytest

from persian_datetime.settings import Settings

NOW = datetime(2025, 3, 21, 18, 1, 41, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    return lambda tz: NOW.astimezone(tz)


@pytest.fixture
def settings():
    return Settings(
        web_host="127.0.0.1",
        web_port=8000,
        timezone="UTC",
        date_format="%Y-%m-%dT%H:%M:%SZ",
        ltr_time_mark=False,
        persian_digits=False,
        log_level="INFO",
    )
