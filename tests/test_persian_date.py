import dataclasses
from datetime import UTC, datetime

import pytest

from persian_datetime.formatting import ParseError
from persian_datetime.persian_date import PersianDateConfig, create_persian_date


def test_create_from_datetime():
    pd = create_persian_date(PersianDateConfig(source=datetime(2024, 10, 26, 12, 0), tz_name="UTC"))
    assert (pd.year, pd.month, pd.day) == (1403, 8, 5)


def test_create_from_timestamp_uses_timezone():
    stamp = datetime(2025, 3, 20, 22, 0, tzinfo=UTC).timestamp()
    in_utc = create_persian_date(PersianDateConfig(source=stamp, tz_name="UTC"))
    in_tehran = create_persian_date(PersianDateConfig(source=stamp, tz_name="Asia/Tehran"))
    assert (in_utc.year, in_utc.month, in_utc.day) == (1403, 12, 30)
    assert (in_tehran.year, in_tehran.month, in_tehran.day) == (1404, 1, 1)


def test_create_without_source_reads_clock(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    assert (pd.year, pd.month, pd.day) == (1404, 1, 1)


def test_default_config(fixed_clock):
    pd = create_persian_date(clock=fixed_clock)
    assert pd.format_pattern == "%Y-%m-%dT%H:%M:%SZ"
    assert pd.tz_name == "Asia/Tehran"


def test_with_format_returns_new_value(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    other = pd.with_format("%d/%m/%Y %H:%M")
    assert other is not pd
    assert pd.format_pattern == "%Y-%m-%dT%H:%M:%SZ"
    assert other.format_pattern == "%d/%m/%Y %H:%M"
    assert other.full_datetime_with_month_number("26/10/2024 09:05") == "1403/08/05 9:05"


def test_persian_date_is_immutable(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pd.year = 1300


def test_full_datetime_strings(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    assert pd.full_datetime_with_month_name("2025-03-21T18:01:41Z") == "1 فروردین 1404 ساعت 18:01"
    assert pd.full_datetime_with_month_number("2025-03-21T18:01:41Z") == "1404/01/01 18:01"


def test_aware_pattern_converts_to_timezone(fixed_clock):
    pd = create_persian_date(
        PersianDateConfig(format_pattern="%Y-%m-%dT%H:%M:%S%z", tz_name="UTC"),
        clock=fixed_clock,
    )
    assert pd.full_datetime_with_month_number("2025-03-21T18:01:41+03:30") == "1404/01/01 14:31"


def test_days_ago(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    assert pd.days_ago("2024-10-26T12:01:41Z") == "4 ماه پیش"
    assert pd.days_ago("2025-03-21T18:01:41Z") == "همین الان"
    assert pd.days_ago("2025-03-21T15:01:41Z") == "3 ساعت پیش"


def test_days_ago_uses_configured_timezone(fixed_clock):
    # 18:01 UTC is 21:31 in Tehran.
    pd = create_persian_date(PersianDateConfig(tz_name="Asia/Tehran"), clock=fixed_clock)
    assert pd.days_ago("2025-03-21T21:31:41Z") == "همین الان"


def test_persian_digits_option(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC", persian_digits=True), clock=fixed_clock)
    assert pd.full_datetime_with_month_number("2025-03-21T18:01:41Z") == "۱۴۰۴/۰۱/۰۱ ۱۸:۰۱"


def test_parse_error_propagates(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    with pytest.raises(ParseError):
        pd.days_ago("yesterday")


def test_day_label(fixed_clock):
    pd = create_persian_date(PersianDateConfig(tz_name="UTC"), clock=fixed_clock)
    assert pd.day_label("2025-03-20T23:00:00Z") == "دیروز"
    assert pd.day_label("2025-03-21T01:00:00Z") == "امروز"
    assert pd.day_label("2025-03-22T01:00:00Z") == "فردا"
    assert pd.day_label("2025-03-10T01:00:00Z") is None
