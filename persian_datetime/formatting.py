from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .jalali import JalaliDate, gregorian_to_jalali, normalize_month_end
from .strings import LTR_MARK, TimeString, month_name, to_persian_digits

DEFAULT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class ParseError(ValueError):
    pass


def get_tz(tz_name: str) -> tzinfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        return UTC


def parse_datetime(text: str, pattern: str = DEFAULT_FORMAT) -> datetime:
    """Parse `text` with a strptime pattern.

    A literal trailing "Z" in the default pattern is not a UTC marker: the
    result is a naive wall-clock value. Use "%z" to get an aware datetime.
    """
    if not text:
        raise ParseError("Empty date string")
    try:
        return datetime.strptime(text.strip(), pattern)
    except ValueError as e:
        raise ParseError(f"{text!r} does not match pattern {pattern!r}") from e


def parse_epoch_seconds(value: float, tz_name: str) -> datetime:
    return datetime.fromtimestamp(float(value), tz=UTC).astimezone(get_tz(tz_name))


def to_local(value: datetime, tz_name: str) -> datetime:
    """Bring an aware value into `tz_name`; naive values are already local."""
    if value.tzinfo is None:
        return value
    return value.astimezone(get_tz(tz_name))


def jalali_for(value: datetime) -> JalaliDate:
    j = gregorian_to_jalali(value.year, value.month, value.day)
    return normalize_month_end(j)


def format_time(value: datetime, *, ltr_mark: bool = False) -> str:
    text = f"{value.hour}:{value.minute:02d}"
    if ltr_mark:
        return LTR_MARK + text
    return text


def format_with_month_name(
    value: datetime,
    *,
    ltr_mark: bool = False,
    persian_digits: bool = False,
) -> str:
    j = jalali_for(value)
    text = f"{j.day} {month_name(j.month)} {j.year} {TimeString.HOUR} {format_time(value, ltr_mark=ltr_mark)}"
    if persian_digits:
        return to_persian_digits(text)
    return text


def format_with_month_number(
    value: datetime,
    *,
    ltr_mark: bool = False,
    persian_digits: bool = False,
) -> str:
    j = jalali_for(value)
    text = f"{j.year}/{j.month:02d}/{j.day:02d} {format_time(value, ltr_mark=ltr_mark)}"
    if persian_digits:
        return to_persian_digits(text)
    return text
