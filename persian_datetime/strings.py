from __future__ import annotations

from enum import StrEnum

PERSIAN_MONTH_NAMES = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)


class TimeString(StrEnum):
    TODAY = "امروز"
    YESTERDAY = "دیروز"
    TOMORROW = "فردا"
    JUST_NOW = "همین الان"
    YEARS_AGO = "سال پیش"
    MONTHS_AGO = "ماه پیش"
    DAYS_AGO = "روز پیش"
    HOURS_AGO = "ساعت پیش"
    MINUTES_AGO = "دقیقه پیش"
    SECONDS_AGO = "ثانیه پیش"
    HOUR = "ساعت"


# Keeps "H:MM" left-to-right inside Persian text.
LTR_MARK = "\u200e"

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid Jalali month: {month!r}")
    return PERSIAN_MONTH_NAMES[month - 1]


def to_persian_digits(text: str) -> str:
    return text.translate(_PERSIAN_DIGITS)
