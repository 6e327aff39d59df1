from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

# Days elapsed before the first of each month in a common Gregorian year.
_G_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_G_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Known leap year the 33-year pattern is anchored at.
LEAP_ANCHOR_YEAR = 1375
_LEAP_OFFSETS = (0, 4, 8, 12, 16, 20, 24, 28, 33)


class InvalidGregorianDate(ValueError):
    pass


@dataclass(frozen=True)
class JalaliDate:
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)


def _validate_gregorian(gy: int, gm: int, gd: int) -> None:
    if not 1 <= gm <= 12:
        raise InvalidGregorianDate(f"Invalid Gregorian month: {gm!r}")
    last_day = _G_MONTH_LENGTHS[gm - 1]
    if gm == 2 and calendar.isleap(gy):
        last_day = 29
    if not 1 <= gd <= last_day:
        raise InvalidGregorianDate(f"Invalid day {gd!r} for Gregorian {gy}-{gm:02d}")


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> JalaliDate:
    """Convert a Gregorian calendar date to the Jalali calendar.

    The result is the raw arithmetic output: in the last month the day may be
    30 regardless of leap status. Use normalize_month_end() before display.
    """
    _validate_gregorian(gy, gm, gd)

    gy2 = gy + 1 if gm > 2 else gy
    days = (
        355666
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + _G_DAYS_BEFORE_MONTH[gm - 1]
    )

    jy = -1595 + 33 * (days // 12053)
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461

    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < 186:
        jm = 1 + days // 31
        jd = 1 + (days % 31)
    else:
        jm = 7 + (days - 186) // 30
        jd = 1 + ((days - 186) % 30)

    result = JalaliDate(year=int(jy), month=int(jm), day=int(jd))
    logger.debug("gregorian %s-%s-%s -> jalali %s", gy, gm, gd, result.isoformat())
    return result


def _cycle_start(year: int) -> int:
    delta = year - LEAP_ANCHOR_YEAR
    if delta > 0:
        if delta > 33:
            return LEAP_ANCHOR_YEAR + 33 * (delta // 33)
        return LEAP_ANCHOR_YEAR
    if delta > -33:
        return LEAP_ANCHOR_YEAR - 33
    return LEAP_ANCHOR_YEAR - 33 * ((-delta) // 33 + 1)


def _contains(sorted_values: list[int], target: int) -> bool:
    left, right = 0, len(sorted_values) - 1
    while left <= right:
        mid = (left + right) // 2
        if sorted_values[mid] == target:
            return True
        if sorted_values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return False


def is_leap(year: int) -> bool:
    """Leap-year test using a 33-year pattern of nine leap years.

    This approximates the astronomical rule and agrees with the arithmetic in
    gregorian_to_jalali(). Do not swap it for the 2820-year cycle.
    """
    delta = year - LEAP_ANCHOR_YEAR
    if delta == 0 or delta % 33 == 0:
        return True

    start = _cycle_start(year)
    return _contains([start + offset for offset in _LEAP_OFFSETS], year)


def month_length(year: int, month: int) -> int:
    if month <= 6:
        return 31
    if month < 12:
        return 30
    return 30 if is_leap(year) else 29


def normalize_month_end(date: JalaliDate) -> JalaliDate:
    """Clamp Esfand 30 down to 29 in common years."""
    if date.month == 12 and date.day > month_length(date.year, 12):
        return replace(date, day=month_length(date.year, 12))
    return date
