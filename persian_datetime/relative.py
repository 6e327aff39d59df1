from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from .strings import TimeString


def _phrase(amount: int, unit: TimeString) -> str:
    return f"{amount} {unit}"


def ago_phrase(now: datetime, target: datetime) -> str:
    """Describe how far `target` is from `now` in Persian.

    Both values are compared as wall-clock fields, so they must already be in
    the same timezone. Larger units win, and the distance is always reported
    as "ago" even when `target` lies in the future.
    """
    # Period always runs forward from the earlier date.
    earlier, later = sorted((now.date(), target.date()))
    period = relativedelta(earlier, later)
    if abs(period.years) > 0:
        return _phrase(abs(period.years), TimeString.YEARS_AGO)
    if abs(period.months) > 0:
        return _phrase(abs(period.months), TimeString.MONTHS_AGO)

    days = abs((now.date() - target.date()).days)
    if days > 0:
        return _phrase(days, TimeString.DAYS_AGO)

    hours = abs(now.hour - target.hour)
    if hours > 0:
        return _phrase(hours, TimeString.HOURS_AGO)
    minutes = abs(now.minute - target.minute)
    if minutes > 0:
        return _phrase(minutes, TimeString.MINUTES_AGO)
    seconds = abs(now.second - target.second)
    if seconds > 0:
        return _phrase(seconds, TimeString.SECONDS_AGO)
    return str(TimeString.JUST_NOW)


def is_today(now: datetime, target: datetime) -> bool:
    return target.date() == now.date()


def is_yesterday(now: datetime, target: datetime) -> bool:
    return target.date() == now.date() - timedelta(days=1)


def is_tomorrow(now: datetime, target: datetime) -> bool:
    return target.date() == now.date() + timedelta(days=1)


def day_label(now: datetime, target: datetime) -> str | None:
    if is_today(now, target):
        return str(TimeString.TODAY)
    if is_yesterday(now, target):
        return str(TimeString.YESTERDAY)
    if is_tomorrow(now, target):
        return str(TimeString.TOMORROW)
    return None
