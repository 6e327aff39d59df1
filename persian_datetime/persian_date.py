from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import datetime, tzinfo

from .formatting import (
    DEFAULT_FORMAT,
    format_with_month_name,
    format_with_month_number,
    get_tz,
    parse_datetime,
    parse_epoch_seconds,
    to_local,
)
from .jalali import gregorian_to_jalali
from .relative import ago_phrase, day_label

logger = logging.getLogger(__name__)

Clock = Callable[[tzinfo], datetime]


def system_clock(tz: tzinfo) -> datetime:
    return datetime.now(tz)


@dataclass(frozen=True)
class PersianDateConfig:
    # None reads the clock; a number is epoch seconds.
    source: float | datetime | None = None
    format_pattern: str = DEFAULT_FORMAT
    tz_name: str = "Asia/Tehran"
    ltr_mark: bool = False
    persian_digits: bool = False


@dataclass(frozen=True)
class PersianDate:
    year: int
    month: int
    day: int
    format_pattern: str = DEFAULT_FORMAT
    tz_name: str = "Asia/Tehran"
    ltr_mark: bool = False
    persian_digits: bool = False
    clock: Clock = field(default=system_clock, repr=False, compare=False)

    def with_format(self, pattern: str) -> PersianDate:
        return replace(self, format_pattern=pattern)

    def _now(self) -> datetime:
        # Naive wall clock, comparable with values parsed by the pattern.
        return self.clock(get_tz(self.tz_name)).replace(tzinfo=None)

    def _parse_local(self, text: str) -> datetime:
        value = parse_datetime(text, self.format_pattern)
        return to_local(value, self.tz_name).replace(tzinfo=None)

    def full_datetime_with_month_name(self, text: str) -> str:
        """e.g. "15 فروردین 1402 ساعت 14:30"."""
        return format_with_month_name(
            self._parse_local(text),
            ltr_mark=self.ltr_mark,
            persian_digits=self.persian_digits,
        )

    def full_datetime_with_month_number(self, text: str) -> str:
        """e.g. "1402/01/15 14:30"."""
        return format_with_month_number(
            self._parse_local(text),
            ltr_mark=self.ltr_mark,
            persian_digits=self.persian_digits,
        )

    def days_ago(self, text: str) -> str:
        return ago_phrase(self._now(), self._parse_local(text))

    def day_label(self, text: str) -> str | None:
        """Persian today/yesterday/tomorrow label, or None for other days."""
        return day_label(self._now(), self._parse_local(text))


def _resolve_source(config: PersianDateConfig, clock: Clock) -> datetime:
    tz = get_tz(config.tz_name)
    if config.source is None:
        return clock(tz).astimezone(tz)
    if isinstance(config.source, datetime):
        return to_local(config.source, config.tz_name)
    return parse_epoch_seconds(config.source, config.tz_name)


def create_persian_date(
    config: PersianDateConfig | None = None,
    *,
    clock: Clock = system_clock,
) -> PersianDate:
    config = config or PersianDateConfig()
    local = _resolve_source(config, clock)
    j = gregorian_to_jalali(local.year, local.month, local.day)
    logger.debug("created persian date %s from %s", j.isoformat(), local.isoformat())
    return PersianDate(
        year=j.year,
        month=j.month,
        day=j.day,
        format_pattern=config.format_pattern,
        tz_name=config.tz_name,
        ltr_mark=config.ltr_mark,
        persian_digits=config.persian_digits,
        clock=clock,
    )
