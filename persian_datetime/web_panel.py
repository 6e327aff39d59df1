from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .formatting import ParseError, format_with_month_name, format_with_month_number, get_tz
from .jalali import InvalidGregorianDate, gregorian_to_jalali, is_leap
from .persian_date import Clock, PersianDate, PersianDateConfig, create_persian_date, system_clock
from .settings import Settings

logger = logging.getLogger(__name__)


def _config(settings: Settings, pattern: str | None = None) -> PersianDateConfig:
    return PersianDateConfig(
        format_pattern=pattern or settings.date_format,
        tz_name=settings.timezone,
        ltr_mark=settings.ltr_time_mark,
        persian_digits=settings.persian_digits,
    )


def _request_now(request: Request) -> datetime:
    settings: Settings = request.app.state.settings
    clock: Clock = request.app.state.clock
    tz = get_tz(settings.timezone)
    return clock(tz).astimezone(tz)


def _persian_date(request: Request, now: datetime, pattern: str | None = None) -> PersianDate:
    # One clock reading per request.
    settings: Settings = request.app.state.settings
    return create_persian_date(_config(settings, pattern=pattern), clock=lambda tz: now.astimezone(tz))


def create_app(settings: Settings, *, clock: Clock = system_clock) -> FastAPI:
    app = FastAPI(title="Persian Date")
    app.state.settings = settings
    app.state.clock = clock

    @app.exception_handler(ParseError)
    @app.exception_handler(InvalidGregorianDate)
    async def _bad_input(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("rejected input on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request failed on %s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/convert")
    async def convert(year: int, month: int, day: int) -> dict[str, int]:
        j = gregorian_to_jalali(year, month, day)
        return {"year": j.year, "month": j.month, "day": j.day}

    @app.get("/leap/{year}")
    async def leap(year: int) -> dict[str, Any]:
        return {"year": year, "leap": is_leap(year)}

    @app.get("/format")
    async def format_date(
        request: Request,
        date: str,
        style: str = "name",
        pattern: str | None = None,
    ) -> dict[str, str]:
        pd = _persian_date(request, _request_now(request), pattern)
        if style == "name":
            return {"text": pd.full_datetime_with_month_name(date)}
        if style == "number":
            return {"text": pd.full_datetime_with_month_number(date)}
        raise HTTPException(status_code=400, detail=f"Unknown style: {style}")

    @app.get("/ago")
    async def ago(request: Request, date: str, pattern: str | None = None) -> dict[str, Any]:
        pd = _persian_date(request, _request_now(request), pattern)
        return {"text": pd.days_ago(date), "label": pd.day_label(date)}

    @app.get("/today")
    async def today(request: Request) -> dict[str, Any]:
        now = _request_now(request)
        pd = _persian_date(request, now)
        opts = {"ltr_mark": pd.ltr_mark, "persian_digits": pd.persian_digits}
        return {
            "year": pd.year,
            "month": pd.month,
            "day": pd.day,
            "name": format_with_month_name(now, **opts),
            "number": format_with_month_number(now, **opts),
        }

    return app
