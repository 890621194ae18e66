"""Conversion between Jira's time and date strings and Python values."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone

_TIME_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([+-])(\d{2})(\d{2})"
)
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def parse_time(value: str | None) -> datetime | None:
    """Parse a Jira timestamp such as ``2016-03-16T04:22:35.386+0000``.

    ``None`` and ``"null"`` give ``None``.
    """
    if value is None or value == "null":
        return None
    match = _TIME_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid Jira time: {value!r}")
    year, month, day, hour, minute, second, fraction, sign, off_h, off_m = match.groups()
    micro = int((fraction or "").ljust(6, "0")[:6])
    offset = timedelta(hours=int(off_h), minutes=int(off_m))
    if sign == "-":
        offset = -offset
    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        micro,
        tzinfo=timezone(offset),
    )


def format_time(value: datetime) -> str:
    """Format a datetime as Jira expects; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    offset = value.utcoffset() or timedelta(0)
    total = int(offset.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}{sign}{hours:02d}{minutes:02d}"
    )


def parse_date(value: str | None) -> date | None:
    """Parse a Jira date such as ``2016-03-16``; ``None`` and ``"null"`` give ``None``."""
    if value is None or value == "null":
        return None
    match = _DATE_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid Jira date: {value!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def format_date(value: date) -> str:
    """Format a date (or the date part of a datetime) as Jira expects."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"