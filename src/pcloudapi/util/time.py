from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from pcloudapi.errors import FormatError

# Sun, 16 Mar 2014 17:26:04 +0000 (RFC 1123 with numeric zone), quoted on the wire.
TIME_FORMAT: str = '"Www, dd Mmm yyyy HH:MM:SS +hhmm"'

ZERO_TIME: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)

# Fixed English names; strftime's %a/%b follow the process locale.
_WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_TIME_RE = re.compile(
    r"(?P<weekday>" + "|".join(_WEEKDAYS) + r"), "
    r"(?P<day>\d{2}) "
    r"(?P<month>" + "|".join(_MONTHS) + r") "
    r"(?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2}) "
    r"(?P<sign>[+-])(?P<off_h>\d{2})(?P<off_m>\d{2})",
    re.ASCII,
)


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def is_zero(dt: datetime) -> bool:
    """Return True if dt is the unset time value."""
    return normalize_dt(dt) == ZERO_TIME


def format_time(dt: datetime) -> str:
    """
    Format a tz-aware datetime as the unquoted wire string, in UTC.

    Sub-second precision is dropped; the format resolves whole seconds.
    """
    dt = normalize_dt(dt).astimezone(timezone.utc)
    return (
        f"{_WEEKDAYS[dt.weekday()]}, {dt.day:02d} {_MONTHS[dt.month - 1]} "
        f"{dt.year:04d} {dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} +0000"
    )


def parse_time(value: str) -> datetime:
    """
    Parse the unquoted wire string into a tz-aware UTC datetime.

    The weekday is checked for syntax only. Any numeric zone offset is
    accepted and converted to UTC.
    """
    if not isinstance(value, str):
        raise FormatError(
            "wire time must be a string",
            details={"value": value, "format": TIME_FORMAT},
        )

    m = _TIME_RE.fullmatch(value)
    if m is None:
        raise FormatError(
            f"cannot parse {value!r} as {TIME_FORMAT}",
            details={"value": value, "format": TIME_FORMAT},
        )

    try:
        offset = timedelta(hours=int(m["off_h"]), minutes=int(m["off_m"]))
        if m["sign"] == "-":
            offset = -offset
        dt = datetime(
            int(m["year"]),
            _MONTHS.index(m["month"]) + 1,
            int(m["day"]),
            int(m["hour"]),
            int(m["minute"]),
            int(m["second"]),
            tzinfo=timezone(offset),
        )
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise FormatError(
            f"time {value!r} is out of range",
            details={"value": value, "format": TIME_FORMAT},
            cause=exc,
        ) from exc


def encode_time(dt: datetime) -> str:
    """Encode a datetime as its wire token, quotes included."""
    return f'"{format_time(dt)}"'


def decode_time(token: str) -> datetime:
    """Decode a quoted wire token. Raises FormatError on any mismatch."""
    if (
        not isinstance(token, str)
        or len(token) < 2
        or not token.startswith('"')
        or not token.endswith('"')
    ):
        raise FormatError(
            f"cannot parse {token!r} as {TIME_FORMAT}",
            details={"value": token, "format": TIME_FORMAT},
        )
    return parse_time(token[1:-1])
