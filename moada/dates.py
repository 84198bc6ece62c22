"""Human-readable rendering of the instants returned by the exchange service."""

import re
from datetime import datetime, timezone
from typing import Annotated
from zoneinfo import ZoneInfo

from pydantic import AfterValidator, BeforeValidator, TypeAdapter, ValidationError

from moada.config import DISPLAY_TIMEZONE

INVALID_DATE = "Invalid Date"
DATE_FORMAT = "%d/%m/%Y %H:%M"

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _trim_fraction(value):
    # Go marshals nanoseconds; datetime holds microseconds
    if isinstance(value, str):
        return _EXCESS_FRACTION.sub(r"\1", value, count=1)
    return value


def _assume_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


# Always timezone-aware
Instant = Annotated[datetime, BeforeValidator(_trim_fraction), AfterValidator(_assume_utc)]

_instant = TypeAdapter(Instant)


def parse_instant(value) -> datetime | None:
    """Parse ISO 8601 / RFC 3339 strings (or pass datetimes through)."""
    try:
        return _instant.validate_python(value)
    except ValidationError:
        return None


def format_date(value, tz: str | None = None) -> str:
    """Render day/month/year and a 24-hour clock, e.g. ``05/03/2024 08:30``."""
    parsed = parse_instant(value)
    if parsed is None:
        return INVALID_DATE
    try:
        return parsed.astimezone(ZoneInfo(tz or DISPLAY_TIMEZONE)).strftime(DATE_FORMAT)
    except (OverflowError, ValueError):
        # Go zero times (year 1) cannot shift west of UTC
        return INVALID_DATE
