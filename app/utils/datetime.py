"""Timezone helpers for notification and vendor timestamps."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

# ``UTC+5``, ``GMT-03:30``, ``UTC+0530``
_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE
)


def _fixed_offset(name: str) -> tzinfo | None:
    match = _FIXED_OFFSET.match(name)
    if match is None:
        return None
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(-delta if sign == "-" else delta)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``.

    Fixed offsets are accepted for hosts without tz data; anything that
    cannot be resolved means UTC.
    """

    name = (get_settings().app_timezone or "").strip()
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return _fixed_offset(name) or timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the application timezone.

    Values read back from the database are naive wall-clock times in the
    application timezone.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return the naive wall-clock time stored in ``DateTime`` columns."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None


def isoformat_or_none(value: datetime | None) -> str | None:
    localized = ensure_app_timezone(value)
    return localized.isoformat() if localized is not None else None
