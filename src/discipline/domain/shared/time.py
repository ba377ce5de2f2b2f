"""Clock helpers.

All timestamps are timezone-aware UTC and every calendar date ("today",
check dates) is a UTC date. Services take a ``clock`` callable defaulting
to ``utc_now`` so tests can pin the time.
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def utc_date(moment: datetime) -> date:
    """Calendar date of ``moment`` in UTC (naive values are taken as UTC)."""
    return ensure_tz_aware(moment).astimezone(timezone.utc).date()


def today_utc() -> date:
    return utc_date(utc_now())


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset on read)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
