from datetime import date, datetime, time, timedelta, timezone
from typing import Literal
from zoneinfo import ZoneInfo

WeekStartDay = Literal["sunday", "monday"]


def dt_to_iso(dt: datetime) -> str:
    """
    Convert a datetime to canonical ISO8601.
    Always returns a UTC Z-suffixed string.
    """
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")


def iso_to_dt(d: str) -> datetime:
    """
    Convert an ISO8601 string to a timezone-aware datetime.
    Naive strings are read as UTC.
    """
    return ensure_utc(datetime.fromisoformat(d.replace("Z", "+00:00")))


def ensure_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def now() -> datetime:
    return datetime.now(timezone.utc)


def today(tz_name: str = "UTC") -> date:
    return now().astimezone(ZoneInfo(tz_name)).date()


def week_bounds(reference: date, week_start_day: WeekStartDay) -> tuple[date, date]:
    """
    Return the (first, last) calendar day of the week containing `reference`.

    Python weekday(): Monday=0 .. Sunday=6.
    """
    if week_start_day == "sunday":
        offset = (reference.weekday() + 1) % 7
    else:
        offset = reference.weekday()
    start = reference - timedelta(days=offset)
    return start, start + timedelta(days=6)


def day_range(start: date, end: date, tz_name: str = "UTC") -> tuple[datetime, datetime]:
    """
    Expand a pair of calendar days into an inclusive [start-of-day, end-of-day]
    datetime range in the given zone.
    """
    tz = ZoneInfo(tz_name)
    return (
        datetime.combine(start, time.min, tzinfo=tz),
        datetime.combine(end, time.max, tzinfo=tz),
    )
