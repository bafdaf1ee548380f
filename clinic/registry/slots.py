import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger

DATE_FORMAT = "%Y-%m-%d"


def day_times(start_hour: int, end_hour: int, slot_minutes: int) -> list[str]:
    """List the ``HH:MM`` slot starts of a working day.

    Every hour in ``[start_hour, end_hour)`` contributes the minutes
    ``0, slot_minutes, ...`` below 60, so ``day_times(8, 10, 30)`` gives
    ``["08:00", "08:30", "09:00", "09:30"]``.
    """
    return [
        f"{hour:02d}:{minute:02d}"
        for hour in range(start_hour, end_hour)
        for minute in range(0, 60, slot_minutes)
    ]


def join_date_time(date: str, time: str) -> str:
    """``("2025-01-10", "09:00")`` → ``"2025-01-10 09:00"``."""
    return f"{date} {time}"


def resolve_timezone(name: str) -> dt.tzinfo:
    """Resolve a timezone name, falling back to UTC if invalid."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid clinic timezone '{}'; defaulting to UTC", name)
        return dt.timezone.utc


def current_date(tz: dt.tzinfo | None = None) -> dt.date:
    """Today in ``tz``, or on the host's local calendar when ``tz`` is ``None``."""
    if tz is None:
        return dt.date.today()
    return dt.datetime.now(tz).date()


def format_date(date: dt.date) -> str:
    return date.strftime(DATE_FORMAT)


def next_day(date: dt.date) -> dt.date:
    return date + dt.timedelta(days=1)
