import datetime as dt

from clinic.domain.exceptions import InvalidDateError
from clinic.registry.slots import DATE_FORMAT, format_date


def parse_date(text: str, today: dt.date) -> str:
    """Validate a user-entered ``YYYY-MM-DD`` date and return it normalized.

    Today is accepted; anything strictly earlier is rejected.

    Raises:
        InvalidDateError: If the text is not a date or the date is in the past.
    """
    value = text.strip()
    try:
        date = dt.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(value, "expected YYYY-MM-DD") from exc

    if date < today:
        raise InvalidDateError(value, "date must be today or in the future")
    return format_date(date)


def parse_choice(text: str) -> int | None:
    """Parse a 1-based menu choice. Returns ``None`` for non-numeric input."""
    try:
        return int(text.strip())
    except ValueError:
        return None
