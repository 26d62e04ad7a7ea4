"""Calendar arithmetic for severance month counting.

Three ways of counting service months are used by the calculators:

- months_between: calendar difference in (year, month), ignoring the day.
- count_months_15_day_rule: civil months in which at least 15 days were
  worked (CLT proportionality rule for 13th salary and vacation).
- count_whole_months: months completed on the hire-day anniversary.
"""

import calendar
import re
from datetime import date, datetime, timezone
from typing import Union

from .helpers import InvalidInputError

FIFTEEN_DAY_THRESHOLD = 15

_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_iso_date(value: Union[str, date], field: str = "date") -> date:
    """Parse a YYYY-MM-DD string into a date.

    The string is read as midday UTC, so the calendar day never shifts with
    the local timezone. Strings carrying a time component are rejected.

    Args:
        value: ISO calendar date string, or a date (returned as-is)
        field: Field name used in error messages

    Raises:
        InvalidInputError: If value is missing or not a valid calendar date
    """
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if not value:
        raise InvalidInputError(f"{field} is required")
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise InvalidInputError(f"Invalid date for {field}: {value!r} (expected YYYY-MM-DD)")
    try:
        instant = datetime.strptime(f"{value}T12:00:00+0000", "%Y-%m-%dT%H:%M:%S%z")
    except ValueError:
        raise InvalidInputError(f"Invalid date for {field}: {value!r}")
    return instant.astimezone(timezone.utc).date()


def months_between(start: date, end: date) -> int:
    """Count month boundaries between two dates, ignoring day-of-month.

    Example: 2020-01-15 -> 2020-04-10 is 3.
    Negative when end is in an earlier month than start.
    """
    return (end.year - start.year) * 12 + (end.month - start.month)


def _next_month(year: int, month: int) -> tuple:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def count_months_15_day_rule(
    start: date,
    end: date,
    threshold: int = FIFTEEN_DAY_THRESHOLD,
) -> int:
    """Count civil months with at least `threshold` days inside [start, end].

    Walks every calendar month from start's month through end's month. For
    each one, the range is clamped to the month's first and last day and the
    inclusive day count is compared with the threshold.

    Returns:
        Number of qualifying months (0 if end precedes start)
    """
    if end < start:
        return 0

    count = 0
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        first_day = date(year, month, 1)
        last_day = date(year, month, calendar.monthrange(year, month)[1])

        window_start = max(start, first_day)
        window_end = min(end, last_day)
        days_worked = max(0, (window_end - window_start).days + 1)

        if days_worked >= threshold:
            count += 1

        year, month = _next_month(year, month)

    return count


def count_whole_months(start: date, end: date) -> int:
    """Count months completed on the start date's day-of-month.

    Hired on the 20th, a month completes once the 20th of the next month
    is reached. Never negative.
    """
    months = months_between(start, end)
    if end.day < start.day:
        months -= 1
    return max(0, months)
