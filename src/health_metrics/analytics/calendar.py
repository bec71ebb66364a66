"""Calendar bucketing shared by every period-based analysis."""

from collections.abc import Iterator
from datetime import date, datetime, time, timedelta

DECEMBER = 12
DAYS_PER_WEEK = 7


def start_of_week(value: date | datetime) -> datetime:
    """Return Monday 00:00 of the week containing ``value``."""
    day = value.date() if isinstance(value, datetime) else value
    monday = day - timedelta(days=day.weekday())
    return datetime.combine(monday, time.min)


def start_of_month(value: date | datetime) -> datetime:
    """Return 00:00 on the first day of the month containing ``value``."""
    return datetime(value.year, value.month, 1)


def next_month(start: datetime) -> datetime:
    """Return the first day of the month after ``start``."""
    if start.month == DECEMBER:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def end_of_day(day: date) -> datetime:
    """Return the last representable instant of ``day``."""
    return datetime.combine(day, time.max)


def iter_weeks(first: datetime, last: datetime) -> Iterator[tuple[datetime, datetime]]:
    """Yield ``(start, next_start)`` for each Monday-aligned week covering the span."""
    current = start_of_week(first)
    while current <= last:
        following = current + timedelta(days=DAYS_PER_WEEK)
        yield current, following
        current = following


def iter_months(first: datetime, last: datetime) -> Iterator[tuple[datetime, datetime]]:
    """Yield ``(start, next_start)`` for each calendar month covering the span."""
    current = start_of_month(first)
    while current <= last:
        following = next_month(current)
        yield current, following
        current = following


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def week_label(start: date, end: date) -> str:
    """Format a week as ``M.DD-M.DD``."""
    return f"{start.month}.{start.day:02d}-{end.month}.{end.day:02d}"


def month_label(start: date) -> str:
    """Format a month as ``YYYY-MM``."""
    return f"{start.year}-{start.month:02d}"


def week_boundaries(range_min: datetime, range_max: datetime) -> list[datetime]:
    """Return every Monday 00:00 within ``[range_min, range_max]``."""
    current = start_of_week(range_min)
    if current < range_min:
        current += timedelta(days=DAYS_PER_WEEK)
    boundaries = []
    while current <= range_max:
        boundaries.append(current)
        current += timedelta(days=DAYS_PER_WEEK)
    return boundaries
