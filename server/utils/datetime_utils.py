# server/utils/datetime_utils.py
"""
Date helpers shared by services, views and the log formatter.
Timestamps are rendered as ISO strings in UTC; calendar dates stay naive.
"""
from datetime import date, datetime, timezone
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime to ISO string with UTC timezone.

    Args:
        dt: datetime object (assumed UTC if naive)

    Returns:
        ISO format string with 'Z' suffix (UTC)
    """
    if dt is None:
        return None

    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)

    return dt.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'


def to_iso_date(value: Optional[date]) -> Optional[str]:
    """Render a calendar date as YYYY-MM-DD."""
    if value is None:
        return None
    return value.isoformat()


def years_before(day: date, years: int) -> date:
    """
    Same calendar day `years` years earlier.

    February 29 maps to February 28 when the target year is not a leap year.
    """
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def parse_form_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD value posted by an HTML date input.

    Returns None for blank or malformed input so that the missing-date
    validation rule reports it.
    """
    if not value or not value.strip():
        return None

    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.debug(f"Unparseable date input: {value!r}")
        return None


def work_experience_years(hire_date: date, today: date) -> float:
    """Years elapsed since hire_date, as days / 365 rounded to one decimal."""
    return round((today - hire_date).days / 365.0, 1)
