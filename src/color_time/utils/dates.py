"""
Date utilities

Parses date representations and derives the two values the interpolation
needs: 0-indexed day-of-year and elapsed fractional years.
"""

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from color_time.errors import InvalidArgument
from color_time.models.enums import LogCategory
from color_time.utils.logger import get_logger

log = get_logger().for_category(LogCategory.DATE)

DateLike = Union[str, date, datetime, None]

DAYS_PER_YEAR = 365.25


def _as_datetime(value: Union[date, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def parse_date(value: DateLike = None, fmt: Optional[str] = None,
               now: Optional[datetime] = None) -> datetime:
    """
    Parse a date representation into a datetime

    Args:
        value: None or "now" (current time), a date/datetime, or a string
        fmt: Optional strptime format for `value` (e.g. "%Y-%m-%d");
             without it the string goes through dateutil's parser
        now: Reference "now" used for None / "now", and for the date parts
             (e.g. the year) a free-form string leaves out

    Returns:
        Naive or aware datetime, as parsed

    Raises:
        InvalidArgument: If the value cannot be parsed

    Example:
        parse_date("Aug 9th, 2015")             # datetime(2015, 8, 9)
        parse_date("09.08.2015", "%d.%m.%Y")    # datetime(2015, 8, 9)
    """
    if value is None or (isinstance(value, str) and value.strip().lower() == "now"):
        return now or datetime.now()

    if isinstance(value, (date, datetime)):
        return _as_datetime(value)

    if not isinstance(value, str):
        raise InvalidArgument(f"Unsupported date value: {value!r}")

    try:
        if fmt is not None:
            return datetime.strptime(value, fmt)
        # Missing fields come from the reference day at midnight
        default = (now or datetime.now()).replace(hour=0, minute=0, second=0, microsecond=0)
        return date_parser.parse(value, default=default)
    except (ValueError, OverflowError, TypeError) as ex:
        log.debug("Date parsing failed", value=value, fmt=fmt, error=str(ex))
        raise InvalidArgument(f"Cannot parse date {value!r}: {ex}") from ex


def day_of_year(value: Union[date, datetime]) -> int:
    """
    0-indexed day of year (Jan 1st -> 0, Dec 31st -> 364 or 365)

    Example:
        day_of_year(date(2015, 8, 9))  # 220
    """
    return value.timetuple().tm_yday - 1


def elapsed_years(start: Union[date, datetime], end: Union[date, datetime]) -> float:
    """
    Fractional years from `start` to `end` (negative if `end` is earlier)

    Whole years and months come from relativedelta; the leftover days and
    time of day are expressed as a fraction of an average year.

    Example:
        elapsed_years(date(2010, 1, 1), date(2015, 7, 1))  # 5.5
    """
    start_dt = _as_datetime(start)
    end_dt = _as_datetime(end)

    if (start_dt.tzinfo is None) != (end_dt.tzinfo is None):
        # Mixed naive/aware: compare wall-clock values
        start_dt = start_dt.replace(tzinfo=None)
        end_dt = end_dt.replace(tzinfo=None)

    delta = relativedelta(end_dt, start_dt)
    remainder_days = (
        delta.days
        + delta.hours / 24.0
        + delta.minutes / 1440.0
        + delta.seconds / 86400.0
    )
    return delta.years + delta.months / 12.0 + remainder_days / DAYS_PER_YEAR
