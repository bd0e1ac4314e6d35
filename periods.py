from datetime import datetime
from dateutil import tz
from dateutil.relativedelta import relativedelta
from config import TIMEZONE


def local_zone(name=TIMEZONE):
    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown TIMEZONE {name!r}")
    return zone


def local_now():
    """Wall-clock time in the configured zone, as a naive datetime."""
    return datetime.now(local_zone()).replace(tzinfo=None)


def to_local(moment):
    """Convert an offset-aware datetime to naive wall-clock time in the configured zone.

    Naive datetimes are assumed to already be local and pass through unchanged.
    """
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone(local_zone()).replace(tzinfo=None)


def _end_of_day(moment):
    return moment.replace(hour=23, minute=59, second=59, microsecond=999000)


def day_bounds(now=None):
    now = now or local_now()
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, _end_of_day(now)


def month_bounds(now=None):
    now = now or local_now()
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    last_day = start + relativedelta(months=1, days=-1)
    return start, _end_of_day(last_day)
