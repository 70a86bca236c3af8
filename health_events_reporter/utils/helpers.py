import logging
from datetime import datetime, timedelta, timezone

from health_events_reporter.models import TimeWindow
from health_events_reporter.utils.config import (
    CSV_FILENAME_DATE_FORMAT,
    CSV_FILENAME_SUFFIX,
    DATE_INPUT_FORMAT,
    DEFAULT_LOOKBACK_DAYS,
    MISSING_START_TIME,
    WINDOW_DISPLAY_FORMAT,
)


def utc_now():
    """Current wall-clock time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def parse_date_string(date_str, default):
    """
    Parse a YYYY-MM-DD date as midnight UTC of that day

    Args:
        date_str (str): Date supplied on the command line
        default (datetime): Bound to use when the date can't be parsed

    Returns:
        datetime: Midnight UTC of the date, or default
    """
    try:
        date = datetime.strptime(date_str, DATE_INPUT_FORMAT)
    except (TypeError, ValueError):
        logging.warning(f"Could not parse date '{date_str}'. Using default.")
        return default

    return date.replace(tzinfo=timezone.utc)


def resolve_time_window(from_utc=None, to_utc=None, now=None, lookback_days=None):
    """
    Resolve the event window from optional CLI dates

    Args:
        from_utc (str, optional): Start date (YYYY-MM-DD)
        to_utc (str, optional): End date (YYYY-MM-DD)
        now (datetime, optional): Clock value the defaults are computed from
        lookback_days (int, optional): Default window length in days

    Returns:
        TimeWindow: Resolved UTC window
    """
    if now is None:
        now = utc_now()
    if lookback_days is None:
        lookback_days = DEFAULT_LOOKBACK_DAYS

    end_time = now
    start_time = end_time - timedelta(days=lookback_days)

    start_date = parse_date_string(from_utc, start_time) if from_utc is not None else start_time
    end_date = parse_date_string(to_utc, end_time) if to_utc is not None else end_time

    logging.debug(f"Resolved window {start_date.isoformat()} -> {end_date.isoformat()}")
    return TimeWindow(start=start_date, end=end_date)


def format_window_bound(value):
    """Format a window bound for the console banner (YYYY-MM-DD HH:MM:SS UTC)"""
    return _to_utc(value).strftime(WINDOW_DISPLAY_FORMAT)


def format_event_time(value):
    """
    Format an event start time the way the Health API renders date-times

    Produces RFC 3339 UTC (2024-01-01T00:00:00Z), with fractional seconds
    only when they are non-zero.

    Args:
        value: datetime from boto3, ISO string, or None

    Returns:
        str: Formatted time, or the "Unknown time" placeholder
    """
    if value is None or value == "":
        return MISSING_START_TIME

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            # If we can't parse it, return as is
            return value

    value = _to_utc(value)
    formatted = value.strftime("%Y-%m-%dT%H:%M:%S")
    if value.microsecond:
        fraction = f"{value.microsecond:06d}".rstrip("0")
        formatted = f"{formatted}.{fraction}"
    return f"{formatted}Z"


def build_csv_filename(now=None, suffix=None):
    """
    Name of the CSV report, derived from the run date (not the window)

    Returns:
        str: e.g. 20240101_health.csv
    """
    if now is None:
        now = utc_now()
    if suffix is None:
        suffix = CSV_FILENAME_SUFFIX
    return f"{now.strftime(CSV_FILENAME_DATE_FORMAT)}_{suffix}.csv"


def _to_utc(value):
    # Naive datetimes are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
