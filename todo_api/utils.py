import logging
import uuid
from datetime import date, datetime, time, timezone


# Custom logging formatter to support colors
class ColoredFormatter(logging.Formatter):
    # Define color codes
    COLORS = {
        'DEBUG': '\033[94m',   # Blue
        'INFO': '\033[92m',    # Green
        'WARNING': '\033[93m', # Yellow
        'ERROR': '\033[91m',   # Red
        'CRITICAL': '\033[95m' # Magenta
    }
    RESET = '\033[0m'  # Reset color

    def format(self, record):
        # Add color to the log level name
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"

        return super().format(record)


def new_id():
    """Opaque primary key for users, task lists and tasks"""
    return uuid.uuid4().hex


def now_utc():
    """Returns current datetime in UTC (naive, as stored in the database)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def ensure_naive_utc(dt):
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already"""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def format_datetime(dt):
    """ISO-8601 with millisecond precision and a Z suffix, or None"""
    if dt is None:
        return None
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"


def parse_datetime(value):
    """
    Parse an ISO date or datetime string into a naive UTC datetime.

    A bare date (YYYY-MM-DD) is midnight of that day. Raises ValueError
    when the value cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")
    text = value.strip()
    if text.endswith('Z') or text.endswith('z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}")
    return ensure_naive_utc(parsed)


def parse_date(value):
    """
    Calendar date from YYYY-MM-DD or a full ISO datetime (its UTC day), else None.

    The whole value must parse; trailing text is not ignored.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parse_datetime(text).date()
    except ValueError:
        return None


def day_bounds(day):
    """Inclusive [00:00:00.000, 23:59:59.999] range covering a calendar day"""
    start = datetime.combine(day, time.min)
    end = datetime.combine(day, time(23, 59, 59, 999000))
    return start, end
