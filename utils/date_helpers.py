from datetime import date, datetime, timezone
from utils.constants import DATE_FORMAT, MONTH_FORMAT


def today_str() -> str:
    return date.today().strftime(DATE_FORMAT)


def current_month_str() -> str:
    return date.today().strftime(MONTH_FORMAT)


def now_iso() -> str:
    """UTC timestamp with millisecond precision, e.g. '2024-01-15T09:30:00.000Z'."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        return None


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def parse_month(month_str: str) -> date | None:
    """Return the first day of the given YYYY-MM month string."""
    if not month_str:
        return None
    try:
        return datetime.strptime(month_str, MONTH_FORMAT).date()
    except ValueError:
        return None


def prev_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 1:
        return format_month(d.replace(year=d.year - 1, month=12))
    return format_month(d.replace(month=d.month - 1))


def next_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 12:
        return format_month(d.replace(year=d.year + 1, month=1))
    return format_month(d.replace(month=d.month + 1))


def recent_months(count: int, end_month: str | None = None) -> list[str]:
    """Return `count` consecutive YYYY-MM strings, oldest first, ending at end_month."""
    month = end_month or current_month_str()
    months = []
    for _ in range(count):
        months.append(month)
        month = prev_month(month)
    months.reverse()
    return months


def friendly_month(month_str: str) -> str:
    """Convert YYYY-MM to e.g. '2024年1月'."""
    d = parse_month(month_str)
    if d is None:
        return month_str
    return f"{d.year}年{d.month}月"


def format_display_date(date_str: str) -> str:
    """Convert a YYYY-MM-DD storage string to e.g. '2024年1月15日'."""
    d = parse_date(date_str)
    if d is None:
        return date_str
    return f"{d.year}年{d.month}月{d.day}日"
