"""
Date resolution and age arithmetic.

Roster records arrive with dates typed by hand over several years, so the
parser accepts a handful of layouts and never raises: anything it cannot
read comes back as None and the engines treat it as "unknown".

Supported inputs:
    YYYY-MM-DD, MM/DD/YYYY, MM-DD-YYYY, MM.DD.YYYY, M/D/YY, MMDDYYYY
    and ISO-8601 date-times (e.g. "2024-01-05T00:00:00") as a fallback.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional, Union

from .config import TWO_DIGIT_YEAR_PIVOT, DISPLAY_DATE_FORMAT

logger = logging.getLogger(__name__)

DateLike = Union[str, date, None]

_SEPARATORS = re.compile(r"[/\-.]")
_DIGITS = re.compile(r"[0-9]+")
_EIGHT_DIGITS = re.compile(r"[0-9]{8}")


def _expand_year(segment: str) -> int:
    """Expand a one- or two-digit year segment using the configured pivot."""
    year = int(segment)
    if len(segment) <= 2:
        return year + (1900 if year >= TWO_DIGIT_YEAR_PIVOT else 2000)
    return year


def _build(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def parse_date(value: DateLike) -> Optional[date]:
    """
    Parse heterogeneous date text into a calendar date.

    A four-character first segment is read as the year (ISO ordering);
    otherwise month-day-year is assumed. Out-of-range months or days yield
    None instead of rolling over into the next month.

    Args:
        value: Date text, a date, or None

    Returns:
        The resolved date, or None when the input cannot be read
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    cleaned = str(value).strip()
    if not cleaned:
        return None

    parts = _SEPARATORS.split(cleaned)
    if len(parts) == 3 and all(_DIGITS.fullmatch(p) for p in parts):
        if len(parts[0]) == 4:
            y, m, d = parts
        else:
            m, d, y = parts
        return _build(_expand_year(y), int(m), int(d))

    if _EIGHT_DIGITS.fullmatch(cleaned):
        return _build(int(cleaned[4:]), int(cleaned[:2]), int(cleaned[2:4]))

    # Fallback for full ISO timestamps written by older exports
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        logger.debug("Unparseable date text: %r", cleaned)
        return None


def normalize_date(value: date) -> str:
    """Render a resolved date in the canonical MM/DD/YYYY form."""
    return DISPLAY_DATE_FORMAT.format(d=value)


def standardize_date_display(value: DateLike) -> str:
    """Canonical MM/DD/YYYY text, or the input unchanged if it won't parse."""
    parsed = parse_date(value)
    if parsed is None:
        return "" if value is None else str(value)
    return normalize_date(parsed)


def auto_format_date(text: str) -> str:
    """
    Insert slashes into digits as they are typed.

    Keeps at most eight digits: "0105" -> "01/05", "01052024" -> "01/05/2024".
    """
    digits = re.sub(r"\D", "", text or "")[:8]
    if len(digits) > 4:
        return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"
    if len(digits) > 2:
        return f"{digits[:2]}/{digits[2:]}"
    return digits


# =============================================================================
# AGE ARITHMETIC
# =============================================================================

def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end, never negative.

    Only the year and month take part: Jan 31 -> Feb 1 counts as one month.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    return max(0, months)


def years_between(start: date, end: date) -> int:
    """Birthday-style whole years from start to end, never negative."""
    if start > end:
        return 0
    age = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        age -= 1
    return max(0, age)


def format_detailed_age(dob: DateLike, target: DateLike) -> str:
    """Short age label such as "5m" or "2y 3m"; "N/A" if a date is unknown."""
    start = parse_date(dob)
    end = parse_date(target)
    if start is None or end is None:
        return "N/A"

    years, months = divmod(months_between(start, end), 12)
    if years == 0:
        return f"{months}m"
    return f"{years}y {months}m"
