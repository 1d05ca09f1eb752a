"""Parse and compare the Romanian dates shown on the infoarena monitor.

The monitor prints submission times like ``1 apr 25 13:06:35``: day of month,
lowercase Romanian month abbreviation, two-digit year and a 24h clock time.
"""
from __future__ import annotations

from datetime import datetime

from tracker.errors import FormatError

_MONTHS = {
    'ian': 1,
    'feb': 2,
    'mar': 3,
    'apr': 4,
    'mai': 5,
    'iun': 6,
    'iul': 7,
    'aug': 8,
    'sep': 9,
    'oct': 10,
    'nov': 11,
    'dec': 12,
}


def parse_infoarena_date(value: str) -> datetime:
    """Convert a monitor date string to a naive datetime.

    Raises:
        FormatError: if the string is not made of exactly four space-separated
            tokens, the month is unknown, or a numeric part is invalid.
    """
    parts = value.split(' ')
    if len(parts) != 4:
        raise FormatError(f"invalid date format: {value!r}")

    day, month_abbrev, year, clock = parts
    month = _MONTHS.get(month_abbrev)
    if month is None:
        raise FormatError(f"invalid month: {month_abbrev!r}")

    try:
        return datetime.strptime(f'{day} {month} {year} {clock}', '%d %m %y %H:%M:%S')
    except ValueError as e:
        raise FormatError(f"invalid date {value!r}: {e}") from e


def compare_infoarena_dates(a: str, b: str) -> int:
    """Return -1, 0 or 1 ordering two monitor dates.

    If either side fails to parse the result is 0, which means "no ordering
    information" rather than true equality.
    """
    try:
        ta = parse_infoarena_date(a)
        tb = parse_infoarena_date(b)
    except FormatError:
        return 0
    if ta < tb:
        return -1
    if ta > tb:
        return 1
    return 0
