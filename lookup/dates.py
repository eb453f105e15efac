# lookup/dates.py
"""Date reformatting for upstream license records.

Registries return dates as ISO-8601 strings, usually Socrata floating
timestamps such as ``2014-05-13T00:00:00.000``. The relay returns them as
``MM/DD/YYYY``.
"""

import re
from datetime import date
from datetime import datetime

US_DATE_FORMAT = "%m/%d/%Y"

# Leading calendar date of an ISO-8601 date or timestamp
ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:$|[T ])")


def parse_upstream_date(value: str) -> date | None:
    """Parse the calendar date out of an upstream date string.

    Only the leading ``YYYY-MM-DD`` is used; any time part or offset is
    ignored so that a floating timestamp never shifts to another day.

    Args:
        value: Upstream date string.

    Returns:
        The parsed date, or None if the value is not an ISO date.
    """
    match = ISO_DATE_PATTERN.match(value.strip())
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def to_us_date(value: str) -> str | None:
    """Reformat an upstream date string as ``MM/DD/YYYY``.

    Values already in ``MM/DD/YYYY`` form are returned unchanged.

    Returns:
        The reformatted string, or None if ``value`` is not a recognizable date.
    """
    parsed = parse_upstream_date(value)
    if parsed is not None:
        return parsed.strftime(US_DATE_FORMAT)

    try:
        datetime.strptime(value.strip(), US_DATE_FORMAT)
    except ValueError:
        return None
    return value.strip()
