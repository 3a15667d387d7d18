"""RFC 2822 date-time parsing and formatting.

``email.utils.parsedate_to_datetime`` alone is lenient (it accepts dates
without a time, two-digit years, unknown zones...), so input is first
matched against the RFC 2822 grammar and the weekday, when present, is
checked against the date.
"""

import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
ZONES = ("UT", "GMT", "EST", "EDT", "CST", "CDT", "MST", "MDT", "PST", "PDT")

RFC2822_PATTERN = re.compile(
    r"^\s*(?:(?P<weekday>{weekdays})\s*,\s*)?"
    r"(?P<day>\d{{1,2}})\s+(?P<month>{months})\s+(?P<year>\d{{4}})\s+"
    r"(?P<hour>\d{{2}}):(?P<minute>\d{{2}})(?::(?P<second>\d{{2}}))?\s+"
    r"(?P<zone>[+-]\d{{4}}|{zones})\s*$".format(
        weekdays="|".join(WEEKDAYS),
        months="|".join(MONTHS),
        zones="|".join(ZONES),
    )
)


def parse_rfc2822(value: str) -> datetime:
    """Parse an RFC 2822 date-time into a timezone-aware datetime.

    ``-0000`` (no zone information) is read as UTC.

    Raises:
        ValueError: If the value is not an RFC 2822 date-time or names an
            impossible date, time or weekday.
    """
    match = RFC2822_PATTERN.match(value)
    if match is None:
        raise ValueError(f"not an RFC 2822 date-time: {value!r}")

    try:
        parsed = parsedate_to_datetime(value.strip())
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid RFC 2822 date-time {value!r}: {e}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    weekday = match.group("weekday")
    if weekday is not None and weekday != WEEKDAYS[parsed.weekday()]:
        raise ValueError(
            f"weekday {weekday} does not match date in {value!r} "
            f"(expected {WEEKDAYS[parsed.weekday()]})"
        )
    return parsed


def format_rfc2822(value: datetime) -> str:
    """Render a datetime in RFC 2822 form, e.g. ``Thu, 19 Dec 2024 00:00:00 +0000``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)
