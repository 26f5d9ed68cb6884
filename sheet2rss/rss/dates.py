"""Best-effort parsing of the free-form dates found in spreadsheet rows."""

import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

logger = logging.getLogger(__name__)

# Full ISO-8601 timestamps only; bare or compact dates are not accepted
_ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")

# The syslog stamp has no year and is completed from the reference time
_STAMP_LAYOUT = "%b %d %H:%M:%S"
_NUMERIC_LAYOUT = "%m/%d/%Y"  # 1/2/2006 and 01/02/2006


def _parse_iso(value: str) -> datetime | None:
    if not _ISO_TIMESTAMP.match(value):
        return None
    try:
        # Convert Z to +00:00 for fromisoformat on older interpreters
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _parse_stamp(value: str, now: datetime) -> datetime | None:
    try:
        # Validate against a leap year so "Feb 29" stamps are not rejected
        parsed = datetime.strptime(f"2000 {value}", f"%Y {_STAMP_LAYOUT}")
    except ValueError:
        return None
    try:
        return parsed.replace(year=now.year)
    except ValueError:
        return None


def _parse_rfc822(value: str) -> datetime | None:
    # Covers RFC 822 and RFC 1123, US zone names and numeric offsets
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def _parse_numeric(value: str) -> datetime | None:
    try:
        return datetime.strptime(value, _NUMERIC_LAYOUT)
    except ValueError:
        return None


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_date(value: str, now: datetime | None = None) -> datetime:
    """
    Parse a spreadsheet date string into an aware UTC datetime.

    Known layouts are tried in order: ISO-8601 timestamps (with or without
    fractional seconds), the syslog stamp ``Jan _2 15:04:05`` (current year
    assumed), RFC 822 / RFC 1123 with a zone name or numeric offset, and
    ``M/D/YYYY``. Values without zone information are taken as UTC.

    Args:
        value: Raw cell content
        now: Reference time, defaults to the current UTC time

    Returns:
        The parsed instant in UTC, or ``now`` when no layout matches
    """
    now = now or datetime.now(timezone.utc)
    text = value.strip()

    parsed = (
        _parse_iso(text)
        or _parse_stamp(text, now)
        or _parse_rfc822(text)
        or _parse_numeric(text)
    )

    if parsed is None:
        logger.warning(f"Unrecognised date {value!r}, using current time")
        return now

    return _to_utc(parsed)


def format_pub_date(value: datetime) -> str:
    """Format a datetime as an RSS ``pubDate`` (RFC 1123, numeric zone)."""
    return format_datetime(_to_utc(value))
