"""Text formatting helpers for result subtitles."""

import calendar
import html
import logging
import re
from datetime import UTC, datetime
from decimal import ROUND_HALF_EVEN, Decimal

logger = logging.getLogger(__name__)

ELAPSED_UNKNOWN = "unknown"
JUST_NOW = "Just now"

# Largest threshold first
_COUNT_SUFFIXES = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)
_ONE_DECIMAL = Decimal("0.1")

# Zero-padded fields and a mandatory offset
_TIMESTAMP_SHAPE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:?\d{2})", re.ASCII
)
_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)


def decode_entities(text: str) -> str:
    """Replace HTML/XML character references with their literal characters.

    "Rock &amp; Roll" -> "Rock & Roll"
    """
    try:
        return html.unescape(text)
    except (TypeError, ValueError):
        return text


def format_count(count: int) -> str:
    """Format a count with a K/M/B suffix.

    Values are rounded to at most one decimal place and a trailing ".0" is
    dropped, so 1500 -> "1.5K" and 1000 -> "1K". Counts below 1,000 are
    returned as-is.
    """
    count = max(count, 0)
    for threshold, suffix in _COUNT_SUFFIXES:
        if count >= threshold:
            value = (Decimal(count) / Decimal(threshold)).quantize(
                _ONE_DECIMAL, rounding=ROUND_HALF_EVEN
            )
            text = f"{value:,.1f}"
            if text.endswith(".0"):
                text = text[:-2]
            return f"{text}{suffix}"
    return str(count)


def parse_timestamp(timestamp: str) -> datetime | None:
    """Parse an ISO 8601 timestamp that carries an explicit UTC offset.

    Returns:
        Timezone-aware datetime, or None if the value does not parse
    """
    if not isinstance(timestamp, str) or not _TIMESTAMP_SHAPE.fullmatch(timestamp):
        return None
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(timestamp, fmt)
        except (TypeError, ValueError):
            continue
    return None


def _add_months(moment: datetime, months: int) -> datetime:
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def calendar_difference(start: datetime, end: datetime) -> tuple[int, int, int, int, int]:
    """Calendar difference between two aware datetimes.

    Returns:
        (years, months, days, hours, minutes); all zero when end precedes start
    """
    start = start.astimezone(UTC)
    end = end.astimezone(UTC)
    if end <= start:
        return 0, 0, 0, 0, 0

    total_months = (end.year - start.year) * 12 + (end.month - start.month)
    anchor = _add_months(start, total_months)
    while total_months > 0 and anchor > end:
        total_months -= 1
        anchor = _add_months(start, total_months)

    years, months = divmod(total_months, 12)
    remainder = end - anchor
    hours, seconds = divmod(remainder.seconds, 3600)
    return years, months, remainder.days, hours, seconds // 60


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'s' if value > 1 else ''} ago"


def format_elapsed(timestamp: str, now: datetime | None = None) -> str:
    """Describe how long ago a timestamp was, e.g. "3 days ago".

    The largest non-zero unit wins (year > month > day > hour > minute).
    Day differences between 14 and 31 are reported in whole weeks.

    Args:
        timestamp: ISO 8601 timestamp with an explicit offset,
            e.g. "2024-01-15T10:30:00Z"
        now: Reference time, defaults to the current time

    Returns:
        Relative time phrase, "Just now" when every unit is zero, or
        "unknown" when the timestamp cannot be parsed
    """
    published = parse_timestamp(timestamp)
    if published is None:
        logger.debug("Unparsable timestamp: %r", timestamp)
        return ELAPSED_UNKNOWN

    years, months, days, hours, minutes = calendar_difference(
        published, now or datetime.now(UTC)
    )

    if years > 0:
        return _plural(years, "year")
    if months > 0:
        return _plural(months, "month")
    if days > 0:
        if 14 <= days <= 31:
            return _plural(days // 7, "week")
        return _plural(days, "day")
    if hours > 0:
        return _plural(hours, "hour")
    if minutes > 0:
        return _plural(minutes, "minute")
    return JUST_NOW
