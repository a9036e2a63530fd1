"""Due date extraction from normalized task text."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from voice_tasks.logging_utils import get_logger

from .config import NEXT_WEEK_DAYS
from .exceptions import DateParseError

logger = get_logger(__name__)

SATURDAY = 5
SUNDAY = 6

_DATE_LEAD = r"(?:in|on|by|before|after)\s+"
_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*"
_DAY = r"\d{1,2}(?:st|nd|rd|th)?"
_WEEKDAY = r"(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday)"

_ORDINAL_SUFFIX = re.compile(r"(?<=\d)(?:st|nd|rd|th)\b")
_OFFSET = re.compile(r"(\d+)\s+(day|week|month|year)s?")


@dataclass(frozen=True)
class DatePattern:
    """A named date expression; group 1, when present, holds the date to parse."""

    name: str
    regex: re.Pattern[str]


DATE_PATTERNS: tuple[DatePattern, ...] = (
    DatePattern(
        "relative_day",
        re.compile(
            r"(?:tomorrow|today|next week|next month|this weekend|this week|this month)",
            re.IGNORECASE,
        ),
    ),
    DatePattern(
        "month_name",
        re.compile(
            _DATE_LEAD
            + r"("
            + _DAY + r"\s+" + _MONTH + r",?\s+\d{4}"
            + r"|"
            + _MONTH + r"\s+" + _DAY + r",?\s+\d{4}"
            + r")",
            re.IGNORECASE,
        ),
    ),
    DatePattern(
        "numeric",
        re.compile(_DATE_LEAD + r"(\d{1,2}/\d{1,2}/\d{4})", re.IGNORECASE),
    ),
    DatePattern(
        "weekday",
        re.compile(r"(?:on|this|next)\s+(" + _WEEKDAY + r")", re.IGNORECASE),
    ),
    DatePattern(
        "offset",
        re.compile(r"(?:in|after)\s+(\d+\s+(?:days?|weeks?|months?|years?))", re.IGNORECASE),
    ),
)


def resolve_relative_keyword(text: str, now: datetime) -> datetime | None:
    """
    Resolve the relative-day keywords found anywhere in the text.

    Keywords are checked in a fixed order regardless of which date pattern
    matched: tomorrow, today, next week, next month, this weekend.

    Args:
        text: Normalized text
        now: Current instant

    Returns:
        Resolved due date, or None if no keyword is present
    """
    if "tomorrow" in text:
        return now + timedelta(days=1)
    if "today" in text:
        return now
    if "next week" in text:
        return now + timedelta(days=NEXT_WEEK_DAYS)
    if "next month" in text:
        return now + relativedelta(months=1)
    if "this weekend" in text:
        weekday = now.weekday()
        days_until_weekend = 6 if weekday == SUNDAY else SATURDAY - weekday
        return now + timedelta(days=days_until_weekend)
    return None


def parse_captured_date(captured: str | None, now: datetime) -> datetime:
    """
    Turn a captured date expression into a datetime.

    Handles "N days/weeks/months/years" offsets, weekday names (next
    occurrence on or after today) and explicit month-name or M/D/YYYY dates.

    Args:
        captured: Text captured by a date pattern, or None
        now: Current instant

    Returns:
        Resolved due date

    Raises:
        DateParseError: If the expression is missing or cannot be resolved
    """
    if not captured:
        raise DateParseError("Date pattern captured no date expression")

    try:
        offset = _OFFSET.fullmatch(captured.strip())
        if offset:
            amount = int(offset.group(1))
            unit = offset.group(2)
            return now + relativedelta(**{f"{unit}s": amount})

        midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
        cleaned = _ORDINAL_SUFFIX.sub("", captured)
        return date_parser.parse(cleaned, default=midnight, dayfirst=False)
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"Could not parse date '{captured}': {e}") from e


def extract_due_date(text: str, now: datetime) -> datetime | None:
    """
    Extract a due date from normalized text.

    Patterns are tried in order. When one matches, the relative-day keywords
    win; otherwise its captured expression is parsed, and a failed parse moves
    on to the next pattern.

    Args:
        text: Normalized (lower-cased, trimmed) text
        now: Current instant

    Returns:
        The due date, or None if no date expression resolves
    """
    for pattern in DATE_PATTERNS:
        match = pattern.regex.search(text)
        if not match:
            continue

        logger.trace(f"Date pattern '{pattern.name}' matched '{match.group(0)}'")

        relative = resolve_relative_keyword(text, now)
        if relative is not None:
            return relative

        captured = match.group(1) if match.re.groups else None
        try:
            return parse_captured_date(captured, now)
        except DateParseError as e:
            logger.debug(f"Skipping date pattern '{pattern.name}': {e}")
            continue

    return None
