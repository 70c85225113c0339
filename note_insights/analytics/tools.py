"""Activity analytics over a note collection.

This module computes completion statistics and the calendar heatmap
series for a caller-supplied list of notes. Every call is a single pass
over the input; nothing is cached between calls.

Reminder timestamps come from clients that may or may not include a UTC
offset, so each one is parsed as RFC 3339 first and as a naive local
date-time second. A timestamp that fits neither pattern only drops the
reminder from the heatmap; it still counts towards the statistics.

Example:
    >>> result = aggregate([Note(id="1", reminders=[
    ...     Reminder(completed=True, updated_at="2023-10-27T10:00:00Z")])])
    >>> result.activity_data[0].date
    '2023-10-27'
"""

import math
import re
from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone

from note_insights.analytics.models import ActivityDatum, CalculationResult, Stats
from note_insights.notes.models import Note, Reminder

MAX_LEVEL = 4

RFC3339_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(\.\d+)?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))$"
)
NAIVE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(\.\d+)?$")


# =============================================================================
# Helper Functions
# =============================================================================


def _build_datetime(
    parts: tuple[str | None, ...], tzinfo: timezone | None = None
) -> datetime | None:
    """Build a datetime from matched components, or None if out of range."""
    year, month, day, hour, minute, second = (int(p) for p in parts[:6])
    fraction = parts[6]
    microsecond = int(fraction[1:7].ljust(6, "0")) if fraction else 0
    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    except ValueError:
        return None


def parse_rfc3339(value: str) -> datetime | None:
    """Parse an RFC 3339 timestamp carrying a UTC offset.

    Args:
        value: Timestamp such as ``2023-10-27T10:00:00Z``

    Returns:
        Offset-aware datetime, or None if the value is not RFC 3339

    Examples:
        >>> parse_rfc3339("2023-10-27T10:00:00+09:00").utcoffset()
        datetime.timedelta(seconds=32400)
        >>> parse_rfc3339("2023-10-27T10:00:00") is None
        True
    """
    match = RFC3339_PATTERN.match(value.strip())
    if not match:
        return None

    groups = match.groups()
    if groups[7]:
        tz = timezone.utc
    else:
        hours, minutes = int(groups[9]), int(groups[10])
        if hours > 23 or minutes > 59:
            return None
        offset = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-offset if groups[8] == "-" else offset)
    return _build_datetime(groups[:7], tz)


def parse_naive(value: str) -> datetime | None:
    """Parse a local date-time without offset (``YYYY-MM-DDTHH:MM:SS[.fff]``).

    Examples:
        >>> parse_naive("2023-10-27T10:00:00.123")
        datetime.datetime(2023, 10, 27, 10, 0, 0, 123000)
        >>> parse_naive("yesterday") is None
        True
    """
    match = NAIVE_PATTERN.match(value.strip())
    if not match:
        return None
    return _build_datetime(match.groups())


def parse_activity_date(value: str | None) -> date | None:
    """Resolve a reminder timestamp to the calendar day it falls on.

    The day is taken as written; no timezone conversion is applied.

    Args:
        value: Timestamp string, or None

    Returns:
        Calendar date, or None if the value fits neither timestamp pattern
    """
    if not value:
        return None
    parsed = parse_rfc3339(value) or parse_naive(value)
    return parsed.date() if parsed else None


def effective_timestamp(reminder: Reminder) -> str | None:
    """Pick the timestamp a completed reminder is attributed by.

    ``updated_at`` wins over ``reminder_time`` when both are present.
    """
    return reminder.updated_at or reminder.reminder_time


def activity_level(count: int) -> int:
    """Bucket a day's completed-reminder count into a heatmap level.

    Examples:
        >>> [activity_level(n) for n in (1, 2, 3, 4, 5, 7, 8, 30)]
        [1, 1, 2, 2, 3, 4, 4, 4]
    """
    return min(MAX_LEVEL, math.ceil(count / 2))


def completion_rate(completed: int, total: int) -> float:
    """Completed share of reminders as a percentage (0.0 without reminders)."""
    if total == 0:
        return 0.0
    return completed / total * 100


# =============================================================================
# Main Operation
# =============================================================================


def aggregate(notes: Iterable[Note]) -> CalculationResult:
    """Compute completion statistics and the activity series for notes.

    Never raises on missing or malformed optional fields: such fields
    simply do not contribute.

    Args:
        notes: The caller's note collection

    Returns:
        CalculationResult with stats and activity data sorted by date
    """
    total_notes = 0
    total_reminders = 0
    completed_reminders = 0
    tags: set[str] = set()
    by_day: Counter[str] = Counter()

    for note in notes:
        total_notes += 1
        tags.update(note.tags or [])

        for reminder in note.reminders or []:
            total_reminders += 1
            if not reminder.completed:
                continue
            completed_reminders += 1

            day = parse_activity_date(effective_timestamp(reminder))
            if day is not None:
                by_day[day.isoformat()] += 1

    activity_data = [
        ActivityDatum(date=day, count=count, level=activity_level(count))
        for day, count in sorted(by_day.items())
    ]

    stats = Stats(
        total_notes=total_notes,
        total_reminders=total_reminders,
        completed_reminders=completed_reminders,
        completion_rate=completion_rate(completed_reminders, total_reminders),
        tags_used=len(tags),
    )

    return CalculationResult(stats=stats, activity_data=activity_data)
