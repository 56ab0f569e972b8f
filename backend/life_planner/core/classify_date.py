"""Date Classifier — maps a record's date to a temporal Category relative to today.

Invariants:
    - Comparisons are calendar-date only; time-of-day is discarded before comparing
    - Rule order: None → none, today key → today, tomorrow key → tomorrow,
      earlier than today → overdue, otherwise future
    - Pure, total and deterministic for well-formed input

Design Decisions:
    - Keys compared as ISO strings first, then dates: mirrors how grouping keys are built,
      so a record's bucket and its group key can never disagree
    - Events always supply a start, so callers never reach the none rule for events
"""

from datetime import date, datetime, timedelta, tzinfo

from life_planner.core.domain_types import Category


def to_calendar_day(value: date | datetime, tz: tzinfo | None = None) -> date:
    """Truncate to a calendar date. Aware datetimes are first moved into tz, if given."""
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def day_key(value: date | datetime) -> str:
    """ISO yyyy-mm-dd key of the value's calendar day."""
    return to_calendar_day(value).isoformat()


def classification_keys(today: date | datetime) -> tuple[date, str, str]:
    """Midnight-normalized today plus the today/tomorrow day keys."""
    today_day = to_calendar_day(today)
    return (
        today_day,
        today_day.isoformat(),
        (today_day + timedelta(days=1)).isoformat(),
    )


def classify(
    value: date | datetime | None,
    today: date | datetime,
    today_key: str,
    tomorrow_key: str,
) -> Category:
    """Classify a date against today. See module invariants for rule order."""
    if value is None:
        return Category.NONE
    key = day_key(value)
    if key == today_key:
        return Category.TODAY
    if key == tomorrow_key:
        return Category.TOMORROW
    if to_calendar_day(value) < to_calendar_day(today):
        return Category.OVERDUE
    return Category.FUTURE
