"""Period Key Resolver — derives the calendar year a goal record belongs to.

Invariants:
    - Yearly/monthly goals: the explicit year field, returned as is
    - Weekly goals: the calendar year of week_start_date (its yyyy component),
      never an ISO week-numbering year — "2024-12-30" belongs to 2024
    - Pure; never consults a clock or any other external state
"""

from life_planner.core.domain_types import GoalPeriod
from life_planner.core.records import GoalRecord


def _year_of_iso_date(iso_date: str) -> int:
    return int(iso_date[:4])


def resolve_year(record: GoalRecord) -> int:
    """Owning year of a complete goal record."""
    if record.period is GoalPeriod.WEEKLY:
        return _year_of_iso_date(record.week_start_date)
    return record.year


def resolve_write_year(record: GoalRecord, viewed_year: int) -> int:
    """Owning year of a write payload that may omit its period fields.

    Partial updates carry only what changed. A weekly payload is owned by its
    week start and any year it carries is ignored; yearly and monthly payloads
    use their explicit year. Without either, the year being viewed is used.
    """
    if record.period is GoalPeriod.WEEKLY:
        if record.week_start_date:
            return _year_of_iso_date(record.week_start_date)
        return viewed_year
    if record.year is not None:
        return record.year
    return viewed_year
