"""Group Builder — assembles ordered, titled groups of tasks and events around today.

Invariants:
    - Tasks: [today, tomorrow, none, overdue, <future days ascending>, completed],
      every group emitted even when empty (consumers hide empty buckets themselves)
    - Events: [today, tomorrow, overdue, <future days ascending>], every empty group dropped
    - Completed tasks land only in the trailing completed group, whatever their date
    - Every other record lands in exactly one group; future groups keep input order
    - Events are bucketed by their start; the end never affects placement

Design Decisions:
    - One single-pass assembler shared by both variants; the empty-group policy is applied
      by each public builder, never inside the assembler (the two policies stay distinct)
    - Future groups sorted on their date key only — fixed groups are never sorted against them
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime, tzinfo
from typing import TypeVar

from life_planner.core.classify_date import (
    classification_keys, classify, day_key, to_calendar_day,
)
from life_planner.core.domain_types import (
    Category, DateKey, FixedKey, Group, GroupVariant, Locale,
)
from life_planner.core.group_titles import LocaleTitleFormatter
from life_planner.core.records import Event, Task
from life_planner.core.repository_protocols import GroupTitleFormatter

R = TypeVar("R")

TASK_FIXED_ORDER = (Category.TODAY, Category.TOMORROW, Category.NONE, Category.OVERDUE)
EVENT_FIXED_ORDER = (Category.TODAY, Category.TOMORROW, Category.OVERDUE)

_DEFAULT_TITLES = LocaleTitleFormatter(Locale.JA)


def _assemble(
    records: Iterable[R],
    today: date | datetime,
    variant: GroupVariant,
    fixed_order: tuple[Category, ...],
    date_of: Callable[[R], date | None],
    titles: GroupTitleFormatter,
) -> list[Group[R]]:
    """Classify each record once and route it to a fixed or per-day bucket."""
    today_day, today_key, tomorrow_key = classification_keys(today)
    fixed: dict[Category, list[R]] = {category: [] for category in fixed_order}
    by_day: dict[str, list[R]] = {}

    for record in records:
        value = date_of(record)
        category = classify(value, today_day, today_key, tomorrow_key)
        if category is Category.FUTURE:
            by_day.setdefault(day_key(value), []).append(record)
        else:
            fixed[category].append(record)

    groups = [
        Group(FixedKey(category), titles.fixed_title(category, variant), fixed[category])
        for category in fixed_order
    ]
    for key in sorted(by_day):
        day = date.fromisoformat(key)
        groups.append(Group(DateKey(day), titles.date_title(day), by_day[key]))
    return groups


def build_task_groups(
    tasks: Iterable[Task],
    today: date | datetime,
    titles: GroupTitleFormatter | None = None,
) -> list[Group[Task]]:
    """Group tasks by execution date. Empty groups are kept."""
    titles = titles or _DEFAULT_TITLES
    pending: list[Task] = []
    completed: list[Task] = []
    for task in tasks:
        (completed if task.completed else pending).append(task)

    groups = _assemble(
        pending, today, GroupVariant.TASKS, TASK_FIXED_ORDER,
        lambda task: task.execution_date, titles,
    )
    groups.append(Group(
        FixedKey(Category.COMPLETED),
        titles.fixed_title(Category.COMPLETED, GroupVariant.TASKS),
        completed,
    ))
    return groups


def build_event_groups(
    events: Iterable[Event],
    today: date | datetime,
    titles: GroupTitleFormatter | None = None,
    tz: tzinfo | None = None,
) -> list[Group[Event]]:
    """Group events by start day. Empty groups are dropped."""
    titles = titles or _DEFAULT_TITLES
    groups = _assemble(
        events, today, GroupVariant.EVENTS, EVENT_FIXED_ORDER,
        lambda event: to_calendar_day(event.start_datetime, tz), titles,
    )
    return [group for group in groups if not group.is_empty]


def select_today_tasks(
    tasks: Iterable[Task], today: date | datetime,
) -> list[Task]:
    """Incomplete tasks scheduled for today, in input order."""
    today_day, today_key, tomorrow_key = classification_keys(today)
    return [
        task for task in tasks
        if not task.completed
        and classify(task.execution_date, today_day, today_key, tomorrow_key)
        is Category.TODAY
    ]
