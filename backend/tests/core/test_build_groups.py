"""Group Builder — verifies group order, membership and the two empty-group policies.

Tests:
    - Task groups: fixed order, ascending future days, trailing completed, empties kept
    - Event groups: fixed order, ascending future days, empties dropped
    - Every record in exactly one group; completed tasks only in completed
    - Events bucketed by start only
"""

from datetime import date, datetime

from life_planner.core.build_groups import (
    build_event_groups, build_task_groups, select_today_tasks,
)
from life_planner.core.domain_types import (
    Category, DateKey, FixedKey, GroupVariant, Locale,
)
from life_planner.core.group_titles import LocaleTitleFormatter
from life_planner.core.records import Event, Task

TODAY = date(2024, 6, 10)


def _keys(groups):
    return [g.key.value for g in groups]


def _ids(group):
    return [r.id for r in group.items]


def _scenario_tasks():
    return [
        Task(id=1, title="A", execution_date=None),
        Task(id=2, title="B", execution_date=date(2024, 6, 10)),
        Task(id=3, title="C", execution_date=date(2024, 6, 11)),
        Task(id=4, title="D", execution_date=date(2024, 6, 5)),
        Task(id=5, title="E", execution_date=date(2024, 6, 20)),
        Task(id=6, title="F", execution_date=date(2024, 6, 1), completed=True),
    ]


# --- Tasks -------------------------------------------------------------------

def test_task_scenario_groups_in_fixed_order():
    groups = build_task_groups(_scenario_tasks(), TODAY)
    assert _keys(groups) == [
        "today", "tomorrow", "none", "overdue", "2024-06-20", "completed",
    ]
    assert [_ids(g) for g in groups] == [[2], [3], [1], [4], [5], [6]]


def test_task_groups_keep_empty_buckets():
    groups = build_task_groups([], TODAY)
    assert _keys(groups) == ["today", "tomorrow", "none", "overdue", "completed"]
    assert all(g.is_empty for g in groups)


def test_completed_tasks_only_in_completed_group_whatever_their_date():
    tasks = [
        Task(id=1, title="done today", execution_date=TODAY, completed=True),
        Task(id=2, title="done undated", completed=True),
        Task(id=3, title="done future", execution_date=date(2024, 7, 1), completed=True),
    ]
    groups = build_task_groups(tasks, TODAY)
    assert _keys(groups) == ["today", "tomorrow", "none", "overdue", "completed"]
    assert _ids(groups[-1]) == [1, 2, 3]
    assert all(g.is_empty for g in groups[:-1])


def test_future_task_groups_sorted_ascending_and_unique():
    tasks = [
        Task(id=1, title="x", execution_date=date(2025, 1, 3)),
        Task(id=2, title="x", execution_date=date(2024, 6, 30)),
        Task(id=3, title="x", execution_date=date(2024, 12, 1)),
        Task(id=4, title="x", execution_date=date(2024, 6, 30)),
    ]
    groups = build_task_groups(tasks, TODAY)
    future = [g for g in groups if isinstance(g.key, DateKey)]
    keys = [g.key.value for g in future]
    assert keys == ["2024-06-30", "2024-12-01", "2025-01-03"]
    assert keys == sorted(set(keys))
    assert _ids(future[0]) == [2, 4]


def test_every_task_appears_in_exactly_one_group():
    tasks = _scenario_tasks() + [
        Task(id=7, title="G", execution_date=date(2024, 6, 20)),
        Task(id=8, title="H", execution_date=date(2023, 1, 1)),
    ]
    groups = build_task_groups(tasks, TODAY)
    seen = [tid for g in groups for tid in _ids(g)]
    assert sorted(seen) == sorted(t.id for t in tasks)
    completed = next(g for g in groups if g.key == FixedKey(Category.COMPLETED))
    assert _ids(completed) == [t.id for t in tasks if t.completed]


def test_task_groups_use_fixed_then_date_keys():
    groups = build_task_groups(_scenario_tasks(), TODAY)
    assert groups[0].key == FixedKey(Category.TODAY)
    assert groups[4].key == DateKey(date(2024, 6, 20))
    assert groups[5].key == FixedKey(Category.COMPLETED)


def test_task_group_titles_come_from_formatter():
    groups = build_task_groups(_scenario_tasks(), TODAY, LocaleTitleFormatter(Locale.EN))
    assert [g.title for g in groups] == [
        "Today", "Tomorrow", "No date", "Overdue", "Thu, Jun 20, 2024", "Completed",
    ]


def test_task_group_titles_default_to_japanese():
    groups = build_task_groups(_scenario_tasks(), TODAY)
    assert groups[0].title == "今日"
    assert groups[2].title == "日付なし"
    assert groups[4].title == "2024年6月20日(木)"


def test_select_today_tasks_skips_completed():
    tasks = [
        Task(id=1, title="a", execution_date=TODAY),
        Task(id=2, title="b", execution_date=TODAY, completed=True),
        Task(id=3, title="c", execution_date=date(2024, 6, 11)),
        Task(id=4, title="d"),
    ]
    assert [t.id for t in select_today_tasks(tasks, TODAY)] == [1]


# --- Events ------------------------------------------------------------------

def test_event_scenario_drops_empty_tomorrow():
    events = [
        Event(id=1, title="today", start_datetime=datetime(2024, 6, 10, 9, 0)),
        Event(id=2, title="past", start_datetime=datetime(2024, 6, 5, 19, 0)),
    ]
    groups = build_event_groups(events, TODAY)
    assert _keys(groups) == ["today", "overdue"]
    assert [_ids(g) for g in groups] == [[1], [2]]


def test_event_groups_order_with_future_days():
    events = [
        Event(id=1, title="f2", start_datetime=date(2024, 7, 2)),
        Event(id=2, title="tomorrow", start_datetime=datetime(2024, 6, 11, 10)),
        Event(id=3, title="f1", start_datetime=date(2024, 6, 15)),
        Event(id=4, title="today", start_datetime=date(2024, 6, 10), all_day=True),
        Event(id=5, title="past", start_datetime=date(2024, 5, 1)),
    ]
    groups = build_event_groups(events, TODAY)
    assert _keys(groups) == ["today", "tomorrow", "overdue", "2024-06-15", "2024-07-02"]


def test_event_groups_empty_input_yields_no_groups():
    assert build_event_groups([], TODAY) == []


def test_events_never_produce_none_or_completed_groups():
    events = [Event(id=1, title="x", start_datetime=date(2024, 6, 20))]
    groups = build_event_groups(events, TODAY)
    assert _keys(groups) == ["2024-06-20"]


def test_multi_day_event_bucketed_by_start_only():
    events = [
        Event(
            id=1, title="trip",
            start_datetime=datetime(2024, 6, 8, 9, 0),
            end_datetime=datetime(2024, 6, 12, 18, 0),
        ),
    ]
    groups = build_event_groups(events, TODAY)
    assert _keys(groups) == ["overdue"]


def test_event_overdue_title_reads_past():
    events = [Event(id=1, title="x", start_datetime=date(2024, 6, 1))]
    ja = build_event_groups(events, TODAY)
    en = build_event_groups(events, TODAY, LocaleTitleFormatter(Locale.EN))
    assert ja[0].title == "過去"
    assert en[0].title == "Past"


class _RecordingTitles:
    def __init__(self):
        self.calls = []

    def fixed_title(self, category, variant):
        self.calls.append((category, variant))
        return category.value.upper()

    def date_title(self, day):
        return f"day {day.isoformat()}"


def test_titles_never_leak_into_keys():
    titles = _RecordingTitles()
    groups = build_task_groups(_scenario_tasks(), TODAY, titles)
    assert _keys(groups)[4] == "2024-06-20"
    assert groups[4].title == "day 2024-06-20"
    assert (Category.COMPLETED, GroupVariant.TASKS) in titles.calls
