"""In-Memory Goal Store — ids, per-year listing, partial updates, weekly slot rule."""

import pytest

from life_planner.core.domain_types import GoalPeriod
from life_planner.core.errors import GoalConflictError, ResourceNotFoundError
from life_planner.core.records import GoalRecord, GoalRef
from life_planner.infrastructure.memory_store import InMemoryGoalStore


@pytest.fixture
def store():
    return InMemoryGoalStore()


async def test_create_assigns_ids_and_weekly_year(store):
    yearly = await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="a", year=2024))
    weekly = await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="b", week_start_date="2024-12-30"),
    )
    assert (yearly.id, weekly.id) == (1, 2)
    assert weekly.year == 2024


async def test_list_by_year_partitions_periods(store):
    await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="y24", year=2024))
    await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="y25", year=2025))
    await store.create(GoalRecord(period=GoalPeriod.MONTHLY, title="m9", year=2024, month=9))
    await store.create(GoalRecord(period=GoalPeriod.MONTHLY, title="m2", year=2024, month=2))
    await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="w", week_start_date="2024-03-04"),
    )

    goals = await store.list_by_year(2024)
    assert [g.title for g in goals.yearly] == ["y24"]
    assert [g.title for g in goals.monthly] == ["m2", "m9"]
    assert [g.title for g in goals.weekly] == ["w"]


async def test_available_years_newest_first_excluding_weekly(store):
    await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="a", year=2023))
    await store.create(GoalRecord(period=GoalPeriod.MONTHLY, title="b", year=2025, month=1))
    await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="c", year=2023))
    await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="w", week_start_date="2030-01-07"),
    )
    assert await store.list_available_years() == [2025, 2023]


async def test_update_merges_only_set_fields(store):
    goal = await store.create(
        GoalRecord(period=GoalPeriod.MONTHLY, title="old", year=2024, month=5),
    )
    updated = await store.update(
        GoalRecord(period=GoalPeriod.MONTHLY, title=None, id=goal.id, year=2025),
    )
    assert (updated.title, updated.year, updated.month) == ("old", 2025, 5)


async def test_update_weekly_start_moves_year(store):
    goal = await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="w", week_start_date="2024-06-03"),
    )
    moved = await store.update(
        GoalRecord(period=GoalPeriod.WEEKLY, title=None, id=goal.id, week_start_date="2025-01-06"),
    )
    assert moved.year == 2025
    assert (await store.list_by_year(2024)).weekly == []


async def test_weekly_year_never_taken_from_payload(store):
    goal = await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="w", year=2025, week_start_date="2024-12-30"),
    )
    assert goal.year == 2024

    kept = await store.update(
        GoalRecord(period=GoalPeriod.WEEKLY, title=None, id=goal.id, year=2026),
    )
    assert (kept.year, kept.week_start_date) == (2024, "2024-12-30")
    assert [g.id for g in (await store.list_by_year(2024)).weekly] == [goal.id]
    assert (await store.list_by_year(2026)).weekly == []


async def test_one_weekly_goal_per_week(store):
    await store.create(
        GoalRecord(period=GoalPeriod.WEEKLY, title="w1", week_start_date="2024-06-03"),
    )
    with pytest.raises(GoalConflictError):
        await store.create(
            GoalRecord(period=GoalPeriod.WEEKLY, title="w2", week_start_date="2024-06-03"),
        )


async def test_toggle_and_delete(store):
    goal = await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="a", year=2024))
    ref = GoalRef(GoalPeriod.YEARLY, goal.id)
    assert (await store.toggle_achievement(ref)).achieved is True
    assert (await store.toggle_achievement(ref)).achieved is False

    await store.delete(ref)
    with pytest.raises(ResourceNotFoundError):
        await store.delete(ref)


async def test_returned_records_are_copies(store):
    goal = await store.create(GoalRecord(period=GoalPeriod.YEARLY, title="a", year=2024))
    goal.title = "mutated"
    assert (await store.list_by_year(2024)).yearly[0].title == "a"
