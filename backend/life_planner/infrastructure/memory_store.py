"""In-Memory Goal Store — default GoalStore for single-process deployments and tests.

Invariants:
    - Ids are assigned per store, monotonically, starting at 1
    - Weekly goals take their year from week_start_date, on create and on every update;
      a year in the payload never overrides it. At most one goal per week start
    - update() merges only the fields the payload sets (partial update)
    - Unknown ids raise ResourceNotFoundError

Design Decisions:
    - Instance state over module dicts: each test or app instance gets its own store
      (ADR: no persistence layer in this service; a real store plugs in via GoalStore)
"""

import itertools
from dataclasses import replace

from life_planner.core.domain_types import GoalPeriod
from life_planner.core.errors import GoalConflictError, ResourceNotFoundError
from life_planner.core.records import GoalRecord, GoalRef, YearGoals
from life_planner.core.resolve_period import resolve_year

_MERGEABLE = ("title", "year", "month", "week_start_date", "target_date")


class InMemoryGoalStore:
    """GoalStore backed by per-period dicts."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._goals: dict[GoalPeriod, dict[int, GoalRecord]] = {
            period: {} for period in GoalPeriod
        }

    async def create(self, record: GoalRecord) -> GoalRecord:
        stored = replace(record, id=next(self._ids))
        if stored.period is GoalPeriod.WEEKLY:
            stored.year = resolve_year(stored)
            self._check_week_free(stored)
        self._goals[stored.period][stored.id] = stored
        return replace(stored)

    async def update(self, record: GoalRecord) -> GoalRecord:
        current = self._get(GoalRef(record.period, record.id))
        merged = replace(current)
        for name in _MERGEABLE:
            value = getattr(record, name)
            if value is not None:
                setattr(merged, name, value)
        if merged.period is GoalPeriod.WEEKLY:
            merged.year = resolve_year(merged)
            self._check_week_free(merged)
        self._goals[merged.period][merged.id] = merged
        return replace(merged)

    async def delete(self, ref: GoalRef) -> None:
        self._get(ref)
        del self._goals[ref.period][ref.id]

    async def toggle_achievement(self, ref: GoalRef) -> GoalRecord:
        goal = self._get(ref)
        goal.achieved = not goal.achieved
        return replace(goal)

    async def list_by_year(self, year: int) -> YearGoals:
        def of(period: GoalPeriod) -> list[GoalRecord]:
            return [
                replace(g) for g in self._goals[period].values() if g.year == year
            ]

        return YearGoals(
            year=year,
            yearly=of(GoalPeriod.YEARLY),
            monthly=sorted(of(GoalPeriod.MONTHLY), key=lambda g: (g.month or 0, g.id)),
            weekly=sorted(of(GoalPeriod.WEEKLY), key=lambda g: g.week_start_date),
        )

    async def list_available_years(self) -> list[int]:
        """Distinct years holding yearly or monthly goals, newest first."""
        years = {
            g.year
            for period in (GoalPeriod.YEARLY, GoalPeriod.MONTHLY)
            for g in self._goals[period].values()
        }
        return sorted(years, reverse=True)

    def _get(self, ref: GoalRef) -> GoalRecord:
        goal = self._goals[ref.period].get(ref.id)
        if goal is None:
            raise ResourceNotFoundError(f"{ref.period.value} goal", str(ref.id))
        return goal

    def _check_week_free(self, record: GoalRecord) -> None:
        for other in self._goals[GoalPeriod.WEEKLY].values():
            if other.id != record.id and other.week_start_date == record.week_start_date:
                raise GoalConflictError(
                    f"Only one weekly goal is allowed for the week starting "
                    f"{record.week_start_date}",
                )
