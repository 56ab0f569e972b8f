"""Revalidation Plan — decides which cache shards a goal write makes stale.

Invariants:
    - create/update know the owning year: refresh goals(owning), and goals(viewed) only
      when it differs — the same shard is never listed twice
    - delete/toggle only know an id: refresh goals(viewed) and nothing else for goals
    - create/update/delete can change which years hold goals: available-years refreshed too
    - toggle only flips achievement: available-years untouched
    - Pure; the returned order is the order refreshes are issued in

Design Decisions:
    - A delete/toggle of a goal owned by another year leaves that year's shard stale.
      Recovering the year would need a read before the write; left as a known gap,
      consumers refresh the other year when they navigate to it
"""

from life_planner.core.domain_types import GoalOperation, ShardKey

_YEAR_AWARE = frozenset({GoalOperation.CREATE, GoalOperation.UPDATE})
_CHANGES_YEAR_SET = frozenset({
    GoalOperation.CREATE, GoalOperation.UPDATE, GoalOperation.DELETE,
})


def plan_goal_revalidation(
    operation: GoalOperation,
    viewed_year: int,
    owning_year: int | None = None,
) -> list[ShardKey]:
    """Shards to refresh after a goal write. owning_year is ignored for delete/toggle."""
    shards: list[ShardKey] = []
    if operation in _YEAR_AWARE and owning_year is not None:
        shards.append(ShardKey.goals(owning_year))
        if owning_year != viewed_year:
            shards.append(ShardKey.goals(viewed_year))
    else:
        shards.append(ShardKey.goals(viewed_year))

    if operation in _CHANGES_YEAR_SET:
        shards.append(ShardKey.available_years())
    return shards
