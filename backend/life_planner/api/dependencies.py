"""API Dependencies — process-wide collaborators injected into routes.

Invariants:
    - One goal store and one shard cache per process; the cache loads from that store
    - Routes receive collaborators only through Depends (overridable in tests)

Design Decisions:
    - lru_cache singletons, same pattern as get_settings (ADR: single-process uvicorn)
"""

from datetime import date, datetime
from functools import lru_cache

from fastapi import Depends

from life_planner.config import Settings, get_settings
from life_planner.core.group_titles import LocaleTitleFormatter
from life_planner.infrastructure.memory_store import InMemoryGoalStore
from life_planner.infrastructure.shard_cache import ShardCache, goal_shard_loader
from life_planner.services.coordinate_goal_write import GoalWriteCoordinator


@lru_cache
def get_goal_store() -> InMemoryGoalStore:
    return InMemoryGoalStore()


@lru_cache
def get_shard_cache() -> ShardCache:
    return ShardCache(goal_shard_loader(get_goal_store()))


def get_coordinator(
    store: InMemoryGoalStore = Depends(get_goal_store),
    cache: ShardCache = Depends(get_shard_cache),
) -> GoalWriteCoordinator:
    return GoalWriteCoordinator(store, cache)


def get_title_formatter(
    settings: Settings = Depends(get_settings),
) -> LocaleTitleFormatter:
    return LocaleTitleFormatter(settings.locale)


def resolve_today(today: date | None, settings: Settings) -> date:
    """Explicit today, else the current date in the configured timezone."""
    if today is not None:
        return today
    return datetime.now(settings.tzinfo).date()
