"""Boundary Protocols — contracts between the planner core and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store and cache IO accessed through Protocol types
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance (ADR: testability)
    - RevalidationPort replaces a process-wide "refresh by key" cache singleton:
      the coordinator is handed its port, so tests pass a fake one
    - Async in Protocol: store and port do IO, but core pure functions that plan around
      them are never async themselves
"""

from datetime import date
from typing import Protocol

from life_planner.core.domain_types import Category, GroupVariant, ShardKey
from life_planner.core.records import GoalRecord, GoalRef, YearGoals


class GoalStore(Protocol):
    """Contract for goal persistence — implemented by shell."""
    async def create(self, record: GoalRecord) -> GoalRecord: ...
    async def update(self, record: GoalRecord) -> GoalRecord: ...
    async def delete(self, ref: GoalRef) -> None: ...
    async def toggle_achievement(self, ref: GoalRef) -> GoalRecord: ...
    async def list_by_year(self, year: int) -> YearGoals: ...
    async def list_available_years(self) -> list[int]: ...


class RevalidationPort(Protocol):
    """Marks a shard stale and refetches it. May be called concurrently."""
    async def invalidate(self, shard: ShardKey) -> None: ...


class GroupTitleFormatter(Protocol):
    """Supplies Group.title — never consulted for Group.key."""
    def fixed_title(self, category: Category, variant: GroupVariant) -> str: ...
    def date_title(self, day: date) -> str: ...
