"""Records — plain domain records consumed by the classifier, grouper and goal coordinator.

Invariants:
    - Task.execution_date is optional; Event.start_datetime is mandatory
    - GoalRecord carries year (yearly/monthly) or week_start_date (weekly), possibly both
    - GoalRef is the id-only handle — it never knows the owning year

Design Decisions:
    - dataclasses over ORM models: the core never touches persistence (ADR: functional core)
    - Event.end_datetime kept for display collaborators; bucket placement ignores it
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from life_planner.core.domain_types import GoalPeriod


@dataclass
class Task:
    id: int
    title: str
    execution_date: date | None = None
    completed: bool = False
    order: int = 0


@dataclass
class Event:
    id: int
    title: str
    start_datetime: date | datetime
    end_datetime: date | datetime | None = None
    all_day: bool = False
    category: str | None = None
    description: str | None = None


@dataclass
class GoalRecord:
    """A yearly, monthly or weekly goal. id is None until the store assigns one."""
    period: GoalPeriod
    title: str
    id: int | None = None
    year: int | None = None
    month: int | None = None
    week_start_date: str | None = None
    target_date: str | None = None
    achieved: bool = False


@dataclass(frozen=True)
class GoalRef:
    """Identifier-only handle used by delete and toggle."""
    period: GoalPeriod
    id: int


@dataclass
class YearGoals:
    """Contents of one goals shard."""
    year: int
    yearly: list[GoalRecord] = field(default_factory=list)
    monthly: list[GoalRecord] = field(default_factory=list)
    weekly: list[GoalRecord] = field(default_factory=list)
