"""Domain Types — rich types that replace bare strings across the planner core.

Invariants:
    - Category, GoalPeriod, GoalOperation, EntityKind, Locale are str Enums — no raw string matching
    - GroupKey is a tagged variant: FixedKey(category) | DateKey(iso) — never a bare string
    - ShardKey identifies one cache partition; year is None only for non-period shards
    - All value types are frozen (hashable, usable as dict keys)

Design Decisions:
    - FixedKey/DateKey over raw strings: a category name can never collide with a date key,
      and only DateKeys are ever sorted (ADR: group ordering is structural, not lexical)
    - str Enums: serialize to JSON without custom encoders (ADR: API payloads are JSON)
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


# ─── Enums ───────────────────────────────────────────────────────

class Category(str, Enum):
    """Temporal bucket of a dated record relative to today."""
    NONE = "none"
    TODAY = "today"
    TOMORROW = "tomorrow"
    OVERDUE = "overdue"
    FUTURE = "future"
    COMPLETED = "completed"


class GroupVariant(str, Enum):
    """Which record family a group belongs to — titles differ per variant."""
    TASKS = "tasks"
    EVENTS = "events"


class GoalPeriod(str, Enum):
    """Goal granularity. Yearly/monthly carry a year; weekly carries a week start."""
    YEARLY = "yearly"
    MONTHLY = "monthly"
    WEEKLY = "weekly"


class GoalOperation(str, Enum):
    """Write operations that trigger shard revalidation."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    TOGGLE = "toggle"


class EntityKind(str, Enum):
    """Cache partition families."""
    GOALS = "goals"
    AVAILABLE_YEARS = "available-years"


class Locale(str, Enum):
    """Supported title locales."""
    JA = "ja"
    EN = "en"


# ─── Group keys ──────────────────────────────────────────────────

@dataclass(frozen=True)
class FixedKey:
    """Key of a fixed-category bucket (today, tomorrow, none, overdue, completed)."""
    category: Category

    @property
    def value(self) -> str:
        return self.category.value


@dataclass(frozen=True)
class DateKey:
    """Key of a future bucket — one calendar day."""
    day: date

    @property
    def value(self) -> str:
        return self.day.isoformat()


GroupKey = FixedKey | DateKey


@dataclass
class Group(Generic[T]):
    """Ordered, titled bucket of records."""
    key: GroupKey
    title: str
    items: list[T]

    @property
    def is_empty(self) -> bool:
        return not self.items


# ─── Shards ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class ShardKey:
    """Addressable cache partition: (entity kind, year)."""
    entity_kind: EntityKind
    year: int | None = None

    @classmethod
    def goals(cls, year: int) -> "ShardKey":
        return cls(EntityKind.GOALS, year)

    @classmethod
    def available_years(cls) -> "ShardKey":
        return cls(EntityKind.AVAILABLE_YEARS)

    def __str__(self) -> str:
        if self.year is None:
            return self.entity_kind.value
        return f"{self.entity_kind.value}:{self.year}"
