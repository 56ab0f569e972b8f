"""Grouping Schemas — request/response models for task and event grouping endpoints.

Invariants:
    - Dates arrive as ISO strings and are parsed by Pydantic; malformed dates never reach core
    - GroupOut.key is the wire form of the tagged GroupKey; kind tells fixed from date keys

Design Decisions:
    - to_record() on input models: the route stays a thin adapter between schema and core
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from life_planner.core.domain_types import FixedKey, Group
from life_planner.core.records import Event, Task


class TaskIn(BaseModel):
    id: int
    title: str = Field(max_length=500)
    execution_date: date | None = None
    completed: bool = False
    order: int = 0

    def to_record(self) -> Task:
        return Task(
            id=self.id, title=self.title, execution_date=self.execution_date,
            completed=self.completed, order=self.order,
        )

    @classmethod
    def from_record(cls, task: Task) -> "TaskIn":
        return cls(
            id=task.id, title=task.title, execution_date=task.execution_date,
            completed=task.completed, order=task.order,
        )


class EventIn(BaseModel):
    id: int
    title: str = Field(max_length=500)
    start_datetime: datetime | date
    end_datetime: datetime | date | None = None
    all_day: bool = False
    category: str | None = None
    description: str | None = None

    def to_record(self) -> Event:
        return Event(**self.model_dump())

    @classmethod
    def from_record(cls, event: Event) -> "EventIn":
        return cls(
            id=event.id, title=event.title,
            start_datetime=event.start_datetime, end_datetime=event.end_datetime,
            all_day=event.all_day, category=event.category,
            description=event.description,
        )


class TaskGroupsRequest(BaseModel):
    """Tasks to group. today defaults to the configured timezone's current date."""
    tasks: list[TaskIn]
    today: date | None = None


class EventGroupsRequest(BaseModel):
    events: list[EventIn]
    today: date | None = None


class TaskGroupOut(BaseModel):
    key: str
    kind: Literal["fixed", "date"]
    title: str
    items: list[TaskIn]


class EventGroupOut(BaseModel):
    key: str
    kind: Literal["fixed", "date"]
    title: str
    items: list[EventIn]


class TaskGroupsResponse(BaseModel):
    groups: list[TaskGroupOut]


class EventGroupsResponse(BaseModel):
    groups: list[EventGroupOut]


class TodayTasksResponse(BaseModel):
    tasks: list[TaskIn]


def _kind(group: Group) -> Literal["fixed", "date"]:
    return "fixed" if isinstance(group.key, FixedKey) else "date"


def task_group_out(group: Group[Task]) -> TaskGroupOut:
    return TaskGroupOut(
        key=group.key.value, kind=_kind(group), title=group.title,
        items=[TaskIn.from_record(t) for t in group.items],
    )


def event_group_out(group: Group[Event]) -> EventGroupOut:
    return EventGroupOut(
        key=group.key.value, kind=_kind(group), title=group.title,
        items=[EventIn.from_record(e) for e in group.items],
    )
