"""Grouping Routes — task and event grouping around today.

Invariants:
    - Routes never classify or sort themselves — build_*_groups does
    - Event starts carrying an offset are bucketed in the configured timezone

Design Decisions:
    - POST with the records in the body: the records live in the client's store,
      this service only partitions them
"""

from fastapi import APIRouter, Depends

from life_planner.api.dependencies import get_title_formatter, resolve_today
from life_planner.config import Settings, get_settings
from life_planner.core.build_groups import (
    build_event_groups, build_task_groups, select_today_tasks,
)
from life_planner.core.group_titles import LocaleTitleFormatter
from life_planner.schemas.grouping import (
    EventGroupsRequest, EventGroupsResponse, TaskGroupsRequest,
    TaskGroupsResponse, TaskIn, TodayTasksResponse,
    event_group_out, task_group_out,
)

router = APIRouter(prefix="/api/v1", tags=["grouping"])


@router.post("/tasks/groups", response_model=TaskGroupsResponse)
async def group_tasks(
    body: TaskGroupsRequest,
    settings: Settings = Depends(get_settings),
    titles: LocaleTitleFormatter = Depends(get_title_formatter),
):
    """Tasks grouped as today, tomorrow, no date, overdue, future days, completed."""
    today = resolve_today(body.today, settings)
    groups = build_task_groups(
        [t.to_record() for t in body.tasks], today, titles,
    )
    return TaskGroupsResponse(groups=[task_group_out(g) for g in groups])


@router.post("/tasks/today", response_model=TodayTasksResponse)
async def today_tasks(
    body: TaskGroupsRequest, settings: Settings = Depends(get_settings),
):
    """Incomplete tasks scheduled for today."""
    today = resolve_today(body.today, settings)
    tasks = select_today_tasks([t.to_record() for t in body.tasks], today)
    return TodayTasksResponse(tasks=[TaskIn.from_record(t) for t in tasks])


@router.post("/events/groups", response_model=EventGroupsResponse)
async def group_events(
    body: EventGroupsRequest,
    settings: Settings = Depends(get_settings),
    titles: LocaleTitleFormatter = Depends(get_title_formatter),
):
    """Events grouped by start day. Empty groups are omitted."""
    today = resolve_today(body.today, settings)
    groups = build_event_groups(
        [e.to_record() for e in body.events], today, titles, settings.tzinfo,
    )
    return EventGroupsResponse(groups=[event_group_out(g) for g in groups])
