"""Goal Routes — per-year goal listings and writes with coordinated shard refresh.

Invariants:
    - Reads go through the shard cache (a year's shard is created on its first read)
    - Every write goes through GoalWriteCoordinator with the client's viewed_year
    - Delete/toggle only receive an id — the owning year is unknown to them

Design Decisions:
    - viewed_year as a required query parameter: it is UI state, not part of the goal
    - /years declared before /{year} so the literal path wins
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from life_planner.api.dependencies import get_coordinator, get_shard_cache
from life_planner.core.domain_types import GoalOperation, GoalPeriod, ShardKey
from life_planner.core.records import GoalRef
from life_planner.infrastructure.shard_cache import ShardCache
from life_planner.schemas.goals import (
    AvailableYearsResponse, GoalCreate, GoalResponse, GoalUpdate,
    YearGoalsResponse,
)
from life_planner.services.coordinate_goal_write import GoalWriteCoordinator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/goals", tags=["goals"])

ViewedYear = Annotated[int, Query(ge=1970, le=9999)]


@router.get("/years", response_model=AvailableYearsResponse)
async def available_years(cache: ShardCache = Depends(get_shard_cache)):
    """Years holding at least one yearly or monthly goal, newest first."""
    years = await cache.read(ShardKey.available_years())
    return AvailableYearsResponse(years=years)


@router.get("/{year}", response_model=YearGoalsResponse)
async def goals_for_year(
    year: int = Path(ge=1970, le=9999),
    cache: ShardCache = Depends(get_shard_cache),
):
    """Yearly, monthly and weekly goals of one year."""
    goals = await cache.read(ShardKey.goals(year))
    return YearGoalsResponse.from_shard(goals)


@router.post(
    "", response_model=GoalResponse, status_code=status.HTTP_201_CREATED,
)
async def create_goal(
    body: GoalCreate,
    viewed_year: ViewedYear,
    coordinator: GoalWriteCoordinator = Depends(get_coordinator),
):
    created = await coordinator.coordinate_goal_write(
        GoalOperation.CREATE, body.to_record(viewed_year), viewed_year,
    )
    logger.info(
        f"Created {created.period.value} goal {created.id}",
        extra={"operation": "create", "owning_year": created.year},
    )
    return GoalResponse.from_record(created)


@router.put("/{period}/{goal_id}", response_model=GoalResponse)
async def update_goal(
    period: GoalPeriod,
    goal_id: int,
    body: GoalUpdate,
    viewed_year: ViewedYear,
    coordinator: GoalWriteCoordinator = Depends(get_coordinator),
):
    updated = await coordinator.coordinate_goal_write(
        GoalOperation.UPDATE, body.to_record(period, goal_id), viewed_year,
    )
    return GoalResponse.from_record(updated)


@router.delete("/{period}/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    period: GoalPeriod,
    goal_id: int,
    viewed_year: ViewedYear,
    coordinator: GoalWriteCoordinator = Depends(get_coordinator),
):
    await coordinator.coordinate_goal_write(
        GoalOperation.DELETE, GoalRef(period, goal_id), viewed_year,
    )


@router.post("/{period}/{goal_id}/toggle", response_model=GoalResponse)
async def toggle_goal(
    period: GoalPeriod,
    goal_id: int,
    viewed_year: ViewedYear,
    coordinator: GoalWriteCoordinator = Depends(get_coordinator),
):
    """Flip the achieved flag."""
    toggled = await coordinator.coordinate_goal_write(
        GoalOperation.TOGGLE, GoalRef(period, goal_id), viewed_year,
    )
    return GoalResponse.from_record(toggled)
