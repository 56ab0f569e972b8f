"""Goal Write Coordinator — performs a goal write, then refreshes the shards it made stale.

Invariants:
    - The store write happens first; store errors propagate unmodified and refresh nothing
    - Shards come from plan_goal_revalidation (pure core); the coordinator only orchestrates
    - All planned refreshes are issued concurrently and awaited until every one settles
    - Any failed refresh → ShardRevalidationError; refreshes that succeeded stay applied
    - No retry, no timeout, no cancellation

Design Decisions:
    - gather(return_exceptions=True) over fail-fast gather: the caller learns the full
      outcome (refreshed vs failed) instead of the first rejection only
    - Owning year taken from the write payload, not the store result: a partial update
      only names the year it moves to (ADR: matches how the UI submits edits)
"""

import asyncio
import logging

from life_planner.core.domain_types import GoalOperation, ShardKey
from life_planner.core.errors import (
    ErrorContext, InvalidGoalWriteError, ShardRevalidationError,
)
from life_planner.core.plan_revalidation import plan_goal_revalidation
from life_planner.core.records import GoalRecord, GoalRef
from life_planner.core.repository_protocols import GoalStore, RevalidationPort
from life_planner.core.resolve_period import resolve_write_year

logger = logging.getLogger(__name__)

_RECORD_OPERATIONS = frozenset({GoalOperation.CREATE, GoalOperation.UPDATE})


class GoalWriteCoordinator:
    """Goal writes with coherent per-year shard refresh."""

    def __init__(self, store: GoalStore, port: RevalidationPort):
        self.store = store
        self.port = port

    async def coordinate_goal_write(
        self,
        operation: GoalOperation,
        target: GoalRecord | GoalRef,
        viewed_year: int,
    ) -> GoalRecord | None:
        """Apply the write, refresh affected shards, return the store's result."""
        self._check_target(operation, target)
        result = await self._write(operation, target)

        owning_year = None
        if operation in _RECORD_OPERATIONS:
            owning_year = resolve_write_year(target, viewed_year)
        shards = plan_goal_revalidation(operation, viewed_year, owning_year)
        logger.debug(
            f"Revalidating {len(shards)} shard(s) after goal {operation.value}",
            extra={
                "operation": operation.value,
                "viewed_year": viewed_year,
                "owning_year": owning_year,
                "shard": [str(s) for s in shards],
            },
        )
        await self._revalidate(shards, operation, viewed_year)
        return result

    async def _write(
        self, operation: GoalOperation, target: GoalRecord | GoalRef,
    ) -> GoalRecord | None:
        if operation is GoalOperation.CREATE:
            return await self.store.create(target)
        if operation is GoalOperation.UPDATE:
            return await self.store.update(target)
        if operation is GoalOperation.DELETE:
            await self.store.delete(target)
            return None
        return await self.store.toggle_achievement(target)

    async def _revalidate(
        self, shards: list[ShardKey], operation: GoalOperation, viewed_year: int,
    ) -> None:
        outcomes = await asyncio.gather(
            *(self.port.invalidate(shard) for shard in shards),
            return_exceptions=True,
        )
        refreshed: list[ShardKey] = []
        failures: list[tuple[ShardKey, BaseException]] = []
        for shard, outcome in zip(shards, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                failures.append((shard, outcome))
            else:
                refreshed.append(shard)

        if not failures:
            return
        for shard, exc in failures:
            logger.error(
                f"Shard {shard} refresh failed: {exc}",
                extra={
                    "operation": operation.value,
                    "viewed_year": viewed_year,
                    "shard": str(shard),
                    "error_code": "SHARD_REVALIDATION_FAILED",
                },
            )
        raise ShardRevalidationError(
            refreshed=refreshed,
            failed=[shard for shard, _ in failures],
            context=ErrorContext(operation=operation.value, viewed_year=viewed_year),
        ) from failures[0][1]

    @staticmethod
    def _check_target(
        operation: GoalOperation, target: GoalRecord | GoalRef,
    ) -> None:
        if operation in _RECORD_OPERATIONS:
            if not isinstance(target, GoalRecord):
                raise InvalidGoalWriteError(
                    f"goal {operation.value} requires a goal record",
                    ErrorContext(operation=operation.value),
                )
            if operation is GoalOperation.UPDATE and target.id is None:
                raise InvalidGoalWriteError(
                    "goal update requires a record id",
                    ErrorContext(operation=operation.value),
                )
        elif not isinstance(target, GoalRef):
            raise InvalidGoalWriteError(
                f"goal {operation.value} requires a goal id reference",
                ErrorContext(operation=operation.value),
            )


async def coordinate_goal_write(
    operation: GoalOperation,
    target: GoalRecord | GoalRef,
    viewed_year: int,
    *,
    store: GoalStore,
    port: RevalidationPort,
) -> GoalRecord | None:
    """Functional entry point over GoalWriteCoordinator."""
    return await GoalWriteCoordinator(store, port).coordinate_goal_write(
        operation, target, viewed_year,
    )
