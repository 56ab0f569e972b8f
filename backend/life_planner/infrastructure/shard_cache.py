"""Shard Cache — per-(entity kind, year) snapshots implementing the RevalidationPort.

Invariants:
    - A shard is created on its first read; it is never explicitly destroyed
    - invalidate() marks the shard stale; a shard that was ever read is refetched at once
    - A failed refetch leaves the shard stale (old snapshot kept) and re-raises
    - The cache is the only owner of snapshots — the core never mutates them

Design Decisions:
    - Unread shards are only marked stale on invalidate: nothing is displaying them,
      the next read loads fresh data anyway (ADR: mirrors stale-while-revalidate clients)
    - Loader injected as a coroutine function: the cache knows nothing about goals
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from life_planner.core.domain_types import EntityKind, ShardKey
from life_planner.core.repository_protocols import GoalStore

logger = logging.getLogger(__name__)

ShardLoader = Callable[[ShardKey], Awaitable[Any]]


class ShardCache:
    """In-process shard snapshots with refresh-on-invalidate."""

    def __init__(self, loader: ShardLoader):
        self._loader = loader
        self._snapshots: dict[ShardKey, Any] = {}
        self._stale: set[ShardKey] = set()

    async def read(self, shard: ShardKey) -> Any:
        """Return the shard's snapshot, loading it on first read or when stale."""
        if shard not in self._snapshots or shard in self._stale:
            await self._refetch(shard)
        return self._snapshots[shard]

    async def invalidate(self, shard: ShardKey) -> None:
        self._stale.add(shard)
        if shard in self._snapshots:
            await self._refetch(shard)

    def is_stale(self, shard: ShardKey) -> bool:
        return shard in self._stale

    def snapshot(self, shard: ShardKey) -> Any:
        """Current snapshot without loading, or None if never read."""
        return self._snapshots.get(shard)

    async def _refetch(self, shard: ShardKey) -> None:
        try:
            value = await self._loader(shard)
        except Exception as e:
            logger.warning(
                f"Refetch of shard {shard} failed: {e}",
                extra={"shard": str(shard)},
            )
            raise
        self._snapshots[shard] = value
        self._stale.discard(shard)


def goal_shard_loader(store: GoalStore) -> ShardLoader:
    """Loader mapping goal shards onto GoalStore reads."""

    async def load(shard: ShardKey) -> Any:
        if shard.entity_kind is EntityKind.AVAILABLE_YEARS:
            return await store.list_available_years()
        return await store.list_by_year(shard.year)

    return load
