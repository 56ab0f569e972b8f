"""API test fixtures — FastAPI app with fresh in-memory collaborators per test.

Invariants:
    - Every test gets its own goal store and shard cache (no cross-test leakage)
    - get_goal_store/get_shard_cache overridden via dependency_overrides

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises routing, validation and error handlers
"""

import pytest
from httpx import ASGITransport, AsyncClient

from life_planner.api.dependencies import get_goal_store, get_shard_cache
from life_planner.infrastructure.memory_store import InMemoryGoalStore
from life_planner.infrastructure.shard_cache import ShardCache, goal_shard_loader
from life_planner.main import app


@pytest.fixture
def goal_store():
    return InMemoryGoalStore()


@pytest.fixture
def shard_cache(goal_store):
    return ShardCache(goal_shard_loader(goal_store))


@pytest.fixture
async def client(goal_store, shard_cache):
    app.dependency_overrides[get_goal_store] = lambda: goal_store
    app.dependency_overrides[get_shard_cache] = lambda: shard_cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
