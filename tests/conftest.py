"""Shared fixtures for filter compiler tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from .models import PEOPLE, Base, PersonRecord


@pytest.fixture
def simple_leaf() -> dict[str, object]:
    return {"field": "a", "operator": "eq", "value": 1, "type": "number"}


@pytest.fixture
async def connection() -> AsyncGenerator[AsyncConnection, None]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.connect() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(PersonRecord.__table__), PEOPLE)
        yield conn
    await engine.dispose()
