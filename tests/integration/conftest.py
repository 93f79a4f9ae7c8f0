"""Shared fixtures for persistence tests."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from judgehub.infrastructure.persistence.sqlalchemy.database import create_tables


@pytest.fixture
async def session():
    """Create an in-memory SQLite session with every table."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    await create_tables(engine)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session

    await engine.dispose()
