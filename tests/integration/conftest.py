"""In-memory SQLite database loaded with the sample clinic."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from petclinic.infrastructure.database import Base
from petclinic.infrastructure.database.sample_data import seed_sample_data
from petclinic.infrastructure.database.session import build_engine, get_db_session
from petclinic.main import app


@pytest_asyncio.fixture
async def session_factory():
    engine = build_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        assert await seed_sample_data(session) is True
        await session.commit()

    yield factory
    await engine.dispose()


@pytest.fixture
def db_app(session_factory):
    """The application with request sessions drawn from the in-memory database."""

    async def _session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session
    yield app
    app.dependency_overrides.clear()
