"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from petclinic.config import get_settings
from petclinic.infrastructure.database import Base, engine
from petclinic.infrastructure.database.sample_data import seed_sample_data
from petclinic.infrastructure.database.session import async_session_factory
from petclinic.infrastructure.logging.log_config import setup_logging
from petclinic.presentation.api.v1.router import router as api_router
from petclinic.presentation.web.router import router as web_router

logger = logging.getLogger(__name__)


async def _seed_sample_data() -> None:
    """Load the sample clinic into an empty database."""
    try:
        async with async_session_factory() as session:
            if await seed_sample_data(session):
                await session.commit()
    except Exception as exc:
        logger.warning("Could not seed sample data: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed data."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Sample data for a fresh database
    if settings.seed_sample_data:
        await _seed_sample_data()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)
    yield

    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(api_router)
    app.include_router(web_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "petclinic.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
