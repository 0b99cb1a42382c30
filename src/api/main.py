"""FastAPI application entry point."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import health
from api.routers.graphql import create_graphql_router
from core.config import get_settings
from db.session import dispose_engine


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Release database connections when the app stops."""
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """Create the application with CORS, the GraphQL endpoint and health checks."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title="Links API",
        description="GraphQL API for sharing and bookmarking links.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_graphql_router(settings), prefix="/graphql")
    app.include_router(health.router)
    return app


app = create_app()
