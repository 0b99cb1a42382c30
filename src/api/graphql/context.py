"""
Request context for GraphQL resolvers.

Built fresh for every request from FastAPI dependencies, so each request gets
its own database session and, when a session cookie or bearer token verifies,
the caller's identity.
"""
import asyncio
from dataclasses import dataclass, field

from fastapi import BackgroundTasks, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from api.dependencies import get_async_session, get_session
from core.auth import Identity


@dataclass
class GraphQLContext(BaseContext):
    """
    Per-request resolver context.

    `identity` is None for anonymous requests; resolvers that write check it
    themselves. `store_lock` serializes store calls from resolvers that
    graphql-core runs concurrently (list items), since an AsyncSession allows
    one operation at a time.
    """

    session: AsyncSession
    identity: Identity | None = None
    request: Request | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None
    store_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


async def get_graphql_context(
    request: Request,
    response: Response,
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_async_session),
    identity: Identity | None = Depends(get_session),
) -> GraphQLContext:
    """Create the GraphQL context from FastAPI dependencies."""
    return GraphQLContext(
        session=session,
        identity=identity,
        request=request,
        response=response,
        background_tasks=background_tasks,
    )
