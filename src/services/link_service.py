"""Service layer for paginating and creating links."""
import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from core.auth import Identity
from models.link import Link, user_bookmarks
from models.user import Role, User
from schemas.link import LinkCreate

logger = logging.getLogger(__name__)


class AuthenticationRequiredError(Exception):
    """Raised when a write is attempted without a session."""

    def __init__(self) -> None:
        super().__init__("You need to be logged in to perform an action")


class AuthorizationDeniedError(Exception):
    """Raised when the session's user does not hold the ADMIN role."""

    def __init__(self) -> None:
        super().__init__("You do not have permission to perform action")


class InvalidPageSizeError(ValueError):
    """Raised when a page size is zero or negative."""

    def __init__(self, first: int) -> None:
        super().__init__(f"'first' must be a positive integer (got {first})")


@dataclass
class LinkPage:
    """One page of links plus the cursor state needed to fetch the next one."""

    links: list[Link]
    end_cursor: str | None
    has_next_page: bool


async def find_links(
    db: AsyncSession,
    take: int | None,
    cursor: str | None = None,
    skip: int = 0,
) -> list[Link]:
    """
    Fetch links in cursor order with take/skip/cursor semantics.

    Links are ordered by id, the cursor column. With a cursor, the window
    starts at the cursor row itself; pass skip=1 to start right after it.
    A cursor that matches no link yields no rows.

    Args:
        db: Database session.
        take: Maximum number of rows, or None for no limit.
        cursor: Id of the link the window starts at.
        skip: Rows to drop from the start of the window.

    Returns:
        The matching links in order.
    """
    query = select(Link).order_by(Link.id)
    if cursor is not None:
        # NULL when the cursor row is missing, which filters out every row
        cursor_link = aliased(Link)
        cursor_id = (
            select(cursor_link.id).where(cursor_link.id == cursor).scalar_subquery()
        )
        query = query.where(Link.id >= cursor_id)
    if skip:
        query = query.offset(skip)
    if take is not None:
        query = query.limit(take)

    result = await db.execute(query)
    return list(result.scalars().all())


async def get_links_page(
    db: AsyncSession,
    first: int | None,
    after: str | None = None,
) -> LinkPage:
    """
    Get one page of links after an optional cursor.

    hasNextPage comes from a second `first`-sized lookahead starting after
    the page's last link: the page is followed by another only if the
    lookahead comes back full. A short lookahead reports no next page even
    when a few links remain, and the two reads are not isolated from
    concurrent inserts.

    Raises:
        InvalidPageSizeError: `first` is zero or negative.
    """
    if first is not None and first <= 0:
        raise InvalidPageSizeError(first)

    if after:
        links = await find_links(db, take=first, cursor=after, skip=1)
    else:
        links = await find_links(db, take=first)

    if not links:
        return LinkPage(links=[], end_cursor=None, has_next_page=False)

    end_cursor = links[-1].id
    if first is None:
        # Unbounded page already holds every remaining link
        return LinkPage(links=links, end_cursor=end_cursor, has_next_page=False)

    lookahead = await find_links(db, take=first, cursor=end_cursor, skip=1)

    return LinkPage(
        links=links,
        end_cursor=end_cursor,
        has_next_page=len(lookahead) >= first,
    )


async def get_user_by_email(db: AsyncSession, email: str | None) -> User | None:
    """Get the stored user for a session email, if any."""
    if email is None:
        return None
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_link(
    db: AsyncSession,
    identity: Identity | None,
    data: LinkCreate,
) -> Link:
    """
    Create a link on behalf of an ADMIN user.

    Raises:
        AuthenticationRequiredError: No session; the store is not touched.
        AuthorizationDeniedError: No stored user for the session email, or the
            user is not an ADMIN.
    """
    if identity is None:
        logger.warning("create_link_unauthenticated")
        raise AuthenticationRequiredError

    user = await get_user_by_email(db, identity.email)
    if user is None or user.role != Role.ADMIN:
        logger.warning(
            "create_link_denied",
            extra={
                "email": identity.email,
                "role": user.role.value if user is not None else None,
            },
        )
        raise AuthorizationDeniedError

    link = Link(**data.model_dump())
    db.add(link)
    await db.flush()
    await db.refresh(link)

    logger.info("link_created", extra={"link_id": link.id, "user_id": user.id})
    return link


async def get_link_users(db: AsyncSession, link_id: str) -> list[User]:
    """Get the users who bookmarked a link."""
    result = await db.execute(
        select(User)
        .join(user_bookmarks, user_bookmarks.c.user_id == User.id)
        .where(user_bookmarks.c.link_id == link_id),
    )
    return list(result.scalars().all())
