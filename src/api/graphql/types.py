"""GraphQL output types for links and their pagination envelope."""
import strawberry
from strawberry.types import Info

from api.graphql.context import GraphQLContext
from models.link import Link
from models.user import Role, User
from services import link_service
from services.link_service import LinkPage

RoleType = strawberry.enum(Role, name="Role")


@strawberry.type(name="User")
class UserType:
    """A user who bookmarked a link."""

    id: str | None
    email: str | None
    image: str | None
    role: RoleType | None

    @classmethod
    def from_model(cls, user: User) -> "UserType":
        """Build from a User row."""
        return cls(id=user.id, email=user.email, image=user.image, role=user.role)


@strawberry.type(name="Link")
class LinkType:
    """A shared link."""

    id: str | None
    title: str | None
    url: str | None
    description: str | None
    image_url: str | None
    category: str | None

    @strawberry.field
    async def users(self, info: Info[GraphQLContext, None]) -> list[UserType] | None:
        """Users who bookmarked this link, fetched per link."""
        async with info.context.store_lock:
            users = await link_service.get_link_users(info.context.session, self.id)
        return [UserType.from_model(user) for user in users]

    @classmethod
    def from_model(cls, link: Link) -> "LinkType":
        """Build from a Link row."""
        return cls(
            id=link.id,
            title=link.title,
            url=link.url,
            description=link.description,
            image_url=link.image_url,
            category=link.category,
        )


@strawberry.type(name="Edge")
class EdgeType:
    """A link paired with its cursor."""

    cursor: str | None
    node: LinkType | None


@strawberry.type(name="PageInfo")
class PageInfoType:
    """Where a page ends and whether another follows."""

    end_cursor: str | None
    has_next_page: bool | None


@strawberry.type(name="Response")
class ResponseType:
    """A page of links."""

    page_info: PageInfoType | None
    edges: list[EdgeType | None] | None

    @classmethod
    def from_page(cls, page: LinkPage) -> "ResponseType":
        """Wrap a service-layer page, using each link's id as its cursor."""
        return cls(
            page_info=PageInfoType(
                end_cursor=page.end_cursor,
                has_next_page=page.has_next_page,
            ),
            edges=[
                EdgeType(cursor=link.id, node=LinkType.from_model(link))
                for link in page.links
            ],
        )
