"""Root Query and Mutation types and the executable schema."""
import strawberry
from strawberry.types import Info

from api.graphql.context import GraphQLContext
from api.graphql.types import LinkType, ResponseType
from schemas.link import LinkCreate
from services import link_service


@strawberry.type
class Query:
    """Read operations."""

    @strawberry.field
    async def links(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = None,
        after: str | None = None,
    ) -> ResponseType | None:
        """
        Cursor-paginated links.

        Pass the previous page's `endCursor` as `after` to fetch the next page.
        """
        page = await link_service.get_links_page(info.context.session, first, after)
        return ResponseType.from_page(page)


@strawberry.type
class Mutation:
    """Write operations."""

    @strawberry.mutation
    async def create_link(
        self,
        info: Info[GraphQLContext, None],
        title: str,
        url: str,
        image_url: str,
        category: str,
        description: str,
    ) -> LinkType:
        """Create a link. Requires a session whose user is an ADMIN."""
        link = await link_service.create_link(
            info.context.session,
            info.context.identity,
            LinkCreate(
                title=title,
                url=url,
                image_url=image_url,
                category=category,
                description=description,
            ),
        )
        return LinkType.from_model(link)


schema = strawberry.Schema(query=Query, mutation=Mutation)
