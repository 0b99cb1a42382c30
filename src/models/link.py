"""Link model and the link/user bookmark association."""
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from models.user import User


user_bookmarks = Table(
    "user_bookmarks",
    Base.metadata,
    Column("link_id", ForeignKey("links.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Link(Base, TimestampMixin):
    """
    A shared link.

    The id doubles as the pagination cursor, so it is assigned once on insert
    and never rewritten.
    """

    __tablename__ = "links"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(String(500))
    url: Mapped[str] = mapped_column(Text)
    description: Mapped[str] = mapped_column(Text)
    image_url: Mapped[str] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(255))

    users: Mapped[list["User"]] = relationship(
        secondary=user_bookmarks, back_populates="bookmarks",
    )
