"""User model for storing authenticated users."""
import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base, TimestampMixin
from models.link import user_bookmarks

if TYPE_CHECKING:
    from models.link import Link


class Role(Enum):
    """Role stored on a user; only ADMIN may create links."""

    USER = "USER"
    ADMIN = "ADMIN"


class User(Base, TimestampMixin):
    """User model - matched to the Auth0 session by email."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    email: Mapped[str | None] = mapped_column(
        String(255), unique=True, nullable=True,
    )
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="role"), default=Role.USER, server_default=Role.USER.value,
    )

    bookmarks: Mapped[list["Link"]] = relationship(
        secondary=user_bookmarks, back_populates="users",
    )
