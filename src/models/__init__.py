"""SQLAlchemy models."""
from models.base import Base, TimestampMixin
from models.link import Link, user_bookmarks
from models.user import Role, User

__all__ = ["Base", "Link", "Role", "TimestampMixin", "User", "user_bookmarks"]
