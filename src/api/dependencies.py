"""FastAPI dependencies for injection."""
from core.auth import Identity, get_session
from core.config import get_settings
from db.session import get_async_session

__all__ = [
    "Identity",
    "get_async_session",
    "get_session",
    "get_settings",
]
