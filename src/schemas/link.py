"""Pydantic schemas for link operations."""
from pydantic import BaseModel


class LinkCreate(BaseModel):
    """Fields supplied by the caller when creating a link; the store assigns the id."""

    title: str
    url: str
    image_url: str
    category: str
    description: str
