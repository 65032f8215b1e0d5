"""Pydantic models for platform-wide catalogs: regions and stacks."""

from datetime import datetime

from pydantic import BaseModel


class Region(BaseModel):
    """A geographic location in which an app may run."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Stack(BaseModel):
    """An application execution environment."""

    id: str | None = None
    name: str | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
