"""Identity references shared by several resources."""

from pydantic import BaseModel


class Identity(BaseModel):
    """Reference to another resource by id and name."""

    id: str | None = None
    name: str | None = None


class IdRef(BaseModel):
    """Reference to another resource by id only."""

    id: str | None = None


class UserIdentity(BaseModel):
    """Reference to an account by id and email."""

    id: str | None = None
    email: str | None = None
