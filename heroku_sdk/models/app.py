"""Pydantic models for apps and the resources scoped to a single app."""

from datetime import datetime

from pydantic import BaseModel

from heroku_sdk.models.common import Identity, UserIdentity

# Config vars are a flat mapping; a None value in an update unsets the var.
ConfigVars = dict[str, str]
ConfigVarsUpdate = dict[str, str | None]

# =============================================================================
# Response Models
# =============================================================================


class App(BaseModel):
    """The program deployed and run on the platform."""

    id: str | None = None
    name: str | None = None
    owner: UserIdentity | None = None
    region: Identity | None = None
    stack: Identity | None = None
    buildpack_provided_description: str | None = None
    git_url: str | None = None
    web_url: str | None = None
    maintenance: bool | None = None
    repo_size: int | None = None
    slug_size: int | None = None
    archived_at: datetime | None = None
    created_at: datetime | None = None
    released_at: datetime | None = None
    updated_at: datetime | None = None


class AppFeature(BaseModel):
    """A labs capability that can be enabled or disabled for an app."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    doc_url: str | None = None
    enabled: bool | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Collaborator(BaseModel):
    """An account that has been given access to an app."""

    id: str | None = None
    user: UserIdentity | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Domain(BaseModel):
    """A web route that should be routed to an app."""

    id: str | None = None
    hostname: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class AppCreate(BaseModel):
    """Payload for creating an app. Every field is optional."""

    name: str | None = None
    region: str | None = None
    stack: str | None = None


class AppUpdate(BaseModel):
    maintenance: bool | None = None
    name: str | None = None


class AppFeatureUpdate(BaseModel):
    enabled: bool


class CollaboratorCreate(BaseModel):
    """Payload for adding a collaborator.

    Fields:
        user: id or email of the account
        silent: skip the notification email
    """

    user: str
    silent: bool | None = None


class DomainCreate(BaseModel):
    hostname: str
