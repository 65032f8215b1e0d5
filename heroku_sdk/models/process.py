"""Pydantic models for what runs an app: slugs, releases, formation and dynos."""

from datetime import datetime

from pydantic import BaseModel

from heroku_sdk.models.common import IdRef, UserIdentity

# =============================================================================
# Response Models
# =============================================================================


class SlugBlob(BaseModel):
    """Where clients fetch or store the release binary."""

    method: str | None = None
    url: str | None = None


class Slug(BaseModel):
    """A snapshot of application code ready to run on the platform."""

    id: str | None = None
    blob: SlugBlob | None = None
    buildpack_provided_description: str | None = None
    commit: str | None = None
    process_types: dict[str, str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Release(BaseModel):
    """A combination of code, config vars and add-ons for an app."""

    id: str | None = None
    version: int | None = None
    description: str | None = None
    slug: IdRef | None = None
    user: UserIdentity | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Formation(BaseModel):
    """Processes that should be maintained for an app, per process type."""

    id: str | None = None
    type: str | None = None
    command: str | None = None
    quantity: int | None = None
    size: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DynoRelease(BaseModel):
    id: str | None = None
    version: int | None = None


class Dyno(BaseModel):
    """A running process of an app."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    command: str | None = None
    size: str | None = None
    state: str | None = None
    attach_url: str | None = None
    release: DynoRelease | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class SlugCreate(BaseModel):
    process_types: dict[str, str]
    buildpack_provided_description: str | None = None
    commit: str | None = None


class ReleaseCreate(BaseModel):
    slug: str
    description: str | None = None


class ReleaseRollback(BaseModel):
    """Payload for rolling back to an earlier release (id or version)."""

    release: str


class FormationUpdate(BaseModel):
    quantity: int | None = None
    size: str | None = None


class FormationBatchItem(BaseModel):
    """One entry of a batch formation update.

    Fields:
        process: id or name of the process type to update
        quantity: new number of processes
        size: new dyno size
    """

    process: str
    quantity: int | None = None
    size: str | None = None


class FormationBatchUpdate(BaseModel):
    updates: list[FormationBatchItem]


class DynoCreate(BaseModel):
    """Payload for running a one-off dyno."""

    command: str
    attach: bool | None = None
    env: dict[str, str] | None = None
    size: str | None = None
