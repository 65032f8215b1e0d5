"""Pydantic models for account-level resources.

Covers the account itself, labs features, SSH keys, app transfers and the
rate-limit quota.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from heroku_sdk.models.common import Identity, UserIdentity

AppTransferState = Literal["pending", "accepted", "declined"]

# =============================================================================
# Response Models
# =============================================================================


class Account(BaseModel):
    """An individual signed up to use the platform."""

    id: str | None = None
    email: str | None = None
    allow_tracking: bool | None = None
    beta: bool | None = None
    verified: bool | None = None
    created_at: datetime | None = None
    last_login: datetime | None = None
    updated_at: datetime | None = None


class AccountFeature(BaseModel):
    """A labs capability that can be enabled or disabled for an account."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    doc_url: str | None = None
    enabled: bool | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Key(BaseModel):
    """Public SSH key used to authorize git operations."""

    id: str | None = None
    email: str | None = None
    fingerprint: str | None = None
    public_key: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AppTransfer(BaseModel):
    """Two-party interaction transferring ownership of an app."""

    id: str | None = None
    app: Identity | None = None
    owner: UserIdentity | None = None
    recipient: UserIdentity | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RateLimit(BaseModel):
    """Remaining request tokens for the account.

    Requests for this resource do not count towards the limit.
    """

    remaining: int | None = None


# =============================================================================
# Request Models
# =============================================================================


class AccountUpdate(BaseModel):
    """Payload for updating the account. Only provided fields are sent."""

    allow_tracking: bool | None = None
    beta: bool | None = None
    name: str | None = None
    password: str | None = None


class AccountChangeEmail(BaseModel):
    """Payload for changing the account email."""

    email: str
    password: str


class AccountChangePassword(BaseModel):
    """Payload for changing the account password."""

    new_password: str
    password: str


class AccountFeatureUpdate(BaseModel):
    enabled: bool


class KeyCreate(BaseModel):
    public_key: str


class AppTransferCreate(BaseModel):
    """Payload for offering an app to another account.

    Fields:
        app: id or name of the app to transfer
        recipient: id or email of the receiving account
    """

    app: str
    recipient: str


class AppTransferUpdate(BaseModel):
    state: AppTransferState
