"""Pydantic models for OAuth clients, authorizations and tokens."""

from datetime import datetime

from pydantic import BaseModel

from heroku_sdk.models.common import IdRef

# =============================================================================
# Response Models
# =============================================================================


class OAuthClient(BaseModel):
    """An application users can authorize to act on the platform for them."""

    id: str | None = None
    name: str | None = None
    redirect_uri: str | None = None
    secret: str | None = None
    ignores_delinquent: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OAuthAccessToken(BaseModel):
    id: str | None = None
    token: str | None = None
    expires_in: int | None = None


class OAuthAuthorizationClient(BaseModel):
    id: str | None = None
    name: str | None = None
    redirect_uri: str | None = None


class OAuthAuthorizationGrant(BaseModel):
    id: str | None = None
    code: str | None = None
    expires_in: int | None = None


class OAuthAuthorization(BaseModel):
    """A client a user has authorized, with its tokens and grant."""

    id: str | None = None
    access_token: OAuthAccessToken | None = None
    refresh_token: OAuthAccessToken | None = None
    client: OAuthAuthorizationClient | None = None
    grant: OAuthAuthorizationGrant | None = None
    scope: list[str] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OAuthClientSecret(BaseModel):
    secret: str | None = None


class OAuthGrant(BaseModel):
    """Grant used to obtain an authorization on behalf of a user."""

    code: str | None = None
    type: str | None = None


class OAuthToken(BaseModel):
    """Tokens an authorized client uses to act for a user."""

    id: str | None = None
    access_token: OAuthAccessToken | None = None
    refresh_token: OAuthAccessToken | None = None
    authorization: IdRef | None = None
    client: OAuthClientSecret | None = None
    grant: OAuthGrant | None = None
    session: IdRef | None = None
    user: IdRef | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class OAuthClientCreate(BaseModel):
    name: str
    redirect_uri: str


class OAuthClientUpdate(BaseModel):
    name: str | None = None
    redirect_uri: str | None = None


class OAuthAuthorizationCreate(BaseModel):
    """Payload for creating an authorization.

    Fields:
        scope: requested scopes, e.g. ["global"]
        client: id of the client the authorization is for
        description: human-readable label
        expires_in: seconds until the access token expires
    """

    scope: list[str]
    client: str | None = None
    description: str | None = None
    expires_in: int | None = None


class OAuthRefreshTokenRef(BaseModel):
    token: str


class OAuthTokenCreate(BaseModel):
    """Payload for exchanging a grant or refresh token for an access token."""

    client: OAuthClientSecret | None = None
    grant: OAuthGrant | None = None
    refresh_token: OAuthRefreshTokenRef | None = None
