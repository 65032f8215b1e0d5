"""Pydantic models for SSL endpoints."""

from datetime import datetime

from pydantic import BaseModel

# =============================================================================
# Response Models
# =============================================================================


class SSLEndpoint(BaseModel):
    """Public address serving a custom certificate for an app.

    The app must have the ``ssl:endpoint`` add-on installed.
    """

    id: str | None = None
    name: str | None = None
    cname: str | None = None
    certificate_chain: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class SSLEndpointCreate(BaseModel):
    certificate_chain: str
    private_key: str


class SSLEndpointUpdate(BaseModel):
    """Payload for updating an SSL endpoint.

    Set ``rollback`` to revert to the previous certificate instead of
    uploading a new one.
    """

    certificate_chain: str | None = None
    private_key: str | None = None
    rollback: bool | None = None
