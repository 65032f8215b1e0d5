"""Pydantic models for log drains and log sessions."""

from datetime import datetime

from pydantic import BaseModel

from heroku_sdk.models.common import IdRef

# =============================================================================
# Response Models
# =============================================================================


class LogDrain(BaseModel):
    """Forwards an app's logs to an external syslog server.

    Drains added by an add-on (``addon`` is set) can only be removed by
    removing the add-on.
    """

    id: str | None = None
    addon: IdRef | None = None
    token: str | None = None
    url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LogSession(BaseModel):
    """Reference to the HTTP log stream of an app."""

    id: str | None = None
    logplex_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class LogDrainCreate(BaseModel):
    url: str


class LogSessionCreate(BaseModel):
    """Payload for opening a log session. Every field is optional.

    Fields:
        dyno: only return logs of this dyno, e.g. "web.1"
        lines: number of log lines to stream at once
        source: only return logs from this source, e.g. "app"
        tail: keep the stream open for new lines
    """

    dyno: str | None = None
    lines: int | None = None
    source: str | None = None
    tail: bool | None = None
