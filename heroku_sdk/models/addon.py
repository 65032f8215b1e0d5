"""Pydantic models for add-on services, plans and provisioned add-ons."""

from datetime import datetime

from pydantic import BaseModel

from heroku_sdk.models.common import Identity

# =============================================================================
# Response Models
# =============================================================================


class AddonService(BaseModel):
    """An add-on that may be provisioned for apps."""

    id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlanPrice(BaseModel):
    cents: int | None = None
    unit: str | None = None


class Plan(BaseModel):
    """A configuration of an add-on service that may be added to apps."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    default: bool | None = None
    price: PlanPrice | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Addon(BaseModel):
    """An add-on provisioned for an app."""

    id: str | None = None
    name: str | None = None
    config_vars: list[str] | None = None
    plan: Identity | None = None
    provider_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Request Models
# =============================================================================


class AddonCreate(BaseModel):
    """Payload for provisioning an add-on.

    Fields:
        plan: id or name of the plan, e.g. "heroku-postgresql:dev"
        config: custom provisioning options
    """

    plan: str
    config: dict[str, str] | None = None


class AddonUpdate(BaseModel):
    plan: str
