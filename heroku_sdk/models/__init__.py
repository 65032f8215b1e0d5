"""Public pydantic models for Heroku Platform API resources.

Response models have every field optional: the API omits fields freely and
error payloads are decoded into the same types unless status checking is on.
Request models (``*Create``, ``*Update``) are serialized with unset fields
left out.
"""

from heroku_sdk.models.account import (
    Account,
    AccountChangeEmail,
    AccountChangePassword,
    AccountFeature,
    AccountFeatureUpdate,
    AccountUpdate,
    AppTransfer,
    AppTransferCreate,
    AppTransferUpdate,
    Key,
    KeyCreate,
    RateLimit,
)
from heroku_sdk.models.addon import (
    Addon,
    AddonCreate,
    AddonService,
    AddonUpdate,
    Plan,
    PlanPrice,
)
from heroku_sdk.models.app import (
    App,
    AppCreate,
    AppFeature,
    AppFeatureUpdate,
    AppUpdate,
    Collaborator,
    CollaboratorCreate,
    ConfigVars,
    ConfigVarsUpdate,
    Domain,
    DomainCreate,
)
from heroku_sdk.models.common import Identity, IdRef, UserIdentity
from heroku_sdk.models.log import LogDrain, LogDrainCreate, LogSession, LogSessionCreate
from heroku_sdk.models.oauth import (
    OAuthAuthorization,
    OAuthAuthorizationCreate,
    OAuthClient,
    OAuthClientCreate,
    OAuthClientUpdate,
    OAuthGrant,
    OAuthToken,
    OAuthTokenCreate,
)
from heroku_sdk.models.platform import Region, Stack
from heroku_sdk.models.process import (
    Dyno,
    DynoCreate,
    Formation,
    FormationBatchItem,
    FormationBatchUpdate,
    FormationUpdate,
    Release,
    ReleaseCreate,
    ReleaseRollback,
    Slug,
    SlugCreate,
)
from heroku_sdk.models.ssl import SSLEndpoint, SSLEndpointCreate, SSLEndpointUpdate

__all__ = [
    # common
    "Identity",
    "IdRef",
    "UserIdentity",
    # account
    "Account",
    "AccountUpdate",
    "AccountChangeEmail",
    "AccountChangePassword",
    "AccountFeature",
    "AccountFeatureUpdate",
    "AppTransfer",
    "AppTransferCreate",
    "AppTransferUpdate",
    "Key",
    "KeyCreate",
    "RateLimit",
    # add-ons
    "AddonService",
    "Addon",
    "AddonCreate",
    "AddonUpdate",
    "Plan",
    "PlanPrice",
    # apps
    "App",
    "AppCreate",
    "AppUpdate",
    "AppFeature",
    "AppFeatureUpdate",
    "Collaborator",
    "CollaboratorCreate",
    "ConfigVars",
    "ConfigVarsUpdate",
    "Domain",
    "DomainCreate",
    # logs
    "LogDrain",
    "LogDrainCreate",
    "LogSession",
    "LogSessionCreate",
    # oauth
    "OAuthClient",
    "OAuthClientCreate",
    "OAuthClientUpdate",
    "OAuthAuthorization",
    "OAuthAuthorizationCreate",
    "OAuthGrant",
    "OAuthToken",
    "OAuthTokenCreate",
    # platform
    "Region",
    "Stack",
    # processes
    "Slug",
    "SlugCreate",
    "Release",
    "ReleaseCreate",
    "ReleaseRollback",
    "Formation",
    "FormationUpdate",
    "FormationBatchItem",
    "FormationBatchUpdate",
    "Dyno",
    "DynoCreate",
    # ssl
    "SSLEndpoint",
    "SSLEndpointCreate",
    "SSLEndpointUpdate",
]
