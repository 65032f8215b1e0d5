"""Resource call sites, one class per API resource.

Each method maps to one API operation and delegates to the shared
``Service`` with a path, a body variant and a decode target.
"""

from heroku_sdk.resources._base import Resource
from heroku_sdk.resources.account import (
    AccountFeaturesResource,
    AccountResource,
    AppTransfersResource,
    KeysResource,
    RateLimitsResource,
)
from heroku_sdk.resources.addons import AddonServicesResource, AddonsResource, PlansResource
from heroku_sdk.resources.apps import (
    AppFeaturesResource,
    AppsResource,
    CollaboratorsResource,
    ConfigVarsResource,
    DomainsResource,
)
from heroku_sdk.resources.logs import LogDrainsResource, LogSessionsResource
from heroku_sdk.resources.oauth import (
    OAuthAuthorizationsResource,
    OAuthClientsResource,
    OAuthTokensResource,
)
from heroku_sdk.resources.platform import RegionsResource, StacksResource
from heroku_sdk.resources.processes import (
    DynosResource,
    FormationResource,
    ReleasesResource,
    SlugsResource,
)
from heroku_sdk.resources.ssl import SSLEndpointsResource

__all__ = [
    "Resource",
    "AccountResource",
    "AccountFeaturesResource",
    "AppTransfersResource",
    "KeysResource",
    "RateLimitsResource",
    "AddonServicesResource",
    "AddonsResource",
    "PlansResource",
    "AppsResource",
    "AppFeaturesResource",
    "CollaboratorsResource",
    "ConfigVarsResource",
    "DomainsResource",
    "LogDrainsResource",
    "LogSessionsResource",
    "OAuthAuthorizationsResource",
    "OAuthClientsResource",
    "OAuthTokensResource",
    "RegionsResource",
    "StacksResource",
    "DynosResource",
    "FormationResource",
    "ReleasesResource",
    "SlugsResource",
    "SSLEndpointsResource",
]
