"""Heroku SDK for Python.

Client binding for the Heroku Platform API (v3).

Public API:
    HerokuClient - User-facing client, one attribute per resource
    Service - Request dispatcher shared by every resource
    ListRange - Pagination descriptor for list operations
    Absent, Text, Raw, Json - Request body variants
    Discard, CopyTo, DecodeJson - Response decode strategies
"""

from heroku_sdk._internal.dispatch import (
    Absent,
    CopyTo,
    DecodeJson,
    Discard,
    Json,
    ListRange,
    Raw,
    Service,
    Text,
)
from heroku_sdk._internal.http import DEFAULT_API_URL, USER_AGENT, create_http_client
from heroku_sdk._version import __version__
from heroku_sdk.client import HerokuClient, get_client
from heroku_sdk.exceptions import (
    HerokuAPIError,
    HerokuConfigError,
    HerokuDecodingError,
    HerokuEncodingError,
    HerokuError,
    HerokuRequestError,
)

__all__ = [
    "__version__",
    "HerokuClient",
    "get_client",
    "Service",
    "ListRange",
    "Absent",
    "Text",
    "Raw",
    "Json",
    "Discard",
    "CopyTo",
    "DecodeJson",
    "create_http_client",
    "DEFAULT_API_URL",
    "USER_AGENT",
    "HerokuError",
    "HerokuAPIError",
    "HerokuConfigError",
    "HerokuDecodingError",
    "HerokuEncodingError",
    "HerokuRequestError",
]
