"""Request dispatch for the Heroku Platform API.

Every resource call goes through ``Service.do``: build the request, apply the
list range, send it through the injected transport and decode the response.
"""

from heroku_sdk._internal.dispatch.client import Service
from heroku_sdk._internal.dispatch.models import (
    Absent,
    Body,
    ByteSink,
    CopyTo,
    DecodeJson,
    DecodeTarget,
    Discard,
    Json,
    ListRange,
    Raw,
    Text,
)

__all__ = [
    "Service",
    "Body",
    "Absent",
    "Text",
    "Raw",
    "Json",
    "DecodeTarget",
    "Discard",
    "CopyTo",
    "DecodeJson",
    "ByteSink",
    "ListRange",
]
