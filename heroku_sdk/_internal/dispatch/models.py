"""Request body variants, decode strategies and the list range descriptor.

Call sites pick a body variant and a decode strategy explicitly; the
dispatcher never guesses them from a value's runtime shape.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from typing import IO, Any, Protocol

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from heroku_sdk.exceptions import HerokuRequestError

# =============================================================================
# Constants
# =============================================================================

JSON_CONTENT_TYPE = "application/json"
RANGE_HEADER = "Range"
STREAM_CHUNK_SIZE = 64 * 1024  # 64KB

# =============================================================================
# Request Bodies
# =============================================================================


@dataclass(frozen=True)
class Absent:
    """No request payload."""


@dataclass(frozen=True)
class Text:
    """Raw text sent verbatim, without a content type."""

    value: str


@dataclass(frozen=True)
class Raw:
    """Raw bytes sent verbatim, without a content type.

    ``source`` may be a bytes object, an iterable of byte chunks or a binary
    file object. Iterables and files are streamed, not buffered.
    """

    source: bytes | Iterable[bytes] | IO[bytes]

    def content(self) -> bytes | Iterable[bytes]:
        if isinstance(self.source, (bytes, bytearray)):
            return bytes(self.source)
        if hasattr(self.source, "read"):
            return _iter_file(self.source)  # type: ignore[arg-type]
        return self.source  # type: ignore[return-value]


@dataclass(frozen=True)
class Json:
    """Structured value serialized to JSON.

    Pydantic models are dumped with unset (None) fields omitted. Plain
    mappings and sequences are dumped as given, so explicit nulls survive.
    ``Json(None)`` is the same as an absent body.
    """

    value: Any


Body = Absent | Text | Raw | Json


def _iter_file(fileobj: IO[bytes]) -> Iterator[bytes]:
    while chunk := fileobj.read(STREAM_CHUNK_SIZE):
        yield chunk


# =============================================================================
# Decode Strategies
# =============================================================================


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> Any: ...


@dataclass(frozen=True)
class Discard:
    """Drain and drop the response body."""


@dataclass(frozen=True)
class CopyTo:
    """Copy the response body verbatim into a writable byte sink."""

    sink: ByteSink


@dataclass(frozen=True)
class DecodeJson:
    """Decode the response body as a single JSON document of ``type_``.

    ``type_`` is anything pydantic can validate: a model class, ``list[Model]``,
    ``dict[str, str]`` and so on.
    """

    type_: Any

    def decode(self, content: bytes) -> Any:
        return _adapter_for(self.type_).validate_json(content)


DecodeTarget = Discard | CopyTo | DecodeJson


@lru_cache(maxsize=256)
def _adapter_for(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


# =============================================================================
# List Range
# =============================================================================


class ListRange(BaseModel):
    """Pagination descriptor sent in the ``Range`` header of list requests.

    Fields:
        field: Attribute used for ordering and range comparison ("" = default)
        max: Maximum number of items to return (0 = server default)
        descending: Order results descending
        first_id: Lower range boundary ("" = open)
        last_id: Upper range boundary ("" = open)
    """

    model_config = ConfigDict(frozen=True)

    field: str = ""
    max: int = Field(default=0, ge=0)
    descending: bool = False
    first_id: str = ""
    last_id: str = ""

    def header_value(self) -> str:
        """Encode the descriptor as a ``Range`` header value.

        With both ``max`` and ``descending`` set the separator after the max
        clause is emitted twice (``; max=5, , order=desc``). The API accepts
        it and existing callers depend on the exact value.
        """
        value = ""
        if self.field:
            value += self.field + " "
        value += self.first_id + ".." + self.last_id
        if self.max != 0:
            value += f"; max={self.max}"
            if self.descending:
                value += ", "
        if self.descending:
            value += ", order=desc"
        return value

    def set_header(self, request: httpx.Request) -> None:
        """Assign the encoded range to the request, replacing any previous one.

        Raises:
            HerokuRequestError: If the encoded value is not ASCII.
        """
        value = self.header_value()
        if not value.isascii():
            raise HerokuRequestError(f"Range header must be ASCII: {value!r}")
        request.headers[RANGE_HEADER] = value
