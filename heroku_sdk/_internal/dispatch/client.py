"""Request dispatcher for the Heroku Platform API."""

import json
import os
import re
import sys
from typing import Any

import httpx
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from heroku_sdk._internal.dispatch.models import (
    JSON_CONTENT_TYPE,
    Absent,
    Body,
    CopyTo,
    DecodeJson,
    DecodeTarget,
    Discard,
    Json,
    ListRange,
    Raw,
    Text,
)
from heroku_sdk._internal.dispatch.redaction import redact_payload
from heroku_sdk._internal.http import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    create_http_client,
)
from heroku_sdk.exceptions import (
    HerokuAPIError,
    HerokuConfigError,
    HerokuDecodingError,
    HerokuEncodingError,
    HerokuRequestError,
)

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)

# RFC 9110 token characters
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class Service:
    """Dispatcher shared by every resource call.

    A service holds the HTTP transport and the base URL, and nothing else that
    changes: it can be shared between threads as long as the transport can
    (``httpx.Client`` can). The service never closes the transport; whoever
    created it owns its lifecycle.

    By default response status codes are not inspected. Error payloads are
    decoded into the caller's target like any other body, so callers that
    care must look at the decoded fields themselves. Pass
    ``raise_for_status=True`` to get a ``HerokuAPIError`` for non-2xx
    responses instead.
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        *,
        base_url: str = DEFAULT_API_URL,
        raise_for_status: bool = False,
        debug: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            http: Transport used for every call. Defaults to
                ``create_http_client()``.
            base_url: API origin each request path is appended to.
            raise_for_status: Raise HerokuAPIError on non-2xx responses.
            debug: Enable debug logging to stderr.
        """
        self._http = http if http is not None else create_http_client()
        self._base_url = base_url
        self._raise_for_status = raise_for_status
        self._debug = debug

    @classmethod
    def from_env(cls, http: httpx.Client | None = None) -> "Service":
        """Create a service from environment variables.

        Optional environment variables:
            HEROKU_API_URL: Base URL of the API.
            HEROKU_API_KEY: API key placed on the default transport.
            HEROKU_TIMEOUT_MS: Transport timeout in milliseconds.
            HEROKU_RAISE_FOR_STATUS: Set to "1" to raise on non-2xx responses.
            HEROKU_DEBUG: Set to "1" to enable debug logging.

        ``HEROKU_API_KEY`` and ``HEROKU_TIMEOUT_MS`` are ignored when an
        ``http`` transport is passed in.

        Raises:
            HerokuConfigError: If HEROKU_TIMEOUT_MS is not an integer.
        """
        base_url = os.environ.get("HEROKU_API_URL") or DEFAULT_API_URL
        raise_for_status = os.environ.get("HEROKU_RAISE_FOR_STATUS", "") == "1"
        debug = os.environ.get("HEROKU_DEBUG", "") == "1"

        if http is None:
            raw_timeout = os.environ.get("HEROKU_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))
            try:
                timeout_ms = int(raw_timeout)
            except ValueError as e:
                raise HerokuConfigError(
                    f"HEROKU_TIMEOUT_MS must be an integer, got {raw_timeout!r}"
                ) from e
            http = create_http_client(
                timeout=timeout_ms / 1000,
                api_key=os.environ.get("HEROKU_API_KEY"),
            )

        return cls(
            http,
            base_url=base_url,
            raise_for_status=raise_for_status,
            debug=debug,
        )

    @property
    def http(self) -> httpx.Client:
        """The transport used for all calls."""
        return self._http

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def raise_for_status(self) -> bool:
        return self._raise_for_status

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[heroku-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Request Construction
    # =========================================================================

    def new_request(
        self,
        method: str,
        path: str,
        body: Body | None = None,
    ) -> httpx.Request:
        """Build a request without sending it.

        Args:
            method: HTTP method, e.g. "GET".
            path: Path appended to the base URL, starting with "/".
            body: Request body variant. None is the same as Absent().

        Returns:
            An unsent httpx.Request with Accept and User-Agent set, and
            Content-Type set only for JSON bodies.

        Raises:
            HerokuRequestError: If the method or path is malformed.
            HerokuEncodingError: If a JSON body cannot be serialized.
        """
        if not method or not _METHOD_RE.match(method):
            raise HerokuRequestError(f"Invalid HTTP method: {method!r}")
        if not path.startswith("/"):
            raise HerokuRequestError(f"Path must start with '/': {path!r}")

        content, content_type = self._encode_body(body)

        headers = {
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": USER_AGENT,
        }
        if content_type is not None:
            headers["Content-Type"] = content_type

        url = self._base_url + path
        try:
            request = self._http.build_request(method, url, content=content, headers=headers)
        except httpx.InvalidURL as e:
            raise HerokuRequestError(f"Invalid request URL {url!r}: {e}") from e

        if self._debug:
            self._log_debug(f"{method} {url}{self._describe_body(body)}")
        return request

    @staticmethod
    def _encode_body(body: Body | None) -> tuple[Any, str | None]:
        """Resolve a body variant into request content and content type."""
        if body is None or isinstance(body, Absent):
            return None, None
        if isinstance(body, Text):
            return body.value, None
        if isinstance(body, Raw):
            return body.content(), None
        if isinstance(body, Json):
            if body.value is None:
                return None, None
            return _dump_json(body.value), JSON_CONTENT_TYPE
        raise HerokuRequestError(f"Unsupported body type: {type(body).__name__}")

    @staticmethod
    def _describe_body(body: Body | None) -> str:
        if isinstance(body, Json) and body.value is not None:
            value = body.value
            if isinstance(value, list):
                value = [_plain(item) for item in value]
            else:
                value = _plain(value)
            if isinstance(value, (dict, list)):
                value = redact_payload(value)
            return f" body={json.dumps(value, default=str)}"
        if isinstance(body, Text):
            return f" body=<text {len(body.value)} chars>"
        if isinstance(body, Raw):
            return " body=<raw stream>"
        return ""

    # =========================================================================
    # Dispatch
    # =========================================================================

    def do(
        self,
        target: DecodeTarget | None,
        method: str,
        path: str,
        body: Body | None = None,
        lr: ListRange | None = None,
    ) -> Any:
        """Send one request and handle its response.

        Args:
            target: How to handle the response body. None is the same as
                Discard().
            method: HTTP method.
            path: Path appended to the base URL.
            body: Request body variant.
            lr: Optional list range, sent as the Range header.

        Returns:
            The decoded value for DecodeJson targets, otherwise None.

        Raises:
            HerokuRequestError: If the request cannot be built.
            HerokuEncodingError: If the body cannot be serialized.
            HerokuDecodingError: If the response does not decode into target.
            HerokuAPIError: On non-2xx responses when raise_for_status is on.
            httpx.TransportError: On connection, DNS, TLS or timeout failures.
        """
        request = self.new_request(method, path, body)
        if lr is not None:
            lr.set_header(request)
        return self.send(request, target)

    def send(self, request: httpx.Request, target: DecodeTarget | None = None) -> Any:
        """Send a prepared request and handle its response body.

        The response is closed exactly once before returning, whether the body
        was decoded, copied, discarded or failed to decode.
        """
        response = self._http.send(request, stream=True)
        try:
            self._log_debug(f"{request.method} {request.url} -> {response.status_code}")
            if self._raise_for_status and not response.is_success:
                raise _api_error(response)
            return self._handle_body(response, target)
        finally:
            response.close()

    @staticmethod
    def _handle_body(response: httpx.Response, target: DecodeTarget | None) -> Any:
        if target is None or isinstance(target, Discard):
            for _ in response.iter_bytes():
                pass
            return None
        if isinstance(target, CopyTo):
            for chunk in response.iter_bytes():
                target.sink.write(chunk)
            return None
        if isinstance(target, DecodeJson):
            content = response.read()
            try:
                return target.decode(content)
            except ValueError as e:
                # pydantic's ValidationError covers both bad JSON and bad shape
                raise HerokuDecodingError(f"Failed to decode response: {e}") from e
        raise HerokuDecodingError(f"Unsupported decode target: {type(target).__name__}")

    # =========================================================================
    # Convenience Methods
    # =========================================================================

    def get(self, target: DecodeTarget | None, path: str, lr: ListRange | None = None) -> Any:
        return self.do(target, "GET", path, None, lr)

    def patch(self, target: DecodeTarget | None, path: str, body: Body | None) -> Any:
        return self.do(target, "PATCH", path, body, None)

    def post(self, target: DecodeTarget | None, path: str, body: Body | None) -> Any:
        return self.do(target, "POST", path, body, None)

    def put(self, target: DecodeTarget | None, path: str, body: Body | None) -> Any:
        return self.do(target, "PUT", path, body, None)

    def delete(self, path: str) -> None:
        self.do(None, "DELETE", path, None, None)


def _dump_json(value: Any) -> bytes:
    """Serialize a JSON body.

    Pydantic models drop fields that are None; everything else is dumped as is.
    """
    try:
        if isinstance(value, BaseModel):
            return value.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")
        return json.dumps(value, separators=(",", ":"), default=_json_default).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise HerokuEncodingError(f"Failed to encode request body: {e}") from e


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    return value


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True, by_alias=True)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _api_error(response: httpx.Response) -> HerokuAPIError:
    """Build a HerokuAPIError from a non-2xx response, draining its body."""
    content = response.read()
    message = f"Heroku API returned {response.status_code}"
    error_id = None
    try:
        payload = json.loads(content) if content else None
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error_id = payload.get("id")
        if payload.get("message"):
            message = f"{message}: {payload['message']}"
    return HerokuAPIError(message, status_code=response.status_code, error_id=error_id)
