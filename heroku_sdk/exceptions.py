"""Public exceptions for the Heroku SDK.

Transport failures (connection refused, DNS, TLS, timeouts) are not wrapped:
they surface as the ``httpx.TransportError`` subclass raised by the client.
"""


class HerokuError(Exception):
    """Base exception for all Heroku SDK errors."""


class HerokuRequestError(HerokuError):
    """Request could not be constructed (bad method or path)."""


class HerokuEncodingError(HerokuError):
    """Request body could not be serialized to JSON."""


class HerokuDecodingError(HerokuError):
    """Response body was not valid JSON or did not match the decode type."""


class HerokuAPIError(HerokuError):
    """Non-success response, raised only when status checking is enabled."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_id = error_id


class HerokuConfigError(HerokuError):
    """Configuration error (invalid env vars, invalid config)."""
