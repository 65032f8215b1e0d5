"""Log drains and log sessions."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import ByteSink, CopyTo, DecodeJson, Json, ListRange
from heroku_sdk._internal.http import USER_AGENT
from heroku_sdk.exceptions import HerokuRequestError
from heroku_sdk.models.log import LogDrain, LogDrainCreate, LogSession, LogSessionCreate
from heroku_sdk.resources._base import Resource


class LogDrainsResource(Resource):
    def create(self, app: str, opts: LogDrainCreate) -> LogDrain:
        return self._service.post(DecodeJson(LogDrain), f"/apps/{app}/log-drains", Json(opts))

    def delete(self, app: str, drain: str) -> None:
        """Remove a drain. Drains added by add-ons go away with the add-on only."""
        self._service.delete(f"/apps/{app}/log-drains/{drain}")

    def info(self, app: str, drain: str) -> LogDrain:
        return self._service.get(DecodeJson(LogDrain), f"/apps/{app}/log-drains/{drain}")

    def list(self, app: str, lr: ListRange | None = None) -> list[LogDrain]:
        return self._service.get(DecodeJson(list[LogDrain]), f"/apps/{app}/log-drains", lr)


class LogSessionsResource(Resource):
    def create(self, app: str, opts: LogSessionCreate | None = None) -> LogSession:
        return self._service.post(
            DecodeJson(LogSession), f"/apps/{app}/log-sessions", Json(opts or LogSessionCreate())
        )

    def stream(self, session: LogSession | str, sink: ByteSink) -> None:
        """Copy the log stream of a session into ``sink``.

        Args:
            session: A created LogSession, or its ``logplex_url``.
            sink: Anything with a ``write(bytes)`` method, e.g. sys.stdout.buffer.

        The logplex URL is absolute and already carries its credentials, so it
        is sent as is rather than under the service's base URL, and the API
        key on the transport is never forwarded to it. With ``tail=True`` this
        blocks until the server ends the stream.
        """
        url = session.logplex_url if isinstance(session, LogSession) else session
        if not url:
            raise HerokuRequestError("Log session has no logplex_url")
        request = self._service.http.build_request(
            "GET", url, headers={"User-Agent": USER_AGENT}
        )
        request.headers.pop("Authorization", None)
        self._service.send(request, CopyTo(sink))
