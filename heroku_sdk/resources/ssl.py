"""SSL endpoints of an app."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
from heroku_sdk.models.ssl import SSLEndpoint, SSLEndpointCreate, SSLEndpointUpdate
from heroku_sdk.resources._base import Resource


class SSLEndpointsResource(Resource):
    def create(self, app: str, opts: SSLEndpointCreate) -> SSLEndpoint:
        return self._service.post(DecodeJson(SSLEndpoint), f"/apps/{app}/ssl-endpoints", Json(opts))

    def delete(self, app: str, endpoint: str) -> None:
        self._service.delete(f"/apps/{app}/ssl-endpoints/{endpoint}")

    def info(self, app: str, endpoint: str) -> SSLEndpoint:
        return self._service.get(DecodeJson(SSLEndpoint), f"/apps/{app}/ssl-endpoints/{endpoint}")

    def list(self, app: str, lr: ListRange | None = None) -> list[SSLEndpoint]:
        return self._service.get(DecodeJson(list[SSLEndpoint]), f"/apps/{app}/ssl-endpoints", lr)

    def update(self, app: str, endpoint: str, opts: SSLEndpointUpdate) -> SSLEndpoint:
        return self._service.patch(
            DecodeJson(SSLEndpoint), f"/apps/{app}/ssl-endpoints/{endpoint}", Json(opts)
        )
