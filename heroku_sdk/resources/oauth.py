"""OAuth clients, authorizations and tokens."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
from heroku_sdk.models.oauth import (
    OAuthAuthorization,
    OAuthAuthorizationCreate,
    OAuthClient,
    OAuthClientCreate,
    OAuthClientUpdate,
    OAuthToken,
    OAuthTokenCreate,
)
from heroku_sdk.resources._base import Resource


class OAuthClientsResource(Resource):
    def create(self, opts: OAuthClientCreate) -> OAuthClient:
        return self._service.post(DecodeJson(OAuthClient), "/oauth/clients", Json(opts))

    def delete(self, client: str) -> None:
        self._service.delete(f"/oauth/clients/{client}")

    def info(self, client: str) -> OAuthClient:
        return self._service.get(DecodeJson(OAuthClient), f"/oauth/clients/{client}")

    def list(self, lr: ListRange | None = None) -> list[OAuthClient]:
        return self._service.get(DecodeJson(list[OAuthClient]), "/oauth/clients", lr)

    def update(self, client: str, opts: OAuthClientUpdate) -> OAuthClient:
        return self._service.patch(DecodeJson(OAuthClient), f"/oauth/clients/{client}", Json(opts))


class OAuthAuthorizationsResource(Resource):
    def create(self, opts: OAuthAuthorizationCreate) -> OAuthAuthorization:
        return self._service.post(
            DecodeJson(OAuthAuthorization), "/oauth/authorizations", Json(opts)
        )

    def delete(self, authorization: str) -> None:
        self._service.delete(f"/oauth/authorizations/{authorization}")

    def info(self, authorization: str) -> OAuthAuthorization:
        return self._service.get(
            DecodeJson(OAuthAuthorization), f"/oauth/authorizations/{authorization}"
        )

    def list(self, lr: ListRange | None = None) -> list[OAuthAuthorization]:
        return self._service.get(
            DecodeJson(list[OAuthAuthorization]), "/oauth/authorizations", lr
        )


class OAuthTokensResource(Resource):
    def create(self, opts: OAuthTokenCreate) -> OAuthToken:
        return self._service.post(DecodeJson(OAuthToken), "/oauth/tokens", Json(opts))
