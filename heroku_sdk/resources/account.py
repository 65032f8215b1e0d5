"""Account-level resources."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
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
from heroku_sdk.resources._base import Resource


class AccountResource(Resource):
    def info(self) -> Account:
        return self._service.get(DecodeJson(Account), "/account")

    def update(self, opts: AccountUpdate) -> Account:
        return self._service.patch(DecodeJson(Account), "/account", Json(opts))

    def change_email(self, opts: AccountChangeEmail) -> Account:
        return self._service.patch(DecodeJson(Account), "/account", Json(opts))

    def change_password(self, opts: AccountChangePassword) -> Account:
        return self._service.patch(DecodeJson(Account), "/account", Json(opts))


class AccountFeaturesResource(Resource):
    def info(self, feature: str) -> AccountFeature:
        return self._service.get(DecodeJson(AccountFeature), f"/account/features/{feature}")

    def list(self, lr: ListRange | None = None) -> list[AccountFeature]:
        return self._service.get(DecodeJson(list[AccountFeature]), "/account/features", lr)

    def update(self, feature: str, opts: AccountFeatureUpdate) -> AccountFeature:
        return self._service.patch(
            DecodeJson(AccountFeature), f"/account/features/{feature}", Json(opts)
        )


class KeysResource(Resource):
    """SSH keys of the account."""

    def create(self, opts: KeyCreate) -> Key:
        return self._service.post(DecodeJson(Key), "/account/keys", Json(opts))

    def delete(self, key: str) -> None:
        self._service.delete(f"/account/keys/{key}")

    def info(self, key: str) -> Key:
        return self._service.get(DecodeJson(Key), f"/account/keys/{key}")

    def list(self, lr: ListRange | None = None) -> list[Key]:
        return self._service.get(DecodeJson(list[Key]), "/account/keys", lr)


class AppTransfersResource(Resource):
    def create(self, opts: AppTransferCreate) -> AppTransfer:
        return self._service.post(DecodeJson(AppTransfer), "/account/app-transfers", Json(opts))

    def delete(self, transfer: str) -> None:
        self._service.delete(f"/account/app-transfers/{transfer}")

    def info(self, transfer: str) -> AppTransfer:
        return self._service.get(DecodeJson(AppTransfer), f"/account/app-transfers/{transfer}")

    def list(self, lr: ListRange | None = None) -> list[AppTransfer]:
        return self._service.get(DecodeJson(list[AppTransfer]), "/account/app-transfers", lr)

    def update(self, transfer: str, opts: AppTransferUpdate) -> AppTransfer:
        return self._service.patch(
            DecodeJson(AppTransfer), f"/account/app-transfers/{transfer}", Json(opts)
        )


class RateLimitsResource(Resource):
    def info(self) -> RateLimit:
        """Read the remaining request quota. Does not count towards it."""
        return self._service.get(DecodeJson(RateLimit), "/account/rate-limits")
