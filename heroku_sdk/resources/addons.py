"""Add-on services, their plans, and add-ons provisioned for apps."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
from heroku_sdk.models.addon import Addon, AddonCreate, AddonService, AddonUpdate, Plan
from heroku_sdk.resources._base import Resource


class AddonServicesResource(Resource):
    def info(self, addon_service: str) -> AddonService:
        return self._service.get(DecodeJson(AddonService), f"/addon-services/{addon_service}")

    def list(self, lr: ListRange | None = None) -> list[AddonService]:
        return self._service.get(DecodeJson(list[AddonService]), "/addon-services", lr)


class PlansResource(Resource):
    def info(self, addon_service: str, plan: str) -> Plan:
        return self._service.get(
            DecodeJson(Plan), f"/addon-services/{addon_service}/plans/{plan}"
        )

    def list(self, addon_service: str, lr: ListRange | None = None) -> list[Plan]:
        return self._service.get(
            DecodeJson(list[Plan]), f"/addon-services/{addon_service}/plans", lr
        )


class AddonsResource(Resource):
    def create(self, app: str, opts: AddonCreate) -> Addon:
        return self._service.post(DecodeJson(Addon), f"/apps/{app}/addons", Json(opts))

    def delete(self, app: str, addon: str) -> None:
        self._service.delete(f"/apps/{app}/addons/{addon}")

    def info(self, app: str, addon: str) -> Addon:
        return self._service.get(DecodeJson(Addon), f"/apps/{app}/addons/{addon}")

    def list(self, app: str, lr: ListRange | None = None) -> list[Addon]:
        return self._service.get(DecodeJson(list[Addon]), f"/apps/{app}/addons", lr)

    def update(self, app: str, addon: str, opts: AddonUpdate) -> Addon:
        """Change the plan of an add-on."""
        return self._service.patch(DecodeJson(Addon), f"/apps/{app}/addons/{addon}", Json(opts))
