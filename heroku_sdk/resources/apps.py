"""Apps and the resources scoped to a single app.

Every ``app`` argument is the app's id or name.
"""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
from heroku_sdk.models.app import (
    App,
    AppCreate,
    AppFeature,
    AppFeatureUpdate,
    AppUpdate,
    Collaborator,
    CollaboratorCreate,
    ConfigVars,
    ConfigVarsUpdate,
    Domain,
    DomainCreate,
)
from heroku_sdk.resources._base import Resource


class AppsResource(Resource):
    def create(self, opts: AppCreate | None = None) -> App:
        """Create an app. With no options the platform picks name and region."""
        return self._service.post(DecodeJson(App), "/apps", Json(opts or AppCreate()))

    def delete(self, app: str) -> None:
        self._service.delete(f"/apps/{app}")

    def info(self, app: str) -> App:
        return self._service.get(DecodeJson(App), f"/apps/{app}")

    def list(self, lr: ListRange | None = None) -> list[App]:
        return self._service.get(DecodeJson(list[App]), "/apps", lr)

    def update(self, app: str, opts: AppUpdate) -> App:
        return self._service.patch(DecodeJson(App), f"/apps/{app}", Json(opts))


class AppFeaturesResource(Resource):
    def info(self, app: str, feature: str) -> AppFeature:
        return self._service.get(DecodeJson(AppFeature), f"/apps/{app}/features/{feature}")

    def list(self, app: str, lr: ListRange | None = None) -> list[AppFeature]:
        return self._service.get(DecodeJson(list[AppFeature]), f"/apps/{app}/features", lr)

    def update(self, app: str, feature: str, opts: AppFeatureUpdate) -> AppFeature:
        return self._service.patch(
            DecodeJson(AppFeature), f"/apps/{app}/features/{feature}", Json(opts)
        )


class CollaboratorsResource(Resource):
    def create(self, app: str, opts: CollaboratorCreate) -> Collaborator:
        return self._service.post(
            DecodeJson(Collaborator), f"/apps/{app}/collaborators", Json(opts)
        )

    def delete(self, app: str, collaborator: str) -> None:
        self._service.delete(f"/apps/{app}/collaborators/{collaborator}")

    def info(self, app: str, collaborator: str) -> Collaborator:
        return self._service.get(
            DecodeJson(Collaborator), f"/apps/{app}/collaborators/{collaborator}"
        )

    def list(self, app: str, lr: ListRange | None = None) -> list[Collaborator]:
        return self._service.get(
            DecodeJson(list[Collaborator]), f"/apps/{app}/collaborators", lr
        )


class ConfigVarsResource(Resource):
    def info(self, app: str) -> ConfigVars:
        return self._service.get(DecodeJson(ConfigVars), f"/apps/{app}/config-vars")

    def update(self, app: str, changes: ConfigVarsUpdate) -> ConfigVars:
        """Set config vars. A None value removes the var."""
        return self._service.patch(
            DecodeJson(ConfigVars), f"/apps/{app}/config-vars", Json(dict(changes))
        )


class DomainsResource(Resource):
    def create(self, app: str, opts: DomainCreate) -> Domain:
        return self._service.post(DecodeJson(Domain), f"/apps/{app}/domains", Json(opts))

    def delete(self, app: str, domain: str) -> None:
        self._service.delete(f"/apps/{app}/domains/{domain}")

    def info(self, app: str, domain: str) -> Domain:
        return self._service.get(DecodeJson(Domain), f"/apps/{app}/domains/{domain}")

    def list(self, app: str, lr: ListRange | None = None) -> list[Domain]:
        return self._service.get(DecodeJson(list[Domain]), f"/apps/{app}/domains", lr)
