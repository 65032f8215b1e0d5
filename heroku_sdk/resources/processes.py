"""Slugs, releases, formation and dynos of an app."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, Json, ListRange
from heroku_sdk.models.process import (
    Dyno,
    DynoCreate,
    Formation,
    FormationBatchUpdate,
    FormationUpdate,
    Release,
    ReleaseCreate,
    ReleaseRollback,
    Slug,
    SlugCreate,
)
from heroku_sdk.resources._base import Resource


class SlugsResource(Resource):
    def info(self, app: str, slug: str) -> Slug:
        return self._service.get(DecodeJson(Slug), f"/apps/{app}/slugs/{slug}")

    def create(self, app: str, opts: SlugCreate) -> Slug:
        """Create a slug. Upload the tarball to the returned ``blob.url``."""
        return self._service.post(DecodeJson(Slug), f"/apps/{app}/slugs", Json(opts))


class ReleasesResource(Resource):
    def info(self, app: str, release: str) -> Release:
        return self._service.get(DecodeJson(Release), f"/apps/{app}/releases/{release}")

    def list(self, app: str, lr: ListRange | None = None) -> list[Release]:
        return self._service.get(DecodeJson(list[Release]), f"/apps/{app}/releases", lr)

    def create(self, app: str, opts: ReleaseCreate) -> Release:
        return self._service.post(DecodeJson(Release), f"/apps/{app}/releases", Json(opts))

    def rollback(self, app: str, opts: ReleaseRollback) -> Release:
        return self._service.post(DecodeJson(Release), f"/apps/{app}/releases", Json(opts))


class FormationResource(Resource):
    """Process formation. ``process_type`` is the type name (``web``) or id."""

    def info(self, app: str, process_type: str) -> Formation:
        return self._service.get(DecodeJson(Formation), f"/apps/{app}/formation/{process_type}")

    def list(self, app: str, lr: ListRange | None = None) -> list[Formation]:
        return self._service.get(DecodeJson(list[Formation]), f"/apps/{app}/formation", lr)

    def batch_update(self, app: str, opts: FormationBatchUpdate) -> list[Formation]:
        return self._service.patch(
            DecodeJson(list[Formation]), f"/apps/{app}/formation", Json(opts)
        )

    def update(self, app: str, process_type: str, opts: FormationUpdate) -> Formation:
        return self._service.patch(
            DecodeJson(Formation), f"/apps/{app}/formation/{process_type}", Json(opts)
        )


class DynosResource(Resource):
    def create(self, app: str, opts: DynoCreate) -> Dyno:
        """Run a one-off dyno."""
        return self._service.post(DecodeJson(Dyno), f"/apps/{app}/dynos", Json(opts))

    def restart(self, app: str, dyno: str) -> None:
        self._service.delete(f"/apps/{app}/dynos/{dyno}")

    def restart_all(self, app: str) -> None:
        self._service.delete(f"/apps/{app}/dynos")

    def info(self, app: str, dyno: str) -> Dyno:
        return self._service.get(DecodeJson(Dyno), f"/apps/{app}/dynos/{dyno}")

    def list(self, app: str, lr: ListRange | None = None) -> list[Dyno]:
        return self._service.get(DecodeJson(list[Dyno]), f"/apps/{app}/dynos", lr)
