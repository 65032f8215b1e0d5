"""Regions and stacks."""

from __future__ import annotations

from heroku_sdk._internal.dispatch import DecodeJson, ListRange
from heroku_sdk.models.platform import Region, Stack
from heroku_sdk.resources._base import Resource


class RegionsResource(Resource):
    def info(self, region: str) -> Region:
        return self._service.get(DecodeJson(Region), f"/regions/{region}")

    def list(self, lr: ListRange | None = None) -> list[Region]:
        return self._service.get(DecodeJson(list[Region]), "/regions", lr)


class StacksResource(Resource):
    def info(self, stack: str) -> Stack:
        return self._service.get(DecodeJson(Stack), f"/stacks/{stack}")

    def list(self, lr: ListRange | None = None) -> list[Stack]:
        return self._service.get(DecodeJson(list[Stack]), "/stacks", lr)
