"""Base class for resource call sites."""

from heroku_sdk._internal.dispatch import Service


class Resource:
    """Groups the operations of one API resource over a shared Service."""

    def __init__(self, service: Service) -> None:
        self._service = service
