"""User-facing HerokuClient for the Heroku Platform API.

Example usage:
    from heroku_sdk import HerokuClient, ListRange
    from heroku_sdk.models import AppCreate

    client = HerokuClient.from_env()  # reads HEROKU_API_KEY

    app = client.apps.create(AppCreate(name="my-app", region="eu"))
    releases = client.releases.list("my-app", ListRange(max=10, descending=True))
    client.config_vars.update("my-app", {"DEBUG": None})
"""

import httpx

from heroku_sdk._internal.dispatch import Service
from heroku_sdk._internal.http import DEFAULT_API_URL
from heroku_sdk.resources import (
    AccountFeaturesResource,
    AccountResource,
    AddonServicesResource,
    AddonsResource,
    AppFeaturesResource,
    AppsResource,
    AppTransfersResource,
    CollaboratorsResource,
    ConfigVarsResource,
    DomainsResource,
    DynosResource,
    FormationResource,
    KeysResource,
    LogDrainsResource,
    LogSessionsResource,
    OAuthAuthorizationsResource,
    OAuthClientsResource,
    OAuthTokensResource,
    PlansResource,
    RateLimitsResource,
    RegionsResource,
    ReleasesResource,
    SlugsResource,
    SSLEndpointsResource,
    StacksResource,
)


class HerokuClient:
    """Entry point grouping every API resource over one Service.

    Authentication is the transport's job: pass an ``httpx.Client`` that
    already carries credentials, or use ``from_env()`` to build one from
    ``HEROKU_API_KEY``.
    """

    def __init__(
        self,
        http: httpx.Client | None = None,
        *,
        base_url: str = DEFAULT_API_URL,
        raise_for_status: bool = False,
        debug: bool = False,
        service: Service | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            http: Transport for all calls. Defaults to create_http_client().
            base_url: API origin, e.g. a mock server in tests.
            raise_for_status: Raise HerokuAPIError on non-2xx responses.
            debug: Enable debug logging to stderr.
            service: Prebuilt Service; other arguments are ignored when given.
        """
        if service is None:
            service = Service(
                http,
                base_url=base_url,
                raise_for_status=raise_for_status,
                debug=debug,
            )
        self._service = service

        self.account = AccountResource(service)
        self.account_features = AccountFeaturesResource(service)
        self.addon_services = AddonServicesResource(service)
        self.addons = AddonsResource(service)
        self.app_features = AppFeaturesResource(service)
        self.app_transfers = AppTransfersResource(service)
        self.apps = AppsResource(service)
        self.collaborators = CollaboratorsResource(service)
        self.config_vars = ConfigVarsResource(service)
        self.domains = DomainsResource(service)
        self.dynos = DynosResource(service)
        self.formation = FormationResource(service)
        self.keys = KeysResource(service)
        self.log_drains = LogDrainsResource(service)
        self.log_sessions = LogSessionsResource(service)
        self.oauth_authorizations = OAuthAuthorizationsResource(service)
        self.oauth_clients = OAuthClientsResource(service)
        self.oauth_tokens = OAuthTokensResource(service)
        self.plans = PlansResource(service)
        self.rate_limits = RateLimitsResource(service)
        self.regions = RegionsResource(service)
        self.releases = ReleasesResource(service)
        self.slugs = SlugsResource(service)
        self.ssl_endpoints = SSLEndpointsResource(service)
        self.stacks = StacksResource(service)

    @classmethod
    def from_env(cls, http: httpx.Client | None = None) -> "HerokuClient":
        """Create a client configured from environment variables.

        See ``Service.from_env`` for the variables read.
        """
        return cls(service=Service.from_env(http))

    @property
    def service(self) -> Service:
        """The dispatcher, for endpoints without a resource method."""
        return self._service


def get_client() -> HerokuClient:
    """Get a HerokuClient configured from environment variables."""
    return HerokuClient.from_env()
