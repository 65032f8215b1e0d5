"""Tests for HerokuClient and its resources."""

import io
import json
import os
from unittest.mock import patch

import httpx
import pytest
import respx

from heroku_sdk import (
    DEFAULT_API_URL,
    USER_AGENT,
    HerokuClient,
    ListRange,
    create_http_client,
    get_client,
)
from heroku_sdk.exceptions import HerokuAPIError, HerokuRequestError
from heroku_sdk.models import (
    AccountChangePassword,
    AddonCreate,
    App,
    AppCreate,
    AppUpdate,
    DomainCreate,
    DynoCreate,
    FormationBatchItem,
    FormationBatchUpdate,
    FormationUpdate,
    LogSession,
    LogSessionCreate,
    OAuthGrant,
    OAuthTokenCreate,
    ReleaseRollback,
)

API = DEFAULT_API_URL


@pytest.fixture
def client():
    return HerokuClient(httpx.Client())


class TestHerokuClientInit:
    """Tests for client construction."""

    def test_shares_one_service(self, client):
        """Every resource should use the client's service."""
        assert client.apps._service is client.service
        assert client.dynos._service is client.service

    def test_from_env(self):
        """Should configure the service from the environment."""
        env = {"HEROKU_API_URL": "http://mock", "HEROKU_RAISE_FOR_STATUS": "1"}
        with patch.dict(os.environ, env, clear=True):
            client = HerokuClient.from_env()
            assert client.service.base_url == "http://mock"
            assert client.service.raise_for_status is True

    def test_get_client(self):
        """Should return an env-configured client."""
        with patch.dict(os.environ, {}, clear=True):
            assert isinstance(get_client(), HerokuClient)


class TestApps:
    """Tests for the apps resource."""

    @respx.mock
    def test_info(self, client):
        """Should GET the app with only the fixed headers."""
        route = respx.get(f"{API}/apps/my-app").mock(
            return_value=httpx.Response(
                200,
                json={
                    "id": "01234567-89ab-cdef-0123-456789abcdef",
                    "name": "my-app",
                    "region": {"id": "r1", "name": "us"},
                    "created_at": "2012-01-01T12:00:00Z",
                },
            )
        )
        app = client.apps.info("my-app")

        assert isinstance(app, App)
        assert app.name == "my-app"
        assert app.region.name == "us"
        assert app.created_at.year == 2012
        request = route.calls.last.request
        assert request.headers["accept"] == "application/json"
        assert request.headers["user-agent"] == USER_AGENT
        assert "content-type" not in request.headers
        assert "range" not in request.headers

    @respx.mock
    def test_list_with_range(self, client):
        """Should send the Range header and decode a list."""
        route = respx.get(f"{API}/apps").mock(
            return_value=httpx.Response(206, json=[{"name": "a"}, {"name": "b"}])
        )
        apps = client.apps.list(ListRange(field="name", max=2))

        assert [a.name for a in apps] == ["a", "b"]
        assert route.calls.last.request.headers["range"] == "name ..; max=2"

    @respx.mock
    def test_create_without_options(self, client):
        """Should POST an empty JSON object when no options are given."""
        route = respx.post(f"{API}/apps").mock(
            return_value=httpx.Response(201, json={"name": "generated-name-1234"})
        )
        app = client.apps.create()

        assert app.name == "generated-name-1234"
        assert route.calls.last.request.content == b"{}"

    @respx.mock
    def test_create_omits_unset_fields(self, client):
        """Should send only the options that were set."""
        route = respx.post(f"{API}/apps").mock(return_value=httpx.Response(201, json={}))
        client.apps.create(AppCreate(name="my-app"))

        request = route.calls.last.request
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"name": "my-app"}

    @respx.mock
    def test_update_can_send_false(self, client):
        """Should send an explicit false for maintenance."""
        route = respx.patch(f"{API}/apps/my-app").mock(return_value=httpx.Response(200, json={}))
        client.apps.update("my-app", AppUpdate(maintenance=False))
        assert json.loads(route.calls.last.request.content) == {"maintenance": False}

    @respx.mock
    def test_delete(self, client):
        """Should DELETE without a body and return nothing."""
        route = respx.delete(f"{API}/apps/my-app").mock(
            return_value=httpx.Response(200, json={"name": "my-app"})
        )
        assert client.apps.delete("my-app") is None
        assert route.calls.last.request.content == b""

    @respx.mock
    def test_not_found_decoded_by_default(self, client):
        """Should decode an error body into the model without raising."""
        respx.get(f"{API}/apps/missing").mock(
            return_value=httpx.Response(404, json={"id": "not_found", "message": "Not found."})
        )
        app = client.apps.info("missing")
        assert app.id == "not_found"
        assert app.name is None

    @respx.mock
    def test_not_found_raises_when_enabled(self):
        """Should raise HerokuAPIError when status checking is on."""
        respx.get(f"{API}/apps/missing").mock(
            return_value=httpx.Response(404, json={"id": "not_found", "message": "Not found."})
        )
        client = HerokuClient(httpx.Client(), raise_for_status=True)
        with pytest.raises(HerokuAPIError) as exc_info:
            client.apps.info("missing")
        assert exc_info.value.status_code == 404
        assert exc_info.value.error_id == "not_found"


class TestAppScopedResources:
    """Tests for resources nested under an app."""

    @respx.mock
    def test_config_vars_update_keeps_nulls(self, client):
        """Should send None as null to unset a config var."""
        route = respx.patch(f"{API}/apps/my-app/config-vars").mock(
            return_value=httpx.Response(200, json={"ENV": "prod"})
        )
        result = client.config_vars.update("my-app", {"DEBUG": None, "ENV": "prod"})

        assert result == {"ENV": "prod"}
        assert json.loads(route.calls.last.request.content) == {"DEBUG": None, "ENV": "prod"}

    @respx.mock
    def test_config_vars_info(self, client):
        """Should decode config vars into a plain dict."""
        respx.get(f"{API}/apps/my-app/config-vars").mock(
            return_value=httpx.Response(200, json={"A": "1", "B": "2"})
        )
        assert client.config_vars.info("my-app") == {"A": "1", "B": "2"}

    @respx.mock
    def test_domain_create(self, client):
        """Should POST the hostname."""
        route = respx.post(f"{API}/apps/my-app/domains").mock(
            return_value=httpx.Response(201, json={"hostname": "example.com"})
        )
        domain = client.domains.create("my-app", DomainCreate(hostname="example.com"))
        assert domain.hostname == "example.com"
        assert json.loads(route.calls.last.request.content) == {"hostname": "example.com"}

    @respx.mock
    def test_addon_create(self, client):
        """Should POST the plan and decode the nested plan identity."""
        route = respx.post(f"{API}/apps/my-app/addons").mock(
            return_value=httpx.Response(
                201, json={"name": "db-1", "plan": {"id": "p1", "name": "heroku-postgresql:dev"}}
            )
        )
        addon = client.addons.create("my-app", AddonCreate(plan="heroku-postgresql:dev"))
        assert addon.plan.name == "heroku-postgresql:dev"
        assert json.loads(route.calls.last.request.content) == {"plan": "heroku-postgresql:dev"}

    @respx.mock
    def test_plans_list(self, client):
        """Should list plans of an add-on service."""
        respx.get(f"{API}/addon-services/heroku-postgresql/plans").mock(
            return_value=httpx.Response(200, json=[{"name": "dev", "price": {"cents": 0, "unit": "month"}}])
        )
        plans = client.plans.list("heroku-postgresql")
        assert plans[0].price.unit == "month"


class TestProcesses:
    """Tests for dynos, formation and releases."""

    @respx.mock
    def test_dyno_create(self, client):
        """Should POST the one-off dyno options."""
        route = respx.post(f"{API}/apps/my-app/dynos").mock(
            return_value=httpx.Response(201, json={"name": "run.1", "release": {"version": 7}})
        )
        dyno = client.dynos.create("my-app", DynoCreate(command="bash", attach=True))

        assert dyno.release.version == 7
        assert json.loads(route.calls.last.request.content) == {"command": "bash", "attach": True}

    @respx.mock
    def test_dyno_restart(self, client):
        """Should restart a dyno with a DELETE."""
        route = respx.delete(f"{API}/apps/my-app/dynos/web.1").mock(return_value=httpx.Response(202))
        client.dynos.restart("my-app", "web.1")
        assert route.called

    @respx.mock
    def test_dyno_restart_all(self, client):
        """Should restart all dynos with a DELETE on the collection."""
        route = respx.delete(f"{API}/apps/my-app/dynos").mock(return_value=httpx.Response(202))
        client.dynos.restart_all("my-app")
        assert route.called

    @respx.mock
    def test_formation_update(self, client):
        """Should PATCH one process type."""
        route = respx.patch(f"{API}/apps/my-app/formation/web").mock(
            return_value=httpx.Response(200, json={"type": "web", "quantity": 2})
        )
        formation = client.formation.update("my-app", "web", FormationUpdate(quantity=2))
        assert formation.quantity == 2
        assert json.loads(route.calls.last.request.content) == {"quantity": 2}

    @respx.mock
    def test_formation_batch_update(self, client):
        """Should PATCH the batch and decode the updated list."""
        route = respx.patch(f"{API}/apps/my-app/formation").mock(
            return_value=httpx.Response(200, json=[{"type": "web", "quantity": 1, "size": "2X"}])
        )
        result = client.formation.batch_update(
            "my-app",
            FormationBatchUpdate(updates=[FormationBatchItem(process="web", size="2X")]),
        )

        assert result[0].size == "2X"
        assert json.loads(route.calls.last.request.content) == {
            "updates": [{"process": "web", "size": "2X"}]
        }

    @respx.mock
    def test_release_rollback(self, client):
        """Should POST the release to roll back to."""
        route = respx.post(f"{API}/apps/my-app/releases").mock(
            return_value=httpx.Response(201, json={"version": 12})
        )
        release = client.releases.rollback("my-app", ReleaseRollback(release="v10"))
        assert release.version == 12
        assert json.loads(route.calls.last.request.content) == {"release": "v10"}

    @respx.mock
    def test_release_list_descending(self, client):
        """Should send the literal descending range header."""
        route = respx.get(f"{API}/apps/my-app/releases").mock(return_value=httpx.Response(200, json=[]))
        client.releases.list("my-app", ListRange(field="version", max=10, descending=True))
        assert route.calls.last.request.headers["range"] == "version ..; max=10, , order=desc"


class TestAccountAndOAuth:
    """Tests for account-level and OAuth resources."""

    @respx.mock
    def test_change_password(self, client):
        """Should PATCH the account with both passwords."""
        route = respx.patch(f"{API}/account").mock(
            return_value=httpx.Response(200, json={"email": "me@example.com"})
        )
        account = client.account.change_password(
            AccountChangePassword(new_password="new", password="old")
        )
        assert account.email == "me@example.com"
        assert json.loads(route.calls.last.request.content) == {
            "new_password": "new",
            "password": "old",
        }

    @respx.mock
    def test_rate_limits(self, client):
        """Should read the remaining quota."""
        respx.get(f"{API}/account/rate-limits").mock(
            return_value=httpx.Response(200, json={"remaining": 2399})
        )
        assert client.rate_limits.info().remaining == 2399

    @respx.mock
    def test_key_delete(self, client):
        """Should DELETE the key."""
        route = respx.delete(f"{API}/account/keys/abc").mock(return_value=httpx.Response(200))
        client.keys.delete("abc")
        assert route.called

    @respx.mock
    def test_oauth_token_create_nested(self, client):
        """Should omit unset nested objects of a token request."""
        route = respx.post(f"{API}/oauth/tokens").mock(
            return_value=httpx.Response(201, json={"access_token": {"token": "t", "expires_in": 28800}})
        )
        token = client.oauth_tokens.create(
            OAuthTokenCreate(grant=OAuthGrant(code="abc", type="authorization_code"))
        )

        assert token.access_token.expires_in == 28800
        assert json.loads(route.calls.last.request.content) == {
            "grant": {"code": "abc", "type": "authorization_code"}
        }

    @respx.mock
    def test_stacks_list(self, client):
        """Should list stacks."""
        respx.get(f"{API}/stacks").mock(return_value=httpx.Response(200, json=[{"name": "cedar"}]))
        assert client.stacks.list()[0].name == "cedar"


class TestLogSessions:
    """Tests for log sessions and log streaming."""

    @respx.mock
    def test_create_and_stream(self, client):
        """Should create a session and copy its stream into the sink."""
        logplex_url = "https://logplex.example.com/sessions/abc?srv=1"
        lines = b"2024-01-01T00:00:00+00:00 app[web.1]: hello\n"
        create = respx.post(f"{API}/apps/my-app/log-sessions").mock(
            return_value=httpx.Response(201, json={"id": "s1", "logplex_url": logplex_url})
        )
        stream = respx.get(logplex_url).mock(return_value=httpx.Response(200, content=lines))

        session = client.log_sessions.create("my-app", LogSessionCreate(lines=10, tail=False))
        sink = io.BytesIO()
        client.log_sessions.stream(session, sink)

        assert json.loads(create.calls.last.request.content) == {"lines": 10, "tail": False}
        assert sink.getvalue() == lines
        assert stream.calls.last.request.headers["user-agent"] == USER_AGENT

    @respx.mock
    def test_stream_does_not_forward_api_key(self):
        """Should not send the API key to the logplex host."""
        logplex_url = "https://logplex.example.com/sessions/abc?srv=1"
        route = respx.get(logplex_url).mock(return_value=httpx.Response(200, content=b"line\n"))
        client = HerokuClient(create_http_client(api_key="SECRET-KEY"))

        sink = io.BytesIO()
        client.log_sessions.stream(logplex_url, sink)

        assert sink.getvalue() == b"line\n"
        assert "authorization" not in route.calls.last.request.headers

    @respx.mock
    def test_api_calls_keep_api_key(self):
        """Should still authenticate regular API calls."""
        route = respx.get(f"{API}/account").mock(return_value=httpx.Response(200, json={}))
        client = HerokuClient(create_http_client(api_key="SECRET-KEY"))
        client.account.info()
        assert route.calls.last.request.headers["authorization"] == "Bearer SECRET-KEY"

    def test_stream_without_url(self, client):
        """Should refuse to stream a session without a logplex URL."""
        with pytest.raises(HerokuRequestError):
            client.log_sessions.stream(LogSession(id="s1"), io.BytesIO())
