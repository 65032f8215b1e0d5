"""Tests for resource models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from heroku_sdk.models import (
    AccountUpdate,
    App,
    AppTransferUpdate,
    Dyno,
    LogDrain,
    OAuthAuthorization,
    OAuthAuthorizationCreate,
    SSLEndpointUpdate,
)


class TestResponseModels:
    """Tests for decoding API payloads."""

    def test_app_from_full_payload(self):
        """Should parse nested identities, sizes and timestamps."""
        app = App.model_validate({
            "id": "01234567-89ab-cdef-0123-456789abcdef",
            "name": "example",
            "owner": {"id": "u1", "email": "owner@example.com"},
            "region": {"id": "r1", "name": "us"},
            "stack": {"id": "s1", "name": "cedar"},
            "archived_at": None,
            "repo_size": 1024,
            "slug_size": None,
            "maintenance": False,
            "created_at": "2012-01-01T12:00:00Z",
            "web_url": "http://example.herokuapp.com/",
        })
        assert app.owner.email == "owner@example.com"
        assert app.stack.name == "cedar"
        assert app.repo_size == 1024
        assert app.slug_size is None
        assert app.maintenance is False
        assert isinstance(app.created_at, datetime)

    def test_empty_payload(self):
        """Should accept an empty object."""
        assert Dyno.model_validate({}) == Dyno()

    def test_unknown_fields_ignored(self):
        """Should ignore fields the model does not declare."""
        drain = LogDrain.model_validate({"url": "syslog://logs.example.com", "extra": 1})
        assert drain.url == "syslog://logs.example.com"
        assert not hasattr(drain, "extra")

    def test_oauth_authorization_nested(self):
        """Should parse nested OAuth token objects."""
        auth = OAuthAuthorization.model_validate({
            "access_token": {"id": "t1", "token": "abc", "expires_in": None},
            "grant": {"code": "g", "expires_in": 300},
            "scope": ["global"],
        })
        assert auth.access_token.token == "abc"
        assert auth.access_token.expires_in is None
        assert auth.grant.expires_in == 300
        assert auth.scope == ["global"]


class TestRequestModels:
    """Tests for request payload models."""

    def test_unset_fields_excluded(self):
        """Should drop unset fields when dumped without None."""
        update = AccountUpdate(beta=True)
        assert update.model_dump(exclude_none=True) == {"beta": True}

    def test_false_is_kept(self):
        """Should keep explicit false values."""
        update = SSLEndpointUpdate(rollback=False)
        assert update.model_dump(exclude_none=True) == {"rollback": False}

    def test_required_scope(self):
        """Should require scope for an authorization."""
        with pytest.raises(ValidationError):
            OAuthAuthorizationCreate()  # type: ignore[call-arg]

    def test_transfer_state_restricted(self):
        """Should only accept known transfer states."""
        assert AppTransferUpdate(state="accepted").state == "accepted"
        with pytest.raises(ValidationError):
            AppTransferUpdate(state="maybe")  # type: ignore[arg-type]
