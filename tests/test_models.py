"""Tests for nodesty.models -- envelopes, request bodies and config models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from nodesty.exceptions import (
    ApiError,
    AuthError,
    ConnectionError_,
    NotFoundError,
    RequestError,
    ServerError,
)
from nodesty.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_NOT_FOUND,
    EXIT_REQUEST_ERROR,
    EXIT_SERVER_ERROR,
)
from nodesty.models import (
    ApiResponse,
    ClientConfig,
    DedicatedReinstallParams,
    ErrorKind,
    FirewallAttackNotificationParams,
    FirewallRuleParams,
    Profile,
    VpsActionParams,
    VpsReinstallParams,
)


# ---------------------------------------------------------------------------
# ApiResponse
# ---------------------------------------------------------------------------


class TestApiResponse:
    def test_ok(self) -> None:
        result = ApiResponse.ok(data=[1], message="OK", status_code=200)
        assert result.success is True
        assert result.unwrap() == [1]
        assert result.error is None

    def test_frozen(self) -> None:
        result = ApiResponse.ok(data=1)
        with pytest.raises(ValidationError):
            result.success = False

    def test_to_exception_on_success_rejected(self) -> None:
        with pytest.raises(ValueError):
            ApiResponse.ok().to_exception()

    @pytest.mark.parametrize(
        "kind, status, exc_type, exit_code",
        [
            (ErrorKind.CLIENT_ERROR, 401, AuthError, EXIT_AUTH_FAILURE),
            (ErrorKind.CLIENT_ERROR, 403, AuthError, EXIT_AUTH_FAILURE),
            (ErrorKind.CLIENT_ERROR, 404, NotFoundError, EXIT_NOT_FOUND),
            (ErrorKind.CLIENT_ERROR, 422, ApiError, EXIT_GENERIC_FAILURE),
            (ErrorKind.SERVER_ERROR, 503, ServerError, EXIT_SERVER_ERROR),
            (ErrorKind.NETWORK_ERROR, None, ConnectionError_, EXIT_CONNECTION_ERROR),
            (ErrorKind.REQUEST_ERROR, None, RequestError, EXIT_REQUEST_ERROR),
        ],
    )
    def test_unwrap_raises_matching_error(self, kind, status, exc_type, exit_code) -> None:
        result = ApiResponse.fail(kind, "short", "long description", status)
        with pytest.raises(exc_type) as info:
            result.unwrap()

        assert info.value.exit_code == exit_code
        assert info.value.status_code == status
        assert str(info.value) == "long description (short)"

    def test_exception_text_not_duplicated(self) -> None:
        exc = ApiResponse.fail(ErrorKind.REQUEST_ERROR, "same", "same").to_exception()
        assert str(exc) == "same"


# ---------------------------------------------------------------------------
# ClientConfig
# ---------------------------------------------------------------------------


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig(api_key="k")
        assert config.base_url == "https://nodesty.com"
        assert config.timeout == 30.0
        assert config.max_retries == 3

    @pytest.mark.parametrize(
        "kwargs",
        [{"api_key": ""}, {"api_key": "k", "timeout": 0}, {"api_key": "k", "max_retries": -1}],
    )
    def test_invalid(self, kwargs) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(**kwargs)


# ---------------------------------------------------------------------------
# Request parameter models
# ---------------------------------------------------------------------------


class TestParams:
    def test_aliases_on_dump(self) -> None:
        assert VpsReinstallParams(password="p", os_id=3).to_body() == {"password": "p", "osId": 3}

    def test_populate_by_alias(self) -> None:
        assert VpsReinstallParams(password="p", osId=3).os_id == 3

    def test_exclude_none(self) -> None:
        body = DedicatedReinstallParams(os_template_id="t", hostname="h").to_body()
        assert body == {"osTemplateId": "t", "hostname": "h"}

    def test_notification_aliases(self) -> None:
        body = FirewallAttackNotificationParams(
            email_notification=True, discord_webhook_url=""
        ).to_body()
        assert body == {"emailNotification": True, "discordWebhookURL": ""}

    def test_invalid_action(self) -> None:
        with pytest.raises(ValidationError):
            VpsActionParams(action="explode")

    @pytest.mark.parametrize("port", [-1, 65536])
    def test_port_range(self, port) -> None:
        with pytest.raises(ValidationError):
            FirewallRuleParams(port=port, app_id=1)

    def test_invalid_severity(self) -> None:
        with pytest.raises(ValidationError):
            FirewallAttackNotificationParams(severity="apocalyptic")


class TestProfile:
    def test_defaults(self) -> None:
        profile = Profile(name="p")
        assert profile.credential == "env:NODESTY_API_KEY"
        assert profile.base_url == "https://nodesty.com"
        assert profile.request.max_retries == 3

    def test_extra_fields_kept(self) -> None:
        profile = Profile.model_validate({"name": "p", "note": "staging"})
        assert profile.model_dump()["note"] == "staging"
