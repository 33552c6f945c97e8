"""Tests for access credential acquisition."""
# pyright: reportPrivateUsage = false

import json
import os
import time
from unittest import mock

import httpx
import pytest

from fish_recognition.client.consts import (
    API_KEY_ENV,
    SECRET_KEY_ENV,
    TOKEN_TIMEOUT,
    TOKEN_URL,
)
from fish_recognition.client.credentials import (
    AccessCredential,
    CredentialHelper,
)
from fish_recognition.client.exceptions import CredentialError
from tests.utils.fake_transport import FakeTransport


def _helper(
    response: str | BaseException,
) -> tuple[CredentialHelper, FakeTransport]:
    transport = FakeTransport(responses={TOKEN_URL: response})
    helper = CredentialHelper(
        client_id="test_client_id",
        client_secret="test_client_secret",
        transport=transport,
    )
    return helper, transport


def test_access_credential_expires_at() -> None:
    """Test that expiry is computed from issue time and lifetime."""
    credential = AccessCredential("token", expires_in=60, issued_at=1000.0)
    assert credential.expires_at == 1060.0  # noqa: PLR2004


class TestCredentialHelper:
    """Test cases for CredentialHelper token exchange."""

    def test_init_with_empty_client_id(self) -> None:
        """Test CredentialHelper initialization with empty client_id."""
        with pytest.raises(CredentialError, match="client_id cannot be empty"):
            _ = CredentialHelper(client_id="", client_secret="secret")

    def test_init_with_empty_client_secret(self) -> None:
        """Test CredentialHelper initialization with empty client_secret."""
        with pytest.raises(
            CredentialError, match="client_secret cannot be empty"
        ):
            _ = CredentialHelper(client_id="key", client_secret="")

    def test_fetch_success(self) -> None:
        """Test successful token acquisition."""
        helper, transport = _helper(
            '{"access_token": "new_access_token", "expires_in": 2592000}'
        )

        before = time.time()
        credential = helper.fetch()

        assert credential.access_token == "new_access_token"
        assert credential.expires_in == 2592000  # noqa: PLR2004
        assert credential.issued_at >= before

        request = transport.requests[0]
        assert request.url == TOKEN_URL
        assert request.data == {
            "grant_type": "client_credentials",
            "client_id": "test_client_id",
            "client_secret": "test_client_secret",
        }
        assert request.timeout == TOKEN_TIMEOUT

    def test_fetch_is_not_cached(self) -> None:
        """Test that every fetch performs a new token exchange."""
        helper, transport = _helper('{"access_token": "t", "expires_in": 60}')

        helper.fetch()
        helper.fetch()

        assert len(transport.requests) == 2  # noqa: PLR2004

    def test_fetch_provider_error(self) -> None:
        """Test that an error field in the body raises CredentialError."""
        helper, _ = _helper(
            json.dumps(
                {
                    "error": "invalid_client",
                    "error_description": "unknown client id",
                }
            )
        )

        with pytest.raises(
            CredentialError, match="invalid_client: unknown client id"
        ):
            helper.fetch()

    def test_fetch_http_status_error(self) -> None:
        """Test that an error status includes the provider's description."""
        request = httpx.Request("POST", TOKEN_URL)
        response = httpx.Response(
            401,
            json={
                "error": "invalid_client",
                "error_description": "Client authentication failed",
            },
            request=request,
        )
        error = httpx.HTTPStatusError(
            "401 Unauthorized", request=request, response=response
        )
        helper, _ = _helper(error)

        with pytest.raises(
            CredentialError,
            match="status 401: Client authentication failed",
        ):
            helper.fetch()

    def test_fetch_http_status_error_without_json(self) -> None:
        """Test that an error status with a non-JSON body still maps."""
        request = httpx.Request("POST", TOKEN_URL)
        response = httpx.Response(503, text="<html>", request=request)
        error = httpx.HTTPStatusError(
            "503", request=request, response=response
        )
        helper, _ = _helper(error)

        with pytest.raises(CredentialError, match="status 503"):
            helper.fetch()

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("Connection failed"),
            httpx.ReadTimeout("timed out"),
        ],
    )
    def test_fetch_transport_error(self, error: httpx.HTTPError) -> None:
        """Test that transport failures raise CredentialError."""
        helper, _ = _helper(error)

        with pytest.raises(
            CredentialError, match="Failed to connect to token endpoint"
        ) as exc_info:
            helper.fetch()

        assert exc_info.value.__cause__ is error

    @pytest.mark.parametrize(
        ("body", "match"),
        [
            ("not json", "Failed to parse token response"),
            ("[1, 2]", "expected an object"),
            ('{"expires_in": 60}', "missing access_token"),
            ('{"access_token": ""}', "missing access_token"),
        ],
    )
    def test_fetch_invalid_response(self, body: str, match: str) -> None:
        """Test that malformed bodies raise CredentialError."""
        helper, _ = _helper(body)

        with pytest.raises(CredentialError, match=match):
            helper.fetch()

    def test_fetch_tolerates_bad_expiry(self) -> None:
        """Test that a malformed expires_in does not fail the exchange."""
        helper, _ = _helper('{"access_token": "t", "expires_in": "soon"}')

        assert helper.fetch().expires_in == 0

    def test_fetch_without_transport_uses_httpx(self) -> None:
        """Test that a short-lived httpx transport is used by default."""
        helper = CredentialHelper(client_id="key", client_secret="secret")

        with mock.patch(
            "fish_recognition.client.credentials.HttpxFormTransport"
        ) as mock_transport_cls:
            opened = mock_transport_cls.return_value.__enter__
            mock_transport = opened.return_value
            mock_transport.post_form.return_value = '{"access_token": "t"}'

            credential = helper.fetch()

        assert credential.access_token == "t"
        mock_transport_cls.return_value.__exit__.assert_called_once()


class TestCredentialHelperFromEnv:
    """Test cases for building a CredentialHelper from the environment."""

    def test_from_env(self) -> None:
        """Test that both variables are read."""
        env = {API_KEY_ENV: "env_key", SECRET_KEY_ENV: "env_secret"}
        with mock.patch.dict(os.environ, env):
            helper = CredentialHelper.from_env(timeout=2.0)

        assert helper._client_id == "env_key"
        assert helper._client_secret == "env_secret"
        assert helper._timeout == 2.0  # noqa: PLR2004

    @pytest.mark.parametrize(
        "env",
        [
            {API_KEY_ENV: "env_key", SECRET_KEY_ENV: ""},
            {API_KEY_ENV: "", SECRET_KEY_ENV: "env_secret"},
            {},
        ],
    )
    def test_from_env_missing(self, env: dict[str, str]) -> None:
        """Test that missing or empty variables raise CredentialError."""
        with (
            mock.patch.dict(os.environ, env, clear=True),
            pytest.raises(CredentialError, match="must both be set"),
        ):
            CredentialHelper.from_env()
