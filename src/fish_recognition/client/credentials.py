"""Access credential acquisition for the classifier provider."""

import json
import logging
import os
import time
from typing import NamedTuple, Protocol, Self

import httpx

from fish_recognition.client.consts import (
    API_KEY_ENV,
    SECRET_KEY_ENV,
    TOKEN_TIMEOUT,
    TOKEN_URL,
)
from fish_recognition.client.exceptions import CredentialError
from fish_recognition.client.transport import FormTransport, HttpxFormTransport

logger = logging.getLogger(__name__)


class AccessCredential(NamedTuple):
    """Immutable snapshot of a bearer token issued by the provider."""

    access_token: str
    expires_in: int
    issued_at: float

    @property
    def expires_at(self) -> float:
        """Epoch time at which the provider stops accepting the token."""
        return self.issued_at + self.expires_in


class CredentialProvider(Protocol):
    """Anything able to hand out an access credential."""

    def fetch(self) -> AccessCredential:
        """Return a credential usable for one classification call.

        Raises:
            CredentialError: If no credential can be obtained.

        """
        ...


class CredentialHelper:
    """OAuth client-credentials helper for the classifier provider.

    Every ``fetch`` performs a fresh token exchange. Tokens are not cached
    between calls even though the provider reports an expiry.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        transport: FormTransport | None = None,
        token_url: str = TOKEN_URL,
        timeout: float = TOKEN_TIMEOUT,
    ) -> None:
        """Initialize the credential helper.

        Args:
            client_id: Provider API key
            client_secret: Provider secret key
            transport: Transport to post the token request with. A
                short-lived ``HttpxFormTransport`` is used per fetch when
                omitted.
            token_url: OAuth token endpoint URL
            timeout: Seconds to wait for the token endpoint

        Raises:
            CredentialError: If either secret is empty.

        """
        if not client_id:
            msg = "client_id cannot be empty"
            raise CredentialError(msg)
        if not client_secret:
            msg = "client_secret cannot be empty"
            raise CredentialError(msg)

        self._client_id: str = client_id
        self._client_secret: str = client_secret
        self._transport: FormTransport | None = transport
        self._token_url: str = token_url
        self._timeout: float = timeout

    @classmethod
    def from_env(
        cls,
        *,
        transport: FormTransport | None = None,
        token_url: str = TOKEN_URL,
        timeout: float = TOKEN_TIMEOUT,
    ) -> Self:
        """Build a helper from ``BAIDU_AI_API_KEY`` and ``BAIDU_AI_SECRET_KEY``.

        Raises:
            CredentialError: If either variable is missing or empty.

        """
        client_id = os.environ.get(API_KEY_ENV, "")
        client_secret = os.environ.get(SECRET_KEY_ENV, "")
        if not client_id or not client_secret:
            msg = f"{API_KEY_ENV} and {SECRET_KEY_ENV} must both be set"
            raise CredentialError(msg)
        return cls(
            client_id,
            client_secret,
            transport=transport,
            token_url=token_url,
            timeout=timeout,
        )

    def fetch(self) -> AccessCredential:
        """Exchange the client secrets for a fresh access credential.

        Returns:
            The issued AccessCredential.

        Raises:
            CredentialError: If the request fails, the body is not JSON, or
                the provider reports an error.

        """
        form = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
        }

        if self._transport is not None:
            body = self._request_token(self._transport, form)
        else:
            with HttpxFormTransport() as transport:
                body = self._request_token(transport, form)

        return self._parse_token_response(body)

    def _request_token(
        self, transport: FormTransport, form: dict[str, str]
    ) -> str:
        try:
            return transport.post_form(
                self._token_url, form, timeout=self._timeout
            )

        except httpx.HTTPStatusError as e:
            error_detail = ""
            try:
                error_data = e.response.json()
                error_desc = error_data.get(
                    "error_description", error_data.get("error", "")
                )
                error_detail = f": {error_desc}"
            except (json.JSONDecodeError, AttributeError):
                pass

            msg = (
                f"Token request failed with status "
                f"{e.response.status_code}{error_detail}"
            )
            raise CredentialError(msg) from e

        except httpx.HTTPError as e:
            msg = f"Failed to connect to token endpoint: {e}"
            raise CredentialError(msg) from e

    def _parse_token_response(self, body: str) -> AccessCredential:
        try:
            raw = json.loads(body)
        except json.JSONDecodeError as e:
            msg = f"Failed to parse token response: {e}"
            raise CredentialError(msg) from e

        if not isinstance(raw, dict):
            msg = "Invalid token response format: expected an object"
            raise CredentialError(msg)

        if raw.get("error"):
            msg = f"{raw['error']}: {raw.get('error_description', '')}"
            raise CredentialError(msg)

        access_token = raw.get("access_token")
        if not access_token or not isinstance(access_token, str):
            msg = "Invalid token response format: missing access_token"
            raise CredentialError(msg)

        try:
            expires_in = int(raw.get("expires_in", 0))
        except (TypeError, ValueError):
            expires_in = 0

        logger.debug("Obtained access token valid for %ds", expires_in)
        return AccessCredential(
            access_token=access_token,
            expires_in=expires_in,
            issued_at=time.time(),
        )
