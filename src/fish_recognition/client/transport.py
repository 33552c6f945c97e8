"""Form-encoded HTTP transport used for all provider calls."""

import types
from collections.abc import Mapping
from typing import Protocol, Self

import httpx


class FormTransport(Protocol):
    """Posts a form-encoded body and returns the response text.

    Implementations raise ``httpx.HTTPError`` subclasses for transport
    failures, timeouts, and error statuses.
    """

    def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        *,
        params: Mapping[str, str] | None = None,
        timeout: float,
    ) -> str:
        """Post ``data`` as ``application/x-www-form-urlencoded``."""
        ...


class HttpxFormTransport:
    """FormTransport backed by a synchronous ``httpx.Client``.

    A client passed in by the caller is left open on ``close``; a client
    created here is closed with the transport.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the transport.

        Args:
            client: Client to send requests with. A new one is created when
                omitted.

        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client()

    def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        *,
        params: Mapping[str, str] | None = None,
        timeout: float,
    ) -> str:
        """Post a form and return the body of a successful response.

        Raises:
            httpx.HTTPStatusError: If the response status is 4xx or 5xx.
            httpx.RequestError: If the request could not be completed,
                including timeouts.

        """
        response = self._client.post(
            url,
            data=dict(data),
            params=dict(params) if params else None,
            timeout=timeout,
        )
        _ = response.raise_for_status()
        return response.text

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        """Context manager entry point."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        """Context manager exit point."""
        self.close()
