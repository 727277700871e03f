"""State and request construction shared by the sync and async transports.

A transport owns one :class:`~nodesty.models.ClientConfig`. The only
mutations allowed after construction are :meth:`update_credential` and
:meth:`update_base_endpoint`, both of which replace the config object
wholesale. Every call reads the config exactly once, when it builds its
request, so a call in flight keeps the credential and endpoint it started
with, and all of its retries resend that same request.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel

from nodesty.models import ClientConfig, HTTPMethod, RequestOptions, RequestParams

AUTH_SCHEME = "PAT"

MethodLike = Union[HTTPMethod, str]


class TransportBase:
    """Configuration handling and request building for the transports."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config.model_copy()

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> ClientConfig:
        """A snapshot of the current configuration."""
        return self._config.model_copy()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def update_credential(self, api_key: str) -> None:
        """Use *api_key* for every call issued from now on.

        Calls already in flight keep the credential they were built with.

        Raises:
            ValueError: If *api_key* is empty.
        """
        if not api_key:
            raise ValueError("api_key must not be empty")
        self._config = self._config.model_copy(update={"api_key": api_key})

    def update_base_endpoint(self, base_url: str) -> None:
        """Send every call issued from now on to *base_url*.

        Raises:
            ValueError: If *base_url* is empty.
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self._config = self._config.model_copy(update={"base_url": base_url})

    # ------------------------------------------------------------------ #
    # Request construction
    # ------------------------------------------------------------------ #

    def _build_request(
        self,
        client: Union[httpx.Client, httpx.AsyncClient],
        method: MethodLike,
        path: str,
        body: Any,
        options: Optional[RequestOptions],
    ) -> tuple[httpx.Request, int]:
        """Build the request for one call.

        Returns the request together with the retry ceiling captured from
        the same config snapshot.

        Raises:
            ValueError: On an unsupported HTTP method.
            TypeError: If *body* is not JSON-serialisable.
        """
        config = self._config
        opts = options or RequestOptions()
        verb = method if isinstance(method, HTTPMethod) else HTTPMethod(method.upper())

        headers = {
            "Authorization": f"{AUTH_SCHEME} {config.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        headers.update(opts.headers)

        kwargs: dict[str, Any] = {
            "method": verb.value,
            "url": _join_url(config.base_url, path),
            "headers": headers,
            "timeout": opts.timeout or config.timeout,
        }
        if opts.params:
            kwargs["params"] = opts.params
        payload = _serialise_body(body)
        if payload is not None:
            kwargs["json"] = payload

        return client.build_request(**kwargs), config.max_retries


def _join_url(base_url: str, path: str) -> str:
    """Append *path* to *base_url*, tolerating slashes on either side."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _serialise_body(body: Any) -> Any:
    if isinstance(body, RequestParams):
        return body.to_body()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


def retry_delay(attempt: int) -> int:
    """Seconds to wait before retry number *attempt* (1-based): 2, 4, 8, ..."""
    return 2 ** attempt
