"""Asynchronous transport -- mirrors :class:`~nodesty.client.transport.Transport`.

:class:`AsyncTransport` wraps :class:`httpx.AsyncClient` and offers the
same contract as the blocking transport: auth injection, retry on HTTP 5xx
with 2 s, 4 s, 8 s, ... backoff, and normalized envelopes. Backoff waits use
:func:`asyncio.sleep`, so a call can be cancelled while it waits.

Calls may be issued concurrently (e.g. with :func:`asyncio.gather`). Each
call builds its own request and keeps its own attempt counter.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import httpx

from nodesty.client.base import MethodLike, TransportBase, retry_delay
from nodesty.client.response import from_exception, from_response
from nodesty.models import ApiResponse, ClientConfig, RequestOptions
from nodesty.output import get_output


class AsyncTransport(TransportBase):
    """Asynchronous transport for asyncio applications.

    Args:
        config: Credential, endpoint, timeout and retry settings.
        http_client: Optional pre-built :class:`httpx.AsyncClient`. A client
            passed in is not closed by :meth:`aclose`.

    Example::

        async with AsyncTransport(ClientConfig(api_key="pat_123")) as transport:
            result = await transport.get("/api/services")
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=self._config.timeout,
            follow_redirects=True,
        )

    async def __aenter__(self) -> AsyncTransport:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def call(
        self,
        method: MethodLike,
        path: str,
        body: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Any]:
        """Execute one API call and normalize its outcome.

        Behaves like :meth:`~nodesty.client.transport.Transport.call` but
        does not block the event loop. Never raises, except for
        :class:`asyncio.CancelledError` when the calling task is cancelled.
        """
        try:
            request, max_retries = self._build_request(
                self._client, method, path, body, options
            )
        except Exception as exc:
            return from_exception(exc)
        return await self._send_with_retry(request, max_retries)

    async def get(self, path: str, options: Optional[RequestOptions] = None) -> ApiResponse[Any]:
        return await self.call("GET", path, options=options)

    async def post(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return await self.call("POST", path, body, options)

    async def put(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return await self.call("PUT", path, body, options)

    async def patch(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return await self.call("PATCH", path, body, options)

    async def delete(
        self, path: str, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return await self.call("DELETE", path, options=options)

    async def _send_with_retry(
        self, request: httpx.Request, max_retries: int
    ) -> ApiResponse[Any]:
        output = get_output()
        attempt = 0

        while True:
            output.debug(f"{request.method} {request.url}")
            try:
                response = await self._client.send(request)
            except Exception as exc:
                return from_exception(exc)

            if response.status_code >= 500 and attempt < max_retries:
                attempt += 1
                delay = retry_delay(attempt)
                output.debug(
                    f"Server error {response.status_code}, retrying in {delay}s "
                    f"(attempt {attempt}/{max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            return from_response(response)
