"""Blocking transport for the Nodesty API.

:class:`Transport` wraps :class:`httpx.Client` and adds:

- **Auth injection** -- every request carries
  ``Authorization: PAT <token>`` plus JSON content-type/accept headers.
- **Retry with backoff** -- HTTP 5xx responses are retried up to
  ``max_retries`` times, waiting 2 s, 4 s, 8 s, ... in between. Nothing
  else is retried.
- **Result normalization** -- every outcome, including network failures
  and requests that cannot be built, comes back as an
  :class:`~nodesty.models.ApiResponse`. :meth:`Transport.call` never
  raises.

See Also:
    :class:`~nodesty.client.async_transport.AsyncTransport` for the
    asyncio equivalent.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from nodesty.client.base import MethodLike, TransportBase, retry_delay
from nodesty.client.response import from_exception, from_response
from nodesty.models import ApiResponse, ClientConfig, RequestOptions
from nodesty.output import get_output


class Transport(TransportBase):
    """Synchronous transport shared by every domain service.

    Args:
        config: Credential, endpoint, timeout and retry settings. The
            transport keeps its own copy.
        http_client: Optional pre-built :class:`httpx.Client` (e.g. one
            using :class:`httpx.MockTransport`). A client passed in is not
            closed by :meth:`close`.

    Example::

        with Transport(ClientConfig(api_key="pat_123")) as transport:
            result = transport.get("/api/users/@me")
            if result.success:
                print(result.data["email"])
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self._config.timeout,
            follow_redirects=True,
        )

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def call(
        self,
        method: MethodLike,
        path: str,
        body: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> ApiResponse[Any]:
        """Execute one API call and normalize its outcome.

        Args:
            method: GET, POST, PUT, PATCH or DELETE (case-insensitive).
            path: URL path appended to the configured base URL.
            body: JSON body -- a plain value or a pydantic model, which is
                dumped with its camelCase aliases.
            options: Extra headers, query parameters or a timeout override
                for this call only.

        Returns:
            A success envelope for any 2xx response, otherwise a failure
            envelope. Exceptions are never propagated.
        """
        try:
            request, max_retries = self._build_request(
                self._client, method, path, body, options
            )
        except Exception as exc:
            return from_exception(exc)
        return self._send_with_retry(request, max_retries)

    def get(self, path: str, options: Optional[RequestOptions] = None) -> ApiResponse[Any]:
        return self.call("GET", path, options=options)

    def post(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return self.call("POST", path, body, options)

    def put(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return self.call("PUT", path, body, options)

    def patch(
        self, path: str, body: Any = None, options: Optional[RequestOptions] = None
    ) -> ApiResponse[Any]:
        return self.call("PATCH", path, body, options)

    def delete(self, path: str, options: Optional[RequestOptions] = None) -> ApiResponse[Any]:
        return self.call("DELETE", path, options=options)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _send_with_retry(self, request: httpx.Request, max_retries: int) -> ApiResponse[Any]:
        """Send *request*, resending it unchanged after each 5xx response.

        ``attempt`` lives only in this frame, so concurrent calls never
        share a retry count.
        """
        output = get_output()
        attempt = 0

        while True:
            output.debug(f"{request.method} {request.url}")
            try:
                response = self._client.send(request)
            except Exception as exc:
                return from_exception(exc)

            if response.status_code >= 500 and attempt < max_retries:
                attempt += 1
                delay = retry_delay(attempt)
                output.debug(
                    f"Server error {response.status_code}, retrying in {delay}s "
                    f"(attempt {attempt}/{max_retries})"
                )
                time.sleep(delay)
                continue

            return from_response(response)
