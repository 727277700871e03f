"""HTTP transport layer for nodesty.

Provides the blocking and asyncio transports that every API call goes
through, plus the normalization that turns each outcome into an
:class:`~nodesty.models.ApiResponse` envelope.

Classes:
    :class:`Transport` -- blocking transport backed by :class:`httpx.Client`.
    :class:`AsyncTransport` -- non-blocking transport backed by
    :class:`httpx.AsyncClient`.

Example::

    from nodesty.client import Transport
    from nodesty.models import ClientConfig

    with Transport(ClientConfig(api_key="pat_123")) as transport:
        result = transport.get("/api/services")
"""

from nodesty.client.async_transport import AsyncTransport
from nodesty.client.transport import Transport

__all__ = ["Transport", "AsyncTransport"]
