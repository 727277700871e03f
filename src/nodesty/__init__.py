"""nodesty -- Python client for the Nodesty hosting API.

The package wraps the Nodesty REST API (VPS, dedicated servers, firewall,
account) behind a single :class:`NodestyClient`. Every call returns an
:class:`~nodesty.models.ApiResponse` envelope instead of raising, so callers
branch on ``result.success``::

    from nodesty import NodestyClient

    client = NodestyClient(api_key="pat_123")
    result = client.get_services()
    if result.success:
        for service in result.data:
            print(service["id"], service["name"])

A ``nodesty`` console script exposes the same operations from the shell.

Modules:
    sdk: The :class:`NodestyClient` facade.
    client: Blocking and asyncio transports built on httpx.
    services: Per-area API mappings (user, vps, dedicated, firewall).
    models: Pydantic models for config, envelopes and request bodies.
    types: TypedDict shapes of API payloads.
    config: XDG-aware profile management for the CLI.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
    app: Typer application and CLI entry point.
"""

__version__ = "1.0.0"

from nodesty.client import AsyncTransport, Transport
from nodesty.exceptions import NodestyError
from nodesty.models import ApiResponse, ClientConfig, ErrorKind, RequestOptions
from nodesty.sdk import NodestyClient

__all__ = [
    "__version__",
    "NodestyClient",
    "Transport",
    "AsyncTransport",
    "ApiResponse",
    "ClientConfig",
    "ErrorKind",
    "RequestOptions",
    "NodestyError",
]
