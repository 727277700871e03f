"""Domain services: thin per-area mappings from method calls to API calls.

Each service is constructed with a :class:`~nodesty.client.Transport` and
returns its :class:`~nodesty.models.ApiResponse` envelopes unchanged.
Most applications use them through :class:`~nodesty.sdk.NodestyClient`.
"""

from nodesty.services.dedicated import DedicatedService
from nodesty.services.firewall import FirewallService
from nodesty.services.user import UserService
from nodesty.services.vps import VpsService

__all__ = ["UserService", "VpsService", "DedicatedService", "FirewallService"]
