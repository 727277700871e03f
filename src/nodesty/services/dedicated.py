"""Dedicated server operations."""

from __future__ import annotations

from typing import Any

from nodesty.models import (
    ApiResponse,
    DedicatedAction,
    DedicatedActionParams,
    DedicatedReinstallParams,
)
from nodesty.services.base import BaseService, PathValue
from nodesty.types import (
    DedicatedHardware,
    DedicatedInfo,
    DedicatedOsTemplate,
    DedicatedReinstallStatus,
    DedicatedTask,
)


class DedicatedService(BaseService):
    """Endpoints under ``/api/services/{id}/dedicated``.

    The power helpers use the API's own action names: ``setPowerOn``,
    ``setPowerOff`` and ``setPowerReset``.
    """

    def get_dedicated_info(self, service_id: PathValue) -> ApiResponse[DedicatedInfo]:
        return self._transport.get(self._service_path(service_id, "dedicated", "info"))

    def get_dedicated_hardware(
        self, service_id: PathValue
    ) -> ApiResponse[list[DedicatedHardware]]:
        return self._transport.get(self._service_path(service_id, "dedicated", "hardware"))

    def dedicated_action(
        self, service_id: PathValue, params: DedicatedActionParams
    ) -> ApiResponse[Any]:
        """POST ``/api/services/{id}/dedicated/action``."""
        return self._transport.post(
            self._service_path(service_id, "dedicated", "action"), params
        )

    def _power(self, service_id: PathValue, action: DedicatedAction) -> ApiResponse[Any]:
        return self._send_params(
            "POST",
            self._service_path(service_id, "dedicated", "action"),
            DedicatedActionParams,
            action=action,
        )

    def start_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._power(service_id, "setPowerOn")

    def stop_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._power(service_id, "setPowerOff")

    def restart_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._power(service_id, "setPowerReset")

    def reset_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        """Alias of :meth:`restart_dedicated`."""
        return self.restart_dedicated(service_id)

    def poweroff_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        """Alias of :meth:`stop_dedicated`."""
        return self.stop_dedicated(service_id)

    def get_dedicated_os_templates(
        self, service_id: PathValue
    ) -> ApiResponse[list[DedicatedOsTemplate]]:
        return self._transport.get(
            self._service_path(service_id, "dedicated", "os-templates")
        )

    def reinstall_dedicated(
        self, service_id: PathValue, params: DedicatedReinstallParams
    ) -> ApiResponse[Any]:
        return self._transport.post(
            self._service_path(service_id, "dedicated", "reinstall"), params
        )

    def get_dedicated_reinstall_status(
        self, service_id: PathValue
    ) -> ApiResponse[DedicatedReinstallStatus]:
        return self._transport.get(
            self._service_path(service_id, "dedicated", "reinstall-status")
        )

    def get_dedicated_tasks(self, service_id: PathValue) -> ApiResponse[list[DedicatedTask]]:
        return self._transport.get(self._service_path(service_id, "dedicated", "tasks"))
