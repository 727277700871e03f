"""VPS operations: status, power actions, password, reinstall, backups, tasks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from nodesty.client.response import request_error
from nodesty.models import (
    ApiResponse,
    VpsAction,
    VpsActionParams,
    VpsBackupRestoreParams,
    VpsChangePasswordParams,
    VpsReinstallParams,
)
from nodesty.services.base import BaseService, PathValue, segment
from nodesty.types import HealthStatus, VpsBackup, VpsGraphs, VpsInfo, VpsOsTemplate, VpsTask


class VpsService(BaseService):
    """Endpoints under ``/api/services/{id}/vps``.

    Power actions answer HTTP 204 with no body; their envelopes are
    successful with ``data`` set to ``None``.
    """

    def get_vps_info(self, service_id: PathValue) -> ApiResponse[VpsInfo]:
        return self._transport.get(self._service_path(service_id, "vps", "info"))

    def perform_vps_action(
        self, service_id: PathValue, params: VpsActionParams
    ) -> ApiResponse[Any]:
        """POST ``/api/services/{id}/vps/action`` with ``{"action": ...}``."""
        return self._transport.post(self._service_path(service_id, "vps", "action"), params)

    def _action(self, service_id: PathValue, action: VpsAction) -> ApiResponse[Any]:
        return self._send_params(
            "POST", self._service_path(service_id, "vps", "action"), VpsActionParams, action=action
        )

    def start_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._action(service_id, "start")

    def stop_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._action(service_id, "stop")

    def restart_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._action(service_id, "restart")

    def power_off_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._action(service_id, "poweroff")

    def change_vps_password(
        self, service_id: PathValue, params: VpsChangePasswordParams
    ) -> ApiResponse[Any]:
        return self._transport.post(
            self._service_path(service_id, "vps", "change-password"), params
        )

    def get_vps_graphs(self, service_id: PathValue) -> ApiResponse[VpsGraphs]:
        """CPU, RAM, disk, inode, network and I/O usage series."""
        return self._transport.get(self._service_path(service_id, "vps", "graphs"))

    def reinstall_vps(
        self, service_id: PathValue, params: VpsReinstallParams
    ) -> ApiResponse[Any]:
        return self._transport.post(self._service_path(service_id, "vps", "reinstall"), params)

    # --- Backups ---

    def get_vps_backups(self, service_id: PathValue) -> ApiResponse[list[VpsBackup]]:
        return self._transport.get(self._service_path(service_id, "vps", "backups"))

    def restore_vps_backup(
        self, service_id: PathValue, date: str, file: str
    ) -> ApiResponse[Any]:
        """POST ``/api/services/{id}/vps/backups/{date}/{file}``.

        The API expects ``date`` and ``file`` both in the path and in the
        JSON body.
        """
        path = self._service_path(service_id, "vps", "backups", segment(date), segment(file))
        return self._send_params("POST", path, VpsBackupRestoreParams, date=date, file=file)

    def restore_vps_backup_from_object(
        self, service_id: PathValue, backup: VpsBackup
    ) -> ApiResponse[Any]:
        """Restore using an entry returned by :meth:`get_vps_backups`.

        An entry without ``date`` or ``file`` gives a ``Request Error``
        envelope and nothing is sent.
        """
        if not isinstance(backup, Mapping):
            return request_error(f"Backup entry must be a mapping, got {type(backup).__name__}")
        missing = [key for key in ("date", "file") if not backup.get(key)]
        if missing:
            return request_error(f"Backup entry is missing: {', '.join(missing)}")
        return self.restore_vps_backup(service_id, backup["date"], backup["file"])

    # --- Templates and tasks ---

    def get_vps_os_templates(self, service_id: PathValue) -> ApiResponse[list[VpsOsTemplate]]:
        return self._transport.get(self._service_path(service_id, "vps", "os-templates"))

    def get_vps_tasks(self, service_id: PathValue) -> ApiResponse[list[VpsTask]]:
        return self._transport.get(self._service_path(service_id, "vps", "tasks"))

    def health_check(self) -> ApiResponse[HealthStatus]:
        return self._transport.get("/health")
