"""Facade over the four domain services.

:class:`NodestyClient` builds a single :class:`~nodesty.client.Transport`,
injects it into :class:`~nodesty.services.UserService`,
:class:`~nodesty.services.VpsService`,
:class:`~nodesty.services.DedicatedService` and
:class:`~nodesty.services.FirewallService`, and forwards each public method
to the matching service. The services themselves are not exposed.

Example::

    from nodesty import NodestyClient

    with NodestyClient(api_key="pat_123") as client:
        result = client.get_vps_info("1234")
        if result.success:
            print(result.data["hostname"])
        else:
            print(result.error, result.message)
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from nodesty.client import Transport
from nodesty.models import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ApiResponse,
    ClientConfig,
    DedicatedActionParams,
    DedicatedReinstallParams,
    FirewallAttackNotificationParams,
    FirewallRdnsParams,
    FirewallRuleParams,
    VpsActionParams,
    VpsChangePasswordParams,
    VpsReinstallParams,
)
from nodesty.services import DedicatedService, FirewallService, UserService, VpsService
from nodesty.services.base import PathValue
from nodesty.types import (
    DedicatedHardware,
    DedicatedInfo,
    DedicatedOsTemplate,
    DedicatedReinstallStatus,
    DedicatedTask,
    FirewallAttackLog,
    FirewallAttackNotification,
    FirewallRdns,
    FirewallRule,
    FirewallStats,
    HealthStatus,
    Invoice,
    InvoiceSummary,
    Service,
    Ticket,
    TicketSummary,
    UserInfo,
    UserSession,
    VpsBackup,
    VpsGraphs,
    VpsInfo,
    VpsOsTemplate,
    VpsTask,
)


class NodestyClient:
    """Single entry point for the Nodesty API.

    Args:
        api_key: Personal access token, sent as ``Authorization: PAT <key>``.
        base_url: API host. Defaults to ``https://nodesty.com``.
        timeout: Per-call timeout in seconds.
        max_retries: How many times a call is retried after an HTTP 5xx.
        http_client: Optional pre-built :class:`httpx.Client`.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )
        self._transport = Transport(config, http_client=http_client)
        self._user = UserService(self._transport)
        self._vps = VpsService(self._transport)
        self._dedicated = DedicatedService(self._transport)
        self._firewall = FirewallService(self._transport)

    @classmethod
    def from_config(
        cls, config: ClientConfig, http_client: Optional[httpx.Client] = None
    ) -> NodestyClient:
        """Build a client from a resolved :class:`~nodesty.models.ClientConfig`."""
        return cls(
            config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            http_client=http_client,
        )

    # ------------------------------------------------------------------ #
    # Lifecycle and settings
    # ------------------------------------------------------------------ #

    def __enter__(self) -> NodestyClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    def update_api_key(self, api_key: str) -> None:
        """Switch every service to *api_key* for subsequent calls."""
        self._transport.update_credential(api_key)

    def update_base_url(self, base_url: str) -> None:
        self._transport.update_base_endpoint(base_url)

    def health_check(self) -> ApiResponse[HealthStatus]:
        return self._user.health_check()

    # ------------------------------------------------------------------ #
    # VPS
    # ------------------------------------------------------------------ #

    def get_vps_info(self, service_id: PathValue) -> ApiResponse[VpsInfo]:
        return self._vps.get_vps_info(service_id)

    def perform_vps_action(self, service_id: PathValue, params: VpsActionParams) -> ApiResponse[Any]:
        return self._vps.perform_vps_action(service_id, params)

    def start_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._vps.start_vps(service_id)

    def stop_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._vps.stop_vps(service_id)

    def restart_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._vps.restart_vps(service_id)

    def power_off_vps(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._vps.power_off_vps(service_id)

    def change_vps_password(
        self, service_id: PathValue, params: VpsChangePasswordParams
    ) -> ApiResponse[Any]:
        return self._vps.change_vps_password(service_id, params)

    def get_vps_graphs(self, service_id: PathValue) -> ApiResponse[VpsGraphs]:
        return self._vps.get_vps_graphs(service_id)

    def reinstall_vps(self, service_id: PathValue, params: VpsReinstallParams) -> ApiResponse[Any]:
        return self._vps.reinstall_vps(service_id, params)

    def get_vps_backups(self, service_id: PathValue) -> ApiResponse[list[VpsBackup]]:
        return self._vps.get_vps_backups(service_id)

    def restore_vps_backup(self, service_id: PathValue, date: str, file: str) -> ApiResponse[Any]:
        return self._vps.restore_vps_backup(service_id, date, file)

    def restore_vps_backup_from_object(
        self, service_id: PathValue, backup: VpsBackup
    ) -> ApiResponse[Any]:
        return self._vps.restore_vps_backup_from_object(service_id, backup)

    def get_vps_os_templates(self, service_id: PathValue) -> ApiResponse[list[VpsOsTemplate]]:
        return self._vps.get_vps_os_templates(service_id)

    def get_vps_tasks(self, service_id: PathValue) -> ApiResponse[list[VpsTask]]:
        return self._vps.get_vps_tasks(service_id)

    # ------------------------------------------------------------------ #
    # User / account
    # ------------------------------------------------------------------ #

    def get_current_user(self) -> ApiResponse[UserInfo]:
        return self._user.get_current_user()

    def get_user_sessions(self) -> ApiResponse[list[UserSession]]:
        return self._user.get_user_sessions()

    def get_services(self) -> ApiResponse[list[Service]]:
        return self._user.get_services()

    def get_tickets(self) -> ApiResponse[list[TicketSummary]]:
        return self._user.get_tickets()

    def get_ticket(self, ticket_id: PathValue) -> ApiResponse[Ticket]:
        return self._user.get_ticket(ticket_id)

    def get_invoices(self) -> ApiResponse[list[InvoiceSummary]]:
        return self._user.get_invoices()

    def get_invoice(self, invoice_id: PathValue) -> ApiResponse[Invoice]:
        return self._user.get_invoice(invoice_id)

    # ------------------------------------------------------------------ #
    # Dedicated servers
    # ------------------------------------------------------------------ #

    def get_dedicated_info(self, service_id: PathValue) -> ApiResponse[DedicatedInfo]:
        return self._dedicated.get_dedicated_info(service_id)

    def get_dedicated_hardware(self, service_id: PathValue) -> ApiResponse[list[DedicatedHardware]]:
        return self._dedicated.get_dedicated_hardware(service_id)

    def dedicated_action(
        self, service_id: PathValue, params: DedicatedActionParams
    ) -> ApiResponse[Any]:
        return self._dedicated.dedicated_action(service_id, params)

    def get_dedicated_os_templates(
        self, service_id: PathValue
    ) -> ApiResponse[list[DedicatedOsTemplate]]:
        return self._dedicated.get_dedicated_os_templates(service_id)

    def reinstall_dedicated(
        self, service_id: PathValue, params: DedicatedReinstallParams
    ) -> ApiResponse[Any]:
        return self._dedicated.reinstall_dedicated(service_id, params)

    def get_dedicated_reinstall_status(
        self, service_id: PathValue
    ) -> ApiResponse[DedicatedReinstallStatus]:
        return self._dedicated.get_dedicated_reinstall_status(service_id)

    def get_dedicated_tasks(self, service_id: PathValue) -> ApiResponse[list[DedicatedTask]]:
        return self._dedicated.get_dedicated_tasks(service_id)

    def start_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._dedicated.start_dedicated(service_id)

    def stop_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._dedicated.stop_dedicated(service_id)

    def restart_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._dedicated.restart_dedicated(service_id)

    def reset_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._dedicated.reset_dedicated(service_id)

    def poweroff_dedicated(self, service_id: PathValue) -> ApiResponse[Any]:
        return self._dedicated.poweroff_dedicated(service_id)

    # ------------------------------------------------------------------ #
    # Firewall
    # ------------------------------------------------------------------ #

    def get_firewall_attack_logs(
        self, service_id: PathValue, ip: str
    ) -> ApiResponse[list[FirewallAttackLog]]:
        return self._firewall.get_attack_logs(service_id, ip)

    def get_firewall_attack_notification(
        self, service_id: PathValue, ip: str
    ) -> ApiResponse[FirewallAttackNotification]:
        return self._firewall.get_attack_notification(service_id, ip)

    def update_firewall_attack_notification(
        self, service_id: PathValue, ip: str, params: FirewallAttackNotificationParams
    ) -> ApiResponse[Any]:
        return self._firewall.update_attack_notification(service_id, ip, params)

    def get_firewall_rdns(self, service_id: PathValue, ip: str) -> ApiResponse[FirewallRdns]:
        return self._firewall.get_rdns(service_id, ip)

    def update_firewall_rdns(
        self, service_id: PathValue, ip: str, params: FirewallRdnsParams
    ) -> ApiResponse[Any]:
        return self._firewall.update_rdns(service_id, ip, params)

    def delete_firewall_rdns(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._firewall.delete_rdns(service_id, ip)

    def get_firewall_rules(self, service_id: PathValue, ip: str) -> ApiResponse[list[FirewallRule]]:
        return self._firewall.get_rules(service_id, ip)

    def create_firewall_rule(
        self, service_id: PathValue, ip: str, params: FirewallRuleParams
    ) -> ApiResponse[Any]:
        return self._firewall.create_rule(service_id, ip, params)

    def delete_firewall_rule(
        self, service_id: PathValue, ip: str, rule_id_or_sequence: PathValue
    ) -> ApiResponse[Any]:
        return self._firewall.delete_rule(service_id, ip, rule_id_or_sequence)

    def get_firewall_stats(self, service_id: PathValue, ip: str) -> ApiResponse[list[FirewallStats]]:
        return self._firewall.get_stats(service_id, ip)

    def enable_firewall_email_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._firewall.enable_email_notifications(service_id, ip)

    def disable_firewall_email_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._firewall.disable_email_notifications(service_id, ip)

    def set_firewall_discord_webhook(
        self, service_id: PathValue, ip: str, webhook_url: str
    ) -> ApiResponse[Any]:
        return self._firewall.set_discord_webhook(service_id, ip, webhook_url)

    def enable_all_firewall_notifications(
        self, service_id: PathValue, ip: str, discord_webhook_url: str = ""
    ) -> ApiResponse[Any]:
        return self._firewall.enable_all_notifications(service_id, ip, discord_webhook_url)

    def disable_all_firewall_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._firewall.disable_all_notifications(service_id, ip)

    def create_firewall_port_rule(
        self, service_id: PathValue, target_ip: str, port: int, app_id: int
    ) -> ApiResponse[Any]:
        return self._firewall.create_port_rule(service_id, target_ip, port, app_id)

    def __repr__(self) -> str:
        return f"<NodestyClient base_url={self.base_url!r}>"
