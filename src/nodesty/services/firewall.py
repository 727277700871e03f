"""Firewall operations for one IP address of a service.

Every endpoint lives under ``/api/services/{id}/firewall/{ip}``: attack
logs, attack notifications, reverse DNS, port rules and statistics.
"""

from __future__ import annotations

from typing import Any

from nodesty.models import (
    ApiResponse,
    FirewallAttackNotificationParams,
    FirewallRdnsParams,
    FirewallRuleParams,
)
from nodesty.services.base import BaseService, PathValue, segment
from nodesty.types import (
    FirewallAttackLog,
    FirewallAttackNotification,
    FirewallRdns,
    FirewallRule,
    FirewallStats,
)


class FirewallService(BaseService):
    """Endpoints under ``/api/services/{id}/firewall/{ip}``."""

    def _firewall_path(self, service_id: PathValue, ip: str, *parts: PathValue) -> str:
        return self._service_path(service_id, "firewall", segment(ip), *parts)

    # --- Attack logs and notifications ---

    def get_attack_logs(self, service_id: PathValue, ip: str) -> ApiResponse[list[FirewallAttackLog]]:
        return self._transport.get(self._firewall_path(service_id, ip, "attack-logs"))

    def get_attack_notification(
        self, service_id: PathValue, ip: str
    ) -> ApiResponse[FirewallAttackNotification]:
        return self._transport.get(self._firewall_path(service_id, ip, "attack-notification"))

    def update_attack_notification(
        self, service_id: PathValue, ip: str, params: FirewallAttackNotificationParams
    ) -> ApiResponse[Any]:
        """PUT ``.../attack-notification``. Unset fields are left out of the body."""
        return self._transport.put(
            self._firewall_path(service_id, ip, "attack-notification"), params
        )

    # --- Reverse DNS ---

    def get_rdns(self, service_id: PathValue, ip: str) -> ApiResponse[FirewallRdns]:
        return self._transport.get(self._firewall_path(service_id, ip, "rdns"))

    def update_rdns(
        self, service_id: PathValue, ip: str, params: FirewallRdnsParams
    ) -> ApiResponse[Any]:
        return self._transport.put(self._firewall_path(service_id, ip, "rdns"), params)

    def delete_rdns(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._transport.delete(self._firewall_path(service_id, ip, "rdns"))

    # --- Rules ---

    def get_rules(self, service_id: PathValue, ip: str) -> ApiResponse[list[FirewallRule]]:
        return self._transport.get(self._firewall_path(service_id, ip, "rules"))

    def create_rule(
        self, service_id: PathValue, ip: str, params: FirewallRuleParams
    ) -> ApiResponse[Any]:
        """POST ``.../rules`` with ``{"port": ..., "appId": ...}``."""
        return self._transport.post(self._firewall_path(service_id, ip, "rules"), params)

    def delete_rule(
        self, service_id: PathValue, ip: str, rule_id_or_sequence: PathValue
    ) -> ApiResponse[Any]:
        """DELETE a rule by its ID or by its sequence number."""
        return self._transport.delete(
            self._firewall_path(service_id, ip, "rules", segment(rule_id_or_sequence))
        )

    # --- Statistics ---

    def get_stats(self, service_id: PathValue, ip: str) -> ApiResponse[list[FirewallStats]]:
        return self._transport.get(self._firewall_path(service_id, ip, "stats"))

    # --- Convenience methods ---

    def _notify(self, service_id: PathValue, ip: str, **settings: Any) -> ApiResponse[Any]:
        return self._send_params(
            "PUT",
            self._firewall_path(service_id, ip, "attack-notification"),
            FirewallAttackNotificationParams,
            **settings,
        )

    def enable_email_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._notify(service_id, ip, email_notification=True)

    def disable_email_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        return self._notify(service_id, ip, email_notification=False)

    def set_discord_webhook(
        self, service_id: PathValue, ip: str, webhook_url: str
    ) -> ApiResponse[Any]:
        return self._notify(service_id, ip, discord_webhook_url=webhook_url)

    def enable_all_notifications(
        self, service_id: PathValue, ip: str, discord_webhook_url: str = ""
    ) -> ApiResponse[Any]:
        """Turn on email notifications and set the Discord webhook in one call."""
        return self._notify(
            service_id, ip, email_notification=True, discord_webhook_url=discord_webhook_url
        )

    def disable_all_notifications(self, service_id: PathValue, ip: str) -> ApiResponse[Any]:
        """Turn off email notifications and clear the Discord webhook."""
        return self._notify(service_id, ip, email_notification=False, discord_webhook_url="")

    def create_port_rule(
        self, service_id: PathValue, target_ip: str, port: int, app_id: int
    ) -> ApiResponse[Any]:
        """Open *port* for *app_id*. A port outside 0-65535 gives a ``Request Error`` envelope."""
        return self._send_params(
            "POST",
            self._firewall_path(service_id, target_ip, "rules"),
            FirewallRuleParams,
            port=port,
            app_id=app_id,
        )
