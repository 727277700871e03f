"""Firewall commands -- rules, reverse DNS, statistics and attack alerts.

Provides the ``nodesty firewall`` sub-command group. Every command is
scoped to one IP address of one service::

    nodesty firewall rules 1234 203.0.113.10
    nodesty firewall rule-add 1234 203.0.113.10 --port 25565 --app-id 3
    nodesty firewall rdns-set 1234 203.0.113.10 mc.example.com
    nodesty firewall alerts-enable 1234 203.0.113.10 --webhook https://discord.com/api/webhooks/...
"""

from __future__ import annotations

from typing import Optional

import typer

from nodesty.commands.common import build_params, confirm_or_abort, run
from nodesty.models import FirewallAttackNotificationParams, FirewallRdnsParams, FirewallRuleParams


firewall_app = typer.Typer(no_args_is_help=True)

_SERVICE_ID = typer.Argument(help="Service ID.")
_IP = typer.Argument(help="IP address assigned to the service.")


@firewall_app.command("rules")
def firewall_rules(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """List firewall rules."""
    run(ctx, lambda client: client.get_firewall_rules(service_id, ip))


@firewall_app.command("rule-add")
def firewall_rule_add(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    ip: str = _IP,
    port: int = typer.Option(..., "--port", help="Port to open (0-65535)."),
    app_id: int = typer.Option(..., "--app-id", help="Application profile ID."),
) -> None:
    """Open a port for an application."""
    params = build_params(FirewallRuleParams, port=port, app_id=app_id)
    run(ctx, lambda client: client.create_firewall_rule(service_id, ip, params))


@firewall_app.command("rule-delete")
def firewall_rule_delete(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    ip: str = _IP,
    rule: str = typer.Argument(help="Rule ID or sequence number."),
) -> None:
    """Delete a firewall rule."""
    confirm_or_abort(ctx, f"Delete firewall rule {rule} on {ip}?")
    run(ctx, lambda client: client.delete_firewall_rule(service_id, ip, rule))


@firewall_app.command("stats")
def firewall_stats(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """Show traffic statistics."""
    run(ctx, lambda client: client.get_firewall_stats(service_id, ip))


@firewall_app.command("attack-logs")
def firewall_attack_logs(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """List mitigated attacks."""
    run(ctx, lambda client: client.get_firewall_attack_logs(service_id, ip))


@firewall_app.command("rdns")
def firewall_rdns(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """Show the reverse DNS record."""
    run(ctx, lambda client: client.get_firewall_rdns(service_id, ip))


@firewall_app.command("rdns-set")
def firewall_rdns_set(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    ip: str = _IP,
    hostname: str = typer.Argument(help="Hostname the IP should resolve to."),
) -> None:
    """Set the reverse DNS record."""
    params = build_params(FirewallRdnsParams, hostname=hostname)
    run(ctx, lambda client: client.update_firewall_rdns(service_id, ip, params))


@firewall_app.command("rdns-delete")
def firewall_rdns_delete(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """Remove the reverse DNS record."""
    confirm_or_abort(ctx, f"Delete the reverse DNS record of {ip}?")
    run(ctx, lambda client: client.delete_firewall_rdns(service_id, ip))


@firewall_app.command("alerts")
def firewall_alerts(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """Show attack notification settings."""
    run(ctx, lambda client: client.get_firewall_attack_notification(service_id, ip))


@firewall_app.command("alerts-set")
def firewall_alerts_set(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    ip: str = _IP,
    email: Optional[bool] = typer.Option(
        None, "--email/--no-email", help="Send alerts by email."
    ),
    webhook: Optional[str] = typer.Option(
        None, "--webhook", help="Discord webhook URL. Pass an empty string to clear it."
    ),
    severity: Optional[str] = typer.Option(
        None, "--severity", help="Minimum severity: low, medium, high or critical."
    ),
) -> None:
    """Update only the notification settings that are given."""
    params = build_params(
        FirewallAttackNotificationParams,
        email_notification=email,
        discord_webhook_url=webhook,
        severity=severity,
    )
    run(ctx, lambda client: client.update_firewall_attack_notification(service_id, ip, params))


@firewall_app.command("alerts-enable")
def firewall_alerts_enable(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    ip: str = _IP,
    webhook: str = typer.Option("", "--webhook", help="Discord webhook URL."),
) -> None:
    """Turn on email alerts, and Discord alerts if a webhook is given."""
    run(ctx, lambda client: client.enable_all_firewall_notifications(service_id, ip, webhook))


@firewall_app.command("alerts-disable")
def firewall_alerts_disable(ctx: typer.Context, service_id: str = _SERVICE_ID, ip: str = _IP) -> None:
    """Turn off email alerts and clear the Discord webhook."""
    run(ctx, lambda client: client.disable_all_firewall_notifications(service_id, ip))
