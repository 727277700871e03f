"""VPS commands -- power control, backups, reinstall and monitoring.

Provides the ``nodesty vps`` sub-command group. Every command takes the
service ID of the VPS as its first argument::

    nodesty vps info 1234
    nodesty vps restart 1234
    nodesty vps restore 1234 2024-01-15 backup-001.tar.gz
    nodesty vps reinstall 1234 --os-id 7
"""

from __future__ import annotations

import typer

from nodesty.commands.common import build_params, confirm_or_abort, run
from nodesty.models import (
    VpsActionParams,
    VpsBackupRestoreParams,
    VpsChangePasswordParams,
    VpsReinstallParams,
)


vps_app = typer.Typer(no_args_is_help=True)

_SERVICE_ID = typer.Argument(help="VPS service ID.")


@vps_app.command("info")
def vps_info(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Show VPS details, resources and usage."""
    run(ctx, lambda client: client.get_vps_info(service_id))


@vps_app.command("start")
def vps_start(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Boot the VPS."""
    run(ctx, lambda client: client.start_vps(service_id))


@vps_app.command("stop")
def vps_stop(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Shut the VPS down gracefully."""
    run(ctx, lambda client: client.stop_vps(service_id))


@vps_app.command("restart")
def vps_restart(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Reboot the VPS."""
    run(ctx, lambda client: client.restart_vps(service_id))


@vps_app.command("poweroff")
def vps_poweroff(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Cut power to the VPS immediately."""
    confirm_or_abort(ctx, f"Power off VPS {service_id} without a clean shutdown?")
    run(ctx, lambda client: client.power_off_vps(service_id))


@vps_app.command("action")
def vps_action(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    action: str = typer.Argument(help="One of: start, stop, restart, poweroff."),
) -> None:
    """Send a raw power action to the VPS."""
    params = build_params(VpsActionParams, action=action)
    run(ctx, lambda client: client.perform_vps_action(service_id, params))


@vps_app.command("change-password")
def vps_change_password(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    username: str = typer.Option(..., "--username", "-u", help="OS user to update."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True,
        help="New password.",
    ),
) -> None:
    """Change the password of a user on the VPS."""
    params = build_params(VpsChangePasswordParams, username=username, password=password)
    run(ctx, lambda client: client.change_vps_password(service_id, params))


@vps_app.command("graphs")
def vps_graphs(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Show CPU, RAM, disk and network graphs."""
    run(ctx, lambda client: client.get_vps_graphs(service_id))


@vps_app.command("reinstall")
def vps_reinstall(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    os_id: int = typer.Option(..., "--os-id", help="Template ID from 'vps os-templates'."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True,
        help="Root password for the new system.",
    ),
) -> None:
    """Reinstall the VPS. All data on the VPS is lost."""
    params = build_params(VpsReinstallParams, os_id=os_id, password=password)
    confirm_or_abort(ctx, f"Reinstall VPS {service_id}? All data will be erased.")
    run(ctx, lambda client: client.reinstall_vps(service_id, params))


@vps_app.command("backups")
def vps_backups(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List available backups."""
    run(ctx, lambda client: client.get_vps_backups(service_id))


@vps_app.command("restore")
def vps_restore(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    date: str = typer.Argument(help="Backup date, as listed by 'vps backups'."),
    file: str = typer.Argument(help="Backup file name, as listed by 'vps backups'."),
) -> None:
    """Restore the VPS from a backup."""
    params = build_params(VpsBackupRestoreParams, date=date, file=file)
    confirm_or_abort(ctx, f"Restore VPS {service_id} from {params.file}?")
    run(ctx, lambda client: client.restore_vps_backup(service_id, params.date, params.file))


@vps_app.command("os-templates")
def vps_os_templates(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List operating systems available for reinstall."""
    run(ctx, lambda client: client.get_vps_os_templates(service_id))


@vps_app.command("tasks")
def vps_tasks(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List recent tasks run on the VPS."""
    run(ctx, lambda client: client.get_vps_tasks(service_id))
