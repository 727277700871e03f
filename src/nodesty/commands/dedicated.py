"""Dedicated server commands -- power control, hardware and reinstall.

Provides the ``nodesty dedicated`` sub-command group::

    nodesty dedicated info 5678
    nodesty dedicated restart 5678
    nodesty dedicated reinstall 5678 --template ubuntu-22.04 --ssh-key "ssh-ed25519 ..."
    nodesty dedicated reinstall-status 5678
"""

from __future__ import annotations

from typing import Optional

import typer

from nodesty.commands.common import build_params, confirm_or_abort, run
from nodesty.models import DedicatedActionParams, DedicatedReinstallParams


dedicated_app = typer.Typer(no_args_is_help=True)

_SERVICE_ID = typer.Argument(help="Dedicated server service ID.")


@dedicated_app.command("info")
def dedicated_info(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Show server status, power state and addresses."""
    run(ctx, lambda client: client.get_dedicated_info(service_id))


@dedicated_app.command("hardware")
def dedicated_hardware(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List hardware components."""
    run(ctx, lambda client: client.get_dedicated_hardware(service_id))


@dedicated_app.command("start")
def dedicated_start(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Power the server on."""
    run(ctx, lambda client: client.start_dedicated(service_id))


@dedicated_app.command("stop")
def dedicated_stop(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Power the server off."""
    confirm_or_abort(ctx, f"Power off dedicated server {service_id}?")
    run(ctx, lambda client: client.stop_dedicated(service_id))


@dedicated_app.command("restart")
def dedicated_restart(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Power-cycle the server."""
    run(ctx, lambda client: client.restart_dedicated(service_id))


@dedicated_app.command("action")
def dedicated_action(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    action: str = typer.Argument(
        help="setPowerOn, setPowerOff, setPowerReset, start, stop, restart or reset."
    ),
) -> None:
    """Send a raw power action to the server."""
    params = build_params(DedicatedActionParams, action=action)
    run(ctx, lambda client: client.dedicated_action(service_id, params))


@dedicated_app.command("os-templates")
def dedicated_os_templates(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List operating systems available for reinstall."""
    run(ctx, lambda client: client.get_dedicated_os_templates(service_id))


@dedicated_app.command("reinstall")
def dedicated_reinstall(
    ctx: typer.Context,
    service_id: str = _SERVICE_ID,
    template: str = typer.Option(
        ..., "--template", "-t", help="Template ID from 'dedicated os-templates'."
    ),
    hostname: Optional[str] = typer.Option(None, "--hostname", help="New hostname."),
    password: Optional[str] = typer.Option(
        None, "--password", help="Root password. Omit to keep key-only access."
    ),
    ssh_keys: Optional[list[str]] = typer.Option(
        None, "--ssh-key", help="Public key to install. Repeatable."
    ),
) -> None:
    """Reinstall the server. All data on its disks is lost."""
    params = build_params(
        DedicatedReinstallParams,
        os_template_id=template,
        hostname=hostname,
        password=password,
        ssh_keys=ssh_keys or None,
    )
    confirm_or_abort(ctx, f"Reinstall dedicated server {service_id}? All data will be erased.")
    run(ctx, lambda client: client.reinstall_dedicated(service_id, params))


@dedicated_app.command("reinstall-status")
def dedicated_reinstall_status(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """Show progress of a running reinstall."""
    run(ctx, lambda client: client.get_dedicated_reinstall_status(service_id))


@dedicated_app.command("tasks")
def dedicated_tasks(ctx: typer.Context, service_id: str = _SERVICE_ID) -> None:
    """List recent tasks run on the server."""
    run(ctx, lambda client: client.get_dedicated_tasks(service_id))
