"""User commands -- account details, services, tickets and invoices.

Provides the ``nodesty user`` sub-command group::

    nodesty user me
    nodesty user services --plain
    nodesty user ticket 42
    nodesty user invoice 1001 --json
"""

from __future__ import annotations

import typer

from nodesty.commands.common import run


user_app = typer.Typer(no_args_is_help=True)


@user_app.command("me")
def user_me(ctx: typer.Context) -> None:
    """Show the account that owns the API token."""
    run(ctx, lambda client: client.get_current_user())


@user_app.command("sessions")
def user_sessions(ctx: typer.Context) -> None:
    """List active login sessions."""
    run(ctx, lambda client: client.get_user_sessions())


@user_app.command("services")
def user_services(ctx: typer.Context) -> None:
    """List every service on the account."""
    run(ctx, lambda client: client.get_services())


@user_app.command("tickets")
def user_tickets(ctx: typer.Context) -> None:
    """List support tickets."""
    run(ctx, lambda client: client.get_tickets())


@user_app.command("ticket")
def user_ticket(
    ctx: typer.Context,
    ticket_id: str = typer.Argument(help="Ticket ID."),
) -> None:
    """Show one support ticket with its messages."""
    run(ctx, lambda client: client.get_ticket(ticket_id))


@user_app.command("invoices")
def user_invoices(ctx: typer.Context) -> None:
    """List invoices."""
    run(ctx, lambda client: client.get_invoices())


@user_app.command("invoice")
def user_invoice(
    ctx: typer.Context,
    invoice_id: str = typer.Argument(help="Invoice ID."),
) -> None:
    """Show one invoice with its line items."""
    run(ctx, lambda client: client.get_invoice(invoice_id))
