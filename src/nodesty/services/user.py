"""Account-level operations: profile, sessions, services, tickets, invoices."""

from __future__ import annotations

from nodesty.models import ApiResponse
from nodesty.services.base import BaseService, PathValue, segment
from nodesty.types import (
    HealthStatus,
    Invoice,
    InvoiceSummary,
    Service,
    Ticket,
    TicketSummary,
    UserInfo,
    UserSession,
)


class UserService(BaseService):
    """Endpoints scoped to the authenticated account."""

    def get_current_user(self) -> ApiResponse[UserInfo]:
        """GET ``/api/users/@me``."""
        return self._transport.get("/api/users/@me")

    def get_user_sessions(self) -> ApiResponse[list[UserSession]]:
        """GET ``/api/users/@me/sessions``."""
        return self._transport.get("/api/users/@me/sessions")

    def get_services(self) -> ApiResponse[list[Service]]:
        """GET ``/api/services`` -- every service owned by the account."""
        return self._transport.get("/api/services")

    def get_tickets(self) -> ApiResponse[list[TicketSummary]]:
        return self._transport.get("/api/tickets")

    def get_ticket(self, ticket_id: PathValue) -> ApiResponse[Ticket]:
        return self._transport.get(f"/api/tickets/{segment(ticket_id)}")

    def get_invoices(self) -> ApiResponse[list[InvoiceSummary]]:
        return self._transport.get("/api/users/@me/invoices")

    def get_invoice(self, invoice_id: PathValue) -> ApiResponse[Invoice]:
        return self._transport.get(f"/api/users/@me/invoices/{segment(invoice_id)}")

    def health_check(self) -> ApiResponse[HealthStatus]:
        """GET ``/health``."""
        return self._transport.get("/health")
