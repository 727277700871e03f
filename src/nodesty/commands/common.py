"""Helpers shared by the API command groups.

Every API command follows the same flow: resolve the effective
:class:`~nodesty.models.ClientConfig` from the root options stored in
``ctx.obj``, open a :class:`~nodesty.sdk.NodestyClient`, make one call and
hand the envelope to :func:`~nodesty.client.response.render_envelope`.
A failure envelope becomes a :class:`~nodesty.exceptions.NodestyError`,
which :func:`run` turns into an error line and the matching exit code.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from nodesty.client.response import render_envelope
from nodesty.config import resolve_client_config
from nodesty.exceptions import InvalidUsageError, NodestyError
from nodesty.models import ApiResponse
from nodesty.output import error
from nodesty.sdk import NodestyClient

P = TypeVar("P", bound=BaseModel)


def create_client(ctx: typer.Context) -> NodestyClient:
    """Build a client from the root ``--profile`` and ``--base-url`` options."""
    obj = ctx.obj or {}
    config = resolve_client_config(
        cli_profile=obj.get("profile"),
        cli_base_url=obj.get("base_url"),
    )
    return NodestyClient.from_config(config)


def run(ctx: typer.Context, call: Callable[[NodestyClient], ApiResponse[Any]]) -> None:
    """Execute *call* against a fresh client and render its envelope.

    Raises:
        typer.Exit: With the error's exit code when the call fails or the
            configuration cannot be resolved.
    """
    try:
        with create_client(ctx) as client:
            envelope = call(client)
        render_envelope(envelope)
    except NodestyError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def build_params(model: type[P], **values: Any) -> P:
    """Validate command-line values into a request model.

    Raises:
        typer.Exit: With the invalid-usage code on validation errors.
    """
    try:
        return model(**values)
    except ValidationError as exc:
        usage = InvalidUsageError(f"Invalid arguments: {_summarise(exc)}")
        error(str(usage))
        raise typer.Exit(code=usage.exit_code) from None


def confirm_or_abort(ctx: typer.Context, prompt: str) -> None:
    """Ask for confirmation unless ``--force`` was given."""
    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force and not typer.confirm(prompt):
        error("Aborted.")
        raise typer.Exit(code=1)


def _summarise(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)
