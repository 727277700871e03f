"""Typer application and CLI entry point for nodesty.

This module wires together the top-level Typer application and mounts the
command groups (``user``, ``vps``, ``dedicated``, ``firewall``, ``config``)
plus the top-level ``health`` command.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler, invokes the Typer app and
maps :class:`~nodesty.exceptions.NodestyError` to its exit code. Any other
exception is written to a crash log under the data directory.

See Also:
    :mod:`nodesty.config`: Profile resolution used by every API command.
    :mod:`nodesty.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from nodesty import __version__
from nodesty.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="nodesty",
    help="Manage Nodesty VPS, dedicated servers and firewalls from the command line.",
    no_args_is_help=True,
    add_completion=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nodesty {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", "-p", help="Profile name to use."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Override the API base URL."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show requests and retries."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
    output_file: Optional[str] = typer.Option(
        None, "-o", "--output", help="Output file path."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~nodesty.output.OutputManager` from the
    output flags and stores the connection options in ``ctx.obj`` for the
    API commands. Without ``--json`` or ``--plain`` the format saved with
    ``nodesty config format`` applies.
    """
    from nodesty.config import load_global_config
    from nodesty.exceptions import ConfigError
    from nodesty.output import OutputFormat, OutputManager, set_output, warning

    config_problem: Optional[str] = None
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    else:
        try:
            fmt = load_global_config().output.format
        except ConfigError as exc:
            fmt = OutputFormat.AUTO
            config_problem = str(exc)

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
            output_file=output_file,
        )
    )
    if config_problem:
        warning(f"{config_problem}; using automatic output format.")

    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile
    ctx.obj["base_url"] = base_url
    ctx.obj["force"] = force
    ctx.obj["verbose"] = verbose


@app.command("health")
def health_command(ctx: typer.Context) -> None:
    """Check that the API is reachable and the token is accepted."""
    from nodesty.commands.common import run

    run(ctx, lambda client: client.health_check())


# ------------------------------------------------------------------ #
# Command groups
# ------------------------------------------------------------------ #

from nodesty.commands.config import config_app  # noqa: E402
from nodesty.commands.dedicated import dedicated_app  # noqa: E402
from nodesty.commands.firewall import firewall_app  # noqa: E402
from nodesty.commands.user import user_app  # noqa: E402
from nodesty.commands.vps import vps_app  # noqa: E402

app.add_typer(user_app, name="user", help="Account, services, tickets and invoices.")
app.add_typer(vps_app, name="vps", help="VPS management.")
app.add_typer(dedicated_app, name="dedicated", help="Dedicated server management.")
app.add_typer(firewall_app, name="firewall", help="Firewall rules, rDNS and attack alerts.")
app.add_typer(config_app, name="config", help="Profile and configuration management.")


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to the data directory and return its path."""
    from nodesty.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(f"{type(exc).__name__}: {exc}\n\n{traceback.format_exc()}")
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``nodesty`` console script.

    Unhandled :class:`~nodesty.exceptions.NodestyError` instances cause a
    clean exit with the error's ``exit_code``. All other exceptions produce
    a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from nodesty.exceptions import NodestyError
        from nodesty.output import error

        if isinstance(exc, NodestyError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
