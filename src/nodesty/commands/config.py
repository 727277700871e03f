"""Config commands -- create, inspect and switch connection profiles.

Provides the ``nodesty config`` sub-command group. A profile stores the
base URL, the credential *source* and request settings for one account;
the token itself normally stays in an environment variable or a file::

    nodesty config init --name work --credential file:~/.nodesty-token
    nodesty config list
    nodesty config use work
    nodesty config show
    nodesty config format json
"""

from __future__ import annotations

import typer

from nodesty.exceptions import ConfigError
from nodesty.models import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT
from nodesty.output import OutputFormat, error, format_response, info, success, warning


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("init")
def config_init(
    name: str = typer.Option("default", "--name", "-n", help="Profile name."),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="API base URL."),
    credential: str = typer.Option(
        "env:NODESTY_API_KEY",
        "--credential",
        "-c",
        help="Token source: env:VAR, file:/path, prompt or token:VALUE.",
    ),
    timeout: float = typer.Option(DEFAULT_TIMEOUT, "--timeout", help="Request timeout in seconds."),
    max_retries: int = typer.Option(
        DEFAULT_MAX_RETRIES, "--max-retries", help="Retries after a 5xx response."
    ),
    make_default: bool = typer.Option(
        True, "--default/--no-default", help="Make this the default profile."
    ),
) -> None:
    """Create or overwrite a profile.

    The credential source is stored as given and resolved on every run, so
    rotating the token only requires updating the variable or file.

    Example::

        nodesty config init
        nodesty config init --name staging --base-url https://staging.nodesty.com
    """
    from pydantic import ValidationError

    from nodesty.config import load_global_config, profile_exists, save_global_config, save_profile
    from nodesty.models import Profile, RequestConfig

    try:
        profile = Profile(
            name=name,
            base_url=base_url,
            credential=credential,
            request=RequestConfig(timeout=timeout, max_retries=max_retries),
        )
    except ValidationError as exc:
        error(f"Invalid profile settings: {exc}")
        raise typer.Exit(code=2) from None

    if credential.startswith("token:"):
        warning("The token will be stored in plain text in the profile file.")

    try:
        if profile_exists(name):
            info(f'Profile "{name}" already exists and will be overwritten.')
        save_profile(profile)
        if make_default:
            global_cfg = load_global_config()
            global_cfg.default_profile = name
            save_global_config(global_cfg)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    success(f'Profile "{name}" saved.')


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the global configuration and the active profile.

    The credential is shown as its source descriptor, never as the token.

    Example::

        nodesty config show
        nodesty --profile work config show --json
    """
    from nodesty.config import get_config_dir, load_global_config, resolve_profile

    cli_profile = ctx.obj.get("profile") if ctx.obj else None
    try:
        global_cfg = load_global_config()
        profile = resolve_profile(cli_profile)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    info(f"Config directory: {get_config_dir()}")
    data = global_cfg.model_dump(mode="json")
    data["active_profile"] = profile.model_dump(mode="json") if profile else None
    format_response(data)


@config_app.command("list")
def config_list() -> None:
    """List saved profiles. The default profile is marked."""
    from nodesty.config import list_profiles, load_global_config

    default = load_global_config().default_profile
    names = list_profiles()
    if not names:
        info("No profiles found. Create one with 'nodesty config init'.")
        return
    format_response([{"name": n, "default": n == default} for n in names])


@config_app.command("use")
def config_use(
    name: str = typer.Argument(help="Profile to make the default."),
) -> None:
    """Set the default profile."""
    from nodesty.config import load_global_config, profile_exists, save_global_config

    if not profile_exists(name):
        error(f"Profile '{name}' does not exist.")
        raise typer.Exit(code=2)

    global_cfg = load_global_config()
    global_cfg.default_profile = name
    save_global_config(global_cfg)
    success(f'Default profile set to "{name}".')


@config_app.command("format")
def config_format(
    fmt: OutputFormat = typer.Argument(help="auto, json, plain or rich."),
) -> None:
    """Set the default output format.

    ``--json`` and ``--plain`` still override it for a single run.

    Example::

        nodesty config format json
    """
    from nodesty.config import load_global_config, save_global_config

    try:
        global_cfg = load_global_config()
        global_cfg.output.format = fmt
        save_global_config(global_cfg)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    success(f'Default output format set to "{fmt.value}".')


@config_app.command("delete")
def config_delete(
    ctx: typer.Context,
    name: str = typer.Argument(help="Profile to delete."),
) -> None:
    """Delete a profile. Asks for confirmation unless ``--force`` is active."""
    from nodesty.config import delete_profile

    force = ctx.obj.get("force", False) if ctx.obj else False
    if not force:
        confirmed = typer.confirm(f'Delete profile "{name}"?')
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    try:
        delete_profile(name)
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    success(f'Profile "{name}" deleted.')
