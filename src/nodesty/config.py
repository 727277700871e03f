"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles the persistent configuration of the ``nodesty`` CLI:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.nodesty/`` on macOS and Windows. See :func:`get_config_dir`,
  :func:`get_data_dir`, :func:`get_profiles_dir`.
* **Global config** -- A single :class:`~nodesty.models.GlobalConfig`
  JSON file storing the default profile and output preferences.
* **Profiles** -- One JSON file per account, each deserialised into a
  :class:`~nodesty.models.Profile`. Managed via :func:`load_profile`,
  :func:`save_profile`, :func:`delete_profile`.
* **Precedence resolution** -- :func:`resolve_client_config` merges CLI
  flags, environment variables, the active profile and defaults into the
  :class:`~nodesty.models.ClientConfig` a transport is built from.
* **Credential resolution** -- :func:`resolve_credential` reads the API
  token from an env var, a file, an interactive prompt or a literal value.

The library itself never touches these files; only the CLI does.
"""

from __future__ import annotations

import getpass
import json
import os
import platform
import sys
import tempfile
from pathlib import Path
from typing import Optional

from nodesty.exceptions import ConfigError
from nodesty.models import DEFAULT_BASE_URL, ClientConfig, GlobalConfig, Profile, RequestConfig

_APP_NAME = "nodesty"
_CONFIG_FILENAME = "config.json"

ENV_PROFILE = "NODESTY_PROFILE"
ENV_API_KEY = "NODESTY_API_KEY"
ENV_BASE_URL = "NODESTY_BASE_URL"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/nodesty/`` (default ``~/.config/nodesty/``).
    On macOS/Windows: ``~/.nodesty/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/nodesty/`` (default ``~/.local/share/nodesty/``).
    On macOS/Windows: ``~/.nodesty/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_profiles_dir() -> Path:
    path = get_config_dir() / "profiles"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write *data* to *path* atomically using a temp file and rename.

    The temp file lives in the target directory so that ``os.replace`` is
    an atomic rename on POSIX. It is removed if anything goes wrong.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def _write_json(path: Path, data: dict) -> None:
    _atomic_write(path, json.dumps(data, indent=2) + "\n")


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration, or defaults if no file exists yet.

    Raises:
        ConfigError: If the file exists but is not valid JSON or fails
            validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    _write_json(_global_config_path(), config.model_dump(mode="json"))


# --- Profiles ---


def _profile_path(name: str) -> Path:
    if not name or "/" in name or "\\" in name or name.startswith("."):
        raise ConfigError(f"Invalid profile name: {name!r}")
    return get_profiles_dir() / f"{name}.json"


def list_profiles() -> list[str]:
    """Return all profile names, sorted alphabetically."""
    return sorted(p.stem for p in get_profiles_dir().glob("*.json") if p.is_file())


def load_profile(name: str) -> Profile:
    """Load and validate the profile called *name*.

    Raises:
        ConfigError: If the profile does not exist, is not valid JSON, or
            fails validation.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigError(f"Profile '{name}' not found at {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Profile.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid profile '{name}' at {path}: {exc}") from exc


def save_profile(profile: Profile) -> None:
    _write_json(_profile_path(profile.name), profile.model_dump(mode="json"))


def delete_profile(name: str) -> None:
    """Delete a profile, clearing it as the default if it was one.

    Raises:
        ConfigError: If the profile does not exist.
    """
    path = _profile_path(name)
    if not path.is_file():
        raise ConfigError(f"Profile '{name}' not found at {path}")
    path.unlink()

    global_cfg = load_global_config()
    if global_cfg.default_profile == name:
        global_cfg.default_profile = None
        save_global_config(global_cfg)


def profile_exists(name: str) -> bool:
    return _profile_path(name).is_file()


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve an API token from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"prompt"`` -- prompts interactively (requires a TTY)
        - ``"token:VALUE"`` -- the token itself

    Raises:
        ConfigError: If the source cannot be resolved to a non-empty token.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if not value:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            value = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc
        if not value:
            raise ConfigError(f"Credential file is empty: {path}")
        return value

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError(
                "Cannot prompt for the API token: stdin is not a TTY (source: prompt)"
            )
        value = getpass.getpass("Nodesty API token: ")
        if not value:
            raise ConfigError("No API token entered")
        return value

    if source.startswith("token:"):
        value = source[6:]
        if not value:
            raise ConfigError("Empty literal token (source: token:)")
        return value

    raise ConfigError(f"Unknown credential source format: {source}")


# --- Precedence resolution ---


def resolve_profile(cli_profile: Optional[str] = None) -> Optional[Profile]:
    """Pick the active profile.

    Precedence (high to low): ``cli_profile``, ``$NODESTY_PROFILE``, the
    global ``default_profile``, then the only saved profile if
    ``auto_select_single_profile`` is set. Returns ``None`` when nothing
    applies.
    """
    global_cfg = load_global_config()

    name: Optional[str] = global_cfg.default_profile
    env_profile = os.environ.get(ENV_PROFILE)
    if env_profile:
        name = env_profile
    if cli_profile is not None:
        name = cli_profile

    if name is None and global_cfg.auto_select_single_profile:
        profiles = list_profiles()
        if len(profiles) == 1:
            name = profiles[0]

    if name is None:
        return None
    return load_profile(name)


def resolve_client_config(
    cli_profile: Optional[str] = None,
    cli_base_url: Optional[str] = None,
    cli_api_key: Optional[str] = None,
) -> ClientConfig:
    """Build the effective :class:`~nodesty.models.ClientConfig`.

    Precedence (high to low):
        1. CLI flags (``cli_base_url``, ``cli_api_key``)
        2. Environment variables (``NODESTY_API_KEY``, ``NODESTY_BASE_URL``)
        3. The active profile (see :func:`resolve_profile`)
        4. Defaults

    Without any profile, ``$NODESTY_API_KEY`` alone is enough.

    Raises:
        ConfigError: If no API token can be found, or the profile named on
            the command line or in ``$NODESTY_PROFILE`` does not exist.
    """
    profile = resolve_profile(cli_profile)
    request = profile.request if profile is not None else RequestConfig()

    api_key = cli_api_key or os.environ.get(ENV_API_KEY)
    if not api_key:
        if profile is None:
            raise ConfigError(
                f"No API token configured. Set {ENV_API_KEY} or run 'nodesty config init'."
            )
        api_key = resolve_credential(profile.credential)

    base_url = (
        cli_base_url
        or os.environ.get(ENV_BASE_URL)
        or (profile.base_url if profile is not None else None)
        or DEFAULT_BASE_URL
    )

    try:
        return ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout=request.timeout,
            max_retries=request.max_retries,
        )
    except ValueError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc
