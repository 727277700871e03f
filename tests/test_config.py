"""Tests for nodesty.config -- XDG paths, atomic writes, profiles, precedence."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from nodesty.config import (
    _atomic_write,
    delete_profile,
    get_config_dir,
    get_data_dir,
    get_profiles_dir,
    list_profiles,
    load_global_config,
    load_profile,
    profile_exists,
    resolve_client_config,
    resolve_credential,
    resolve_profile,
    save_global_config,
    save_profile,
)
from nodesty.exceptions import ConfigError
from nodesty.models import GlobalConfig, Profile, RequestConfig


def _save(name: str, **kwargs) -> Profile:
    profile = Profile(name=name, **kwargs)
    save_profile(profile)
    return profile


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestPaths:
    def test_config_dir_under_xdg(self, isolated_config: Path) -> None:
        assert get_config_dir() == isolated_config / "config" / "nodesty"
        assert get_config_dir().is_dir()

    def test_data_dir_under_xdg(self, isolated_config: Path) -> None:
        assert get_data_dir() == isolated_config / "data" / "nodesty"

    def test_profiles_dir(self, isolated_config: Path) -> None:
        assert get_profiles_dir() == get_config_dir() / "profiles"

    def test_xdg_default_without_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("nodesty.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "nodesty"

    def test_fallback_on_other_platforms(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("nodesty.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        assert get_config_dir() == tmp_path / ".nodesty"
        assert get_data_dir() == tmp_path / ".nodesty" / "logs"


# ---------------------------------------------------------------------------
# Atomic writes
# ---------------------------------------------------------------------------


class TestAtomicWrite:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "sub" / "file.json"
        _atomic_write(target, "{}\n")
        assert target.read_text() == "{}\n"

    def test_failure_keeps_original_and_cleans_up(self, tmp_path: Path) -> None:
        target = tmp_path / "file.json"
        target.write_text("original")

        with patch("nodesty.config.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                _atomic_write(target, "new")

        assert target.read_text() == "original"
        assert list(tmp_path.iterdir()) == [target]


# ---------------------------------------------------------------------------
# Global config and profiles
# ---------------------------------------------------------------------------


class TestGlobalConfig:
    def test_defaults_when_missing(self, isolated_config: Path) -> None:
        assert load_global_config() == GlobalConfig()

    def test_round_trip(self, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(default_profile="work"))
        assert load_global_config().default_profile == "work"

    def test_invalid_json(self, isolated_config: Path) -> None:
        (get_config_dir() / "config.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_output_format_saved_as_string(self, isolated_config: Path) -> None:
        save_global_config(GlobalConfig(output={"format": "json"}))
        raw = json.loads((get_config_dir() / "config.json").read_text())
        assert raw["output"] == {"format": "json"}
        assert load_global_config().output.format == "json"

    def test_unknown_output_format(self, isolated_config: Path) -> None:
        (get_config_dir() / "config.json").write_text('{"output": {"format": "yaml"}}')
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()


class TestProfiles:
    def test_save_and_load(self, isolated_config: Path) -> None:
        _save("work", base_url="https://eu.nodesty.test")
        loaded = load_profile("work")
        assert loaded.base_url == "https://eu.nodesty.test"
        assert json.loads((get_profiles_dir() / "work.json").read_text())["name"] == "work"

    def test_list_sorted(self, isolated_config: Path) -> None:
        _save("zeta")
        _save("alpha")
        assert list_profiles() == ["alpha", "zeta"]

    def test_missing_profile(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_profile("ghost")

    def test_invalid_profile(self, isolated_config: Path) -> None:
        (get_profiles_dir() / "bad.json").write_text('{"base_url": 1}')
        with pytest.raises(ConfigError, match="Invalid profile"):
            load_profile("bad")

    @pytest.mark.parametrize("name", ["", "../escape", ".hidden", "a/b"])
    def test_unsafe_names_rejected(self, isolated_config: Path, name: str) -> None:
        with pytest.raises(ConfigError):
            profile_exists(name)

    def test_delete_clears_default(self, isolated_config: Path) -> None:
        _save("work")
        save_global_config(GlobalConfig(default_profile="work"))

        delete_profile("work")

        assert not profile_exists("work")
        assert load_global_config().default_profile is None

    def test_delete_missing(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError):
            delete_profile("ghost")


# ---------------------------------------------------------------------------
# Credential sources
# ---------------------------------------------------------------------------


class TestResolveCredential:
    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_TOKEN", "pat_env")
        assert resolve_credential("env:MY_TOKEN") == "pat_env"

    def test_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MY_TOKEN", raising=False)
        with pytest.raises(ConfigError, match="MY_TOKEN"):
            resolve_credential("env:MY_TOKEN")

    def test_file(self, tmp_path: Path) -> None:
        token_file = tmp_path / "token"
        token_file.write_text("pat_file\n")
        assert resolve_credential(f"file:{token_file}") == "pat_file"

    def test_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            resolve_credential(f"file:{tmp_path / 'nope'}")

    def test_empty_file(self, tmp_path: Path) -> None:
        token_file = tmp_path / "token"
        token_file.write_text("  \n")
        with pytest.raises(ConfigError, match="empty"):
            resolve_credential(f"file:{token_file}")

    def test_literal(self) -> None:
        assert resolve_credential("token:pat_literal") == "pat_literal"

    def test_prompt_requires_tty(self) -> None:
        with patch("nodesty.config.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            with pytest.raises(ConfigError, match="not a TTY"):
                resolve_credential("prompt")

    def test_prompt(self) -> None:
        with patch("nodesty.config.sys.stdin") as stdin, patch(
            "nodesty.config.getpass.getpass", return_value="pat_typed"
        ):
            stdin.isatty.return_value = True
            assert resolve_credential("prompt") == "pat_typed"

    def test_unknown(self) -> None:
        with pytest.raises(ConfigError, match="Unknown credential source"):
            resolve_credential("keyring:x")


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestResolveProfile:
    def test_none_without_profiles(self, isolated_config: Path) -> None:
        assert resolve_profile() is None

    def test_single_profile_auto_selected(self, isolated_config: Path) -> None:
        _save("only")
        assert resolve_profile().name == "only"

    def test_auto_select_disabled(self, isolated_config: Path) -> None:
        _save("only")
        save_global_config(GlobalConfig(auto_select_single_profile=False))
        assert resolve_profile() is None

    def test_no_auto_select_with_several(self, isolated_config: Path) -> None:
        _save("a")
        _save("b")
        assert resolve_profile() is None

    def test_precedence(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("global", "env", "cli"):
            _save(name)
        save_global_config(GlobalConfig(default_profile="global"))
        assert resolve_profile().name == "global"

        monkeypatch.setenv("NODESTY_PROFILE", "env")
        assert resolve_profile().name == "env"
        assert resolve_profile("cli").name == "cli"

    def test_missing_named_profile(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError):
            resolve_profile("ghost")


class TestResolveClientConfig:
    def test_env_key_alone(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODESTY_API_KEY", "pat_env")
        config = resolve_client_config()

        assert config.api_key == "pat_env"
        assert config.base_url == "https://nodesty.com"
        assert config.timeout == 30.0
        assert config.max_retries == 3

    def test_nothing_configured(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError, match="No API token"):
            resolve_client_config()

    def test_profile_values(self, isolated_config: Path) -> None:
        _save(
            "work",
            base_url="https://eu.nodesty.test",
            credential="token:pat_profile",
            request=RequestConfig(timeout=5, max_retries=1),
        )
        config = resolve_client_config()

        assert config.api_key == "pat_profile"
        assert config.base_url == "https://eu.nodesty.test"
        assert config.timeout == 5
        assert config.max_retries == 1

    def test_env_overrides_profile(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _save("work", base_url="https://eu.nodesty.test", credential="token:pat_profile")
        monkeypatch.setenv("NODESTY_API_KEY", "pat_env")
        monkeypatch.setenv("NODESTY_BASE_URL", "https://env.nodesty.test")

        config = resolve_client_config()
        assert config.api_key == "pat_env"
        assert config.base_url == "https://env.nodesty.test"

    def test_cli_overrides_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NODESTY_API_KEY", "pat_env")
        monkeypatch.setenv("NODESTY_BASE_URL", "https://env.nodesty.test")

        config = resolve_client_config(cli_base_url="https://cli.nodesty.test", cli_api_key="pat_cli")
        assert config.api_key == "pat_cli"
        assert config.base_url == "https://cli.nodesty.test"

    def test_profile_credential_unresolvable(self, isolated_config: Path) -> None:
        _save("work", credential="env:NODESTY_TEST_UNSET")
        with pytest.raises(ConfigError, match="NODESTY_TEST_UNSET"):
            resolve_client_config()
