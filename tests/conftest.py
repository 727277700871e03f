"""Shared test fixtures for nodesty.

Provides isolated config directories, output state management, fake HTTP
backends built on :class:`httpx.MockTransport`, and the CLI runner. These
fixtures are discovered by pytest automatically.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from nodesty.client import Transport
from nodesty.models import ClientConfig
from nodesty.output import OutputFormat, OutputManager, reset_output, set_output


BASE_URL = "https://api.nodesty.test"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. CliRunner swaps those streams, so a manager created
    inside one test must not leak into the next.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME into tmp_path, forces the XDG
    layout regardless of host platform, and clears all NODESTY_* variables.
    """
    monkeypatch.setattr("nodesty.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["NODESTY_PROFILE", "NODESTY_API_KEY", "NODESTY_BASE_URL"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def verbose_output() -> OutputManager:
    """Plain, uncoloured output with debug lines enabled."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Fake HTTP backend
# ---------------------------------------------------------------------------


class RecordingBackend:
    """Answers every request with a canned response and records it.

    ``responses`` is consumed in order; the last entry repeats once the
    list runs out. An entry may be an :class:`httpx.Response` or a callable
    taking the request and returning one.
    """

    def __init__(self, responses: list[Any]) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if callable(entry):
            return entry(request)
        return httpx.Response(entry.status_code, headers=entry.headers, content=entry.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def http_client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def make_transport() -> Callable[..., tuple[Transport, RecordingBackend]]:
    """Factory: ``make_transport(*responses, **config) -> (transport, backend)``."""
    created: list[Transport] = []

    def _factory(*responses: Any, **config: Any) -> tuple[Transport, RecordingBackend]:
        backend = RecordingBackend(list(responses) or [httpx.Response(200, json={})])
        settings = {"api_key": "pat_test", "base_url": BASE_URL, **config}
        transport = Transport(ClientConfig(**settings), http_client=backend.http_client())
        created.append(transport)
        return transport, backend

    yield _factory
    for transport in created:
        transport.close()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
