"""Output and diagnostics with strict stdout/stderr discipline.

* **stdout** -- API payloads only, so that ``nodesty ... --json | jq`` works.
* **stderr** -- status lines, retry notices, warnings and errors.
* **TTY detection** -- Rich formatting when stdout is an interactive
  terminal, plain text when piped.
* **Colour control** -- respects ``NO_COLOR``, ``TERM=dumb`` and
  ``--no-color``.

The SDK itself never prints data. The transports only emit ``debug``
lines (one per retry), which stay silent unless a verbose
:class:`OutputManager` has been installed with :func:`set_output`.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax


class OutputFormat(str, Enum):
    """Supported output formats.

    ``AUTO`` resolves to ``RICH`` on an interactive terminal with colour
    enabled and to ``PLAIN`` otherwise.
    """

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes payloads to stdout and diagnostics to stderr.

    Args:
        format: Desired output format. ``AUTO`` resolves based on TTY
            detection.
        no_color: Disable colour and Rich markup.
        quiet: Suppress informational messages on stderr.
        verbose: Show ``debug`` messages (retry notices, request lines).
        output_file: Write payloads to this path instead of stdout.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
        output_file: Optional[str] = None,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose
        self._output_file = output_file

        if format == OutputFormat.AUTO:
            self._format = (
                OutputFormat.RICH if _is_tty() and not self._no_color else OutputFormat.PLAIN
            )
        else:
            self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=(self._format == OutputFormat.RICH),
        )
        self._stderr = Console(
            file=sys.stderr,
            no_color=self._no_color,
            stderr=True,
        )

    @property
    def format(self) -> OutputFormat:
        """The resolved output format."""
        return self._format

    # ------------------------------------------------------------------ #
    # Data output (stdout)
    # ------------------------------------------------------------------ #

    def format_response(self, data: Any) -> None:
        """Render an API payload in the active format.

        Args:
            data: Decoded payload -- usually a dict or list, sometimes raw
                text.
        """
        if self._output_file:
            self._write_to_file(data)
            return

        if self._format == OutputFormat.JSON:
            self.print_data(_dumps(data))
        elif self._format == OutputFormat.PLAIN:
            self._print_plain(data)
        else:
            self._print_rich(data)

    def print_data(self, text: str) -> None:
        """Print raw text to stdout (or append it to the output file)."""
        if self._output_file:
            with open(self._output_file, "a", encoding="utf-8") as f:
                f.write(text)
                if not text.endswith("\n"):
                    f.write("\n")
        else:
            print(text, file=sys.stdout, flush=True)

    # ------------------------------------------------------------------ #
    # Diagnostics (stderr)
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        """Informational message. Suppressed by ``--quiet``."""
        if not self._quiet:
            self._emit(message)

    def success(self, message: str) -> None:
        """Green success message. Suppressed by ``--quiet``."""
        if not self._quiet:
            self._emit(message, style="green")

    def warning(self, message: str) -> None:
        """Warning. Never suppressed."""
        if self._no_color:
            self._emit(f"Warning: {message}")
        else:
            self._stderr.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Error. Never suppressed."""
        if self._no_color:
            self._emit(f"Error: {message}")
        else:
            self._stderr.print(f"[bold red]Error:[/bold red] {message}")

    def debug(self, message: str) -> None:
        """Debug message, only shown with ``--verbose``."""
        if self._verbose:
            self._emit(f"[debug] {message}", style="dim")

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _emit(self, message: str, style: Optional[str] = None) -> None:
        if self._no_color:
            print(message, file=sys.stderr, flush=True)
        elif style:
            self._stderr.print(message, style=style, markup=False)
        else:
            self._stderr.print(message, markup=False)

    def _print_plain(self, data: Any) -> None:
        """Dicts as ``key<TAB>value`` lines, lists of dicts as TSV with a header row."""
        if isinstance(data, dict):
            for key, value in data.items():
                self.print_data(f"{key}\t{_plain_value(value)}")
        elif isinstance(data, list):
            if data and all(isinstance(item, dict) for item in data):
                headers = list(data[0].keys())
                self.print_data("\t".join(headers))
                for item in data:
                    self.print_data(
                        "\t".join(_plain_value(item.get(h)) for h in headers)
                    )
            else:
                for item in data:
                    self.print_data(_plain_value(item))
        elif data is None:
            return
        else:
            self.print_data(str(data))

    def _print_rich(self, data: Any) -> None:
        if isinstance(data, (dict, list)):
            syntax = Syntax(_dumps(data), "json", theme="monokai", word_wrap=True)
            self._stdout.print(syntax)
        elif data is not None:
            self._stdout.print(str(data), markup=False)

    def _write_to_file(self, data: Any) -> None:
        assert self._output_file is not None
        content = data if isinstance(data, str) else _dumps(data)
        with open(self._output_file, "w", encoding="utf-8") as f:
            f.write(content)
            if not content.endswith("\n"):
                f.write("\n")


# ------------------------------------------------------------------ #
# Module-level helpers
# ------------------------------------------------------------------ #


def _dumps(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _plain_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, default=str)
    if value is None:
        return ""
    return str(value)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set (any value) or ``TERM=dumb``."""
    if os.environ.get("NO_COLOR") is not None:
        return True
    return os.environ.get("TERM") == "dumb"


# ------------------------------------------------------------------ #
# Global output instance
# ------------------------------------------------------------------ #

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the global :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    """Install *output* as the global :class:`OutputManager`."""
    global _output
    _output = output


def reset_output() -> None:
    """Drop the global :class:`OutputManager` (used between tests)."""
    global _output
    _output = None


def format_response(data: Any) -> None:
    get_output().format_response(data)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def warning(message: str) -> None:
    get_output().warning(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
