"""Exception hierarchy for nodesty.

The transports never raise: every outcome of an API call is returned as an
:class:`~nodesty.models.ApiResponse` envelope. The exceptions below are used
by the layers around them -- configuration loading, the
:meth:`~nodesty.models.ApiResponse.unwrap` helper and the CLI entry point,
which catches :class:`NodestyError` and exits with its ``exit_code``.

Subclass hierarchy::

    NodestyError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- AuthError           (exit 3)
    +-- NotFoundError       (exit 4)
    +-- ServerError         (exit 5)
    +-- ConnectionError_    (exit 6)
    +-- RequestError        (exit 8)
    +-- ApiError            (exit 1)
    +-- ConfigError         (exit 1)
"""

from __future__ import annotations

from nodesty.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_REQUEST_ERROR,
    EXIT_SERVER_ERROR,
)


class NodestyError(Exception):
    """Base exception for all nodesty errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
        status_code: HTTP status of the failed call, when one was received.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code
        self.status_code = status_code


class InvalidUsageError(NodestyError):
    """Raised for invalid CLI arguments or parameter values."""

    exit_code = EXIT_INVALID_USAGE


class AuthError(NodestyError):
    """Raised when the API rejects the access token (HTTP 401 / 403)."""

    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(NodestyError):
    """Raised when the API returns HTTP 404."""

    exit_code = EXIT_NOT_FOUND


class ServerError(NodestyError):
    """Raised when the API returns an HTTP 5xx error."""

    exit_code = EXIT_SERVER_ERROR


class ConnectionError_(NodestyError):
    """Raised when no response was received from the API.

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class RequestError(NodestyError):
    """Raised when a request could not be constructed or sent."""

    exit_code = EXIT_REQUEST_ERROR


class ApiError(NodestyError):
    """Raised for any other non-2xx response (e.g. 400, 409, 422)."""


class ConfigError(NodestyError):
    """Raised for configuration problems (missing profiles, invalid JSON, bad credential sources)."""
