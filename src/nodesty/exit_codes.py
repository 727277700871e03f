"""Numeric process exit codes used by the ``nodesty`` command-line tool.

Each constant maps to a failure category and is referenced by the
corresponding :class:`~nodesty.exceptions.NodestyError` subclass. Shell
scripts wrapping the CLI can branch on the exit code instead of parsing
stderr.

Example::

    $ nodesty vps info 1234
    $ echo $?
    4   # EXIT_NOT_FOUND -- the service does not exist
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_AUTH_FAILURE = 3
"""The API rejected the access token (HTTP 401 / 403)."""

EXIT_NOT_FOUND = 4
"""The requested resource was not found (HTTP 404)."""

EXIT_SERVER_ERROR = 5
"""The API returned an HTTP 5xx error after all retries."""

EXIT_CONNECTION_ERROR = 6
"""No response was received (timeout, DNS failure, connection refused)."""

EXIT_REQUEST_ERROR = 8
"""The request could not be built or sent."""
