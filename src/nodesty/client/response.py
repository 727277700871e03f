"""Result normalization -- maps every call outcome to an :class:`ApiResponse`.

Both transports funnel their results through this module so that the four
possible outcomes collapse into one envelope shape:

1. the server answered with an error status (:func:`from_response`),
2. the request was sent but no response came back (:func:`from_exception`),
3. the request could not be built or sent (:func:`from_exception`),
4. the server answered with a 2xx status (:func:`from_response`).

:func:`render_envelope` bridges an envelope to the output system for the
CLI.
"""

from __future__ import annotations

from typing import Any

import httpx

from nodesty.models import ApiResponse, ErrorKind
from nodesty.output import get_output

NETWORK_ERROR = "Network Error"
NO_RESPONSE_MESSAGE = "No response received from server"
REQUEST_ERROR = "Request Error"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
API_ERROR = "API Error"

# Raised by httpx before anything reaches the wire.
_CONSTRUCTION_ERRORS = (
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    httpx.InvalidURL,
)


def extract_response_data(response: httpx.Response) -> Any:
    """Decode a response body.

    Returns the JSON-decoded body when possible, the raw text when the body
    is not JSON, and ``None`` when the body is empty (e.g. HTTP 204).
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def status_text(response: httpx.Response) -> str:
    """The reason phrase of *response* (``"Not Found"`` for a 404)."""
    return response.reason_phrase or ""


def from_response(response: httpx.Response) -> ApiResponse[Any]:
    """Normalize a received response.

    Any 2xx status is a success carrying the decoded body. Every other
    status is a failure whose ``error`` is the server's ``message`` field
    when present, falling back to the status text.
    """
    status = response.status_code
    reason = status_text(response)
    body = extract_response_data(response)

    if 200 <= status < 300:
        return ApiResponse.ok(data=body, message=reason, status_code=status)

    server_message = body.get("message") if isinstance(body, dict) else None
    if not isinstance(server_message, str) or not server_message:
        server_message = None

    return ApiResponse.fail(
        kind=ErrorKind.SERVER_ERROR if status >= 500 else ErrorKind.CLIENT_ERROR,
        error=server_message or reason or API_ERROR,
        message=f"HTTP {status}: {reason}",
        status_code=status,
    )


def from_exception(exc: BaseException) -> ApiResponse[Any]:
    """Normalize an exception raised while building or sending a request.

    httpx transport errors (timeouts, refused connections, DNS failures,
    dropped connections) mean no response was received. Anything else,
    including httpx's own URL and protocol validation, means the request
    never left the client.
    """
    if isinstance(exc, httpx.TransportError) and not isinstance(exc, _CONSTRUCTION_ERRORS):
        return ApiResponse.fail(
            kind=ErrorKind.NETWORK_ERROR,
            error=NETWORK_ERROR,
            message=NO_RESPONSE_MESSAGE,
        )
    return request_error(str(exc))


def request_error(text: str = "") -> ApiResponse[Any]:
    """Failure envelope for a request that could not be constructed."""
    return ApiResponse.fail(
        kind=ErrorKind.REQUEST_ERROR,
        error=REQUEST_ERROR,
        message=text or UNKNOWN_ERROR_MESSAGE,
    )


def render_envelope(envelope: ApiResponse[Any]) -> None:
    """Print an envelope through the global output system.

    Success: the status line goes to stderr and the payload (if any) to
    stdout. Failure: the matching :class:`~nodesty.exceptions.NodestyError`
    is raised so that the CLI entry point can exit with its code.
    """
    if not envelope.success:
        raise envelope.to_exception()

    output = get_output()
    if envelope.status_code is not None:
        output.info(f"HTTP {envelope.status_code} {envelope.message or ''}".rstrip())
    if envelope.data is not None:
        output.format_response(envelope.data)
