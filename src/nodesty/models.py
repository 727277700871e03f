"""Canonical Pydantic models shared across all nodesty modules.

The models fall into three groups:

**Transport models** -- the per-client configuration and the normalized
result of every API call:
    :class:`ClientConfig`, :class:`RequestOptions`, :class:`HTTPMethod`,
    :class:`ErrorKind` and :class:`ApiResponse`.

**Request parameter models** -- JSON bodies sent by the domain services.
Field names are snake_case in Python and serialised with the camelCase
aliases the API expects (``model_dump(by_alias=True)``).

**Configuration models** -- persisted as JSON in the user's config
directory by :mod:`nodesty.config`:
    :class:`RequestConfig`, :class:`OutputConfig`, :class:`Profile` and
    :class:`GlobalConfig`.

Response payloads are *not* modelled here. Their shapes are declared as
``TypedDict`` classes in :mod:`nodesty.types` and are never validated at
runtime.
"""

from __future__ import annotations

import enum
from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from nodesty.exceptions import (
    ApiError,
    AuthError,
    ConnectionError_,
    NodestyError,
    NotFoundError,
    RequestError,
    ServerError,
)
from nodesty.output import OutputFormat

DEFAULT_BASE_URL = "https://nodesty.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

T = TypeVar("T")


# --- Transport models ---


class HTTPMethod(str, enum.Enum):
    """HTTP verbs accepted by the transports."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ErrorKind(str, enum.Enum):
    """Classification of a failed call.

    Only ``SERVER_ERROR`` is ever retried by the transports.
    """

    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"
    NETWORK_ERROR = "network_error"
    REQUEST_ERROR = "request_error"


class ClientConfig(BaseModel):
    """Connection settings owned by a single transport instance.

    Example::

        ClientConfig(api_key="pat_123", timeout=10, max_retries=5)
    """

    api_key: str = Field(min_length=1, description="Personal access token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API host")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Per-call timeout in seconds"
    )
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=0, description="Retries on HTTP 5xx"
    )


class RequestOptions(BaseModel):
    """Per-call overrides accepted by ``Transport.call``."""

    headers: dict[str, str] = Field(default_factory=dict)
    params: dict[str, Any] = Field(default_factory=dict)
    timeout: Optional[float] = Field(
        default=None, gt=0, description="Overrides ClientConfig.timeout for one call"
    )


class ApiResponse(BaseModel, Generic[T]):
    """Normalized outcome of one API call.

    ``success`` discriminates the two shapes: on success ``data`` holds the
    decoded response body (``None`` for empty bodies such as HTTP 204) and
    ``message`` the status text; on failure ``error`` holds a short
    classification or the server-provided message and ``message`` a longer
    description.

    Instances are frozen and never mutated after a transport returns them.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None
    kind: Optional[ErrorKind] = None

    @classmethod
    def ok(
        cls,
        data: Any = None,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> ApiResponse[Any]:
        """Build a success envelope."""
        return cls(success=True, data=data, message=message, status_code=status_code)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        error: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> ApiResponse[Any]:
        """Build a failure envelope."""
        return cls(
            success=False,
            kind=kind,
            error=error,
            message=message,
            status_code=status_code,
        )

    def to_exception(self) -> NodestyError:
        """Map a failure envelope onto the :mod:`nodesty.exceptions` hierarchy.

        Raises:
            ValueError: If called on a success envelope.
        """
        if self.success:
            raise ValueError("Cannot convert a successful response to an exception")

        text = self.message or ""
        if self.error and self.error != self.message:
            text = f"{text} ({self.error})" if text else self.error

        status = self.status_code
        if self.kind == ErrorKind.NETWORK_ERROR:
            return ConnectionError_(text)
        if self.kind == ErrorKind.REQUEST_ERROR:
            return RequestError(text)
        if status in (401, 403):
            return AuthError(text, status_code=status)
        if status == 404:
            return NotFoundError(text, status_code=status)
        if status is not None and status >= 500:
            return ServerError(text, status_code=status)
        return ApiError(text, status_code=status)

    def unwrap(self) -> Optional[T]:
        """Return ``data`` on success, raise the matching exception otherwise."""
        if not self.success:
            raise self.to_exception()
        return self.data


# --- Request parameter models ---


class RequestParams(BaseModel):
    """Base for request bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        """JSON-ready body: camelCase keys, unset fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


VpsAction = Literal["start", "stop", "restart", "poweroff"]
DedicatedAction = Literal[
    "setPowerOn", "setPowerOff", "setPowerReset", "start", "stop", "restart", "reset"
]
Severity = Literal["low", "medium", "high", "critical"]


class VpsActionParams(RequestParams):
    action: VpsAction


class VpsChangePasswordParams(RequestParams):
    username: str
    password: str


class VpsReinstallParams(RequestParams):
    password: str
    os_id: int = Field(alias="osId")


class VpsBackupRestoreParams(RequestParams):
    date: str
    file: str


class DedicatedActionParams(RequestParams):
    action: DedicatedAction


class DedicatedReinstallParams(RequestParams):
    os_template_id: str = Field(alias="osTemplateId")
    hostname: Optional[str] = None
    password: Optional[str] = None
    ssh_keys: Optional[list[str]] = Field(default=None, alias="sshKeys")


class FirewallAttackNotificationParams(RequestParams):
    """Attack notification settings; only the fields that are set are sent."""

    enabled: Optional[bool] = None
    email: Optional[str] = None
    webhook: Optional[str] = None
    email_notification: Optional[bool] = Field(default=None, alias="emailNotification")
    discord_webhook_url: Optional[str] = Field(default=None, alias="discordWebhookURL")
    severity: Optional[Severity] = None


class FirewallRdnsParams(RequestParams):
    hostname: str


class FirewallRuleParams(RequestParams):
    port: int = Field(ge=0, le=65535)
    app_id: int = Field(alias="appId")


# --- Configuration models ---


class RequestConfig(BaseModel):
    """HTTP request settings stored in a :class:`Profile`."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0, description="Max retry attempts on 5xx")


class OutputConfig(BaseModel):
    """Default output format, used when neither ``--json`` nor ``--plain`` is given."""

    format: OutputFormat = Field(
        default=OutputFormat.AUTO, description="Output format: auto, json, plain, rich"
    )


class Profile(BaseModel):
    """A named set of connection settings persisted under ``profiles/``.

    ``credential`` is a source descriptor resolved at use time by
    :func:`~nodesty.config.resolve_credential` (``env:VAR``,
    ``file:/path``, ``prompt`` or ``token:<value>``), so that the token
    itself does not have to live in the profile file.
    """

    model_config = ConfigDict(extra="allow")

    name: str
    base_url: str = Field(default=DEFAULT_BASE_URL)
    credential: str = Field(
        default="env:NODESTY_API_KEY",
        description="Credential source: env:VAR, file:/path, prompt, token:VALUE",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/nodesty/config.json``."""

    default_profile: Optional[str] = None
    auto_select_single_profile: bool = True
    output: OutputConfig = Field(default_factory=OutputConfig)
