"""Base class for the domain services.

A service maps method calls onto :class:`~nodesty.client.Transport` calls:
it builds the URL path, shapes the JSON body and hands the envelope back
untouched. Services never translate errors and never raise: arguments that
cannot be turned into a request body give a ``Request Error`` envelope.
"""

from __future__ import annotations

from typing import Any, Union
from urllib.parse import quote

from pydantic import ValidationError

from nodesty.client import Transport
from nodesty.client.response import request_error
from nodesty.models import ApiResponse, RequestParams

PathValue = Union[str, int]


def segment(value: PathValue) -> str:
    """Percent-encode *value* for use as a single path segment.

    ``/`` is always encoded so an identifier cannot reach another endpoint.
    """
    return quote(str(value), safe=":@")


class BaseService:
    """Holds the shared transport.

    Every service of a :class:`~nodesty.sdk.NodestyClient` receives the
    same transport instance, so a credential update is one write visible to
    all of them.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @staticmethod
    def _service_path(service_id: PathValue, *parts: PathValue) -> str:
        """``/api/services/{id}/<parts...>`` with every dynamic part encoded."""
        tail = "/".join(str(p) for p in parts)
        return f"/api/services/{segment(service_id)}/{tail}"

    def _send_params(
        self, method: str, path: str, model: type[RequestParams], **values: Any
    ) -> ApiResponse[Any]:
        """Validate *values* into *model* and send it as the body of *method* *path*."""
        try:
            params = model(**values)
        except ValidationError as exc:
            return request_error(str(exc))
        return self._transport.call(method, path, params)
