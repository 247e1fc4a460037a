"""Decode a raw pCloud response body into a checked envelope."""

from __future__ import annotations

import json
from typing import Any, Optional, TypeVar, Union

from pcloudapi.errors import DecodeError

from .fields import require_mapping
from .results import ErrorEnvelope

E = TypeVar("E", bound=ErrorEnvelope)

Body = Union[bytes, bytearray, str, dict[str, Any]]


def decode_response(
    envelope_cls: type[E],
    body: Optional[Body],
    transport_error: Optional[BaseException] = None,
) -> E:
    """
    Decode `body` into `envelope_cls`, checking the status part first.

    Raises:
        transport_error: unchanged, if one is given.
        DecodeError: if the body is not a JSON object.
        ApiError: if the response carries a nonzero result code.
        FormatError: if a timestamp in the payload is malformed.
    """
    if transport_error is not None:
        raise transport_error

    data = _load_json(body)
    ErrorEnvelope.from_dict(data).check()
    return envelope_cls.from_dict(data)


def _load_json(body: Optional[Body]) -> dict[str, Any]:
    if isinstance(body, dict):
        return body
    if body is None:
        raise DecodeError("empty response body")

    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DecodeError("response body is not valid JSON", cause=exc) from exc

    return dict(require_mapping(data, "response"))
