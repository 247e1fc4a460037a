"""Wire field names for pCloud API responses, and typed readers for them."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from pcloudapi.errors import DecodeError
from pcloudapi.util.time import ZERO_TIME, parse_time

ITEM_FIELDS: tuple[str, ...] = (
    "path",
    "name",
    "created",
    "ismine",
    "thumb",
    "modified",
    "comments",
    "id",
    "isshared",
    "isdeleted",
    "icon",
    "isfolder",
    "parentfolderid",
    "folderid",
    "height",
    "fileid",
    "width",
    "hash",
    "category",
    "size",
    "contenttype",
    "contents",
)

# Dropped from an encoded Item when zero-valued.
ITEM_OMIT_EMPTY: frozenset[str] = frozenset(
    {"folderid", "height", "fileid", "width", "hash", "category", "size", "contenttype"}
)

UINT64_MAX: int = 2**64 - 1


def require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise DecodeError(
            f"{what} must be a JSON object",
            details={"type": type(data).__name__},
        )
    return data


def read_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _type_error(key, "string", value)
    return value


def read_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass; JSON true/false is not a number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(key, "integer", value)
    return value


def read_uint64(data: Mapping[str, Any], key: str) -> int:
    value = read_int(data, key)
    if not 0 <= value <= UINT64_MAX:
        raise DecodeError(
            f"field {key!r} must be an unsigned 64-bit integer",
            details={"field": key, "value": value},
        )
    return value


def read_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _type_error(key, "boolean", value)
    return value


def read_time(data: Mapping[str, Any], key: str) -> datetime:
    value = data.get(key)
    if value is None:
        return ZERO_TIME
    return parse_time(value)


def read_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _type_error(key, "array", value)
    return value


def _type_error(key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(
        f"field {key!r} must be a JSON {expected}",
        details={"field": key, "type": type(value).__name__},
    )
