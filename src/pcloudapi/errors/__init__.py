"""Public error exports for pcloudapi."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    DecodeError,
    FormatError,
    PCloudError,
    ProfileError,
    TransportError,
    unify_error,
)

__all__ = [
    "PCloudError",
    "TransportError",
    "DecodeError",
    "FormatError",
    "ProfileError",
    "ApiError",
    "unify_error",
]
