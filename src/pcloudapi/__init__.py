"""pcloudapi public API."""

from __future__ import annotations

from pcloudapi.auth import Profile, Subscription, load_profile, profile_path
from pcloudapi.errors import (
    ApiError,
    DecodeError,
    FormatError,
    PCloudError,
    ProfileError,
    TransportError,
    unify_error,
)
from pcloudapi.models import (
    LINK_VALIDITY_MARGIN,
    ChecksumFileResult,
    ErrorEnvelope,
    GetFileLinkResult,
    Hashes,
    Item,
    ItemResult,
    UploadedFile,
    UploadFileResponse,
    decode_response,
    is_link_valid,
)
from pcloudapi.util.time import TIME_FORMAT, ZERO_TIME, decode_time, encode_time

__all__ = [
    # Time
    "TIME_FORMAT",
    "ZERO_TIME",
    "encode_time",
    "decode_time",
    # Models
    "Item",
    "ErrorEnvelope",
    "Hashes",
    "ItemResult",
    "UploadedFile",
    "UploadFileResponse",
    "GetFileLinkResult",
    "ChecksumFileResult",
    "LINK_VALIDITY_MARGIN",
    "is_link_valid",
    "decode_response",
    # Auth
    "Profile",
    "Subscription",
    "load_profile",
    "profile_path",
    # Errors
    "PCloudError",
    "TransportError",
    "DecodeError",
    "FormatError",
    "ProfileError",
    "ApiError",
    "unify_error",
]
