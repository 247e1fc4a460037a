"""Public model exports for pcloudapi."""

from __future__ import annotations

from .decode import decode_response
from .item import Item
from .results import (
    LINK_VALIDITY_MARGIN,
    ChecksumFileResult,
    ErrorEnvelope,
    GetFileLinkResult,
    Hashes,
    ItemResult,
    UploadedFile,
    UploadFileResponse,
    is_link_valid,
)

__all__ = [
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
]
