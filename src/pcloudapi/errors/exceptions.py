"""Exception hierarchy and result-code unification for pcloudapi."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from pcloudapi.models.results import ErrorEnvelope


class PCloudError(Exception):
    """
    Base exception for pcloudapi.

    Attributes:
        details: Optional structured information (e.g., result code, path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class TransportError(PCloudError):
    """Raised when a request never completed or its response was unreadable."""


class DecodeError(PCloudError):
    """Raised when a response payload does not have the expected shape."""


class FormatError(DecodeError):
    """Raised when a timestamp token does not match the wire time format."""


class ProfileError(PCloudError):
    """Raised when an Azure CLI profile cannot be read or decoded."""


class ApiError(PCloudError):
    """
    Raised for a nonzero `result` code returned by pCloud.

    The code and message are not interpreted further; callers decide
    whether a given code is worth retrying.
    """

    def __init__(
        self,
        result: int,
        message: str,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            f"{message} ({result})",
            details={"result": result, "error": message},
            cause=cause,
        )
        self.result = result
        self.message = message


def unify_error(
    envelope: "ErrorEnvelope",
    transport_error: Optional[BaseException] = None,
) -> Optional[BaseException]:
    """
    Collapse a transport outcome and a decoded envelope into one error.

    Order (fixed):
        - transport_error, returned unchanged
        - ApiError when envelope.result != 0
        - None on success
    """
    if transport_error is not None:
        return transport_error
    if envelope.result == 0:
        return None
    return ApiError(envelope.result, envelope.message)
