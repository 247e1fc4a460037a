"""Response envelopes returned by the pCloud API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterator, Mapping, NamedTuple, Optional

from pcloudapi.errors import DecodeError, unify_error
from pcloudapi.util.time import ZERO_TIME, format_time, now_utc, normalize_dt

from .fields import (
    read_int,
    read_list,
    read_str,
    read_time,
    read_uint64,
    require_mapping,
)
from .item import Item

# A link must outlive the check by more than this to be handed out.
LINK_VALIDITY_MARGIN: timedelta = timedelta(seconds=30)


@dataclass(slots=True, frozen=True)
class ErrorEnvelope:
    """
    Status part shared by every pCloud response.

    result == 0 means success. message (wire name "error") is a human-readable
    diagnostic only.
    """

    result: int = 0
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.result == 0

    def update(self, transport_error: Optional[BaseException] = None) -> Optional[BaseException]:
        """Return the unified error for this envelope, or None on success."""
        return unify_error(self, transport_error)

    def check(self, transport_error: Optional[BaseException] = None) -> None:
        """Raise the unified error for this envelope, if any."""
        err = self.update(transport_error)
        if err is not None:
            raise err

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorEnvelope":
        return cls(**_error_kwargs(require_mapping(data, "response")))

    def to_dict(self) -> dict[str, Any]:
        return {"result": self.result, "error": self.message}


@dataclass(slots=True, frozen=True)
class Hashes:
    """Checksums supported by pCloud."""

    sha1: str = ""
    md5: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Hashes":
        d = require_mapping(data, "checksums")
        return cls(sha1=read_str(d, "sha1"), md5=read_str(d, "md5"))

    def to_dict(self) -> dict[str, Any]:
        return {"sha1": self.sha1, "md5": self.md5}


@dataclass(slots=True, frozen=True)
class ItemResult(ErrorEnvelope):
    """Returned from listfolder, createfolder, deletefolder, deletefile etc."""

    metadata: Item = field(default_factory=Item)

    @classmethod
    def from_dict(cls, data: Any) -> "ItemResult":
        d = require_mapping(data, "response")
        return cls(
            **_error_kwargs(d),
            metadata=_read_item(d, "metadata"),
        )

    def to_dict(self) -> dict[str, Any]:
        out = ErrorEnvelope.to_dict(self)
        out["metadata"] = self.metadata.to_dict()
        return out


class UploadedFile(NamedTuple):
    """One uploaded file, joined across the parallel upload sequences."""

    item: Item
    checksums: Hashes
    file_id: int


@dataclass(slots=True, frozen=True)
class UploadFileResponse(ErrorEnvelope):
    """
    Returned from uploadfile.

    items, checksums and file_ids are index-aligned: entry i of each describes
    the same uploaded file.
    """

    items: tuple[Item, ...] = ()
    checksums: tuple[Hashes, ...] = ()
    file_ids: tuple[int, ...] = ()

    def entries(self) -> Iterator[UploadedFile]:
        for item, checksums, file_id in zip(self.items, self.checksums, self.file_ids):
            yield UploadedFile(item, checksums, file_id)

    @classmethod
    def from_dict(cls, data: Any) -> "UploadFileResponse":
        d = require_mapping(data, "response")
        items = tuple(Item.from_dict(x) for x in read_list(d, "metadata"))
        checksums = tuple(Hashes.from_dict(x) for x in read_list(d, "checksums"))
        file_ids = tuple(_read_int_list(d, "fileids"))

        if not len(items) == len(checksums) == len(file_ids):
            raise DecodeError(
                "upload response sequences differ in length",
                details={
                    "metadata": len(items),
                    "checksums": len(checksums),
                    "fileids": len(file_ids),
                },
            )

        return cls(
            **_error_kwargs(d),
            items=items,
            checksums=checksums,
            file_ids=file_ids,
        )

    def to_dict(self) -> dict[str, Any]:
        out = ErrorEnvelope.to_dict(self)
        out["metadata"] = [i.to_dict() for i in self.items]
        out["checksums"] = [c.to_dict() for c in self.checksums]
        out["fileids"] = list(self.file_ids)
        return out


@dataclass(slots=True, frozen=True)
class GetFileLinkResult(ErrorEnvelope):
    """Returned from getfilelink: a download path valid until `expires`."""

    dwltag: str = ""
    hash: int = 0
    size: int = 0
    expires: datetime = ZERO_TIME
    path: str = ""
    hosts: tuple[str, ...] = ()

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        """Return whether the link has hosts and has not (nearly) expired."""
        return is_link_valid(self, now)

    def url(self) -> str:
        """
        Build the download URL from the first host and the path.

        Call is_valid() first; an empty host list is not re-checked here.
        """
        # Always the first host. The API returns several; there is no
        # rotation or failover between them.
        return "https://" + self.hosts[0] + self.path

    @classmethod
    def from_dict(cls, data: Any) -> "GetFileLinkResult":
        d = require_mapping(data, "response")
        hosts = read_list(d, "hosts")
        for host in hosts:
            if not isinstance(host, str):
                raise DecodeError(
                    "field 'hosts' must be an array of strings",
                    details={"field": "hosts", "type": type(host).__name__},
                )
        return cls(
            **_error_kwargs(d),
            dwltag=read_str(d, "dwltag"),
            hash=read_uint64(d, "hash"),
            size=read_int(d, "size"),
            expires=read_time(d, "expires"),
            path=read_str(d, "path"),
            hosts=tuple(hosts),
        )

    def to_dict(self) -> dict[str, Any]:
        out = ErrorEnvelope.to_dict(self)
        out.update(
            {
                "dwltag": self.dwltag,
                "hash": self.hash,
                "size": self.size,
                "expires": format_time(self.expires),
                "path": self.path,
                "hosts": list(self.hosts),
            }
        )
        return out


@dataclass(slots=True, frozen=True)
class ChecksumFileResult(ErrorEnvelope):
    """Returned from checksumfile. sha1 and md5 sit beside metadata on the wire."""

    sha1: str = ""
    md5: str = ""
    metadata: Item = field(default_factory=Item)

    @property
    def hashes(self) -> Hashes:
        return Hashes(sha1=self.sha1, md5=self.md5)

    @classmethod
    def from_dict(cls, data: Any) -> "ChecksumFileResult":
        d = require_mapping(data, "response")
        return cls(
            **_error_kwargs(d),
            sha1=read_str(d, "sha1"),
            md5=read_str(d, "md5"),
            metadata=_read_item(d, "metadata"),
        )

    def to_dict(self) -> dict[str, Any]:
        out = ErrorEnvelope.to_dict(self)
        out.update(self.hashes.to_dict())
        out["metadata"] = self.metadata.to_dict()
        return out


def is_link_valid(
    link: Optional[GetFileLinkResult],
    now: Optional[datetime] = None,
) -> bool:
    """
    Return True if `link` can still be used for a download.

    False when no link was obtained, when it has no hosts, or when it expires
    within LINK_VALIDITY_MARGIN of `now` (the current time if omitted).
    """
    if link is None:
        return False
    if not link.hosts:
        return False
    now = now_utc() if now is None else normalize_dt(now)
    return link.expires - now > LINK_VALIDITY_MARGIN


def _error_kwargs(d: Mapping[str, Any]) -> dict[str, Any]:
    return {"result": read_int(d, "result"), "message": read_str(d, "error")}


def _read_item(d: Mapping[str, Any], key: str) -> Item:
    value = d.get(key)
    if value is None:
        return Item()
    return Item.from_dict(value)


def _read_int_list(d: Mapping[str, Any], key: str) -> list[int]:
    values = read_list(d, key)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, int):
            raise DecodeError(
                f"field {key!r} must be an array of integers",
                details={"field": key, "type": type(v).__name__},
            )
    return values
