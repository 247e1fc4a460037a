"""Data model for pCloud files and folders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from pcloudapi.util.time import ZERO_TIME, format_time, is_zero

from .fields import (
    ITEM_FIELDS,
    ITEM_OMIT_EMPTY,
    read_bool,
    read_int,
    read_list,
    read_str,
    read_time,
    read_uint64,
    require_mapping,
)


@dataclass(slots=True, frozen=True)
class Item:
    """
    A folder or a file as returned by listfolder and the mutation calls.

    Notes:
        - folder_id is meaningful only when is_folder is True.
        - file_id, size, width, height, hash, category and content_type are
          meaningful only when is_folder is False.
        - contents is filled for folder listings only, in the order the
          folder returned it.
    """

    path: str = ""
    name: str = ""
    created: datetime = ZERO_TIME
    is_mine: bool = False
    thumb: bool = False
    modified: datetime = ZERO_TIME
    comments: int = 0
    id: str = ""
    is_shared: bool = False
    is_deleted: bool = False
    icon: str = ""
    is_folder: bool = False
    parent_folder_id: int = 0
    folder_id: int = 0
    height: int = 0
    file_id: int = 0
    width: int = 0
    hash: int = 0
    category: int = 0
    size: int = 0
    content_type: str = ""
    contents: tuple["Item", ...] = ()

    def mod_time(self) -> datetime:
        """Return modified, falling back to created when modified is unset."""
        if is_zero(self.modified):
            return self.created
        return self.modified

    def walk(self) -> Iterator["Item"]:
        """Yield this item and every descendant, depth-first."""
        yield self
        for child in self.contents:
            yield from child.walk()

    @classmethod
    def from_dict(cls, data: Any) -> "Item":
        d = require_mapping(data, "item")
        return cls(
            path=read_str(d, "path"),
            name=read_str(d, "name"),
            created=read_time(d, "created"),
            is_mine=read_bool(d, "ismine"),
            thumb=read_bool(d, "thumb"),
            modified=read_time(d, "modified"),
            comments=read_int(d, "comments"),
            id=read_str(d, "id"),
            is_shared=read_bool(d, "isshared"),
            is_deleted=read_bool(d, "isdeleted"),
            icon=read_str(d, "icon"),
            is_folder=read_bool(d, "isfolder"),
            parent_folder_id=read_int(d, "parentfolderid"),
            folder_id=read_int(d, "folderid"),
            height=read_int(d, "height"),
            file_id=read_int(d, "fileid"),
            width=read_int(d, "width"),
            hash=read_uint64(d, "hash"),
            category=read_int(d, "category"),
            size=read_int(d, "size"),
            content_type=read_str(d, "contenttype"),
            contents=tuple(cls.from_dict(c) for c in read_list(d, "contents")),
        )

    def to_dict(self) -> dict[str, Any]:
        values: dict[str, Any] = {
            "path": self.path,
            "name": self.name,
            "created": format_time(self.created),
            "ismine": self.is_mine,
            "thumb": self.thumb,
            "modified": format_time(self.modified),
            "comments": self.comments,
            "id": self.id,
            "isshared": self.is_shared,
            "isdeleted": self.is_deleted,
            "icon": self.icon,
            "isfolder": self.is_folder,
            "parentfolderid": self.parent_folder_id,
            "folderid": self.folder_id,
            "height": self.height,
            "fileid": self.file_id,
            "width": self.width,
            "hash": self.hash,
            "category": self.category,
            "size": self.size,
            "contenttype": self.content_type,
            "contents": [c.to_dict() for c in self.contents],
        }
        return {
            key: values[key]
            for key in ITEM_FIELDS
            if not (key in ITEM_OMIT_EMPTY and not values[key])
        }
