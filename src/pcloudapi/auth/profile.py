"""Azure CLI profile loading."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from pcloudapi.errors import DecodeError, ProfileError
from pcloudapi.models.fields import read_bool, read_list, read_str, require_mapping


@dataclass(slots=True, frozen=True)
class Subscription:
    """A subscription entry of the Azure CLI profile."""

    environment_name: str = ""
    id: str = ""
    is_default: bool = False
    name: str = ""
    state: str = ""
    tenant_id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Subscription":
        d = require_mapping(data, "subscription")
        return cls(
            environment_name=read_str(d, "environmentName"),
            id=read_str(d, "id"),
            is_default=read_bool(d, "isDefault"),
            name=read_str(d, "name"),
            state=read_str(d, "state"),
            tenant_id=read_str(d, "tenantId"),
        )


@dataclass(slots=True, frozen=True)
class Profile:
    """Profile stored by the Azure CLI in azureProfile.json."""

    installation_id: str = ""
    subscriptions: tuple[Subscription, ...] = ()

    def default_subscription(self) -> Optional[Subscription]:
        for sub in self.subscriptions:
            if sub.is_default:
                return sub
        return None

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        d = require_mapping(data, "profile")
        return cls(
            installation_id=read_str(d, "installationId"),
            subscriptions=tuple(
                Subscription.from_dict(s) for s in read_list(d, "subscriptions")
            ),
        )


def profile_path() -> Path:
    """Path where the Azure CLI stores its profile."""
    return Path(os.path.expanduser("~/.azure/azureProfile.json"))


def load_profile(path: Union[str, os.PathLike[str]]) -> Profile:
    """
    Load a Profile from `path`.

    A leading byte-order mark (which the Azure CLI writes on some platforms)
    is skipped.

    Raises:
        ProfileError: if the file cannot be read or decoded.
    """
    try:
        contents = Path(path).read_bytes()
    except OSError as exc:
        raise ProfileError(
            f"failed to open file ({path}) while loading token: {exc}",
            details={"path": str(path)},
            cause=exc,
        ) from exc

    try:
        # json.loads on bytes detects UTF-8/16/32 and drops the BOM.
        return Profile.from_dict(json.loads(contents))
    except (ValueError, DecodeError) as exc:
        raise ProfileError(
            f"failed to decode contents of file ({path}) into a Profile representation: {exc}",
            details={"path": str(path)},
            cause=exc,
        ) from exc
