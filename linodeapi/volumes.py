"""Block storage volumes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .client import Client, ListOptions, parse_time

VOLUMES_ENDPOINT = "volumes"


class VolumeStatus(str, Enum):
    """The state a volume is in."""

    CREATING = "creating"
    ACTIVE = "active"
    RESIZING = "resizing"
    CONTACT_SUPPORT = "contact_support"


def _status(value: str) -> VolumeStatus | str:
    try:
        return VolumeStatus(value)
    except ValueError:
        return value


@dataclass
class VolumeCreateOptions:
    """Fields accepted when creating a volume.

    A size of 0 lets the API choose its default size.
    """

    label: str = ""
    region: str = ""
    linode_id: int = 0
    config_id: int = 0
    size: int = 0
    tags: list[str] | None = None
    persist_across_boots: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.label:
            body["label"] = self.label
        if self.region:
            body["region"] = self.region
        if self.linode_id:
            body["linode_id"] = self.linode_id
        if self.config_id:
            body["config_id"] = self.config_id
        if self.size:
            body["size"] = self.size
        body["tags"] = None if self.tags is None else list(self.tags)
        if self.persist_across_boots is not None:
            body["persist_across_boots"] = self.persist_across_boots
        return body


@dataclass
class VolumeUpdateOptions:
    """Fields accepted when updating a volume; None tags are left unchanged."""

    label: str = ""
    tags: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.label:
            body["label"] = self.label
        if self.tags is not None:
            body["tags"] = list(self.tags)
        return body


@dataclass
class VolumeAttachOptions:
    """Fields accepted when attaching a volume to an instance."""

    linode_id: int
    config_id: int = 0
    persist_across_boots: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"linode_id": self.linode_id}
        if self.config_id:
            body["config_id"] = self.config_id
        if self.persist_across_boots is not None:
            body["persist_across_boots"] = self.persist_across_boots
        return body


@dataclass
class Volume:
    id: int
    label: str = ""
    status: VolumeStatus | str = ""
    region: str = ""
    size: int = 0
    linode_id: int | None = None
    filesystem_path: str = ""
    tags: list[str] = field(default_factory=list)
    created: datetime | None = None
    updated: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Volume":
        return cls(
            id=data.get("id", 0),
            label=data.get("label", ""),
            status=_status(data.get("status", "")),
            region=data.get("region", ""),
            size=data.get("size", 0),
            linode_id=data.get("linode_id"),
            filesystem_path=data.get("filesystem_path", ""),
            tags=list(data.get("tags") or []),
            created=parse_time(data.get("created")),
            updated=parse_time(data.get("updated")),
        )

    def create_options(self) -> VolumeCreateOptions:
        return VolumeCreateOptions(
            label=self.label,
            region=self.region,
            size=self.size,
            tags=list(self.tags),
            linode_id=self.linode_id if self.linode_id and self.linode_id > 0 else 0,
        )

    def update_options(self) -> VolumeUpdateOptions:
        return VolumeUpdateOptions(label=self.label, tags=list(self.tags))


def list_volumes(client: Client, options: ListOptions | None = None) -> list[Volume]:
    return [Volume.from_dict(item) for item in client.list_all(VOLUMES_ENDPOINT, options)]


def get_volume(client: Client, volume_id: int) -> Volume:
    return Volume.from_dict(client.get(f"{VOLUMES_ENDPOINT}/{volume_id}"))


def attach_volume(client: Client, volume_id: int, options: VolumeAttachOptions) -> Volume:
    """Attach a volume to an instance."""
    return Volume.from_dict(
        client.post(f"{VOLUMES_ENDPOINT}/{volume_id}/attach", options.to_dict())
    )


def create_volume(client: Client, options: VolumeCreateOptions) -> Volume:
    return Volume.from_dict(client.post(VOLUMES_ENDPOINT, options.to_dict()))


def update_volume(client: Client, volume_id: int, options: VolumeUpdateOptions) -> Volume:
    return Volume.from_dict(client.put(f"{VOLUMES_ENDPOINT}/{volume_id}", options.to_dict()))


def clone_volume(client: Client, volume_id: int, label: str) -> Volume:
    """Clone a volume under a new label."""
    return Volume.from_dict(
        client.post(f"{VOLUMES_ENDPOINT}/{volume_id}/clone", {"label": label})
    )


def detach_volume(client: Client, volume_id: int) -> None:
    client.post(f"{VOLUMES_ENDPOINT}/{volume_id}/detach", "")


def resize_volume(client: Client, volume_id: int, size: int) -> None:
    """Grow a volume to a new size in GiB."""
    client.post(f"{VOLUMES_ENDPOINT}/{volume_id}/resize", {"size": size})


def delete_volume(client: Client, volume_id: int) -> None:
    client.delete(f"{VOLUMES_ENDPOINT}/{volume_id}")