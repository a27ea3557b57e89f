"""Instance types: plans with their sizes and prices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .client import Client, ListOptions, generate_list_cache_url
from .regions import CACHE_EXPIRY_SECONDS

TYPES_ENDPOINT = "linode/types"


class LinodeTypeClass(str, Enum):
    NANODE = "nanode"
    STANDARD = "standard"
    HIGHMEM = "highmem"
    DEDICATED = "dedicated"


@dataclass(frozen=True)
class LinodePrice:
    hourly: float = 0.0
    monthly: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "LinodePrice | None":
        if data is None:
            return None
        return cls(hourly=float(data.get("hourly") or 0), monthly=float(data.get("monthly") or 0))


def _type_class(value: str) -> LinodeTypeClass | str:
    try:
        return LinodeTypeClass(value)
    except ValueError:
        return value


@dataclass
class LinodeType:
    id: str
    disk: int = 0
    type_class: LinodeTypeClass | str = ""
    price: LinodePrice | None = None
    label: str = ""
    backups_price: LinodePrice | None = None
    network_out: int = 0
    memory: int = 0
    transfer: int = 0
    vcpus: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinodeType":
        backups = (data.get("addons") or {}).get("backups") or {}
        return cls(
            id=data.get("id", ""),
            disk=data.get("disk", 0),
            type_class=_type_class(data.get("class", "")),
            price=LinodePrice.from_dict(data.get("price")),
            label=data.get("label", ""),
            backups_price=LinodePrice.from_dict(backups.get("price")),
            network_out=data.get("network_out", 0),
            memory=data.get("memory", 0),
            transfer=data.get("transfer", 0),
            vcpus=data.get("vcpus", 0),
        )


def list_types(client: Client, options: ListOptions | None = None) -> list[LinodeType]:
    """List instance types; results are cached."""
    key = generate_list_cache_url(TYPES_ENDPOINT, options)
    cached = client.get_cached_response(key)
    if cached is not None:
        return list(cached)
    types = [LinodeType.from_dict(item) for item in client.list_all(TYPES_ENDPOINT, options)]
    client.add_cached_response(key, types, CACHE_EXPIRY_SECONDS)
    return list(types)


def get_type(client: Client, type_id: str) -> LinodeType:
    """Get one instance type; the result is cached."""
    key = f"{TYPES_ENDPOINT}/{type_id}"
    cached = client.get_cached_response(key)
    if cached is not None:
        return cached
    linode_type = LinodeType.from_dict(client.get(key))
    client.add_cached_response(key, linode_type, CACHE_EXPIRY_SECONDS)
    return linode_type