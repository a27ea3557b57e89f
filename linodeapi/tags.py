"""Tags and the objects they are applied to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .client import Client, ListOptions
from .volumes import Volume

TAGS_ENDPOINT = "tags"


@dataclass
class TagCreateOptions:
    """Fields accepted when creating a tag; empty id lists are omitted."""

    label: str
    linodes: list[int] = field(default_factory=list)
    lke_clusters: list[int] = field(default_factory=list)
    domains: list[int] = field(default_factory=list)
    volumes: list[int] = field(default_factory=list)
    nodebalancers: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"label": self.label}
        for key in ("linodes", "lke_clusters", "domains", "volumes", "nodebalancers"):
            ids = getattr(self, key)
            if ids:
                body[key] = list(ids)
        return body


@dataclass(frozen=True)
class Tag:
    label: str

    def create_options(self) -> TagCreateOptions:
        return TagCreateOptions(label=self.label)


@dataclass
class TaggedObject:
    """An object carrying a tag.

    Volumes are decoded into Volume; other kinds keep their raw dictionary.
    """

    type: str
    raw_data: dict[str, Any] = field(default_factory=dict)
    data: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaggedObject":
        kind = data.get("type", "")
        raw = data.get("data") or {}
        decoded: Any = Volume.from_dict(raw) if kind == "volume" else raw
        return cls(type=kind, raw_data=raw, data=decoded)


@dataclass
class SortedObjects:
    instances: list[dict[str, Any]] = field(default_factory=list)
    lke_clusters: list[dict[str, Any]] = field(default_factory=list)
    domains: list[dict[str, Any]] = field(default_factory=list)
    volumes: list[Volume] = field(default_factory=list)
    nodebalancers: list[dict[str, Any]] = field(default_factory=list)


_RAW_KINDS = {
    "linode": ("instances", 'expected an Instance when Type was "linode"'),
    "lke_cluster": ("lke_clusters", 'expected an LKECluster when Type was "lke_cluster"'),
    "domain": ("domains", 'expected a Domain when Type was "domain"'),
    "nodebalancer": ("nodebalancers", 'expected an NodeBalancer when Type was "nodebalancer"'),
}


def sorted_objects(objects: Iterable[TaggedObject]) -> SortedObjects:
    """Group tagged objects by kind; raise ValueError when data does not match its type."""
    result = SortedObjects()
    for obj in objects:
        if obj.type == "volume":
            if not isinstance(obj.data, Volume):
                raise ValueError('expected an Volume when Type was "volume"')
            result.volumes.append(obj.data)
        elif obj.type in _RAW_KINDS:
            attr, message = _RAW_KINDS[obj.type]
            if not isinstance(obj.data, dict):
                raise ValueError(message)
            getattr(result, attr).append(obj.data)
    return result


def list_tags(client: Client, options: ListOptions | None = None) -> list[Tag]:
    return [Tag(label=item.get("label", "")) for item in client.list_all(TAGS_ENDPOINT, options)]


def list_tagged_objects(
    client: Client, label: str, options: ListOptions | None = None
) -> list[TaggedObject]:
    return [
        TaggedObject.from_dict(item)
        for item in client.list_all(f"{TAGS_ENDPOINT}/{label}", options)
    ]


def create_tag(client: Client, options: TagCreateOptions) -> Tag:
    payload = client.post(TAGS_ENDPOINT, options.to_dict()) or {}
    return Tag(label=payload.get("label", ""))


def delete_tag(client: Client, label: str) -> None:
    client.delete(f"{TAGS_ENDPOINT}/{label}")