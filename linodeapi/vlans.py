"""Virtual LANs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .client import Client, ListOptions, parse_time

VLANS_ENDPOINT = "networking/vlans"


@dataclass
class VLAN:
    label: str
    linodes: list[int] = field(default_factory=list)
    region: str = ""
    created: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VLAN":
        return cls(
            label=data.get("label", ""),
            linodes=list(data.get("linodes") or []),
            region=data.get("region", ""),
            created=parse_time(data.get("created")),
        )


def list_vlans(client: Client, options: ListOptions | None = None) -> list[VLAN]:
    return [VLAN.from_dict(item) for item in client.list_all(VLANS_ENDPOINT, options)]