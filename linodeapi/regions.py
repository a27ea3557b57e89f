"""Regions: data centres and their capabilities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import Client, ListOptions, generate_list_cache_url

# Region status may change during outages, so entries expire sooner.
CACHE_EXPIRY_SECONDS = 60.0

REGIONS_ENDPOINT = "regions"


@dataclass(frozen=True)
class RegionResolvers:
    """The DNS resolvers of a region."""

    ipv4: str = ""
    ipv6: str = ""


@dataclass
class Region:
    id: str
    country: str = ""
    capabilities: list[str] = field(default_factory=list)
    status: str = ""
    resolvers: RegionResolvers = field(default_factory=RegionResolvers)
    label: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Region":
        resolvers = data.get("resolvers") or {}
        return cls(
            id=data.get("id", ""),
            country=data.get("country", ""),
            capabilities=list(data.get("capabilities") or []),
            status=data.get("status", ""),
            resolvers=RegionResolvers(
                ipv4=resolvers.get("ipv4", ""), ipv6=resolvers.get("ipv6", "")
            ),
            label=data.get("label", ""),
        )


def list_regions(client: Client, options: ListOptions | None = None) -> list[Region]:
    """List regions; results are cached."""
    key = generate_list_cache_url(REGIONS_ENDPOINT, options)
    cached = client.get_cached_response(key)
    if cached is not None:
        return list(cached)
    regions = [Region.from_dict(item) for item in client.list_all(REGIONS_ENDPOINT, options)]
    client.add_cached_response(key, regions, CACHE_EXPIRY_SECONDS)
    return list(regions)


def get_region(client: Client, region_id: str) -> Region:
    """Get one region; the result is cached."""
    key = f"{REGIONS_ENDPOINT}/{region_id}"
    cached = client.get_cached_response(key)
    if cached is not None:
        return cached
    region = Region.from_dict(client.get(key))
    client.add_cached_response(key, region, CACHE_EXPIRY_SECONDS)
    return region