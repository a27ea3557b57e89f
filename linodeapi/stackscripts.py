"""StackScripts: deployment scripts with user-defined fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .client import Client, ListOptions, parse_time

STACKSCRIPTS_ENDPOINT = "linode/stackscripts"


@dataclass(frozen=True)
class StackscriptUDF:
    """A variable accepted by a StackScript at deployment time."""

    label: str = ""
    name: str = ""
    example: str = ""
    one_of: str = ""
    many_of: str = ""
    default: str = ""


def _udf_from_dict(data: dict[str, Any]) -> StackscriptUDF:
    return StackscriptUDF(
        label=data.get("label", ""),
        name=data.get("name", ""),
        example=data.get("example", ""),
        one_of=data.get("oneOf", ""),
        many_of=data.get("manyOf", ""),
        default=data.get("default", ""),
    )


@dataclass
class StackscriptCreateOptions:
    """Fields accepted when creating a StackScript."""

    label: str = ""
    description: str = ""
    images: list[str] = field(default_factory=list)
    is_public: bool = False
    rev_note: str = ""
    script: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "description": self.description,
            "images": list(self.images),
            "is_public": self.is_public,
            "rev_note": self.rev_note,
            "script": self.script,
        }


class StackscriptUpdateOptions(StackscriptCreateOptions):
    """Fields accepted when updating a StackScript."""


@dataclass
class Stackscript:
    id: int
    username: str = ""
    label: str = ""
    description: str = ""
    ordinal: int = 0
    logo_url: str = ""
    images: list[str] = field(default_factory=list)
    deployments_total: int = 0
    deployments_active: int = 0
    is_public: bool = False
    mine: bool = False
    created: datetime | None = None
    updated: datetime | None = None
    rev_note: str = ""
    script: str = ""
    user_defined_fields: list[StackscriptUDF] | None = None
    user_gravatar_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stackscript":
        udfs = data.get("user_defined_fields")
        return cls(
            id=data.get("id", 0),
            username=data.get("username", ""),
            label=data.get("label", ""),
            description=data.get("description", ""),
            ordinal=data.get("ordinal", 0),
            logo_url=data.get("logo_url", ""),
            images=list(data.get("images") or []),
            deployments_total=data.get("deployments_total", 0),
            deployments_active=data.get("deployments_active", 0),
            is_public=bool(data.get("is_public", False)),
            mine=bool(data.get("mine", False)),
            created=parse_time(data.get("created")),
            updated=parse_time(data.get("updated")),
            rev_note=data.get("rev_note", ""),
            script=data.get("script", ""),
            user_defined_fields=None if udfs is None else [_udf_from_dict(u) for u in udfs],
            user_gravatar_id=data.get("user_gravatar_id", ""),
        )

    def _option_fields(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "description": self.description,
            "images": list(self.images),
            "is_public": self.is_public,
            "rev_note": self.rev_note,
            "script": self.script,
        }

    def create_options(self) -> StackscriptCreateOptions:
        return StackscriptCreateOptions(**self._option_fields())

    def update_options(self) -> StackscriptUpdateOptions:
        return StackscriptUpdateOptions(**self._option_fields())


def list_stackscripts(client: Client, options: ListOptions | None = None) -> list[Stackscript]:
    return [
        Stackscript.from_dict(item) for item in client.list_all(STACKSCRIPTS_ENDPOINT, options)
    ]


def get_stackscript(client: Client, script_id: int) -> Stackscript:
    return Stackscript.from_dict(client.get(f"{STACKSCRIPTS_ENDPOINT}/{script_id}"))


def create_stackscript(client: Client, options: StackscriptCreateOptions) -> Stackscript:
    return Stackscript.from_dict(client.post(STACKSCRIPTS_ENDPOINT, options.to_dict()))


def update_stackscript(
    client: Client, script_id: int, options: StackscriptUpdateOptions
) -> Stackscript:
    return Stackscript.from_dict(
        client.put(f"{STACKSCRIPTS_ENDPOINT}/{script_id}", options.to_dict())
    )


def delete_stackscript(client: Client, script_id: int) -> None:
    client.delete(f"{STACKSCRIPTS_ENDPOINT}/{script_id}")