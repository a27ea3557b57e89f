"""Support tickets on the account."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .client import Client, ListOptions, parse_time

TICKETS_ENDPOINT = "support/tickets"


class TicketStatus(str, Enum):
    NEW = "new"
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class TicketEntity:
    """The entity a ticket refers to."""

    id: int = 0
    label: str = ""
    type: str = ""
    url: str = ""


def _status(value: str) -> TicketStatus | str:
    try:
        return TicketStatus(value)
    except ValueError:
        return value


@dataclass
class Ticket:
    id: int
    attachments: list[str] = field(default_factory=list)
    closed: datetime | None = None
    description: str = ""
    entity: TicketEntity | None = None
    gravatar_id: str = ""
    opened: datetime | None = None
    opened_by: str = ""
    status: TicketStatus | str = ""
    summary: str = ""
    updated: datetime | None = None
    updated_by: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ticket":
        entity = data.get("entity")
        return cls(
            id=data.get("id", 0),
            attachments=list(data.get("attachments") or []),
            closed=parse_time(data.get("closed")),
            description=data.get("description", ""),
            entity=TicketEntity(
                id=entity.get("id", 0),
                label=entity.get("label", ""),
                type=entity.get("type", ""),
                url=entity.get("url", ""),
            )
            if entity
            else None,
            gravatar_id=data.get("gravatar_id", ""),
            opened=parse_time(data.get("opened")),
            opened_by=data.get("opened_by", ""),
            status=_status(data.get("status", "")),
            summary=data.get("summary", ""),
            updated=parse_time(data.get("updated")),
            updated_by=data.get("updated_by", ""),
        )


def list_tickets(client: Client, options: ListOptions | None = None) -> list[Ticket]:
    """List the account's support tickets, open tickets first."""
    return [Ticket.from_dict(item) for item in client.list_all(TICKETS_ENDPOINT, options)]


def get_ticket(client: Client, ticket_id: int) -> Ticket:
    return Ticket.from_dict(client.get(f"{TICKETS_ENDPOINT}/{ticket_id}"))