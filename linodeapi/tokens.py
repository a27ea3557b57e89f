"""Personal access tokens of the current profile."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .client import TIME_FORMAT, Client, ListOptions, parse_time

TOKENS_ENDPOINT = "profile/tokens"


def _format_expiry(value: datetime | None) -> str | None:
    """Render an expiry as the UTC ISO 8601 form the API accepts."""
    if value is None:
        return None
    return value.astimezone(timezone.utc).strftime(TIME_FORMAT)


@dataclass
class TokenCreateOptions:
    """Fields accepted when creating a token."""

    scopes: str = ""
    label: str = ""
    expiry: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "scopes": self.scopes,
            "expiry": _format_expiry(self.expiry),
        }


@dataclass
class TokenUpdateOptions:
    """Fields accepted when updating a token."""

    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label}


@dataclass
class Token:
    """A personal access token; only its first characters are shown after creation."""

    id: int
    scopes: str = ""
    label: str = ""
    token: str = ""
    created: datetime | None = None
    expiry: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Token":
        return cls(
            id=data.get("id", 0),
            scopes=data.get("scopes", ""),
            label=data.get("label", ""),
            token=data.get("token", ""),
            created=parse_time(data.get("created")),
            expiry=parse_time(data.get("expiry")),
        )

    def create_options(self) -> TokenCreateOptions:
        return TokenCreateOptions(scopes=self.scopes, label=self.label, expiry=self.expiry)

    def update_options(self) -> TokenUpdateOptions:
        return TokenUpdateOptions(label=self.label)


def list_tokens(client: Client, options: ListOptions | None = None) -> list[Token]:
    return [Token.from_dict(item) for item in client.list_all(TOKENS_ENDPOINT, options)]


def get_token(client: Client, token_id: int) -> Token:
    return Token.from_dict(client.get(f"{TOKENS_ENDPOINT}/{token_id}"))


def create_token(client: Client, options: TokenCreateOptions) -> Token:
    return Token.from_dict(client.post(TOKENS_ENDPOINT, options.to_dict()))


def update_token(client: Client, token_id: int, options: TokenUpdateOptions) -> Token:
    return Token.from_dict(client.put(f"{TOKENS_ENDPOINT}/{token_id}", options.to_dict()))


def delete_token(client: Client, token_id: int) -> None:
    client.delete(f"{TOKENS_ENDPOINT}/{token_id}")