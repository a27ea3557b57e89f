"""HTTP client for the Linode API: requests, retries, pagination and caching."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import metadata
from typing import Any, Callable, Optional
from urllib.parse import urlencode, urlsplit

import requests

log = logging.getLogger(__name__)

RETRY_AFTER_HEADER = "Retry-After"
MAINTENANCE_MODE_HEADER = "X-Maintenance-Mode"
FILTER_HEADER = "X-Filter"

DEFAULT_BASE_URL = "https://api.linode.com/v4"
DEFAULT_RETRY_COUNT = 1000
DEFAULT_POLL_DELAY_MS = 3000
DEFAULT_CACHE_EXPIRATION = 15 * 60.0

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

RetryCondition = Callable[[Optional[requests.Response], Optional[BaseException]], bool]


def _package_version() -> str:
    try:
        return metadata.version("linodeapi")
    except metadata.PackageNotFoundError:
        return "dev"


VERSION = _package_version()
DEFAULT_USER_AGENT = f"linodeapi/{VERSION}"


def parse_time(value: str | None) -> datetime | None:
    """Parse an API timestamp (UTC, without zone) into an aware datetime."""
    if not value:
        return None
    return datetime.strptime(value, TIME_FORMAT).replace(tzinfo=timezone.utc)


def _error_reasons(response: requests.Response) -> list[str]:
    try:
        payload = response.json()
    except ValueError:
        return []
    if not isinstance(payload, dict):
        return []
    reasons = []
    for entry in payload.get("errors") or []:
        if not isinstance(entry, dict):
            continue
        reason = entry.get("reason", "")
        field_name = entry.get("field", "")
        reasons.append(f"[{field_name}] {reason}" if field_name else reason)
    return reasons


class APIError(Exception):
    """An error response returned by the API."""

    def __init__(self, code: int, message: str, reasons: list[str] | None = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.reasons = list(reasons or [])

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @classmethod
    def from_response(cls, response: requests.Response) -> "APIError":
        reasons = _error_reasons(response)
        message = "; ".join(reasons) if reasons else (response.reason or response.text or "")
        return cls(response.status_code, message, reasons)


@dataclass
class ListOptions:
    """Paging and filtering for list endpoints; pages and results are filled in."""

    page: int = 0
    page_size: int = 0
    filter: str = ""
    pages: int = 0
    results: int = 0

    def to_params(self) -> dict[str, int]:
        params: dict[str, int] = {}
        if self.page:
            params["page"] = self.page
        if self.page_size:
            params["page_size"] = self.page_size
        return params


def generate_list_cache_url(endpoint: str, options: ListOptions | None) -> str:
    """Build the cache key for a list endpoint and its options."""
    if options is None:
        return endpoint
    params: dict[str, Any] = dict(options.to_params())
    if options.filter:
        params["filter"] = options.filter
    if not params:
        return endpoint
    return f"{endpoint}?{urlencode(sorted(params.items()))}"


def _media_type(response: requests.Response) -> str:
    return response.headers.get("Content-Type", "").split(";")[0].strip()


def linode_busy_retry_condition(response, error) -> bool:
    """Retry on a 400 whose error message is 'Linode busy.'."""
    if response is None or response.status_code != 400:
        return False
    return "; ".join(_error_reasons(response)) == "Linode busy."


def too_many_requests_retry_condition(response, error) -> bool:
    return response is not None and response.status_code == 429


def service_unavailable_retry_condition(response, error) -> bool:
    """Retry on a 503 unless the API reports a maintenance event."""
    if response is None or response.status_code != 503:
        return False
    if response.headers.get(MAINTENANCE_MODE_HEADER):
        log.info(
            "Linode API is under maintenance, request will not be retried"
        )
        return False
    return True


def request_timeout_retry_condition(response, error) -> bool:
    return response is not None and response.status_code == 408


def request_goaway_retry_condition(response, error) -> bool:
    """Retry when the connection was closed by a GOAWAY from the server."""
    current = error
    seen = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if "goaway" in f"{type(current).__name__} {current}".lower():
            return True
        current = current.__cause__ or current.__context__
    return False


def request_nginx_retry_condition(response, error) -> bool:
    """Retry on a bare 400 HTML page served by the nginx load balancer."""
    return (
        response is not None
        and response.status_code == 400
        and response.headers.get("Server") == "nginx"
        and _media_type(response) == "text/html"
    )


def respect_retry_after(response: requests.Response) -> float:
    """Seconds to wait according to the Retry-After header; 0 when absent."""
    raw = response.headers.get(RETRY_AFTER_HEADER, "")
    if raw == "":
        return 0.0
    seconds = int(raw)
    log.info("Respecting Retry-After header of %d seconds", seconds)
    return float(seconds)


DEFAULT_RETRY_CONDITIONS: tuple[RetryCondition, ...] = (
    linode_busy_retry_condition,
    too_many_requests_retry_condition,
    service_unavailable_retry_condition,
    request_timeout_retry_condition,
    request_goaway_retry_condition,
    request_nginx_retry_condition,
)


@dataclass
class _CacheEntry:
    value: Any
    created: float
    expiry: float | None


class Client:
    """A Linode API client."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.max_retries = DEFAULT_RETRY_COUNT
        self.retry_conditions: list[RetryCondition] = list(DEFAULT_RETRY_CONDITIONS)
        self.poll_delay_ms = DEFAULT_POLL_DELAY_MS
        self.cache_expiration = DEFAULT_CACHE_EXPIRATION
        self._cache_enabled = True
        self._cache: dict[str, _CacheEntry] = {}

    @property
    def poll_interval(self) -> float:
        """The poll delay in seconds."""
        return self.poll_delay_ms / 1000.0

    def set_poll_delay(self, milliseconds: int) -> "Client":
        self.poll_delay_ms = milliseconds
        return self

    def add_retry_condition(self, condition: RetryCondition) -> "Client":
        self.retry_conditions.append(condition)
        return self

    def _should_retry(self, response, error) -> bool:
        for condition in self.retry_conditions:
            if condition(response, error):
                detail = error if error is not None else response.status_code
                log.info("Received error %s - Retrying", detail)
                return True
        return False

    def _retry_wait(self, response) -> float:
        if response is not None:
            wait = respect_retry_after(response)
            if wait > 0:
                return wait
        return self.poll_interval

    def _request(self, method, path, params=None, body=None, headers=None):
        url = f"{self.base_url}/{path.lstrip('/')}"
        if body is None or isinstance(body, (str, bytes)):
            data = body
        else:
            data = json.dumps(body)
        request_headers = dict(self.headers)
        if headers:
            request_headers.update(headers)

        for attempt in range(self.max_retries + 1):
            response = None
            error = None
            try:
                response = self.session.request(
                    method, url, params=params, data=data, headers=request_headers
                )
            except requests.RequestException as exc:
                error = exc
            if attempt < self.max_retries and self._should_retry(response, error):
                time.sleep(self._retry_wait(response))
                continue
            if error is not None:
                raise error
            return self._decode(response)
        raise RuntimeError("retry loop ended without a result")  # pragma: no cover

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if response.status_code >= 400:
            raise APIError.from_response(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str, params: dict | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, body=body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def list_all(self, path: str, options: ListOptions | None = None) -> list[dict]:
        """Fetch a list endpoint, following every page unless one page is asked for."""
        opts = options if options is not None else ListOptions()
        headers = {FILTER_HEADER: opts.filter} if opts.filter else None
        params = opts.to_params()

        if opts.page:
            payload = self._request("GET", path, params=params, headers=headers) or {}
            items = list(payload.get("data") or [])
            opts.pages = payload.get("pages", 1)
            opts.results = payload.get("results", len(items))
            return items

        items: list[dict] = []
        page_number = 1
        while True:
            params["page"] = page_number
            payload = self._request("GET", path, params=dict(params), headers=headers) or {}
            items.extend(payload.get("data") or [])
            pages = payload.get("pages") or 1
            if page_number >= pages:
                break
            page_number += 1
        opts.pages = pages
        opts.results = payload.get("results", len(items))
        return items

    def get_cached_response(self, key: str) -> Any:
        """Return a cached value, or None when absent, expired or caching is off."""
        if not self._cache_enabled:
            return None
        entry = self._cache.get(key)
        if entry is None:
            return None
        expiry = entry.expiry if entry.expiry is not None else self.cache_expiration
        if time.monotonic() - entry.created >= expiry:
            del self._cache[key]
            return None
        return entry.value

    def add_cached_response(self, key: str, value: Any, expiry: float | None = None) -> None:
        """Cache a value; expiry in seconds overrides the global expiration."""
        if not self._cache_enabled:
            return
        self._cache[key] = _CacheEntry(value, time.monotonic(), expiry)

    def invalidate_cache(self) -> None:
        self._cache.clear()

    def invalidate_cache_endpoint(self, endpoint: str) -> None:
        """Drop the cached responses of one endpoint."""
        path = urlsplit(endpoint).path.lstrip("/")
        for key in [k for k in self._cache if k == path or k.startswith(path + "?")]:
            del self._cache[key]

    def use_cache(self, value: bool) -> None:
        self._cache_enabled = value

    def set_global_cache_expiration(self, seconds: float) -> None:
        self.cache_expiration = seconds