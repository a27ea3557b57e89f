"""Repeatedly fetch a resource until it reaches a wanted state or time runs out."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


class WaitTimeoutError(TimeoutError):
    """Raised when a wait does not finish within its timeout."""

    def __init__(self, description: str, timeout_seconds: float):
        self.description = description
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Error waiting for {description}: timed out after {timeout_seconds} seconds"
        )


def poll(
    fetch: Callable[[], T],
    done: Callable[[T], bool],
    timeout_seconds: float,
    interval_seconds: float,
    description: str,
) -> T:
    """Call fetch every interval until done accepts its result.

    The first fetch happens one interval after the call. Errors raised by
    fetch or done propagate unchanged. When the deadline passes before done
    accepts a result, WaitTimeoutError is raised.
    """
    if interval_seconds < 0:
        raise ValueError("interval_seconds must not be negative")
    if timeout_seconds < 0:
        raise ValueError("timeout_seconds must not be negative")

    deadline = time.monotonic() + timeout_seconds
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise WaitTimeoutError(description, timeout_seconds)
        if interval_seconds > remaining:
            time.sleep(remaining)
            raise WaitTimeoutError(description, timeout_seconds)
        time.sleep(interval_seconds)
        result = fetch()
        if done(result):
            return result