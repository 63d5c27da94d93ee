"""Shared time budget for the network calls of one run."""

import time
from typing import Callable

import requests

from ..errors import NetworkError


class Deadline:
    """A fixed point in time after which no request may start.

    requests has no total-time limit, so each call passes the remaining
    budget as its connect/read timeout.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        """Start the deadline.

        Args:
            seconds: Budget in seconds, counted from now
            clock: Monotonic clock (injectable for tests)
        """
        if seconds <= 0:
            raise ValueError("deadline must be positive")
        self._clock = clock
        self.seconds = seconds
        self.expires_at = clock() + seconds

    def remaining(self) -> float:
        """Seconds left before the deadline, never negative."""
        return max(0.0, self.expires_at - self._clock())

    def expired(self) -> bool:
        return self.remaining() <= 0

    def timeout(self) -> float:
        """Remaining budget for the next request.

        Raises:
            NetworkError: If the deadline has already elapsed
        """
        left = self.remaining()
        if left <= 0:
            raise NetworkError(f"deadline of {self.seconds:g}s exceeded")
        return left


def read_body(response: requests.Response, deadline: Deadline, chunk_size: int = 8192) -> str:
    """Read a streamed response body, checking the deadline between chunks.

    The per-read timeout alone does not bound a server that trickles bytes,
    so the body is consumed chunk by chunk and abandoned once the shared
    deadline passes.

    Raises:
        NetworkError: If the deadline elapses or the connection drops mid-body
    """
    chunks = []
    try:
        for chunk in response.iter_content(chunk_size=chunk_size):
            deadline.timeout()
            if chunk:
                chunks.append(chunk)
    except requests.RequestException as e:
        raise NetworkError(f"failed reading response body: {e}") from e

    return b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
