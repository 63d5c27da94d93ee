"""Shared fixtures: fake HTTP responses and sessions."""

import json
import logging
from typing import Any, Callable, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from spotify_cadence.core.deadline import Deadline
from spotify_cadence.models.credentials import Credentials


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: Optional[str] = None,
        reason: str = "OK",
        chunks: Optional[List[bytes]] = None,
        on_chunk: Optional[Callable[[], None]] = None
    ):
        self.status_code = status_code
        self.reason = reason
        self.text = text if text is not None else json.dumps(payload)
        self.encoding = "utf-8"
        self.chunks = chunks
        self.on_chunk = on_chunk
        self.closed = False

    def iter_content(self, chunk_size=1):
        chunks = self.chunks if self.chunks is not None else [self.text.encode("utf-8")]
        for chunk in chunks:
            if self.on_chunk:
                self.on_chunk()
            yield chunk

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


@pytest.fixture
def logger():
    return logging.getLogger("cadence-demo-tests")


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def deadline():
    return Deadline(10)


@pytest.fixture
def credentials():
    return Credentials(client_id="my-id", client_secret="my-secret")


@pytest.fixture
def env():
    return {
        "SPOTIFY_CLIENT_ID": "my-id",
        "SPOTIFY_CLIENT_SECRET": "my-secret",
    }


def token_payload(access_token: str = "x" * 20, expires_in: int = 3600) -> dict:
    return {
        "access_token": access_token,
        "expires_in": expires_in,
        "token_type": "Bearer",
    }


def search_payload(*tracks) -> dict:
    """Build a search body from (name, [artist, ...]) pairs."""
    return {
        "tracks": {
            "items": [
                {"name": name, "artists": [{"name": a} for a in artists]}
                for name, artists in tracks
            ]
        }
    }
