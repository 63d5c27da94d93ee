import pytest
import requests

from spotify_cadence.core.deadline import Deadline
from spotify_cadence.core.search import (
    DEFAULT_SEARCH_URL,
    CatalogSearchClient,
    build_params,
    format_results,
)
from spotify_cadence.errors import DecodeError, NetworkError, SearchError
from spotify_cadence.models.token import Token
from spotify_cadence.models.track import Artist, SearchResult, Track

from .conftest import FakeResponse, search_payload


@pytest.fixture
def token():
    return Token(access_token="tok-123", expires_in=3600, token_type="Bearer")


def test_build_params():
    assert build_params("Daft Punk", 5) == {"q": "Daft Punk", "type": "track", "limit": "5"}


@pytest.mark.parametrize("limit", [0, -3, 2.5, True])
def test_build_params_rejects_bad_limit(limit):
    with pytest.raises(ValueError):
        build_params("Daft Punk", limit)


def test_build_params_rejects_empty_term():
    with pytest.raises(ValueError):
        build_params("", 5)


def test_search_sends_bearer_token_and_params(session, logger, deadline, token):
    session.get.return_value = FakeResponse(payload=search_payload(
        ("One More Time", ["Daft Punk"]),
    ))

    result = CatalogSearchClient(session, logger).search_tracks(token, "Daft Punk", 5, deadline)

    assert [t.name for t in result.tracks] == ["One More Time"]
    args, kwargs = session.get.call_args
    assert args[0] == DEFAULT_SEARCH_URL
    assert kwargs["params"] == {"q": "Daft Punk", "type": "track", "limit": "5"}
    assert kwargs["headers"] == {"Authorization": "Bearer tok-123"}
    assert 0 < kwargs["timeout"] <= 10


def test_search_preserves_upstream_order(session, logger, deadline, token):
    session.get.return_value = FakeResponse(payload=search_payload(
        ("Zebra", ["B"]),
        ("Apple", ["A"]),
        ("Mango", ["C"]),
    ))

    result = CatalogSearchClient(session, logger).search_tracks(token, "x", 3, deadline)

    assert [t.name for t in result.tracks] == ["Zebra", "Apple", "Mango"]


@pytest.mark.parametrize("status", [200, 203])
def test_any_2xx_is_accepted(session, logger, deadline, token, status):
    session.get.return_value = FakeResponse(status_code=status, payload=search_payload())

    result = CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)

    assert len(result) == 0


def test_non_2xx_raises_search_error(session, logger, deadline, token):
    response = FakeResponse(status_code=401, reason="Unauthorized", text='{"error":"expired"}')
    session.get.return_value = response

    with pytest.raises(SearchError) as exc_info:
        CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)

    assert exc_info.value.status_code == 401
    assert "401 Unauthorized" in str(exc_info.value)
    assert "expired" in str(exc_info.value)
    assert response.closed


def test_transport_failure_raises_network_error(session, logger, deadline, token):
    session.get.side_effect = requests.ConnectionError("dns failure")

    with pytest.raises(NetworkError):
        CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)


def test_malformed_json_raises_decode_error(session, logger, deadline, token):
    session.get.return_value = FakeResponse(text="{truncated")

    with pytest.raises(DecodeError):
        CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)


def test_expired_deadline_makes_no_request(session, logger, token):
    now = [0.0]
    deadline = Deadline(10, clock=lambda: now[0])
    now[0] = 10.0

    with pytest.raises(NetworkError):
        CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)
    session.get.assert_not_called()


def test_format_results_ranks_lines():
    result = SearchResult(tracks=[
        Track(name="One More Time", artists=[Artist("Daft Punk")]),
        Track(name="Get Lucky", artists=[Artist("Daft Punk"), Artist("Pharrell Williams")]),
    ])

    assert format_results(result) == [
        " 1) Daft Punk — One More Time",
        " 2) Daft Punk — Get Lucky",
    ]


def test_format_results_two_digit_rank():
    result = SearchResult(tracks=[Track(name=f"T{i}", artists=[Artist("A")]) for i in range(10)])

    lines = format_results(result)

    assert lines[-1] == "10) A — T9"


def test_format_results_unknown_artist():
    result = SearchResult(tracks=[Track(name="Mystery", artists=[])])

    assert format_results(result) == [" 1) Unknown — Mystery"]


def test_format_results_empty():
    assert format_results(SearchResult()) == ["No tracks found."]


def test_slow_body_past_deadline_raises_network_error(session, logger, token):
    now = [0.0]
    deadline = Deadline(10, clock=lambda: now[0])

    def tick():
        now[0] += 6.0

    response = FakeResponse(chunks=[b'{"tracks": ', b'{"items": []}}'], on_chunk=tick)
    session.get.return_value = response

    with pytest.raises(NetworkError):
        CatalogSearchClient(session, logger).search_tracks(token, "x", 1, deadline)
    assert session.get.call_args.kwargs["stream"] is True
    assert response.closed
