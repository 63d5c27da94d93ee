import pytest

from spotify_cadence.errors import ConfigError, DecodeError
from spotify_cadence.models.credentials import Credentials
from spotify_cadence.models.token import Token
from spotify_cadence.models.track import SearchResult, Track

from .conftest import search_payload


def test_credentials_from_env(env):
    creds = Credentials.from_env(env)
    assert creds.client_id == "my-id"
    assert creds.client_secret == "my-secret"


def test_credentials_repr_hides_secret(env):
    assert "my-secret" not in repr(Credentials.from_env(env))


@pytest.mark.parametrize("missing", ["SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"])
def test_credentials_missing_variable(env, missing):
    del env[missing]

    with pytest.raises(ConfigError) as exc_info:
        Credentials.from_env(env)

    assert exc_info.value.missing == [missing]


def test_credentials_empty_variables_count_as_missing():
    with pytest.raises(ConfigError) as exc_info:
        Credentials.from_env({"SPOTIFY_CLIENT_ID": "", "SPOTIFY_CLIENT_SECRET": ""})

    assert exc_info.value.missing == ["SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"]


def test_credentials_default_to_process_environment(monkeypatch):
    monkeypatch.setenv("SPOTIFY_CLIENT_ID", "env-id")
    monkeypatch.setenv("SPOTIFY_CLIENT_SECRET", "env-secret")

    assert Credentials.from_env().client_id == "env-id"


def test_token_from_dict_defaults():
    token = Token.from_dict({"access_token": "abc"})
    assert token.expires_in == 0
    assert token.token_type == ""


@pytest.mark.parametrize("body", [
    [],
    "token",
    {"access_token": ""},
    {"access_token": 42},
    {"access_token": "abc", "expires_in": "3600"},
])
def test_token_from_dict_rejects_bad_shapes(body):
    with pytest.raises(DecodeError):
        Token.from_dict(body)


def test_token_repr_hides_access_token():
    assert "abc123" not in repr(Token(access_token="abc123"))


def test_search_result_from_dict():
    result = SearchResult.from_dict(search_payload(
        ("Around the World", ["Daft Punk"]),
        ("Untitled", []),
    ))

    assert len(result) == 2
    assert result.tracks[0].display_artist == "Daft Punk"
    assert result.tracks[1].display_artist == "Unknown"


@pytest.mark.parametrize("body", [{}, {"tracks": {}}, {"tracks": {"items": None}}])
def test_search_result_missing_keys_are_empty(body):
    assert SearchResult.from_dict(body).tracks == []


def test_track_missing_fields_use_defaults():
    track = Track.from_dict({})
    assert track.name == ""
    assert track.display_artist == "Unknown"


@pytest.mark.parametrize("body", [
    [],
    {"tracks": []},
    {"tracks": {"items": {}}},
    {"tracks": {"items": ["song"]}},
    {"tracks": {"items": [{"name": 5}]}},
    {"tracks": {"items": [{"name": "x", "artists": "Daft Punk"}]}},
])
def test_search_result_rejects_bad_shapes(body):
    with pytest.raises(DecodeError):
        SearchResult.from_dict(body)
