"""Track search result models."""

from dataclasses import dataclass, field
from typing import Any, List

from ..errors import DecodeError

UNKNOWN_ARTIST = "Unknown"


def _expect(value: Any, kind: type, what: str) -> Any:
    if not isinstance(value, kind):
        raise DecodeError(f"{what} has unexpected type {type(value).__name__}")
    return value


def _field(data: dict, key: str, kind: type, what: str) -> Any:
    value = data.get(key)
    if value is None:
        return kind()
    return _expect(value, kind, f"{what}.{key}")


@dataclass
class Artist:
    """Artist credited on a track."""

    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> 'Artist':
        data = _expect(data, dict, "artist")
        return cls(name=_field(data, "name", str, "artist"))


@dataclass
class Track:
    """Track metadata model."""

    name: str = ""
    artists: List[Artist] = field(default_factory=list)

    @property
    def display_artist(self) -> str:
        """First credited artist, or 'Unknown' if none."""
        if self.artists:
            return self.artists[0].name
        return UNKNOWN_ARTIST

    @classmethod
    def from_dict(cls, data: Any) -> 'Track':
        data = _expect(data, dict, "track")
        artists = _field(data, "artists", list, "track")
        return cls(
            name=_field(data, "name", str, "track"),
            artists=[Artist.from_dict(a) for a in artists]
        )


@dataclass
class SearchResult:
    """Tracks in the order the search endpoint returned them."""

    tracks: List[Track] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tracks)

    @classmethod
    def from_dict(cls, data: Any) -> 'SearchResult':
        """Decode a /v1/search response body.

        Missing keys fall back to empty values; wrong types raise DecodeError.
        """
        data = _expect(data, dict, "search response")
        page = _field(data, "tracks", dict, "search response")
        items = _field(page, "items", list, "tracks")
        return cls(tracks=[Track.from_dict(item) for item in items])
