"""Data models for Spotify Cadence Demo."""

from .cadence import CadenceEstimate
from .credentials import Credentials
from .token import Token
from .track import Artist, SearchResult, Track

__all__ = ["Artist", "CadenceEstimate", "Credentials", "SearchResult", "Token", "Track"]
