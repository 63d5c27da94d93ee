"""Spotify Cadence Demo: client-credentials token, track search and cadence estimate."""

__version__ = "0.1.0"
