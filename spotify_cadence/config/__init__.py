"""Configuration module for Spotify Cadence Demo."""

from .settings import Settings

__all__ = ["Settings"]
