"""Core functionality for Spotify Cadence Demo."""

from .auth import TokenExchanger
from .cadence import estimate_cadence, format_cadence
from .deadline import Deadline
from .search import CatalogSearchClient, format_results

__all__ = [
    "CatalogSearchClient",
    "Deadline",
    "TokenExchanger",
    "estimate_cadence",
    "format_cadence",
    "format_results",
]
