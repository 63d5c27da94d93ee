"""Track search against the catalog API."""

import json
import logging
from typing import Dict, List

import requests

from ..errors import DecodeError, NetworkError, SearchError
from ..models.token import Token
from ..models.track import SearchResult
from .deadline import Deadline, read_body

DEFAULT_SEARCH_URL = "https://api.spotify.com/v1/search"
NO_RESULTS = "No tracks found."


def build_params(term: str, limit: int) -> Dict[str, str]:
    """Query parameters for a track search.

    Raises:
        ValueError: If the term is empty or limit is not a positive integer
    """
    if not term:
        raise ValueError("search term must not be empty")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return {"q": term, "type": "track", "limit": str(limit)}


def format_results(result: SearchResult) -> List[str]:
    """Render ranked result lines in upstream order."""
    if not result.tracks:
        return [NO_RESULTS]
    return [
        f"{rank:2d}) {track.display_artist} — {track.name}"
        for rank, track in enumerate(result.tracks, start=1)
    ]


class CatalogSearchClient:
    """Authenticated track search."""

    def __init__(
        self,
        session: requests.Session,
        logger: logging.Logger,
        search_url: str = DEFAULT_SEARCH_URL
    ):
        self.session = session
        self.logger = logger
        self.search_url = search_url

    def search_tracks(
        self,
        token: Token,
        term: str,
        limit: int,
        deadline: Deadline
    ) -> SearchResult:
        """Search tracks matching a free-text term.

        Args:
            token: Bearer token from the token exchanger
            term: Search text
            limit: Maximum number of tracks to return
            deadline: Shared deadline bounding the request

        Returns:
            SearchResult, possibly empty

        Raises:
            NetworkError: On transport failure or elapsed deadline
            SearchError: On a non-2xx response
            DecodeError: If the body is not a valid search response
        """
        params = build_params(term, limit)
        timeout = deadline.timeout()
        self.logger.debug(f"Searching tracks for '{term}' (limit {limit})")

        try:
            response = self.session.get(
                self.search_url,
                params=params,
                headers={"Authorization": f"Bearer {token.access_token}"},
                timeout=timeout,
                stream=True
            )
        except requests.RequestException as e:
            self.logger.error(f"Search request failed: {e}")
            raise NetworkError(f"search request failed: {e}") from e

        with response:
            body = read_body(response, deadline)

            if response.status_code // 100 != 2:
                self.logger.error(f"Search endpoint returned {response.status_code}")
                raise SearchError(response.status_code, response.reason, body)

            try:
                payload = json.loads(body)
            except ValueError as e:
                raise DecodeError(f"search response is not valid JSON: {e}") from e

        result = SearchResult.from_dict(payload)
        self.logger.debug(f"Search returned {len(result)} track(s)")
        return result
