"""Runs the token exchange, track search and cadence estimate in sequence."""

import logging
from typing import Mapping, Optional

import requests
from rich.console import Console

from .config.settings import Settings
from .core.auth import TokenExchanger
from .core.cadence import estimate_cadence, format_cadence
from .core.deadline import Deadline
from .core.search import CatalogSearchClient, format_results
from .errors import CadenceDemoError, ConfigError
from .models.credentials import CLIENT_ID_VAR, CLIENT_SECRET_VAR, Credentials
from .models.token import Token

MISSING_CREDENTIALS = f"Missing {CLIENT_ID_VAR} or {CLIENT_SECRET_VAR} in env"


class CadenceDemoService:
    """One run of the demo: credentials, token, search, cadence."""

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        console: Optional[Console] = None,
        session: Optional[requests.Session] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """Initialize the service.

        Args:
            settings: Loaded settings
            logger: Logger instance
            console: Console for user-facing output
            session: HTTP session (created and closed by the service if omitted)
            environ: Environment mapping for credentials (default: os.environ)
        """
        self.settings = settings
        self.logger = logger
        self.console = console or Console()
        self.environ = environ
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

        self.exchanger = TokenExchanger(
            self.session,
            logger,
            token_url=settings.spotify.token_url
        )
        self.search_client = CatalogSearchClient(
            self.session,
            logger,
            search_url=settings.spotify.search_url
        )

    def say(self, text: str) -> None:
        """Print a line verbatim (no markup, highlighting or wrapping)."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def fetch_token(self, credentials: Credentials, deadline: Deadline) -> Token:
        token = self.exchanger.exchange(credentials, deadline)
        self.say(f"token length: {len(token.access_token)}")
        self.say(f"expires_in (sec): {token.expires_in}")
        return token

    def search(self, token: Token, deadline: Deadline) -> bool:
        """Search and print ranked tracks.

        Returns:
            True on success, False if the search failed
        """
        try:
            result = self.search_client.search_tracks(
                token,
                self.settings.search.term,
                self.settings.search.limit,
                deadline
            )
        except CadenceDemoError as e:
            self.logger.error(f"Track search failed: {e}")
            self.say(f"API call failed: {e}")
            return False

        for line in format_results(result):
            self.say(line)
        return True

    def print_cadence(self) -> None:
        estimate = estimate_cadence(
            self.settings.cadence.height_m,
            self.settings.cadence.speed_mps
        )
        self.say(format_cadence(estimate))

    def run(self, include_cadence: bool = True) -> bool:
        """Run the demo.

        A missing credential ends the run before any request. A token
        failure aborts the run. A search failure is reported and the
        cadence estimate still prints.

        Args:
            include_cadence: Print the cadence estimate after the search

        Returns:
            True if every step succeeded

        Raises:
            ConfigError: If credentials are missing
            CadenceDemoError: If the token exchange fails
        """
        try:
            try:
                credentials = Credentials.from_env(self.environ)
            except ConfigError:
                self.say(MISSING_CREDENTIALS)
                raise

            # One budget for both requests
            deadline = Deadline(self.settings.spotify.timeout_seconds)

            try:
                token = self.fetch_token(credentials, deadline)
            except CadenceDemoError as e:
                self.logger.error(f"Token exchange failed: {e}")
                self.say(f"Token fetch failed: {e}")
                raise

            ok = self.search(token, deadline)

            if include_cadence:
                self.print_cadence()

            return ok
        finally:
            self.close()

    def close(self) -> None:
        """Close the HTTP session if this service created it."""
        if self._owns_session:
            self.session.close()
