"""Client credentials model."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..errors import ConfigError

CLIENT_ID_VAR = "SPOTIFY_CLIENT_ID"
CLIENT_SECRET_VAR = "SPOTIFY_CLIENT_SECRET"


@dataclass(frozen=True)
class Credentials:
    """Spotify application credentials, read from the environment only."""

    client_id: str
    client_secret: str = field(repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Credentials':
        """Load credentials from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Credentials instance

        Raises:
            ConfigError: If either variable is unset or empty
        """
        if environ is None:
            environ = os.environ

        client_id = environ.get(CLIENT_ID_VAR, "")
        client_secret = environ.get(CLIENT_SECRET_VAR, "")

        missing = [
            name for name, value in (
                (CLIENT_ID_VAR, client_id),
                (CLIENT_SECRET_VAR, client_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigError(
                f"Missing {' and '.join(missing)} in environment",
                missing=missing
            )

        return cls(client_id=client_id, client_secret=client_secret)
