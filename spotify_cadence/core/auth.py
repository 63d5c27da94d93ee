"""OAuth2 client-credentials token exchange."""

import base64
import json
import logging

import requests

from ..errors import AuthError, ConfigError, DecodeError, NetworkError
from ..models.credentials import Credentials
from ..models.token import Token
from .deadline import Deadline, read_body

DEFAULT_TOKEN_URL = "https://accounts.spotify.com/api/token"


def basic_auth_header(client_id: str, client_secret: str) -> str:
    """Build the HTTP Basic Authorization value for id:secret."""
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class TokenExchanger:
    """Exchanges client credentials for a bearer token."""

    def __init__(
        self,
        session: requests.Session,
        logger: logging.Logger,
        token_url: str = DEFAULT_TOKEN_URL
    ):
        """Initialize token exchanger.

        Args:
            session: HTTP session used for the request
            logger: Logger instance
            token_url: Token endpoint URL
        """
        self.session = session
        self.logger = logger
        self.token_url = token_url

    def exchange(self, credentials: Credentials, deadline: Deadline) -> Token:
        """Request an access token with the client-credentials grant.

        No retry, caching or refresh: one POST per call.

        Args:
            credentials: Application id and secret
            deadline: Shared deadline bounding the request

        Returns:
            Token from the response body

        Raises:
            ConfigError: If the id or secret is empty
            NetworkError: On transport failure or elapsed deadline
            AuthError: If the endpoint does not answer 200
            DecodeError: If the body is not a valid token object
        """
        if not credentials.client_id or not credentials.client_secret:
            raise ConfigError("client id and secret must not be empty")

        headers = {
            "Authorization": basic_auth_header(credentials.client_id, credentials.client_secret),
            "Content-Type": "application/x-www-form-urlencoded",
        }

        timeout = deadline.timeout()
        self.logger.debug(f"Requesting access token from {self.token_url} (timeout {timeout:.1f}s)")

        try:
            response = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                headers=headers,
                timeout=timeout,
                stream=True
            )
        except requests.RequestException as e:
            self.logger.error(f"Token request failed: {e}")
            raise NetworkError(f"token request failed: {e}") from e

        with response:
            body = read_body(response, deadline)

            if response.status_code != 200:
                self.logger.error(f"Token endpoint returned {response.status_code}")
                raise AuthError(response.status_code, response.reason, body)

            try:
                payload = json.loads(body)
            except ValueError as e:
                raise DecodeError(f"token response is not valid JSON: {e}") from e

        token = Token.from_dict(payload)
        self.logger.debug(f"Received {token.token_type or 'access'} token, expires in {token.expires_in}s")
        return token
