"""Access token model."""

from dataclasses import dataclass, field
from typing import Any

from ..errors import DecodeError


@dataclass(frozen=True)
class Token:
    """Bearer token returned by the client-credentials grant."""

    access_token: str = field(repr=False)
    expires_in: int = 0  # Seconds
    token_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> 'Token':
        """Build a token from the token endpoint's JSON body.

        Raises:
            DecodeError: If the body is not an object or lacks an access token
        """
        if not isinstance(data, dict):
            raise DecodeError(f"token response is not a JSON object: {type(data).__name__}")

        access_token = data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise DecodeError("token response has no access_token")

        expires_in = data.get("expires_in", 0)
        if expires_in is None:
            expires_in = 0
        if isinstance(expires_in, bool) or not isinstance(expires_in, int):
            raise DecodeError(f"expires_in is not an integer: {expires_in!r}")

        token_type = data.get("token_type") or ""
        if not isinstance(token_type, str):
            raise DecodeError(f"token_type is not a string: {token_type!r}")

        return cls(access_token=access_token, expires_in=expires_in, token_type=token_type)
