"""JWT issuance for authenticated users.

Tokens are stateless: validity is decided by signature and expiry only.
There is no refresh and no revocation list, so a leaked token stays valid
until it expires.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Mapping, Optional

import jwt

from ..common.datetime_utils import add_years, utc_now
from ..core.constants import JWT_ALGORITHM, MIN_JWT_SECRET_BYTES, TOKEN_VALIDITY_YEARS
from ..core.exceptions import AuthenticationError, ConfigurationError
from .model import User

CLAIM_ID = "Id"
CLAIM_NAME = "Name"
CLAIM_EMAIL = "Email"
CLAIM_LOGIN = "Login"
CLAIM_ROLE = "Role"

IDENTITY_CLAIMS = (CLAIM_ID, CLAIM_NAME, CLAIM_EMAIL, CLAIM_LOGIN, CLAIM_ROLE)

_MIN_SECRET_BYTES = {
    "HS256": MIN_JWT_SECRET_BYTES,
    "HS384": 48,
    "HS512": 64,
}


@dataclass(frozen=True)
class JwtSettings:
    secret: str
    algorithm: str = JWT_ALGORITHM
    validity_years: int = TOKEN_VALIDITY_YEARS

    def __post_init__(self) -> None:
        if self.algorithm not in _MIN_SECRET_BYTES:
            raise ConfigurationError(f"Unsupported JWT algorithm: {self.algorithm}")
        if not self.secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        min_bytes = _MIN_SECRET_BYTES[self.algorithm]
        if len(self.secret.encode("utf-8")) < min_bytes:
            raise ConfigurationError(f"JWT_SECRET must be at least {min_bytes} bytes for {self.algorithm}")
        if self.validity_years < 1:
            raise ConfigurationError("Token validity must be at least one year")

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "JwtSettings":
        return cls(
            secret=str(settings.get("JWT_SECRET") or ""),
            algorithm=str(settings.get("JWT_ALGORITHM") or JWT_ALGORITHM),
        )


class TokenIssuer:
    """Signs tokens carrying the user's identity claims."""

    def __init__(self, settings: JwtSettings, *, clock: Optional[Callable[[], datetime]] = None):
        self._settings = settings
        self._clock = clock or utc_now

    def generate_token(self, user: User) -> str:
        issued_at = self._clock()
        expires_at = add_years(issued_at, self._settings.validity_years)

        payload = {
            CLAIM_ID: str(user.user_id),
            CLAIM_NAME: user.name,
            CLAIM_EMAIL: user.email,
            CLAIM_LOGIN: user.login,
            CLAIM_ROLE: str(int(user.role)),
            "iat": issued_at,
            "nbf": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(payload, self._settings.secret, algorithm=self._settings.algorithm)

    def decode_token(self, token: str) -> dict:
        """Check signature and expiry; returns the claims.

        Used by the HTTP layer to guard routes.
        """

        try:
            claims = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("Invalid token") from e

        missing = [c for c in IDENTITY_CLAIMS if c not in claims]
        if missing:
            raise AuthenticationError("Invalid token")
        return claims
