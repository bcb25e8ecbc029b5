"""Signed bearer tokens (JWT)."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from design_studio.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token.

    Frozen at issuance: later changes to the user record are not reflected.
    """

    user_id: int
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies time-limited JWT access tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
        clock: Clock = _utcnow,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.clock = clock

    def issue(self, user) -> str:
        """Create a signed token for a user (anything with id, email and name)."""
        issued_at = self.clock()
        expires_at = issued_at + self.expires_in
        to_encode = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token, returning its identity claims.

        Raises:
            InvalidTokenError: bad signature, malformed payload or expired.
        """
        try:
            # Expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.warning(f"Rejected token: {e}")
            raise InvalidTokenError() from e

        try:
            user_id = int(payload["sub"])
            email = payload["email"]
            name = payload["name"]
            issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Rejected token with malformed claims: {e}")
            raise InvalidTokenError() from e

        if not isinstance(email, str) or not isinstance(name, str):
            raise InvalidTokenError()

        if self.clock() >= expires_at:
            raise InvalidTokenError("Token has expired")

        return TokenClaims(
            user_id=user_id,
            email=email,
            name=name,
            issued_at=issued_at,
            expires_at=expires_at,
        )
