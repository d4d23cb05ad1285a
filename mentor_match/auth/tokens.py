"""Signed access tokens.

Issues and verifies HS256 JWTs asserting a user's identity and role. The
service is stateless: it only needs the server secret and a clock, both
injected so tests can pin them.
"""

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Annotated, Any

from fastapi import Depends
from jose import JWTError, jwt

from mentor_match.auth.exceptions import MalformedTokenError, TokenExpiredError
from mentor_match.core.settings import Settings, get_settings
from mentor_match.user.models import User, UserRole

ACCESS_TOKEN_TTL = timedelta(hours=1)
ALGORITHM = "HS256"

_REQUIRED_CLAIMS = ("iss", "aud", "sub", "iat", "nbf", "exp", "role")


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded access token claims.

    ``role``, ``name`` and ``email`` are display copies; authorization
    decisions use the user row the subject resolves to.
    """

    subject: int
    role: UserRole
    name: str | None
    email: str | None
    issued_at: datetime
    expires_at: datetime
    token_id: str | None = None


class TokenService:
    """Mint and verify time-bounded identity tokens."""

    def __init__(
        self,
        secret: str,
        *,
        issuer: str = "mentor-mentee-api",
        audience: str = "mentor-mentee-app",
        ttl: timedelta = ACCESS_TOKEN_TTL,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl = ttl
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock().timestamp())

    def issue(self, user: User) -> str:
        """Sign a token for ``user`` valid for the configured TTL."""
        now = self._now()
        payload: dict[str, Any] = {
            "iss": self._issuer,
            "sub": str(user.id),
            "aud": self._audience,
            "iat": now,
            "nbf": now,
            "exp": now + int(self._ttl.total_seconds()),
            "jti": f"{user.id}-{now}-{secrets.token_hex(6)}",
            "name": user.name,
            "email": user.email,
            "role": UserRole(user.role).value,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Verify ``token`` and return its claims.

        Raises:
            TokenExpiredError: If the clock has reached the token's expiry
            MalformedTokenError: If signature, issuer, audience or claims
                do not check out
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                # Time claims are checked below against the injected clock.
                options={
                    "verify_exp": False,
                    "verify_nbf": False,
                    "verify_iat": False,
                },
            )
        except JWTError as e:
            raise MalformedTokenError() from e

        if any(payload.get(claim) is None for claim in _REQUIRED_CLAIMS):
            raise MalformedTokenError()

        try:
            subject = int(payload["sub"])
            issued_at = int(payload["iat"])
            not_before = int(payload["nbf"])
            expires_at = int(payload["exp"])
            role = UserRole(payload["role"])
        except (TypeError, ValueError) as e:
            raise MalformedTokenError() from e

        now = self._now()
        if now >= expires_at:
            raise TokenExpiredError()
        if now < not_before:
            raise MalformedTokenError("Token is not yet valid")

        return TokenClaims(
            subject=subject,
            role=role,
            name=payload.get("name"),
            email=payload.get("email"),
            issued_at=datetime.fromtimestamp(issued_at, tz=UTC),
            expires_at=datetime.fromtimestamp(expires_at, tz=UTC),
            token_id=payload.get("jti"),
        )


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    """Build the token service from injected settings."""
    return TokenService(
        settings.jwt_secret,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
