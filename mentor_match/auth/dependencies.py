"""Auth domain dependencies.

The auth gate: FastAPI dependencies that resolve the caller of a request
from its bearer token and enforce role-based access before a handler runs.
FastAPI caches dependency results per request, so the token is verified and
the user loaded once per request and never shared across requests.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from mentor_match.auth.exceptions import (
    MissingCredentialsError,
    RoleRequiredError,
    UnknownSubjectError,
)
from mentor_match.auth.tokens import TokenClaims, TokenServiceDep
from mentor_match.db.engine import get_session
from mentor_match.user.models import User, UserRole

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Caller:
    """Identity resolved for the current request."""

    id: int
    email: str
    name: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "Caller":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=UserRole(user.role),
        )


def get_token_claims(
    token_service: TokenServiceDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(security)
    ] = None,
) -> TokenClaims:
    """Verify the request's bearer token.

    Raises:
        MissingCredentialsError: If no bearer token was supplied
        TokenExpiredError: If the token has expired
        MalformedTokenError: If the token does not verify
    """
    if credentials is None or not credentials.credentials:
        raise MissingCredentialsError()
    return token_service.verify(credentials.credentials)


TokenClaimsDep = Annotated[TokenClaims, Depends(get_token_claims)]


def get_current_user(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
    claims: TokenClaimsDep,
) -> User:
    """Return the live user a verified token refers to.

    The subject is always re-read from the database so deleted accounts lose
    access immediately, even with an unexpired token. The resolved identity
    is published on ``request.state.user`` for the rest of the request.

    Raises:
        UnknownSubjectError: If the token's subject no longer exists
    """
    user = session.get(User, claims.subject)
    if user is None:
        raise UnknownSubjectError()

    request.state.user = Caller.from_user(user)
    return user


# Type aliases for dependency injection
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_role(*roles: UserRole) -> Callable[[User], User]:
    """Build a dependency that admits only callers holding one of ``roles``.

    Runs after identity resolution, so an unauthenticated caller still gets
    401 and an authenticated one with the wrong role gets 403.
    """
    allowed = frozenset(roles)

    def _check_role(user: CurrentUserDep) -> User:
        if UserRole(user.role) not in allowed:
            raise RoleRequiredError([role.value for role in roles])
        return user

    return _check_role


MentorDep = Annotated[User, Depends(require_role(UserRole.mentor))]
MenteeDep = Annotated[User, Depends(require_role(UserRole.mentee))]
