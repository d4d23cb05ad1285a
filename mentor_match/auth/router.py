"""Auth domain router.

Signup, login and token validation routes. Passwords are hashed with bcrypt
and callers receive a signed bearer token from the token service.
"""

import logging
import re

from fastapi import APIRouter, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from mentor_match.auth.dependencies import CurrentUserDep, TokenClaimsDep
from mentor_match.auth.exceptions import InvalidCredentialsError
from mentor_match.auth.schemas import (
    AuthUser,
    LoginRequest,
    LoginResponse,
    PasswordCheckRequest,
    PasswordCheckResponse,
    PasswordChecks,
    SignupRequest,
    SignupResponse,
    ValidateResponse,
)
from mentor_match.auth.security import get_password_hash, verify_password
from mentor_match.auth.tokens import TokenServiceDep
from mentor_match.core.constants import CommonResponses, Routes
from mentor_match.core.deps import SessionDep
from mentor_match.user.exceptions import UserExistsError
from mentor_match.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)

_SPECIAL_CHARS = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


def _auth_user(user: User) -> AuthUser:
    return AuthUser(id=user.id, email=user.email, name=user.name, role=user.role)


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(payload: SignupRequest, session: SessionDep):
    """Register a new mentor or mentee.

    The email is lower-cased by the request schema, so uniqueness is
    case-insensitive.
    """
    existing = session.exec(select(User).where(User.email == payload.email)).first()
    if existing:
        raise UserExistsError()

    user = User(
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        name=payload.name,
        role=payload.role,
    )
    try:
        session.add(user)
        session.commit()
        session.refresh(user)
    except IntegrityError as e:
        # Lost a race against a concurrent signup with the same email
        session.rollback()
        raise UserExistsError() from e

    logger.info("New user registered: %s as %s", user.email, user.role.value)
    return SignupResponse(message="User created successfully", user_id=user.id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def login(
    payload: LoginRequest, session: SessionDep, token_service: TokenServiceDep
):
    """Login with email/password and receive a bearer token.

    Unknown emails and wrong passwords produce the same error.
    """
    user = session.exec(select(User).where(User.email == payload.email)).first()
    if user is None or not verify_password(payload.password, user.password_hash):
        raise InvalidCredentialsError()

    token = token_service.issue(user)
    logger.info("User logged in: %s", user.email, extra={"user_id": user.id})
    return LoginResponse(token=token, user=_auth_user(user))


@router.get(
    "/validate",
    response_model=ValidateResponse,
    responses={**CommonResponses.UNAUTHORIZED},
)
async def validate(user: CurrentUserDep, claims: TokenClaimsDep):
    """Check that the presented token is valid and its user still exists."""
    return ValidateResponse(
        valid=True, user=_auth_user(user), expires_at=claims.expires_at
    )


@router.post("/check-password", response_model=PasswordCheckResponse)
async def check_password(payload: PasswordCheckRequest):
    """Score a candidate password for signup forms."""
    password = payload.password
    checks = PasswordChecks(
        length=len(password) >= 6,
        has_lowercase=re.search(r"[a-z]", password) is not None,
        has_uppercase=re.search(r"[A-Z]", password) is not None,
        has_number=re.search(r"\d", password) is not None,
        has_special_char=_SPECIAL_CHARS.search(password) is not None,
    )
    score = sum(checks.model_dump().values())
    if score >= 4:
        strength = "strong"
    elif score >= 3:
        strength = "medium"
    else:
        strength = "weak"

    return PasswordCheckResponse(
        strength=strength, score=score, checks=checks, valid=checks.length
    )
