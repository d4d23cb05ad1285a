"""Auth domain schemas.

Request and response schemas for authentication operations. JSON field
names are camelCase on the wire (``userId``, ``expiresAt``).
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from mentor_match.core.schemas import CamelModel
from mentor_match.user.models import UserRole


class SignupRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    name: str = Field(min_length=1, max_length=100)
    role: UserRole

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class SignupResponse(CamelModel):
    """Response schema for registration."""

    message: str
    user_id: int


class LoginRequest(BaseModel):
    """Request schema for email/password login."""

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class AuthUser(CamelModel):
    """Identity summary returned alongside tokens."""

    id: int
    email: str
    name: str
    role: UserRole


class LoginResponse(CamelModel):
    """Response schema for login."""

    token: str
    user: AuthUser


class ValidateResponse(CamelModel):
    """Response schema for token validation."""

    valid: bool
    user: AuthUser
    expires_at: datetime


class PasswordCheckRequest(BaseModel):
    """Request schema for the password strength helper."""

    password: str


class PasswordChecks(CamelModel):
    length: bool
    has_lowercase: bool
    has_uppercase: bool
    has_number: bool
    has_special_char: bool


class PasswordCheckResponse(CamelModel):
    """Response schema for the password strength helper."""

    strength: str
    score: int
    checks: PasswordChecks
    valid: bool
