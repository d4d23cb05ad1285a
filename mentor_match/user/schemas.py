"""User domain schemas.

Request and response schemas for profile operations.

Profiles are role-shaped: mentors carry a skill list, mentees do not. Both
the read and update shapes are tagged unions discriminated by ``role``, and
``to_profile_read`` is the single place a User row is turned into one.

Security notes:
- password_hash is internal-only, never exposed in responses
- role is accepted on update only to select the shape; it cannot change
"""

from typing import Annotated, Literal

from fastapi import Body
from pydantic import Field, field_validator

from mentor_match.core.schemas import CamelModel
from mentor_match.user.models import User, UserRole

SkillName = Annotated[str, Field(min_length=1, max_length=50)]


class ProfileBase(CamelModel):
    name: str
    bio: str
    image_url: str


class MentorProfile(ProfileBase):
    skills: list[str]


class MenteeProfile(ProfileBase):
    pass


class MentorUserRead(CamelModel):
    """Profile of a mentor as returned to its owner."""

    id: int
    email: str
    role: Literal["mentor"] = "mentor"
    profile: MentorProfile


class MenteeUserRead(CamelModel):
    """Profile of a mentee as returned to its owner."""

    id: int
    email: str
    role: Literal["mentee"] = "mentee"
    profile: MenteeProfile


UserProfileRead = MentorUserRead | MenteeUserRead


def to_profile_read(user: User) -> UserProfileRead:
    """Render a user row in the shape matching its role."""
    match UserRole(user.role):
        case UserRole.mentor:
            return MentorUserRead(
                id=user.id,
                email=user.email,
                profile=MentorProfile(
                    name=user.name,
                    bio=user.bio or "",
                    image_url=user.image_url,
                    skills=user.skills or [],
                ),
            )
        case UserRole.mentee:
            return MenteeUserRead(
                id=user.id,
                email=user.email,
                profile=MenteeProfile(
                    name=user.name,
                    bio=user.bio or "",
                    image_url=user.image_url,
                ),
            )


class ProfileUpdateBase(CamelModel):
    id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=1000)
    image: str | None = None  # base64 data URL

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class MentorProfileUpdate(ProfileUpdateBase):
    """Profile update sent by a mentor."""

    role: Literal["mentor"]
    skills: list[SkillName] | None = Field(default=None, max_length=20)


class MenteeProfileUpdate(ProfileUpdateBase):
    """Profile update sent by a mentee. Any ``skills`` key is ignored."""

    role: Literal["mentee"]


ProfileUpdate = Annotated[
    MentorProfileUpdate | MenteeProfileUpdate, Body(discriminator="role")
]
